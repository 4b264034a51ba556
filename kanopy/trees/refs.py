# Copyright 2026 The kanopy Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Accessor to a location of a tree."""

from __future__ import annotations

from typing import Any

from kanopy.trees import nodes
from kanopy.trees import paths

_MISSING = object()
_NOT_FOUND = object()


class Ref:
  """Reference to the value at `path` inside `tree`.

  The path is resolved again each time the `Ref` is used, so a `Ref` stays
  valid across mutations of the tree (it is not an alias to the value).

  ```python
  tree = {'a': {'b': 1}}
  ref = Ref(tree, 'a.b')
  ref.set(2)
  assert tree == {'a': {'b': 2}}
  ```

  Setting the root (empty path) replaces the content of the root container
  in place, as the caller owns the root object itself.
  """

  __slots__ = ("tree", "path")

  def __init__(self, tree: Any, path: paths.PathLike = ()):
    self.tree = tree
    self.path: paths.Path = paths.Path.from_any(path)

  def __repr__(self) -> str:
    return f"{type(self).__name__}({str(self.path)!r})"

  @property
  def parent(self) -> Ref:
    return Ref(self.tree, self.path.parent)

  def child(self, key: paths.Key) -> Ref:
    return Ref(self.tree, self.path.child(key))

  def get(self, default: Any = _MISSING) -> Any:
    """Returns the value, or `default` if the path does not exist.

    Args:
      default: Value returned if the path cannot be resolved. If not given, a
        `KeyError` is raised instead.

    Returns:
      The value at the path.
    """
    value = self.tree
    for i, key in enumerate(self.path):
      wrapper = nodes.Node.make(value)
      if key not in wrapper:
        if default is _MISSING:
          raise KeyError(
              f"Could not find path '{self.path}' in the"
              f" {type(self.tree).__name__} object. The"
              f" {type(value).__name__} at '{self.path[:i]}' has no key:"
              f" {key!r}."
          )
        return default
      value = wrapper[key]
    return value

  def exists(self) -> bool:
    return self.get(default=_NOT_FOUND) is not _NOT_FOUND

  def set(self, value: Any) -> None:
    """Assigns the value. The parent container must exist."""
    if not self.path:
      _replace_root(self.tree, value)
      return
    parent = self.parent.get()
    nodes.Node.make(parent)[self.path.name] = value

  def delete(self) -> Any:
    """Removes the value from its parent container and returns it."""
    if not self.path:
      raise ValueError("Cannot delete the root of a tree.")
    parent = nodes.Node.make(self.parent.get())
    value = parent[self.path.name]
    del parent[self.path.name]
    return value


def _replace_root(tree: Any, value: Any) -> None:
  """Replaces the content of the root container, in place."""
  if value is tree:
    return
  root = nodes.Node.make(tree)
  new = nodes.Node.make(value)
  if not nodes.is_container(tree) or type(root) is not type(new):
    raise ValueError(
        f"Cannot replace the root {type(tree).__name__} by a"
        f" {type(value).__name__}: only a container of the same kind can be"
        " assigned to the root, in place."
    )
  items = list(new.items())
  if isinstance(tree, list):
    tree[:] = [v for _, v in items]
    return
  for key in root.keys():
    del root[key]
  for key, v in items:
    root[key] = v
