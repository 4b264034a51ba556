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

"""Follow and set branches of a tree."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from kanopy.trees import nodes
from kanopy.trees import paths
from kanopy.trees import refs

Tree = Any
# `has_key(node, key) -> bool`
HasKeyFn = Callable[[Any, paths.Key], bool]
# `add_edge(ref, key)`
AddEdgeFn = Callable[[refs.Ref, paths.Key], None]
# `set_leaf(ref, value)`
SetLeafFn = Callable[[refs.Ref, Any], None]
# `can_descend(node, path_to_node, key) -> bool`
_CanDescendFn = Callable[[Any, paths.Path, paths.Key], bool]


def follow(
    tree: Tree,
    path: paths.PathLike,
    default: Any = None,
    *,
    has_key: HasKeyFn = nodes.has_key,
) -> Any:
  """Returns the value at the end of `path`, or `default` if it doesn't exist.

  The returned value is the object stored in the tree (not a copy), so
  containers can be mutated in place. To re-assign a leaf, use
  `Ref(tree, path).set(value)` instead.

  Args:
    tree: The tree to follow.
    path: The path to follow. The empty path returns the tree itself.
    default: Returned as soon as a key cannot be followed.
    has_key: Whether `key` can be followed from `node`.

  Returns:
    The value reached by following `path`, or `default`.
  """
  value = tree
  for key in paths.Path.from_any(path):
    if not has_key(value, key):
      return default
    value = nodes.Node.make(value)[key]
  return value


def follow_nodes(
    tree: Tree,
    path: paths.PathLike,
    *,
    has_key: HasKeyFn = nodes.has_key,
) -> list[Any]:
  """Returns all the values along `path`: the root first, the leaf last.

  Args:
    tree: The tree to follow.
    path: The path to follow.
    has_key: Whether `key` can be followed from `node`.

  Returns:
    The `len(path) + 1` values along the branch, or an empty list if the path
    cannot be fully followed.
  """
  return _follow_nodes(
      tree,
      paths.Path.from_any(path),
      can_descend=lambda node, _, key: has_key(node, key),
  )


def _follow_nodes(
    tree: Tree,
    path: paths.Path,
    *,
    can_descend: _CanDescendFn,
) -> list[Any]:
  """Implementation of `follow_nodes` (also used to remove branches)."""
  values = [tree]
  for i, key in enumerate(path):
    value = values[-1]
    if not can_descend(value, path[:i], key):
      return []
    values.append(nodes.Node.make(value)[key])
  return values


def set_branch(
    tree: Tree,
    path: paths.PathLike,
    value: Any,
    *,
    has_key: HasKeyFn = nodes.has_key,
    add_edge: AddEdgeFn = nodes.add_edge,
    set_leaf: SetLeafFn = nodes.set_leaf,
) -> None:
  """Sets `value` at the end of `path`, creating the missing nodes.

  The existing part of the branch is followed with `has_key`. From the first
  missing key, each remaining key of the path is created with `add_edge`.
  Finally, `set_leaf` assigns the value.

  ```python
  tree = {'a': {'b': 1}}
  set_branch(tree, 'a.c.d', 2)
  assert tree == {'a': {'b': 1, 'c': {'d': 2}}}
  ```

  Args:
    tree: The tree to mutate.
    path: The branch to set. If empty, the value is set on the root.
    value: The value to assign.
    has_key: Whether `key` can be followed from `node`.
    add_edge: Creates a new empty node at `key` under the node at `ref`.
    set_leaf: Assigns the value at `ref`.

  Raises:
    ValueError: If the root is a leaf which would need new edges.
  """
  path = paths.Path.from_any(path)

  node = tree
  existing = len(path)
  for i, key in enumerate(path):
    if not has_key(node, key):
      existing = i
      break
    node = nodes.Node.make(node)[key]

  if path and not existing and not nodes.is_container(tree):
    raise ValueError(
        f"Cannot set branch '{path}': the root {type(tree).__name__} is not a"
        " container."
    )

  ref = refs.Ref(tree, path[:existing])
  # End the construction of the branch
  for key in path[existing:]:
    add_edge(ref, key)
    ref = ref.child(key)
  set_leaf(ref, value)


def path_to_branch(path: paths.PathLike, leaf: Any) -> Any:
  """Returns a new tree containing a single branch.

  ```python
  assert path_to_branch(('a', 'b'), 1) == {'a': {'b': 1}}
  ```

  Args:
    path: The keys of the branch.
    leaf: The value at the end of the branch.

  Returns:
    The nested dicts, or `leaf` itself if the path is empty.
  """
  path = paths.Path.from_any(path)
  if not path:
    return leaf
  tree = {}
  set_branch(tree, path, leaf)
  return tree
