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

"""Recursively update a tree with the content of another one."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from absl import logging
from kanopy.trees import branch
from kanopy.trees import nodes
from kanopy.trees import paths
from kanopy.trees import refs
from kanopy.trees import walk

Tree = Any
# `on_missing_key(tree, key, value)`
OnMissingKeyFn = Callable[[Any, paths.Key, Any], None]
# `map_key(key) -> key`
MapKeyFn = Callable[[paths.Key], paths.Key]


class MissingKeyError(KeyError):
  """A key of the updates does not exist in the updated tree."""

  def __str__(self) -> str:
    # Display the message as-is (`KeyError` displays the `repr`).
    return str(self.args[0]) if self.args else ""


def raise_missing_key(tree: Tree, key: paths.Key, value: Any) -> None:
  """Default `on_missing_key`: raises a `MissingKeyError`."""
  del value
  wrapper = nodes.Node.make(tree)
  available = [] if isinstance(wrapper, nodes.Leaf) else wrapper.keys()
  raise MissingKeyError(
      f"The key {key!r} does not exist in the tree. Available keys:"
      f" {available}"
  )


def create_missing_key(tree: Tree, key: paths.Key, value: Any) -> None:
  """`on_missing_key` which adds the key to the tree.

  Containers are created empty (they are filled by the recursion), leaves are
  assigned directly.

  Args:
    tree: The (sub-)tree missing the key.
    key: The missing key.
    value: The update value for that key.
  """
  if nodes.is_container(value):
    nodes.Node.make(tree)[key] = nodes.Node.make(value).empty()
  else:
    nodes.Node.make(tree)[key] = value


def ignore_missing_key(tree: Tree, key: paths.Key, value: Any) -> None:
  """`on_missing_key` which skips the key."""
  del tree, key, value


def _identity(key: paths.Key) -> paths.Key:
  return key


def update_recursive(
    updates: Tree,
    tree: Tree,
    *,
    on_missing_key: OnMissingKeyFn = raise_missing_key,
    map_key: MapKeyFn = _identity,
    set_leaf: branch.SetLeafFn = nodes.set_leaf,
    is_node: walk.IsNodeFn = nodes.is_container,
) -> None:
  """Updates `tree` in place with the content of `updates`.

  Only the keys present in `updates` are touched: nodes are recursed into,
  leaves are assigned with `set_leaf`. If an update node targets a leaf of
  the tree, the leaf is first replaced by an empty container.

  Contrary to `set_branch`, the updated keys must exist in the tree.
  `on_missing_key(tree, key, value)` is called for the keys which don't
  (see `raise_missing_key`, `create_missing_key`, `ignore_missing_key`). If the
  key still doesn't exist after the call, it is skipped.

  With the default `raise_missing_key`, all the keys are checked before the
  tree is modified, so a `MissingKeyError` leaves the tree unchanged. Custom
  policies are called as the keys are reached, after the previous keys were
  updated.

  ```python
  tree = {'a': {'aa': 1, 'ab': 2}, 'b': 2}
  update_recursive({'a': {'aa': 10}}, tree)
  assert tree == {'a': {'aa': 10, 'ab': 2}, 'b': 2}
  ```

  Args:
    updates: The values to write into the tree.
    tree: The tree to update.
    on_missing_key: Called when a key of `updates` is missing in `tree`.
    map_key: Transforms the keys of `updates` into keys of `tree`.
    set_leaf: Assigns an updated leaf at `ref`.
    is_node: Whether an update value is a node to recurse into. Called with
      the path inside `updates`.

  Raises:
    MissingKeyError: With the default `on_missing_key`.
  """
  if not is_node(updates, paths.Path()):
    set_leaf(refs.Ref(tree), updates)
    return
  if on_missing_key is raise_missing_key:
    _check_keys(
        updates,
        tree,
        path=paths.Path(),
        map_key=map_key,
        is_node=is_node,
    )
  _update(
      updates,
      tree,
      path=paths.Path(),
      on_missing_key=on_missing_key,
      map_key=map_key,
      set_leaf=set_leaf,
      is_node=is_node,
  )


def _check_keys(
    updates: Tree,
    tree: Tree,
    *,
    path: paths.Path,
    map_key: MapKeyFn,
    is_node: walk.IsNodeFn,
) -> None:
  """Raises the `MissingKeyError` `_update` would raise, without mutating."""
  wrapper = nodes.Node.make(tree)
  for key, value in nodes.Node.make(updates).items():
    update_path = path.child(key)
    key = map_key(key)
    if key not in wrapper:
      _raise_missing_key_at(update_path, tree, key, value)
    if is_node(value, update_path):
      child = wrapper[key]
      if not nodes.is_container(child):
        # `_update` replaces it by an empty container.
        child = nodes.Node.make(value).empty()
      _check_keys(
          value,
          child,
          path=update_path,
          map_key=map_key,
          is_node=is_node,
      )


def _raise_missing_key_at(
    update_path: paths.Path,
    tree: Tree,
    key: paths.Key,
    value: Any,
) -> None:
  try:
    raise_missing_key(tree, key, value)
  except MissingKeyError as e:
    raise MissingKeyError(f"At '{update_path}': {e}") from None


def _update(
    updates: Tree,
    tree: Tree,
    *,
    path: paths.Path,
    on_missing_key: OnMissingKeyFn,
    map_key: MapKeyFn,
    set_leaf: branch.SetLeafFn,
    is_node: walk.IsNodeFn,
) -> None:
  """Updates one level of the tree."""
  for key, value in list(nodes.Node.make(updates).items()):
    update_path = path.child(key)
    key = map_key(key)
    wrapper = nodes.Node.make(tree)
    if key not in wrapper:
      try:
        on_missing_key(tree, key, value)
      except MissingKeyError as e:
        raise MissingKeyError(f"At '{update_path}': {e}") from None
      if key not in wrapper:
        logging.debug("Skipping missing key %r at '%s'.", key, path)
        continue

    if is_node(value, update_path):
      if not nodes.is_container(wrapper[key]):
        wrapper[key] = nodes.Node.make(value).empty()
      # Re-read the child: custom mappings may convert the assigned value.
      _update(
          value,
          wrapper[key],
          path=update_path,
          on_missing_key=on_missing_key,
          map_key=map_key,
          set_leaf=set_leaf,
          is_node=is_node,
      )
    else:
      set_leaf(refs.Ref(tree, (key,)), value)


def merge(
    tree: Tree,
    updates: Tree,
    *,
    is_node: walk.IsNodeFn = nodes.is_container,
) -> None:
  """Recursively merges `updates` into `tree`, creating the missing keys.

  ```python
  tree = {'a': {'aa': 1}}
  merge(tree, {'a': {'ab': 2, 'ac': 3}, 'b': 2})
  assert tree == {'a': {'aa': 1, 'ab': 2, 'ac': 3}, 'b': 2}
  ```

  Args:
    tree: The tree to update.
    updates: The values to write into the tree.
    is_node: Whether an update value is a node to recurse into.
  """
  update_recursive(
      updates,
      tree,
      on_missing_key=create_missing_key,
      is_node=is_node,
  )
