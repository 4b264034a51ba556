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

"""Breadth-first walk of a tree, and the queries built on top of it."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from kanopy.trees import nodes
from kanopy.trees import paths

Tree = Any
# `is_node(value, path) -> bool`
IsNodeFn = Callable[[Any, paths.Path], bool]
# `on_node(node, path)` / `on_leaf(leaf, path)`
VisitFn = Callable[[Any, paths.Path], None]


def _noop(value: Any, path: paths.Path) -> None:
  del value, path


def walk_branches(
    tree: Tree,
    *,
    is_node: IsNodeFn = nodes.is_container,
    on_node: VisitFn = _noop,
    on_leaf: VisitFn = _noop,
) -> None:
  """Walks through all the nodes and leaves of a tree, breadth-first.

  Each layer of the tree is fully visited before the next one:

  * `on_node(node, path)` is called when a node is dequeued (so the root is
    always visited first, with the empty path).
  * `on_leaf(leaf, path)` is called as soon as the leaf is found in its parent.

  The root is classified too: if `is_node(tree, Path())` is `False`, the whole
  tree is a single leaf at the empty path.

  The children of a node are read before visiting them, so the callbacks can
  mutate the tree (e.g. with `Ref(tree, path).set(...)`).

  Args:
    tree: The tree to walk through.
    is_node: Whether a value is a node to recurse into, or a leaf.
    on_node: Called for each node, including the root.
    on_leaf: Called for each leaf.
  """
  root_path = paths.Path()
  if not is_node(tree, root_path):
    on_leaf(tree, root_path)
    return

  layer = [(root_path, tree)]
  while layer:
    next_layer = []
    for path, node in layer:
      on_node(node, path)
      for key, value in list(nodes.Node.make(node).items()):
        child_path = path.child(key)
        if is_node(value, child_path):
          next_layer.append((child_path, value))
        else:
          on_leaf(value, child_path)
    layer = next_layer


def walk_nodes(
    tree: Tree,
    *,
    is_node: IsNodeFn = nodes.is_container,
    on_any_node: VisitFn = _noop,
) -> None:
  """Like `walk_branches`, with the same callback for nodes and leaves."""
  walk_branches(
      tree,
      is_node=is_node,
      on_node=on_any_node,
      on_leaf=on_any_node,
  )


# ======================== Queries ========================


def count_leaves(tree: Tree, *, is_node: IsNodeFn = nodes.is_container) -> int:
  """Returns the number of leaves."""
  count = 0

  def on_leaf(leaf, path):
    del leaf, path
    nonlocal count
    count += 1

  walk_branches(tree, is_node=is_node, on_leaf=on_leaf)
  return count


def count_nodes(tree: Tree, *, is_node: IsNodeFn = nodes.is_container) -> int:
  """Returns the number of nodes, including the root."""
  count = 0

  def on_node(node, path):
    del node, path
    nonlocal count
    count += 1

  walk_branches(tree, is_node=is_node, on_node=on_node)
  return count


def max_depth(tree: Tree, *, is_node: IsNodeFn = nodes.is_container) -> int:
  """Returns the length of the longest branch (`0` if there is no leaf)."""
  depth = 0

  def on_leaf(leaf, path):
    del leaf
    nonlocal depth
    depth = max(depth, len(path))

  walk_branches(tree, is_node=is_node, on_leaf=on_leaf)
  return depth


def leaves(
    tree: Tree,
    *,
    is_node: IsNodeFn = nodes.is_container,
) -> list[tuple[paths.Path, Any]]:
  """Returns the `(path, leaf)` pairs, in walk order."""
  result = []
  walk_branches(
      tree,
      is_node=is_node,
      on_leaf=lambda leaf, path: result.append((path, leaf)),
  )
  return result


def branches(
    tree: Tree,
    *,
    is_node: IsNodeFn = nodes.is_container,
) -> list[paths.Path]:
  """Returns the path of every leaf, in walk order."""
  return [path for path, _ in leaves(tree, is_node=is_node)]


def flatten_with_path(
    tree: Tree,
    *,
    is_node: IsNodeFn = nodes.is_container,
    separator: str | None = None,
) -> dict[str, Any]:
  """Flatten a tree into a dict with 'keys.like[0].this'.

  ```python
  flat = flatten_with_path({'a': [1, {'b': 2}]})
  assert flat == {'a[0]': 1, 'a[1].b': 2}

  flat = flatten_with_path({'a': [1, {'b': 2}]}, separator='/')
  assert flat == {'a/0': 1, 'a/1/b': 2}
  ```

  Args:
    tree: The tree to flatten.
    is_node: Whether a value is a node to recurse into, or a leaf.
    separator: If given, the keys are joined with this separator instead of
      using the path syntax.

  Returns:
    The leaves, keyed by their path.
  """

  def _format_path(path: paths.Path) -> str:
    if separator is None:
      return str(path)
    else:
      return separator.join(str(p) for p in path.parts)

  return {
      _format_path(path): leaf for path, leaf in leaves(tree, is_node=is_node)
  }
