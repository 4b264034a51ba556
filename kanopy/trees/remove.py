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

"""Remove branches from a tree."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, NamedTuple

from absl import logging
from kanopy.trees import branch
from kanopy.trees import nodes
from kanopy.trees import paths
from kanopy.trees import walk

Tree = Any
# `drop_edge(node, key)`
DropEdgeFn = Callable[[Any, paths.Key], None]


class Removal(NamedTuple):
  """Result of `remove_branch`.

  Attributes:
    traversed: Path of the node from which the edge was dropped.
    removed: Remaining part of the path, which was removed from the tree.
    value: The leaf value at the end of the removed branch.
  """

  traversed: paths.Path
  removed: paths.Path
  value: Any


def _resolve(
    tree: Tree,
    path: paths.Path,
    is_node: walk.IsNodeFn,
) -> list[Any]:
  """Follows `path`, only descending into the values accepted by `is_node`."""
  if not path:
    raise ValueError("Cannot remove the root of a tree: the path is empty.")

  def can_descend(node, node_path, key) -> bool:
    return is_node(node, node_path) and key in nodes.Node.make(node)

  return branch._follow_nodes(tree, path, can_descend=can_descend)  # pylint: disable=protected-access


def remove_branch(
    tree: Tree,
    path: paths.PathLike,
    *,
    is_node: walk.IsNodeFn = nodes.is_container,
    drop_edge: DropEdgeFn = nodes.drop_edge,
) -> Removal | None:
  """Removes a branch, and prunes the ancestors left empty.

  The ancestors are visited from the parent of the leaf up to the root. The
  edge is dropped from the first ancestor which has other children, so all
  the nodes which only contained the removed branch are removed too. The root
  itself is never removed (it is emptied instead).

  ```python
  tree = {'a': {'aa': 1, 'ab': 2}, 'b': 2}
  assert remove_branch(tree, ('a', 'aa')) == (('a',), ('aa',), 1)
  assert tree == {'a': {'ab': 2}, 'b': 2}

  tree = {'a': {'aa': 1}}
  assert remove_branch(tree, ('a', 'aa')) == ((), ('a', 'aa'), 1)
  assert tree == {}
  ```

  Args:
    tree: The tree to mutate.
    path: The branch to remove.
    is_node: Whether a value is a node which can be followed.
    drop_edge: Removes `key` from `node`.

  Returns:
    The `Removal(traversed, removed, value)`, or `None` if the path does not
    exist (the tree is left untouched).

  Raises:
    ValueError: If the path is empty.
  """
  path = paths.Path.from_any(path)
  values = _resolve(tree, path, is_node)
  if not values:
    return None

  *ancestors, value = values
  depth = len(path) - 1
  while depth > 0 and len(nodes.Node.make(ancestors[depth])) == 1:
    depth -= 1

  logging.debug(
      "Removing branch '%s': pruning '%s' from '%s'.",
      path,
      path[depth:],
      path[:depth],
  )
  drop_edge(ancestors[depth], path[depth])
  return Removal(traversed=path[:depth], removed=path[depth:], value=value)


def remove_last_edge(
    tree: Tree,
    path: paths.PathLike,
    default: Any = None,
    *,
    is_node: walk.IsNodeFn = nodes.is_container,
    drop_edge: DropEdgeFn = nodes.drop_edge,
) -> Any:
  """Removes the last edge of `path` (no pruning of the ancestors).

  Args:
    tree: The tree to mutate.
    path: The path to the value to remove.
    default: Returned if the path does not exist (the tree is left untouched).
    is_node: Whether a value is a node which can be followed.
    drop_edge: Removes `key` from `node`.

  Returns:
    The removed sub-tree (node or leaf), or `default`.

  Raises:
    ValueError: If the path is empty.
  """
  path = paths.Path.from_any(path)
  values = _resolve(tree, path, is_node)
  if not values:
    return default
  drop_edge(values[-2], path.name)
  return values[-1]


def remove_branches(
    tree: Tree,
    paths_: Iterable[paths.PathLike],
    *,
    is_node: walk.IsNodeFn = nodes.is_container,
    drop_edge: DropEdgeFn = nodes.drop_edge,
) -> list[Removal | None]:
  """Calls `remove_branch` for each path, in order."""
  return [
      remove_branch(tree, path, is_node=is_node, drop_edge=drop_edge)
      for path in paths_
  ]


def remove_last_edges(
    tree: Tree,
    paths_: Iterable[paths.PathLike],
    default: Any = None,
    *,
    is_node: walk.IsNodeFn = nodes.is_container,
    drop_edge: DropEdgeFn = nodes.drop_edge,
) -> list[Any]:
  """Calls `remove_last_edge` for each path, in order."""
  return [
      remove_last_edge(
          tree, path, default, is_node=is_node, drop_edge=drop_edge
      )
      for path in paths_
  ]
