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

"""Test."""

import copy

from kanopy.trees import remove
import pytest


def test_remove_branch_stops_at_sibling():
  tree = {'a': {'aa': 1, 'ab': 2}, 'b': 2}
  removal = remove.remove_branch(tree, ['a', 'aa'])
  assert removal == (('a',), ('aa',), 1)
  assert removal.traversed == ('a',)
  assert removal.removed == ('aa',)
  assert removal.value == 1
  assert tree == {'a': {'ab': 2}, 'b': 2}


def test_remove_branch_cascade():
  tree = {'a': {'aa': 1}}
  assert remove.remove_branch(tree, ['a', 'aa']) == ((), ('a', 'aa'), 1)
  assert tree == {}


def test_remove_branch_partial_cascade():
  tree = {'a': {'b': {'c': {'d': 1}}, 'x': 0}}
  removal = remove.remove_branch(tree, 'a.b.c.d')
  assert removal == (('a',), ('b', 'c', 'd'), 1)
  assert tree == {'a': {'x': 0}}


def test_remove_branch_root_child():
  tree = {'a': 1}
  assert remove.remove_branch(tree, 'a') == ((), ('a',), 1)
  assert tree == {}


def test_remove_branch_list():
  tree = {'a': [{'b': 1}, 2]}
  assert remove.remove_branch(tree, 'a[0].b') == (('a',), (0, 'b'), 1)
  assert tree == {'a': [2]}


def test_remove_branch_node():
  # Removing a node removes the whole sub-tree.
  tree = {'a': {'b': {'c': 1}}, 'd': 1}
  removal = remove.remove_branch(tree, 'a.b')
  assert removal == ((), ('a', 'b'), {'c': 1})
  assert tree == {'d': 1}


@pytest.mark.parametrize('path', ['x', 'a.x', 'a.aa.x', 'b[0]'])
def test_remove_branch_missing(path):
  tree = {'a': {'aa': 1}, 'b': 2}
  before = copy.deepcopy(tree)
  assert remove.remove_branch(tree, path) is None
  assert remove.remove_last_edge(tree, path) is None
  assert tree == before


def test_remove_empty_path():
  with pytest.raises(ValueError, match='Cannot remove the root'):
    remove.remove_branch({'a': 1}, ())
  with pytest.raises(ValueError, match='Cannot remove the root'):
    remove.remove_last_edge({'a': 1}, ())


def test_remove_custom_is_node():
  tree = {'a': {'aa': 1}, 'b': [1]}

  def is_node(value, path):
    del path
    return isinstance(value, dict)

  # Lists are leaves, so cannot be followed.
  assert remove.remove_branch(tree, 'b[0]', is_node=is_node) is None
  assert remove.remove_branch(tree, 'b', is_node=is_node) == ((), ('b',), [1])
  assert tree == {'a': {'aa': 1}}


def test_remove_custom_drop_edge():
  dropped = []

  def drop_edge(node, key):
    dropped.append(key)
    node[key] = None

  tree = {'a': {'aa': 1}, 'b': 2}
  removal = remove.remove_branch(tree, 'a.aa', drop_edge=drop_edge)
  assert removal == ((), ('a', 'aa'), 1)
  assert dropped == ['a']
  assert tree == {'a': None, 'b': 2}


def test_remove_last_edge():
  tree = {'a': {'aa': 1, 'ab': 2}, 'b': 2}
  assert remove.remove_last_edge(tree, ['a']) == {'aa': 1, 'ab': 2}
  assert tree == {'b': 2}

  tree = {'a': {'aa': 1}}
  assert remove.remove_last_edge(tree, 'a.aa') == 1
  # No pruning
  assert tree == {'a': {}}
  assert remove.remove_last_edge(tree, 'a.aa', default='missing') == 'missing'


def test_remove_batch():
  tree = {'a': {'aa': 1, 'ab': 2}, 'b': 2, 'c': {'ca': 3}}
  removals = remove.remove_branches(tree, ['a.aa', 'x', 'c.ca'])
  assert removals == [(('a',), ('aa',), 1), None, ((), ('c', 'ca'), 3)]
  assert tree == {'a': {'ab': 2}, 'b': 2}

  assert remove.remove_last_edges(tree, ['a.ab', 'x'], default=0) == [2, 0]
  assert tree == {'a': {}, 'b': 2}
