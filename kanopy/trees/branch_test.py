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

import hypothesis
import hypothesis.strategies as st
from kanopy.trees import branch
from kanopy.trees import nodes
from kanopy.trees import refs
import ml_collections
import pytest

keys = st.text(max_size=3) | st.integers(min_value=0, max_value=3)
leaves = st.none() | st.integers() | st.text(max_size=4)
subtrees = st.recursive(
    leaves,
    lambda children: (
        st.lists(children, max_size=3)
        | st.dictionaries(keys, children, max_size=3)
    ),
    max_leaves=10,
)
trees = st.dictionaries(keys, subtrees, max_size=3)


@hypothesis.settings(deadline=None)
@hypothesis.given(trees, st.lists(keys, min_size=1, max_size=4), leaves)
def test_set_follow_round_trip(tree, path, value):
  branch.set_branch(tree, path, value)
  assert branch.follow(tree, path) == value


def test_follow():
  tree = {'a': [{'b': 1}], 'c': None}
  assert branch.follow(tree, 'a[0].b') == 1
  assert branch.follow(tree, ()) is tree
  assert branch.follow(tree, ['a', 0]) is tree['a'][0]
  assert branch.follow(tree, 'a[1]') is None
  assert branch.follow(tree, 'a[1]', default='default') == 'default'
  # `c` exists but is a leaf
  assert branch.follow(tree, 'c.d', default=0) == 0
  assert branch.follow(tree, 'c', default=0) is None


def test_follow_custom_has_key():
  tree = {'a': {'_hidden': 1}}

  def has_key(node, key):
    return nodes.has_key(node, key) and not str(key).startswith('_')

  assert branch.follow(tree, 'a._hidden', has_key=has_key) is None


def test_follow_nodes():
  tree = {'a': {'b': [1]}}
  values = branch.follow_nodes(tree, 'a.b[0]')
  assert len(values) == 4
  assert values[0] is tree
  assert values[1] is tree['a']
  assert values[2] is tree['a']['b']
  assert values[3] == 1
  assert branch.follow_nodes(tree, ()) == [tree]
  assert branch.follow_nodes(tree, 'a.x') == []


def test_set_branch():
  tree = {'a': {'b': 1}}
  branch.set_branch(tree, 'a.c.d', 2)
  assert tree == {'a': {'b': 1, 'c': {'d': 2}}}

  branch.set_branch(tree, 'a.b', 3)
  assert tree == {'a': {'b': 3, 'c': {'d': 2}}}

  # Leaf replaced by a container
  branch.set_branch(tree, 'a.b.x', 4)
  assert tree == {'a': {'b': {'x': 4}, 'c': {'d': 2}}}


def test_set_branch_list():
  tree = {'a': []}
  branch.set_branch(tree, 'a[0].b', 1)
  branch.set_branch(tree, 'a[1]', 2)
  assert tree == {'a': [{'b': 1}, 2]}

  # Index past the end: the list is converted to a dict, items are kept.
  branch.set_branch(tree, 'a[5]', 3)
  assert tree == {'a': {0: {'b': 1}, 1: 2, 5: 3}}


def test_set_branch_str_key_in_list():
  tree = {'a': [1]}
  branch.set_branch(tree, ('a', 'x'), 2)
  assert tree == {'a': {0: 1, 'x': 2}}
  assert branch.follow(tree, ('a', 'x')) == 2

  # The root is updated in place, so cannot change kind.
  with pytest.raises(ValueError, match='Cannot replace the root'):
    branch.set_branch([1], ('x',), 2)


def test_set_branch_root():
  tree = {'a': 1}
  branch.set_branch(tree, (), {'b': 2})
  assert tree == {'b': 2}

  with pytest.raises(ValueError, match='is not a container'):
    branch.set_branch(1, 'a', 2)


def test_set_branch_custom_policies():
  calls = []

  def add_edge(ref, key):
    calls.append(('add_edge', ref.path, key))
    nodes.Node.make(ref.get())[key] = {'created': True}

  def set_leaf(ref: refs.Ref, value):
    calls.append(('set_leaf', ref.path, value))
    ref.set([value])

  tree = {'a': {}}
  branch.set_branch(tree, 'a.b.c', 1, add_edge=add_edge, set_leaf=set_leaf)
  assert tree == {'a': {'b': {'created': True, 'c': [1]}}}
  assert calls == [
      ('add_edge', ('a',), 'b'),
      ('add_edge', ('a', 'b'), 'c'),
      ('set_leaf', ('a', 'b', 'c'), 1),
  ]


def test_path_to_branch():
  assert branch.path_to_branch(('a', 'b'), 1) == {'a': {'b': 1}}
  assert branch.path_to_branch('a[0]', 1) == {'a': {0: 1}}
  assert branch.path_to_branch((), 1) == 1


def test_config_dict():
  cfg = ml_collections.ConfigDict({'model': {'num_layers': 2}})
  branch.set_branch(cfg, 'model.act.name', 'relu')
  branch.set_branch(cfg, 'model.num_layers', 4)
  assert branch.follow(cfg, 'model.act.name') == 'relu'
  assert cfg.model.num_layers == 4
  assert cfg.to_dict() == {
      'model': {'num_layers': 4, 'act': {'name': 'relu'}},
  }
