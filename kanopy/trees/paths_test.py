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

"""Property based testing for paths."""

import re

import hypothesis
import hypothesis.strategies as st
from kanopy.trees import paths
import pytest

IDENTIFIER_REGEX = re.compile(r'[_a-zA-Z][_a-zA-Z0-9]*')
identifiers = st.from_regex(IDENTIFIER_REGEX, fullmatch=True)
strings = st.text(
    alphabet=st.characters(whitelist_categories=['Lu', 'Ll', 'Zs', 'Nd']),
    max_size=16,
)
ints = st.integers(min_value=0)
keys = identifiers | strings | ints


@hypothesis.given(identifiers)
def test_python_identifier_regex(x: str):
  assert x.isidentifier()


@hypothesis.settings(deadline=None)
@hypothesis.given(st.lists(keys, max_size=8))
def test_path_str_round_trip(keys_):
  p = paths.Path(*keys_)
  assert paths.Path.from_str(repr(p)) == p


def test_path_format():
  assert str(paths.Path()) == ''
  assert str(paths.Path('a', 0, 'b')) == 'a[0].b'
  assert str(paths.Path(0, 'a b', 'c')) == "[0]['a b'].c"


def test_path_eq():
  assert paths.Path('a', 0) == paths.Path('a', 0)
  assert paths.Path('a', 0) == ('a', 0)
  assert paths.Path('a', 0) != ['a', 0]
  assert paths.Path('a') != paths.Path('a', 0)
  assert hash(paths.Path('a', 0)) == hash(('a', 0))
  assert {paths.Path('a'): 1}[('a',)] == 1


@pytest.mark.parametrize('key', [-1, True, 1.0, None, ('a',)])
def test_path_invalid_key(key):
  with pytest.raises(ValueError, match='Invalid key'):
    paths.Path('a', key)


def test_path_from_any():
  expected = paths.Path('a', 0, 'b')
  assert paths.Path.from_any('a[0].b') == expected
  assert paths.Path.from_any(('a', 0, 'b')) == expected
  assert paths.Path.from_any(['a', 0, 'b']) == expected
  assert paths.Path.from_any(expected) is expected
  assert paths.Path.from_any(()) == paths.Path()

  with pytest.raises(TypeError, match='Unknown key/path'):
    paths.Path.from_any(123)


def test_path_sequence():
  p = paths.Path('a', 0, 'b')
  assert len(p) == 3
  assert list(p) == ['a', 0, 'b']
  assert p[1] == 0
  assert isinstance(p[:2], paths.Path)
  assert p[:2] == ('a', 0)
  assert p.parent == ('a', 0)
  assert p.name == 'b'
  assert p.child(3) == ('a', 0, 'b', 3)
  assert p + 'c.d' == ('a', 0, 'b', 'c', 'd')
  assert p + ('c',) == ('a', 0, 'b', 'c')

  with pytest.raises(ValueError, match='no parent'):
    _ = paths.Path().parent
  with pytest.raises(ValueError, match='no name'):
    _ = paths.Path().name


def test_path_relative_to():
  p = paths.Path.from_str('a[0].b.c')
  assert p.startswith('a[0]')
  assert p.startswith(())
  assert not p.startswith('a[1]')
  assert p.relative_to('a[0]') == ('b', 'c')
  assert p.relative_to(p) == ()

  with pytest.raises(ValueError, match='is not a subpath'):
    p.relative_to('a[1]')
  with pytest.raises(ValueError, match='is not a subpath'):
    paths.Path('a').relative_to('a.b')
