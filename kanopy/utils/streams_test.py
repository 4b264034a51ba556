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

import io

from kanopy.utils import char_predicates
from kanopy.utils import streams
import pytest


def test_read_unread():
  reader = streams.CharReader('abc')
  assert reader.read() == 'a'
  assert reader.read() == 'b'
  assert reader.position == 2
  reader.unread(2)
  assert reader.position == 0
  assert reader.peek() == 'a'
  assert reader.position == 0
  assert [reader.read() for _ in range(4)] == ['a', 'b', 'c', '']
  assert reader.position == 3
  assert reader.peek() == ''


def test_unread_errors():
  reader = streams.CharReader('ab')
  reader.read()
  with pytest.raises(ValueError, match='must be positive'):
    reader.unread(-1)
  with pytest.raises(ValueError, match='only 1 were read'):
    reader.unread(2)


@pytest.mark.parametrize(
    'source',
    [
        'ab cd',
        io.StringIO('ab cd'),
        ['ab', ' ', 'cd'],
    ],
)
def test_sources(source):
  reader = streams.CharReader(source)
  assert streams.get_chars(reader, str.isalpha) == 'ab'
  assert streams.skip_chars(reader, str.isspace) == 1
  assert streams.get_chars(reader, char_predicates.any_char()) == 'cd'
  assert reader.read() == ''


def test_get_chars_until():
  reader = streams.CharReader('  key = value;rest')
  assert streams.skip_chars(reader, str.isspace) == 2
  assert streams.get_chars_until(reader, char_predicates.char('=')) == 'key '
  assert reader.read() == '='
  assert streams.skip_chars_until(reader, char_predicates.one_of(';', ',')) == 6
  assert reader.read() == ';'
  assert streams.get_chars_until(reader, char_predicates.no_char()) == 'rest'
