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

"""Pull-based character streams, for small hand-written lexers.

```python
reader = streams.CharReader('  key = value')
streams.skip_chars(reader, str.isspace)
assert streams.get_chars_until(reader, char_predicates.char('=')) == 'key '
```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
import io
import itertools

CharPredicate = Callable[[str], bool]


class CharReader:
  """Reads characters one by one, with support to push them back.

  Attributes:
    position: Number of characters consumed so far.
  """

  def __init__(self, source: str | io.TextIOBase | Iterable[str]):
    """Constructor.

    Args:
      source: A `str`, a text file object, or any iterable of strings (which
        are split into characters).
    """
    if isinstance(source, io.TextIOBase):
      chunks = iter(lambda: source.read(1), '')
    else:
      chunks = iter(source)
    self._chars: Iterator[str] = itertools.chain.from_iterable(chunks)
    self._history: list[str] = []
    self._pushed_back: list[str] = []
    self.position = 0

  def read(self) -> str:
    """Returns the next character, or `''` at the end of the input."""
    if self._pushed_back:
      c = self._pushed_back.pop()
    else:
      c = next(self._chars, '')
      if not c:
        return ''
    self._history.append(c)
    self.position += 1
    return c

  def unread(self, nb: int = 1) -> None:
    """Pushes back the `nb` last read characters.

    Args:
      nb: Number of characters to push back.

    Raises:
      ValueError: If `nb` is negative or more than the number of characters
        read.
    """
    if nb < 0:
      raise ValueError(f'`nb` must be positive, got {nb}')
    if nb > len(self._history):
      raise ValueError(
          f'Cannot push back {nb} chars: only {len(self._history)} were read.'
      )
    for _ in range(nb):
      self._pushed_back.append(self._history.pop())
      self.position -= 1

  def peek(self) -> str:
    """Returns the next character without consuming it."""
    c = self.read()
    if c:
      self.unread()
    return c


def get_chars(reader: CharReader, predicate: CharPredicate) -> str:
  """Reads the characters while `predicate` is `True`."""
  chars = []
  while (c := reader.read()) and predicate(c):
    chars.append(c)
  if c:
    reader.unread()
  return ''.join(chars)


def skip_chars(reader: CharReader, predicate: CharPredicate) -> int:
  """Skips the characters while `predicate` is `True`, returns their number."""
  return len(get_chars(reader, predicate))


def get_chars_until(reader: CharReader, predicate: CharPredicate) -> str:
  """Reads the characters until `predicate` is `True` (or the end).

  The matching character is not consumed.

  Args:
    reader: The stream.
    predicate: Detects the end delimiter.

  Returns:
    The characters before the delimiter.
  """
  return get_chars(reader, lambda c: not predicate(c))


def skip_chars_until(reader: CharReader, predicate: CharPredicate) -> int:
  """Skips the characters until `predicate` is `True`, returns their number."""
  return len(get_chars_until(reader, predicate))
