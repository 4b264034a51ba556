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

"""Factories of character predicates, to use with `streams`."""

from __future__ import annotations

from kanopy.utils import streams


def char(c: str) -> streams.CharPredicate:
  """Matches a single character."""
  if len(c) != 1:
    raise ValueError(f'Delimiter must be a unique char, got {c!r}')
  return lambda other: other == c


def one_of(*chars: str) -> streams.CharPredicate:
  """Matches any of the given characters."""
  all_chars = ''.join(chars)
  if not all_chars:
    raise ValueError('Delimiters must not be empty')
  return lambda other: other in all_chars


def any_char() -> streams.CharPredicate:
  return lambda c: True


def no_char() -> streams.CharPredicate:
  return lambda c: False


def delimitation(c: str, delimiters: str) -> str | None:
  """Returns the closing delimiter if `c` opens a delimitation.

  ```python
  assert delimitation('(', '()[]') == ')'
  assert delimitation('a', '()[]') is None
  ```

  Args:
    c: The character to check.
    delimiters: Pairs of opening/closing characters.

  Returns:
    The closing character matching `c`, or `None`.
  """
  if len(delimiters) % 2:
    raise ValueError(
        f'Delimiters must be pairs of open/close chars, got {delimiters!r}'
    )
  for open_, close in zip(delimiters[::2], delimiters[1::2]):
    if open_ == c:
      return close
  return None
