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

"""List and sequence utils.

Lists are compared by values only. Sequences are compared by `(key, value)`
entries (e.g. `dict.items()`), so the keys must match too.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
import itertools
import operator
from typing import Any, TypeVar

_T = TypeVar('_T')
_EntryT = TypeVar('_EntryT')

_EqualsFn = Callable[[Any, Any], bool]


def ensure_list(value: Any) -> list[Any]:
  """Wraps a single value in a list, copies lists and tuples."""
  if isinstance(value, (list, tuple)):
    return list(value)
  return [value]


def limit(
    iterable: Iterable[_T],
    offset: int = 0,
    length: int | None = None,
) -> Iterator[_T]:
  """Returns at most `length` items of `iterable`, after skipping `offset`.

  Args:
    iterable: The items.
    offset: Number of items to skip.
    length: Maximum number of items to return (`None` for all).

  Returns:
    An iterator over the selected items.

  Raises:
    ValueError: If `offset` or `length` is negative. The check is done on call,
      not when the iterator is consumed.
  """
  if offset < 0:
    raise ValueError(f'The offset must be positive, got {offset}')
  if length is not None and length < 0:
    raise ValueError(f'The length must be positive, got {length}')
  stop = None if length is None else offset + length
  return itertools.islice(iterable, offset, stop)


# ======================== Comparisons ========================


def _includes(
    a: Iterable[Any],
    b: Iterable[Any],
    *,
    equals: _EqualsFn,
    end: Callable[[bool, bool], bool],
) -> bool:
  """Compares `a` and `b` pairwise, then checks which one was exhausted.

  `end(a_remaining, b_remaining)` decides the result once one of the two
  iterables is exhausted.
  """
  a, b = iter(a), iter(b)
  sentinel = object()
  while True:
    x = next(a, sentinel)
    y = next(b, sentinel)
    if x is sentinel or y is sentinel:
      return end(x is not sentinel, y is not sentinel)
    if not equals(x, y):
      return False


def _same_size(a_remaining: bool, b_remaining: bool) -> bool:
  return not a_remaining and not b_remaining


def _prefix(strict: bool) -> Callable[[bool, bool], bool]:
  if strict:
    return lambda a_remaining, b_remaining: not a_remaining and b_remaining
  return lambda a_remaining, b_remaining: not a_remaining


def list_equals(
    a: Iterable[Any],
    b: Iterable[Any],
    *,
    equals: _EqualsFn = operator.eq,
) -> bool:
  """Returns `True` if both iterables have the same values, in order."""
  return _includes(a, b, equals=equals, end=_same_size)


def list_prefix_equals(
    a: Iterable[Any],
    b: Iterable[Any],
    *,
    equals: _EqualsFn = operator.eq,
    strict: bool = False,
) -> bool:
  """Returns `True` if `a` is a prefix of `b` (a strict one if `strict`)."""
  return _includes(a, b, equals=equals, end=_prefix(strict))


def _entries(sequence: Mapping[Any, Any] | Iterable[Any]) -> Iterable[Any]:
  if isinstance(sequence, Mapping):
    return sequence.items()
  return enumerate(sequence)


def _entry_equals(key_equals: _EqualsFn, value_equals: _EqualsFn) -> _EqualsFn:
  def equals(x, y) -> bool:
    return key_equals(x[0], y[0]) and value_equals(x[1], y[1])

  return equals


def sequence_equals(
    a: Mapping[Any, Any] | Iterable[Any],
    b: Mapping[Any, Any] | Iterable[Any],
    *,
    key_equals: _EqualsFn = operator.eq,
    value_equals: _EqualsFn = operator.eq,
) -> bool:
  """Like `list_equals`, but compares the `(key, value)` entries.

  Mappings yield their items, other iterables are enumerated.

  Args:
    a: First sequence.
    b: Second sequence.
    key_equals: Equality of the keys.
    value_equals: Equality of the values.

  Returns:
    `True` if both sequences have the same entries, in the same order.
  """
  return _includes(
      _entries(a),
      _entries(b),
      equals=_entry_equals(key_equals, value_equals),
      end=_same_size,
  )


def sequence_prefix_equals(
    a: Mapping[Any, Any] | Iterable[Any],
    b: Mapping[Any, Any] | Iterable[Any],
    *,
    key_equals: _EqualsFn = operator.eq,
    value_equals: _EqualsFn = operator.eq,
    strict: bool = False,
) -> bool:
  """Like `list_prefix_equals`, but compares the `(key, value)` entries."""
  return _includes(
      _entries(a),
      _entries(b),
      equals=_entry_equals(key_equals, value_equals),
      end=_prefix(strict),
  )


# ======================== Cartesian product ========================


def cartesian_product_entries(
    *iterables: Mapping[Any, Any] | Iterable[Any],
    make_entry: Callable[[Any, Any], _EntryT],
) -> Iterator[tuple[_EntryT, ...]]:
  """Cartesian product over the `(key, value)` entries of the iterables.

  The last iterable varies the fastest. Each yielded tuple contains
  `make_entry(key, value)` for one entry of each iterable.

  ```python
  product = cartesian_product_entries(
      {'a': 1, 'b': 2}, 'xy', make_entry=lambda k, v: (k, v)
  )
  assert next(product) == (('a', 1), (0, 'x'))
  ```

  Args:
    *iterables: Mappings (items are used) or iterables (enumerated). Each one
      is consumed once.
    make_entry: Builds the element of the result from one entry.

  Yields:
    One tuple per combination. Nothing if there is no iterable, or if one of
    them is empty.
  """
  columns = [
      [make_entry(k, v) for k, v in _entries(iterable)]
      for iterable in iterables
  ]
  if not columns or not all(columns):
    return

  # Odometer: increment the last index, carry over to the previous ones.
  indices = [0] * len(columns)
  while True:
    yield tuple(column[i] for column, i in zip(columns, indices))
    position = len(columns) - 1
    while position >= 0:
      indices[position] += 1
      if indices[position] < len(columns[position]):
        break
      indices[position] = 0
      position -= 1
    if position < 0:
      return


def cartesian_product(*iterables: Iterable[_T]) -> Iterator[tuple[_T, ...]]:
  """Cartesian product of the values of the iterables."""
  return cartesian_product_entries(
      *iterables, make_entry=lambda _, value: value
  )
