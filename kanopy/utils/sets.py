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

"""Sets of items, stored as the keys of a map.

Membership is written with booleans, like a mapping `item -> bool`:

```python
s = sets.BooleanSet()
s['a'] = True
assert 'a' in s and s['a']
s['a'] = False  # Same as `del s['a']`
assert not s['a']
```
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator, MutableSet
import enum
import functools
from typing import Any, Self


class UnmodifiableSetError(TypeError):
  """A write was attempted on an unmodifiable set."""


class BooleanSet(MutableSet):
  """Set backed by a dict (iteration follows the insertion order)."""

  def __init__(self, items: Iterable[Hashable] = ()):
    self._storage: dict[Hashable, bool] = {}
    self.set_more(*items)

  def __repr__(self) -> str:
    return f'{type(self).__name__}({list(self)!r})'

  @classmethod
  def _from_iterable(cls, iterable: Iterable[Hashable]) -> BooleanSet:
    # Set operators (`|`, `&`, `-`) always build a plain `BooleanSet`.
    return BooleanSet(iterable)

  def __getitem__(self, item: Hashable) -> bool:
    return item in self

  def __setitem__(self, item: Hashable, value: bool) -> None:
    if not isinstance(value, bool):
      raise TypeError(
          f'Set membership must be a bool, got {type(value).__name__}'
      )
    if value:
      self._storage[item] = True
    else:
      self._storage.pop(item, None)

  def __delitem__(self, item: Hashable) -> None:
    self[item] = False

  def __contains__(self, item: Any) -> bool:
    return item in self._storage

  def __iter__(self) -> Iterator[Hashable]:
    return iter(list(self._storage))

  def __len__(self) -> int:
    return len(self._storage)

  def add(self, value: Hashable) -> None:
    self[value] = True

  def discard(self, value: Hashable) -> None:
    self[value] = False

  def set_more(self, *items: Hashable) -> Self:
    for item in items:
      self[item] = True
    return self

  def unset_more(self, *items: Hashable) -> Self:
    for item in items:
      self[item] = False
    return self

  def set_from_lists(self, *lists: Iterable[Hashable]) -> Self:
    for items in lists:
      self.set_more(*items)
    return self

  def unset_from_lists(self, *lists: Iterable[Hashable]) -> Self:
    for items in lists:
      self.unset_more(*items)
    return self


class _KeyedSet(BooleanSet):
  """Stores `to_key(item)`, iterates over `from_key(key)`."""

  def __init__(
      self,
      to_key: Callable[[Any], Hashable],
      from_key: Callable[[Hashable], Any],
  ):
    self._to_key = to_key
    self._from_key = from_key
    super().__init__()

  def __setitem__(self, item: Any, value: bool) -> None:
    super().__setitem__(self._to_key(item), value)

  def __contains__(self, item: Any) -> bool:
    return super().__contains__(self._to_key(item))

  def __iter__(self) -> Iterator[Any]:
    return (self._from_key(k) for k in super().__iter__())


def keyed_set(
    to_key: Callable[[Any], Hashable],
    from_key: Callable[[Hashable], Any],
) -> BooleanSet:
  """Set storing `to_key(item)` for each item.

  Useful for unhashable items, or to store a canonical representation.

  Args:
    to_key: Converts an item into the stored key.
    from_key: Converts back a stored key into an item (used by iteration).

  Returns:
    The empty set.
  """
  return _KeyedSet(to_key, from_key)


def enum_set(enum_cls: type[enum.Enum]) -> BooleanSet:
  """Set of members of `enum_cls`, stored by value."""
  if not (isinstance(enum_cls, type) and issubclass(enum_cls, enum.Enum)):
    raise TypeError(f'{enum_cls!r} must be an Enum class')

  def to_key(member: enum.Enum) -> Hashable:
    if not isinstance(member, enum_cls):
      raise TypeError(
          f'Enum must be of type {enum_cls.__name__}, got'
          f' {type(member).__name__}'
      )
    return member.value

  return keyed_set(to_key, enum_cls)


class _UnmodifiableSet(BooleanSet):
  """Read-only view of another set."""

  def __init__(self, wrapped: BooleanSet):
    self._wrapped = wrapped

  def __setitem__(self, item: Any, value: bool) -> None:
    raise UnmodifiableSetError(
        f'Cannot modify {type(self).__name__}: tried to set {item!r}'
    )

  def __contains__(self, item: Any) -> bool:
    return item in self._wrapped

  def __iter__(self) -> Iterator[Any]:
    return iter(self._wrapped)

  def __len__(self) -> int:
    return len(self._wrapped)

  def __repr__(self) -> str:
    return f'unmodifiable({self._wrapped!r})'


def unmodifiable(s: BooleanSet) -> BooleanSet:
  """Read-only view of `s`. Writes raise `UnmodifiableSetError`."""
  return _UnmodifiableSet(s)


@functools.cache
def null_set() -> BooleanSet:
  """The empty unmodifiable set."""
  return unmodifiable(BooleanSet())
