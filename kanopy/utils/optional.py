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

"""Optional value, which distinguishes "no value" from `None`."""

from __future__ import annotations

from collections.abc import Callable
import dataclasses
import functools
from typing import Any, Generic, TypeVar

_T = TypeVar('_T')


@dataclasses.dataclass(frozen=True)
class OptionalValue(Generic[_T]):
  """A value which may be absent.

  ```python
  assert OptionalValue.of(None).is_present
  assert OptionalValue.of_nullable(None).is_empty
  assert OptionalValue.empty().or_else(3) == 3
  ```

  Attributes:
    is_present: Whether a value is stored.
  """

  _value: Any = None
  is_present: bool = False

  @classmethod
  def of(cls, value: _T) -> OptionalValue[_T]:
    return cls(value, True)

  @classmethod
  def of_nullable(cls, value: _T, null: Any = None) -> OptionalValue[_T]:
    """Empty if `value is null`, otherwise `of(value)`."""
    if value is null:
      return cls.empty()
    return cls.of(value)

  @classmethod
  def empty(cls) -> OptionalValue[Any]:
    return _empty()

  @property
  def is_empty(self) -> bool:
    return not self.is_present

  def get(self) -> _T:
    if not self.is_present:
      raise ValueError('An empty OptionalValue cannot get a value')
    return self._value

  def or_else(self, other: _T) -> _T:
    return self._value if self.is_present else other

  def or_else_get(self, supplier: Callable[[], _T]) -> _T:
    return self._value if self.is_present else supplier()


@functools.cache
def _empty() -> OptionalValue[Any]:
  return OptionalValue()
