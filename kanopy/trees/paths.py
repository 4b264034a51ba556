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

"""Paths locating a value inside a tree, such as "cfg.layers[0].act_fun"."""

from __future__ import annotations

import collections
from collections.abc import Sequence
from typing import Any, Self, Union, overload

from kanopy.trees import path_parser
from kanopy.utils import lists

Key = path_parser.Part

# Anything accepted where a path is expected
PathLike = Union[str, Sequence[Key], "Path"]


def _is_valid_key(key: Any) -> bool:
  if isinstance(key, bool):
    return False
  elif isinstance(key, int):
    return key >= 0
  else:
    return isinstance(key, str)


class Path(collections.abc.Sequence):
  """Immutable sequence of keys (`str` or non-negative `int`).

  The empty path is the root of the tree.

  ```python
  path = Path('layers', 0, 'act_fun')
  assert path == Path.from_str('layers[0].act_fun')
  assert path == ('layers', 0, 'act_fun')
  ```
  """

  __slots__ = ("parts",)

  def __init__(self, *parts: Key):
    invalid = [p for p in parts if not _is_valid_key(p)]
    if invalid:
      raise ValueError(
          f"Invalid key(s) {invalid} in path {parts}: keys must be `str` or"
          " non-negative `int`."
      )
    self.parts: tuple[Key, ...] = parts

  @overload
  def __getitem__(self, key: int) -> Key:
    ...

  @overload
  def __getitem__(self, key: slice) -> Self:
    ...

  def __getitem__(self, key: int | slice) -> Key | Self:
    if isinstance(key, int):
      return self.parts[key]
    elif isinstance(key, slice):
      return type(self)(*self.parts[key])
    else:
      raise KeyError(f"Invalid key={key!r}: must be int or slice.")

  def __len__(self) -> int:
    return len(self.parts)

  def __hash__(self) -> int:
    return hash(self.parts)

  def __eq__(self, other: Any) -> bool:
    if isinstance(other, Path):
      return self.parts == other.parts
    elif isinstance(other, tuple):
      return self.parts == other
    else:
      return False

  def __add__(self, other: PathLike) -> Self:
    return type(self)(*self.parts, *Path.from_any(other).parts)

  def __repr__(self) -> str:
    r = "".join(_format_part(part) for part in self.parts)
    r = r.removeprefix(".")
    return r

  @classmethod
  def from_str(cls, str_path: str) -> Self:
    return cls(*path_parser.parse_parts(str_path))

  @classmethod
  def from_any(cls, path: PathLike) -> Self:
    """Normalizes a `str`, a sequence of keys or a `Path`.

    Args:
      path: The path, either as a string "foo[1]", a sequence ("foo", 1) or a
        Path object.

    Returns:
      The `Path`.

    Raises:
      TypeError: if the path is not `str`, a sequence or a `Path`.
    """
    match path:
      case Path():
        return path
      case str():
        return cls.from_str(path)
      case Sequence():
        return cls(*path)
      case _:
        raise TypeError(f"Unknown key/path {path!r} of type {type(path)}")

  @property
  def parent(self) -> Self:
    """Path of the container holding this location."""
    if not self.parts:
      raise ValueError("The root path has no parent.")
    return self[:-1]

  @property
  def name(self) -> Key:
    """Last key of the path."""
    if not self.parts:
      raise ValueError("The root path has no name.")
    return self.parts[-1]

  def child(self, key: Key) -> Self:
    return type(self)(*self.parts, key)

  def startswith(self, prefix: PathLike) -> bool:
    return lists.list_prefix_equals(Path.from_any(prefix).parts, self.parts)

  def relative_to(self, other: PathLike) -> Self:
    other = Path.from_any(other)
    if not self.startswith(other):
      raise ValueError(f"{self} is not a subpath of {other}")
    return type(self)(*self.parts[len(other.parts) :])


def _format_part(part: Key) -> str:
  """Format a single part of a path."""
  if isinstance(part, str) and part.isidentifier():
    return "." + part
  else:
    return f"[{part!r}]"
