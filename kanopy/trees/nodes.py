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

"""Containers of a tree and the default policy hooks.

`Node.make(obj)` wraps any tree value to unify the access to all the
containers (dicts, mappings, `ConfigDict`, lists, tuples). Values which are not
containers are wrapped as `Leaf`.

The module-level functions (`is_container`, `has_key`, `add_edge`,
`drop_edge`, `set_leaf`) are the default policies used by all the tree
operations. They can be replaced by custom functions with the same signature.
"""

from __future__ import annotations

import abc
from collections.abc import Iterable, Mapping, MutableMapping
import dataclasses
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from kanopy.trees import paths
import ml_collections

if TYPE_CHECKING:
  from kanopy.trees import refs  # pylint: disable=g-bad-import-order

_T = TypeVar("_T")


@dataclasses.dataclass(frozen=True)
class Node(Generic[_T], abc.ABC):
  """Wrap a tree value, and provides methods to access/mutate it."""

  obj: _T

  @classmethod
  def make(cls, obj) -> Node:
    match obj:
      case MutableMapping() | ml_collections.ConfigDict():
        return _Dict(obj)
      case list():
        return _List(obj)
      case Mapping():
        return _FrozenDict(obj)
      case tuple():
        return _Tuple(obj)
      case _:
        return Leaf(obj)

  @abc.abstractmethod
  def __getitem__(self, key: paths.Key) -> Any:
    raise NotImplementedError

  @abc.abstractmethod
  def __setitem__(self, key: paths.Key, value: Any) -> None:
    raise NotImplementedError

  @abc.abstractmethod
  def __delitem__(self, key: paths.Key) -> None:
    raise NotImplementedError

  @abc.abstractmethod
  def __contains__(self, key: paths.Key) -> bool:
    raise NotImplementedError

  @abc.abstractmethod
  def __len__(self) -> int:
    raise NotImplementedError

  @abc.abstractmethod
  def items(self) -> Iterable[tuple[paths.Key, Any]]:
    raise NotImplementedError

  @abc.abstractmethod
  def empty(self) -> _T:
    """Returns a new empty container of the same kind."""
    raise NotImplementedError

  def keys(self) -> list[paths.Key]:
    return [k for k, _ in self.items()]


class _Dict(Node):
  """Dict, mutable mapping or ConfigDict node."""

  def __getitem__(self, key: paths.Key) -> Any:
    try:
      return self.obj[key]
    except KeyError:
      raise KeyError(
          f"Key {key!r} not found. Available keys: {list(self.obj.keys())}"
      ) from None

  def __setitem__(self, key: paths.Key, value: Any) -> None:
    # Note: The key do not need to exists. It can be created.
    if isinstance(self.obj, ml_collections.ConfigDict):
      # Edits can change the type of a field (e.g. a node replaced by a leaf).
      with self.obj.ignore_type():
        self.obj[key] = value
    else:
      self.obj[key] = value

  def __delitem__(self, key: paths.Key) -> None:
    try:
      del self.obj[key]
    except KeyError:
      raise KeyError(
          f"Key {key!r} not found. Available keys: {list(self.obj.keys())}"
      ) from None

  def __contains__(self, key: paths.Key) -> bool:
    return key in self.obj

  def __len__(self) -> int:
    return len(self.obj)

  def items(self) -> Iterable[tuple[paths.Key, Any]]:
    yield from self.obj.items()

  def empty(self):
    return type(self.obj)()


class _List(Node):
  """List node, keyed by index."""

  def _check_index(self, key: paths.Key) -> None:
    if key not in self:
      raise KeyError(f"Key {key!r} out of range (length {len(self.obj)})")

  def __getitem__(self, key: paths.Key) -> Any:
    self._check_index(key)
    return self.obj[key]

  def __setitem__(self, key: paths.Key, value: Any) -> None:
    if key == len(self.obj) and not isinstance(key, bool):
      self.obj.append(value)
      return
    self._check_index(key)
    self.obj[key] = value

  def __delitem__(self, key: paths.Key) -> None:
    # Following items are shifted.
    self._check_index(key)
    del self.obj[key]

  def __contains__(self, key: paths.Key) -> bool:
    return (
        isinstance(key, int)
        and not isinstance(key, bool)
        and 0 <= key < len(self.obj)
    )

  def __len__(self) -> int:
    return len(self.obj)

  def items(self) -> Iterable[tuple[int, Any]]:
    yield from enumerate(self.obj)

  def empty(self):
    return []


def _immutable_error(obj: Any, key: paths.Key) -> TypeError:
  return TypeError(
      f"Cannot mutate immutable {type(obj).__name__}. Tried to modify key"
      f" {key!r}."
  )


class _FrozenDict(_Dict):
  """Read-only mapping node (e.g. `types.MappingProxyType`).

  Only reached through a custom `is_node` (by default, read-only containers are
  leaves). `empty()` returns a mutable `dict`.
  """

  def __setitem__(self, key: paths.Key, value: Any) -> None:
    del value
    raise _immutable_error(self.obj, key)

  def __delitem__(self, key: paths.Key) -> None:
    raise _immutable_error(self.obj, key)

  def empty(self):
    return {}


class _Tuple(_List):
  """Tuple node, keyed by index. Read-only, `empty()` returns a `list`."""

  def __setitem__(self, key: paths.Key, value: Any) -> None:
    del value
    raise _immutable_error(self.obj, key)

  def __delitem__(self, key: paths.Key) -> None:
    raise _immutable_error(self.obj, key)

  def empty(self):
    return []


class Leaf(Node):
  """Leaf node."""

  def __getitem__(self, key: paths.Key) -> Any:
    raise KeyError(
        f"Cannot access key {key!r} of leaf {type(self.obj).__name__}. Only"
        " dict, list can be recursed into."
    )

  def __setitem__(self, key: paths.Key, value: Any) -> None:
    del value
    raise ValueError(
        f"Cannot mutate leaf {type(self.obj)}. Tried to overwrite key"
        f" {key!r}. Only dict, list can be recursed into."
    )

  def __delitem__(self, key: paths.Key) -> None:
    raise ValueError(
        f"Cannot mutate leaf {type(self.obj)}. Tried to delete key {key!r}."
    )

  def __contains__(self, key: paths.Key) -> bool:
    # Leafs can never be recursed into
    return False

  def __len__(self) -> int:
    return 0

  def items(self) -> Iterable[tuple[paths.Key, Any]]:
    raise ValueError(
        f"Cannot recurse inside {type(self.obj)} (not a dict or list)"
    )

  def empty(self):
    raise ValueError(f"{type(self.obj)} is not a container.")


# ======================== Default policies ========================


def is_container(value: Any, path: paths.Path = paths.Path()) -> bool:
  """Default `is_node`: `True` for mutable mappings, `ConfigDict` and lists.

  Read-only containers (tuples, `Mapping`) are leaves, as they cannot be
  mutated.

  Args:
    value: The value to classify.
    path: Location of the value (unused).

  Returns:
    Whether `value` is a node.
  """
  del path
  return type(Node.make(value)) in (_Dict, _List)


def has_key(node: Any, key: paths.Key) -> bool:
  """Default `has_key`: `True` if `node` is a container containing `key`."""
  return is_container(node) and key in Node.make(node)


def add_edge(ref: refs.Ref, key: paths.Key) -> None:
  """Default `add_edge`: creates `node[key] = {}`.

  If the value at `ref` is not a container, it is first replaced by an empty
  `dict`. A list which cannot store `key` (a `str`, or an index past its end)
  is converted to a `dict` keyed by index, so its items are kept.

  Args:
    ref: Location of the node to which the edge is added.
    key: Key of the new edge.
  """
  node = ref.get()
  if not is_container(node):
    ref.set({})
    node = ref.get()
  elif isinstance(node, list) and not (
      isinstance(key, int) and 0 <= key <= len(node)
  ):
    ref.set(dict(enumerate(node)))
    node = ref.get()
  wrapper = Node.make(node)
  if isinstance(wrapper, _List):
    wrapper[key] = {}
  else:
    wrapper[key] = wrapper.empty()


def drop_edge(node: Any, key: paths.Key) -> None:
  """Default `drop_edge`: `del node[key]`."""
  del Node.make(node)[key]


def set_leaf(ref: refs.Ref, value: Any) -> None:
  """Default `set_leaf`: assigns `value` at the location."""
  ref.set(value)
