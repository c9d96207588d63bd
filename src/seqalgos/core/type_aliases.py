# Copyright 2025 CrownOps Engineering
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

"""Callable aliases and structural protocols for the sequence algorithms.

The algorithms accept plain callables; the aliases here only name their shapes.
The protocols describe the capabilities a collection must offer:

- `IndexedCollection`: `len()` plus integer indexing (bidirectional traversal).
- `RangeRemovableCollection`: additionally `del collection[i]` / `del
  collection[i:j]`, which is what the in-place trimming functions need.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import Protocol, TypeAlias, TypeVar, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
K = TypeVar("K", bound=Hashable)

KeyFn: TypeAlias = Callable[[T], K]
ResolveFn: TypeAlias = Callable[[K, T, T], T]
Predicate: TypeAlias = Callable[[T], bool]


@runtime_checkable
class IndexedCollection(Protocol[T_co]):
    """Collection that supports `len()` and integer indexing."""

    def __len__(self) -> int: ...

    def __getitem__(self, index: int, /) -> T_co: ...


@runtime_checkable
class RangeRemovableCollection(Protocol[T_co]):
    """Indexed collection whose elements can be deleted in place."""

    def __len__(self) -> int: ...

    def __getitem__(self, index: int, /) -> T_co: ...

    def __delitem__(self, index: int, /) -> None: ...


__all__ = [
    "IndexedCollection",
    "K",
    "KeyFn",
    "Predicate",
    "RangeRemovableCollection",
    "ResolveFn",
    "T",
]
