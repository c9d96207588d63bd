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

"""Capability adapters used by the trimming functions.

`subsequence` and `remove_range` are single-dispatch functions so that
collection types without native slice support can plug in their own
implementation with ``register``.
"""

from __future__ import annotations

from array import array
from collections import deque
from collections.abc import Mapping, MutableSequence, Sequence
from functools import singledispatch
from typing import Any, TypeVar, cast

from seqalgos._internal.exceptions import UnsupportedCollectionError
from seqalgos.core.type_aliases import IndexedCollection, RangeRemovableCollection
from seqalgos.views import SequenceView

T = TypeVar("T")


def require_indexed(collection: object) -> None:
    """Ensure ``collection`` supports ``len()`` and integer indexing.

    Raises:
        UnsupportedCollectionError: For mappings, sets, iterators and other
            non-sequence inputs.
    """
    if isinstance(collection, Sequence):
        return
    if isinstance(collection, IndexedCollection) and not isinstance(collection, Mapping):
        return
    raise UnsupportedCollectionError(collection, "indexed access")


def require_range_removable(collection: object) -> None:
    """Ensure ``collection`` can be shortened in place.

    Raises:
        UnsupportedCollectionError: For immutable sequences such as ``str``,
            ``tuple``, ``bytes``, ``range`` or ``SequenceView``.
    """
    if isinstance(collection, RangeRemovableCollection) and not isinstance(collection, Mapping):
        return
    raise UnsupportedCollectionError(collection, "in-place range removal")


@singledispatch
def subsequence(collection: Sequence[T], start: int, stop: int) -> Sequence[T]:
    """Return the elements of ``collection`` in ``[start, stop)``.

    Sequences are sliced natively, so ``str`` yields ``str`` and ``list``
    yields ``list``. Collections that only offer integer indexing get a
    `SequenceView` instead.
    """
    if isinstance(collection, Sequence):
        return collection[start:stop]
    return SequenceView(collection, start, stop)


@subsequence.register(deque)
def _subsequence_deque(collection: deque[Any], start: int, stop: int) -> Sequence[Any]:
    return SequenceView(collection, start, stop)


@singledispatch
def remove_range(collection: MutableSequence[T], start: int, stop: int) -> None:
    """Delete the elements of ``collection`` in ``[start, stop)`` in place.

    The default needs only integer indexing. When the collection supports item
    assignment the tail is shifted down over the removed run and the leftover
    slots are deleted from the end, which keeps the cost linear in
    ``len(collection)``. Without assignment the run is deleted back to front.
    """
    width = stop - start
    if width <= 0:
        return
    items = cast("MutableSequence[object]", collection)
    if not hasattr(type(collection), "__setitem__"):
        for index in range(stop - 1, start - 1, -1):
            del items[index]
        return
    length = len(items)
    for index in range(stop, length):
        items[index - width] = items[index]
    for index in range(length - 1, length - width - 1, -1):
        del items[index]


@remove_range.register(list)
@remove_range.register(bytearray)
@remove_range.register(array)
def _remove_range_slice(collection: MutableSequence[Any], start: int, stop: int) -> None:
    del collection[start:stop]


@remove_range.register(deque)
def _remove_range_deque(collection: deque[Any], start: int, stop: int) -> None:
    items = cast("deque[object]", collection)
    items.rotate(-start)
    for _ in range(stop - start):
        items.popleft()
    items.rotate(start)


__all__ = ["remove_range", "require_indexed", "require_range_removable", "subsequence"]
