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

"""Non-owning, read-only views over a contiguous run of a sequence.

A `SequenceView` never copies its base. Slicing a view yields a narrower view
over the same base, so repeated trimming of a large list costs nothing beyond
the predicate calls. The base must not be resized while a view over it is in
use.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Generic, TypeVar, overload

from seqalgos._internal.exceptions import SeqalgosValidationError
from seqalgos.compat import override

T = TypeVar("T")


class SequenceView(Sequence[T], Generic[T]):
    """Read-only window ``base[start:stop]`` that shares storage with ``base``.

    Bounds are clamped the same way slice bounds are. Wrapping another view
    flattens onto that view's base. The base only needs ``len()`` and integer
    indexing.

    Views are read-only, so the in-place ``trim*`` functions reject them.
    Narrow a view with ``trimming`` instead, which returns a smaller view over
    the same base.

    Attributes:
        base: The underlying sequence.
        start: First index of the window within ``base``.
        stop: One past the last index of the window within ``base``.
    """

    __slots__ = ("_base", "_start", "_stop")

    def __init__(self, base: Sequence[T], start: int | None = None, stop: int | None = None) -> None:
        lower, upper, _ = slice(start, stop).indices(len(base))
        upper = max(lower, upper)
        if isinstance(base, SequenceView):
            self._base: Sequence[T] = base.base
            self._start = base.start + lower
            self._stop = base.start + upper
        else:
            self._base = base
            self._start = lower
            self._stop = upper

    @property
    def base(self) -> Sequence[T]:
        return self._base

    @property
    def start(self) -> int:
        return self._start

    @property
    def stop(self) -> int:
        return self._stop

    @override
    def __len__(self) -> int:
        return self._stop - self._start

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> SequenceView[T]: ...

    @override
    def __getitem__(self, index: int | slice) -> T | SequenceView[T]:
        if isinstance(index, slice):
            if index.step not in (None, 1):
                message = "SequenceView only supports contiguous slices (step 1)"
                raise SeqalgosValidationError(message)
            lower, upper, _ = index.indices(len(self))
            return SequenceView(self._base, self._start + lower, self._start + max(lower, upper))
        length = len(self)
        position = index + length if index < 0 else index
        if not 0 <= position < length:
            message = "SequenceView index out of range"
            raise IndexError(message)
        return self._base[self._start + position]

    @override
    def __iter__(self) -> Iterator[T]:
        for index in range(self._start, self._stop):
            yield self._base[index]

    @override
    def __reversed__(self) -> Iterator[T]:
        for index in range(self._stop - 1, self._start - 1, -1):
            yield self._base[index]

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(left == right for left, right in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.materialize()!r})"

    def materialize(self) -> list[T]:
        """Copy the viewed elements into a new list."""
        return list(self)


__all__ = ["SequenceView"]
