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

"""Boundary search for predicate-qualifying runs at either end of a sequence.

Both functions stop at the first element that fails the predicate, so the
predicate is called at most ``run length + 1`` times.
"""

from __future__ import annotations

from itertools import islice
from typing import TYPE_CHECKING, TypeVar

from seqalgos._internal.exceptions import SeqalgosValidationError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from seqalgos.core.type_aliases import Predicate

T = TypeVar("T")


def _resolve_bounds(sequence: Sequence[object], start: int, stop: int | None) -> tuple[int, int]:
    if start < 0 or (stop is not None and stop < 0):
        message = f"bounds must be non-negative (start={start}, stop={stop})"
        raise SeqalgosValidationError(message)
    length = len(sequence)
    lower = min(start, length)
    upper = length if stop is None else min(stop, length)
    if lower > upper:
        message = f"start ({start}) must not exceed stop ({upper})"
        raise SeqalgosValidationError(message)
    return lower, upper


def end_of_prefix(
    sequence: Sequence[T],
    predicate: Predicate[T],
    *,
    start: int = 0,
    stop: int | None = None,
) -> int:
    """Return the index one past the longest qualifying run starting at ``start``.

    Args:
        sequence: Indexed collection to inspect.
        predicate: Called on elements front to back until it returns false.
        start: First index considered; values past the end are clamped.
        stop: One past the last index considered; ``None`` means ``len(sequence)``
            and larger values are clamped.

    Returns:
        ``start`` when the first considered element fails, ``stop`` when every
        considered element satisfies ``predicate``, otherwise the index of the
        first failing element.

    Raises:
        SeqalgosValidationError: If the bounds are negative or inverted.
    """
    lower, upper = _resolve_bounds(sequence, start, stop)
    index = lower
    for element in islice(sequence, lower, upper):
        if not predicate(element):
            return index
        index += 1
    return index


def start_of_suffix(
    sequence: Sequence[T],
    predicate: Predicate[T],
    *,
    start: int = 0,
    stop: int | None = None,
) -> int:
    """Return the index where the longest qualifying run ending at ``stop`` begins.

    Args:
        sequence: Indexed collection to inspect.
        predicate: Called on elements back to front until it returns false.
        start: Lowest index the run may extend to.
        stop: One past the last index considered; ``None`` means ``len(sequence)``.

    Returns:
        ``stop`` when the last considered element fails, ``start`` when every
        considered element satisfies ``predicate``, otherwise the index just
        after the last failing element.

    Raises:
        SeqalgosValidationError: If the bounds are negative or inverted.
    """
    lower, upper = _resolve_bounds(sequence, start, stop)
    length = len(sequence)
    index = upper
    for element in islice(reversed(sequence), length - upper, length - lower):
        if not predicate(element):
            return index
        index -= 1
    return index


__all__ = ["end_of_prefix", "start_of_suffix"]
