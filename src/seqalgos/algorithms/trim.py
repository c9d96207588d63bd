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

"""Trim leading and trailing runs of elements that satisfy a predicate.

The ``trimming*`` functions return a subsequence and leave their input alone;
the ``trim*`` functions shorten a mutable collection in place and return
``None``, mirroring ``sorted``/``list.sort``.

Example:
    >>> trimming("  hello, world  ", str.isspace)
    'hello, world'
    >>> words = ["", "", "a", "b", ""]
    >>> trim(words, lambda word: not word)
    >>> words
    ['a', 'b']

Every boundary is computed before anything is removed, so an exception raised
by the predicate leaves a mutable collection unchanged.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from seqalgos._internal.logging_utils import structured_extra
from seqalgos.core.model_types import LogComponent

from .boundaries import end_of_prefix, start_of_suffix
from .ranges import remove_range, require_indexed, require_range_removable, subsequence

if TYPE_CHECKING:
    from collections.abc import Iterable, MutableSequence, Sequence

    from seqalgos.core.type_aliases import Predicate

T = TypeVar("T")

logger: logging.Logger = logging.getLogger("seqalgos.trim")


def trimming_prefix(sequence: Sequence[T], predicate: Predicate[T]) -> Sequence[T]:
    """Return ``sequence`` without its leading run of elements satisfying ``predicate``.

    Args:
        sequence: Indexed collection to trim; not modified.
        predicate: Returns true for elements that should be dropped.

    Returns:
        The subsequence starting at the first element for which ``predicate``
        is false. Sliceable inputs return their own slice type.
    """
    require_indexed(sequence)
    start = end_of_prefix(sequence, predicate)
    return subsequence(sequence, start, len(sequence))


def trimming_suffix(sequence: Sequence[T], predicate: Predicate[T]) -> Sequence[T]:
    """Return ``sequence`` without its trailing run of elements satisfying ``predicate``."""
    require_indexed(sequence)
    stop = start_of_suffix(sequence, predicate)
    return subsequence(sequence, 0, stop)


def trimming(sequence: Sequence[T], predicate: Predicate[T]) -> Sequence[T]:
    """Return ``sequence`` without the qualifying runs at both ends.

    Equivalent to ``trimming_suffix(trimming_prefix(sequence, predicate),
    predicate)``: the prefix is scanned first and the suffix scan never goes
    below it, so an all-qualifying input calls ``predicate`` once per element.
    """
    require_indexed(sequence)
    start = end_of_prefix(sequence, predicate)
    stop = start_of_suffix(sequence, predicate, start=start)
    return subsequence(sequence, start, stop)


def trim_prefix(collection: MutableSequence[T], predicate: Predicate[T]) -> None:
    """Remove the leading run of elements satisfying ``predicate`` in place.

    Raises:
        UnsupportedCollectionError: If ``collection`` cannot be shortened in
            place. Checked before ``predicate`` is called.
    """
    require_range_removable(collection)
    stop = end_of_prefix(collection, predicate)
    _remove(collection, [(0, stop)], operation="trim_prefix")


def trim_suffix(collection: MutableSequence[T], predicate: Predicate[T]) -> None:
    """Remove the trailing run of elements satisfying ``predicate`` in place."""
    require_range_removable(collection)
    start = start_of_suffix(collection, predicate)
    _remove(collection, [(start, len(collection))], operation="trim_suffix")


def trim(collection: MutableSequence[T], predicate: Predicate[T]) -> None:
    """Remove the qualifying runs at both ends of ``collection`` in place.

    Behaves like `trim_suffix` followed by `trim_prefix`: the suffix is scanned
    first and the prefix scan stops where the suffix begins. Both removals
    happen only once both boundaries are known.

    Args:
        collection: Mutable indexed collection to shorten.
        predicate: Returns true for elements that should be removed.

    Raises:
        UnsupportedCollectionError: If ``collection`` cannot be shortened in
            place. Checked before ``predicate`` is called.
    """
    require_range_removable(collection)
    suffix_start = start_of_suffix(collection, predicate)
    prefix_end = end_of_prefix(collection, predicate, stop=suffix_start)
    _remove(collection, [(suffix_start, len(collection)), (0, prefix_end)], operation="trim")


def _remove(
    collection: MutableSequence[T],
    spans: Iterable[tuple[int, int]],
    *,
    operation: str,
) -> None:
    # Spans are removed in the given order, so later spans must lie before earlier ones.
    removed = 0
    for start, stop in spans:
        if stop > start:
            remove_range(collection, start, stop)
            removed += stop - start
    if removed and logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "%s removed %d element(s)",
            operation,
            removed,
            extra=structured_extra(
                component=LogComponent.TRIM,
                operation=operation,
                removed=removed,
                count=len(collection),
            ),
        )


__all__ = [
    "trim",
    "trim_prefix",
    "trim_suffix",
    "trimming",
    "trimming_prefix",
    "trimming_suffix",
]
