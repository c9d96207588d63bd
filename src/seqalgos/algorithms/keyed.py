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

"""Build dictionaries from iterables by deriving a key for each element.

Example:
    >>> keyed_by(["apple", "avocado", "banana"], key=lambda word: word[0])
    {'a': 'avocado', 'b': 'banana'}
    >>> keyed_by_resolving(
    ...     ["apple", "avocado", "banana"],
    ...     key=lambda word: word[0],
    ...     resolve=lambda _key, current, incoming: min(current, incoming),
    ... )
    {'a': 'apple', 'b': 'banana'}
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final, TypeVar, cast

from seqalgos._internal.logging_utils import structured_extra
from seqalgos.core.model_types import LogComponent

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable

    from seqalgos.core.type_aliases import KeyFn, ResolveFn

T = TypeVar("T")
K = TypeVar("K", bound="Hashable")

logger: logging.Logger = logging.getLogger("seqalgos.keyed")

_MISSING: Final = object()


def keyed_by(iterable: Iterable[T], key: KeyFn[T, K]) -> dict[K, T]:
    """Return a dictionary mapping ``key(element)`` to each element.

    When several elements produce the same key, the last one in iteration
    order is kept.

    Args:
        iterable: Elements to index. Consumed exactly once.
        key: Derives the dictionary key for an element. Exceptions propagate.

    Returns:
        A new dictionary with one entry per distinct key.
    """
    result: dict[K, T] = {}
    count = 0
    for element in iterable:
        result[key(element)] = element
        count += 1
    _log_summary("keyed_by", count, len(result))
    return result


def keyed_by_resolving(
    iterable: Iterable[T],
    key: KeyFn[T, K],
    resolve: ResolveFn[K, T],
) -> dict[K, T]:
    """Return a dictionary keyed by ``key``, merging colliding elements.

    The first element for a key is stored as-is. Each later element with the
    same key is passed to ``resolve(key, current, incoming)``, where
    ``current`` is the value stored at that moment (possibly the result of an
    earlier resolution), and the return value replaces it. Collisions are
    therefore folded left to right in encounter order, which matters when
    ``resolve`` is not associative.

    Args:
        iterable: Elements to index. Consumed exactly once.
        key: Derives the dictionary key for an element.
        resolve: Chooses or combines the stored and incoming values.

    Returns:
        A new dictionary with one entry per distinct key.

    Raises:
        Exception: Whatever ``key`` or ``resolve`` raises, unchanged. No
            partially built dictionary is returned in that case.
    """
    result: dict[K, T] = {}
    count = 0
    for element in iterable:
        count += 1
        element_key = key(element)
        current = result.get(element_key, _MISSING)
        if current is _MISSING:
            result[element_key] = element
        else:
            result[element_key] = resolve(element_key, cast("T", current), element)
    _log_summary("keyed_by_resolving", count, len(result))
    return result


def keyed(
    iterable: Iterable[T],
    key: KeyFn[T, K],
    resolve: ResolveFn[K, T] | None = None,
) -> dict[K, T]:
    """Dispatch to `keyed_by` or `keyed_by_resolving` depending on ``resolve``."""
    if resolve is None:
        return keyed_by(iterable, key)
    return keyed_by_resolving(iterable, key, resolve)


def _log_summary(operation: str, count: int, keys: int) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug(
        "%s indexed %d element(s) into %d key(s)",
        operation,
        count,
        keys,
        extra=structured_extra(
            component=LogComponent.KEYED,
            operation=operation,
            count=count,
            details={"keys": keys, "collisions": count - keys},
        ),
    )


__all__ = ["keyed", "keyed_by", "keyed_by_resolving"]
