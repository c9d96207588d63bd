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

"""Unit tests for predicate-based trimming."""

from __future__ import annotations

import logging
from array import array
from collections import UserList, deque
from collections.abc import Callable, MutableSequence
from typing import Any

import pytest

from seqalgos import (
    SequenceView,
    UnsupportedCollectionError,
    trim,
    trim_prefix,
    trim_suffix,
    trimming,
    trimming_prefix,
    trimming_suffix,
)

pytestmark = pytest.mark.unit

GREETING = "  hello, world  "

COPY_FUNCTIONS: tuple[Callable[..., Any], ...] = (trimming_prefix, trimming_suffix, trimming)
MUTATE_FUNCTIONS: tuple[Callable[..., Any], ...] = (trim_prefix, trim_suffix, trim)


def _is_zero(value: int) -> bool:
    return value == 0


def _always_true(_value: object) -> bool:
    return True


def _always_false(_value: object) -> bool:
    return False


def test_trimming_whitespace_examples() -> None:
    assert trimming(GREETING, str.isspace) == "hello, world"
    assert trimming_prefix(GREETING, str.isspace) == "hello, world  "
    assert trimming_suffix(GREETING, str.isspace) == "  hello, world"


def test_trimming_preserves_native_slice_types() -> None:
    assert isinstance(trimming(GREETING, str.isspace), str)
    assert trimming((0, 1, 0), _is_zero) == (1,)
    assert trimming(b"\x00ab\x00", lambda byte: byte == 0) == b"ab"
    assert trimming(range(10), lambda value: value < 3 or value > 6) == range(3, 7)


def test_trimming_does_not_mutate_source() -> None:
    values = [0, 0, 1, 2, 0]
    assert trimming(values, _is_zero) == [1, 2]
    assert trimming_prefix(values, _is_zero) == [1, 2, 0]
    assert trimming_suffix(values, _is_zero) == [0, 0, 1, 2]
    assert values == [0, 0, 1, 2, 0]


@pytest.mark.parametrize("function", COPY_FUNCTIONS)
def test_trimming_always_false_returns_everything(function: Callable[..., Any]) -> None:
    assert function([1, 2, 3], _always_false) == [1, 2, 3]


@pytest.mark.parametrize("function", COPY_FUNCTIONS)
def test_trimming_always_true_returns_empty(function: Callable[..., Any]) -> None:
    assert function([1, 2, 3], _always_true) == []
    assert function("abc", _always_true) == ""


@pytest.mark.parametrize("function", COPY_FUNCTIONS)
def test_trimming_empty_input_never_calls_predicate(function: Callable[..., Any]) -> None:
    def explode(_value: object) -> bool:
        message = "predicate must not be called"
        raise AssertionError(message)

    assert function([], explode) == []
    assert function("", explode) == ""


@pytest.mark.parametrize("function", MUTATE_FUNCTIONS)
def test_trim_empty_input_is_noop(function: Callable[..., Any]) -> None:
    values: list[int] = []
    assert function(values, _always_true) is None
    assert values == []


def test_trimming_calls_predicate_once_per_element_when_all_qualify() -> None:
    seen: list[int] = []

    def record(value: int) -> bool:
        seen.append(value)
        return True

    assert trimming([1, 2, 3], record) == []
    assert seen == [1, 2, 3]


def test_trimming_stops_at_first_failing_element() -> None:
    seen: list[int] = []

    def record(value: int) -> bool:
        seen.append(value)
        return value == 0

    assert trimming_prefix([0, 1, 0, 0], record) == [1, 0, 0]
    assert seen == [0, 1]


def test_trim_prefix_suffix_and_both_in_place() -> None:
    values = [0, 0, 1, 0, 2, 0]
    trim_prefix(values, _is_zero)
    assert values == [1, 0, 2, 0]

    values = [0, 0, 1, 0, 2, 0]
    trim_suffix(values, _is_zero)
    assert values == [0, 0, 1, 0, 2]

    values = [0, 0, 1, 0, 2, 0]
    trim(values, _is_zero)
    assert values == [1, 0, 2]


def test_trim_matches_suffix_then_prefix_and_trimming() -> None:
    source = [3, 3, 4, 3, 5, 3, 3]
    combined = list(source)
    trim(combined, lambda value: value == 3)

    stepwise = list(source)
    trim_suffix(stepwise, lambda value: value == 3)
    trim_prefix(stepwise, lambda value: value == 3)

    assert combined == stepwise == trimming(source, lambda value: value == 3)


def test_trim_evaluates_suffix_before_prefix() -> None:
    seen: list[int] = []

    def record(value: int) -> bool:
        seen.append(value)
        return value < 0

    values = [-1, 5, -2]
    trim(values, record)
    assert values == [5]
    assert seen == [-2, 5, -1, 5]


def test_trim_all_qualifying_empties_collection() -> None:
    values = [0, 0, 0]
    trim(values, _is_zero)
    assert values == []


def test_trim_works_on_bytearray_array_and_deque() -> None:
    raw = bytearray(b"  data  ")
    trim(raw, lambda byte: byte == ord(" "))
    assert raw == bytearray(b"data")

    numbers = array("i", [0, 7, 8, 0])
    trim(numbers, _is_zero)
    assert numbers.tolist() == [7, 8]

    queue: deque[int] = deque([0, 0, 4, 0, 5, 0])
    trim(queue, _is_zero)
    assert list(queue) == [4, 0, 5]


def test_trimming_deque_returns_view() -> None:
    queue: deque[int] = deque([0, 1, 2, 0])
    result = trimming(queue, _is_zero)
    assert isinstance(result, SequenceView)
    assert result == [1, 2]
    assert list(queue) == [0, 1, 2, 0]


def test_trimming_view_stays_a_view() -> None:
    base = [0, 0, 1, 2, 0]
    view = SequenceView(base)
    result = trimming(view, _is_zero)
    assert isinstance(result, SequenceView)
    assert result.base is base
    assert (result.start, result.stop) == (2, 4)


def test_trim_on_custom_mutable_sequence_uses_integer_deletion() -> None:
    class Stack(MutableSequence[int]):
        def __init__(self, items: list[int]) -> None:
            self.items = items

        def __len__(self) -> int:
            return len(self.items)

        def __getitem__(self, index: int) -> int:  # type: ignore[override]
            return self.items[index]

        def __setitem__(self, index: int, value: int) -> None:  # type: ignore[override]
            self.items[index] = value

        def __delitem__(self, index: int) -> None:  # type: ignore[override]
            if not isinstance(index, int):
                message = "integer indices only"
                raise TypeError(message)
            del self.items[index]

        def insert(self, index: int, value: int) -> None:
            self.items.insert(index, value)

    stack = Stack([0, 1, 2, 0, 0])
    trim(stack, _is_zero)
    assert stack.items == [1, 2]


@pytest.mark.parametrize(
    "immutable",
    ["  text  ", (0, 1, 0), b"\x00a", range(3), SequenceView([0, 1, 0])],
)
@pytest.mark.parametrize("function", MUTATE_FUNCTIONS)
def test_trim_rejects_immutable_collections_before_calling_predicate(
    function: Callable[..., Any],
    immutable: object,
) -> None:
    def explode(_value: object) -> bool:
        message = "predicate must not be called"
        raise AssertionError(message)

    with pytest.raises(UnsupportedCollectionError, match="in-place range removal") as excinfo:
        function(immutable, explode)
    assert excinfo.value.collection_type is type(immutable)
    assert isinstance(excinfo.value, TypeError)


@pytest.mark.parametrize("unordered", [{1, 2}, {"a": 1}, frozenset()])
@pytest.mark.parametrize("function", COPY_FUNCTIONS)
def test_trimming_rejects_non_sequences(function: Callable[..., Any], unordered: object) -> None:
    with pytest.raises(UnsupportedCollectionError, match="indexed access"):
        function(unordered, _always_true)


@pytest.mark.parametrize(
    ("function", "source"),
    [
        (trim_prefix, [0, 0, 9, 1]),
        (trim_suffix, [1, 9, 0, 0]),
        (trim, [0, 1, 9, 0, 0]),
    ],
)
def test_trim_predicate_failure_leaves_collection_unchanged(
    function: Callable[..., Any],
    source: list[int],
) -> None:
    values = list(source)

    def flaky(value: int) -> bool:
        if value == 9:
            message = "cannot classify 9"
            raise ValueError(message)
        return value == 0

    with pytest.raises(ValueError, match="cannot classify 9"):
        function(values, flaky)
    assert values == source


def test_trim_failure_during_prefix_scan_keeps_suffix() -> None:
    values = [7, 1, 0, 0]

    def flaky(value: int) -> bool:
        if value == 7:
            message = "boom"
            raise RuntimeError(message)
        return value == 0

    with pytest.raises(RuntimeError, match="boom"):
        trim(values, flaky)
    assert values == [7, 1, 0, 0]


@pytest.mark.parametrize("function", COPY_FUNCTIONS)
def test_trimming_predicate_failure_propagates(function: Callable[..., Any]) -> None:
    class PredicateFailure(Exception):
        pass

    def failing(_value: object) -> bool:
        raise PredicateFailure

    with pytest.raises(PredicateFailure):
        function([1, 2], failing)


def test_trim_logs_removed_count_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    values = [0, 1, 0, 0]
    with caplog.at_level(logging.DEBUG, logger="seqalgos.trim"):
        trim_suffix(values, _is_zero)
    records = [record for record in caplog.records if record.name == "seqalgos.trim"]
    assert len(records) == 1
    assert records[0].__dict__["removed"] == 2
    assert records[0].__dict__["count"] == 2
    assert records[0].__dict__["operation"] == "trim_suffix"


def test_trim_both_ends_logs_one_summary(caplog: pytest.LogCaptureFixture) -> None:
    values = [0, 0, 1, 2, 0]
    with caplog.at_level(logging.DEBUG, logger="seqalgos.trim"):
        trim(values, _is_zero)
    records = [record for record in caplog.records if record.name == "seqalgos.trim"]
    assert values == [1, 2]
    assert len(records) == 1
    assert records[0].__dict__["removed"] == 3
    assert records[0].__dict__["count"] == 2
    assert records[0].__dict__["operation"] == "trim"


def test_trim_without_removal_emits_no_record(caplog: pytest.LogCaptureFixture) -> None:
    values = [1, 2]
    with caplog.at_level(logging.DEBUG, logger="seqalgos.trim"):
        trim(values, _is_zero)
    assert not [record for record in caplog.records if record.name == "seqalgos.trim"]


class _ShiftCountingList(UserList[int]):
    """Records every element write and deletion made by in-place trimming."""

    def __init__(self, items: list[int]) -> None:
        super().__init__(items)
        self.writes = 0
        self.deleted_at: list[tuple[int, int]] = []

    def __setitem__(self, index: Any, value: Any) -> None:
        self.writes += 1
        super().__setitem__(index, value)

    def __delitem__(self, index: Any) -> None:
        self.deleted_at.append((index, len(self.data)))
        super().__delitem__(index)


@pytest.mark.parametrize("function", MUTATE_FUNCTIONS)
def test_trim_on_user_list_only_deletes_from_the_end(function: Callable[..., Any]) -> None:
    values = _ShiftCountingList([0] * 1000 + [1] + [0] * 10)
    original_length = len(values)
    function(values, _is_zero)
    assert 1 in values.data
    assert all(index == length - 1 for index, length in values.deleted_at)
    assert values.writes + len(values.deleted_at) <= original_length


def test_trim_prefix_on_user_list_moves_each_survivor_once() -> None:
    values = _ShiftCountingList([0] * 1000 + [1, 2, 3])
    trim_prefix(values, _is_zero)
    assert values.data == [1, 2, 3]
    assert values.writes == 3
    assert len(values.deleted_at) == 1000
