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

"""Reusable Hypothesis strategies for sequence algorithm tests."""

from __future__ import annotations

from hypothesis import strategies as st


def small_int_lists(max_size: int = 30, max_value: int = 5) -> st.SearchStrategy[list[int]]:
    """Return a strategy yielding lists with plenty of repeated small integers.

    Args:
        max_size: Maximum list length.
        max_value: Largest integer drawn; small values force key collisions
            and long qualifying runs.

    Returns:
        Hypothesis strategy producing lists of non-negative integers.
    """
    return st.lists(st.integers(min_value=0, max_value=max_value), max_size=max_size)


def keyed_pairs(max_size: int = 30) -> st.SearchStrategy[list[tuple[int, str]]]:
    """Strategy emitting ``(key, payload)`` pairs with frequently colliding keys."""
    pair = st.tuples(st.integers(min_value=0, max_value=4), st.text(max_size=3))
    return st.lists(pair, max_size=max_size)


def padded_text() -> st.SearchStrategy[str]:
    """Strategy emitting text with optional whitespace padding on both ends."""
    padding = st.text(alphabet=" \t\n", max_size=4)
    return st.builds(lambda left, core, right: left + core + right, padding, st.text(max_size=10), padding)


def thresholds(max_value: int = 5) -> st.SearchStrategy[int]:
    """Strategy for the cut-off used by ``value < threshold`` predicates."""
    return st.integers(min_value=0, max_value=max_value + 1)
