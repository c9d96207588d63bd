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

"""Keyed mapping construction and predicate-based trimming."""

from __future__ import annotations

from .boundaries import end_of_prefix, start_of_suffix
from .keyed import keyed, keyed_by, keyed_by_resolving
from .ranges import remove_range, subsequence
from .trim import trim, trim_prefix, trim_suffix, trimming, trimming_prefix, trimming_suffix

__all__ = [
    "end_of_prefix",
    "keyed",
    "keyed_by",
    "keyed_by_resolving",
    "remove_range",
    "start_of_suffix",
    "subsequence",
    "trim",
    "trim_prefix",
    "trim_suffix",
    "trimming",
    "trimming_prefix",
    "trimming_suffix",
]
