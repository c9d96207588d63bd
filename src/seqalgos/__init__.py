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

"""seqalgos - generic sequence algorithms.

Provides dictionary construction keyed by a derived value (with optional
conflict resolution) and trimming of predicate-qualifying runs from either end
of a sequence, in copying and in-place forms.
"""

from __future__ import annotations

from seqalgos._internal.logging_utils import LogConfig, configure_logging
from seqalgos.exceptions import (
    SeqalgosError,
    SeqalgosTypeError,
    SeqalgosValidationError,
    UnsupportedCollectionError,
)

from .algorithms import (
    end_of_prefix,
    keyed,
    keyed_by,
    keyed_by_resolving,
    start_of_suffix,
    trim,
    trim_prefix,
    trim_suffix,
    trimming,
    trimming_prefix,
    trimming_suffix,
)
from .config import Settings, apply_settings, load_settings
from .views import SequenceView

__all__ = [
    "LogConfig",
    "SeqalgosError",
    "SeqalgosTypeError",
    "SeqalgosValidationError",
    "SequenceView",
    "Settings",
    "UnsupportedCollectionError",
    "__version__",
    "apply_settings",
    "configure_logging",
    "end_of_prefix",
    "keyed",
    "keyed_by",
    "keyed_by_resolving",
    "load_settings",
    "start_of_suffix",
    "trim",
    "trim_prefix",
    "trim_suffix",
    "trimming",
    "trimming_prefix",
    "trimming_suffix",
]

__version__ = "0.1.0"
