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

"""Common exception hierarchy for seqalgos.

Only misuse detected by the library itself raises these classes. Exceptions
raised by caller-supplied key, resolve or predicate functions propagate
untouched.
"""

from __future__ import annotations

__all__ = [
    "SeqalgosError",
    "SeqalgosTypeError",
    "SeqalgosValidationError",
    "UnsupportedCollectionError",
]


class SeqalgosError(Exception):
    """Base error for all seqalgos exceptions."""


class SeqalgosValidationError(SeqalgosError, ValueError):
    """Raised when an argument value fails validation checks."""


class SeqalgosTypeError(SeqalgosError, TypeError):
    """Raised when an argument has an unexpected type."""


class UnsupportedCollectionError(SeqalgosTypeError):
    """Raised when a collection lacks a capability an operation requires."""

    def __init__(self, collection: object, capability: str) -> None:
        """Initialize the exception with the offending collection type.

        Args:
            collection: The collection passed to the operation.
            capability: Human-readable name of the missing capability.
        """
        self.collection_type = type(collection)
        self.capability = capability
        super().__init__(f"{self.collection_type.__name__} does not support {capability}")
