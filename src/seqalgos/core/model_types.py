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

# pylint: disable=too-many-ancestors

"""Enumerations shared by the logging and settings layers."""

from __future__ import annotations

import logging

from seqalgos.compat import StrEnum


class LogFormat(StrEnum):
    """Enumeration of log output formats.

    Attributes:
        TEXT: Human-readable text format.
        JSON: Machine-readable JSON format.
    """

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        """Create a LogFormat enum from a string value.

        Args:
            raw: String representation of the log format.

        Returns:
            LogFormat enum value.

        Raises:
            ValueError: If the string does not match any LogFormat value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown log format '{raw}'"
            raise ValueError(msg) from exc


class LogLevel(StrEnum):
    """Enumeration of supported verbosity levels.

    Attributes:
        DEBUG: Per-call summaries from the algorithms.
        INFO: Default level.
        WARNING: Only warnings and errors.
        ERROR: Only errors.
    """

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @classmethod
    def from_str(cls, raw: str) -> LogLevel:
        """Create a LogLevel enum from a case-insensitive level name.

        Raises:
            ValueError: If the name is not one of the supported levels.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            allowed = ", ".join(level.value for level in cls)
            msg = f"log_level must be one of: {allowed}"
            raise ValueError(msg) from exc

    @property
    def numeric(self) -> int:
        """Matching ``logging`` module level."""
        return int(logging.getLevelName(self.value.upper()))


class LogComponent(StrEnum):
    """Enumeration of loggable library components.

    Attributes:
        KEYED: Mapping construction from keyed elements.
        TRIM: Prefix/suffix trimming.
        CONFIG: Settings discovery and validation.
    """

    KEYED = "keyed"
    TRIM = "trim"
    CONFIG = "config"


__all__ = ["LogComponent", "LogFormat", "LogLevel"]
