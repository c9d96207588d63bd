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

"""Settings models for seqalgos.

Pydantic models validate raw TOML payloads; the resulting values are copied
into plain dataclasses for runtime use.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from pydantic import BaseModel, ConfigDict, field_validator

from seqalgos._internal.exceptions import SeqalgosValidationError
from seqalgos.core.model_types import LogFormat, LogLevel

if TYPE_CHECKING:
    from pathlib import Path


class ConfigValidationError(SeqalgosValidationError):
    """Raised when configuration data contains invalid values."""


class ConfigReadError(ConfigValidationError):
    """Raised when a configuration file cannot be read from disk."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with file path and underlying error.

        Args:
            path: The path to the configuration file that could not be read.
            error: The underlying exception that caused the read failure.
        """
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class InvalidConfigFileError(ConfigValidationError):
    """Raised when a configuration file fails validation."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with configuration file path and validation error.

        Args:
            path: The path to the configuration file that failed validation.
            error: The underlying validation exception.
        """
        self.path = path
        self.error = error
        super().__init__(f"Invalid seqalgos configuration in {path}: {error}")


@dataclass(slots=True)
class Settings:
    """Runtime settings for the seqalgos logging layer.

    Attributes:
        log_format: Output format for records emitted under ``seqalgos``.
        log_level: Lower-case level name applied to the ``seqalgos`` loggers.
    """

    log_format: LogFormat = LogFormat.TEXT
    log_level: str = "info"


class SettingsModel(BaseModel):
    """Pydantic model validating the ``[tool.seqalgos]`` table."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    log_format: LogFormat = LogFormat.TEXT
    log_level: str = "info"

    @field_validator("log_format", mode="before")
    @classmethod
    def _coerce_format(cls, value: object) -> object:
        if isinstance(value, str):
            return LogFormat.from_str(value)
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _coerce_level(cls, value: object) -> str:
        if not isinstance(value, str):
            message = "log_level must be a string"
            raise ValueError(message)  # noqa: TRY004
        return LogLevel.from_str(value).value


def settings_from_model(model: SettingsModel) -> Settings:
    """Convert a validated model into the runtime ``Settings`` dataclass."""
    return Settings(log_format=model.log_format, log_level=model.log_level)


__all__ = [
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "Settings",
    "SettingsModel",
    "settings_from_model",
]
