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

"""Settings discovery and loading for seqalgos.

Settings live either in a standalone ``seqalgos.toml`` / ``.seqalgos.toml`` file
or under ``[tool.seqalgos]`` in ``pyproject.toml``. The environment variables
``SEQALGOS_LOG_FORMAT`` and ``SEQALGOS_LOG_LEVEL`` take precedence over file
values.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final, cast

from pydantic import ValidationError

from seqalgos._internal.logging_utils import (
    LOG_FORMAT_ENV,
    LOG_LEVEL_ENV,
    LogConfig,
    configure_logging,
    structured_extra,
)
from seqalgos.compat import tomllib
from seqalgos.core.model_types import LogComponent

from .models import (
    ConfigReadError,
    ConfigValidationError,
    InvalidConfigFileError,
    Settings,
    SettingsModel,
    settings_from_model,
)

logger: logging.Logger = logging.getLogger("seqalgos.config")

CONFIG_FILENAMES: Final[tuple[str, ...]] = (
    "seqalgos.toml",
    ".seqalgos.toml",
    "pyproject.toml",
)


@dataclass(slots=True, frozen=True)
class LoadedSettings:
    """Container for loaded settings and their source path.

    Attributes:
        settings: Parsed settings instance.
        path: Filesystem path the settings were loaded from, or None when
            defaults are used.
    """

    settings: Settings
    path: Path | None


def load_settings(explicit_path: Path | None = None) -> Settings:
    """Load seqalgos settings from a TOML file or use defaults.

    Args:
        explicit_path: Optional explicit path to a configuration file. If provided,
            only this file will be checked. If None, standard locations are searched.

    Returns:
        Settings with environment overrides applied.
    """
    return load_settings_with_metadata(explicit_path).settings


def load_settings_with_metadata(
    explicit_path: Path | None = None,
    *,
    base_dir: Path | None = None,
) -> LoadedSettings:
    """Load seqalgos settings together with the file they came from.

    The search order is ``seqalgos.toml``, ``.seqalgos.toml`` and then
    ``pyproject.toml`` inside ``base_dir`` (the current directory by default).
    ``pyproject.toml`` only counts when it has a ``[tool.seqalgos]`` table;
    standalone files may use either the bare or the nested layout.

    Args:
        explicit_path: Only this file is checked when given.
        base_dir: Directory searched when ``explicit_path`` is None.

    Returns:
        LoadedSettings: Parsed settings and the path they originated from.
    """
    search_root = (base_dir or Path.cwd()).resolve()
    if explicit_path is not None:
        candidates = [_resolve_candidate_path(explicit_path)]
    else:
        candidates = [search_root / name for name in CONFIG_FILENAMES]

    for candidate in candidates:
        loaded = _load_candidate(candidate, explicit=explicit_path is not None)
        if loaded is not None:
            logger.debug(
                "Loaded settings from %s",
                loaded.path,
                extra=structured_extra(component=LogComponent.CONFIG, path=candidate),
            )
            return loaded

    return LoadedSettings(settings=_apply_env_overrides(Settings()), path=None)


def apply_settings(settings: Settings) -> LogConfig:
    """Configure the ``seqalgos`` loggers from loaded settings.

    Args:
        settings: Settings returned by ``load_settings``.

    Returns:
        The resolved logging configuration.
    """
    return configure_logging(settings.log_format, log_level=settings.log_level)


def _resolve_candidate_path(candidate: Path) -> Path:
    return candidate if candidate.is_absolute() else (Path.cwd() / candidate).resolve()


def _load_candidate(candidate: Path, *, explicit: bool) -> LoadedSettings | None:
    if not candidate.exists():
        if explicit:
            raise ConfigReadError(candidate, FileNotFoundError(candidate))
        return None
    try:
        raw_map: dict[str, object] = tomllib.loads(candidate.read_text(encoding="utf-8"))
    # ignore JUSTIFIED: unreadable or malformed files surface as ConfigReadError
    except Exception as exc:  # noqa: BLE001
        raise ConfigReadError(candidate, exc) from exc

    payload = _extract_payload(candidate, raw_map)
    if payload is None:
        if explicit:
            message = f"{candidate.name} does not define a [tool.seqalgos] table"
            raise InvalidConfigFileError(candidate, ValueError(message))
        return None

    try:
        model = SettingsModel.model_validate(payload)
    except ValidationError as exc:
        raise InvalidConfigFileError(candidate, exc) from exc

    settings = _apply_env_overrides(settings_from_model(model))
    return LoadedSettings(settings=settings, path=candidate.resolve())


def _extract_payload(candidate: Path, raw_map: dict[str, object]) -> dict[str, object] | None:
    tool_section = raw_map.get("tool")
    is_pyproject = candidate.name == "pyproject.toml"
    if isinstance(tool_section, dict):
        section = cast("dict[str, object]", tool_section).get("seqalgos")
        if section is not None and not isinstance(section, dict):
            message = "[tool.seqalgos] must be a TOML table"
            raise InvalidConfigFileError(candidate, ValueError(message))
        if isinstance(section, dict):
            return cast("dict[str, object]", section)
    if is_pyproject:
        return None
    return {key: value for key, value in raw_map.items() if key != "tool"}


def _apply_env_overrides(settings: Settings) -> Settings:
    env_format = os.getenv(LOG_FORMAT_ENV)
    env_level = os.getenv(LOG_LEVEL_ENV)
    overrides: dict[str, object] = {}
    if env_format:
        overrides["log_format"] = env_format
    if env_level:
        overrides["log_level"] = env_level
    if not overrides:
        return settings
    merged = {"log_format": settings.log_format, "log_level": settings.log_level, **overrides}
    try:
        model = SettingsModel.model_validate(merged)
    except ValidationError as exc:
        message = f"Invalid {LOG_FORMAT_ENV}/{LOG_LEVEL_ENV} override: {exc}"
        raise ConfigValidationError(message) from exc
    return settings_from_model(model)


__all__ = [
    "CONFIG_FILENAMES",
    "LoadedSettings",
    "apply_settings",
    "load_settings",
    "load_settings_with_metadata",
]
