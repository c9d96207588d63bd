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


"""Structured logging for the ``seqalgos`` logger hierarchy.

The library only emits records; nothing is configured on import. Applications
(or tests) call `configure_logging` to attach one handler to the ``seqalgos``
logger, and the algorithm modules attach `structured_extra` fields to the
records they emit so the JSON formatter can surface them.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Final, SupportsInt, cast

from seqalgos.compat import UTC, TypedDict, Unpack, override
from seqalgos.core.model_types import LogComponent, LogFormat, LogLevel

ROOT_LOGGER_NAME: Final[str] = "seqalgos"
LOG_FORMAT_ENV: Final[str] = "SEQALGOS_LOG_FORMAT"
LOG_LEVEL_ENV: Final[str] = "SEQALGOS_LOG_LEVEL"

CHILD_LOGGERS: Final[tuple[str, ...]] = tuple(
    f"{ROOT_LOGGER_NAME}.{component.value}" for component in LogComponent
)


def _as_int(value: object) -> int:
    return int(cast("SupportsInt | str", value))


def _as_path(value: object) -> str:
    return os.fspath(cast("str | os.PathLike[str]", value))


# Optional structured fields, in the order the JSON formatter writes them.
_FIELD_COERCERS: Final[Mapping[str, Callable[[object], object]]] = {
    "operation": str,
    "count": _as_int,
    "removed": _as_int,
    "path": _as_path,
}
STRUCTURED_FIELDS: Final[tuple[str, ...]] = ("component", *_FIELD_COERCERS, "details")


@dataclass(slots=True, frozen=True)
class LogConfig:
    """Resolved logging configuration."""

    format: LogFormat
    level: int
    level_name: str


class JSONLogFormatter(logging.Formatter):
    """Render each record as one JSON object per line."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (field, getattr(record, field)) for field in STRUCTURED_FIELDS if hasattr(record, field)
        )
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


class TextLogFormatter(logging.Formatter):
    """Readable, single-line formatter."""

    def __init__(self) -> None:
        super().__init__("[%(levelname)s] %(message)s")


def _resolve_level(level: str | int) -> tuple[int, str]:
    if isinstance(level, int):
        return level, logging.getLevelName(level).lower()
    resolved = LogLevel.from_str(level)
    return resolved.numeric, resolved.value


def configure_logging(
    log_format: LogFormat | str | None = None,
    *,
    log_level: str | int | None = None,
) -> LogConfig:
    """Attach a single handler to the ``seqalgos`` logger.

    Existing handlers on that logger are replaced, propagation to the root
    logger is turned off and the component loggers are reset to inherit the
    new level.

    Args:
        log_format: ``text`` or ``json``. ``None`` reads ``SEQALGOS_LOG_FORMAT``
            and falls back to ``text``.
        log_level: Level name or numeric level. ``None`` reads
            ``SEQALGOS_LOG_LEVEL`` and falls back to ``info``.

    Returns:
        The format and level that were applied.

    Raises:
        ValueError: If the format or level name is not recognised.
    """
    if log_format is None:
        log_format = os.getenv(LOG_FORMAT_ENV) or LogFormat.TEXT
    if log_level is None:
        log_level = os.getenv(LOG_LEVEL_ENV) or LogLevel.INFO
    selected_format = LogFormat.from_str(log_format)
    level_value, level_name = _resolve_level(log_level)

    handler = logging.StreamHandler()
    formatter = JSONLogFormatter() if selected_format is LogFormat.JSON else TextLogFormatter()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level_value)
    root_logger.propagate = False
    for name in CHILD_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET)
    return LogConfig(format=selected_format, level=level_value, level_name=level_name)


class _StructuredLogBase(TypedDict):
    component: LogComponent


class StructuredLogExtra(_StructuredLogBase, total=False):
    """Structured fields attached to seqalgos log records."""

    operation: str
    count: int
    removed: int
    path: str
    details: Mapping[str, object]


class _StructuredLogKwargs(TypedDict, total=False):
    operation: str
    count: int
    removed: int
    path: str | os.PathLike[str]
    details: Mapping[str, object]


def structured_extra(
    component: LogComponent,
    **kwargs: Unpack[_StructuredLogKwargs],
) -> StructuredLogExtra:
    """Build the ``extra`` mapping for a log record.

    ``None`` values and empty ``details`` are dropped; counts are coerced to
    ``int`` and paths to ``str``.
    """
    fields = cast("dict[str, object]", kwargs)
    extra: StructuredLogExtra = {"component": component}
    payload = cast("dict[str, object]", extra)
    for name, coerce in _FIELD_COERCERS.items():
        value = fields.get(name)
        if value is not None:
            payload[name] = coerce(value)
    details = fields.get("details")
    if isinstance(details, Mapping) and details:
        payload["details"] = dict(cast("Mapping[str, object]", details))
    return extra


__all__ = [
    "LogConfig",
    "StructuredLogExtra",
    "configure_logging",
    "structured_extra",
]
