"""Structured JSON logger for digestify.

Each record is written as one line of JSON so that load-test runners and
log shippers can ingest it without a custom parser::

    {"ts": "2026-10-17T12:00:00.123456+00:00", "level": "DEBUG",
     "logger": "digestify.client", "message": "digest computed",
     "op": "digest", "algorithm": "sha1", "input_chars": 11,
     "input_bytes": 11, "duration_ms": 0.004}

Usage::

    from digestify.observability import get_logger

    log = get_logger("digestify.client", level="DEBUG")
    log.debug("digest computed", extra={"extra_fields": {"algorithm": "md5"}})
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any


class StructuredFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    Guaranteed keys are ``ts`` (ISO-8601 UTC), ``level``, ``logger`` and
    ``message``.  Structured fields passed as
    ``extra={"extra_fields": {...}}`` are merged into the top level, and
    ``exception`` / ``stack_info`` are added when the record carries them.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra_fields: dict[str, Any] | None = getattr(
            record, "extra_fields", None
        )
        if extra_fields is not None:
            log_entry.update(extra_fields)

        if record.exc_info and record.exc_info[1] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)

        if record.stack_info:
            log_entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(log_entry, default=str)


# One handler per logger name, so repeated get_logger calls never stack
# duplicate handlers.
_configured_loggers: set[str] = set()


def resolve_level(level: int | str) -> int:
    """Turn ``"info"`` / ``"INFO"`` / ``logging.INFO`` into an ``int``.

    Raises :class:`ValueError` for names :mod:`logging` does not know and
    for anything that is neither a ``str`` nor a non-``bool`` ``int``.
    """
    if isinstance(level, bool) or not isinstance(level, (int, str)):
        raise ValueError(f"unknown log level {level!r}")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level {level!r}")
    return resolved


def get_logger(
    name: str = "digestify",
    *,
    level: int | str = logging.DEBUG,
    stream: Any | None = None,
) -> logging.Logger:
    """Get or create a structured JSON logger.

    Parameters
    ----------
    name:
        Logger name.  Defaults to ``"digestify"``.
    level:
        Minimum log level, as an ``int`` or a case-insensitive name.  Only
        applied the first time *name* is configured.
    stream:
        Output stream for the handler.  Defaults to ``sys.stderr``.

    Returns
    -------
    logging.Logger
        A logger with a :class:`StructuredFormatter` handler attached.
        Repeated calls with the same *name* return the same logger and do
        **not** add duplicate handlers.
    """
    logger = logging.getLogger(name)

    if name not in _configured_loggers:
        logger.setLevel(resolve_level(level))

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)

        logger.propagate = False

        _configured_loggers.add(name)

    return logger
