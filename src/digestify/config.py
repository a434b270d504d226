"""Configuration for :class:`~digestify.client.Digester`.

The module-level functions in :mod:`digestify.crypto` take no
configuration; only the instrumented digester reads a
:class:`DigestifyConfig`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from digestify.observability.logger import resolve_level
from digestify.observability.metrics import MetricsHook


@dataclass
class DigestifyConfig:
    """Every tuneable knob of a :class:`~digestify.client.Digester`.

    Parameters
    ----------
    metrics:
        Backend satisfying :class:`~digestify.observability.MetricsHook`.
        ``None`` selects :class:`~digestify.observability.NoopMetricsHook`.
    logger_name:
        Name of the structured logger the digester writes to.
    log_level:
        Level applied when that logger is first configured, as an ``int``
        or a case-insensitive name such as ``"debug"``.
    debug_log_calls:
        Emit one DEBUG record per digest with the algorithm, input length
        and duration.  Input text and digests are never logged.
    """

    metrics: Any | None = None

    logger_name: str = "digestify"

    log_level: int | str = logging.WARNING

    debug_log_calls: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.logger_name:
            raise ValueError("logger_name must be a non-empty string")
        resolve_level(self.log_level)
        if self.metrics is not None and not isinstance(self.metrics, MetricsHook):
            raise ValueError(
                f"metrics must implement increment/timing/gauge, "
                f"got {type(self.metrics).__name__}"
            )
