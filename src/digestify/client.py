"""Instrumented digest client.

:class:`Digester` exposes the same functions as :mod:`digestify.crypto`
and returns the same strings, but reports each call to a metrics hook and,
when asked, to the structured logger.  Use it when a load test should
account for its hashing work; use the plain functions otherwise.

Usage::

    from digestify import Digester

    digester = Digester(metrics=my_statsd_hook, debug_log_calls=True,
                        log_level="DEBUG")
    digester.sha256("payload")
"""

from __future__ import annotations

import time
from typing import Any

from digestify import crypto
from digestify.config import DigestifyConfig
from digestify.errors import DigestifyError
from digestify.models import Algorithm
from digestify.observability import NoopMetricsHook, get_logger
from digestify.observability.logger import resolve_level


class Digester:
    """Digest facade bound to a :class:`DigestifyConfig`.

    Parameters
    ----------
    config:
        A ready-made configuration.  Mutually exclusive with *kwargs*.
    **kwargs:
        Forwarded to :class:`DigestifyConfig` when *config* is omitted.
    """

    def __init__(self, config: DigestifyConfig | None = None, **kwargs: Any) -> None:
        if config is not None and kwargs:
            raise TypeError("pass either a DigestifyConfig or keyword arguments, not both")
        self._config = config if config is not None else DigestifyConfig(**kwargs)
        self._metrics = self._config.metrics or NoopMetricsHook()
        self._log = get_logger(self._config.logger_name, level=self._config.log_level)
        # get_logger only sets the level on first use of a name.
        self._log.setLevel(resolve_level(self._config.log_level))

    @property
    def config(self) -> DigestifyConfig:
        return self._config

    # ------------------------------------------------------------------
    # Digests
    # ------------------------------------------------------------------

    def md5(self, text: str) -> str:
        """Instrumented :func:`digestify.crypto.md5`."""
        return self._digest(Algorithm.MD5, text)

    def sha1(self, text: str) -> str:
        """Instrumented :func:`digestify.crypto.sha1`."""
        return self._digest(Algorithm.SHA1, text)

    def sha224(self, text: str) -> str:
        return self._digest(Algorithm.SHA224, text)

    def sha256(self, text: str) -> str:
        return self._digest(Algorithm.SHA256, text)

    def sha384(self, text: str) -> str:
        return self._digest(Algorithm.SHA384, text)

    def sha512(self, text: str) -> str:
        return self._digest(Algorithm.SHA512, text)

    def sha512_224(self, text: str) -> str:
        return self._digest(Algorithm.SHA512_224, text)

    def sha512_256(self, text: str) -> str:
        return self._digest(Algorithm.SHA512_256, text)

    def ripemd160(self, text: str) -> str:
        return self._digest(Algorithm.RIPEMD160, text)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _digest(self, algorithm: Algorithm, text: str) -> str:
        """Run the facade function for *algorithm* and report the call.

        Errors from the facade are counted, logged at WARNING and
        re-raised unchanged.
        """
        func = getattr(crypto, algorithm.value)
        name = algorithm.value
        start = time.perf_counter()
        try:
            result = func(text)
        except DigestifyError as exc:
            self._metrics.increment(
                "digestify.digests_total",
                tags={"algorithm": name, "status": "error"},
            )
            self._log.warning(
                "digest failed",
                extra={
                    "extra_fields": {
                        "op": "digest",
                        "algorithm": name,
                        "error_code": exc.code,
                        "context": exc.context,
                    }
                },
            )
            raise
        elapsed_ms = (time.perf_counter() - start) * 1000

        self._metrics.increment(
            "digestify.digests_total",
            tags={"algorithm": name, "status": "ok"},
        )
        self._metrics.timing(
            "digestify.digest_duration_ms",
            elapsed_ms,
            tags={"algorithm": name},
        )
        if self._config.debug_log_calls:
            self._log.debug(
                "digest computed",
                extra={
                    "extra_fields": {
                        "op": "digest",
                        "algorithm": name,
                        "input_chars": len(text),
                        "input_bytes": len(crypto.encode_input(text)),
                        "duration_ms": round(elapsed_ms, 3),
                    }
                },
            )
        return result
