"""Metrics hook protocol and no-op default implementation.

:class:`~digestify.client.Digester` reports every call through a metrics
hook.  By default a :class:`NoopMetricsHook` is used so there is zero
overhead.  Any object satisfying :class:`MetricsHook` can route the data
points to StatsD, Prometheus or a load-test runner's own collector.

Emitted metric names:

* ``digestify.digests_total``       -- counter, tags ``algorithm``, ``status``
* ``digestify.digest_duration_ms``  -- timing, tag ``algorithm``
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Protocol that any metrics backend must satisfy.

    All methods accept an optional *tags* dict of string keys and values.
    """

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Increment a counter metric by *value*."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration in milliseconds."""
        ...

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Set a gauge metric to an absolute value."""
        ...


class NoopMetricsHook:
    """Metrics backend that silently discards all data points.

    Used when no hook is configured, so call sites never need
    ``if metrics is not None`` guards.
    """

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass
