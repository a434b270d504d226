"""Shared test fixtures for the digestify test suite."""

from __future__ import annotations

import itertools
from typing import Any

import pytest

from digestify.client import Digester
from digestify.config import DigestifyConfig

_logger_ids = itertools.count()


class RecordingMetricsHook:
    """A metrics backend that records all calls for assertion."""

    def __init__(self) -> None:
        self.increments: list[dict[str, Any]] = []
        self.timings: list[dict[str, Any]] = []
        self.gauges: list[dict[str, Any]] = []

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.increments.append({"name": name, "value": value, "tags": tags})

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.timings.append({"name": name, "ms": ms, "tags": tags})

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.gauges.append({"name": name, "value": value, "tags": tags})


@pytest.fixture
def metrics() -> RecordingMetricsHook:
    return RecordingMetricsHook()


@pytest.fixture
def logger_name() -> str:
    """A logger name no other test has configured yet."""
    return f"digestify.test.{next(_logger_ids)}"


@pytest.fixture
def config(metrics: RecordingMetricsHook, logger_name: str) -> DigestifyConfig:
    """Recording metrics, quiet logging."""
    return DigestifyConfig(metrics=metrics, logger_name=logger_name)


@pytest.fixture
def digester(config: DigestifyConfig) -> Digester:
    return Digester(config)
