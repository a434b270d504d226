"""Tests for DigestifyConfig validation."""

from __future__ import annotations

import logging

import pytest

from digestify.config import DigestifyConfig


class TestDefaults:
    def test_defaults(self):
        config = DigestifyConfig()
        assert config.metrics is None
        assert config.logger_name == "digestify"
        assert config.log_level == logging.WARNING
        assert config.debug_log_calls is False


class TestValidation:
    def test_empty_logger_name_rejected(self):
        with pytest.raises(ValueError, match="logger_name"):
            DigestifyConfig(logger_name="")

    @pytest.mark.parametrize("level", ["debug", "INFO", "Warning", logging.ERROR])
    def test_known_levels_accepted(self, level):
        assert DigestifyConfig(log_level=level).log_level == level

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError, match="unknown log level"):
            DigestifyConfig(log_level="LOUD")

    @pytest.mark.parametrize("level", [None, True, False, 1.5, ["DEBUG"]])
    def test_non_level_types_rejected(self, level):
        with pytest.raises(ValueError, match="unknown log level"):
            DigestifyConfig(log_level=level)

    def test_metrics_must_satisfy_protocol(self):
        with pytest.raises(ValueError, match="metrics must implement"):
            DigestifyConfig(metrics=object())

    def test_recording_hook_accepted(self, metrics):
        assert DigestifyConfig(metrics=metrics).metrics is metrics
