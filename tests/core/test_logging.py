# tests/core/test_logging.py
"""Tests for logging configuration."""

import json
import logging

import pytest

from meterline.core.logging import configure_logging, get_logger


class TestConfigureLogging:
    def test_sets_root_level(self) -> None:
        configure_logging(level="WARNING")
        assert logging.getLogger().level == logging.WARNING

    def test_noisy_loggers_never_below_warning(self) -> None:
        configure_logging(level="DEBUG")
        assert logging.getLogger("pluggy").level == logging.WARNING

    def test_noisy_loggers_follow_stricter_root(self) -> None:
        configure_logging(level="ERROR")
        assert logging.getLogger("dynaconf").level == logging.ERROR

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(json_output=True, level="INFO")

        get_logger("meterline.test").info("agent_started", sources=2)

        line = capsys.readouterr().out.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "agent_started"
        assert payload["sources"] == 2
        assert payload["level"] == "info"
        assert "_record" not in payload


    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level: 'loud'"):
            configure_logging(level="loud")
