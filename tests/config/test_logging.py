"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from dagkit.config.logging import configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("dagkit").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("dagkit").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("dagkit.test").warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "dagkit.test"
        assert "timestamp" in parsed

    def test_stdlib_records_get_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("dagkit.services.traversal").debug("Back-edge %r -> %r", "a", "b")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Back-edge 'a' -> 'b'"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "dagkit.services.traversal"

    def test_debug_hidden_when_not_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("dagkit.services.graph").debug("quiet")
        logging.getLogger("networkx").debug("noise")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1

    def test_json_traceback_is_structured(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        try:
            raise ValueError("bad graph")
        except ValueError:
            logging.getLogger("dagkit.services.base").debug("Load failed", exc_info=True)
        [line] = capfd.readouterr().err.strip().splitlines()
        parsed = json.loads(line)
        assert parsed["event"] == "Load failed"
        assert parsed["exception"][0]["exc_type"] == "ValueError"
