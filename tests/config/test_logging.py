"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from workq.config.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    workq_logger = logging.getLogger("workq")
    workq_level = workq_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    workq_logger.setLevel(workq_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("workq").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_default_is_warning(self) -> None:
        configure_logging()
        assert logging.getLogger("workq").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("workq.test").warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "workq.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("workq.plugins.manager").debug("Registered plugin: recorder")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Registered plugin: recorder"
        assert parsed["level"] == "debug"

    def test_debug_suppressed_when_not_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("workq.services.drain").debug("Draining %d item(s)", 8)
        assert capfd.readouterr().err == ""

    def test_drain_warning_reaches_stderr(self, capfd: pytest.CaptureFixture[str]) -> None:
        from workq.domain.container import TaskContainer
        from workq.services.drain import DrainService
        from workq.services.sequence import build_demo_sequence

        configure_logging(verbose=False, log_json=True)
        DrainService().drain(build_demo_sequence(TaskContainer()))
        lines = [json.loads(line) for line in capfd.readouterr().err.splitlines() if line]
        assert [line["event"] for line in lines] == ["clear discarded 1 pending item(s)"]
        assert lines[0]["logger"] == "workq.services.drain"
