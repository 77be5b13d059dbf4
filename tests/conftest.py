"""Shared pytest fixtures and test helpers for workq tests."""

from __future__ import annotations

import gc
import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from workq.domain.container import TaskContainer
from workq.domain.registry import live_objects
from workq.services.telemetry import _current_span, disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def container() -> TaskContainer:
    return TaskContainer()


@pytest.fixture
def baseline() -> int:
    """Registry count after collecting garbage left by earlier tests."""
    gc.collect()
    return live_objects()


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """``-v`` runs enable telemetry for the whole thread; undo it."""
    yield
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """CLI runs point the root handler at a stream that is closed afterwards."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    workq_level = logging.getLogger("workq").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("workq").setLevel(workq_level)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty directory so no workq.toml is discovered."""
    monkeypatch.delenv("WORKQ_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def delta(baseline: int) -> int:
    """Registry change since *baseline*, after a collection pass."""
    gc.collect()
    return live_objects() - baseline
