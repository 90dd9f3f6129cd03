"""Shared test fixtures for all test modules."""

from collections.abc import Iterator
from pathlib import Path

import pytest

from tests.transport_helpers import FailingTransport, RecordingTransport
from viol.core.levels import LogLevel
from viol.core.logger import Logger
from viol.core.registry import set_global_level

# Environment variables read when a logger is constructed
_ENV_VARS = ("LOG_LEVEL", "NO_COLOUR", "NO_COLOR", "VIOL_ENV", "VIOL_APP_NAME")


@pytest.fixture(autouse=True)
def isolated_logging_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear logger environment variables and restore the global level."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    set_global_level(LogLevel.INFO)
    yield
    set_global_level(LogLevel.INFO)


@pytest.fixture
def log_db_path(tmp_path: Path) -> str:
    """Provide a temporary database path for SQLite transport tests."""
    return str(tmp_path / "logs.db")


@pytest.fixture
def recorder() -> RecordingTransport:
    """Transport recording every entry it receives."""
    return RecordingTransport()


@pytest.fixture
def failing() -> FailingTransport:
    """Transport that raises on every call."""
    return FailingTransport()


@pytest.fixture
def make_logger():
    """Factory fixture for loggers whose only transports are the ones given.

    Usage:
        def test_something(make_logger, recorder):
            logger = make_logger("app", recorder, level=LogLevel.DEBUG)
    """

    def _make(scope="app", *transports, **options) -> Logger:
        logger = Logger(scope, **options)
        logger.clear_transports()
        for transport in transports:
            logger.add_transport(transport)
        return logger

    return _make


@pytest.fixture
def app_logger(make_logger, recorder: RecordingTransport) -> Logger:
    """Logger scoped "app" with a single recording transport."""
    return make_logger("app", recorder)
