"""BDD step definitions for logger hierarchy features."""

from dataclasses import dataclass, field
from typing import Any

import pytest
from pytest_bdd import given, parsers, then, when

from tests.transport_helpers import FailingTransport, RecordingTransport
from viol.core.logger import Logger
from viol.core.registry import set_global_level


@dataclass
class LoggerScenarioContext:
    """Shared state between steps in a logger scenario."""

    transports: dict[str, Any] = field(default_factory=dict)
    root: Logger | None = None
    current: Logger | None = None
    error: Exception | None = None


@pytest.fixture
def ctx() -> LoggerScenarioContext:
    """Fresh scenario context for each test."""
    return LoggerScenarioContext()


def _parse_metadata(text: str) -> dict[str, int]:
    pairs = (item.split("=", 1) for item in text.split(","))
    return {key.strip(): int(value) for key, value in pairs}


def _log(ctx: LoggerScenarioContext, logger: Logger, message: str, level: str) -> None:
    try:
        getattr(logger, level)(message)
    except Exception as exc:
        ctx.error = exc


# === Background Steps ===
@given(parsers.parse('a recording transport named "{name}"'))
def step_recording_transport(ctx: LoggerScenarioContext, name: str) -> None:
    ctx.transports[name] = RecordingTransport()


@given(parsers.parse('a failing transport named "{name}"'))
def step_failing_transport(ctx: LoggerScenarioContext, name: str) -> None:
    ctx.transports[name] = FailingTransport()


@given(parsers.parse('a logger scoped "{scope}" using transport "{name}"'))
def step_logger(ctx: LoggerScenarioContext, scope: str, name: str) -> None:
    logger = Logger(scope)
    logger.clear_transports()
    logger.add_transport(ctx.transports[name])
    ctx.root = ctx.current = logger


# === Configuration Steps ===
@given(parsers.parse('the logger has metadata "{metadata}"'))
def step_logger_metadata(ctx: LoggerScenarioContext, metadata: str) -> None:
    assert ctx.root is not None
    transports = ctx.root.transports
    logger = Logger(ctx.root.scope, metadata=_parse_metadata(metadata))
    logger.clear_transports()
    for transport in transports:
        logger.add_transport(transport)
    ctx.root = ctx.current = logger


@given(parsers.parse('the logger uses transports "{names}"'))
def step_logger_transports(ctx: LoggerScenarioContext, names: str) -> None:
    assert ctx.root is not None
    ctx.root.clear_transports()
    for name in names.split(","):
        ctx.root.add_transport(ctx.transports[name])


@given(parsers.parse('the global level is "{level}"'))
@when(parsers.parse('the global level changes to "{level}"'))
def step_global_level(level: str) -> None:
    set_global_level(level)


# === Derivation Steps ===
@when(parsers.parse('I derive a child "{scope}"'))
def step_child(ctx: LoggerScenarioContext, scope: str) -> None:
    assert ctx.current is not None
    ctx.current = ctx.current.child(scope.split("/"))


@when(parsers.parse('I extend the metadata with "{metadata}"'))
def step_with_metadata(ctx: LoggerScenarioContext, metadata: str) -> None:
    assert ctx.current is not None
    ctx.current = ctx.current.with_metadata(_parse_metadata(metadata))


@when(parsers.parse('the child adds transport "{name}"'))
def step_child_adds(ctx: LoggerScenarioContext, name: str) -> None:
    assert ctx.current is not None
    ctx.current.add_transport(ctx.transports[name])


@when(parsers.parse('the child removes transport "{name}"'))
def step_child_removes(ctx: LoggerScenarioContext, name: str) -> None:
    assert ctx.current is not None
    ctx.current.remove_transport(ctx.transports[name])


@when("the root logger clears its transports")
def step_clear(ctx: LoggerScenarioContext) -> None:
    assert ctx.root is not None
    ctx.root.clear_transports()


# === Logging Steps ===
@when(parsers.parse('the current logger logs "{message}" at {level}'))
def step_current_logs(ctx: LoggerScenarioContext, message: str, level: str) -> None:
    assert ctx.current is not None
    _log(ctx, ctx.current, message, level)


@when(parsers.parse('the root logger logs "{message}" at {level}'))
def step_root_logs(ctx: LoggerScenarioContext, message: str, level: str) -> None:
    assert ctx.root is not None
    _log(ctx, ctx.root, message, level)


# === Assertion Steps ===
@then(parsers.re(r'transport "(?P<name>[^"]+)" received (?P<count>\d+) entr(y|ies)'))
def step_received(ctx: LoggerScenarioContext, name: str, count: str) -> None:
    assert len(ctx.transports[name].entries) == int(count)


@then(parsers.parse('the last entry on "{name}" has scope "{scope}"'))
def step_last_scope(ctx: LoggerScenarioContext, name: str, scope: str) -> None:
    assert ctx.transports[name].entries[-1].scope == tuple(scope.split("/"))


@then(parsers.parse('the last entry on "{name}" has metadata "{metadata}"'))
def step_last_metadata(ctx: LoggerScenarioContext, name: str, metadata: str) -> None:
    assert dict(ctx.transports[name].entries[-1].metadata) == _parse_metadata(metadata)


@then("no error escaped the log call")
def step_no_error(ctx: LoggerScenarioContext) -> None:
    assert ctx.error is None


@then(parsers.parse('the root logger has transports "{names}"'))
def step_root_transports(ctx: LoggerScenarioContext, names: str) -> None:
    assert ctx.root is not None
    expected = tuple(ctx.transports[name] for name in names.split(","))
    assert ctx.root.transports == expected


@then(parsers.parse('the current logger has transports "{names}"'))
def step_current_transports(ctx: LoggerScenarioContext, names: str) -> None:
    assert ctx.current is not None
    expected = tuple(ctx.transports[name] for name in names.split(","))
    assert ctx.current.transports == expected
