"""Core domain models for structured logging."""

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

from viol.core.levels import LogLevel


@dataclass(frozen=True)
class LogEntry:
    """A single log record handed to transports.

    Attributes:
        level: Severity of the entry.
        message: The primary log message.
        timestamp: Unix timestamp in seconds, taken when the entry is built.
        scope: Hierarchical scope path, outermost first.
        args: Extra positional values passed to the logging call.
        metadata: Structured fields attached by the logger, if any.
    """

    level: LogLevel
    message: str
    timestamp: float
    scope: tuple[str, ...] = ()
    args: tuple[Any, ...] = ()
    metadata: Mapping[str, Any] | None = None

    @property
    def has_metadata(self) -> bool:
        """True when metadata is present and not empty."""
        return bool(self.metadata)


@dataclass(frozen=True)
class LoggerOptions:
    """Configuration carried by a logger node.

    Attributes:
        level: Minimum level for this logger. None falls back to the
            global level at the time of each call.
        colourize: Whether the default console output uses ANSI colours.
        timestamp: Whether the default console output shows timestamps.
        metadata: Structured fields attached to every entry.
    """

    level: LogLevel | None = None
    colourize: bool = True
    timestamp: bool = True
    metadata: Mapping[str, Any] | None = None

    def merge(self, **overrides: Any) -> "LoggerOptions":
        """Return a copy where every key passed replaces the current value.

        Raises:
            TypeError: If a key does not name an option.
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise TypeError(f"Unknown logger options: {', '.join(unknown)}")
        if overrides.get("level") is not None:
            overrides["level"] = LogLevel.parse(overrides["level"])
        return replace(self, **overrides)
