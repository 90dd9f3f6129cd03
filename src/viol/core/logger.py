"""Hierarchical logger with level filtering and transport fan-out."""

import time
from collections.abc import Iterable, Mapping
from typing import Any

from viol.adapters.transports.console import ConsoleTransport
from viol.core import registry
from viol.core.dispatch import dispatch
from viol.core.environment import EnvironmentSettings
from viol.core.formatting.console import ConsoleFormatter
from viol.core.levels import LogLevel, should_emit
from viol.core.models import LogEntry, LoggerOptions
from viol.core.ports import Transport


def _as_scope(scope: str | Iterable[str]) -> tuple[str, ...]:
    """Treat a single string as a one-segment scope."""
    if isinstance(scope, str):
        return (scope,)
    return tuple(scope)


class Logger:
    """Scoped logger that sends entries to its transports.

    A new logger gets one console transport. Loggers derived with child()
    or with_metadata() start with a copy of their parent's transport list:
    the transport objects are shared, the list is not.

    Example:
        ```python
        from viol import Logger, FileTransport

        logger = Logger("app")
        logger.add_transport(FileTransport("app.log"))

        db = logger.child("database")
        db.error("connection failed", {"attempts": 3})
        # scope: ("app", "database")
        ```
    """

    def __init__(
        self,
        scope: str | Iterable[str] = (),
        options: LoggerOptions | None = None,
        **overrides: Any,
    ) -> None:
        """Initialize the logger.

        Args:
            scope: Scope name or sequence of names for this logger.
            options: Base options. Defaults to LoggerOptions().
            **overrides: Option values replacing those in ``options``
                (level, colourize, timestamp, metadata).

        Environment settings (LOG_LEVEL, NO_COLOUR) are applied last.
        """
        self._scope = _as_scope(scope)
        merged = (options or LoggerOptions()).merge(**overrides)
        self._options = merged.merge(**EnvironmentSettings.from_env().overrides())
        self._transports: list[Transport] = [self._default_transport()]

    def _default_transport(self) -> Transport:
        formatter = ConsoleFormatter(
            timestamp=self._options.timestamp,
            colourize=self._options.colourize,
        )
        return ConsoleTransport(formatter)

    def __repr__(self) -> str:
        return (
            f"Logger(scope={'/'.join(self._scope)!r}, "
            f"level={self.effective_level.name})"
        )

    # --- Global level ---

    @staticmethod
    def set_global_level(level: LogLevel | int | str) -> None:
        """Set the level used by every logger without its own level."""
        registry.set_global_level(level)

    @staticmethod
    def get_global_level() -> LogLevel:
        """Return the current global log level."""
        return registry.get_global_level()

    # --- State ---

    @property
    def scope(self) -> tuple[str, ...]:
        """Scope path prefixed to every entry from this logger."""
        return self._scope

    @property
    def options(self) -> LoggerOptions:
        """Options in effect for this logger."""
        return self._options

    @property
    def transports(self) -> tuple[Transport, ...]:
        """Snapshot of the attached transports in attachment order."""
        return tuple(self._transports)

    @property
    def effective_level(self) -> LogLevel:
        """Explicit level if set, otherwise the current global level."""
        if self._options.level is not None:
            return self._options.level
        return registry.get_global_level()

    def is_enabled(self, level: LogLevel) -> bool:
        """Return True if a call at ``level`` would produce an entry."""
        return should_emit(level, self.effective_level)

    # --- Transports ---

    def add_transport(self, transport: Transport) -> None:
        """Append a transport. The same transport may be added twice."""
        self._transports.append(transport)

    def remove_transport(self, transport: Transport) -> None:
        """Remove the first attachment of this exact transport object.

        Removing a transport that is not attached does nothing.
        """
        for index, attached in enumerate(self._transports):
            if attached is transport:
                del self._transports[index]
                return

    def clear_transports(self) -> None:
        """Detach all transports. Later calls are delivered nowhere."""
        self._transports = []

    # --- Logging ---

    def log(self, level: LogLevel, message: str, *args: Any) -> None:
        """Build an entry and send it to every transport.

        Nothing is built when ``level`` is below the effective level.
        Transport failures are reported to the ``viol`` diagnostic logger
        and never raised here.
        """
        if level >= LogLevel.OFF or not self.is_enabled(level):
            return

        entry = LogEntry(
            level=LogLevel(level),
            message=message,
            timestamp=time.time(),
            scope=self._scope,
            args=args,
            metadata=self._options.metadata,
        )
        dispatch(entry, tuple(self._transports))

    def trace(self, message: str, *args: Any) -> None:
        """Log very detailed diagnostic information."""
        self.log(LogLevel.TRACE, message, *args)

    def debug(self, message: str, *args: Any) -> None:
        """Log debugging information."""
        self.log(LogLevel.DEBUG, message, *args)

    def info(self, message: str, *args: Any) -> None:
        """Log general progress information."""
        self.log(LogLevel.INFO, message, *args)

    def warn(self, message: str, *args: Any) -> None:
        """Log a potentially harmful situation."""
        self.log(LogLevel.WARN, message, *args)

    def error(self, message: str, *args: Any) -> None:
        """Log an error the application can continue from."""
        self.log(LogLevel.ERROR, message, *args)

    def fatal(self, message: str, *args: Any) -> None:
        """Log a severe error that may end the application."""
        self.log(LogLevel.FATAL, message, *args)

    # --- Derivation ---

    def _derive(self, scope: tuple[str, ...], **overrides: Any) -> "Logger":
        derived = Logger(scope, self._options, **overrides)
        derived._transports = list(self._transports)
        return derived

    def child(self, scope: str | Iterable[str], **overrides: Any) -> "Logger":
        """Create a logger with extra scope segments.

        Option keys passed replace the parent's values outright, metadata
        included. The child starts with the parent's transports.

        Args:
            scope: Segment or segments appended to this logger's scope.
            **overrides: Options to replace (level, colourize, timestamp,
                metadata).

        Returns:
            A new, independent Logger.
        """
        return self._derive(self._scope + _as_scope(scope), **overrides)

    def with_metadata(self, metadata: Mapping[str, Any] | None) -> "Logger":
        """Create a logger whose metadata also includes ``metadata``.

        Keys in ``metadata`` win over keys already present. Passing None
        keeps the current metadata. Scope and transports are the same as
        this logger's.
        """
        merged = {**(self._options.metadata or {}), **(metadata or {})}
        return self._derive(self._scope, metadata=merged)
