"""Severity levels and the level filter."""

import logging
from enum import IntEnum


class LogLevel(IntEnum):
    """Log severity levels in ascending order.

    OFF is a threshold only: setting a logger to OFF suppresses every call,
    and no entry is ever created with level OFF.
    """

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5
    OFF = 6

    @classmethod
    def parse(cls, value: "LogLevel | int | str") -> "LogLevel":
        """Return the LogLevel for a member, an int or a case-insensitive name.

        Raises:
            ValueError: If the value does not name a level.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"Unknown log level: {value!r}") from None
        return cls(value)

    @classmethod
    def from_python_level(cls, levelno: int) -> "LogLevel":
        """Translate a stdlib logging level number into a LogLevel."""
        if levelno < logging.DEBUG:
            return cls.TRACE
        if levelno < logging.INFO:
            return cls.DEBUG
        if levelno < logging.WARNING:
            return cls.INFO
        if levelno < logging.ERROR:
            return cls.WARN
        if levelno < logging.CRITICAL:
            return cls.ERROR
        return cls.FATAL


def should_emit(level: LogLevel, effective_level: LogLevel) -> bool:
    """Return True if an entry at ``level`` passes ``effective_level``."""
    return level >= effective_level
