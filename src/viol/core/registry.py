"""Process-wide default log level.

The registry starts at INFO and only changes through set_global_level.
Loggers without an explicit level read it on every call, so a change
applies to loggers that already exist.
"""

import threading

from viol.core.levels import LogLevel

_lock = threading.Lock()
_global_level = LogLevel.INFO


def get_global_level() -> LogLevel:
    """Return the current global log level."""
    with _lock:
        return _global_level


def set_global_level(level: LogLevel | int | str) -> None:
    """Set the global log level for every logger without its own level.

    Args:
        level: A LogLevel, its integer value, or its name.
    """
    global _global_level
    parsed = LogLevel.parse(level)
    with _lock:
        _global_level = parsed
