"""Human-readable console formatter with ANSI colour support."""

import zlib
from collections.abc import Callable
from datetime import datetime
from typing import Literal

from viol.core.colours import COLOURS, SCOPE_COLOURS, colourize
from viol.core.formatting.json_formatter import iso_timestamp
from viol.core.levels import LogLevel
from viol.core.models import LogEntry

TimeFormat = Literal["iso", "locale", "time"] | Callable[[datetime], str]

_LEVEL_COLOURS: dict[LogLevel, str] = {
    LogLevel.TRACE: COLOURS["FG_GRAY"],
    LogLevel.DEBUG: COLOURS["FG_WHITE"],
    LogLevel.INFO: COLOURS["FG_GREEN"],
    LogLevel.WARN: COLOURS["FG_YELLOW"],
    LogLevel.ERROR: COLOURS["FG_RED"],
    LogLevel.FATAL: COLOURS["BG_RED"] + COLOURS["FG_WHITE"],
}


class ConsoleFormatter:
    """Formats log entries as ``[time] [LEVEL] [scope/path] message``.

    Each scope path gets a colour from SCOPE_COLOURS picked by a checksum of
    the path, so a scope keeps its colour across formatters and runs.

    Example:
        ```python
        formatter = ConsoleFormatter(colourize=False, time_format="iso")
        formatter.format(entry)
        # [2024-01-01T12:00:00.000Z] [INFO ] [auth] user logged in
        ```
    """

    def __init__(
        self,
        timestamp: bool = True,
        colourize: bool = True,
        show_scope: bool = True,
        time_format: TimeFormat = "locale",
    ) -> None:
        """Initialize the formatter.

        Args:
            timestamp: Include the entry timestamp.
            colourize: Apply ANSI colour codes.
            show_scope: Include the scope path when it is not empty.
            time_format: "iso", "locale", "time", or a callable that
                receives a local datetime and returns the text to show.
        """
        self.timestamp = timestamp
        self.colourize = colourize
        self.show_scope = show_scope
        self.time_format = time_format

    def format(self, entry: LogEntry) -> str:
        """Render a log entry for terminal display."""
        parts: list[str] = []

        if self.timestamp:
            stamp = self._format_timestamp(entry.timestamp)
            parts.append(colourize(stamp, COLOURS["DIM"]) if self.colourize else stamp)

        parts.append(self._format_level(entry.level))

        if self.show_scope and entry.scope:
            parts.append(self._format_scope(entry.scope))

        parts.append(entry.message)
        return " ".join(parts)

    def _format_timestamp(self, timestamp: float) -> str:
        if callable(self.time_format):
            return f"[{self.time_format(datetime.fromtimestamp(timestamp))}]"
        if self.time_format == "iso":
            return f"[{iso_timestamp(timestamp)}]"
        moment = datetime.fromtimestamp(timestamp)
        if self.time_format == "time":
            return f"[{moment.strftime('%X')}]"
        return f"[{moment.strftime('%x %X')}]"

    def _format_level(self, level: LogLevel) -> str:
        label = f"[{level.name:<5}]"
        if not self.colourize:
            return label
        return colourize(label, _LEVEL_COLOURS.get(level, COLOURS["RESET"]))

    def _format_scope(self, scope: tuple[str, ...]) -> str:
        path = "/".join(scope)
        label = f"[{path}]"
        if not self.colourize:
            return label
        return colourize(label, self.scope_colour(path))

    @staticmethod
    def scope_colour(path: str) -> str:
        """Return the colour used for a scope path."""
        return SCOPE_COLOURS[zlib.crc32(path.encode("utf-8")) % len(SCOPE_COLOURS)]
