"""Bounded in-memory transport.

Keeps the most recent entries in a ring buffer so they can be inspected
or written out to a file on demand.
"""

import os
from collections import deque
from pathlib import Path

from viol.core.encoding.ndjson import encode_entries
from viol.core.formatting.json_formatter import JsonFormatter
from viol.core.models import LogEntry
from viol.core.ports import Formatter

# Entries between automatic dumps when auto_dump is enabled.
AUTO_DUMP_INTERVAL = 100


class MemoryTransport:
    """Ring buffer transport.

    When the buffer is full, the oldest entry is evicted to make room for
    the new one.

    Args:
        max_logs: Maximum number of entries to keep.
        filename: Default file written by dump().
        auto_dump: Dump to ``filename`` every AUTO_DUMP_INTERVAL entries.
        formatter: Formatter used for lines() and dump(). Defaults to
            JsonFormatter.
    """

    def __init__(
        self,
        max_logs: int = 1000,
        filename: str | os.PathLike[str] = "app.log",
        auto_dump: bool = False,
        formatter: Formatter | None = None,
    ) -> None:
        self._buffer: deque[LogEntry] = deque(maxlen=max_logs)
        self._filename = Path(filename)
        self._auto_dump = auto_dump
        self.formatter = formatter or JsonFormatter()

    def __len__(self) -> int:
        return len(self._buffer)

    @property
    def entries(self) -> list[LogEntry]:
        """Buffered entries, oldest first."""
        return list(self._buffer)

    def emit(self, entry: LogEntry) -> None:
        """Buffer a log entry."""
        self._buffer.append(entry)
        if self._auto_dump and len(self._buffer) % AUTO_DUMP_INTERVAL == 0:
            self.dump()

    def lines(self) -> list[str]:
        """Return buffered entries rendered by the formatter."""
        return [self.formatter.format(entry) for entry in self._buffer]

    def dump(self, path: str | os.PathLike[str] | None = None) -> Path:
        """Write all buffered entries to a file, one line each.

        Args:
            path: Destination file. Defaults to the configured filename.

        Returns:
            The path written.
        """
        target = Path(path) if path is not None else self._filename
        target.write_text(
            encode_entries(self._buffer, self.formatter), encoding="utf-8"
        )
        return target

    def clear(self) -> None:
        """Drop all buffered entries."""
        self._buffer.clear()
