"""File transport with size-based rotation."""

import os
import threading
from pathlib import Path

from viol.core.formatting.json_formatter import JsonFormatter
from viol.core.models import LogEntry
from viol.core.ports import Formatter


class FileTransport:
    """Transport that appends one formatted line per entry to a file.

    When ``max_size`` is set and the file has reached it, the file is
    rotated before the next write: app.log -> app.log.1 -> app.log.2 ...
    At most ``max_files`` rotated files are kept.

    Example:
        ```python
        transport = FileTransport("app.log", max_size=10 * 1024 * 1024, max_files=5)
        logger.add_transport(transport)
        ```
    """

    def __init__(
        self,
        filename: str | os.PathLike[str],
        max_size: int | None = None,
        max_files: int = 5,
        formatter: Formatter | None = None,
    ) -> None:
        """Initialize the transport and create the log file if missing.

        Args:
            filename: Path to the log file.
            max_size: Size in bytes that triggers rotation. None disables it.
            max_files: Number of rotated files to keep.
            formatter: Formatter for entries. Defaults to JsonFormatter.

        Raises:
            ValueError: If max_files is less than 1.
            OSError: If the file cannot be created.
        """
        if max_files < 1:
            raise ValueError("max_files must be at least 1")
        self._path = Path(filename)
        self._max_size = max_size
        self._max_files = max_files
        self.formatter = formatter or JsonFormatter()
        self._lock = threading.Lock()
        self._path.touch(exist_ok=True)

    @property
    def path(self) -> Path:
        """Path of the active log file."""
        return self._path

    def __repr__(self) -> str:
        return f"FileTransport({str(self._path)!r})"

    def emit(self, entry: LogEntry) -> None:
        """Append a log entry, rotating first if the file is full."""
        line = f"{self.formatter.format(entry)}\n"
        with self._lock:
            if self._max_size:
                self._rotate_if_needed()
            with self._path.open("a", encoding="utf-8") as fh:
                fh.write(line)

    def _backup_path(self, index: int) -> Path:
        return self._path.with_name(f"{self._path.name}.{index}")

    def _rotate_if_needed(self) -> None:
        if not self._path.exists() or self._max_size is None:
            return
        if self._path.stat().st_size < self._max_size:
            return

        for index in range(self._max_files, 0, -1):
            backup = self._backup_path(index)
            if not backup.exists():
                continue
            if index == self._max_files:
                backup.unlink()
            else:
                backup.replace(self._backup_path(index + 1))

        self._path.replace(self._backup_path(1))
        self._path.touch()
