"""Tests for the file transport."""

import json
from pathlib import Path

import pytest

from viol.adapters.transports.file import FileTransport
from viol.core.formatting import ConsoleFormatter
from viol.core.levels import LogLevel
from viol.core.models import LogEntry

pytestmark = pytest.mark.tier(2)


def _entry(message: str = "written") -> LogEntry:
    return LogEntry(level=LogLevel.INFO, message=message, timestamp=1702300000.0)


def _messages(path: Path) -> list[str]:
    return [json.loads(line)["message"] for line in path.read_text().splitlines()]


@pytest.mark.transports
class TestFileTransport:
    """Tests for FileTransport."""

    def test_creates_file_on_construction(self, tmp_path: Path) -> None:
        """The log file exists as soon as the transport does."""
        path = tmp_path / "app.log"
        FileTransport(path)
        assert path.exists()
        assert path.read_text() == ""

    def test_appends_json_lines(self, tmp_path: Path) -> None:
        """Entries are appended one JSON line each."""
        transport = FileTransport(tmp_path / "app.log")

        transport.emit(_entry("first"))
        transport.emit(_entry("second"))

        assert _messages(transport.path) == ["first", "second"]

    def test_keeps_existing_content(self, tmp_path: Path) -> None:
        """Opening an existing file appends rather than truncates."""
        path = tmp_path / "app.log"
        path.write_text('{"message":"old"}\n')

        FileTransport(path).emit(_entry("new"))

        assert _messages(path) == ["old", "new"]

    def test_custom_formatter(self, tmp_path: Path) -> None:
        """Lines are rendered by the configured formatter."""
        transport = FileTransport(
            tmp_path / "app.log",
            formatter=ConsoleFormatter(colourize=False, timestamp=False),
        )
        transport.emit(_entry())
        assert transport.path.read_text() == "[INFO ] written\n"

    def test_rotation(self, tmp_path: Path) -> None:
        """A full file is shifted to .1 before the next write."""
        transport = FileTransport(tmp_path / "app.log", max_size=1, max_files=3)

        for message in ("one", "two", "three"):
            transport.emit(_entry(message))

        assert _messages(tmp_path / "app.log") == ["three"]
        assert _messages(tmp_path / "app.log.1") == ["two"]
        assert _messages(tmp_path / "app.log.2") == ["one"]

    def test_rotation_drops_oldest(self, tmp_path: Path) -> None:
        """No more than max_files rotated files are kept."""
        transport = FileTransport(tmp_path / "app.log", max_size=1, max_files=1)

        for message in ("one", "two", "three"):
            transport.emit(_entry(message))

        assert _messages(tmp_path / "app.log") == ["three"]
        assert _messages(tmp_path / "app.log.1") == ["two"]
        assert not (tmp_path / "app.log.2").exists()

    def test_no_rotation_below_max_size(self, tmp_path: Path) -> None:
        """Files under max_size keep growing."""
        transport = FileTransport(tmp_path / "app.log", max_size=1024 * 1024)

        for message in ("one", "two"):
            transport.emit(_entry(message))

        assert _messages(transport.path) == ["one", "two"]
        assert not (tmp_path / "app.log.1").exists()

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        """Construction fails when the file cannot be created."""
        with pytest.raises(OSError):
            FileTransport(tmp_path / "missing" / "app.log")

    def test_invalid_max_files(self, tmp_path: Path) -> None:
        """max_files must be positive."""
        with pytest.raises(ValueError, match="max_files"):
            FileTransport(tmp_path / "app.log", max_files=0)

    def test_repr(self, tmp_path: Path) -> None:
        """repr() shows the file path."""
        path = tmp_path / "app.log"
        assert repr(FileTransport(path)) == f"FileTransport({str(path)!r})"
