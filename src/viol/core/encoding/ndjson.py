"""NDJSON encoder for log entries."""

from collections.abc import Iterable

from viol.core.formatting.json_formatter import JsonFormatter
from viol.core.models import LogEntry
from viol.core.ports import Formatter


def encode_entries(
    entries: Iterable[LogEntry], formatter: Formatter | None = None
) -> str:
    """Encode log entries to newline-delimited JSON.

    Args:
        entries: An iterable of LogEntry objects.
        formatter: Formatter producing one line per entry. Defaults to
            JsonFormatter.

    Returns:
        NDJSON string with one JSON object per line.
        Empty string if no entries.
    """
    fmt = formatter or JsonFormatter()
    lines = [fmt.format(entry) for entry in entries]

    if not lines:
        return ""

    return "\n".join(lines) + "\n"
