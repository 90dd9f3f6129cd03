"""JSON formatter for structured, machine-readable output."""

import json
from datetime import datetime, timezone
from typing import Any

from viol.core.models import LogEntry


def iso_timestamp(timestamp: float) -> str:
    """Render a Unix timestamp as ISO-8601 UTC with milliseconds."""
    moment = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class JsonFormatter:
    """Formats log entries as single-line JSON objects.

    Metadata and args are only included when non-empty. Values that are not
    JSON serializable are rendered with repr().

    Example:
        ```python
        formatter = JsonFormatter()
        formatter.format(entry)
        # {"timestamp":"2024-01-01T12:00:00.000Z","level":2,"scope":["app"],"message":"hello"}
        ```
    """

    def format(self, entry: LogEntry) -> str:
        """Render a log entry as a JSON string."""
        record: dict[str, Any] = {
            "timestamp": iso_timestamp(entry.timestamp),
            "level": int(entry.level),
            "scope": list(entry.scope),
            "message": entry.message,
        }
        if entry.has_metadata:
            record["metadata"] = dict(entry.metadata or {})
        if entry.args:
            record["args"] = list(entry.args)
        return json.dumps(record, default=repr, separators=(",", ":"))
