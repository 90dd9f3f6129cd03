"""Key/value storage transport."""

import re
import uuid
from collections.abc import MutableMapping

from viol.core.formatting.json_formatter import JsonFormatter
from viol.core.models import LogEntry
from viol.core.ports import Formatter


class StorageTransport:
    """Transport that stores formatted entries in a key/value mapping.

    Works with any MutableMapping[str, str]: a dict, a shelve.Shelf, or a
    mapping backed by an external store. Keys sort chronologically, so once
    more than ``max_entries`` keys carry the prefix, the oldest are evicted.

    Args:
        storage: Mapping to write to. Defaults to a new dict.
        key_prefix: Prefix identifying this transport's keys.
        max_entries: Maximum number of entries kept.
        formatter: Formatter for entries. Defaults to JsonFormatter.
    """

    def __init__(
        self,
        storage: MutableMapping[str, str] | None = None,
        key_prefix: str = "viol-logs",
        max_entries: int = 1000,
        formatter: Formatter | None = None,
    ) -> None:
        if storage is None:
            storage = {}
        if not isinstance(storage, MutableMapping):
            raise TypeError("StorageTransport requires a mutable mapping")
        self._storage = storage
        self._key_prefix = key_prefix
        # Only keys this transport writes: prefix, 13+ digit millis, 7 hex chars
        self._key_pattern = re.compile(
            rf"{re.escape(key_prefix)}-\d{{13,}}-[0-9a-f]{{7}}"
        )
        self._max_entries = max_entries
        self.formatter = formatter or JsonFormatter()

    def emit(self, entry: LogEntry) -> None:
        """Store a log entry and evict the oldest beyond the limit."""
        millis = int(entry.timestamp * 1000)
        key = f"{self._key_prefix}-{millis:013d}-{uuid.uuid4().hex[:7]}"
        self._storage[key] = self.formatter.format(entry)
        self._cleanup_old_entries()

    def _keys(self) -> list[str]:
        pattern = self._key_pattern
        return sorted(key for key in self._storage if pattern.fullmatch(key))

    def _cleanup_old_entries(self) -> None:
        keys = self._keys()
        for key in keys[: max(len(keys) - self._max_entries, 0)]:
            del self._storage[key]

    def get_logs(self) -> list[str]:
        """Return stored entries, oldest first."""
        return [self._storage[key] for key in self._keys()]

    def clear_logs(self) -> None:
        """Remove all entries stored under this transport's prefix."""
        for key in self._keys():
            del self._storage[key]
