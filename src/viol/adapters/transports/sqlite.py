"""SQLite transport using aiosqlite.

Writes are coroutines, so the logger schedules them without waiting:
on the caller's event loop when one is running, otherwise on the
background dispatch loop.
"""

import asyncio
import json
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import aiosqlite

from viol.core.levels import LogLevel
from viol.core.models import LogEntry

_LOGS_SCHEMA = """
CREATE TABLE IF NOT EXISTS logs (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    timestamp REAL NOT NULL,
    level INTEGER NOT NULL,
    scope TEXT NOT NULL DEFAULT '[]',
    message TEXT NOT NULL,
    metadata TEXT NOT NULL DEFAULT '{}',
    args TEXT NOT NULL DEFAULT '[]'
);
CREATE INDEX IF NOT EXISTS idx_logs_timestamp ON logs(timestamp);
"""

_INSERT_LOG = """
INSERT INTO logs (timestamp, level, scope, message, metadata, args)
VALUES (?, ?, ?, ?, ?, ?)
"""

_SELECT_LOGS = """
SELECT timestamp, level, scope, message, metadata, args
FROM logs
ORDER BY id ASC
"""

_COUNT_LOGS = """
SELECT COUNT(*) FROM logs
"""


def _safe_json_loads(data: str, default: Any) -> Any:
    """Parse JSON data, returning default on decode error."""
    try:
        return json.loads(data)
    except json.JSONDecodeError:
        return default


class SQLiteTransport:
    """Transport that inserts each entry as a row in a SQLite database.

    Uses WAL mode for file databases. For :memory: databases a persistent
    connection is kept, since in-memory databases are connection-scoped;
    such a transport must be used from a single event loop.

    Args:
        db_path: Database file path or ":memory:".
    """

    def __init__(self, db_path: str) -> None:
        self._db_path = db_path
        self._initialized = False
        self._init_lock: asyncio.Lock | None = None
        self._persistent_conn: aiosqlite.Connection | None = None

    def __repr__(self) -> str:
        return f"SQLiteTransport({self._db_path!r})"

    def _get_lock(self) -> asyncio.Lock:
        """Get or create the initialization lock (lazy to avoid event loop issues)."""
        if self._init_lock is None:
            self._init_lock = asyncio.Lock()
        return self._init_lock

    @property
    def _is_memory(self) -> bool:
        return self._db_path == ":memory:"

    async def _ensure_initialized(self) -> None:
        """Create the schema once."""
        if self._initialized:
            return
        async with self._get_lock():
            if self._initialized:
                return
            if self._is_memory:
                self._persistent_conn = await aiosqlite.connect(":memory:")
                await self._persistent_conn.executescript(_LOGS_SCHEMA)
            else:
                async with aiosqlite.connect(self._db_path) as db:
                    await db.execute("PRAGMA journal_mode=WAL")
                    await db.executescript(_LOGS_SCHEMA)
            self._initialized = True

    @asynccontextmanager
    async def _connection(self) -> AsyncIterator[aiosqlite.Connection]:
        """Yield a connection, closing it afterwards for file databases."""
        await self._ensure_initialized()
        if self._is_memory:
            if self._persistent_conn is None:
                raise RuntimeError("Memory database connection not initialized")
            yield self._persistent_conn
            return
        db = await aiosqlite.connect(self._db_path)
        try:
            yield db
        finally:
            await db.close()

    async def emit(self, entry: LogEntry) -> None:
        """Insert a log entry."""
        row = (
            entry.timestamp,
            int(entry.level),
            json.dumps(list(entry.scope)),
            entry.message,
            json.dumps(dict(entry.metadata or {}), default=repr),
            json.dumps(list(entry.args), default=repr),
        )
        async with self._connection() as db:
            await db.execute(_INSERT_LOG, row)
            await db.commit()

    async def read(self) -> AsyncIterator[LogEntry]:
        """Yield stored entries in insertion order.

        Args and metadata come back as their JSON form; values that were
        not JSON serializable come back as their repr().
        """
        async with self._connection() as db:
            async with db.execute(_SELECT_LOGS) as cursor:
                async for row in cursor:
                    metadata = _safe_json_loads(row[4], {})
                    yield LogEntry(
                        level=LogLevel(row[1]),
                        message=row[3],
                        timestamp=row[0],
                        scope=tuple(_safe_json_loads(row[2], [])),
                        args=tuple(_safe_json_loads(row[5], [])),
                        metadata=metadata or None,
                    )

    async def count(self) -> int:
        """Return the number of stored entries."""
        async with self._connection() as db:
            async with db.execute(_COUNT_LOGS) as cursor:
                row = await cursor.fetchone()
                return row[0] if row else 0

    async def close(self) -> None:
        """Close the persistent connection (for :memory: databases)."""
        if self._persistent_conn is not None:
            await self._persistent_conn.close()
            self._persistent_conn = None
            self._initialized = False
