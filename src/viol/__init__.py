"""viol: structured, hierarchical logging with pluggable transports.

Example:
    ```python
    from viol import logger

    logger.info("application started")
    logger.child("db").with_metadata({"pool": "main"}).warn("slow query")
    ```
"""

__version__ = "0.1.0"

from viol.adapters.logging import ContextProvider, ViolHandler
from viol.adapters.transports import (
    ConsoleTransport,
    FileTransport,
    MemoryTransport,
    SQLiteTransport,
    StorageTransport,
)
from viol.core.colours import COLOURS, SCOPE_COLOURS, colourize, strip_colours
from viol.core.dispatch import flush, flush_sync
from viol.core.encoding.ndjson import encode_entries
from viol.core.environment import EnvironmentSettings, get_app_name
from viol.core.formatting import ConsoleFormatter, JsonFormatter
from viol.core.levels import LogLevel, should_emit
from viol.core.logger import Logger
from viol.core.models import LogEntry, LoggerOptions
from viol.core.ports import Formatter, Transport
from viol.core.registry import get_global_level, set_global_level

# Default logger, scoped by the application name.
logger = Logger(get_app_name(), timestamp=True, colourize=True)

__all__ = [
    "COLOURS",
    "SCOPE_COLOURS",
    "ConsoleFormatter",
    "ConsoleTransport",
    "ContextProvider",
    "EnvironmentSettings",
    "FileTransport",
    "Formatter",
    "JsonFormatter",
    "LogEntry",
    "LogLevel",
    "Logger",
    "LoggerOptions",
    "MemoryTransport",
    "SQLiteTransport",
    "StorageTransport",
    "Transport",
    "ViolHandler",
    "colourize",
    "encode_entries",
    "flush",
    "flush_sync",
    "get_app_name",
    "get_global_level",
    "logger",
    "set_global_level",
    "should_emit",
    "strip_colours",
]
