"""Transports implementing the Transport port."""

from viol.adapters.transports.console import ConsoleTransport
from viol.adapters.transports.file import FileTransport
from viol.adapters.transports.memory import MemoryTransport
from viol.adapters.transports.sqlite import SQLiteTransport
from viol.adapters.transports.storage import StorageTransport

__all__ = [
    "ConsoleTransport",
    "FileTransport",
    "MemoryTransport",
    "SQLiteTransport",
    "StorageTransport",
]
