"""Port interfaces for transports and formatters.

These protocols define the contracts that output adapters must implement.
The logger depends only on Transport; formatters are used by transports.
"""

from collections.abc import Awaitable
from typing import Protocol, runtime_checkable

from viol.core.models import LogEntry


@runtime_checkable
class Transport(Protocol):
    """Port for log destinations.

    Implementations may complete synchronously or return an awaitable.
    Either way they must treat the entry as read-only.
    Examples: ConsoleTransport, FileTransport, SQLiteTransport.
    """

    def emit(self, entry: LogEntry) -> Awaitable[None] | None:
        """Deliver a log entry to the destination."""
        ...


@runtime_checkable
class Formatter(Protocol):
    """Port for rendering a log entry as text.

    Formatting is pure: the same entry always renders to the same text.
    """

    def format(self, entry: LogEntry) -> str:
        """Render a log entry."""
        ...
