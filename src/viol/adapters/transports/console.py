"""Console transport."""

import sys
from typing import TextIO

from viol.core.formatting.console import ConsoleFormatter
from viol.core.models import LogEntry
from viol.core.ports import Formatter


class ConsoleTransport:
    """Transport that prints log entries to a text stream.

    Entry args are printed after the formatted line, separated by spaces.

    Example:
        ```python
        transport = ConsoleTransport(ConsoleFormatter(colourize=False))
        logger.add_transport(transport)
        ```
    """

    def __init__(
        self, formatter: Formatter | None = None, stream: TextIO | None = None
    ) -> None:
        """Initialize the transport.

        Args:
            formatter: Formatter for entries. Defaults to ConsoleFormatter.
            stream: Output stream. Defaults to the current sys.stdout at the
                time of each write.
        """
        self.formatter = formatter or ConsoleFormatter()
        self._stream = stream

    def emit(self, entry: LogEntry) -> None:
        """Print a log entry."""
        stream = self._stream if self._stream is not None else sys.stdout
        print(self.formatter.format(entry), *entry.args, file=stream)
