"""Python logging handler adapter for viol.

This adapter bridges Python's standard library logging module to a viol
Logger, so records from libraries using ``logging`` reach viol transports.
"""

import logging
import traceback
from collections.abc import Callable
from typing import Any

from viol.core.levels import LogLevel
from viol.core.logger import Logger

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)

# Default attributes to extract from LogRecord
_DEFAULT_INCLUDE_ATTRS = ["module", "funcName", "lineno", "pathname"]

# Callable returning extra metadata for every forwarded record
ContextProvider = Callable[[], dict[str, Any]]

# Records from this namespace carry viol's own diagnostics.
_INTERNAL_LOGGER_PREFIX = "viol"


class ViolHandler(logging.Handler):
    """Logging handler that forwards records to a viol Logger.

    The record's logger name, split on dots, is appended to the target
    logger's scope. Selected record attributes, ``extra`` fields and
    exception details become entry metadata.

    Example:
        ```python
        import logging
        from viol import Logger, ViolHandler

        logging.getLogger().addHandler(ViolHandler(Logger("app")))
        logging.getLogger("db.pool").warning("pool exhausted")
        # scope: ("app", "db", "pool"), level: WARN
        ```
    """

    def __init__(
        self,
        logger: Logger,
        include_attrs: list[str] | None = None,
        context_provider: ContextProvider | None = None,
        level: int = logging.NOTSET,
    ) -> None:
        """Initialize the handler with a target logger.

        Args:
            logger: Logger receiving the forwarded records.
            include_attrs: List of LogRecord attributes to include. Defaults to
                ["module", "funcName", "lineno", "pathname"].
            context_provider: Called for every record; its result is merged
                into metadata before extra fields, which take precedence.
            level: Minimum stdlib level handled.
        """
        super().__init__(level)
        self._logger = logger
        self._include_attrs = include_attrs or _DEFAULT_INCLUDE_ATTRS
        self._context_provider = context_provider

    def emit(self, record: logging.LogRecord) -> None:
        """Forward a log record to the target logger.

        Args:
            record: The log record to emit.
        """
        name = record.name
        if name == _INTERNAL_LOGGER_PREFIX or name.startswith(
            f"{_INTERNAL_LOGGER_PREFIX}."
        ):
            return

        level = LogLevel.from_python_level(record.levelno)
        if not self._logger.is_enabled(level):
            return

        try:
            message = record.getMessage()
            metadata = self._metadata(record)
        except Exception:
            self.handleError(record)
            return

        scope = [] if name == "root" else [part for part in name.split(".") if part]
        target = self._logger.child(scope) if scope else self._logger
        target.with_metadata(metadata).log(level, message)

    def _metadata(self, record: logging.LogRecord) -> dict[str, Any]:
        """Build entry metadata from a record."""
        # Map of attribute names to their values from LogRecord
        attr_mapping: dict[str, str | int | float | bool] = {
            "module": record.module,
            "funcName": record.funcName or "",
            "lineno": record.lineno,
            "pathname": record.pathname,
        }

        metadata: dict[str, Any] = {
            key: attr_mapping[key] for key in self._include_attrs if key in attr_mapping
        }

        if self._context_provider is not None:
            metadata.update(self._context_provider())

        # Add any extra attributes passed via logging call
        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOGRECORD_ATTRS and isinstance(
                value, (str, int, float, bool)
            ):
                metadata[key] = value

        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            if exc_type is not None:
                metadata["exc_type"] = exc_type.__name__
            if exc_value is not None:
                metadata["exc_message"] = str(exc_value)
            if exc_tb is not None:
                metadata["exc_traceback"] = "".join(
                    traceback.format_exception(exc_type, exc_value, exc_tb)
                )

        return metadata
