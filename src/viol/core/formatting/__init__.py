"""Formatters that render log entries as text."""

from viol.core.formatting.console import ConsoleFormatter, TimeFormat
from viol.core.formatting.json_formatter import JsonFormatter, iso_timestamp

__all__ = ["ConsoleFormatter", "JsonFormatter", "TimeFormat", "iso_timestamp"]
