"""Encoders for batches of log entries."""

from viol.core.encoding.ndjson import encode_entries

__all__ = ["encode_entries"]
