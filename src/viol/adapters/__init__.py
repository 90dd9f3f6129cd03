"""Adapters connecting the logger to outputs and to the logging module."""
