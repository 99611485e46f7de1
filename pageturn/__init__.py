"""Lazy asynchronous iteration through paginated collections of an HTTP API."""

__version__ = "1.0.0"
