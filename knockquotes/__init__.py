"""Serve random knock-knock quotes from a SQLite database over HTTP."""

__version__ = "0.1.0"
__all__ = ["errors", "quote", "templates", "store", "server"]