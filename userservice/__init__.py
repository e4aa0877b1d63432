"""User management HTTP service: domain rules, use cases, SQLite storage and a Flask server."""

__version__ = "0.1.0"