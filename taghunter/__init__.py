"""Taghunter desktop backend: game types and scenarios over a local SQLite store."""

__version__ = "0.1.0"
