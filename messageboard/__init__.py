"""Read-only HTTP API over users and the messages they own."""

__version__ = "0.1.0"
