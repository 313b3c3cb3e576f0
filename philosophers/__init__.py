"""Dining philosophers set-up: argument parsing, table construction and thread start-up."""

__version__ = "0.1.0"
__all__ = ["utils", "sync", "config", "table", "dinner", "cli"]