"""Poker league tracking: a JSON file store, a WSGI application and a command-line recorder."""

__version__ = "0.1.0"
__all__ = ["league", "tape", "server", "store", "stub", "cli"]