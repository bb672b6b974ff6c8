"""Helpers for pack tooling: loggers, title casing, interrupt handling, directory walking and copying, fixtures and a terminal spinner."""

__version__ = "0.1.0"