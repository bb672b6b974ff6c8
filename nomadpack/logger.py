"""Loggers shared by the lower layers of the package."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable


class Logger(ABC):
    """Interface for logging without tying lower layers to a UI."""

    @abstractmethod
    def debug(self, message: str) -> None:
        """Log at the DEBUG level."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Log at the ERROR level."""

    @abstractmethod
    def error_with_context(self, err: BaseException | str, sub: str, *args: str) -> None:
        """Log at the ERROR level with extra context lines."""

    @abstractmethod
    def info(self, message: str) -> None:
        """Log at the INFO level."""

    @abstractmethod
    def trace(self, message: str) -> None:
        """Log at the TRACE level."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Log at the WARN level."""


class FmtLogger(Logger):
    """Logger that prints every message to standard output."""

    def debug(self, message: str) -> None:
        print(message)

    def error(self, message: str) -> None:
        print(message)

    def error_with_context(self, err: BaseException | str, sub: str, *args: str) -> None:
        print(f"err: {err}")
        print(sub)
        for entry in args:
            print(entry)

    def info(self, message: str) -> None:
        print(message)

    def trace(self, message: str) -> None:
        print(message)

    def warning(self, message: str) -> None:
        print(message)


class TestLogger(Logger):
    """Logger that hands every message to a supplied callable."""

    __test__ = False

    def __init__(self, log: Callable[..., Any]) -> None:
        self._log = log

    def debug(self, message: str) -> None:
        self._log(message)

    def error(self, message: str) -> None:
        self._log(message)

    def error_with_context(self, err: BaseException | str, sub: str, *args: str) -> None:
        self._log(f"err: {err}")
        self._log(sub)
        for entry in args:
            self._log(entry)

    def info(self, message: str) -> None:
        self._log(message)

    def trace(self, message: str) -> None:
        self._log(message)

    def warning(self, message: str) -> None:
        self._log(message)


def default() -> FmtLogger:
    """Return the default printing logger."""
    return FmtLogger()