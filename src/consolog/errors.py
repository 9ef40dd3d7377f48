"""Signals raised to the caller for serious log events."""
from __future__ import annotations

from .levels import LogLevel


class LogSignal(Exception):
    """Base class; carries the raw (unformatted) message text."""

    def __init__(self, message: str, level: LogLevel) -> None:
        super().__init__(message)
        self.message = message
        self.level = level


class SuppressedErrorSignal(LogSignal):
    """An error/fatal message was filtered out but throwing was requested."""


class ErrorSignal(LogSignal):
    """An ERROR message was written and the caller asked to throw."""


class FatalSignal(LogSignal):
    """A FATAL message was written. Always raised."""


__all__ = ["LogSignal", "SuppressedErrorSignal", "ErrorSignal", "FatalSignal"]
