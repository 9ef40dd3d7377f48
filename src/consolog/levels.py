"""Severity levels, comparison operators and the emission predicate."""
from __future__ import annotations

from enum import Enum, IntEnum


class LogLevel(IntEnum):
    """Ordered severities. NONE never matches and is never logged."""

    NONE = -1
    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4

    @classmethod
    def parse(cls, text: "str | int | LogLevel") -> "LogLevel":
        """Resolve a level from a name (case-insensitive), an alias or a number."""
        if isinstance(text, LogLevel):
            return text
        if isinstance(text, int):
            return cls(text)
        key = str(text).strip().upper()
        key = _LEVEL_ALIASES.get(key, key)
        if key.lstrip("-").isdigit():
            return cls(int(key))
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"unknown log level '{text}'") from None


_LEVEL_ALIASES = {
    "WARNING": "WARN",
    "CRITICAL": "FATAL",
    "OFF": "NONE",
}


class LogLevelOperator(Enum):
    """How a message level is compared against the active threshold."""

    EQUAL = 0
    GREATER_OR_EQUAL = 1
    LESS_OR_EQUAL = 2

    @classmethod
    def parse(cls, text: "str | LogLevelOperator") -> "LogLevelOperator":
        if isinstance(text, LogLevelOperator):
            return text
        key = str(text).strip()
        if key in _OPERATOR_SYMBOLS:
            return _OPERATOR_SYMBOLS[key]
        try:
            return cls[key.upper()]
        except KeyError:
            raise ValueError(f"unknown log level operator '{text}'") from None


_OPERATOR_SYMBOLS = {
    "==": LogLevelOperator.EQUAL,
    ">=": LogLevelOperator.GREATER_OR_EQUAL,
    "<=": LogLevelOperator.LESS_OR_EQUAL,
}


def should_emit(
    level: LogLevel,
    threshold: LogLevel,
    operator: LogLevelOperator,
    instance_enabled: bool,
    external_enabled: bool,
) -> bool:
    """Return True when a message of `level` passes the active filter."""
    if (
        not external_enabled
        or threshold == LogLevel.NONE
        or not instance_enabled
        or level == LogLevel.NONE
    ):
        return False
    if operator is LogLevelOperator.EQUAL:
        return level == threshold
    if operator is LogLevelOperator.GREATER_OR_EQUAL:
        return level >= threshold
    return level <= threshold


__all__ = ["LogLevel", "LogLevelOperator", "should_emit"]
