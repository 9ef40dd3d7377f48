from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional, Union


class TimestampFormat(str, Enum):
    """Preset timestamp patterns (date-fns style letters)."""

    NONE = "_none"
    FULL_24 = "EEE, LLL dd yyyy @ HH:mm:ss zzzz"
    FULL_12 = "EEE, LLL dd yyyy @ hh:mm:ss aa zzzz"
    CONDENSED_24 = "MM/dd/yyyy @ HH:mm:ss zzzz"
    CONDENSED_12 = "MM/dd/yyyy @ hh:mm:ss aa zzzz"
    MINIMAL_24 = "MM/dd/yyyy @ HH:mm:ss"
    MINIMAL_12 = "MM/dd/yyyy @ hh:mm:ss aa"
    TIME_24 = "HH:mm:ss"
    TIME_12 = "hh:mm:ss aa"

    @classmethod
    def resolve(cls, value: Union["TimestampFormat", str, None]) -> Optional[str]:
        """Map a preset name, preset member or raw pattern to a pattern string.

        Returns None when timestamps are switched off.
        """
        if value is None:
            return None
        if isinstance(value, TimestampFormat):
            pattern = value.value
        elif value.upper() in cls.__members__:
            pattern = cls[value.upper()].value
        else:
            pattern = value
        if not pattern or pattern == cls.NONE.value:
            return None
        return pattern


@dataclass(frozen=True)
class LoggerOptions:
    # Pattern or preset used for the timestamp block; NONE omits it
    timestamp_format: Union[TimestampFormat, str, None] = TimestampFormat.CONDENSED_12
    # Separator placed before the message and inline context; None removes it
    message_delimiter: Optional[str] = "::"
    # Render context on one line instead of an indented block
    compact_context: bool = False
    # Default throw behaviour for error(); fatal() always throws
    throw_errors: bool = False
    # Throw for error/fatal messages even when the filter drops them
    throw_suppressed_errors: bool = False

    def merged(self, **overrides: Any) -> "LoggerOptions":
        """Return a copy with `overrides` applied on top of these options."""
        return replace(self, **overrides)

    @property
    def timestamp_pattern(self) -> Optional[str]:
        return TimestampFormat.resolve(self.timestamp_format)


DEFAULT_OPTIONS = LoggerOptions()
