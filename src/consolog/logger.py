from datetime import datetime
from typing import Any, Optional, Union

from .config import DEFAULT_OPTIONS, LoggerOptions
from .errors import ErrorSignal, FatalSignal, SuppressedErrorSignal
from .formatter import format_message
from .levels import LogLevel, should_emit
from .logutil import get_logger
from .message import LogMessage
from .policy import DEFAULT_POLICY, LoggingPolicy
from .streams import ConsoleStreams


class Logger:
    """
    Writes colorized, level-filtered messages to the console.

    Each logger has a fixed category and an immutable options snapshot; the
    threshold level and operator come from the shared LoggingPolicy.
    Messages are formatted once (see `message`) and can be dispatched
    immediately or later with `log_message`.

    Throw matrix:
      - dropped ERROR/FATAL: SuppressedErrorSignal if throwing was requested
        and options.throw_suppressed_errors is set, else nothing
      - written ERROR: ErrorSignal when throwing was requested
      - written FATAL: FatalSignal, always
    """

    def __init__(
        self,
        category: Union[str, LoggerOptions, None] = None,
        options: Optional[LoggerOptions] = None,
        *,
        policy: Optional[LoggingPolicy] = None,
        streams: Optional[ConsoleStreams] = None,
    ) -> None:
        # Logger(options) is accepted as a shorthand for Logger(None, options)
        if isinstance(category, LoggerOptions):
            category, options = None, category
        self.category: Optional[str] = category or None
        self.options: LoggerOptions = options or DEFAULT_OPTIONS
        self.enabled: bool = True
        self._policy = policy
        self.streams = streams or ConsoleStreams()

    @property
    def policy(self) -> LoggingPolicy:
        return self._policy or DEFAULT_POLICY

    def __repr__(self) -> str:
        return f"Logger(category={self.category!r}, enabled={self.enabled})"

    # -- building -----------------------------------------------------------

    def message(self, message: str, level: LogLevel, ctx: Any = None) -> LogMessage:
        """Format a message without logging it."""
        date = datetime.now().astimezone()
        formatted = format_message(
            level,
            message,
            date,
            self.category,
            ctx,
            self.options,
            self.policy.alignment_categories,
        )
        return LogMessage(
            message=message,
            formatted=formatted,
            level=level,
            date=date,
            category=self.category,
            ctx=ctx,
        )

    # -- dispatch -----------------------------------------------------------

    def can_log(self, level: LogLevel) -> bool:
        policy = self.policy
        return should_emit(level, policy.level, policy.operator, self.enabled, policy.logging_enabled())

    def log_message(self, message: LogMessage, throws: Optional[bool] = None) -> Optional[LogMessage]:
        """Write a prebuilt message. Returns it, or None when it was filtered out."""
        if throws is None:
            throws = self.options.throw_errors
        return self._log(message, throws)

    def log(
        self,
        message: str,
        level: LogLevel,
        throws: Optional[bool] = None,
        ctx: Any = None,
    ) -> Optional[LogMessage]:
        return self.log_message(self.message(message, level, ctx), throws)

    def _log(self, message: LogMessage, throws: bool) -> Optional[LogMessage]:
        level = message.level
        if not self.can_log(level):
            if level >= LogLevel.ERROR and throws and self.options.throw_suppressed_errors:
                get_logger().debug("raising for suppressed %s message", level.name)
                raise SuppressedErrorSignal(message.message, level)
            return None

        self.streams.write(level, message.formatted)
        if level == LogLevel.FATAL:
            raise FatalSignal(message.message, level)
        if level == LogLevel.ERROR and throws:
            raise ErrorSignal(message.message, level)
        return message

    # -- convenience --------------------------------------------------------

    def debug(self, message: str, ctx: Any = None) -> Optional[LogMessage]:
        return self.log(message, LogLevel.DEBUG, False, ctx)

    def info(self, message: str, ctx: Any = None) -> Optional[LogMessage]:
        return self.log(message, LogLevel.INFO, False, ctx)

    def warn(self, message: str, ctx: Any = None) -> Optional[LogMessage]:
        return self.log(message, LogLevel.WARN, False, ctx)

    def error(self, message: str, ctx: Any = None) -> Optional[LogMessage]:
        return self.log(message, LogLevel.ERROR, self.options.throw_errors, ctx)

    def error_throwing(self, message: str, ctx: Any = None) -> Optional[LogMessage]:
        """Log an error and raise ErrorSignal once it is written."""
        return self.log(message, LogLevel.ERROR, True, ctx)

    def fatal(self, message: str, ctx: Any = None) -> None:
        """Log a fatal message; always raises FatalSignal when written."""
        self.log(message, LogLevel.FATAL, True, ctx)

    def newline(self) -> None:
        self.streams.newline()


__all__ = ["Logger"]
