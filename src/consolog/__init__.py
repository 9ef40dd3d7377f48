"""Package metadata and public surface for consolog.

The version is read from importlib.metadata so an editable install or wheel
reports the version declared in pyproject.toml, with a hardcoded fallback
for direct source usage without installation.
"""

from __future__ import annotations

from importlib import metadata as _metadata

_FALLBACK_VERSION = "0.1.0"  # MUST match pyproject.toml [project].version

try:  # pragma: no cover - success path covered indirectly via CLI test
    __version__ = _metadata.version("consolog")  # type: ignore[assignment]
except Exception:  # pragma: no cover - fallback exercised if metadata missing
    __version__ = _FALLBACK_VERSION

from .config import LoggerOptions, TimestampFormat
from .errors import ErrorSignal, FatalSignal, LogSignal, SuppressedErrorSignal
from .levels import LogLevel, LogLevelOperator, should_emit
from .logger import Logger
from .message import LogMessage
from .policy import LoggingPolicy, get_policy, set_alignment_categories, set_level, set_operator

__all__ = [
    "__version__",
    "ErrorSignal",
    "FatalSignal",
    "LogLevel",
    "LogLevelOperator",
    "LogMessage",
    "LogSignal",
    "Logger",
    "LoggerOptions",
    "LoggingPolicy",
    "SuppressedErrorSignal",
    "TimestampFormat",
    "get_policy",
    "set_alignment_categories",
    "set_level",
    "set_operator",
    "should_emit",
]
