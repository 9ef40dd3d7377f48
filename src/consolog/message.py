from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from .levels import LogLevel


@dataclass(frozen=True)
class LogMessage:
    """A formatted log record. Built once; may be dispatched later or never."""

    message: str
    formatted: str
    level: LogLevel
    date: datetime
    category: Optional[str] = None
    ctx: Any = None
