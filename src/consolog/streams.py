"""Console output sinks, routed by level.

DEBUG and INFO go to stdout, WARN/ERROR/FATAL to stderr, blank lines to
stdout. A sink left as None resolves to the current sys.stdout / sys.stderr
at write time, so redirection (and pytest capture) keeps working.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from .levels import LogLevel


@dataclass
class ConsoleStreams:
    debug: Optional[TextIO] = None
    info: Optional[TextIO] = None
    warn: Optional[TextIO] = None
    error: Optional[TextIO] = None
    plain: Optional[TextIO] = None

    def for_level(self, level: LogLevel) -> TextIO:
        if level == LogLevel.DEBUG:
            return self.debug or sys.stdout
        if level == LogLevel.INFO:
            return self.info or sys.stdout
        if level == LogLevel.WARN:
            return self.warn or sys.stderr
        return self.error or sys.stderr

    def write(self, level: LogLevel, text: str) -> None:
        print(text, file=self.for_level(level), flush=True)

    def newline(self) -> None:
        print(file=self.plain or sys.stdout, flush=True)


__all__ = ["ConsoleStreams"]
