"""Process-wide verbosity policy shared by every Logger.

One `LoggingPolicy` instance (DEFAULT_POLICY) lives for the whole process;
loggers read it at filter/format time, so changing it affects loggers that
already exist. A logger can be handed its own policy object instead, which
is how tests isolate themselves.

Environment (read once, when the module is imported):

- CONSOLOG_LEVEL: threshold level name or number (default DEBUG)
- CONSOLOG_OPERATOR: EQUAL / GREATER_OR_EQUAL / LESS_OR_EQUAL or ==, >=, <=
- NO_LOG: any non-empty value disables all output (checked on every call)
"""
from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Mapping, Optional, Sequence

from .levels import LogLevel, LogLevelOperator
from .logutil import warn_once

_UNSET = object()


def env_logging_enabled() -> bool:
    """False when the NO_LOG environment flag is set."""
    return not os.environ.get("NO_LOG")


@dataclass
class LoggingPolicy:
    level: LogLevel = LogLevel.DEBUG
    operator: LogLevelOperator = LogLevelOperator.GREATER_OR_EQUAL
    # Category labels to align output against; None/empty disables padding
    alignment_categories: Optional[List[str]] = None
    gate: Callable[[], bool] = field(default=env_logging_enabled, repr=False)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LoggingPolicy":
        env = os.environ if environ is None else environ
        policy = cls()
        raw_level = env.get("CONSOLOG_LEVEL")
        if raw_level:
            try:
                policy.level = LogLevel.parse(raw_level)
            except ValueError:
                warn_once(f"level:{raw_level}", "ignoring invalid CONSOLOG_LEVEL=%r; using DEBUG", raw_level)
        raw_op = env.get("CONSOLOG_OPERATOR")
        if raw_op:
            try:
                policy.operator = LogLevelOperator.parse(raw_op)
            except ValueError:
                warn_once(f"operator:{raw_op}", "ignoring invalid CONSOLOG_OPERATOR=%r; using >=", raw_op)
        return policy

    def logging_enabled(self) -> bool:
        return bool(self.gate())

    @contextmanager
    def override(
        self,
        level: Optional[LogLevel] = None,
        operator: Optional[LogLevelOperator] = None,
        alignment_categories: object = _UNSET,
    ) -> Iterator["LoggingPolicy"]:
        """Temporarily change the policy; previous values return on exit."""
        saved = (self.level, self.operator, self.alignment_categories)
        if level is not None:
            self.level = level
        if operator is not None:
            self.operator = operator
        if alignment_categories is not _UNSET:
            self.alignment_categories = list(alignment_categories) if alignment_categories else None  # type: ignore[arg-type]
        try:
            yield self
        finally:
            self.level, self.operator, self.alignment_categories = saved


DEFAULT_POLICY = LoggingPolicy.from_env()


def get_policy() -> LoggingPolicy:
    return DEFAULT_POLICY


def set_level(level: LogLevel) -> None:
    DEFAULT_POLICY.level = LogLevel.parse(level)


def set_operator(operator: LogLevelOperator) -> None:
    DEFAULT_POLICY.operator = LogLevelOperator.parse(operator)


def set_alignment_categories(categories: Optional[Sequence[str]]) -> None:
    DEFAULT_POLICY.alignment_categories = list(categories) if categories else None


__all__ = [
    "DEFAULT_POLICY",
    "LoggingPolicy",
    "env_logging_enabled",
    "get_policy",
    "set_alignment_categories",
    "set_level",
    "set_operator",
]
