"""Compose the final console line for a log message.

Layout (pieces in brackets are optional)::

    SYMBOL [TIMESTAMP] [[CATEGORY]][ALIGN] [DELIM] MESSAGE [[DELIM] CONTEXT | \\n CONTEXT]

The step order is fixed; output produced by earlier releases must match
byte for byte.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Sequence

from .config import LoggerOptions
from .dates import format_instant
from .levels import LogLevel
from .render import render_value
from .style import stylize, stylize_level
from .textutil import max_visible_length, pad_trailing, visible_length

SYMBOLS = {
    LogLevel.DEBUG: "[DEBUG]",
    LogLevel.INFO: "[INFO]",
    LogLevel.WARN: "[WARN]",
    LogLevel.ERROR: "[ERROR]",
    LogLevel.FATAL: "[FATAL]",
}
SYMBOL_WIDTH = max_visible_length(SYMBOLS.values())

# Width of the "[" "]" pair and separating space a missing category leaves out
_CATEGORY_FRAME = 3


def level_symbol(level: LogLevel) -> str:
    """Fixed-width, styled level label. NONE yields blank padding."""
    return stylize_level(pad_trailing(SYMBOLS.get(level, ""), SYMBOL_WIDTH), level)


def _delimited(text: str, delimiter: Optional[str]) -> str:
    if delimiter:
        return f" {delimiter} {text}"
    return f" {text}"


def alignment_padding(category: Optional[str], alignment_categories: Optional[Sequence[str]]) -> str:
    if not alignment_categories:
        return ""
    count = max_visible_length(alignment_categories) - visible_length(category or "")
    if not category:
        count += _CATEGORY_FRAME
    return " " * max(0, count)


def format_message(
    level: LogLevel,
    message: str,
    date: datetime,
    category: Optional[str],
    ctx: Any,
    options: LoggerOptions,
    alignment_categories: Optional[Sequence[str]] = None,
) -> str:
    result = level_symbol(level)

    pattern = options.timestamp_pattern
    if pattern:
        result += " " + stylize(format_instant(date, pattern), "timestamp")

    if category:
        result += " " + stylize(f"[{category}]", "category")

    result += alignment_padding(category, alignment_categories)
    result += _delimited(stylize_level(message, level), options.message_delimiter)

    if ctx is not None:
        rendered = stylize(render_value(ctx, options.compact_context), "context")
        if options.compact_context or isinstance(ctx, str):
            result += _delimited(rendered, options.message_delimiter)
        else:
            result += "\n" + rendered

    return result


__all__ = ["SYMBOLS", "SYMBOL_WIDTH", "alignment_padding", "format_message", "level_symbol"]
