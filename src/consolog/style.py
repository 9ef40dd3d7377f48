"""Terminal styling backed by rich.

Only the 16-colour palette is used so every sequence produced here is one the
text utilities know how to strip again.
"""
from __future__ import annotations

import os
from typing import Dict

from rich.color import ColorSystem
from rich.style import Style

from .levels import LogLevel

# Named roles used by the formatter -> rich style definitions
STYLES: Dict[str, str] = {
    "debug": "cyan",
    "info": "blue",
    "warn": "yellow",
    "error": "red",
    "fatal": "red",
    "timestamp": "white",
    "category": "yellow",
    "context": "bright_black",
}

_LEVEL_STYLES: Dict[LogLevel, str] = {
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warn",
    LogLevel.ERROR: "error",
    LogLevel.FATAL: "fatal",
}

# Process scoped, like NO_COLOR itself; tests and the CLI toggle it explicitly.
_COLOR_ENABLED: bool = not os.environ.get("NO_COLOR")


def set_color_enabled(enabled: bool) -> None:
    global _COLOR_ENABLED
    _COLOR_ENABLED = bool(enabled)


def get_color_enabled() -> bool:
    return _COLOR_ENABLED


def stylize(text: str, style_name: str) -> str:
    """Wrap `text` in the ANSI sequences for a role name or raw rich style."""
    if not _COLOR_ENABLED:
        return text
    definition = STYLES.get(style_name, style_name)
    return Style.parse(definition).render(text, color_system=ColorSystem.STANDARD)


def level_style(level: LogLevel) -> str:
    """Role name for a level; empty for NONE (no styling)."""
    return _LEVEL_STYLES.get(level, "")


def stylize_level(text: str, level: LogLevel) -> str:
    role = level_style(level)
    if not role:
        return text
    return stylize(text, role)


__all__ = [
    "STYLES",
    "get_color_enabled",
    "level_style",
    "set_color_enabled",
    "stylize",
    "stylize_level",
]
