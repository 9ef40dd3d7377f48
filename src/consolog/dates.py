"""Timestamp rendering for date-fns style patterns.

Letter runs are tokens (``yyyy``, ``MM``, ``hh``, ``aa``, ``zzzz`` ...);
text inside single quotes is literal and ``''`` is an escaped quote.
Unknown letter runs are copied through unchanged. Names are English and do
not depend on the process locale.
"""
from __future__ import annotations

import re
from datetime import datetime, timedelta
from typing import Callable, Dict

_TOKEN_RE = re.compile(r"'(?:[^']|'')*'|([A-Za-z])\1*")

_MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]
_WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def _offset(date: datetime) -> timedelta:
    return date.utcoffset() or timedelta(0)


def _split_offset(date: datetime) -> "tuple[str, int, int]":
    minutes = int(_offset(date).total_seconds() // 60)
    sign = "-" if minutes < 0 else "+"
    hours, mins = divmod(abs(minutes), 60)
    return sign, hours, mins


def _zone_long(date: datetime) -> str:
    sign, hours, mins = _split_offset(date)
    return f"GMT{sign}{hours:02d}:{mins:02d}"


def _zone_short(date: datetime) -> str:
    sign, hours, mins = _split_offset(date)
    if mins:
        return f"GMT{sign}{hours}:{mins:02d}"
    return f"GMT{sign}{hours}"


def _hour12(date: datetime) -> int:
    return date.hour % 12 or 12


_FORMATTERS: Dict[str, Callable[[datetime], str]] = {
    "yyyy": lambda d: f"{d.year:04d}",
    "yy": lambda d: f"{d.year % 100:02d}",
    "y": lambda d: str(d.year),
    "MMMM": lambda d: _MONTHS[d.month - 1],
    "MMM": lambda d: _MONTHS[d.month - 1][:3],
    "MM": lambda d: f"{d.month:02d}",
    "M": lambda d: str(d.month),
    "LLLL": lambda d: _MONTHS[d.month - 1],
    "LLL": lambda d: _MONTHS[d.month - 1][:3],
    "LL": lambda d: f"{d.month:02d}",
    "L": lambda d: str(d.month),
    "dd": lambda d: f"{d.day:02d}",
    "d": lambda d: str(d.day),
    "EEEE": lambda d: _WEEKDAYS[d.weekday()],
    "EEE": lambda d: _WEEKDAYS[d.weekday()][:3],
    "EE": lambda d: _WEEKDAYS[d.weekday()][:3],
    "E": lambda d: _WEEKDAYS[d.weekday()][:3],
    "HH": lambda d: f"{d.hour:02d}",
    "H": lambda d: str(d.hour),
    "hh": lambda d: f"{_hour12(d):02d}",
    "h": lambda d: str(_hour12(d)),
    "mm": lambda d: f"{d.minute:02d}",
    "m": lambda d: str(d.minute),
    "ss": lambda d: f"{d.second:02d}",
    "s": lambda d: str(d.second),
    "SSS": lambda d: f"{d.microsecond // 1000:03d}",
    "aa": lambda d: "AM" if d.hour < 12 else "PM",
    "a": lambda d: "AM" if d.hour < 12 else "PM",
    "zzzz": _zone_long,
    "zzz": _zone_short,
    "zz": _zone_short,
    "z": _zone_short,
}


def _render(date: datetime, pattern: str) -> str:
    out = []
    pos = 0
    for match in _TOKEN_RE.finditer(pattern):
        out.append(pattern[pos:match.start()])
        token = match.group(0)
        if token == "''":
            out.append("'")
        elif token.startswith("'"):
            out.append(token[1:-1].replace("''", "'"))
        else:
            fmt = _FORMATTERS.get(token)
            out.append(fmt(date) if fmt else token)
        pos = match.end()
    out.append(pattern[pos:])
    return "".join(out)


def format_instant(date: datetime, pattern: str) -> str:
    """Format `date` with `pattern`, reporting the zone as UTC rather than GMT.

    Naive datetimes are interpreted as local time.
    """
    if date.tzinfo is None:
        date = date.astimezone()
    return _render(date, pattern).replace("GMT", "UTC", 1)


__all__ = ["format_instant"]
