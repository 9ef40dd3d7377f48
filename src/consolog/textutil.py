import re
from typing import Iterable

# CSI-style terminal control sequences (ESC or 0x9B introducer)
_ANSI_RE = re.compile(r"[\x1b\x9b][\[()#;?]*(?:[0-9]{1,4}(?:;[0-9]{0,4})*)?[0-9A-ORZcf-nqry=><]")


def sanitized(text: str) -> str:
    """Strip terminal styling sequences from `text`."""
    return _ANSI_RE.sub("", text)


def visible_length(text: str) -> int:
    return len(sanitized(text))


def max_visible_length(texts: Iterable[str]) -> int:
    """Longest visible length in `texts` (0 when empty)."""
    return max((visible_length(t) for t in texts), default=0)


def pad_trailing(text: str, length: int) -> str:
    """Right-pad `text` with spaces until its visible length reaches `length`.

    Strings that are already long enough are returned unchanged.
    """
    missing = length - visible_length(text)
    if missing <= 0:
        return text
    return text + " " * missing


__all__ = ["sanitized", "visible_length", "max_visible_length", "pad_trailing"]
