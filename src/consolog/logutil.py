"""Diagnostics for consolog itself.

consolog writes user messages straight to the console streams; anything the
library wants to say about its own behaviour (bad environment values, cyclic
context data, suppressed error signals) goes through the standard `logging`
logger named "consolog" instead. Quiet (WARNING) by default; set
CONSOLOG_DIAGNOSTICS=debug to see everything.
"""
from __future__ import annotations

import logging
import os
from typing import Optional, Set

_LOGGER: Optional[logging.Logger] = None
_WARNED: Set[str] = set()


def get_logger() -> logging.Logger:
    global _LOGGER
    if _LOGGER is None:
        logger = logging.getLogger("consolog")
        # Leave handlers alone if the host application configured them.
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("[%(name)s] %(levelname)s: %(message)s"))
            logger.addHandler(handler)
        wanted = os.environ.get("CONSOLOG_DIAGNOSTICS", "").strip().upper()
        level = logging.getLevelName(wanted) if wanted else logging.WARNING
        logger.setLevel(level if isinstance(level, int) else logging.WARNING)
        _LOGGER = logger
    return _LOGGER


def warn_once(key: str, msg: str, *args: object) -> None:
    """Emit a warning the first time `key` is seen in this process."""
    if key in _WARNED:
        return
    _WARNED.add(key)
    get_logger().warning(msg, *args)


__all__ = ["get_logger", "warn_once"]
