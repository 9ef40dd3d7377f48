"""Pretty-printer for context data attached to log messages.

Values fall into three shapes: objects (mappings, rendered ``key: value``),
arrays (lists and tuples) and scalars (anything else, via ``str``). Object
keys keep their insertion order.

Compact mode keeps everything on one line::

    { id: abc, tags: [a, b] }

Indented mode puts one entry per line, ``2 * depth`` spaces deep, with the
closing bracket one level out::

    {
      id: abc,
      tags: [
        a,
        b
      ]
    }

A container that contains itself renders as ``[Circular]`` at the point of
recursion.
"""
from __future__ import annotations

from typing import Any, FrozenSet, Iterable, Mapping, Tuple

from .logutil import get_logger

INDENT = 2
CIRCULAR = "[Circular]"

OBJECT = "object"
ARRAY = "array"
SCALAR = "scalar"


def value_kind(value: Any) -> str:
    if isinstance(value, Mapping):
        return OBJECT
    if isinstance(value, (list, tuple)):
        return ARRAY
    return SCALAR


def render_value(value: Any, compact: bool, depth: int = 1) -> str:
    """Render `value` for display next to a log message."""
    return _render(value, compact, depth, frozenset())


def _render(value: Any, compact: bool, depth: int, active: FrozenSet[int]) -> str:
    kind = value_kind(value)
    if kind == SCALAR:
        return str(value)
    if id(value) in active:
        get_logger().debug("cyclic context value of type %s", type(value).__name__)
        return CIRCULAR
    active = active | {id(value)}
    if kind == OBJECT:
        entries: Iterable[Tuple[str, Any]] = ((str(k), v) for k, v in value.items())
        return _render_object(list(entries), compact, depth, active)
    return _render_array(list(value), compact, depth, active)


def _render_object(pairs: list, compact: bool, depth: int, active: FrozenSet[int]) -> str:
    last = len(pairs) - 1
    if compact:
        result = "{"
        for i, (key, item) in enumerate(pairs):
            rendered = _render(item, compact, depth + 1, active)
            result += f" {key}: {rendered}{'' if i == last else ','}"
        return result + " }"

    prop_indent = " " * (INDENT * depth)
    bracket_indent = " " * (INDENT * (depth - 1))
    result = "{\n"
    for i, (key, item) in enumerate(pairs):
        rendered = _render(item, compact, depth + 1, active)
        result += f"{prop_indent}{key}: {rendered}{'' if i == last else ','}\n"
    return result + f"{bracket_indent}}}"


def _render_array(items: list, compact: bool, depth: int, active: FrozenSet[int]) -> str:
    last = len(items) - 1
    if compact:
        parts = [_render(item, compact, depth + 1, active) for item in items]
        return "[" + ", ".join(parts) + "]"

    prop_indent = " " * (INDENT * depth)
    bracket_indent = " " * (INDENT * (depth - 1))
    result = "[\n"
    for i, item in enumerate(items):
        rendered = _render(item, compact, depth + 1, active)
        result += f"{prop_indent}{rendered}{'' if i == last else ','}\n"
    return result + f"{bracket_indent}]"


__all__ = ["render_value", "value_kind", "CIRCULAR"]
