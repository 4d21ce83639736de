"""Path Resolution

Recorded paths are plain tuples of keys and indices rooted at the value
passed to the top-level call. ``access`` walks one back to the value it
points at; ``format_path`` renders one for humans.
"""
from __future__ import annotations

import json
import re
from collections.abc import Iterable
from typing import Any

from .base import MISSING, AccessPath, ValueKind, kind_of

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def access(root: Any, path: Iterable[Any]) -> Any:
    """Return the value at ``path`` inside ``root``, or ``MISSING`` if a step cannot be taken.

    Mappings are stepped into by key, lists and tuples by a non-negative
    in-range integer index. Nothing else is navigable.
    """
    current = root
    for segment in path:
        kind = kind_of(current)
        if kind is ValueKind.OBJECT:
            try:
                current = current.get(segment, MISSING)
            except TypeError:
                return MISSING
        elif kind is ValueKind.ARRAY:
            if kind_of(segment) is not ValueKind.INTEGER or not 0 <= segment < len(current):
                return MISSING
            current = current[segment]
        else:
            return MISSING
        if current is MISSING:
            return MISSING
    return current


def format_path(path: AccessPath) -> str:
    """Render a path as ``$.user.tags[0]``; odd keys render as ``$["a b"]``."""
    parts = ["$"]
    for segment in path:
        if kind_of(segment) is ValueKind.INTEGER:
            parts.append(f"[{segment}]")
        elif isinstance(segment, str) and _IDENTIFIER.match(segment):
            parts.append(f".{segment}")
        elif isinstance(segment, str):
            parts.append(f"[{json.dumps(segment)}]")
        else:
            parts.append(f"[{segment!r}]")
    return "".join(parts)
