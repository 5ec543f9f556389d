"""Dot-notation property access for helpers.

``get_value`` reads nested values from the plain dicts used for options and
context as well as from host-owned objects such as views (``data.date``).
"""
from __future__ import annotations

from typing import Any, Mapping, Sequence


def get_value(obj: Any, path: str, default: Any = None) -> Any:
    """Get a value by dot-separated ``path``.

    Mappings are read by key, sequences by integer index and anything else
    by attribute. A key that itself contains dots is tried before the path
    is split.

    Example:
        >>> get_value({"a": {"b": "c"}}, "a.b")
        'c'
        >>> get_value({"a.b": 1}, "a.b")
        1
        >>> get_value({"a": ["x", "y"]}, "a.1")
        'y'
        >>> get_value({}, "missing") is None
        True
    """
    if obj is None or not path:
        return default

    if isinstance(obj, Mapping) and path in obj:
        return obj[path]

    current: Any = obj
    for part in path.split("."):
        current = _get_segment(current, part)
        if current is _MISSING:
            return default
    return current


def has_value(obj: Any, path: str) -> bool:
    """Return True when ``path`` resolves to a value other than ``None``."""
    return get_value(obj, path) is not None


_MISSING = object()


def _get_segment(current: Any, part: str) -> Any:
    if current is None:
        return _MISSING
    if isinstance(current, Mapping):
        return current.get(part, _MISSING)
    if isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
        try:
            return current[int(part)]
        except (ValueError, IndexError):
            return _MISSING
    return getattr(current, part, _MISSING)


__all__ = ["get_value", "has_value"]
