"""Dictionary merge utilities.

Two flavours are used by the helpers:

- ``merge_layers``: shallow, left-to-right merge of option/context layers
  (later layers win), skipping ``None`` layers.
- ``deep_merge``: recursive merge used when layering configuration files.
  Arrays are replaced, or appended when the override starts with ``"+"``.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional


def merge_layers(*layers: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Shallow-merge mappings in priority order (lowest first).

    Example:
        >>> merge_layers({"a": 1, "b": 1}, None, {"b": 2})
        {'a': 1, 'b': 2}
    """
    result: Dict[str, Any] = {}
    for layer in layers:
        if layer:
            result.update(layer)
    return result


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Layer ``override`` settings onto ``base`` and return a new dict.

    Nested sections merge key by key, arrays follow ``merge_arrays`` and any
    other value in ``override`` replaces the one in ``base``. Neither input
    is modified.

    Example:
        >>> defaults = {"match": {"nocase": False, "fields": ["key", "stem"]}}
        >>> deep_merge(defaults, {"match": {"nocase": True}})
        {'match': {'nocase': True, 'fields': ['key', 'stem']}}
    """
    merged: Dict[str, Any] = dict(base)
    for key, value in (override or {}).items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        elif isinstance(current, list) and isinstance(value, list):
            merged[key] = merge_arrays(current, value)
        else:
            merged[key] = value
    return merged


def merge_arrays(base: List[Any], override: List[Any]) -> List[Any]:
    """Merge arrays with override semantics.

    - ``"+"`` as first element: append the remaining items to ``base``
    - anything else: replace ``base`` entirely

    Example:
        >>> merge_arrays(["stem"], ["+", "data.slug"])
        ['stem', 'data.slug']
        >>> merge_arrays(["stem"], ["path"])
        ['path']
    """
    if override and override[0] == "+":
        return [*base, *override[1:]]
    return list(override)


__all__ = ["merge_layers", "deep_merge", "merge_arrays"]
