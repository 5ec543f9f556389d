"""Shared utilities for template helpers."""
from __future__ import annotations

from .merge import deep_merge, merge_arrays, merge_layers
from .paths import relative_dest, relative_to_view, strip_dot_slash, view_source_path
from .patterns import match_view_fields, matches_any, view_fields
from .values import get_value, has_value

__all__ = [
    "deep_merge",
    "merge_arrays",
    "merge_layers",
    "relative_dest",
    "relative_to_view",
    "strip_dot_slash",
    "view_source_path",
    "match_view_fields",
    "matches_any",
    "view_fields",
    "get_value",
    "has_value",
]
