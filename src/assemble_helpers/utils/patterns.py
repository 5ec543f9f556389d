"""View pattern matching.

Matches a name or glob pattern against the identifying fields of a view
(``key``, ``path``, ``relative``, ``basename``, ``stem``). An exact match on
any field wins; otherwise the pattern is glob-matched against each field.

Example:
    from assemble_helpers.utils.patterns import match_view_fields

    match_view_fields("index", view)          # view.stem == "index"
    match_view_fields("posts/*.hbs", view)    # glob against view.relative
    match_view_fields("*.{md,hbs}", view)     # brace expansion
"""
from __future__ import annotations

import re
from functools import lru_cache
from pathlib import PurePosixPath
from typing import Any, Iterable, List, Optional, Sequence

DEFAULT_FIELDS: Sequence[str] = ("key", "path", "relative", "basename", "stem")


def view_fields(view: Any, fields: Optional[Sequence[str]] = None) -> List[str]:
    """Return the non-empty identifying field values of ``view`` as posix strings."""
    values: List[str] = []
    for name in fields or DEFAULT_FIELDS:
        value = getattr(view, name, None)
        if value is None and isinstance(view, dict):
            value = view.get(name)
        if value:
            values.append(_to_posix(str(value)))
    return values


def match_view_fields(
    pattern: str,
    view: Any,
    *,
    fields: Optional[Sequence[str]] = None,
    nocase: bool = False,
) -> bool:
    """Check whether ``pattern`` names or glob-matches ``view``.

    Args:
        pattern: Name or glob pattern (no negation prefix)
        view: View-like object (or a plain string path)
        fields: Identifying fields to compare, in order
        nocase: Compare case-insensitively

    Returns:
        True if any field equals or matches the pattern
    """
    if isinstance(view, str):
        values = [_to_posix(view)]
    else:
        values = view_fields(view, fields)
    if not values:
        return False

    pattern = _to_posix(pattern)
    if nocase:
        pattern = pattern.lower()
        values = [v.lower() for v in values]

    if pattern in values:
        return True

    return any(matches_any(value, _expand_braces(pattern)) for value in values)


def matches_any(value: str, patterns: Iterable[str]) -> bool:
    """Glob-match ``value`` against any of ``patterns``.

    ``*`` and ``?`` stay within one path segment, ``**`` spans segments
    (``posts/**/*.md`` also matches ``posts/a.md``). A pattern with a leading
    slash is matched against relative values without it, and a pattern
    without a slash is also compared with the last path segment.
    """
    for pat in patterns:
        if pat.startswith("/") and not value.startswith("/"):
            pat = pat[1:]
        regex = _glob_regex(pat)
        if regex.match(value):
            return True
        if "/" not in pat and regex.match(PurePosixPath(value).name):
            return True
    return False


@lru_cache(maxsize=256)
def _glob_regex(pattern: str) -> re.Pattern[str]:
    """Compile a path glob to an anchored regex."""
    out: List[str] = []
    i, n = 0, len(pattern)
    while i < n:
        char = pattern[i]
        if pattern.startswith("**/", i):
            out.append("(?:.*/)?")
            i += 3
            continue
        if pattern.startswith("**", i):
            out.append(".*")
            i += 2
            continue
        if char == "*":
            out.append("[^/]*")
        elif char == "?":
            out.append("[^/]")
        elif char == "[" and pattern.find("]", i + 2) != -1:
            end = pattern.find("]", i + 2)
            body = pattern[i + 1 : end].replace("\\", "\\\\")
            if body.startswith("!"):
                body = "^/" + body[1:]
            out.append(f"[{body}]")
            i = end + 1
            continue
        else:
            out.append(re.escape(char))
        i += 1
    return re.compile("".join(out) + r"\Z", re.DOTALL)


def _to_posix(value: str) -> str:
    return value.replace("\\", "/")


def _expand_braces(pattern: str) -> List[str]:
    """Expand ``{a,b}`` alternatives into separate view patterns.

    ``posts/*.{md,hbs}`` becomes ``["posts/*.md", "posts/*.hbs"]``; later
    groups are expanded recursively. A group with fewer than two
    alternatives, or an unclosed brace, is left as written.
    """
    head, brace, rest = pattern.partition("{")
    if not brace:
        return [pattern]
    group, closing, tail = rest.partition("}")
    if not closing:
        return [pattern]

    choices = [c.strip() for c in group.split(",") if c.strip()]
    if len(choices) < 2:
        return [pattern]

    expanded: List[str] = []
    for choice in choices:
        expanded.extend(_expand_braces(head + choice + tail))
    return expanded


__all__ = ["DEFAULT_FIELDS", "view_fields", "match_view_fields", "matches_any"]
