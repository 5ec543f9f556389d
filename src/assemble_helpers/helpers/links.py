"""Link helper: ``link-to`` (alias ``linkTo``).

    {{link-to "index"}}            first view named "index" in any collection
    {{link-to "index" "posts"}}    "index" from the posts collection
    {{link-to "about" "pages" lookups}}

Returns the relative path from the view being rendered to the destination
of the linked view, or an empty string when it cannot be resolved.
"""
from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

from ..config import HelperConfig
from ..context import HelperContext, HelperOptions
from ..utils.values import get_value
from .paths import relative_path

logger = logging.getLogger(__name__)

DEFAULT_DEST_LOOKUPS: Sequence[str] = ("data.permalink", "dest", "data.path", "path")


def _find_target(ctx: HelperContext, key: str, collection: Optional[str], lookups: List[str]) -> Any:
    if collection and lookups:
        views = getattr((ctx.app.collections or {}).get(collection), "views", None) or {}
        for view in views.values():
            if any(get_value(view, lookup) == key for lookup in lookups):
                return view
        return None
    if collection:
        return ctx.app.get_view(collection, key)
    return ctx.app.find(key)


def dest_path(view: Any, lookups: Optional[Sequence[str]] = None) -> Optional[str]:
    """Return the first set destination property of ``view``."""
    for lookup in lookups or DEFAULT_DEST_LOOKUPS:
        value = get_value(view, lookup)
        if isinstance(value, str) and value:
            return value
    return None


def link_to(
    ctx: HelperContext,
    key: Any = None,
    collection: Any = None,
    lookups: Any = None,
    *,
    options: Optional[HelperOptions] = None,
    settings: Optional[HelperConfig] = None,
) -> str:
    """Return the relative path from the current view to view ``key``."""
    if not isinstance(key, str) or not key:
        return ""
    if isinstance(collection, (list, tuple)):
        collection, lookups = None, collection
    if not isinstance(collection, str):
        collection = None
    match_lookups = [str(item) for item in lookups] if isinstance(lookups, (list, tuple)) else []

    target = _find_target(ctx, key, collection, match_lookups)
    if target is None:
        logger.warning("link-to could not find view %r (collection=%s)", key, collection or "*")
        return ""

    dest_lookups = settings.link_lookups if settings is not None else None
    dest = dest_path(target, dest_lookups)
    if dest is None:
        logger.warning("link-to view %r has no destination path", key)
        return ""
    return relative_path(ctx, dest)


__all__ = ["DEFAULT_DEST_LOOKUPS", "dest_path", "link_to"]
