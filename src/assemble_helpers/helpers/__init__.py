"""Template helpers grouped by concern.

- config: config, option, enabled, disabled
- views: content, find, getView, render
- collections: items, eachItems, sortItems, matchView
- paths: assets, asset, root
- links: link-to, linkTo
"""
from __future__ import annotations

from .collections import each_items, items, match_view, sort_items
from .config import config, disabled, enabled, option
from .links import link_to
from .paths import asset, assets, path_helper, root
from .views import content, find, get_view, render

# Template name -> helper function. ``render`` is the only async helper.
SYNC_HELPERS = {
    "content": content,
    "find": find,
    "getView": get_view,
    "config": config,
    "option": option,
    "enabled": enabled,
    "disabled": disabled,
    "matchView": match_view,
    "items": items,
    "eachItems": each_items,
    "sortItems": sort_items,
    "link-to": link_to,
    "linkTo": link_to,
    "assets": assets,
    "asset": asset,
    "root": root,
}

ASYNC_HELPERS = {
    "render": render,
}

# Helpers that accept the plugin configuration as ``settings``.
CONFIGURABLE_HELPERS = frozenset({"matchView", "eachItems", "sortItems", "link-to", "linkTo"})

__all__ = [
    "SYNC_HELPERS",
    "ASYNC_HELPERS",
    "CONFIGURABLE_HELPERS",
    "content",
    "find",
    "get_view",
    "render",
    "config",
    "option",
    "enabled",
    "disabled",
    "match_view",
    "items",
    "each_items",
    "sort_items",
    "link_to",
    "path_helper",
    "assets",
    "asset",
    "root",
]
