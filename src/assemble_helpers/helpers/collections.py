"""Collection helpers: ``items``, ``eachItems``, ``sortItems`` and ``matchView``.

    {{#items "posts"}}
      {{#each .}}{{data.title}}{{/each}}
    {{else}}
      No posts yet.
    {{/items}}

    {{#eachItems "posts" filter="!index" sortBy="data.date"}}
      {{stem}}
    {{/eachItems}}

    {{#each (sortItems (items "pages") order) as |item|}}
      {{item.basename}}
    {{/each}}

``eachItems`` always filters before sorting, then iterates like ``each``.
"""
from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Sequence

from ..config import HelperConfig
from ..context import HelperContext, HelperOptions, create_context, hash_of, merge_options
from ..exceptions import CollectionNotFoundError, HelperArgumentError
from ..host import is_collection, is_item_list, is_view
from ..items import each_block, sort_items as _sort_items
from ..utils.patterns import match_view_fields


def match_view(
    ctx: Optional[HelperContext],
    pattern: Any = None,
    *,
    options: Optional[HelperOptions] = None,
    settings: Optional[HelperConfig] = None,
) -> Callable[[Any], bool]:
    """Return a predicate matching views against ``pattern``.

    A leading ``!`` negates the match. Hash arguments are match options
    (``nocase``); configured ``match`` settings are the defaults.
    """
    if not isinstance(pattern, str):
        raise HelperArgumentError("expected pattern to be a string", context={"pattern": repr(pattern)})

    opts = hash_of(options)
    fields: Optional[Sequence[str]] = opts.get("fields")
    nocase = opts.get("nocase")
    if settings is not None:
        fields = fields or settings.match_fields
        if nocase is None:
            nocase = settings.match_nocase

    negated = pattern.startswith("!")
    if negated:
        pattern = pattern[1:]

    def predicate(item: Any) -> bool:
        matched = match_view_fields(pattern, item, fields=fields, nocase=bool(nocase))
        return not matched if negated else matched

    return predicate


def _collection(ctx: HelperContext, name: Any, helper: str) -> Any:
    if is_collection(name):
        return name
    collections = getattr(ctx.app, "collections", None) or {}
    collection = collections.get(name) if isinstance(name, str) else None
    if collection is None:
        raise CollectionNotFoundError(
            f"helper {{{{{helper}}}}} cannot get collection {name}",
            context={"helper": helper, "collection": str(name)},
        )
    return collection


def _is_item(value: Any) -> bool:
    return is_view(value) or bool(getattr(value, "is_item", False))


def items(ctx: HelperContext, name: Any = None, *, options: Optional[HelperOptions] = None) -> Any:
    """Return the items of collection ``name`` or render a block with them.

    ``name`` may be a collection name, a collection, a list object or a list
    of items. List objects and item lists are returned as-is.
    """
    if is_item_list(name):
        return name.items

    if isinstance(name, list) and name and _is_item(name[0]):
        return name

    collection = _collection(ctx, name, "items")
    item_list = ctx.app.list({"on_load": False})
    item_list.add_items(collection.views)

    if not item_list.items:
        return options.render_inverse([], create_context(ctx, {}, options)) if options else []

    return options.render_fn(item_list.items, item_list.items) if options else item_list.items


def each_items(
    ctx: HelperContext,
    name: Any = None,
    locals: Any = None,
    *,
    options: Optional[HelperOptions] = None,
    settings: Optional[HelperConfig] = None,
) -> Any:
    """Iterate over the items of collection ``name``.

    Hash options:
        filter: callable, or a pattern/name (``"!index"`` excludes index)
        sortBy: property path (``"data.date"``) or function
    """
    if not isinstance(name, str):
        raise HelperArgumentError(
            'helper {{eachItems}} expected collection "name" to be a string',
            context={"name": repr(name)},
        )

    opts = merge_options(None, locals if isinstance(locals, Mapping) else None, options)
    collection = _collection(ctx, name, "eachItems")

    item_list = ctx.app.list({"on_load": False})
    item_list.add_items(collection.views)

    flt = opts.get("filter")
    if flt:
        if isinstance(flt, str):
            item_list = item_list.filter(match_view(ctx, flt, options=options, settings=settings))
        else:
            item_list = item_list.filter(flt)

    sort_by = opts.get("sortBy") or opts.get("sort_by")
    if sort_by:
        item_list = item_list.sort_by(sort_by)

    return each_block(item_list.items, options, create_context(ctx, {}, options))


def sort_items(
    ctx: HelperContext,
    values: Any = None,
    order: Any = None,
    *,
    options: Optional[HelperOptions] = None,
    settings: Optional[HelperConfig] = None,
) -> list:
    """Sort and filter ``values`` to follow the names in ``order``.

    ``order`` may be a list, a locals mapping with an ``order`` key, or the
    ``order`` hash argument.
    """
    if isinstance(order, Mapping):
        order = order.get("order")
    if order is None:
        order = hash_of(options).get("order")
    if is_item_list(values):
        values = values.items
    if not values or not order:
        return list(values or [])
    if isinstance(order, str):
        order = [order]

    fields = settings.sort_fields if settings is not None else None
    return _sort_items(values, order, fields=fields)


__all__ = ["match_view", "items", "each_items", "sort_items"]
