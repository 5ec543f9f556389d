"""Item lists and block iteration.

``ItemList`` is the transient, helper-local list of views that ``items``
and ``eachItems`` build from a collection. Filtering and sorting return new
lists; items keep their source order unless sorted, and sorting is stable.
"""
from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from .context import HelperOptions
from .utils.patterns import DEFAULT_FIELDS, match_view_fields
from .utils.values import get_value

SortKey = Union[str, Callable[..., Any]]


class ItemList:
    """Ordered sequence of views with ``filter`` and ``sort_by``.

    Example:
        items = ItemList().add_items(collection.views)
        items = items.filter(lambda v: v.stem != "index").sort_by("data.date")
        [v.stem for v in items]
    """

    def __init__(self, items: Optional[Iterable[Any]] = None, options: Optional[Dict[str, Any]] = None) -> None:
        self.options: Dict[str, Any] = dict(options or {})
        self._items: List[Any] = list(items or [])

    @property
    def items(self) -> List[Any]:
        return list(self._items)

    def add_item(self, item: Any) -> "ItemList":
        self._items.append(item)
        return self

    def add_items(self, items: Union[Mapping[str, Any], Iterable[Any]]) -> "ItemList":
        """Add views from a mapping (key -> view) or an iterable."""
        values = items.values() if isinstance(items, Mapping) else items
        for item in values:
            self.add_item(item)
        return self

    def filter(self, predicate: Callable[[Any], Any]) -> "ItemList":
        """Return a new list with the items for which ``predicate`` is truthy."""
        return ItemList([item for item in self._items if predicate(item)], self.options)

    def sort_by(self, key: SortKey) -> "ItemList":
        """Return a new list sorted by a property path or a function.

        ``key`` may be a dot-separated property path (``"data.date"``), a
        one-argument key function or a two-argument comparator returning a
        negative, zero or positive number. Items without a value for a
        property path sort last, and numbers sort before other value types.
        """
        if isinstance(key, str):
            sort_key: Callable[[Any], Any] = functools.partial(_property_key, key)
        elif _is_comparator(key):
            sort_key = functools.cmp_to_key(key)
        else:
            sort_key = key
        return ItemList(sorted(self._items, key=sort_key), self.options)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"ItemList({len(self._items)} items)"


def _property_key(path: str, item: Any) -> Tuple[Any, ...]:
    # Missing values last; numbers before other types, each type compared on its own.
    value = get_value(item, path)
    if value is None:
        return (1, 0, "", "")
    if isinstance(value, (int, float)):
        return (0, 0, "", value)
    return (0, 1, type(value).__name__, value)


def _is_comparator(fn: Callable[..., Any]) -> bool:
    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        return False
    positional = [
        p
        for p in params
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and p.default is p.empty
    ]
    return len(positional) == 2


def each_block(items: Sequence[Any], options: Optional[HelperOptions], this: Any = None) -> Any:
    """Render the block once per item, or the inverse block when empty.

    Each item is rendered with ``data`` (``index``, ``first``, ``last``) and
    ``block_params`` (``[item, index]``). When called without a block the
    items are returned unchanged.
    """
    if options is None or not options.is_block:
        return list(items)

    if not items:
        return options.render_inverse("", this)

    last = len(items) - 1
    out: List[str] = []
    for index, item in enumerate(items):
        data = {"index": index, "first": index == 0, "last": index == last}
        out.append(str(options.render_fn(item, item, data=data, block_params=[item, index])))
    return "".join(out)


def sort_items(
    items: Iterable[Any],
    order: Iterable[str],
    *,
    fields: Optional[Sequence[str]] = None,
) -> List[Any]:
    """Reorder ``items`` to follow the names in ``order``.

    Each name picks the first not-yet-used item whose identity fields equal
    (or match) it. Names without a match and items that are not named are
    dropped.

    Example:
        >>> [i.stem for i in sort_items(pages, ["bbb", "ccc", "aaa"])]  # doctest: +SKIP
        ['bbb', 'ccc', 'aaa']
    """
    pool = list(items)
    fields = tuple(fields or DEFAULT_FIELDS)
    result: List[Any] = []
    for name in order:
        for index, item in enumerate(pool):
            if match_view_fields(str(name), item, fields=fields):
                result.append(pool.pop(index))
                break
    return result


__all__ = ["ItemList", "SortKey", "each_block", "sort_items"]
