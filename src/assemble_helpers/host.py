"""Host application contract.

Views, collections, lists and rendering belong to the host app. Helpers
only talk to it through the protocols below, so any app exposing these
members can use them.
"""
from __future__ import annotations

from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Protocol,
    Union,
    runtime_checkable,
)


@runtime_checkable
class View(Protocol):
    """A single template/document plus metadata."""

    path: str
    contents: Union[str, bytes, None]
    data: Dict[str, Any]


@runtime_checkable
class Collection(Protocol):
    """A named set of views keyed by view key."""

    views: Mapping[str, Any]


@runtime_checkable
class ItemListLike(Protocol):
    """Transient ordered list of views created per helper call."""

    @property
    def items(self) -> List[Any]: ...

    def add_items(self, items: Union[Mapping[str, Any], Iterable[Any]]) -> Any: ...

    def filter(self, predicate: Callable[[Any], Any]) -> "ItemListLike": ...

    def sort_by(self, key: Any) -> "ItemListLike": ...


RenderCallback = Callable[[Optional[BaseException], Any], None]


class App(Protocol):
    """Members of the host app used by helpers."""

    options: Dict[str, Any]
    collections: Mapping[str, Any]

    def helper(self, name: str, fn: Callable[..., Any]) -> Any: ...

    def async_helper(self, name: str, fn: Callable[..., Any]) -> Any: ...

    def find(self, name: str, collection: Optional[str] = None) -> Any: ...

    def get_view(self, collection: str, name: str) -> Any: ...

    def list(self, options: Optional[Dict[str, Any]] = None) -> ItemListLike: ...

    def render(self, view: Any, context: Dict[str, Any], callback: RenderCallback) -> None: ...


def is_view(obj: Any) -> bool:
    """Return True if ``obj`` exposes the view capability (contents, path, data)."""
    return isinstance(obj, View) and not isinstance(obj, (str, bytes, Mapping))


def is_collection(obj: Any) -> bool:
    """Return True if ``obj`` is a collection of views."""
    return isinstance(obj, Collection) and not isinstance(obj, Mapping)


def is_item_list(obj: Any) -> bool:
    """Return True if ``obj`` is a list object (not a plain python list)."""
    return isinstance(obj, ItemListLike)


def view_text(contents: Union[str, bytes, None]) -> str:
    """Return view contents as text."""
    if contents is None:
        return ""
    if isinstance(contents, bytes):
        return contents.decode("utf-8")
    return str(contents)


__all__ = [
    "View",
    "Collection",
    "ItemListLike",
    "App",
    "RenderCallback",
    "is_view",
    "is_collection",
    "is_item_list",
    "view_text",
]
