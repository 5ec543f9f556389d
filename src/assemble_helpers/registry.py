"""Registry for template helpers.

Hosts that do not keep their own helper tables can store helpers here and
expose ``helper`` / ``async_helper`` by delegating to ``add`` / ``add_async``:

    registry = HelperRegistry()

    @registry.register("shout")
    def shout(ctx: HelperContext, text: str, *, options=None) -> str:
        return text.upper()

Async helpers return a ``concurrent.futures.Future``.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

HelperFn = Callable[..., Any]


class HelperRegistry:
    """Sync and async helpers keyed by name."""

    def __init__(self) -> None:
        self._sync: Dict[str, HelperFn] = {}
        self._async: Dict[str, HelperFn] = {}

    def register(self, name: str, *, is_async: bool = False) -> Callable[[HelperFn], HelperFn]:
        """Decorator to register a helper."""
        def decorator(func: HelperFn) -> HelperFn:
            if is_async:
                self.add_async(name, func)
            else:
                self.add(name, func)
            return func
        return decorator

    def add(self, name: str, func: HelperFn) -> None:
        """Add a synchronous helper, replacing any helper with the same name."""
        self._async.pop(name, None)
        self._sync[name] = func

    def add_async(self, name: str, func: HelperFn) -> None:
        """Add an asynchronous (Future-returning) helper."""
        self._sync.pop(name, None)
        self._async[name] = func

    def get(self, name: str) -> Optional[HelperFn]:
        """Get a helper by name, or None if not found."""
        return self._sync.get(name) or self._async.get(name)

    def is_async(self, name: str) -> bool:
        return name in self._async

    @property
    def sync(self) -> Dict[str, HelperFn]:
        return dict(self._sync)

    @property
    def async_(self) -> Dict[str, HelperFn]:
        return dict(self._async)

    def __contains__(self, name: str) -> bool:
        return name in self._sync or name in self._async

    def __len__(self) -> int:
        return len(self._sync) + len(self._async)

    def list_helpers(self) -> List[str]:
        """List all registered helper names."""
        return [*self._sync.keys(), *self._async.keys()]


__all__ = ["HelperFn", "HelperRegistry"]
