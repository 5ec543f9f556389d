"""Helper call context.

Every helper is invoked as ``fn(ctx, *args, options=HelperOptions(...))``:

- ``HelperContext`` is built by the host for the view being rendered and
  carries the app, the view, the app options and the render context
  (cached app data merged with view data and render locals).
- ``HelperOptions`` carries what the template engine passes: the helper
  name, hash (named) arguments and, for block helpers, the ``fn`` and
  ``inverse`` render callbacks.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

from .utils.merge import merge_layers
from .utils.values import get_value

# fn(context, data=None, block_params=None) -> rendered text
BlockFn = Callable[..., str]


@dataclass
class HelperOptions:
    """Options object passed as the trailing argument of a helper call."""

    name: str = ""
    hash: Dict[str, Any] = field(default_factory=dict)
    fn: Optional[BlockFn] = None
    inverse: Optional[BlockFn] = None

    @property
    def is_block(self) -> bool:
        """True when the helper was called as a block (``{{#name}}``)."""
        return self.fn is not None

    def render_fn(
        self,
        value: Any,
        context: Any,
        *,
        data: Optional[Dict[str, Any]] = None,
        block_params: Optional[List[Any]] = None,
    ) -> Any:
        """Render the main block with ``context``, or return ``value`` when not a block."""
        if self.fn is None:
            return value
        return self.fn(context, data=data, block_params=block_params)

    def render_inverse(self, value: Any, context: Any) -> Any:
        """Render the else-block with ``context``, or return ``value`` when not a block."""
        if self.fn is None:
            return value
        if self.inverse is None:
            return ""
        return self.inverse(context)


@dataclass
class HelperContext:
    """Host-provided context a helper runs in."""

    app: Any
    view: Any = None
    options: Dict[str, Any] = field(default_factory=dict)
    context: Dict[str, Any] = field(default_factory=dict)

    @property
    def current_view(self) -> Any:
        """The view being rendered: ``view`` or ``context["view"]``."""
        return self.view if self.view is not None else self.context.get("view")

    def get_option(self, path: str) -> Any:
        """Get an option value by dot-separated path."""
        return get_value(self.options, path)


def is_options(value: Any) -> bool:
    """Return True if ``value`` is a helper options object."""
    return isinstance(value, HelperOptions)


def hash_of(options: Optional[HelperOptions]) -> Dict[str, Any]:
    """Return the hash arguments of ``options`` (empty when missing)."""
    if options is None:
        return {}
    return options.hash or {}


def helper_name(options: Optional[HelperOptions], default: str = "helper") -> str:
    """Return the name the helper was called with."""
    return (options.name if options is not None else "") or default


def create_context(
    ctx: HelperContext,
    locals: Optional[Mapping[str, Any]] = None,
    options: Optional[HelperOptions] = None,
) -> Dict[str, Any]:
    """Merge app options < render context < locals < hash arguments."""
    return merge_layers(ctx.options, ctx.context, locals, hash_of(options))


def merge_options(
    ctx: Optional[HelperContext],
    locals: Optional[Mapping[str, Any]] = None,
    options: Optional[HelperOptions] = None,
) -> Dict[str, Any]:
    """Merge helper options < locals < hash arguments.

    When ``ctx`` is None only locals and hash arguments are merged.
    """
    base = ctx.options if ctx is not None else None
    return merge_layers(base, locals, hash_of(options))


__all__ = [
    "BlockFn",
    "HelperOptions",
    "HelperContext",
    "is_options",
    "hash_of",
    "helper_name",
    "create_context",
    "merge_options",
]
