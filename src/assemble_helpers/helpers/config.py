"""Configuration helpers: ``config``, ``option``, ``enabled``, ``disabled``.

Example (app options ``{"a": {"b": "c"}, "x": "z"}``, data ``{"a": {"b": "d"}}``):

    {{config "x"}}        => z
    {{config "a.b"}}      => d      (context overrides options)
    {{config foo "a.b"}}  => locals from ``foo`` override everything
    {{option "a.b"}}      => c
    {{enabled "x"}}       => false  (only a literal True is enabled)
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from ..context import HelperContext, HelperOptions, create_context
from ..exceptions import HelperArgumentError
from ..utils.values import get_value


def _expect_prop(name: str, prop: Any) -> str:
    if not isinstance(prop, str):
        raise HelperArgumentError(
            f'helper {{{{{name}}}}} expected "prop" to be a string',
            context={"helper": name, "prop": repr(prop)},
        )
    return prop


def config(
    ctx: HelperContext,
    prop: Any = None,
    locals: Any = None,
    *,
    options: Optional[HelperOptions] = None,
) -> Any:
    """Get ``prop`` from options, context, locals and hash arguments.

    Accepts ``config(prop, locals)`` and ``config(locals, prop)``.
    Precedence: hash > locals > context > options. Missing values are None.
    """
    if isinstance(locals, str):
        prop, locals = locals, prop
    prop = _expect_prop("config", prop)
    if not isinstance(locals, Mapping):
        locals = {}
    return get_value(create_context(ctx, locals, options), prop)


def option(ctx: HelperContext, prop: Any = None, *, options: Optional[HelperOptions] = None) -> Any:
    """Return the value of ``prop`` from the app options."""
    return get_value(ctx.options, _expect_prop("option", prop))


def enabled(ctx: HelperContext, prop: Any = None, *, options: Optional[HelperOptions] = None) -> bool:
    """Return True if option ``prop`` is exactly ``True``."""
    return get_value(ctx.options, _expect_prop("enabled", prop)) is True


def disabled(ctx: HelperContext, prop: Any = None, *, options: Optional[HelperOptions] = None) -> bool:
    """Return True if option ``prop`` is exactly ``False``."""
    return get_value(ctx.options, _expect_prop("disabled", prop)) is False


__all__ = ["config", "option", "enabled", "disabled"]
