"""Expose registered helpers to the pybars3 Handlebars engine.

pybars calls helpers as ``helper(this, *args, **hash)`` and block helpers as
``helper(this, options, *args, **hash)`` where ``options`` is a dict holding
the ``fn`` and ``inverse`` programs. ``bind_helpers`` adapts both forms to
``fn(ctx, *args, options=HelperOptions(...))`` for one rendering view.
Block programs rendered with ``data`` get a pybars ``Scope`` so that
``@index``, ``@first`` and ``@last`` resolve inside the block.

Example:
    ctx = HelperContext(app=app, view=view, options=app.options, context=data)
    text = render_template(view.contents, data, bind_helpers(registry, ctx))
"""
from __future__ import annotations

from concurrent.futures import Future
from functools import lru_cache
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from pybars import Compiler, Scope

from ..context import HelperContext, HelperOptions
from ..registry import HelperRegistry

PybarsHelper = Callable[..., Any]


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, list):
        return "".join(str(part) for part in value)
    return str(value)


def _split_block(args: Tuple[Any, ...]) -> Tuple[Optional[Dict[str, Any]], Tuple[Any, ...]]:
    if args and isinstance(args[0], dict) and callable(args[0].get("fn")):
        return args[0], args[1:]
    return None, args


def _block_scope(context: Any, this: Any, block: Dict[str, Any], data: Optional[Mapping[str, Any]]) -> Any:
    if not data:
        return context
    return Scope(
        context,
        this,
        block.get("root"),
        index=data.get("index"),
        key=data.get("key"),
        first=data.get("first"),
        last=data.get("last"),
    )


def _helper_options(name: str, this: Any, block: Optional[Dict[str, Any]], kwargs: Dict[str, Any]) -> HelperOptions:
    if block is None:
        return HelperOptions(name=name, hash=dict(kwargs))

    program = block["fn"]
    inverse = block.get("inverse")

    def fn(context: Any, data: Any = None, block_params: Any = None) -> str:
        return _to_text(program(_block_scope(context, this, block, data)))

    def inv(context: Any, data: Any = None, block_params: Any = None) -> str:
        return _to_text(inverse(context)) if callable(inverse) else ""

    return HelperOptions(name=name, hash=dict(kwargs), fn=fn, inverse=inv)


def adapt_helper(name: str, func: Callable[..., Any], ctx: HelperContext, *, is_async: bool = False) -> PybarsHelper:
    """Wrap ``func`` so pybars can call it while rendering ``ctx.view``."""

    def pybars_helper(this: Any, *args: Any, **kwargs: Any) -> Any:
        block, positional = _split_block(args)
        options = _helper_options(name, this, block, kwargs)
        result = func(ctx, *positional, options=options)
        if is_async or isinstance(result, Future):
            result = result.result()
        return result

    pybars_helper.__name__ = f"pybars_{name.replace('-', '_')}"
    return pybars_helper


def bind_helpers(registry: HelperRegistry, ctx: HelperContext) -> Dict[str, PybarsHelper]:
    """Return pybars helpers for every helper in ``registry`` bound to ``ctx``."""
    bound: Dict[str, PybarsHelper] = {}
    for name, func in registry.sync.items():
        bound[name] = adapt_helper(name, func, ctx)
    for name, func in registry.async_.items():
        bound[name] = adapt_helper(name, func, ctx, is_async=True)
    return bound


_compiler = Compiler()


@lru_cache(maxsize=256)
def compile_template(source: str) -> Callable[..., Any]:
    """Compile Handlebars ``source`` (cached by source text)."""
    return _compiler.compile(source)


def render_template(
    source: str,
    data: Any,
    helpers: Mapping[str, PybarsHelper],
    partials: Optional[Mapping[str, Any]] = None,
) -> str:
    """Render ``source`` with ``data`` and bound ``helpers``."""
    template = compile_template(source)
    return _to_text(template(data, helpers=dict(helpers), partials=dict(partials or {})))


__all__ = ["PybarsHelper", "adapt_helper", "bind_helpers", "compile_template", "render_template"]
