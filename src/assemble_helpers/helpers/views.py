"""View helpers: ``content``, ``find``, ``getView`` and ``render``.

    {{content (find "foo")}}          contents of the first view named "foo"
    {{content (getView "pages" "a/b/c/foo.hbs")}}
    {{render "foo.hbs"}}              render a view with the current context

``find`` searches renderable collections (not partials or layouts) by
``stem``, ``basename``, ``relative`` or ``path`` unless a collection is given.
"""
from __future__ import annotations

import logging
from concurrent.futures import Future
from typing import Any, Mapping, Optional

from ..context import HelperContext, HelperOptions, create_context
from ..exceptions import HelperRenderError, ViewNotFoundError
from ..host import is_view, view_text

logger = logging.getLogger(__name__)


def content(ctx: HelperContext, view: Any = None, *, options: Optional[HelperOptions] = None) -> Optional[str]:
    """Return ``view.contents`` as text, or ``view`` itself when it is a string."""
    if is_view(view):
        return view_text(view.contents)
    if isinstance(view, str):
        return view
    return None


def find(ctx: HelperContext, *args: Any, options: Optional[HelperOptions] = None) -> Any:
    """Get the first view named ``args[0]``, optionally from collection ``args[1]``."""
    return ctx.app.find(*args)


def get_view(ctx: HelperContext, *args: Any, options: Optional[HelperOptions] = None) -> Any:
    """Get view ``args[1]`` from collection ``args[0]``."""
    return ctx.app.get_view(*args)


def render(
    ctx: HelperContext,
    value: Any = None,
    locals: Any = None,
    *,
    options: Optional[HelperOptions] = None,
) -> "Future[str]":
    """Render a view object, or the view named ``value``.

    Returns a Future that resolves to the rendered text. Resolution and
    render failures are set on the Future, never raised.
    """
    future: "Future[str]" = Future()
    future.set_running_or_notify_cancel()

    view = value
    if isinstance(value, str):
        view = ctx.app.find(value)
        if view is None:
            future.set_exception(
                ViewNotFoundError(
                    f'render helper cannot find view: "{value}"',
                    context={"view": value},
                )
            )
            return future

    if view is None:
        future.set_exception(ViewNotFoundError("expected the name of a view or a view object"))
        return future

    render_context = create_context(ctx, locals if isinstance(locals, Mapping) else None, options)
    view_name = str(getattr(view, "key", None) or getattr(view, "path", ""))

    def done(err: Optional[BaseException], result: Any = None) -> None:
        if future.done():
            return
        if err is not None:
            logger.debug("render helper failed for %s: %s", view_name, err)
            error = HelperRenderError(str(err), view=view_name)
            error.__cause__ = err
            future.set_exception(error)
            return
        future.set_result(view_text(getattr(result, "contents", result)))

    try:
        ctx.app.render(view, render_context, done)
    except Exception as exc:
        done(exc)
    return future


__all__ = ["content", "find", "get_view", "render"]
