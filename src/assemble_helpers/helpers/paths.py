"""Path helpers: ``assets``, ``asset`` and ``root``.

Each returns a path relative to the view being rendered:

    <link rel="stylesheet" href="{{assets}}/css/styles.css">
    <link rel="stylesheet" href="{{asset 'css/styles.css'}}">
    <a href="{{root 'sitemap.xml'}}"></a>

With ``assets: /site/assets`` and a view at ``/site/a/b/c/two.hbs`` both
stylesheet links resolve to ``../../../assets/css/styles.css``.
"""
from __future__ import annotations

import os
from typing import Any, Callable, Dict, Mapping, Optional

from ..context import HelperContext, HelperOptions, hash_of, helper_name
from ..exceptions import HelperArgumentError
from ..utils.merge import merge_layers
from ..utils.paths import relative_to_view

DirResolver = Callable[[Dict[str, Any]], Any]
PathHelper = Callable[..., str]


def path_options(
    ctx: HelperContext,
    locals: Optional[Mapping[str, Any]] = None,
    options: Optional[HelperOptions] = None,
) -> Dict[str, Any]:
    """Merge app options < helper options < context < locals < hash arguments."""
    app_options = getattr(ctx.app, "options", None)
    return merge_layers(app_options, ctx.options, ctx.context, locals, hash_of(options))


def relative_path(ctx: HelperContext, target: str) -> str:
    """Return ``target`` relative to the current view, without a leading ``./``."""
    view = ctx.current_view
    if view is None:
        raise HelperArgumentError(
            "expected a view to be rendering to compute a relative path",
            context={"target": target},
        )
    return relative_to_view(view, target)


def path_helper(description: str, resolve_dir: DirResolver, *, default_name: str = "path") -> PathHelper:
    """Create a helper returning a path under a configured directory.

    Args:
        description: What the directory is, used in the error message
        resolve_dir: Reads the base directory from merged options

    Returns:
        Helper ``(ctx, filename="", locals=None, *, options=None) -> str``
    """

    def helper(
        ctx: HelperContext,
        filename: Any = "",
        locals: Any = None,
        *,
        options: Optional[HelperOptions] = None,
    ) -> str:
        if isinstance(filename, Mapping):
            locals, filename = filename, ""
        if not isinstance(locals, Mapping):
            locals = None

        base_dir = resolve_dir(path_options(ctx, locals, options))
        if not isinstance(base_dir, str):
            name = helper_name(options, default_name)
            raise HelperArgumentError(
                f"helper {{{{{name}}}}} expected {description} to be defined on the options or context",
                context={"helper": name},
            )

        target = os.path.abspath(os.path.join(base_dir, str(filename or "")))
        return relative_path(ctx, target)

    helper.__name__ = default_name
    return helper


assets = path_helper('"assets" path', lambda opts: opts.get("assets"), default_name="assets")
asset = path_helper('"assets" path', lambda opts: opts.get("assets"), default_name="asset")
root = path_helper(
    'either a "dest" or "root" path',
    lambda opts: opts.get("root") or opts.get("dest"),
    default_name="root",
)


__all__ = ["path_options", "relative_path", "path_helper", "assets", "asset", "root"]
