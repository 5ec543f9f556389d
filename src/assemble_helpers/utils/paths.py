"""Relative path helpers.

Computes the path from the view being rendered to a destination file, the
way links and asset URLs are written into rendered pages.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Union

PathLike = Union[str, "os.PathLike[str]"]


def relative_dest(from_path: PathLike, to_path: PathLike) -> str:
    """Return the posix path to ``to_path`` from the directory of ``from_path``.

    ``from_path`` is treated as a file when it has an extension, so the
    relative path starts from its parent directory. Results inside that
    directory are prefixed with ``./``.

    Example:
        >>> relative_dest("/site/a/b/c/two.hbs", "/site/assets/css/foo.css")
        '../../../assets/css/foo.css'
        >>> relative_dest("/site/four.hbs", "/site/assets")
        './assets'
    """
    start = Path(os.path.abspath(from_path))
    if start.suffix:
        start = start.parent
    rel = os.path.relpath(os.path.abspath(to_path), start).replace(os.sep, "/")
    if not rel.startswith("."):
        rel = f"./{rel}"
    return rel


def strip_dot_slash(rel: str) -> str:
    """Strip a single leading ``./`` (never an interior ``../``)."""
    return rel[2:] if rel[:2] == "./" else rel


def view_source_path(view: Any) -> str:
    """Return the path a view is rendered from: ``data["path"]`` or ``view.path``."""
    data = getattr(view, "data", None) or {}
    return str(data.get("path") or getattr(view, "path", "") or "")


def relative_to_view(view: Any, target: PathLike) -> str:
    """Return ``target`` relative to ``view``, without a leading ``./``."""
    return strip_dot_slash(relative_dest(view_source_path(view), target))


__all__ = ["relative_dest", "strip_dot_slash", "view_source_path", "relative_to_view"]
