"""Template engine bindings."""
from __future__ import annotations

from .pybars import adapt_helper, bind_helpers, compile_template, render_template

__all__ = ["adapt_helper", "bind_helpers", "compile_template", "render_template"]
