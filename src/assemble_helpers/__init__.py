"""
assemble-helpers - template helpers for Handlebars-based site assembly

Helpers query the host's view graph, read configuration, render nested
views and compute relative asset and link paths.
"""

from .context import HelperContext, HelperOptions
from .exceptions import (
    AssembleHelpersError,
    CollectionNotFoundError,
    ConfigError,
    HelperArgumentError,
    HelperRenderError,
    ViewNotFoundError,
)
from .items import ItemList
from .plugin import helpers
from .registry import HelperRegistry

__version__ = "1.0.0"
__all__ = [
    "__version__",
    "helpers",
    "HelperContext",
    "HelperOptions",
    "HelperRegistry",
    "ItemList",
    "AssembleHelpersError",
    "CollectionNotFoundError",
    "ConfigError",
    "HelperArgumentError",
    "HelperRenderError",
    "ViewNotFoundError",
]
