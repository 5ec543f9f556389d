"""
Bundled data resource helpers.

Provides access to the default configuration and schema files shipped
with the package using importlib.resources.
"""

from __future__ import annotations

from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml


def get_data_path(subpackage: str, filename: str = "") -> Path:
    """Return the path of a bundled ``config`` or ``schemas`` file.

    Without ``filename`` the directory itself is returned, e.g.
    ``get_data_path("schemas", "config.yaml")`` for the settings schema.
    """
    root = Path(str(resources.files("assemble_helpers.data") / subpackage))
    return root / filename if filename else root


@lru_cache(maxsize=16)
def read_yaml(subpackage: str, filename: str) -> dict[str, Any]:
    """
    Read and parse a bundled YAML data file (cached).

    Callers must copy the result before mutating it.
    """
    path = get_data_path(subpackage, filename)
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


__all__ = ["get_data_path", "read_yaml"]
