"""
Helper plugin configuration (YAML + JSON Schema).

Configuration sources (highest to lowest priority):
1. Options passed to ``helpers(options)``
2. YAML file named by ``options["config_file"]``
3. Bundled defaults: assemble_helpers/data/config/defaults.yaml

The merged result is validated against
assemble_helpers/data/schemas/config.yaml.
"""
from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import jsonschema
import yaml

from .data import read_yaml
from .exceptions import ConfigError
from .utils.merge import deep_merge
from .utils.values import get_value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HelperConfig:
    """Validated plugin configuration."""

    raw: Dict[str, Any] = field(default_factory=dict)

    def get(self, path: str, default: Any = None) -> Any:
        value = get_value(self.raw, path)
        return default if value is None else value

    @property
    def excluded_helpers(self) -> List[str]:
        return list(self.get("helpers.exclude", []))

    @property
    def match_fields(self) -> List[str]:
        return list(self.get("match.fields", []))

    @property
    def match_nocase(self) -> bool:
        return bool(self.get("match.nocase", False))

    @property
    def sort_fields(self) -> List[str]:
        return list(self.get("sort_items.fields", []))

    @property
    def link_lookups(self) -> List[str]:
        return list(self.get("link_to.lookups", []))


def load_defaults() -> Dict[str, Any]:
    """Return a copy of the bundled default configuration."""
    return copy.deepcopy(read_yaml("config", "defaults.yaml"))


def load_config_file(path: Path) -> Dict[str, Any]:
    """Load a YAML configuration file, failing on invalid content."""
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}", context={"path": str(path)})
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}", context={"path": str(path)}) from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file must be a YAML mapping, got {type(data).__name__}",
            context={"path": str(path)},
        )
    return data


def validate_config(config: Mapping[str, Any]) -> None:
    """Validate ``config`` against the bundled schema.

    Raises:
        ConfigError: listing every violation with its path
    """
    schema = read_yaml("schemas", "config.yaml")
    validator = jsonschema.Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(dict(config)), key=lambda e: list(e.path))
    if errors:
        details = [
            f"{'.'.join(str(p) for p in err.path) or '<root>'}: {err.message}" for err in errors
        ]
        raise ConfigError(
            "Invalid helper configuration: " + "; ".join(details),
            context={"errors": details},
        )


def load_config(options: Optional[Mapping[str, Any]] = None) -> HelperConfig:
    """Build the plugin configuration from defaults, a config file and ``options``."""
    overrides: Dict[str, Any] = dict(options or {})
    merged = load_defaults()

    config_file = overrides.get("config_file")
    if config_file:
        overrides["config_file"] = str(config_file)
        logger.debug("Loading helper config from %s", config_file)
        merged = deep_merge(merged, load_config_file(Path(config_file)))

    merged = deep_merge(merged, overrides)
    validate_config(merged)
    return HelperConfig(raw=merged)


__all__ = [
    "HelperConfig",
    "load_defaults",
    "load_config_file",
    "validate_config",
    "load_config",
]
