"""Plugin entry point registering every helper on an app.

    app.use(helpers())
    app.use(helpers({"helpers": {"exclude": ["render"]}}))

The returned callable calls ``app.helper(name, fn)`` for each sync helper
and ``app.async_helper(name, fn)`` for ``render``.
"""
from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Mapping, Optional

from .config import HelperConfig, load_config
from .helpers import ASYNC_HELPERS, CONFIGURABLE_HELPERS, SYNC_HELPERS

logger = logging.getLogger(__name__)


def _bind(name: str, fn: Callable[..., Any], settings: HelperConfig) -> Callable[..., Any]:
    if name in CONFIGURABLE_HELPERS:
        bound = functools.partial(fn, settings=settings)
        functools.update_wrapper(bound, fn)
        return bound
    return fn


def helpers(options: Optional[Mapping[str, Any]] = None) -> Callable[[Any], Any]:
    """Create a plugin that registers the helpers on ``app``.

    Args:
        options: Plugin options merged over the bundled defaults

    Raises:
        ConfigError: when the options are invalid
    """
    settings = load_config(options)
    excluded = set(settings.excluded_helpers)

    def plugin(app: Any) -> Any:
        registered = 0
        for name, fn in SYNC_HELPERS.items():
            if name in excluded:
                continue
            app.helper(name, _bind(name, fn, settings))
            registered += 1
        for name, fn in ASYNC_HELPERS.items():
            if name in excluded:
                continue
            app.async_helper(name, _bind(name, fn, settings))
            registered += 1
        logger.debug("Registered %d template helpers (%d excluded)", registered, len(excluded))
        return app

    return plugin


__all__ = ["helpers"]
