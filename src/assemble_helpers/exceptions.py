from __future__ import annotations

from typing import Any, Dict, Mapping


class AssembleHelpersError(Exception):
    """Base exception for template helpers."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class HelperArgumentError(AssembleHelpersError, TypeError):
    """Raised when a helper receives a missing or wrong-typed argument."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        AssembleHelpersError.__init__(self, message, context=context)
        TypeError.__init__(self, message)


class CollectionNotFoundError(HelperArgumentError):
    """Raised when a named collection does not exist on the app."""


class ViewNotFoundError(AssembleHelpersError, LookupError):
    """Raised when a view cannot be resolved."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        AssembleHelpersError.__init__(self, message, context=context)
        LookupError.__init__(self, message)


class HelperRenderError(AssembleHelpersError, RuntimeError):
    """Raised when the app fails to render a view for the render helper."""

    def __init__(
        self,
        message: str,
        *,
        reason: str = "helper render",
        view: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        ctx["reason"] = reason
        if view:
            ctx["view"] = view
        AssembleHelpersError.__init__(self, message, context=ctx)
        RuntimeError.__init__(self, message)

    @property
    def reason(self) -> str:
        return str(self.context.get("reason", ""))


class ConfigError(AssembleHelpersError, ValueError):
    """Raised when helper configuration is invalid."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        AssembleHelpersError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


__all__ = [
    "AssembleHelpersError",
    "HelperArgumentError",
    "CollectionNotFoundError",
    "ViewNotFoundError",
    "HelperRenderError",
    "ConfigError",
]
