"""Exception types shared by the resolver, exporter and request parsing."""
from __future__ import annotations

from typing import Any, Dict, List


class UIToolkitError(Exception):
    """Base class for errors raised by the table toolkit."""


class MalformedPathError(UIToolkitError, ValueError):
    """Raised when an attribute path is empty or contains an empty segment."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Malformed attribute path: {path!r}")
        self.path = path


class FieldNotFoundError(UIToolkitError, LookupError):
    """Raised when a path segment names no field in the object's type chain."""

    def __init__(self, segment: str, type_name: str) -> None:
        super().__init__(f"Field {segment!r} not found on {type_name}")
        self.segment = segment
        self.type_name = type_name


class ResolutionFailedError(UIToolkitError):
    """Raised when a field exists but reading it failed."""


class EmptyDatasetError(UIToolkitError):
    """Raised when an export is requested for zero rows and no columns."""


class ValidationError(UIToolkitError):
    """Validation error carrying a list of ``{"loc": ..., "msg": ...}`` entries."""

    def __init__(self, errors: List[Dict[str, Any]]) -> None:
        super().__init__("Validation failed")
        self._errors = errors

    def errors(self) -> List[Dict[str, Any]]:
        return self._errors

    def __str__(self) -> str:
        parts = []
        for detail in self._errors:
            loc = " → ".join(str(part) for part in detail.get("loc", ()))
            msg = detail.get("msg", "invalid value")
            parts.append(f"{loc}: {msg}" if loc else msg)
        return "; ".join(parts) or "Validation failed"


__all__ = [
    "EmptyDatasetError",
    "FieldNotFoundError",
    "MalformedPathError",
    "ResolutionFailedError",
    "UIToolkitError",
    "ValidationError",
]
