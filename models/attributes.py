"""Dotted attribute paths and the tagged result of resolving them."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple

from .errors import FieldNotFoundError, MalformedPathError, ResolutionFailedError

PATH_SEPARATOR = "."


@dataclass(frozen=True)
class AttributePath:
    """An ordered, immutable sequence of field names."""

    segments: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.segments or any(not segment for segment in self.segments):
            raise MalformedPathError(PATH_SEPARATOR.join(self.segments))

    @classmethod
    def parse(cls, path: str) -> "AttributePath":
        """Split *path* on dots, rejecting empty paths and empty segments."""

        if not isinstance(path, str) or not path:
            raise MalformedPathError(str(path))
        segments = tuple(path.split(PATH_SEPARATOR))
        if any(not segment for segment in segments):
            raise MalformedPathError(path)
        return cls(segments)

    def __str__(self) -> str:
        return PATH_SEPARATOR.join(self.segments)

    def __len__(self) -> int:
        return len(self.segments)


class ResolutionStatus(str, Enum):
    VALUE = "value"
    NULL = "null"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class ResolvedValue:
    """Outcome of walking an :class:`AttributePath` against an object.

    ``NULL`` means the path is valid but a value along it is absent, while
    ``NOT_FOUND`` means a segment is not defined anywhere in the type chain.
    ``FAILED`` is used when a field exists but reading it raised.
    """

    status: ResolutionStatus
    value: Any = None
    segment: str | None = None
    type_name: str | None = None
    error: str | None = None

    @classmethod
    def of(cls, value: Any) -> "ResolvedValue":
        if value is None:
            return cls.null()
        return cls(ResolutionStatus.VALUE, value)

    @classmethod
    def null(cls, segment: str | None = None) -> "ResolvedValue":
        return cls(ResolutionStatus.NULL, None, segment=segment)

    @classmethod
    def not_found(cls, segment: str, type_name: str) -> "ResolvedValue":
        return cls(ResolutionStatus.NOT_FOUND, None, segment=segment, type_name=type_name)

    @classmethod
    def failed(cls, segment: str, type_name: str, error: str) -> "ResolvedValue":
        return cls(
            ResolutionStatus.FAILED,
            None,
            segment=segment,
            type_name=type_name,
            error=error,
        )

    @property
    def is_found(self) -> bool:
        """``True`` when every segment was defined (the value may still be ``None``)."""

        return self.status in (ResolutionStatus.VALUE, ResolutionStatus.NULL)

    @property
    def is_null(self) -> bool:
        return self.status is ResolutionStatus.NULL

    @property
    def missing_segment(self) -> str | None:
        if self.status is ResolutionStatus.NOT_FOUND:
            return self.segment
        return None

    def or_default(self, default: Any = "") -> Any:
        """Return the value, or *default* for any outcome without one."""

        if self.status is ResolutionStatus.VALUE:
            return self.value
        return default

    def unwrap(self) -> Any:
        """Return the value or raise for ``NOT_FOUND`` / ``FAILED`` outcomes."""

        if self.status is ResolutionStatus.NOT_FOUND:
            raise FieldNotFoundError(self.segment or "", self.type_name or "object")
        if self.status is ResolutionStatus.FAILED:
            raise ResolutionFailedError(
                f"Could not read {self.segment!r} on {self.type_name}: {self.error}"
            )
        return self.value


__all__ = [
    "AttributePath",
    "PATH_SEPARATOR",
    "ResolutionStatus",
    "ResolvedValue",
]
