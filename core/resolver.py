"""Dotted-path value lookup across object graphs.

A path such as ``"customer.address.city"`` is walked one segment at a time.
For each segment the field is looked up on the current object's type and then
on its ancestors (most-derived first, ``object`` excluded), so a single path
works across a family of row types sharing a base class.

Field lookup goes through explicit capabilities rather than unrestricted
``getattr``:

* objects implementing :class:`AttributeSource` answer for themselves;
* mappings answer by key;
* everything else is looked up in a :class:`FieldRegistry`, whose per-type
  tables are registered at startup or derived once from the class body.
"""
from __future__ import annotations

import functools
import inspect
import logging
import threading
from datetime import datetime
from typing import (
    Any,
    Callable,
    Dict,
    FrozenSet,
    Iterable,
    List,
    Mapping,
    Protocol,
    Tuple,
    runtime_checkable,
)

from formatting import DATE_TIME_FORMAT, format_timestamp
from models import AttributePath, ResolvedValue

logger = logging.getLogger(__name__)


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()

Transform = Callable[[Any], Any]
TransformRule = Tuple[type | Tuple[type, ...], Transform]


@runtime_checkable
class AttributeSource(Protocol):
    """Objects that expose their own fields to the resolver.

    ``get_attribute`` returns :data:`MISSING` when *name* is not a field.
    """

    def get_attribute(self, name: str) -> Any:
        ...


def declared_fields(cls: type) -> FrozenSet[str]:
    """Return the field names declared directly in the body of *cls*.

    Class-level annotations (which covers dataclass fields), ``__slots__``
    entries and properties count as fields. Inherited names are not included.
    """

    names = set(inspect.get_annotations(cls))
    slots = cls.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    names.update(slot for slot in slots if slot not in ("__dict__", "__weakref__"))
    names.update(
        name
        for name, member in cls.__dict__.items()
        if isinstance(member, (property, functools.cached_property))
    )
    return frozenset(name for name in names if not name.startswith("__"))


class FieldRegistry:
    """Per-type field tables consulted along an object's ancestor chain."""

    def __init__(self) -> None:
        self._explicit: Dict[type, FrozenSet[str]] = {}
        self._derived: Dict[type, FrozenSet[str]] = {}
        self._lock = threading.Lock()

    def register(self, cls: type, fields: Iterable[str]) -> None:
        """Declare the fields *cls* itself defines, replacing the derived table."""

        table = frozenset(fields)
        with self._lock:
            self._explicit[cls] = table
            self._derived.pop(cls, None)
        logger.debug("Registered %d fields for %s", len(table), cls.__qualname__)

    def fields_for(self, cls: type) -> FrozenSet[str]:
        table = self._explicit.get(cls)
        if table is not None:
            return table
        table = self._derived.get(cls)
        if table is None:
            table = declared_fields(cls)
            with self._lock:
                self._derived.setdefault(cls, table)
        return table

    def ancestor_chain(self, cls: type) -> List[type]:
        """Return *cls* and its ancestors in lookup order, ``object`` excluded."""

        return [klass for klass in cls.__mro__ if klass is not object]

    def defining_type(self, instance: Any, name: str) -> type | None:
        """Return the first type in the chain of *instance* that defines *name*."""

        cls = type(instance)
        for klass in self.ancestor_chain(cls):
            if name in self.fields_for(klass):
                return klass
        # Attributes assigned in __init__ belong to the dynamic type, unless its
        # table was registered explicitly.
        if cls in self._explicit:
            return None
        instance_dict = getattr(instance, "__dict__", None)
        if isinstance(instance_dict, dict) and name in instance_dict:
            return cls
        return None


def row_fields(*names: str, registry: FieldRegistry | None = None) -> Callable[[type], type]:
    """Class decorator registering *names* as the fields of the decorated class."""

    def decorator(cls: type) -> type:
        (registry or default_registry).register(cls, names)
        return cls

    return decorator


class ValueTransforms:
    """Ordered ``(type, transform)`` rules; the first ``isinstance`` match wins."""

    def __init__(self, rules: Iterable[TransformRule] = ()) -> None:
        self._rules: List[TransformRule] = list(rules)

    @classmethod
    def default(cls, date_time_format: str = DATE_TIME_FORMAT) -> "ValueTransforms":
        return cls([(datetime, functools.partial(format_timestamp, pattern=date_time_format))])

    def register(self, value_type: type | Tuple[type, ...], transform: Transform) -> "ValueTransforms":
        self._rules.append((value_type, transform))
        return self

    def apply(self, value: Any) -> Any:
        if value is None:
            return None
        for value_type, transform in self._rules:
            if isinstance(value, value_type):
                return transform(value)
        return value

    def __len__(self) -> int:
        return len(self._rules)


class PathResolver:
    """Resolve dotted attribute paths against arbitrary objects.

    The resolver keeps no per-call state; one instance can be shared between
    threads once its registry and transforms are set up.
    """

    def __init__(
        self,
        transforms: ValueTransforms | None = None,
        registry: FieldRegistry | None = None,
    ) -> None:
        self.transforms = transforms if transforms is not None else ValueTransforms.default()
        self.registry = registry if registry is not None else default_registry

    @classmethod
    def from_settings(cls, settings: Any, registry: FieldRegistry | None = None) -> "PathResolver":
        """Build a resolver using the date format configured in *settings*."""

        return cls(ValueTransforms.default(settings.date_time_format), registry)

    def resolve(self, root: Any, path: str | AttributePath) -> ResolvedValue:
        """Walk *path* from *root*.

        Raises :class:`~models.MalformedPathError` for empty paths or empty
        segments; every other outcome is reported through the returned
        :class:`~models.ResolvedValue`.
        """

        attribute_path = path if isinstance(path, AttributePath) else AttributePath.parse(path)
        current = root
        for segment in attribute_path.segments:
            if current is None:
                return ResolvedValue.null(segment)
            outcome = self._read_field(current, segment)
            if not isinstance(outcome, _FieldValue):
                return outcome
            current = self.transforms.apply(outcome.value)
        return ResolvedValue.of(current)

    def resolve_many(self, root: Any, paths: Iterable[str]) -> Dict[str, ResolvedValue]:
        return {path: self.resolve(root, path) for path in paths}

    def _read_field(self, current: Any, segment: str) -> "_FieldValue | ResolvedValue":
        type_name = type(current).__qualname__

        if isinstance(current, AttributeSource):
            try:
                value = current.get_attribute(segment)
            except Exception as exc:
                return self._failed(segment, type_name, exc)
            if value is MISSING:
                return self._not_found(segment, type_name)
            return _FieldValue(value)

        if isinstance(current, Mapping):
            if segment not in current:
                return self._not_found(segment, type_name)
            return _FieldValue(current[segment])

        if self.registry.defining_type(current, segment) is None:
            return self._not_found(segment, type_name)
        try:
            return _FieldValue(getattr(current, segment))
        except Exception as exc:
            return self._failed(segment, type_name, exc)

    @staticmethod
    def _not_found(segment: str, type_name: str) -> ResolvedValue:
        logger.debug("Field not found: %s on %s", segment, type_name)
        return ResolvedValue.not_found(segment, type_name)

    @staticmethod
    def _failed(segment: str, type_name: str, exc: Exception) -> ResolvedValue:
        logger.error(
            "Error occurred while trying to access the field: %s on %s, Error Message: %s",
            segment,
            type_name,
            exc,
        )
        return ResolvedValue.failed(segment, type_name, str(exc))


class _FieldValue:
    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value


default_registry = FieldRegistry()
_default_resolver = PathResolver()


def resolve(root: Any, path: str | AttributePath) -> ResolvedValue:
    """Resolve *path* against *root* with the default resolver."""

    return _default_resolver.resolve(root, path)


__all__ = [
    "AttributeSource",
    "FieldRegistry",
    "MISSING",
    "PathResolver",
    "ValueTransforms",
    "declared_fields",
    "default_registry",
    "resolve",
    "row_fields",
]
