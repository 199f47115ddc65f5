"""Utilities for managing Streamlit session state defaults and layout attributes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Mapping, MutableMapping

import streamlit as st

from models import ExportArtifact

StateFactory = Callable[[], Any]
TypeHint = type | tuple[type, ...] | None

LAYOUT_KEY = "layout"


@dataclass(frozen=True)
class StateSpec:
    """Definition of a session state entry."""

    default_factory: StateFactory
    type_hint: TypeHint
    description: str

    def create_default(self) -> Any:
        """Return a new default value for the state entry."""
        return self.default_factory()

    def is_valid(self, value: Any) -> bool:
        """Check whether *value* matches the declared type hint."""
        if self.type_hint is None:
            return True
        hints = self.type_hint if isinstance(self.type_hint, tuple) else (self.type_hint,)
        return isinstance(value, hints)


STATE_SPECS: Dict[str, StateSpec] = {
    LAYOUT_KEY: StateSpec(dict, dict, "Layout attributes copied from the page builder"),
    "search_query": StateSpec(lambda: "", str, "Table search box text"),
    "last_export": StateSpec(lambda: None, (ExportArtifact, type(None)), "Most recent export artefact"),
}


def _session(session: MutableMapping[str, Any] | None) -> MutableMapping[str, Any]:
    return session if session is not None else st.session_state


def ensure_session_defaults(
    overrides: Mapping[str, Any] | None = None,
    session: MutableMapping[str, Any] | None = None,
) -> None:
    """Populate the session with defaults and type-validate entries."""

    state = _session(session)
    overrides = overrides or {}
    for key, spec in STATE_SPECS.items():
        if key in overrides:
            state[key] = overrides[key]
            continue
        if key not in state or not spec.is_valid(state[key]):
            state[key] = spec.create_default()


def reset_session_keys(
    keys: Iterable[str] | None = None,
    session: MutableMapping[str, Any] | None = None,
) -> None:
    """Reset selected state keys to their default values."""

    state = _session(session)
    target_keys = list(keys) if keys is not None else list(STATE_SPECS.keys())
    for key in target_keys:
        if key in STATE_SPECS:
            state[key] = STATE_SPECS[key].create_default()
        elif key in state:
            del state[key]


def store_layout(builder: Any, session: MutableMapping[str, Any] | None = None) -> Dict[str, Any]:
    """Copy the attributes of a layout builder into the session."""

    state = _session(session)
    layout: Dict[str, Any] = {}
    builder.build(layout)
    state[LAYOUT_KEY] = layout
    return layout


def get_layout(session: MutableMapping[str, Any] | None = None) -> Dict[str, Any]:
    layout = _session(session).get(LAYOUT_KEY, {})
    return layout if isinstance(layout, dict) else {}


def remember_export(artifact: ExportArtifact, session: MutableMapping[str, Any] | None = None) -> None:
    _session(session)["last_export"] = artifact


__all__ = [
    "LAYOUT_KEY",
    "STATE_SPECS",
    "StateSpec",
    "ensure_session_defaults",
    "get_layout",
    "remember_export",
    "reset_session_keys",
    "store_layout",
]
