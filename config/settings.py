"""UI profile loading helpers."""
from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple

from formatting import DATE_TIME_FORMAT
from models import NavbarItem, ValidationError

_PROFILES_DIR = Path(__file__).resolve().parent / "profiles"
DEFAULT_PROFILE_PATH = _PROFILES_DIR / "default.json"
PROFILE_ENV_VAR = "UI_PROFILE"
DEFAULT_SHEET_NAME = "Data"


@dataclass(frozen=True)
class UISettings:
    """Settings shared by the layout builders, resolver and exporter."""

    urls: Mapping[str, str] = field(default_factory=dict)
    camel_case_list: Tuple[str, ...] = ()
    navbar_items: Tuple[NavbarItem, ...] = ()
    date_time_format: str = DATE_TIME_FORMAT
    sheet_name: str = DEFAULT_SHEET_NAME

    @property
    def strip_first_word_for(self) -> frozenset[str]:
        return frozenset(self.camel_case_list)

    @property
    def home_url(self) -> str:
        return self.urls.get("home", "")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UISettings":
        if not isinstance(data, Mapping):
            raise ValidationError([{"loc": (), "msg": "profile must be a JSON object"}])
        section = data.get("ui", data)
        errors: List[Dict[str, Any]] = []

        urls = section.get("urls") or {}
        if not isinstance(urls, Mapping) or not all(
            isinstance(key, str) and isinstance(value, str) for key, value in urls.items()
        ):
            errors.append({"loc": ("urls",), "msg": "urls must map names to strings"})
            urls = {}

        camel_case_list = section.get("camel_case_list", section.get("camelCaseList")) or []
        if not isinstance(camel_case_list, list) or not all(
            isinstance(item, str) for item in camel_case_list
        ):
            errors.append({"loc": ("camel_case_list",), "msg": "camel_case_list must be a list of strings"})
            camel_case_list = []

        navbar: List[NavbarItem] = []
        raw_navbar = section.get("navbar_items", section.get("navbarItems")) or []
        if not isinstance(raw_navbar, list):
            errors.append({"loc": ("navbar_items",), "msg": "navbar_items must be a list"})
        else:
            for index, item in enumerate(raw_navbar):
                try:
                    navbar.append(NavbarItem.from_dict(item, loc=("navbar_items", index)))
                except ValidationError as exc:
                    errors.extend(exc.errors())

        date_time_format = section.get("date_time_format", DATE_TIME_FORMAT)
        if not isinstance(date_time_format, str) or not date_time_format:
            errors.append({"loc": ("date_time_format",), "msg": "date_time_format must be a string"})
            date_time_format = DATE_TIME_FORMAT

        sheet_name = section.get("sheet_name", DEFAULT_SHEET_NAME)
        if not isinstance(sheet_name, str) or not sheet_name or len(sheet_name) > 31:
            errors.append({"loc": ("sheet_name",), "msg": "sheet_name must be 1-31 characters"})
            sheet_name = DEFAULT_SHEET_NAME

        if errors:
            raise ValidationError(errors)
        return cls(
            urls=dict(urls),
            camel_case_list=tuple(camel_case_list),
            navbar_items=tuple(navbar),
            date_time_format=date_time_format,
            sheet_name=sheet_name,
        )


def resolve_profile_path(path: str | Path | None = None) -> Path:
    """Return the profile path, honouring ``UI_PROFILE`` when *path* is omitted."""

    if path is not None:
        return Path(path)
    env_path = os.environ.get(PROFILE_ENV_VAR)
    if env_path:
        return Path(env_path)
    return DEFAULT_PROFILE_PATH


@lru_cache(maxsize=None)
def _load_profile(path: Path) -> UISettings:
    """Load and validate the JSON profile at *path*."""

    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValidationError([{"loc": (str(path),), "msg": f"invalid JSON: {exc.msg}"}]) from exc
    return UISettings.from_dict(data)


def load_ui_settings(path: str | Path | None = None) -> UISettings:
    return _load_profile(resolve_profile_path(path).resolve())


def get_ui_settings() -> UISettings:
    """Return the active UI settings."""

    return load_ui_settings()


def clear_settings_cache() -> None:
    _load_profile.cache_clear()


__all__ = [
    "DEFAULT_PROFILE_PATH",
    "DEFAULT_SHEET_NAME",
    "PROFILE_ENV_VAR",
    "UISettings",
    "clear_settings_cache",
    "get_ui_settings",
    "load_ui_settings",
    "resolve_profile_path",
]
