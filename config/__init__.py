"""Configuration profiles for the table toolkit."""
from __future__ import annotations

from .settings import (
    DEFAULT_PROFILE_PATH,
    DEFAULT_SHEET_NAME,
    PROFILE_ENV_VAR,
    UISettings,
    clear_settings_cache,
    get_ui_settings,
    load_ui_settings,
    resolve_profile_path,
)

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
