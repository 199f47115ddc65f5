"""
Pytest configuration and fixtures.

Puts the repository root on sys.path so the flat-layout packages import.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from config import UISettings, clear_settings_cache  # noqa: E402
from models import NavbarItem  # noqa: E402


@pytest.fixture
def ui_settings() -> UISettings:
    return UISettings(
        urls={"home": "/", "orders": "/orders", "orderDetails": "/orders/details"},
        camel_case_list=("orderDetails",),
        navbar_items=(NavbarItem(title="Home", url="/"),),
    )


@pytest.fixture(autouse=True)
def _reset_settings_cache(monkeypatch):
    monkeypatch.delenv("UI_PROFILE", raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()
