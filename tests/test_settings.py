"""Tests for UI profile loading."""
from __future__ import annotations

import json

import pytest

from config import DEFAULT_PROFILE_PATH, UISettings, get_ui_settings, load_ui_settings, resolve_profile_path
from models import ValidationError


def test_bundled_profile_loads() -> None:
    settings = get_ui_settings()

    assert settings.home_url == "/"
    assert "orderDetails" in settings.strip_first_word_for
    assert settings.sheet_name == "Data"
    sales = [item for item in settings.navbar_items if item.title == "Sales"][0]
    assert [child.title for child in sales.sub_items] == ["Orders", "Customers"]


def test_profile_path_honours_environment(monkeypatch, tmp_path) -> None:
    profile = tmp_path / "custom.json"
    profile.write_text(json.dumps({"ui": {"urls": {"home": "/start"}}}), encoding="utf-8")
    monkeypatch.setenv("UI_PROFILE", str(profile))

    assert resolve_profile_path() == profile
    assert get_ui_settings().home_url == "/start"


def test_default_profile_path_without_environment() -> None:
    assert resolve_profile_path() == DEFAULT_PROFILE_PATH


def test_missing_profile_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_ui_settings(tmp_path / "absent.json")


def test_invalid_json_raises_validation_error(tmp_path) -> None:
    profile = tmp_path / "broken.json"
    profile.write_text("{not json", encoding="utf-8")

    with pytest.raises(ValidationError):
        load_ui_settings(profile)


def test_from_dict_accepts_camel_case_keys() -> None:
    settings = UISettings.from_dict(
        {
            "urls": {"home": "/"},
            "camelCaseList": ["orderDate"],
            "navbarItems": [{"title": "Reports", "subItems": [{"title": "Daily", "url": "/daily"}]}],
        }
    )

    assert settings.camel_case_list == ("orderDate",)
    assert settings.navbar_items[0].sub_items[0].url == "/daily"


def test_from_dict_collects_all_errors() -> None:
    with pytest.raises(ValidationError) as excinfo:
        UISettings.from_dict(
            {
                "urls": ["not", "a", "map"],
                "camel_case_list": "orderDate",
                "navbar_items": [{"url": "/no-title"}],
                "sheet_name": "x" * 40,
            }
        )

    locations = {detail["loc"] for detail in excinfo.value.errors()}
    assert ("urls",) in locations
    assert ("camel_case_list",) in locations
    assert ("navbar_items", 0, "title") in locations
    assert ("sheet_name",) in locations
