"""Fluent builder for the attributes shared by every page layout."""
from __future__ import annotations

import logging
from copy import deepcopy
from typing import Any, Dict, Iterable, Mapping, MutableMapping, Sequence, TypeVar

from config import UISettings, get_ui_settings
from formatting import navigation_links
from models import NavbarItem

logger = logging.getLogger(__name__)

_B = TypeVar("_B", bound="CommonLayoutBuilder")

SECTIONS: tuple[str, ...] = (
    "head",
    "header",
    "main_title",
    "navigation_menu",
    "search_box",
    "table",
    "footer",
)

FRAGMENT_SLOTS: tuple[str, ...] = (
    "extra_standard_fragment_one",
    "extra_standard_fragment_two",
    "extra_standard_fragment_three",
    "extra_standard_fragment_four",
    "extra_standard_fragment_five",
    "extra_table_fragment_one",
    "extra_table_fragment_two",
    "extra_table_fragment_three",
    "extra_table_fragment_four",
    "extra_table_fragment_five",
    "extra_table_fragment_six",
    "extra_table_fragment_seven",
    "footer_extension_fragment",
    "head_extension_fragment",
    "css_extension_fragment",
    "js_extension_fragment",
    "header_extension_fragment_one",
    "header_extension_fragment_two",
    "header_extension_fragment_three",
    "main_title_extension_fragment_one",
    "main_title_extension_fragment_two",
    "extra_navigation_button_before",
    "extra_navigation_button_after",
)

CONTAINER_CLASSES: Dict[str, str] = {
    "standard_body_class": "d-flex flex-column min-vh-100",
    "standard_container_class": "container flex-grow-1 pt-5 pb-0",
    "table_body_class": "d-flex flex-column min-vh-100",
    "table_container_class": "custom-container flex-grow-1 pt-5 pb-0",
}

COMMON_DEFAULTS: Dict[str, Any] = {
    **{f"show_default_{section}": True for section in SECTIONS},
    **{f"custom_{section}": "" for section in SECTIONS},
    **{slot: "" for slot in FRAGMENT_SLOTS},
    **CONTAINER_CLASSES,
    "show_navbar_menu_fragment": True,
    "show_header_search_box": True,
    "head_title": "",
    "header_department": "",
    "footer_name": "",
    "style_modifier_header": "",
    "style_modifier_footer": "",
    "text_color_header": "",
    "text_color_footer": "",
    "main_title": "",
    "breadcrumbs": {},
    "search_box_path": "",
    "search_box_name": "",
    "search_box_placeholder": "",
    "export_button_path": "",
    "with_common_css": True,
    "with_common_js": True,
}


class LayoutHooks:
    """Application hook points applied by the concrete builders.

    Subclass and override to add application-wide defaults or to highlight
    table rows.
    """

    def initiate_defaults(self, attributes: MutableMapping[str, Any]) -> None:
        return None

    def row_background_color(self, item: Any) -> str:
        """Return a :class:`~models.TableColor` value, or ``""`` for no highlight."""

        return ""


class CommonLayoutBuilder:
    """Collect layout attributes and copy them onto a view model.

    Every setter returns the builder so calls can be chained::

        CommonLayoutBuilder(settings).with_head_title("Orders").build(st.session_state)
    """

    def __init__(self, settings: UISettings | None = None, hooks: LayoutHooks | None = None) -> None:
        self.settings = settings if settings is not None else get_ui_settings()
        self.hooks = hooks if hooks is not None else LayoutHooks()
        self.attributes: Dict[str, Any] = {}
        self.initiate_defaults()

    def initiate_defaults(self: _B) -> _B:
        """Reset every attribute to its default value."""

        self.attributes.clear()
        self.attributes.update(deepcopy(COMMON_DEFAULTS))
        self.attributes["header_home_link"] = self.settings.home_url
        self.attributes["page_urls"] = dict(self.settings.urls)
        self.attributes["navbar_menu"] = list(self.settings.navbar_items)
        logger.debug("Common layout builder initiated with default values")
        logger.debug("with page_urls: %s", self.attributes["page_urls"])
        return self

    def _set(self: _B, key: str, value: Any) -> _B:
        self.attributes[key] = value
        return self

    def with_attribute(self: _B, name: str, value: Any) -> _B:
        """Set a known attribute by name; unknown names raise ``KeyError``."""

        if name not in self.attributes:
            raise KeyError(f"Unknown layout attribute: {name}")
        return self._set(name, value)

    def show_defaults(self: _B, **sections: bool) -> _B:
        """Toggle the default fragments, e.g. ``show_defaults(footer=False)``."""

        for section, flag in sections.items():
            self.with_attribute(f"show_default_{section}", bool(flag))
        return self

    def with_custom(self: _B, **fragments: str) -> _B:
        """Replace default fragments with custom markup."""

        for section, markup in fragments.items():
            self.with_attribute(f"custom_{section}", markup)
        return self

    def with_fragments(self: _B, **fragments: str) -> _B:
        """Fill extension and extra fragment slots by name."""

        for slot, markup in fragments.items():
            if slot not in FRAGMENT_SLOTS:
                raise KeyError(f"Unknown fragment slot: {slot}")
            self._set(slot, markup)
        return self

    def with_container_classes(self: _B, **classes: str) -> _B:
        for key, value in classes.items():
            if key not in CONTAINER_CLASSES:
                raise KeyError(f"Unknown container class setting: {key}")
            self._set(key, value)
        return self

    def show_navbar_menu_fragment(self: _B, show: bool = True) -> _B:
        return self._set("show_navbar_menu_fragment", show)

    def show_header_search_box(self: _B, show: bool = True) -> _B:
        return self._set("show_header_search_box", show)

    def with_common_assets(self: _B, css: bool = True, js: bool = True) -> _B:
        self._set("with_common_css", css)
        return self._set("with_common_js", js)

    def with_page_urls(self: _B, page_urls: Mapping[str, str]) -> _B:
        return self._set("page_urls", dict(page_urls))

    def with_navbar_menu(self: _B, navbar_items: Iterable[NavbarItem]) -> _B:
        return self._set("navbar_menu", list(navbar_items))

    def with_header_style(self: _B, modifier: str = "", text_color: str = "") -> _B:
        self._set("style_modifier_header", modifier)
        return self._set("text_color_header", text_color)

    def with_footer_style(self: _B, modifier: str = "", text_color: str = "") -> _B:
        self._set("style_modifier_footer", modifier)
        return self._set("text_color_footer", text_color)

    def with_header_home_link(self: _B, link: str) -> _B:
        return self._set("header_home_link", link)

    def with_header_department(self: _B, department: str) -> _B:
        return self._set("header_department", department)

    def with_footer_name(self: _B, name: str) -> _B:
        return self._set("footer_name", name)

    def with_head_title(self: _B, title: str) -> _B:
        return self._set("head_title", title)

    def with_main_title(self: _B, title: str) -> _B:
        return self._set("main_title", title)

    def with_breadcrumbs(
        self: _B,
        names: Sequence[str],
        page_urls: Mapping[str, str] | None = None,
    ) -> _B:
        """Build the breadcrumb trail from page names, linking each to its URL."""

        urls = page_urls if page_urls is not None else self.settings.urls
        crumbs = navigation_links(names, urls, self.settings.strip_first_word_for)
        return self._set("breadcrumbs", crumbs)

    def with_search_box(self: _B, path: str, name: str = "", placeholder: str = "") -> _B:
        self._set("search_box_path", path)
        self._set("search_box_name", name)
        return self._set("search_box_placeholder", placeholder)

    def with_export_button_path(self: _B, path: str) -> _B:
        return self._set("export_button_path", path)

    def build(self, model: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
        """Copy every attribute onto *model* and return it."""

        for key, value in self.attributes.items():
            model[key] = value
        return model


__all__ = [
    "COMMON_DEFAULTS",
    "CONTAINER_CLASSES",
    "CommonLayoutBuilder",
    "FRAGMENT_SLOTS",
    "LayoutHooks",
    "SECTIONS",
]
