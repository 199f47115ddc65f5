from __future__ import annotations

from typing import Any, Iterable, Mapping

import streamlit as st

from models import Breadcrumb, NavbarItem


def apply_app_chrome(layout: Mapping[str, Any]) -> None:
    """Configure the Streamlit page from the layout attributes."""

    st.set_page_config(
        page_title=layout.get("head_title") or "Tables",
        layout="wide",
        initial_sidebar_state="expanded",
    )
    if layout.get("show_default_navigation_menu", True) and layout.get("show_navbar_menu_fragment", True):
        render_navbar(layout.get("navbar_menu", []), home_link=layout.get("header_home_link", ""))
    elif layout.get("custom_navigation_menu"):
        st.sidebar.markdown(layout["custom_navigation_menu"], unsafe_allow_html=True)


def render_navbar(items: Iterable[NavbarItem], *, home_link: str = "") -> None:
    """Render the navigation menu in the sidebar, nesting dropdown entries."""

    with st.sidebar:
        if home_link:
            st.markdown(f"[🏠 Home]({home_link})")
        for item in items:
            if item.has_sub_items:
                with st.expander(item.title, expanded=False):
                    for child in item.sub_items:
                        st.markdown(f"- [{child.title}]({child.url})")
            elif item.url:
                st.markdown(f"[{item.title}]({item.url})")
            else:
                st.markdown(item.title)


def render_breadcrumbs(crumbs: Mapping[str, Breadcrumb]) -> None:
    if not crumbs:
        return
    parts = [
        f"[{crumb.title}]({crumb.url})" if crumb.url else crumb.title
        for crumb in crumbs.values()
    ]
    st.markdown(" / ".join(parts))


def render_app_header(layout: Mapping[str, Any]) -> None:
    """Render the header and main title, honouring custom fragments."""

    if not layout.get("show_default_header", True):
        if layout.get("custom_header"):
            st.markdown(layout["custom_header"], unsafe_allow_html=True)
    elif layout.get("header_department"):
        st.caption(layout["header_department"])

    for slot in ("header_extension_fragment_one", "header_extension_fragment_two", "header_extension_fragment_three"):
        if layout.get(slot):
            st.markdown(layout[slot], unsafe_allow_html=True)

    render_breadcrumbs(layout.get("breadcrumbs", {}))

    if layout.get("show_default_main_title", True):
        if layout.get("main_title"):
            st.title(layout["main_title"])
    elif layout.get("custom_main_title"):
        st.markdown(layout["custom_main_title"], unsafe_allow_html=True)


def render_app_footer(layout: Mapping[str, Any]) -> None:
    """Render the global footer."""

    if not layout.get("show_default_footer", True):
        if layout.get("custom_footer"):
            st.markdown(layout["custom_footer"], unsafe_allow_html=True)
        return
    st.divider()
    if layout.get("footer_name"):
        st.caption(layout["footer_name"])
    if layout.get("footer_extension_fragment"):
        st.markdown(layout["footer_extension_fragment"], unsafe_allow_html=True)


__all__ = [
    "apply_app_chrome",
    "render_app_footer",
    "render_app_header",
    "render_breadcrumbs",
    "render_navbar",
]
