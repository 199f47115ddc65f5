"""Streamlit entry point rendering the sample order table."""

from __future__ import annotations

import logging
import os
from typing import Any, MutableMapping

from builders import LayoutHooks, TableLayoutBuilder
from config import get_ui_settings
from models import TableColor
from sample_data import SAMPLE_ATTRIBUTE_NAMES, Order, sample_orders
from views import render_table_page

LOG_LEVEL_ENV_VAR = "UI_LOG_LEVEL"


class OrderTableHooks(LayoutHooks):
    """Highlight cancelled and draft orders."""

    def initiate_defaults(self, attributes: MutableMapping[str, Any]) -> None:
        attributes["footer_name"] = "Order desk"
        attributes["header_department"] = "Sales operations"

    def row_background_color(self, item: Order) -> str:
        if getattr(item, "status", "") == "cancelled":
            return TableColor.DANGER.value
        if getattr(item, "status", "") == "draft":
            return TableColor.WARNING.value
        return ""


def configure_logging() -> None:
    logging.basicConfig(
        level=os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_order_table() -> TableLayoutBuilder:
    """Configure the builder for the order list page."""

    settings = get_ui_settings()
    return (
        TableLayoutBuilder(settings, OrderTableHooks())
        .with_head_title("Orders")
        .with_main_title("Open and recent orders")
        .with_breadcrumbs(["home", "orders"])
        .with_search_box(settings.urls.get("orders", ""), "q", "Search orders")
        .with_export_button_path(settings.urls.get("export", ""))
        .with_table_list(sample_orders())
        .with_attribute_names(SAMPLE_ATTRIBUTE_NAMES)
        .with_non_sortable(["status"])
        .with_column_text_center_list(["status"])
        .with_file_name("orders")
    )


def main() -> None:
    """Configure logging and render the order table page."""

    configure_logging()
    render_table_page(build_order_table())


if __name__ == "__main__":
    main()
