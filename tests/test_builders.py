"""Tests for the fluent layout builders."""
from __future__ import annotations

import pytest

from builders import COMMON_DEFAULTS, LayoutHooks, StandardLayoutBuilder, TableLayoutBuilder
from builders.common import CommonLayoutBuilder
from models import Breadcrumb, TableColor, TableJustification, ValidationError
from sample_data import SAMPLE_ATTRIBUTE_NAMES, sample_orders


class BrandingHooks(LayoutHooks):
    def initiate_defaults(self, attributes) -> None:
        attributes["footer_name"] = "ACME"

    def row_background_color(self, item) -> str:
        return TableColor.WARNING.value if item.status == "draft" else ""


def test_defaults_come_from_settings(ui_settings) -> None:
    builder = CommonLayoutBuilder(ui_settings)

    assert builder.attributes["header_home_link"] == "/"
    assert builder.attributes["page_urls"] == dict(ui_settings.urls)
    assert builder.attributes["navbar_menu"] == list(ui_settings.navbar_items)
    assert builder.attributes["show_default_footer"] is True
    assert builder.attributes["breadcrumbs"] == {}


def test_setters_chain_and_build_copies_attributes(ui_settings) -> None:
    model: dict = {}

    result = (
        StandardLayoutBuilder(ui_settings)
        .with_head_title("Orders")
        .with_main_title("All orders")
        .show_defaults(footer=False, search_box=False)
        .with_custom(footer="<p>custom</p>")
        .with_fragments(extra_table_fragment_seven="<div/>")
        .with_search_box("/orders", "q", "Search")
        .with_export_button_path("/export")
        .build(model)
    )

    assert result is model
    assert model["head_title"] == "Orders"
    assert model["main_title"] == "All orders"
    assert model["show_default_footer"] is False
    assert model["show_default_search_box"] is False
    assert model["custom_footer"] == "<p>custom</p>"
    assert model["extra_table_fragment_seven"] == "<div/>"
    assert model["search_box_placeholder"] == "Search"
    assert model["export_button_path"] == "/export"
    assert set(COMMON_DEFAULTS) <= set(model)


def test_unknown_attribute_names_are_rejected(ui_settings) -> None:
    builder = CommonLayoutBuilder(ui_settings)

    with pytest.raises(KeyError):
        builder.with_attribute("no_such_attribute", 1)
    with pytest.raises(KeyError):
        builder.show_defaults(sidebar=False)
    with pytest.raises(KeyError):
        builder.with_fragments(extra_fragment_eight="<p/>")


def test_initiate_defaults_resets_changes(ui_settings) -> None:
    builder = CommonLayoutBuilder(ui_settings).with_head_title("Changed")

    builder.initiate_defaults()

    assert builder.attributes["head_title"] == ""


def test_defaults_are_not_shared_between_builders(ui_settings) -> None:
    first = CommonLayoutBuilder(ui_settings)
    second = CommonLayoutBuilder(ui_settings)

    first.attributes["breadcrumbs"]["x"] = Breadcrumb("x")

    assert second.attributes["breadcrumbs"] == {}


def test_breadcrumbs_use_title_case_and_strip_rule(ui_settings) -> None:
    builder = CommonLayoutBuilder(ui_settings).with_breadcrumbs(["home", "orderDetails"])

    crumbs = builder.attributes["breadcrumbs"]
    assert list(crumbs) == ["Home", "Details"]
    assert crumbs["Details"].url == "/orders/details"


def test_standard_builder_applies_hooks(ui_settings) -> None:
    builder = StandardLayoutBuilder(ui_settings, BrandingHooks())

    assert builder.attributes["footer_name"] == "ACME"
    builder.with_footer_name("Other").initiate_defaults()
    assert builder.attributes["footer_name"] == "ACME"


def test_table_builder_defaults(ui_settings) -> None:
    builder = TableLayoutBuilder(ui_settings)

    assert builder.attributes["file_name"] == "excelFile"
    assert builder.attributes["table_list"] == []
    assert builder.attributes["column_link_enable"] is False
    assert builder.attributes["row_hyperlink_map"] == {}


def test_table_builder_resolves_model_and_grid(ui_settings) -> None:
    builder = (
        TableLayoutBuilder(ui_settings, BrandingHooks())
        .with_table_list(sample_orders())
        .with_attribute_names(SAMPLE_ATTRIBUTE_NAMES)
        .with_file_name("orders")
        .with_paths(["/orders"])
        .with_column_link_enable(True)
        .with_path_column_name("orderNumber")
        .with_column_param_variable("orderNumber")
        .with_row_hyperlink_map({"status": "View"})
        .with_legend({TableColor.WARNING: "Draft"})
    )

    model = builder.to_table_model()
    grid = builder.to_grid()

    assert model.headers[0].text == "Order Number"
    assert model.rows[0].values["Order Number"].hyperlink == "/orders/SO-1001"
    assert model.rows[0].values["Status"].text == "View"
    assert model.rows[3].row_color is TableColor.WARNING
    assert model.display_legend()
    assert model.export_file_name == "orders"
    assert grid.columns[:3] == ("Order Number", "Customer.name", "Customer.address.city")
    assert grid.cell(0, "Status") == "shipped"


def test_table_builder_uses_explicit_header_names(ui_settings) -> None:
    builder = (
        TableLayoutBuilder(ui_settings)
        .with_table_list(sample_orders()[:1])
        .with_attribute_names(["orderNumber", "customer.name"])
        .with_header_names(["Order", "Customer"])
    )

    assert builder.to_grid().matrix() == [["SO-1001", "Ann Lee"]]


def test_table_builder_header_centering_and_absolute_links(ui_settings) -> None:
    builder = (
        TableLayoutBuilder(ui_settings)
        .with_table_list(sample_orders()[:2])
        .with_attribute_names(["orderNumber", "customer.name", "status"])
        .with_header_column_text_center_list(["orderNumber", "Status"])
        .with_absolute_path_links({"customer.name": "https://crm.example.com/parties"})
        .with_absolute_path_name("customer.name")
    )

    model = builder.to_table_model()

    assert [header.header_justification for header in model.headers] == [
        TableJustification.CENTER,
        TableJustification.LEFT,
        TableJustification.CENTER,
    ]
    assert all(header.values_justification is TableJustification.LEFT for header in model.headers)
    assert model.rows[0].values["Customer.name"].hyperlink == "https://crm.example.com/parties/Ann Lee"
    assert model.rows[1].values["Customer.name"].hyperlink == "https://crm.example.com/parties/Acme Parts"
    assert not model.rows[0].values["Status"].is_hyperlink()


def test_table_builder_reports_duplicate_titles(ui_settings) -> None:
    builder = (
        TableLayoutBuilder(ui_settings)
        .with_table_list([{"orderDetails": "a", "details": "b"}])
        .with_attribute_names(["orderDetails", "details"])
    )

    with pytest.raises(ValidationError):
        builder.to_table_model()
    with pytest.raises(ValidationError):
        builder.to_grid()
