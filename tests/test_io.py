"""Tests for building tables from row objects and parsing export requests."""
from __future__ import annotations

import io
import json
import logging

import pytest
from openpyxl import load_workbook

from core.io import (
    build_table_grid,
    build_table_model,
    export_request_to_artifact,
    header_titles,
    parse_export_request,
    set_dynamic_link,
)
from core.resolver import PathResolver
from models import EmptyDatasetError, MalformedPathError, TableColor, TableJustification, ValidationError
from sample_data import SAMPLE_ATTRIBUTE_NAMES, sample_orders


class Flaky:
    name: str = "flaky"

    @property
    def value(self):
        raise PermissionError("denied")


def test_header_titles_default_to_title_cased_attribute_names() -> None:
    assert header_titles(["orderDate", "customer.name"]) == ["Order Date", "Customer.name"]
    assert header_titles(["orderDetails"], strip_first_word_for={"orderDetails"}) == ["Details"]


def test_header_titles_must_match_attribute_count() -> None:
    with pytest.raises(ValidationError):
        header_titles(["a", "b"], ["Only one"])


def test_build_table_grid_resolves_every_cell() -> None:
    grid = build_table_grid(
        sample_orders(),
        SAMPLE_ATTRIBUTE_NAMES,
        ["Order", "Customer", "City", "Placed", "Total", "Status"],
    )

    assert grid.columns == ("Order", "Customer", "City", "Placed", "Total", "Status")
    assert len(grid) == 4
    assert grid.matrix()[0] == ["SO-1001", "Ann Lee", "Fairfield", "2024-03-05 14:30 PM", "249.90", "shipped"]
    # Customer without address, and an order without customer.
    assert grid.cell(2, "City") == ""
    assert grid.cell(3, "Customer") == ""


def test_missing_and_failing_cells_do_not_abort_the_grid(caplog) -> None:
    with caplog.at_level(logging.ERROR):
        grid = build_table_grid([Flaky()], ["name", "value", "nothing"], ["Name", "Value", "Nothing"])

    assert grid.matrix() == [["flaky", "", ""]]
    assert "denied" in caplog.text


def test_malformed_attribute_name_is_rejected_up_front() -> None:
    with pytest.raises(MalformedPathError):
        build_table_grid(sample_orders(), ["customer..name"])


def test_build_table_model_applies_column_options_and_row_colors() -> None:
    def highlight(order):
        return TableColor.DANGER if order.status == "cancelled" else ""

    model = build_table_model(
        sample_orders(),
        ["orderNumber", "status"],
        resolver=PathResolver(),
        file_name="orders",
        row_color=highlight,
        non_sortable=["status"],
        center_columns=["Status"],
        link_column="orderNumber",
        link_path="/orders/",
        link_param="orderNumber",
    )

    assert [header.text for header in model.headers] == ["Order Number", "Status"]
    assert model.headers[0].sortable is True
    assert model.headers[1].sortable is False
    assert model.headers[1].values_justification is TableJustification.CENTER
    assert model.rows[2].row_color is TableColor.DANGER
    assert model.rows[0].row_color is TableColor.DEFAULT
    assert model.rows[0].values["Order Number"].hyperlink == "/orders/SO-1001"
    assert model.rows[0].values["Order Number"].is_hyperlink()
    assert not model.rows[0].values["Status"].is_hyperlink()
    assert model.export_file_name == "orders"


def test_table_model_round_trips_to_grid() -> None:
    model = build_table_model(sample_orders(), ["orderNumber", "customer.name"], ["Order", "Customer"])

    grid = model.to_grid()

    assert grid.columns == ("Order", "Customer")
    assert grid.matrix()[1] == ["SO-1002", "Acme Parts"]


def test_parse_export_request_from_json_text() -> None:
    body = json.dumps({"tableData": [{"Name": "Ann", "Age": 31}], "filename": "people.xlsx"})

    rows, filename = parse_export_request(body)

    assert rows == [{"Name": "Ann", "Age": "31"}]
    assert filename == "people.xlsx"


@pytest.mark.parametrize(
    "payload",
    [
        "not json",
        "[]",
        {"tableData": [], "filename": ""},
        {"tableData": "rows", "filename": "a.xlsx"},
        {"tableData": [1], "filename": "a.xlsx"},
    ],
)
def test_parse_export_request_rejects_invalid_payloads(payload) -> None:
    with pytest.raises(ValidationError):
        parse_export_request(payload)


def test_export_request_to_artifact_writes_workbook() -> None:
    payload = {
        "tableData": [{"Name": "Ann", "Age": "31"}, {"Name": "Bo"}],
        "filename": "people.xlsx",
    }

    artifact = export_request_to_artifact(payload)

    sheet = load_workbook(io.BytesIO(artifact.content))["Data"]
    rows = [[value or "" for value in row] for row in sheet.iter_rows(values_only=True)]
    assert artifact.filename == "people.xlsx"
    assert rows == [["Name", "Age"], ["Ann", "31"], ["Bo", ""]]


def test_export_request_with_no_rows_raises_empty_dataset() -> None:
    with pytest.raises(EmptyDatasetError):
        export_request_to_artifact({"tableData": [], "filename": "empty.xlsx"})


def test_set_dynamic_link_returns_updated_copy() -> None:
    urls = {"orders": "/orders"}

    updated = set_dynamic_link(urls, "orders", "/42")

    assert updated == {"orders": "/orders/42"}
    assert urls == {"orders": "/orders"}


@pytest.mark.parametrize(
    ("attribute_names", "strip"),
    [
        (["orderDetails", "details"], {"orderDetails"}),
        (["status", "notes"], {"status", "notes"}),
    ],
)
def test_attributes_sharing_a_title_are_rejected(attribute_names, strip) -> None:
    with pytest.raises(ValidationError) as excinfo:
        header_titles(attribute_names, strip_first_word_for=strip)

    (detail,) = excinfo.value.errors()
    assert detail["loc"] == ("attribute_names", 1)
    assert attribute_names[0] in detail["msg"]
    assert attribute_names[1] in detail["msg"]


def test_grid_and_model_reject_duplicate_titles_alike() -> None:
    rows = [{"orderDetails": "a", "details": "b"}]
    strip = {"orderDetails"}

    with pytest.raises(ValidationError):
        build_table_grid(rows, ["orderDetails", "details"], strip_first_word_for=strip)
    with pytest.raises(ValidationError):
        build_table_model(rows, ["orderDetails", "details"], strip_first_word_for=strip)
    with pytest.raises(ValidationError):
        build_table_model(rows, ["orderDetails", "details"], ["Same", "Same"])


def test_header_centering_is_separate_from_value_centering() -> None:
    model = build_table_model(
        sample_orders(),
        ["orderNumber", "status"],
        center_columns=["status"],
        header_center_columns=["Order Number"],
    )

    first, second = model.headers
    assert first.header_justification is TableJustification.CENTER
    assert first.values_justification is TableJustification.LEFT
    assert second.header_justification is TableJustification.LEFT
    assert second.values_justification is TableJustification.CENTER


def test_absolute_links_point_cells_at_fixed_urls() -> None:
    plain = build_table_model(
        sample_orders()[:1],
        ["orderNumber", "status"],
        absolute_links={"status": "https://status.example.com"},
    )
    with_param = build_table_model(
        sample_orders()[:1],
        ["orderNumber", "customer.name"],
        absolute_links={"Customer.name": "https://crm.example.com/orders/"},
        absolute_link_param="orderNumber",
    )

    assert plain.rows[0].values["Status"].hyperlink == "https://status.example.com"
    assert not plain.rows[0].values["Order Number"].is_hyperlink()
    assert with_param.rows[0].values["Customer.name"].hyperlink == "https://crm.example.com/orders/SO-1001"
