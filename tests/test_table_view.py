"""Tests for the pure helpers behind the table page."""
from __future__ import annotations

from core import TabularExporter
from core.io import build_table_model
from models import TableHeader, TableJustification, TableModel
from sample_data import sample_orders
from views.table_view import (
    build_export,
    column_alignment_styles,
    export_file_name,
    filter_rows,
    table_model_to_dataframe,
)


def _orders_model() -> TableModel:
    return build_table_model(
        sample_orders(),
        ["orderNumber", "customer.name", "status"],
        ["Order", "Customer", "Status"],
        file_name="orders",
    )


def test_filter_rows_matches_any_cell_case_insensitively() -> None:
    model = _orders_model()

    filtered = filter_rows(model, "  ACME ")

    assert [row.values["Order"].text for row in filtered.rows] == ["SO-1002"]
    assert len(model.rows) == 4


def test_blank_query_keeps_all_rows() -> None:
    model = _orders_model()

    assert filter_rows(model, "   ") is model


def test_export_file_name_appends_extension_once() -> None:
    assert export_file_name(TableModel(export_file_name="orders")) == "orders.xlsx"
    assert export_file_name(TableModel(export_file_name="orders.XLSX")) == "orders.XLSX"


def test_dataframe_uses_one_based_index() -> None:
    frame = table_model_to_dataframe(_orders_model())

    assert list(frame.columns) == ["Order", "Customer", "Status"]
    assert list(frame.index) == [1, 2, 3, 4]
    assert frame.loc[4, "Customer"] == ""


def test_build_export_returns_none_without_columns() -> None:
    assert build_export(TableModel(), TabularExporter()) is None


def test_build_export_names_the_artifact() -> None:
    artifact = build_export(_orders_model(), TabularExporter())

    assert artifact is not None
    assert artifact.filename == "orders.xlsx"


def test_build_export_returns_none_for_duplicate_headers() -> None:
    model = TableModel(headers=[TableHeader(text="Same"), TableHeader(text="Same")])

    assert build_export(model, TabularExporter()) is None


def test_alignment_styles_follow_header_and_value_justification() -> None:
    model = TableModel(
        headers=[
            TableHeader(text="Order", header_justification=TableJustification.CENTER),
            TableHeader(text="Total", values_justification=TableJustification.RIGHT),
        ]
    )

    styles = column_alignment_styles(model)

    assert styles == [
        {"selector": "th.col_heading.col0", "props": [("text-align", "center")]},
        {"selector": "td.col0", "props": [("text-align", "left")]},
        {"selector": "th.col_heading.col1", "props": [("text-align", "left")]},
        {"selector": "td.col1", "props": [("text-align", "right")]},
    ]
