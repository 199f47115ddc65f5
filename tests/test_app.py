"""Tests for the order page hooks."""
from __future__ import annotations

from app import OrderTableHooks, build_order_table
from models import TableColor
from sample_data import sample_orders


def test_order_hooks_fill_defaults_and_highlight_rows() -> None:
    hooks = OrderTableHooks()
    attributes: dict = {}

    hooks.initiate_defaults(attributes)

    assert attributes == {"footer_name": "Order desk", "header_department": "Sales operations"}
    colors = [hooks.row_background_color(order) for order in sample_orders()]
    assert colors == ["", "", TableColor.DANGER.value, TableColor.WARNING.value]


def test_order_table_builder_resolves_sample_rows() -> None:
    model = build_order_table().to_table_model()

    assert len(model.rows) == 4
    assert model.export_file_name == "orders"
    assert model.rows[2].row_color is TableColor.DANGER
