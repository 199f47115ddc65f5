"""Render logic for table pages: search, highlighting, legend and export."""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, List, MutableMapping

import pandas as pd
import streamlit as st

from builders import TableLayoutBuilder
from core import TabularExporter
from models import EmptyDatasetError, ExportArtifact, TableColor, TableJustification, TableModel, ValidationError
from state import ensure_session_defaults, remember_export, store_layout
from ui.chrome import apply_app_chrome, render_app_footer, render_app_header

logger = logging.getLogger(__name__)

ROW_BACKGROUNDS: Dict[TableColor, str] = {
    TableColor.DEFAULT: "",
    TableColor.PRIMARY: "#cfe2ff",
    TableColor.SECONDARY: "#e2e3e5",
    TableColor.SUCCESS: "#d1e7dd",
    TableColor.DANGER: "#f8d7da",
    TableColor.WARNING: "#fff3cd",
    TableColor.INFO: "#cff4fc",
    TableColor.LIGHT: "#f8f9fa",
    TableColor.DARK: "#ced4da",
}


TEXT_ALIGN: Dict[TableJustification, str] = {
    TableJustification.LEFT: "left",
    TableJustification.CENTER: "center",
    TableJustification.RIGHT: "right",
}


def column_alignment_styles(model: TableModel) -> List[Dict[str, Any]]:
    """Return Styler table styles aligning header and value cells per column."""

    styles: List[Dict[str, Any]] = []
    for position, header in enumerate(model.headers):
        styles.append(
            {
                "selector": f"th.col_heading.col{position}",
                "props": [("text-align", TEXT_ALIGN[header.header_justification])],
            }
        )
        styles.append(
            {
                "selector": f"td.col{position}",
                "props": [("text-align", TEXT_ALIGN[header.values_justification])],
            }
        )
    return styles


def export_file_name(model: TableModel) -> str:
    name = model.export_file_name or "excelFile"
    return name if name.lower().endswith(".xlsx") else f"{name}.xlsx"


def filter_rows(model: TableModel, query: str) -> TableModel:
    """Return a copy of *model* keeping rows whose text contains *query*."""

    needle = query.strip().lower()
    if not needle:
        return model
    rows = [
        row
        for row in model.rows
        if any(needle in element.text.lower() for element in row.values.values())
    ]
    return replace(model, rows=rows)


def table_model_to_dataframe(model: TableModel) -> pd.DataFrame:
    columns = [header.text for header in model.headers]
    records = [
        [row.values[column].text if column in row.values else "" for column in columns]
        for row in model.rows
    ]
    frame = pd.DataFrame(records, columns=columns, dtype=object)
    if model.enable_index:
        frame.index = pd.RangeIndex(start=1, stop=len(frame) + 1)
    return frame


def _row_styles(model: TableModel) -> List[str]:
    styles = []
    for row in model.rows:
        background = ROW_BACKGROUNDS.get(row.row_color, "")
        styles.append(f"background-color: {background}" if background else "")
    return styles


def build_export(model: TableModel, exporter: TabularExporter) -> ExportArtifact | None:
    """Export the visible rows, returning ``None`` when there is nothing to export."""

    try:
        return exporter.export(model.to_grid(), export_file_name(model))
    except (EmptyDatasetError, ValidationError) as exc:
        logger.warning("Export skipped: %s", exc)
        return None


def render_table(model: TableModel) -> None:
    frame = table_model_to_dataframe(model)
    styles = _row_styles(model)
    styled = frame.style.apply(lambda row: [styles[frame.index.get_loc(row.name)]] * len(row), axis=1)
    styled = styled.set_table_styles(column_alignment_styles(model))
    st.dataframe(
        styled,
        use_container_width=True,
        hide_index=not model.enable_index,
    )

    if model.display_legend():
        legend_cols = st.columns(len(model.legend))
        for column, (color, label) in zip(legend_cols, model.legend.items(), strict=False):
            swatch = ROW_BACKGROUNDS.get(TableColor(color), "")
            column.markdown(
                f"<span style='background-color:{swatch};padding:0 0.6em'>&nbsp;</span> {label}",
                unsafe_allow_html=True,
            )


def render_table_page(
    builder: TableLayoutBuilder,
    *,
    exporter: TabularExporter | None = None,
    session: MutableMapping[str, Any] | None = None,
) -> None:
    """Render a full table page from a configured builder."""

    ensure_session_defaults(session=session)
    layout = store_layout(builder, session=session)
    apply_app_chrome(layout)
    render_app_header(layout)

    try:
        model = builder.to_table_model()
    except ValidationError as exc:
        logger.warning("Table not rendered: %s", exc)
        st.warning(f"The table is misconfigured: {exc}")
        render_app_footer(layout)
        return

    if model.enable_search and layout.get("show_default_search_box", True):
        query = st.text_input(
            "Search",
            key="search_query",
            placeholder=layout.get("search_box_placeholder") or "Search…",
        )
        model = filter_rows(model, query)

    if not model.rows:
        st.info("No rows to display.")
    else:
        render_table(model)

    artifact = build_export(model, exporter or TabularExporter.from_settings(builder.settings))
    if artifact is None:
        st.warning("There is nothing to export yet.")
    else:
        remember_export(artifact, session=session)
        st.download_button(
            "Export to Excel",
            data=artifact.content,
            file_name=artifact.filename,
            mime=artifact.media_type,
        )

    render_app_footer(layout)


__all__ = [
    "ROW_BACKGROUNDS",
    "TEXT_ALIGN",
    "build_export",
    "column_alignment_styles",
    "export_file_name",
    "filter_rows",
    "render_table",
    "render_table_page",
    "table_model_to_dataframe",
]
