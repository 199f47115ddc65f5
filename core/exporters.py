"""Export utilities for generating downloadable spreadsheets."""

from __future__ import annotations

import io
import logging
from typing import Any, Iterable, Mapping, Sequence

import pandas as pd
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE, TYPE_FORMULA, TYPE_STRING
from openpyxl.worksheet.worksheet import Worksheet

from config import DEFAULT_SHEET_NAME
from models import EmptyDatasetError, ExportArtifact, TableGrid

logger = logging.getLogger(__name__)

MAX_SHEET_NAME_LENGTH = 31


def worksheet_text(value: str) -> str:
    """Drop the control characters a worksheet cannot store."""

    cleaned = ILLEGAL_CHARACTERS_RE.sub("", value)
    if cleaned != value:
        logger.warning("Removed %d control characters from cell text", len(value) - len(cleaned))
    return cleaned


def grid_to_dataframe(grid: TableGrid) -> pd.DataFrame:
    """Return *grid* as a string DataFrame with absent cells set to ``""``."""

    columns = [worksheet_text(column) for column in grid.columns]
    records = [[worksheet_text(cell) for cell in row] for row in grid.matrix()]
    return pd.DataFrame(records, columns=columns, dtype=object)


def _store_as_text(sheet: Worksheet) -> None:
    # openpyxl turns strings starting with "=" into formulas on assignment.
    for row in sheet.iter_rows():
        for cell in row:
            if cell.data_type == TYPE_FORMULA and isinstance(cell.value, str):
                cell.data_type = TYPE_STRING


def export_grid_to_excel(grid: TableGrid, *, sheet_name: str = DEFAULT_SHEET_NAME) -> bytes:
    """Serialize *grid* to an ``.xlsx`` workbook with a single sheet.

    The first row holds the column names; each following row matches one grid
    row. Every cell is stored as text. A grid with columns but no rows yields a
    header-only workbook.
    """

    if not grid.columns:
        raise EmptyDatasetError("Cannot export a grid without columns")

    frame = grid_to_dataframe(grid)
    sheet_name = sheet_name[:MAX_SHEET_NAME_LENGTH]
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        frame.to_excel(writer, sheet_name=sheet_name, index=False)
        _store_as_text(writer.sheets[sheet_name])
    buffer.seek(0)
    return buffer.getvalue()


class TabularExporter:
    """Turn table grids into named workbook artefacts."""

    def __init__(self, sheet_name: str = DEFAULT_SHEET_NAME) -> None:
        self.sheet_name = sheet_name

    @classmethod
    def from_settings(cls, settings: Any) -> "TabularExporter":
        return cls(sheet_name=settings.sheet_name)

    def export(self, grid: TableGrid, filename: str) -> ExportArtifact:
        content = export_grid_to_excel(grid, sheet_name=self.sheet_name)
        logger.debug(
            "Exported %d rows x %d columns to %s (%d bytes)",
            len(grid),
            grid.width,
            filename,
            len(content),
        )
        return ExportArtifact(filename=filename, content=content)

    def export_records(
        self,
        records: Iterable[Mapping[str, Any]],
        filename: str,
        columns: Sequence[str] | None = None,
    ) -> ExportArtifact:
        """Export raw row mappings; columns default to the first row's key order."""

        return self.export(TableGrid.from_records(records, columns), filename)


def export_records_to_excel(
    records: Iterable[Mapping[str, Any]],
    filename: str,
    columns: Sequence[str] | None = None,
    *,
    sheet_name: str = DEFAULT_SHEET_NAME,
) -> ExportArtifact:
    return TabularExporter(sheet_name).export_records(records, filename, columns)


__all__ = [
    "TabularExporter",
    "export_grid_to_excel",
    "export_records_to_excel",
    "grid_to_dataframe",
    "worksheet_text",
]
