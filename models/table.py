"""Dataclass models for table fragments, export grids and export artefacts."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple

from .errors import EmptyDatasetError, ValidationError

logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def display_text(value: Any) -> str:
    """Render a cell value as the string shown in a table or workbook."""

    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


@dataclass(frozen=True)
class TableGrid:
    """Ordered columns plus rows of display strings keyed by column name.

    Rows may omit columns; an omitted key is rendered as an empty cell.
    """

    columns: Tuple[str, ...]
    rows: Tuple[Mapping[str, str], ...] = ()

    def __post_init__(self) -> None:
        columns = tuple(self.columns)
        errors: List[Dict[str, Any]] = []
        seen: set[str] = set()
        for index, name in enumerate(columns):
            if not isinstance(name, str):
                errors.append({"loc": ("columns", index), "msg": "column names must be strings"})
            elif name in seen:
                errors.append({"loc": ("columns", index), "msg": f"duplicate column {name!r}"})
            seen.add(name)

        rows: List[Dict[str, str]] = []
        for row_index, row in enumerate(self.rows):
            unknown = [key for key in row if key not in seen]
            if unknown:
                errors.append(
                    {
                        "loc": ("rows", row_index),
                        "msg": f"unknown columns: {', '.join(map(str, unknown))}",
                    }
                )
                continue
            rows.append({key: display_text(value) for key, value in row.items()})
        if errors:
            raise ValidationError(errors)

        object.__setattr__(self, "columns", columns)
        object.__setattr__(self, "rows", tuple(rows))

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        columns: Sequence[str] | None = None,
    ) -> "TableGrid":
        """Build a grid, taking the column order from the first record if needed.

        Keys that first appear in later records are dropped so the column order
        never changes after the first row. Raises :class:`EmptyDatasetError`
        when there are no records and no explicit *columns*.
        """

        rows = [dict(record) for record in records]
        if columns is None:
            if not rows:
                raise EmptyDatasetError("Cannot infer columns from an empty dataset")
            columns = list(rows[0].keys())
        known = set(columns)

        trimmed: List[Dict[str, Any]] = []
        for index, row in enumerate(rows):
            extra = [key for key in row if key not in known]
            if extra:
                logger.debug("Row %d: dropping keys outside the column list: %s", index, extra)
            trimmed.append({key: value for key, value in row.items() if key in known})
        return cls(columns=tuple(columns), rows=tuple(trimmed))

    @property
    def width(self) -> int:
        return len(self.columns)

    def __len__(self) -> int:
        return len(self.rows)

    def cell(self, row_index: int, column: str) -> str:
        if column not in self.columns:
            raise KeyError(column)
        return self.rows[row_index].get(column, "")

    def matrix(self) -> List[List[str]]:
        """Return the rows as lists of cells in column order."""

        return [[row.get(column, "") for column in self.columns] for row in self.rows]


@dataclass(frozen=True)
class ExportArtifact:
    """A named, in-memory spreadsheet ready for download."""

    filename: str
    content: bytes
    media_type: str = XLSX_MEDIA_TYPE

    def __post_init__(self) -> None:
        if not isinstance(self.filename, str) or not self.filename.strip():
            raise ValidationError([{"loc": ("filename",), "msg": "filename must not be empty"}])

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def content_disposition(self) -> str:
        return f'attachment; filename="{self.filename}"'


class TableColor(str, Enum):
    """Row highlight colours, expressed as Bootstrap contextual classes."""

    DEFAULT = ""
    PRIMARY = "table-primary"
    SECONDARY = "table-secondary"
    SUCCESS = "table-success"
    DANGER = "table-danger"
    WARNING = "table-warning"
    INFO = "table-info"
    LIGHT = "table-light"
    DARK = "table-dark"


class TableJustification(str, Enum):
    LEFT = "text-start"
    CENTER = "text-center"
    RIGHT = "text-end"


@dataclass
class TableElement:
    """A cell or header: text with an optional hyperlink and icon."""

    text: str = ""
    hyperlink: str = ""
    icon: str | None = None

    def is_icon(self) -> bool:
        return self.icon is not None

    def is_hyperlink(self) -> bool:
        return bool(self.hyperlink and self.hyperlink.strip())


@dataclass
class TableHeader(TableElement):
    sortable: bool = True
    header_justification: TableJustification = TableJustification.LEFT
    values_justification: TableJustification = TableJustification.LEFT


@dataclass
class TableRow:
    row_color: TableColor = TableColor.DEFAULT
    values: Dict[str, TableElement] = field(default_factory=dict)


@dataclass
class TableModel:
    """Everything the table fragment needs to render and export a table."""

    headers: List[TableHeader] = field(default_factory=list)
    rows: List[TableRow] = field(default_factory=list)
    export_file_name: str = "excelFile"
    enable_index: bool = True
    enable_search: bool = True
    legend: Dict[TableColor, str] | None = None

    def display_legend(self) -> bool:
        return bool(self.legend)

    def to_grid(self) -> TableGrid:
        """Flatten the table into a :class:`TableGrid` keyed by header text."""

        columns = [header.text for header in self.headers]
        rows = [
            {name: element.text for name, element in row.values.items() if name in columns}
            for row in self.rows
        ]
        return TableGrid(columns=tuple(columns), rows=tuple(rows))


__all__ = [
    "ExportArtifact",
    "TableColor",
    "TableElement",
    "TableGrid",
    "TableHeader",
    "TableJustification",
    "TableModel",
    "TableRow",
    "XLSX_MEDIA_TYPE",
    "display_text",
]
