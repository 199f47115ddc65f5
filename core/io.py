"""Utilities for turning row objects into tables and parsing export requests."""

from __future__ import annotations

import json
import logging
from typing import AbstractSet, Any, Callable, Dict, Iterable, List, Mapping, Sequence, Tuple

from formatting import to_title_case
from models import (
    AttributePath,
    ExportArtifact,
    TableColor,
    TableElement,
    TableGrid,
    TableHeader,
    TableJustification,
    TableModel,
    TableRow,
    ValidationError,
    display_text,
)

from .exporters import TabularExporter
from .resolver import PathResolver

logger = logging.getLogger(__name__)

RowColorFunc = Callable[[Any], "TableColor | str | None"]


def header_titles(
    attribute_names: Sequence[str],
    header_names: Sequence[str] | None = None,
    strip_first_word_for: AbstractSet[str] = frozenset(),
) -> List[str]:
    """Return explicit *header_names* or title-cased attribute names.

    Raises :class:`ValidationError` when the counts differ or when two
    attributes end up with the same column title.
    """

    if header_names is None:
        titles = [to_title_case(name, strip_first_word_for) or "" for name in attribute_names]
    elif len(header_names) != len(attribute_names):
        raise ValidationError(
            [
                {
                    "loc": ("header_names",),
                    "msg": f"expected {len(attribute_names)} header names, got {len(header_names)}",
                }
            ]
        )
    else:
        titles = list(header_names)

    errors: List[Dict[str, Any]] = []
    first_owner: Dict[str, str] = {}
    for index, (name, title) in enumerate(zip(attribute_names, titles)):
        if title in first_owner:
            errors.append(
                {
                    "loc": ("attribute_names", index),
                    "msg": f"{name!r} and {first_owner[title]!r} share the column title {title!r}",
                }
            )
        else:
            first_owner[title] = name
    if errors:
        raise ValidationError(errors)
    return titles


def _resolve_cells(
    item: Any,
    attribute_names: Sequence[str],
    resolver: PathResolver,
) -> List[str]:
    cells: List[str] = []
    for name in attribute_names:
        result = resolver.resolve(item, name)
        if not result.is_found:
            logger.debug("Cell %r rendered empty: %s", name, result.status.value)
        cells.append(display_text(result.or_default("")))
    return cells


def build_table_grid(
    items: Iterable[Any],
    attribute_names: Sequence[str],
    header_names: Sequence[str] | None = None,
    *,
    resolver: PathResolver | None = None,
    strip_first_word_for: AbstractSet[str] = frozenset(),
) -> TableGrid:
    """Resolve one display string per (item, attribute) pair.

    Attribute paths are validated once up front. Missing fields and fields that
    fail to read become empty cells instead of aborting the grid.
    """

    for name in attribute_names:
        AttributePath.parse(name)
    resolver = resolver or PathResolver()
    headers = header_titles(attribute_names, header_names, strip_first_word_for)

    rows = [
        dict(zip(headers, _resolve_cells(item, attribute_names, resolver)))
        for item in items
    ]
    return TableGrid(columns=tuple(headers), rows=tuple(rows))


def build_table_model(
    items: Iterable[Any],
    attribute_names: Sequence[str],
    header_names: Sequence[str] | None = None,
    *,
    resolver: PathResolver | None = None,
    strip_first_word_for: AbstractSet[str] = frozenset(),
    file_name: str = "excelFile",
    row_color: RowColorFunc | None = None,
    non_sortable: Iterable[str] = (),
    center_columns: Iterable[str] = (),
    header_center_columns: Iterable[str] = (),
    link_column: str | None = None,
    link_path: str = "",
    link_param: str | None = None,
    absolute_links: Mapping[str, str] | None = None,
    absolute_link_param: str | None = None,
) -> TableModel:
    """Build the :class:`TableModel` rendered by the table view.

    *row_color* returns the highlight for an item (empty for none). When
    *link_column* is set, its cells link to ``link_path/<link_param value>``.
    *absolute_links* maps a column to a fixed URL; with *absolute_link_param*
    the resolved value of that path is appended to it. Columns are matched by
    attribute name or by title.
    """

    for name in attribute_names:
        AttributePath.parse(name)
    if absolute_link_param:
        AttributePath.parse(absolute_link_param)
    resolver = resolver or PathResolver()
    titles = header_titles(attribute_names, header_names, strip_first_word_for)
    non_sortable = set(non_sortable)
    center_columns = set(center_columns)
    header_center_columns = set(header_center_columns)
    absolute_links = dict(absolute_links or {})

    def _justify(name: str, title: str, centered: AbstractSet[str]) -> TableJustification:
        if name in centered or title in centered:
            return TableJustification.CENTER
        return TableJustification.LEFT

    headers = [
        TableHeader(
            text=title,
            sortable=title not in non_sortable and name not in non_sortable,
            header_justification=_justify(name, title, header_center_columns),
            values_justification=_justify(name, title, center_columns),
        )
        for name, title in zip(attribute_names, titles)
    ]

    rows: List[TableRow] = []
    for item in items:
        cells = _resolve_cells(item, attribute_names, resolver)
        values: Dict[str, TableElement] = {}
        for name, title, text in zip(attribute_names, titles, cells):
            element = TableElement(text=text)
            if link_column is not None and name == link_column and link_param:
                param = resolver.resolve(item, link_param).or_default("")
                element.hyperlink = f"{link_path.rstrip('/')}/{display_text(param)}"
            absolute = absolute_links.get(name, absolute_links.get(title))
            if absolute and absolute_link_param:
                param = resolver.resolve(item, absolute_link_param).or_default("")
                element.hyperlink = f"{absolute.rstrip('/')}/{display_text(param)}"
            elif absolute:
                element.hyperlink = absolute
            values[title] = element
        color = row_color(item) if row_color else None
        rows.append(TableRow(row_color=TableColor(color or ""), values=values))

    return TableModel(headers=headers, rows=rows, export_file_name=file_name)


def parse_export_request(payload: str | bytes | Mapping[str, Any]) -> Tuple[List[Dict[str, str]], str]:
    """Parse an export request body into ``(rows, filename)``.

    The body carries ``tableData`` (a list of column → text objects) and
    ``filename``.
    """

    if isinstance(payload, (str, bytes, bytearray)):
        try:
            data = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ValidationError([{"loc": (), "msg": f"invalid JSON: {exc}"}]) from exc
    else:
        data = payload
    if not isinstance(data, Mapping):
        raise ValidationError([{"loc": (), "msg": "request body must be an object"}])

    errors: List[Dict[str, Any]] = []
    filename = data.get("filename")
    if not isinstance(filename, str) or not filename.strip():
        errors.append({"loc": ("filename",), "msg": "filename is required"})

    raw_rows = data.get("tableData")
    rows: List[Dict[str, str]] = []
    if not isinstance(raw_rows, list):
        errors.append({"loc": ("tableData",), "msg": "tableData must be a list"})
    else:
        for index, row in enumerate(raw_rows):
            if not isinstance(row, Mapping):
                errors.append({"loc": ("tableData", index), "msg": "row must be an object"})
                continue
            rows.append({str(key): display_text(value) for key, value in row.items()})

    if errors:
        raise ValidationError(errors)
    return rows, filename


def export_request_to_artifact(
    payload: str | bytes | Mapping[str, Any],
    exporter: TabularExporter | None = None,
) -> ExportArtifact:
    """Parse an export request and serialize its rows to a workbook."""

    rows, filename = parse_export_request(payload)
    logger.debug("Received request to export %d rows as %s", len(rows), filename)
    return (exporter or TabularExporter()).export_records(rows, filename)


def set_dynamic_link(urls: Mapping[str, str], key: str, partial_path: str) -> Dict[str, str]:
    """Return a copy of *urls* with *partial_path* appended to ``urls[key]``."""

    link = f"{urls.get(key, '')}{partial_path}"
    logger.debug("Link Generated: %s", link)
    updated = dict(urls)
    updated[key] = link
    return updated


__all__ = [
    "build_table_grid",
    "build_table_model",
    "export_request_to_artifact",
    "header_titles",
    "parse_export_request",
    "set_dynamic_link",
]
