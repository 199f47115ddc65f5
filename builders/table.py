"""Builder for pages centred on a data table."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Sequence

from core import PathResolver, build_table_grid, build_table_model
from models import TableColor, TableGrid, TableModel

from .common import CommonLayoutBuilder

TABLE_DEFAULTS: Dict[str, Any] = {
    "header_names": [],
    "file_name": "excelFile",
    "table_list": [],
    "attribute_names": [],
    "paths": [],
    "non_sortable": [],
    "column_text_center_list": [],
    "column_link_enable": False,
    "path_column_name": "",
    "column_param_variable": "",
    "header_column_text_center_list": [],
    "absolute_path_links": {},
    "absolute_path_name": "",
    "row_hyperlink_map": {},
    "legend": {},
}


class TableLayoutBuilder(CommonLayoutBuilder):
    """Common layout plus table content, column options and export naming."""

    def initiate_defaults(self) -> "TableLayoutBuilder":
        super().initiate_defaults()
        self.hooks.initiate_defaults(self.attributes)
        for key, value in TABLE_DEFAULTS.items():
            self.attributes[key] = value.copy() if isinstance(value, (list, dict)) else value
        return self

    def with_table_list(self, table_list: Iterable[Any]) -> "TableLayoutBuilder":
        return self._set("table_list", list(table_list))

    def with_header_names(self, header_names: Sequence[str]) -> "TableLayoutBuilder":
        return self._set("header_names", list(header_names))

    def with_file_name(self, file_name: str) -> "TableLayoutBuilder":
        return self._set("file_name", file_name)

    def with_attribute_names(self, attribute_names: Sequence[str]) -> "TableLayoutBuilder":
        return self._set("attribute_names", list(attribute_names))

    def with_paths(self, paths: Sequence[str]) -> "TableLayoutBuilder":
        return self._set("paths", list(paths))

    def with_non_sortable(self, columns: Sequence[str]) -> "TableLayoutBuilder":
        return self._set("non_sortable", list(columns))

    def with_column_text_center_list(self, columns: Sequence[str]) -> "TableLayoutBuilder":
        return self._set("column_text_center_list", list(columns))

    def with_column_link_enable(self, enabled: bool) -> "TableLayoutBuilder":
        return self._set("column_link_enable", enabled)

    def with_path_column_name(self, name: str) -> "TableLayoutBuilder":
        return self._set("path_column_name", name)

    def with_column_param_variable(self, name: str) -> "TableLayoutBuilder":
        return self._set("column_param_variable", name)

    def with_header_column_text_center_list(self, columns: Sequence[str]) -> "TableLayoutBuilder":
        return self._set("header_column_text_center_list", list(columns))

    def with_absolute_path_links(self, links: Mapping[str, str]) -> "TableLayoutBuilder":
        """Link every cell of the given columns to a fixed URL."""

        return self._set("absolute_path_links", dict(links))

    def with_absolute_path_name(self, name: str) -> "TableLayoutBuilder":
        """Append the value of attribute path *name* to the absolute links."""

        return self._set("absolute_path_name", name)

    def with_row_hyperlink_map(self, mapping: Mapping[str, Any]) -> "TableLayoutBuilder":
        """Show static text instead of the resolved value for the given attributes."""

        return self._set("row_hyperlink_map", dict(mapping))

    def with_legend(self, legend: Mapping[TableColor, str]) -> "TableLayoutBuilder":
        return self._set("legend", dict(legend))

    def _header_names(self) -> List[str] | None:
        return list(self.attributes["header_names"]) or None

    def _resolver(self, resolver: PathResolver | None) -> PathResolver:
        return resolver or PathResolver.from_settings(self.settings)

    def to_table_model(self, resolver: PathResolver | None = None) -> TableModel:
        """Resolve ``table_list`` x ``attribute_names`` into a :class:`TableModel`."""

        attrs = self.attributes
        link_enabled = bool(attrs["column_link_enable"] and attrs["path_column_name"])
        paths = attrs["paths"]
        model = build_table_model(
            attrs["table_list"],
            attrs["attribute_names"],
            self._header_names(),
            resolver=self._resolver(resolver),
            strip_first_word_for=self.settings.strip_first_word_for,
            file_name=attrs["file_name"],
            row_color=self.hooks.row_background_color,
            non_sortable=attrs["non_sortable"],
            center_columns=attrs["column_text_center_list"],
            header_center_columns=attrs["header_column_text_center_list"],
            link_column=attrs["path_column_name"] if link_enabled else None,
            link_path=paths[0] if paths else "",
            link_param=attrs["column_param_variable"] or None,
            absolute_links=attrs["absolute_path_links"],
            absolute_link_param=attrs["absolute_path_name"] or None,
        )

        static_text = attrs["row_hyperlink_map"]
        if static_text:
            titles = dict(zip(attrs["attribute_names"], (header.text for header in model.headers)))
            for row in model.rows:
                for name, text in static_text.items():
                    element = row.values.get(titles.get(name, name))
                    if element is not None:
                        element.text = str(text)
        if attrs["legend"]:
            model.legend = dict(attrs["legend"])
        return model

    def to_grid(self, resolver: PathResolver | None = None) -> TableGrid:
        """Resolve the configured table into an export grid."""

        return build_table_grid(
            self.attributes["table_list"],
            self.attributes["attribute_names"],
            self._header_names(),
            resolver=self._resolver(resolver),
            strip_first_word_for=self.settings.strip_first_word_for,
        )


__all__ = ["TABLE_DEFAULTS", "TableLayoutBuilder"]
