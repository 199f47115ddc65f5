"""Attribute resolution, table building and spreadsheet export."""

from __future__ import annotations

from . import exporters, io, resolver
from .exporters import TabularExporter, export_grid_to_excel, export_records_to_excel
from .io import build_table_grid, build_table_model, export_request_to_artifact, parse_export_request
from .resolver import MISSING, AttributeSource, FieldRegistry, PathResolver, ValueTransforms, resolve

__all__ = [
    "AttributeSource",
    "FieldRegistry",
    "MISSING",
    "PathResolver",
    "TabularExporter",
    "ValueTransforms",
    "build_table_grid",
    "build_table_model",
    "export_grid_to_excel",
    "export_records_to_excel",
    "export_request_to_artifact",
    "exporters",
    "io",
    "parse_export_request",
    "resolve",
    "resolver",
]
