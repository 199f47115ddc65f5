"""Data models for table rendering, attribute resolution and export."""
from __future__ import annotations

from .attributes import PATH_SEPARATOR, AttributePath, ResolutionStatus, ResolvedValue
from .errors import (
    EmptyDatasetError,
    FieldNotFoundError,
    MalformedPathError,
    ResolutionFailedError,
    UIToolkitError,
    ValidationError,
)
from .navigation import Breadcrumb, NavbarItem
from .table import (
    XLSX_MEDIA_TYPE,
    ExportArtifact,
    TableColor,
    TableElement,
    TableGrid,
    TableHeader,
    TableJustification,
    TableModel,
    TableRow,
    display_text,
)

__all__ = [
    "AttributePath",
    "Breadcrumb",
    "EmptyDatasetError",
    "ExportArtifact",
    "FieldNotFoundError",
    "MalformedPathError",
    "NavbarItem",
    "PATH_SEPARATOR",
    "ResolutionFailedError",
    "ResolutionStatus",
    "ResolvedValue",
    "TableColor",
    "TableElement",
    "TableGrid",
    "TableHeader",
    "TableJustification",
    "TableModel",
    "TableRow",
    "UIToolkitError",
    "ValidationError",
    "XLSX_MEDIA_TYPE",
    "display_text",
]
