"""Fluent builders assembling the attributes consumed by the page views."""
from __future__ import annotations

from .common import COMMON_DEFAULTS, CommonLayoutBuilder, LayoutHooks
from .standard import StandardLayoutBuilder
from .table import TABLE_DEFAULTS, TableLayoutBuilder

__all__ = [
    "COMMON_DEFAULTS",
    "CommonLayoutBuilder",
    "LayoutHooks",
    "StandardLayoutBuilder",
    "TABLE_DEFAULTS",
    "TableLayoutBuilder",
]
