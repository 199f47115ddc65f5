"""Page renderers."""
from __future__ import annotations

from .table_view import render_table_page

__all__ = ["render_table_page"]
