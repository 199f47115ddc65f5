"""Builder for standard (non-table) pages."""
from __future__ import annotations

from .common import CommonLayoutBuilder


class StandardLayoutBuilder(CommonLayoutBuilder):
    """Common layout plus the application's own defaults."""

    def initiate_defaults(self) -> "StandardLayoutBuilder":
        super().initiate_defaults()
        self.hooks.initiate_defaults(self.attributes)
        return self
