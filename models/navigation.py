"""Navigation models: navbar entries and breadcrumb links."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Tuple

from .errors import ValidationError


@dataclass(frozen=True)
class Breadcrumb:
    """A titled link rendered in the breadcrumb trail."""

    title: str
    url: str | None = None


@dataclass(frozen=True)
class NavbarItem:
    """A navigation bar entry, optionally holding a dropdown of sub items."""

    title: str
    url: str = ""
    sub_items: Tuple["NavbarItem", ...] = field(default_factory=tuple)

    @property
    def has_sub_items(self) -> bool:
        return bool(self.sub_items)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, loc: Tuple[Any, ...] = ()) -> "NavbarItem":
        if not isinstance(data, Mapping):
            raise ValidationError([{"loc": loc, "msg": "navbar item must be an object"}])
        title = data.get("title")
        if not isinstance(title, str) or not title:
            raise ValidationError([{"loc": (*loc, "title"), "msg": "title is required"}])
        raw_children = data.get("sub_items") or data.get("subItems") or []
        if not isinstance(raw_children, list):
            raise ValidationError([{"loc": (*loc, "sub_items"), "msg": "sub_items must be a list"}])
        children = tuple(
            cls.from_dict(child, loc=(*loc, "sub_items", index))
            for index, child in enumerate(raw_children)
        )
        return cls(title=title, url=str(data.get("url") or ""), sub_items=children)


__all__ = ["Breadcrumb", "NavbarItem"]
