"""Helper utilities for formatting display values and titles."""
from __future__ import annotations

import re
from datetime import date, datetime
from typing import AbstractSet, Dict, Iterable, Mapping

from models import Breadcrumb

DATE_TIME_FORMAT = "%Y-%m-%d %H:%M %p"
DATE_FORMAT = "%Y-%m-%d"

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])")


def format_timestamp(value: datetime, pattern: str = DATE_TIME_FORMAT) -> str:
    """Render *value* with the 24-hour clock followed by an AM/PM marker."""

    return value.strftime(pattern)


def format_date(value: date, pattern: str = DATE_FORMAT) -> str:
    return value.strftime(pattern)


def to_title_case(
    identifier: str | None,
    strip_first_word_for: AbstractSet[str] = frozenset(),
) -> str | None:
    """Turn a camelCase identifier into a display title.

    A space is inserted at every lower-to-upper boundary and only the first
    character is upper-cased. When the original *identifier* is listed in
    *strip_first_word_for*, the leading word is dropped as well; a single-word
    title then becomes empty.
    """

    if not identifier:
        return identifier

    title = _CAMEL_BOUNDARY.sub(" ", identifier).strip()
    if not title:
        return title
    title = title[0].upper() + title[1:]

    if identifier in strip_first_word_for:
        _, space, rest = title.partition(" ")
        return rest if space else ""
    return title


def navigation_links(
    names: Iterable[str],
    urls: Mapping[str, str],
    strip_first_word_for: AbstractSet[str] = frozenset(),
) -> Dict[str, Breadcrumb]:
    """Build an ordered title → :class:`Breadcrumb` mapping for *names*.

    The first name wins when two names share a title.
    """

    links: Dict[str, Breadcrumb] = {}
    for name in names:
        title = to_title_case(name, strip_first_word_for) or ""
        if title in links:
            continue
        links[title] = Breadcrumb(title=title, url=urls.get(name))
    return links


__all__ = [
    "DATE_FORMAT",
    "DATE_TIME_FORMAT",
    "format_date",
    "format_timestamp",
    "navigation_links",
    "to_title_case",
]
