"""
Design record model.

Records are immutable once loaded. Years are kept as text and parsed on
demand; a year with no leading integer parses to None and is treated as
the lowest value when sorting.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

DEFAULT_IMAGE = (
    "https://images.unsplash.com/photo-1581094794329-c8112a89af12"
    "?auto=format&fit=crop&w=800&q=80"
)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_year(value: Any) -> int | None:
    """Parse the leading integer of a year value.

    ``"1958"`` -> 1958, ``"1950s"`` -> 1950, ``"c. 1950"`` -> None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value))
    if match is None:
        return None
    return int(match.group(1))


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _strings(value: Any) -> tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(v) for v in value)


def _ids(value: Any) -> tuple[int, ...]:
    if not value:
        return ()
    ids = []
    for v in value:
        try:
            ids.append(int(v))
        except (TypeError, ValueError):
            continue
    return tuple(ids)


@dataclass(frozen=True)
class DesignRecord:
    """A single design artifact in the corpus."""

    id: int
    title: str
    designer: str = ""
    author: str = ""
    year: str = ""
    category: str = ""
    region: str = ""
    description: str = ""
    materials: tuple[str, ...] = field(default_factory=tuple)
    style: tuple[str, ...] = field(default_factory=tuple)
    impact: str = ""
    image: str = DEFAULT_IMAGE
    related: tuple[int, ...] = field(default_factory=tuple)

    @property
    def display_name(self) -> str:
        """Designer, falling back to author."""
        return self.designer or self.author

    @property
    def parsed_year(self) -> int | None:
        return parse_year(self.year)

    @classmethod
    def from_dict(cls, data: dict[str, Any], position: int) -> DesignRecord:
        """Build a record from raw corpus data.

        Args:
            data: Raw record mapping
            position: 1-based position in the source, used when id is missing

        Returns:
            DesignRecord with id and image backfilled
        """
        raw_id = data.get("id")
        try:
            record_id = int(raw_id) if raw_id else position
        except (TypeError, ValueError):
            record_id = position

        return cls(
            id=record_id,
            title=_text(data.get("title")),
            designer=_text(data.get("designer")),
            author=_text(data.get("author")),
            year=_text(data.get("year")),
            category=_text(data.get("category")),
            region=_text(data.get("region")),
            description=_text(data.get("description")),
            materials=_strings(data.get("materials")),
            style=_strings(data.get("style")),
            impact=_text(data.get("impact")),
            image=_text(data.get("image")) or DEFAULT_IMAGE,
            related=_ids(data.get("related")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to the corpus JSON shape."""
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "designer": self.designer,
            "author": self.author,
            "year": self.year,
            "category": self.category,
            "region": self.region,
            "description": self.description,
            "materials": list(self.materials),
            "style": list(self.style),
            "impact": self.impact,
            "image": self.image,
        }
        if self.related:
            data["related"] = list(self.related)
        return data
