"""Filter state for catalog queries."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class SortMode(str, Enum):
    """Ordering applied to the filtered list."""

    RELEVANCE = "relevance"
    YEAR_DESC = "year-desc"
    YEAR_ASC = "year-asc"
    NAME_ASC = "name-asc"

    @classmethod
    def parse(cls, value: str | SortMode | None) -> SortMode:
        """Parse a sort value, falling back to relevance for unknown input."""
        if isinstance(value, SortMode):
            return value
        try:
            return cls(value or cls.RELEVANCE.value)
        except ValueError:
            return cls.RELEVANCE


# Fields cleared by "remove filter" tags, with their display labels
FACET_LABELS = {
    "search": "Search",
    "category": "Category",
    "decade": "Decade",
    "region": "Region",
}


def normalize_search(text: str | None) -> str:
    """Trim and case-fold a search term."""
    return (text or "").strip().lower()


@dataclass
class FilterState:
    """Mutable query parameters.

    ``search`` is always stored normalized (trimmed, lower-cased).
    """

    search: str = ""
    category: str = ""
    decade: str = ""
    region: str = ""
    sort: SortMode = SortMode.RELEVANCE

    def __post_init__(self) -> None:
        self.search = normalize_search(self.search)
        self.sort = SortMode.parse(self.sort)

    def set(self, name: str, value: str | SortMode | None) -> None:
        """Set one field by name, normalizing the value."""
        if name == "search":
            self.search = normalize_search(value)  # type: ignore[arg-type]
        elif name == "sort":
            self.sort = SortMode.parse(value)
        elif name in ("category", "decade", "region"):
            setattr(self, name, str(value or "").strip())
        else:
            raise KeyError(f"Unknown filter: {name}")

    def clear(self, name: str) -> None:
        """Clear one field (sort returns to relevance)."""
        self.set(name, None)

    def reset(self) -> None:
        """Return every field to its default."""
        self.search = ""
        self.category = ""
        self.decade = ""
        self.region = ""
        self.sort = SortMode.RELEVANCE

    def is_default(self) -> bool:
        return self == FilterState()

    def copy(self) -> FilterState:
        return replace(self)

    def active_items(self) -> list[tuple[str, str, str]]:
        """Active filter tags as (field, label, value); sort is never a tag."""
        items = []
        for name, label in FACET_LABELS.items():
            value = getattr(self, name)
            if value:
                items.append((name, label, f'"{value}"' if name == "search" else value))
        return items
