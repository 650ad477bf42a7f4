"""
Catalog query engine.

Turns a corpus plus filter state and favorites into an ordered list. Stages
narrow the previous result in a fixed order (favorites gate, text search,
category, decade, region) and the result is then sorted. The stages commute,
so the order only affects how much work later stages do.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Iterable

from designarchive.catalog.filters import FilterState, SortMode, normalize_search
from designarchive.catalog.models import DesignRecord, parse_year
from designarchive.catalog.scoring import relevance_score

Predicate = Callable[[DesignRecord], bool]

_LOWEST_YEAR = float("-inf")


def matches_search(record: DesignRecord, term: str) -> bool:
    """True if the term is a substring of any searchable field."""
    return (
        term in record.title.lower()
        or term in record.designer.lower()
        or term in record.author.lower()
        or term in record.year.lower()
        or term in record.category.lower()
        or term in record.description.lower()
        or any(term in s.lower() for s in record.style)
    )


def decade_predicate(decade: str) -> Predicate:
    """Build a predicate for records whose year falls in [start, start + 9]."""
    start = parse_year(decade)
    if start is None:
        return lambda record: False
    end = start + 9

    def in_decade(record: DesignRecord) -> bool:
        year = record.parsed_year
        return year is not None and start <= year <= end

    return in_decade


def _year_key(record: DesignRecord) -> float:
    year = record.parsed_year
    return _LOWEST_YEAR if year is None else year


def sort_records(records: list[DesignRecord], sort: SortMode, search: str) -> list[DesignRecord]:
    """Order filtered records; every mode is a stable sort."""
    if sort == SortMode.YEAR_DESC:
        return sorted(records, key=_year_key, reverse=True)
    if sort == SortMode.YEAR_ASC:
        return sorted(records, key=_year_key)
    if sort == SortMode.NAME_ASC:
        return sorted(records, key=lambda r: r.title)
    if search:
        return sorted(records, key=lambda r: relevance_score(r, search), reverse=True)
    return list(records)


def apply_query(
    corpus: Iterable[DesignRecord],
    filters: FilterState,
    favorites: Collection[int] = frozenset(),
    show_favorites_only: bool = False,
) -> list[DesignRecord]:
    """Compute the ordered, filtered view of a corpus.

    Pure: never mutates its inputs, and identical inputs give identical output.

    Args:
        corpus: Records in corpus order
        filters: Current filter state
        favorites: Favorited record ids
        show_favorites_only: Restrict to favorited records

    Returns:
        New list of matching records in display order
    """
    results = list(corpus)

    if show_favorites_only:
        results = [r for r in results if r.id in favorites]

    search = normalize_search(filters.search)
    if search:
        results = [r for r in results if matches_search(r, search)]

    if filters.category:
        results = [r for r in results if r.category == filters.category]

    if filters.decade:
        in_decade = decade_predicate(filters.decade)
        results = [r for r in results if in_decade(r)]

    if filters.region:
        results = [r for r in results if r.region == filters.region]

    return sort_records(results, SortMode.parse(filters.sort), search)
