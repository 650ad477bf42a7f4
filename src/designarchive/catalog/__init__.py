"""
Catalog query engine.

Corpus loading, filter state, relevance ranking, query pipeline,
pagination, favorites and the browsing session that ties them together.
"""

from designarchive.catalog.corpus import Corpus, load_corpus, load_corpus_or_fallback
from designarchive.catalog.favorites import FavoritesStore
from designarchive.catalog.filters import FilterState, SortMode
from designarchive.catalog.models import DEFAULT_IMAGE, DesignRecord, parse_year
from designarchive.catalog.pagination import PaginationCursor, ScrollProximityTrigger
from designarchive.catalog.preferences import ThemePreference
from designarchive.catalog.query import apply_query
from designarchive.catalog.scoring import relevance_score
from designarchive.catalog.session import ArchiveSession

__all__ = [
    "Corpus",
    "load_corpus",
    "load_corpus_or_fallback",
    "DesignRecord",
    "DEFAULT_IMAGE",
    "parse_year",
    "FilterState",
    "SortMode",
    "relevance_score",
    "apply_query",
    "PaginationCursor",
    "ScrollProximityTrigger",
    "FavoritesStore",
    "ThemePreference",
    "ArchiveSession",
]
