"""
Browsing session state and transitions.

ArchiveSession is the explicit state struct for one browsing session. It
owns the filter state, the favorites-only flag, the computed result list
and the pagination cursor, and it applies the transition rules:

- editing search, category, decade, region or sort recomputes and resets
- toggling the favorites view clears search (facets are kept), recomputes
  and resets
- reset-all restores default filters, leaves the favorites view, recomputes
  and resets
- removing one active-filter tag clears only that field

Front ends translate their input events into these calls and render from
``visible``; nothing here does I/O except favorites persistence.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from designarchive.assets.lazy import ImageSlot, LazyImageLoader
from designarchive.catalog.corpus import Corpus
from designarchive.catalog.favorites import FavoritesStore
from designarchive.catalog.filters import FilterState, SortMode
from designarchive.catalog.models import DesignRecord
from designarchive.catalog.pagination import PaginationCursor, ScrollProximityTrigger
from designarchive.catalog.query import apply_query
from designarchive.core.timing import Debouncer

logger = logging.getLogger(__name__)


class ArchiveSession:
    """State and transitions for browsing one corpus."""

    def __init__(
        self,
        corpus: Corpus,
        favorites: FavoritesStore,
        page_size: int = 12,
        loader: LazyImageLoader | None = None,
        columns: int = 3,
        card_height: float = 360.0,
    ):
        """Initialize session and compute the first view.

        Args:
            corpus: Loaded corpus
            favorites: Favorites store (already loaded)
            page_size: Records revealed per page
            loader: Optional lazy image loader for revealed records
            columns: Cards per grid row, used to position image slots
            card_height: Height of one grid row in pixels
        """
        self.corpus = corpus
        self.favorites = favorites
        self.loader = loader
        self.columns = max(1, columns)
        self.card_height = card_height

        self.filters = FilterState()
        self.show_favorites = False
        self.results: list[DesignRecord] = []
        self.cursor = PaginationCursor(page_size)
        self.is_loading = False
        self.slots: list[ImageSlot] = []

        self.recompute()

    # --- derived view ---

    @property
    def visible(self) -> list[DesignRecord]:
        return self.cursor.visible_slice(self.results)

    @property
    def has_more(self) -> bool:
        return self.cursor.has_more

    @property
    def no_results(self) -> bool:
        return not self.results

    @property
    def stats(self) -> dict[str, int]:
        return {
            "total": len(self.corpus),
            "filtered": len(self.results),
            "favorites": len(self.favorites),
        }

    @property
    def active_filters(self) -> list[tuple[str, str, str]]:
        """Removable filter tags as (field, label, display value)."""
        return self.filters.active_items()

    def find(self, record_id: int) -> DesignRecord | None:
        return self.corpus.find(record_id)

    def related(self, record: DesignRecord) -> list[DesignRecord]:
        return self.corpus.related(record)

    # --- recomputation ---

    def recompute(self) -> list[DesignRecord]:
        """Re-run the query and return to the first page."""
        self.results = apply_query(
            self.corpus,
            self.filters,
            self.favorites.ids,
            self.show_favorites,
        )
        self.cursor.reset(len(self.results))
        self._remount()
        logger.debug(
            "Recomputed view: %d of %d records", len(self.results), len(self.corpus)
        )
        return self.visible

    def _remount(self) -> None:
        if self.loader is not None:
            for slot in self.slots:
                self.loader.unmount(slot)
        self.slots = []
        self._mount(self.visible, 0)

    def _mount(self, records: list[DesignRecord], start_index: int) -> list[ImageSlot]:
        new_slots = []
        for offset, record in enumerate(records):
            row = (start_index + offset) // self.columns
            new_slots.append(
                ImageSlot(
                    record_id=record.id,
                    src=record.image,
                    alt=record.title,
                    top=row * self.card_height,
                    height=self.card_height,
                )
            )
        self.slots.extend(new_slots)
        if self.loader is not None:
            self.loader.register_all(new_slots)
        return new_slots

    # --- filter transitions ---

    def set_search(self, text: str | None) -> None:
        self.filters.set("search", text)
        self.recompute()

    def clear_search(self) -> None:
        self.set_search("")

    def set_filter(self, name: str, value: str | SortMode | None) -> None:
        """Set category, decade, region, sort or search and recompute."""
        if name == "search":
            self.set_search(value)  # type: ignore[arg-type]
            return
        self.filters.set(name, value)
        self.recompute()

    def apply_filters(self, **values: Any) -> None:
        """Set several fields at once with a single recompute."""
        for name, value in values.items():
            if value is not None:
                self.filters.set(name, value)
        self.recompute()

    def remove_filter(self, name: str) -> None:
        """Remove one active-filter tag."""
        if name == "search":
            self.clear_search()
            return
        self.filters.clear(name)
        self.recompute()

    def toggle_favorites_view(self) -> bool:
        """Enter or leave the favorites-only view.

        Returns:
            True if the favorites view is now active
        """
        self.show_favorites = not self.show_favorites
        self.filters.set("search", "")
        self.recompute()
        return self.show_favorites

    def reset_all(self) -> None:
        self.filters.reset()
        self.show_favorites = False
        self.recompute()

    # --- favorites ---

    def toggle_favorite(self, record_id: int) -> bool:
        """Toggle a favorite; refreshes the view when showing favorites only."""
        member = self.favorites.toggle(record_id)
        if self.show_favorites:
            self.recompute()
        return member

    def is_favorite(self, record_id: int) -> bool:
        return self.favorites.is_favorite(record_id)

    # --- incremental reveal ---

    def load_more(self) -> list[DesignRecord]:
        """Reveal the next page without recomputing.

        Returns:
            The newly revealed records (empty if nothing more or already loading)
        """
        if self.is_loading or not self.cursor.has_more:
            return []
        self.is_loading = True
        try:
            start = self.cursor.visible_count
            self.cursor.advance()
            added = self.results[start : self.cursor.visible_count]
            self._mount(added, start)
        finally:
            self.is_loading = False
        return added

    def scroll_trigger(
        self,
        threshold: int = 500,
        quiet_period: float = 0.1,
        clock: Callable[[], float] | None = None,
    ) -> ScrollProximityTrigger:
        """Build a scroll-proximity trigger bound to this session."""
        kwargs: dict[str, Any] = {}
        if clock is not None:
            kwargs["clock"] = clock
        return ScrollProximityTrigger(
            self.cursor,
            self.load_more,
            is_loading=lambda: self.is_loading,
            threshold=threshold,
            quiet_period=quiet_period,
            **kwargs,
        )

    def search_debouncer(
        self,
        delay: float = 0.3,
        clock: Callable[[], float] | None = None,
    ) -> Debouncer:
        """Build a debounced search-input handler bound to this session.

        The owner polls the returned debouncer from its own loop, so the
        search transition runs on the same thread as every other transition.
        """
        if clock is None:
            return Debouncer(delay, self.set_search)
        return Debouncer(delay, self.set_search, clock=clock)
