"""
Incremental reveal over an ordered result list.

The cursor only widens a prefix window; it never re-queries or re-sorts, so
records already revealed keep their positions when more are loaded.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from typing import TypeVar

from designarchive.core.timing import BurstGate

T = TypeVar("T")


class PaginationCursor:
    """Page-based window over a filtered list of known length."""

    def __init__(self, page_size: int = 12, filtered_count: int = 0):
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.page_size = page_size
        self.current_page = 1
        self.filtered_count = filtered_count

    @property
    def visible_count(self) -> int:
        return min(self.current_page * self.page_size, self.filtered_count)

    @property
    def has_more(self) -> bool:
        return self.filtered_count > self.current_page * self.page_size

    def reset(self, filtered_count: int | None = None) -> None:
        """Return to the first page, optionally with a new result count."""
        if filtered_count is not None:
            self.filtered_count = filtered_count
        self.current_page = 1

    def update_count(self, filtered_count: int) -> None:
        self.filtered_count = filtered_count

    def advance(self) -> bool:
        """Reveal the next page.

        Returns:
            True if the window grew, False if there was nothing more
        """
        if not self.has_more:
            return False
        self.current_page += 1
        return True

    def visible_slice(self, ordered: Sequence[T]) -> list[T]:
        """The revealed prefix of an ordered list."""
        return list(ordered[: self.visible_count])

    def page_slice(self, ordered: Sequence[T]) -> list[T]:
        """Only the records revealed by the most recent page."""
        start = (self.current_page - 1) * self.page_size
        return list(ordered[start : self.visible_count])


class ScrollProximityTrigger:
    """Load more when the viewport nears the bottom of the page.

    Fires at most once per burst of scroll events, and never while a load is
    in flight or when there is nothing left to reveal.
    """

    def __init__(
        self,
        cursor: PaginationCursor,
        load_more: Callable[[], object],
        is_loading: Callable[[], bool] = lambda: False,
        threshold: int = 500,
        quiet_period: float = 0.1,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize trigger.

        Args:
            cursor: Cursor consulted for ``has_more``
            load_more: Action that advances the cursor
            is_loading: Reports whether a load is currently in flight
            threshold: Distance from the page bottom (px) that qualifies
            quiet_period: Seconds without scroll events that end a burst
            clock: Monotonic time source
        """
        self.cursor = cursor
        self.load_more = load_more
        self.is_loading = is_loading
        self.threshold = threshold
        self._gate = BurstGate(quiet_period, clock=clock)

    def near_bottom(self, scroll_top: float, viewport_height: float, page_height: float) -> bool:
        return page_height - (scroll_top + viewport_height) < self.threshold

    def on_scroll(self, scroll_top: float, viewport_height: float, page_height: float) -> bool:
        """Handle one scroll event.

        Returns:
            True if this event triggered a load
        """
        self._gate.event()
        if not self.cursor.has_more or self.is_loading():
            return False
        if not self.near_bottom(scroll_top, viewport_height, page_height):
            return False
        if not self._gate.try_acquire():
            return False
        self.load_more()
        return True
