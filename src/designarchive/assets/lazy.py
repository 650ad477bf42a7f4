"""
Visibility-driven image loading.

An ImageSlot stands in for a rendered image: it shows a placeholder until
it becomes visible, at which point the loader fetches the real resource
exactly once. On failure the slot keeps a fixed placeholder and its label
reports the failure. Results that arrive after a slot was unmounted are
dropped.

Visibility comes from an ObservableVisibility implementation. ViewportObserver
is a polling implementation driven by explicit viewport updates.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Executor, Future
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

import requests

from designarchive.core.errors import AssetLoadError

logger = logging.getLogger(__name__)

PLACEHOLDER_IMAGE = (
    "data:image/svg+xml;utf8,"
    "<svg width='320' height='240' xmlns='http://www.w3.org/2000/svg'>"
    "<rect width='320' height='240' fill='%23F5F5F7'/>"
    "<circle cx='136' cy='120' r='24' fill='%23D2D2D7'/></svg>"
)
FAILED_LABEL = "failed to load"
REQUEST_TIMEOUT = 10

VisibilityCallback = Callable[["ImageSlot"], None]


@dataclass(eq=False)
class ImageSlot:
    """A mounted image placeholder for one record."""

    record_id: int
    src: str
    alt: str = ""
    top: float = 0.0
    height: float = 0.0
    displayed_src: str = PLACEHOLDER_IMAGE
    mounted: bool = True
    attempted: bool = False
    loaded: bool = False
    failed: bool = False
    data: bytes | None = field(default=None, repr=False)

    @property
    def bottom(self) -> float:
        return self.top + self.height


@runtime_checkable
class ObservableVisibility(Protocol):
    """Callback-on-enter-viewport capability."""

    def observe(self, target: ImageSlot, callback: VisibilityCallback) -> None:
        """Call ``callback(target)`` once the target is in the viewport.

        A target that is already visible is reported immediately.
        """
        ...

    def unobserve(self, target: ImageSlot) -> None:
        """Stop watching a target."""
        ...


class ViewportObserver:
    """Polling visibility: checks targets on observe and on every viewport move.

    A target is visible when it intersects the viewport extended by
    ``root_margin`` pixels above and below.
    """

    def __init__(self, viewport_height: float, root_margin: float = 100.0):
        self.viewport_top = 0.0
        self.viewport_height = viewport_height
        self.root_margin = root_margin
        self._targets: dict[int, tuple[ImageSlot, VisibilityCallback]] = {}

    def __len__(self) -> int:
        return len(self._targets)

    def observe(self, target: ImageSlot, callback: VisibilityCallback) -> None:
        self._targets[id(target)] = (target, callback)
        if self.is_visible(target):
            callback(target)

    def unobserve(self, target: ImageSlot) -> None:
        self._targets.pop(id(target), None)

    def is_visible(self, target: ImageSlot) -> bool:
        top = self.viewport_top - self.root_margin
        bottom = self.viewport_top + self.viewport_height + self.root_margin
        return target.bottom >= top and target.top <= bottom

    def scroll_to(self, viewport_top: float, viewport_height: float | None = None) -> int:
        """Move the viewport and notify targets that became visible.

        Returns:
            Number of callbacks fired
        """
        self.viewport_top = viewport_top
        if viewport_height is not None:
            self.viewport_height = viewport_height
        return self.check()

    def check(self) -> int:
        visible = [(t, cb) for t, cb in list(self._targets.values()) if self.is_visible(t)]
        for target, callback in visible:
            callback(target)
        return len(visible)


def fetch_image(url: str, session: requests.Session | None = None) -> bytes:
    """Fetch image bytes over HTTP.

    Raises:
        AssetLoadError: On transport failure or a non-success status
    """
    if session is None:
        with requests.Session() as http:
            return fetch_image(url, http)
    try:
        response = session.get(url, timeout=REQUEST_TIMEOUT, headers={"Accept": "image/*"})
    except requests.RequestException as e:
        raise AssetLoadError(f"Request failed: {e}", source=url) from e
    if not response.ok:
        raise AssetLoadError(f"Image request failed ({response.status_code})", source=url)
    return response.content


class LazyImageLoader:
    """Loads slot images when they become visible, once per mount."""

    def __init__(
        self,
        observer: ObservableVisibility,
        fetch: Callable[[str], bytes] | None = None,
        executor: Executor | None = None,
        session: requests.Session | None = None,
    ):
        """Initialize loader.

        Args:
            observer: Visibility source
            fetch: Returns image bytes for a URL, raising AssetLoadError on failure
            executor: Optional executor so many loads can be in flight at once
            session: requests session shared by every default image fetch
        """
        self.observer = observer
        self.session = session or requests.Session()
        self.fetch = fetch or self._fetch
        self.executor = executor
        self._lock = threading.Lock()

    def _fetch(self, url: str) -> bytes:
        return fetch_image(url, self.session)

    def register(self, slot: ImageSlot) -> None:
        """Watch a slot; it is loaded the first time it becomes visible."""
        if slot.attempted or not slot.mounted:
            return
        self.observer.observe(slot, self._on_visible)

    def register_all(self, slots: list[ImageSlot]) -> None:
        for slot in slots:
            self.register(slot)

    def unmount(self, slot: ImageSlot) -> None:
        """Detach a slot; an in-flight load for it will be discarded."""
        slot.mounted = False
        self.observer.unobserve(slot)

    def _on_visible(self, slot: ImageSlot) -> None:
        self.observer.unobserve(slot)
        self.load(slot)

    def load(self, slot: ImageSlot) -> Future | None:
        """Start loading a slot's image (no-op if already attempted)."""
        with self._lock:
            if slot.attempted or not slot.mounted:
                return None
            slot.attempted = True

        if self.executor is None:
            self._complete(slot)
            return None
        return self.executor.submit(self._complete, slot)

    def _complete(self, slot: ImageSlot) -> None:
        try:
            data = self.fetch(slot.src)
        except (AssetLoadError, requests.RequestException) as e:
            logger.debug("Image failed for %s: %s", slot.src, e)
            with self._lock:
                if not slot.mounted:
                    return
                slot.displayed_src = PLACEHOLDER_IMAGE
                slot.alt = FAILED_LABEL
                slot.failed = True
            return

        with self._lock:
            if not slot.mounted:
                logger.debug("Discarding image for unmounted slot %s", slot.record_id)
                return
            slot.data = data
            slot.displayed_src = slot.src
            slot.loaded = True
