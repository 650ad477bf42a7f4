"""Visibility-driven image loading."""

from designarchive.assets.lazy import (
    FAILED_LABEL,
    PLACEHOLDER_IMAGE,
    ImageSlot,
    LazyImageLoader,
    ObservableVisibility,
    ViewportObserver,
    fetch_image,
)

__all__ = [
    "ImageSlot",
    "LazyImageLoader",
    "ObservableVisibility",
    "ViewportObserver",
    "fetch_image",
    "PLACEHOLDER_IMAGE",
    "FAILED_LABEL",
]
