"""
Corpus loading and lookup.

The corpus source is a JSON document shaped either as a bare array of
records or as ``{"designs": [...]}``, read from a local path or fetched
over http(s). Any failure falls back to the built-in demonstration dataset.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import requests

from designarchive.catalog.fallback import DEFAULT_DESIGNS
from designarchive.catalog.models import DesignRecord
from designarchive.core.errors import DataLoadError

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 10


class Corpus:
    """Immutable ordered collection of design records."""

    def __init__(self, records: list[DesignRecord] | tuple[DesignRecord, ...], fallback: bool = False):
        self._records: tuple[DesignRecord, ...] = tuple(records)
        self.fallback = fallback

    def __iter__(self) -> Iterator[DesignRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index: int) -> DesignRecord:
        return self._records[index]

    @property
    def records(self) -> tuple[DesignRecord, ...]:
        return self._records

    def find(self, record_id: int) -> DesignRecord | None:
        """Get a record by id (first match wins on duplicates)."""
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def related(self, record: DesignRecord) -> list[DesignRecord]:
        """Resolve related ids, silently skipping dangling references."""
        found = []
        for related_id in record.related:
            related = self.find(related_id)
            if related is not None:
                found.append(related)
        return found

    def list_categories(self) -> list[str]:
        """Get all unique categories."""
        return sorted({r.category for r in self._records if r.category})

    def list_regions(self) -> list[str]:
        """Get all unique regions."""
        return sorted({r.region for r in self._records if r.region})

    def list_decades(self) -> list[str]:
        """Get the decade starts present in the corpus, as text."""
        decades = set()
        for record in self._records:
            year = record.parsed_year
            if year is not None:
                decades.add(year - year % 10)
        return [str(d) for d in sorted(decades)]


def parse_corpus(data: Any) -> list[DesignRecord]:
    """Turn a decoded corpus document into records.

    Args:
        data: Either a list of record mappings or a mapping with a ``designs`` list

    Returns:
        List of DesignRecord with ids and images backfilled

    Raises:
        DataLoadError: If the document does not have a supported shape
    """
    if isinstance(data, dict):
        data = data.get("designs")
    if not isinstance(data, list):
        raise DataLoadError("Corpus must be a list of designs or {'designs': [...]}")

    records = []
    for position, raw in enumerate(data, start=1):
        if not isinstance(raw, dict):
            raise DataLoadError(f"Design #{position} is not an object")
        records.append(DesignRecord.from_dict(raw, position))
    return records


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def load_corpus(source: str | Path, session: requests.Session | None = None) -> Corpus:
    """Load a corpus from a path or URL.

    Args:
        source: Local file path or http(s) URL
        session: Optional requests session for URL sources

    Returns:
        Loaded Corpus

    Raises:
        DataLoadError: On any fetch or parse failure
    """
    source_str = str(source)

    if _is_url(source_str):
        http = session or requests.Session()
        try:
            response = http.get(source_str, timeout=REQUEST_TIMEOUT)
        except requests.RequestException as e:
            raise DataLoadError(f"Request failed: {e}", source=source_str) from e
        if not response.ok:
            raise DataLoadError(
                f"Data load failed ({response.status_code})", source=source_str
            )
        try:
            data = response.json()
        except ValueError as e:
            raise DataLoadError(f"Invalid JSON: {e}", source=source_str) from e
    else:
        path = Path(source_str)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise DataLoadError(f"Cannot read corpus: {e}", source=source_str) from e
        except json.JSONDecodeError as e:
            raise DataLoadError(f"Invalid JSON: {e}", source=source_str) from e

    return Corpus(parse_corpus(data))


def fallback_corpus() -> Corpus:
    """Build the built-in demonstration corpus."""
    return Corpus(parse_corpus(DEFAULT_DESIGNS), fallback=True)


def load_corpus_or_fallback(
    source: str | Path | None,
    session: requests.Session | None = None,
) -> Corpus:
    """Load a corpus, substituting the built-in dataset on failure.

    Never raises for source problems; the failure is logged as a warning.
    """
    if not source:
        return fallback_corpus()
    try:
        return load_corpus(source, session=session)
    except DataLoadError as e:
        logger.warning("Using built-in data: %s (%s)", e.message, e.source)
        return fallback_corpus()
