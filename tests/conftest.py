"""Shared test fixtures for design-archive."""

import json

import pytest

from designarchive.catalog.corpus import Corpus, parse_corpus
from designarchive.catalog.favorites import FavoritesStore
from designarchive.core.storage import KeyValueStore


SAMPLE_DESIGNS = [
    {
        "id": 1,
        "title": "Braun T3 Pocket Radio",
        "designer": "Dieter Rams",
        "author": "Dieter Rams",
        "year": "1958",
        "category": "Industrial",
        "region": "Europe",
        "description": "A pocket radio that defined minimalism.",
        "style": ["Minimalism", "Functionalism"],
        "related": [4, 99],
    },
    {
        "id": 2,
        "title": "Eames Lounge Chair",
        "designer": "Charles and Ray Eames",
        "author": "Herman Miller",
        "year": "1956",
        "category": "Furniture",
        "region": "North America",
        "description": "Molded plywood and leather lounge chair.",
        "style": ["Modernism", "Organic design"],
    },
    {
        "id": 3,
        "title": "Barcelona Chair",
        "designer": "Ludwig Mies van der Rohe",
        "author": "Knoll",
        "year": "1929",
        "category": "Furniture",
        "region": "Europe",
        "description": "Designed for the German Pavilion.",
        "style": ["Modernism"],
    },
    {
        "id": 4,
        "title": "Leica M3",
        "designer": "Leitz",
        "year": "1954",
        "category": "Industrial",
        "region": "Europe",
        "description": "A precise rangefinder camera.",
        "style": ["Precision engineering"],
    },
    {
        "id": 5,
        "title": "Unknown Poster",
        "designer": "Anonymous",
        "year": "unknown",
        "category": "Graphic",
        "region": "Asia",
        "description": "Undated poster, possibly a chair advertisement.",
        "style": [],
    },
]


@pytest.fixture
def sample_designs():
    """Raw design dicts (fresh copy per test)."""
    return json.loads(json.dumps(SAMPLE_DESIGNS))


@pytest.fixture
def corpus(sample_designs):
    """Corpus built from the sample designs."""
    return Corpus(parse_corpus(sample_designs))


@pytest.fixture
def big_corpus():
    """Corpus of 20 generic records, ids 1..20, years 1900..1995."""
    raw = [
        {
            "title": f"Design {i:02d}",
            "designer": f"Designer {i}",
            "year": str(1900 + (i - 1) * 5),
            "category": "Product",
            "region": "Europe",
        }
        for i in range(1, 21)
    ]
    return Corpus(parse_corpus(raw))


@pytest.fixture
def storage(tmp_path):
    """Keyed storage in a temp directory."""
    return KeyValueStore(tmp_path / "storage")


@pytest.fixture
def favorites_store(storage):
    """Loaded, empty favorites store."""
    store = FavoritesStore(storage)
    store.load()
    return store


@pytest.fixture
def data_dir(tmp_path, monkeypatch, sample_designs):
    """Isolated data directory with a corpus file and no global config."""
    monkeypatch.setenv("DESIGN_ARCHIVE_HOME", str(tmp_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    (tmp_path / "data.json").write_text(
        json.dumps({"designs": sample_designs}), encoding="utf-8"
    )
    return tmp_path
