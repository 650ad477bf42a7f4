"""Tests for designarchive.catalog.commands CLI module."""

import json

import pytest
import yaml
from click.testing import CliRunner

from designarchive.cli import main


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


def _browse_json(runner, *args):
    result = runner.invoke(main, ["browse", "--json", *args])
    assert result.exit_code == 0, result.output
    return json.loads(result.output)


# ---------------------------------------------------------------------------
# browse
# ---------------------------------------------------------------------------


def test_browse_json_default(runner, data_dir):
    """Default browse returns every design in corpus order."""
    data = _browse_json(runner)
    assert data["total"] == 5
    assert data["filtered"] == 5
    assert data["has_more"] is False
    assert [d["id"] for d in data["designs"]] == [1, 2, 3, 4, 5]


def test_browse_search_relevance(runner, data_dir):
    data = _browse_json(runner, "-q", "chair")
    assert [d["id"] for d in data["designs"]] == [2, 3, 5]


def test_browse_decade_and_sort(runner, data_dir):
    data = _browse_json(runner, "--decade", "1950", "--sort", "year-asc")
    assert [d["id"] for d in data["designs"]] == [4, 2, 1]


def test_browse_category_region(runner, data_dir):
    data = _browse_json(runner, "--category", "Furniture", "--region", "Europe")
    assert [d["id"] for d in data["designs"]] == [3]


def test_browse_pages(runner, data_dir):
    """Pages reveal page_size records at a time."""
    (data_dir / "config.yaml").write_text(yaml.dump({"page_size": 2}))

    first = _browse_json(runner)
    assert len(first["designs"]) == 2
    assert first["has_more"] is True

    all_pages = _browse_json(runner, "--pages", "3")
    assert len(all_pages["designs"]) == 5
    assert all_pages["has_more"] is False


def test_missing_source_uses_fallback(runner, data_dir):
    """An unreadable corpus falls back to the built-in designs."""
    (data_dir / "config.yaml").write_text(yaml.dump({"data_source": "nope.json"}))
    result = runner.invoke(main, ["stats"])
    assert result.exit_code == 0
    assert "Using built-in demonstration data" in result.output


def test_browse_no_results(runner, data_dir):
    result = runner.invoke(main, ["browse", "-q", "zeppelin"])
    assert result.exit_code == 0
    assert "No designs found matching criteria" in result.output


def test_browse_table(runner, data_dir):
    result = runner.invoke(main, ["browse", "--region", "Asia"])
    assert result.exit_code == 0
    assert "Region:" in result.output
    assert "All results shown" in result.output


def test_browse_invalid_sort(runner, data_dir):
    result = runner.invoke(main, ["browse", "--sort", "popularity"])
    assert result.exit_code != 0


# ---------------------------------------------------------------------------
# show
# ---------------------------------------------------------------------------


def test_show_design(runner, data_dir):
    result = runner.invoke(main, ["show", "1"])
    assert result.exit_code == 0
    assert "Braun T3 Pocket Radio" in result.output
    assert "Leica M3 (#4)" in result.output


def test_show_missing(runner, data_dir):
    result = runner.invoke(main, ["show", "999"])
    assert "Design not found: 999" in result.output


# ---------------------------------------------------------------------------
# favorites
# ---------------------------------------------------------------------------


def test_favorite_toggle_persists(runner, data_dir):
    """Favorites survive across invocations."""
    result = runner.invoke(main, ["favorite", "2"])
    assert "Added to favorites" in result.output

    listed = runner.invoke(main, ["favorites", "--json"])
    assert [d["id"] for d in json.loads(listed.output)] == [2]

    data = _browse_json(runner, "--favorites")
    assert [d["id"] for d in data["designs"]] == [2]

    result = runner.invoke(main, ["favorite", "2"])
    assert "Removed from favorites" in result.output


def test_favorite_unknown_id_is_refused(runner, data_dir):
    """Ids missing from the corpus are never stored."""
    result = runner.invoke(main, ["favorite", "999"])

    assert result.exit_code == 0
    assert "Design not found: 999" in result.output
    assert not (data_dir / "storage" / "designArchiveFavorites.json").exists()


def test_favorites_empty(runner, data_dir):
    result = runner.invoke(main, ["favorites"])
    assert "No favorites yet" in result.output


def test_corrupted_favorites_recovered(runner, data_dir):
    storage = data_dir / "storage"
    storage.mkdir()
    (storage / "designArchiveFavorites.json").write_text("{oops")

    result = runner.invoke(main, ["favorites"])

    assert result.exit_code == 0
    assert "No favorites yet" in result.output


# ---------------------------------------------------------------------------
# facets / stats / theme
# ---------------------------------------------------------------------------


def test_facets_json(runner, data_dir):
    result = runner.invoke(main, ["facets", "--json"])
    data = json.loads(result.output)
    assert data["categories"] == ["Furniture", "Graphic", "Industrial"]
    assert data["decades"] == ["1920", "1950"]
    assert data["regions"] == ["Asia", "Europe", "North America"]


def test_stats(runner, data_dir):
    result = runner.invoke(main, ["stats"])
    assert result.exit_code == 0
    assert "Designs" in result.output
    assert "Favorites" in result.output


def test_theme(runner, data_dir):
    assert "Theme: light" in runner.invoke(main, ["theme"]).output
    assert "Theme: dark" in runner.invoke(main, ["theme", "dark"]).output
    assert "Theme: dark" in runner.invoke(main, ["theme"]).output
    assert "Theme: light" in runner.invoke(main, ["theme", "toggle"]).output
