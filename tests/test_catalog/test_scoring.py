"""Tests for designarchive.catalog.scoring module."""

from designarchive.catalog.models import DesignRecord
from designarchive.catalog.scoring import relevance_score


def _record(**kwargs):
    return DesignRecord.from_dict({"title": "", **kwargs}, position=1)


class TestRelevanceScore:
    """Tests for relevance_score()."""

    def test_title_hit(self):
        assert relevance_score(_record(title="Pocket Radio"), "radio") == 10

    def test_designer_and_author_count_once(self):
        record = _record(title="T3", designer="Dieter Rams", author="Dieter Rams")
        assert relevance_score(record, "rams") == 8

    def test_author_alone_counts_as_designer(self):
        assert relevance_score(_record(title="X", author="Olivetti"), "olivetti") == 8

    def test_fields_accumulate(self):
        record = _record(
            title="Radio",
            category="Radio equipment",
            description="A radio.",
            style=["Radio age"],
        )
        assert relevance_score(record, "radio") == 10 + 4 + 3 + 2

    def test_case_insensitive(self):
        assert relevance_score(_record(title="Leica M3"), "LEICA") == 10

    def test_no_match_and_empty_term(self):
        record = _record(title="Leica M3")
        assert relevance_score(record, "chair") == 0
        assert relevance_score(record, "") == 0

    def test_year_does_not_score(self):
        assert relevance_score(_record(title="X", year="1958"), "1958") == 0
