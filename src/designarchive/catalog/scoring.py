"""
Relevance scoring.

A record's score for a search term is the sum of fixed weights for each
field that contains the term (case-insensitive substring). Scores are not
capped.

Designer and author form a single field: a hit in either one, or both,
adds DESIGNER_WEIGHT once. Author is not scored separately.
"""

from __future__ import annotations

from designarchive.catalog.models import DesignRecord

TITLE_WEIGHT = 10
DESIGNER_WEIGHT = 8
CATEGORY_WEIGHT = 4
DESCRIPTION_WEIGHT = 3
STYLE_WEIGHT = 2


def relevance_score(record: DesignRecord, term: str) -> int:
    """Score one record against a search term.

    Args:
        record: Record to score
        term: Search term (case-folded here, so raw input is fine)

    Returns:
        Non-negative weighted hit count; 0 for an empty term
    """
    term = term.lower()
    if not term:
        return 0

    score = 0
    if term in record.title.lower():
        score += TITLE_WEIGHT
    # designer and author count as one field
    if term in record.designer.lower() or term in record.author.lower():
        score += DESIGNER_WEIGHT
    if term in record.category.lower():
        score += CATEGORY_WEIGHT
    if term in record.description.lower():
        score += DESCRIPTION_WEIGHT
    if any(term in s.lower() for s in record.style):
        score += STYLE_WEIGHT
    return score
