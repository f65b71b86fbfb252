"""Cross-checks between the ranking and aggregation engines."""

import pytest

from tagcorr.analysis import aggregate, iter_matches, rank
from tests.fakes import make_record

RECORDS = [
    make_record("Live concert", ["music", "live"], likes=30),
    make_record("Musical theatre", ["musical", "theatre"], likes=20),
    make_record("Speedrun", ["gaming", "gamingnews"], likes=10),
    make_record("Cooking show", ["food"], likes=5),
    make_record("Unwatched", ["music"], views=0, likes=7),
    make_record("Pop hits", ["pop"], likes=12),
]


@pytest.mark.parametrize(
    "queries",
    [
        ["music"],
        ["gaming"],
        ["music", "gaming"],
        ["pop", "popular"],
        ["nothing"],
        ["o"],
    ],
)
def test_same_contributing_records(queries):
    """Both engines draw on the same records for any selection."""
    ranked_titles = {e.title for e in rank(RECORDS, queries, limit=len(RECORDS) * 4)}
    matched_titles = {r.title for r, _ in iter_matches(RECORDS, queries)}

    assert ranked_titles == matched_titles

    averages = aggregate(RECORDS, queries)
    matched_queries = {q for _, q in iter_matches(RECORDS, queries)}
    assert {q for q, avg in averages.items() if avg is not None} == matched_queries


def test_ranking_multiplicity_matches_aggregation_samples():
    """Ranking entries equal the number of ratio samples aggregated."""
    queries = ["gaming", "music"]

    ranked = rank(RECORDS, queries, limit=100)
    samples = sum(1 for _ in iter_matches(RECORDS, queries))

    assert len(ranked) == samples == 5
