"""Substring matching between record tags and selected queries."""

from typing import Iterable, Iterator, Sequence

from ..core.types import Record


def matches(tag: str, query: str) -> bool:
    """Return True if ``query`` occurs anywhere inside ``tag``.

    Matching is case-sensitive with no normalization, so ``"music"`` matches
    ``"musical"``. The empty query matches every tag.
    """
    return query in tag


def iter_matches(
    records: Iterable[Record],
    queries: Sequence[str],
) -> Iterator[tuple[Record, str]]:
    """Yield ``(record, query)`` once per matching (tag, query) pair.

    A record with two tags that both contain the same query is yielded
    twice for that query.
    """
    for record in records:
        for tag in record.tags:
            for query in queries:
                if matches(tag, query):
                    yield record, query
