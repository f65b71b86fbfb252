"""Heap-based ranking of matching records by like/view ratio."""

import heapq
from typing import Sequence

from loguru import logger

from ..core.types import RankedEntry, Record
from .matching import iter_matches

DEFAULT_LIMIT = 10


def rank(
    records: Sequence[Record],
    queries: Sequence[str],
    limit: int = DEFAULT_LIMIT,
) -> list[RankedEntry]:
    """Return the highest-ratio matches, best first.

    Every (tag, query) match pushes one entry onto the heap, so a record
    matched through several tags appears several times. Entries with equal
    ratios come out in ascending title order.

    Args:
        records: Records to scan.
        queries: Tag substrings to match.
        limit: Maximum number of entries to return.

    Returns:
        Up to ``limit`` RankedEntry objects in descending ratio order.
    """
    # heapq is a min-heap; negate the ratio for max-first extraction
    heap: list[tuple[float, str]] = []
    for record, _query in iter_matches(records, queries):
        heapq.heappush(heap, (-record.ratio, record.title))

    logger.debug("Ranking heap built: entries={}, limit={}", len(heap), limit)

    ranked = []
    while heap and len(ranked) < limit:
        neg_ratio, title = heapq.heappop(heap)
        ranked.append(RankedEntry(rank=len(ranked) + 1, title=title, ratio=-neg_ratio))

    return ranked
