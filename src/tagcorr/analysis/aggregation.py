"""Hash-map aggregation of like/view ratios per selected tag."""

from collections import defaultdict
from typing import Sequence

from loguru import logger

from ..core.types import Record
from .matching import iter_matches


def aggregate(
    records: Sequence[Record],
    queries: Sequence[str],
) -> dict[str, float | None]:
    """Average the ratios collected under each query string.

    Ratios are grouped by the query that matched, not by the tag it matched
    against. A query with no matches maps to None; 0.0 means it matched only
    zero-ratio records.

    Args:
        records: Records to scan.
        queries: Tag substrings to match.

    Returns:
        Mapping of query to mean ratio (or None), in query order.
    """
    ratios: defaultdict[str, list[float]] = defaultdict(list)
    for record, query in iter_matches(records, queries):
        ratios[query].append(record.ratio)

    averages: dict[str, float | None] = {}
    for query in queries:
        samples = ratios.get(query)
        if not samples:
            averages[query] = None
            continue
        averages[query] = sum(samples) / len(samples)

    logger.opt(lazy=True).debug(
        "Aggregated {} ratios across {}/{} matched tags",
        lambda: sum(len(v) for v in ratios.values()),
        lambda: len(ratios),
        lambda: len(averages),
    )
    return averages
