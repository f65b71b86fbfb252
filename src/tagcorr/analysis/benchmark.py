"""Head-to-head timing of the ranking and aggregation engines.

Each run calls :func:`rank` and then :func:`aggregate` over the same input,
timing only the computation. Nothing is formatted or printed inside a timed
interval, and no result is reused between runs.
"""

from __future__ import annotations

import time
from typing import Callable, Sequence

from loguru import logger

from ..core.types import (
    BenchmarkFailure,
    BenchmarkReport,
    BenchmarkRun,
    Record,
    Verdict,
)
from .aggregation import aggregate
from .ranking import DEFAULT_LIMIT, rank

DEFAULT_RUNS = 3

Clock = Callable[[], int]


def _timed(clock: Clock, fn: Callable[[], object]) -> int:
    """Return elapsed clock ticks for a single call of ``fn``."""
    start = clock()
    fn()
    return clock() - start


def decide_verdict(avg_ranking_ms: float, avg_aggregation_ms: float) -> Verdict:
    """Pick the engine with the lower average time."""
    if avg_ranking_ms < avg_aggregation_ms:
        return Verdict.RANKING_FASTER
    if avg_aggregation_ms < avg_ranking_ms:
        return Verdict.AGGREGATION_FASTER
    return Verdict.TIE


def compare(
    records: Sequence[Record],
    queries: Sequence[str],
    runs: int = DEFAULT_RUNS,
    *,
    limit: int = DEFAULT_LIMIT,
    clock: Clock = time.perf_counter_ns,
) -> BenchmarkReport | BenchmarkFailure:
    """Benchmark both engines over identical input.

    Args:
        records: Records to analyze (never mutated).
        queries: Tag substrings to match.
        runs: Number of sequential repetitions.
        limit: Ranking size passed to :func:`rank`.
        clock: Monotonic nanosecond clock.

    Returns:
        BenchmarkReport with per-run and averaged timings, or a
        BenchmarkFailure if ``runs`` is not positive.
    """
    if runs < 1:
        return BenchmarkFailure(error="invalid configuration: runs must be >= 1")

    results: list[BenchmarkRun] = []
    for i in range(runs):
        ranking_ns = _timed(clock, lambda: rank(records, queries, limit))
        aggregation_ns = _timed(clock, lambda: aggregate(records, queries))
        run = BenchmarkRun(ranking_ns=ranking_ns, aggregation_ns=aggregation_ns)
        results.append(run)
        logger.debug(
            f"Benchmark run {i + 1}/{runs}: ranking={run.ranking_ms}ms, "
            f"aggregation={run.aggregation_ms}ms"
        )

    avg_ranking_ms = sum(r.ranking_ms for r in results) / runs
    avg_aggregation_ms = sum(r.aggregation_ms for r in results) / runs

    return BenchmarkReport(
        runs=results,
        avg_ranking_ms=avg_ranking_ms,
        avg_aggregation_ms=avg_aggregation_ms,
        verdict=decide_verdict(avg_ranking_ms, avg_aggregation_ms),
    )
