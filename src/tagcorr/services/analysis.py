"""Analysis service binding a loaded record set to the engines."""

from __future__ import annotations

from typing import Sequence

from loguru import logger

from ..analysis import aggregate, compare, rank
from ..core.config import AnalysisConfig, Config
from ..core.types import (
    BenchmarkFailure,
    BenchmarkReport,
    DatasetSummary,
    RankedEntry,
    Record,
    TagSelection,
)
from ..sources import load_all_datasets


class AnalysisService:
    """Run tag analyses over a fixed, in-memory record set.

    The service holds no selection state: every call takes the
    TagSelection to analyze.

    Example:

        service = AnalysisService.from_config(Config.from_env())
        selection = TagSelection.parse("music,gaming")
        for entry in service.rank(selection):
            print(entry.rank, entry.title, entry.ratio)
    """

    def __init__(
        self,
        records: Sequence[Record],
        config: AnalysisConfig | None = None,
        summary: DatasetSummary | None = None,
    ):
        """Initialize AnalysisService.

        Args:
            records: Records to analyze. Stored as an immutable tuple.
            config: Ranking and benchmark settings.
            summary: Load summary the records came from, if any.
        """
        self._records = tuple(records)
        self._config = config or AnalysisConfig()
        self.summary = summary

    @classmethod
    def from_config(cls, config: Config) -> "AnalysisService":
        """Load the configured data directory and build a service over it."""
        summary = load_all_datasets(config.dataset.data_dir, config.dataset)
        return cls(summary.records, config.analysis, summary=summary)

    @property
    def records(self) -> tuple[Record, ...]:
        return self._records

    def rank(self, selection: TagSelection, limit: int | None = None) -> list[RankedEntry]:
        """Top records by ratio for the selection."""
        if limit is None:
            limit = self._config.top_n
        logger.debug(f"Ranking {len(self._records)} records for {selection.queries}")
        return rank(self._records, selection.queries, limit)

    def aggregate(self, selection: TagSelection) -> dict[str, float | None]:
        """Mean ratio per selected tag."""
        logger.debug(f"Aggregating {len(self._records)} records for {selection.queries}")
        return aggregate(self._records, selection.queries)

    def compare(
        self,
        selection: TagSelection,
        runs: int | None = None,
    ) -> BenchmarkReport | BenchmarkFailure:
        """Benchmark ranking against aggregation for the selection."""
        if runs is None:
            runs = self._config.benchmark_runs
        result = compare(
            self._records,
            selection.queries,
            runs,
            limit=self._config.top_n,
        )
        if isinstance(result, BenchmarkFailure):
            logger.warning(f"Benchmark not run: {result.error}")
        else:
            logger.info(
                f"Benchmark finished: verdict={result.verdict.value}, "
                f"heap={result.avg_ranking_ms:.2f}ms, hash={result.avg_aggregation_ms:.2f}ms"
            )
        return result
