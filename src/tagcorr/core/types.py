"""Type definitions for tagcorr."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class Record:
    """One ingested video item.

    ``ratio`` is derived from ``likes`` and ``views`` once, at construction.
    """

    title: str
    tags: tuple[str, ...]
    views: float
    likes: float
    ratio: float = field(init=False)

    def __post_init__(self) -> None:
        ratio = self.likes / self.views if self.views > 0 else 0.0
        object.__setattr__(self, "ratio", ratio)


@dataclass(frozen=True)
class TagSelection:
    """Ordered tag substrings chosen for analysis.

    Duplicates are kept; each entry is matched independently.
    """

    queries: tuple[str, ...] = ()

    @classmethod
    def parse(cls, text: str, separator: str = ",") -> "TagSelection":
        """Build a selection from a delimited string such as ``"music,gaming"``."""
        pieces = (piece.strip() for piece in text.split(separator))
        return cls(tuple(piece for piece in pieces if piece))

    def __bool__(self) -> bool:
        return bool(self.queries)

    def __len__(self) -> int:
        return len(self.queries)


@dataclass(frozen=True)
class RankedEntry:
    """One row of a ranking result."""

    rank: int  # 1-based
    title: str
    ratio: float


class Verdict(Enum):
    """Outcome of a benchmark comparison."""

    RANKING_FASTER = "ranking-faster"
    AGGREGATION_FASTER = "aggregation-faster"
    TIE = "tie"


@dataclass(frozen=True)
class BenchmarkRun:
    """Elapsed time of one ranking + aggregation pass."""

    ranking_ns: int
    aggregation_ns: int

    @property
    def ranking_ms(self) -> int:
        return self.ranking_ns // 1_000_000

    @property
    def aggregation_ms(self) -> int:
        return self.aggregation_ns // 1_000_000


@dataclass
class BenchmarkReport:
    """Collected timings for a head-to-head comparison.

    Attributes:
        runs: Per-run timings, in execution order.
        avg_ranking_ms: Mean of the per-run ranking milliseconds.
        avg_aggregation_ms: Mean of the per-run aggregation milliseconds.
        verdict: Which engine had the lower average.
    """

    runs: list[BenchmarkRun]
    avg_ranking_ms: float
    avg_aggregation_ms: float
    verdict: Verdict


@dataclass(frozen=True)
class BenchmarkFailure:
    """Error result when a benchmark cannot be run."""

    error: str


@dataclass
class LoadResult:
    """Outcome of loading a single dataset file."""

    path: Path
    records: list[Record]
    skipped: int = 0


@dataclass
class DatasetSummary:
    """Combined outcome of loading every dataset file in a directory."""

    files: list[LoadResult]
    records: list[Record]

    @property
    def total_records(self) -> int:
        return len(self.records)

    @property
    def total_skipped(self) -> int:
        return sum(f.skipped for f in self.files)
