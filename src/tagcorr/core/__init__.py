"""Core types, configuration and exceptions for tagcorr."""

from .config import AnalysisConfig, Config, DatasetConfig
from .exceptions import (
    ConfigurationError,
    DatasetError,
    DatasetFormatError,
    TagCorrError,
)
from .types import (
    BenchmarkFailure,
    BenchmarkReport,
    BenchmarkRun,
    DatasetSummary,
    LoadResult,
    RankedEntry,
    Record,
    TagSelection,
    Verdict,
)

__all__ = [
    "Config",
    "DatasetConfig",
    "AnalysisConfig",
    "TagCorrError",
    "ConfigurationError",
    "DatasetError",
    "DatasetFormatError",
    "Record",
    "TagSelection",
    "RankedEntry",
    "Verdict",
    "BenchmarkRun",
    "BenchmarkReport",
    "BenchmarkFailure",
    "LoadResult",
    "DatasetSummary",
]
