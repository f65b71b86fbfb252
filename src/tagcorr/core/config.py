"""Configuration management for tagcorr."""

import os
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from .exceptions import ConfigurationError


@dataclass
class DatasetConfig:
    """Dataset discovery and CSV parsing configuration."""

    data_dir: Path = field(default_factory=lambda: Path("data"))
    glob_patterns: list[str] = field(default_factory=lambda: ["**/*.csv"])
    encoding: str = "utf-8"
    tag_separator: str = "|"
    title_column: str = "title"
    tags_column: str = "tags"
    views_column: str = "views"
    likes_column: str = "likes"
    # Combined totals below this are logged as a warning
    min_records_warning: int = 100_000


@dataclass
class AnalysisConfig:
    """Ranking and benchmark configuration."""

    top_n: int = 10
    benchmark_runs: int = 3


def _apply_table(target: Any, table: dict[str, Any], section: str) -> None:
    """Copy known keys of a TOML table onto a config dataclass."""
    known = {f.name for f in fields(target)}
    for key, value in table.items():
        if key not in known:
            raise ConfigurationError(f"Unknown config key: {section}.{key}")
        if key == "data_dir":
            value = Path(value)
        setattr(target, key, value)


def _env_int(name: str) -> int | None:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


@dataclass
class Config:
    """Main application configuration."""

    dataset: DatasetConfig = field(default_factory=DatasetConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls()._apply_env()

    @classmethod
    def from_file(cls, path: Path | str) -> "Config":
        """Load configuration from a TOML file, then apply env overrides.

        Args:
            path: Path to the TOML file.

        Raises:
            ConfigurationError: If the file cannot be read or parsed.
        """
        path = Path(path)
        try:
            with path.open("rb") as f:
                data = tomllib.load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML in {path}: {e}") from e

        config = cls()
        for key, value in data.items():
            if key == "dataset" and isinstance(value, dict):
                _apply_table(config.dataset, value, key)
            elif key == "analysis" and isinstance(value, dict):
                _apply_table(config.analysis, value, key)
            elif key == "log_level":
                config.log_level = str(value)
            else:
                raise ConfigurationError(f"Unknown config key: {key}")

        return config._apply_env()

    @classmethod
    def from_env_or_file(cls, path: Path | str | None = None) -> "Config":
        """Load from an explicit file, the TAGCORR_CONFIG file, or env only."""
        if path is None:
            path = os.environ.get("TAGCORR_CONFIG") or None
        if path is None:
            return cls.from_env()
        return cls.from_file(path)

    def _apply_env(self) -> "Config":
        if data_dir := os.environ.get("TAGCORR_DATA_DIR"):
            self.dataset.data_dir = Path(data_dir)

        if (top_n := _env_int("TAGCORR_TOP_N")) is not None:
            self.analysis.top_n = top_n
        if (runs := _env_int("TAGCORR_BENCHMARK_RUNS")) is not None:
            self.analysis.benchmark_runs = runs

        if level := os.environ.get("TAGCORR_LOG_LEVEL"):
            self.log_level = level

        return self

    def validate(self) -> "Config":
        """Check value ranges.

        Raises:
            ConfigurationError: If a value is out of range.
        """
        if self.analysis.top_n < 1:
            raise ConfigurationError("top_n must be >= 1")
        if self.analysis.benchmark_runs < 1:
            raise ConfigurationError("benchmark_runs must be >= 1")
        if not self.dataset.tag_separator:
            raise ConfigurationError("tag_separator must not be empty")
        return self
