"""CSV ingestion of video records.

Rows are read with pandas (quote-aware, header row consumed) and converted
to :class:`Record` values. Rows whose view or like counts are not
non-negative finite numbers are skipped and counted rather than raising.
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd
from loguru import logger

from ..core.config import DatasetConfig
from ..core.exceptions import DatasetError, DatasetFormatError
from ..core.types import DatasetSummary, LoadResult, Record
from .discovery import discover_datasets


def split_tags(raw: object, separator: str = "|") -> tuple[str, ...]:
    """Split a raw tags field into individual tags.

    Empty pieces are dropped and surrounding double quotes removed, so
    ``'"music"|"pop"'`` becomes ``("music", "pop")``.
    """
    if not isinstance(raw, str) or not raw:
        return ()
    tags = (piece.strip('"') for piece in raw.split(separator))
    return tuple(tag for tag in tags if tag)


def load_dataset(path: Path, config: DatasetConfig | None = None) -> LoadResult:
    """Load one CSV file into records.

    Args:
        path: CSV file to read.
        config: Column names, separator and encoding to use.

    Returns:
        LoadResult with the valid records and the number of skipped rows.

    Raises:
        DatasetError: If the file cannot be read.
        DatasetFormatError: If a required column is missing.
    """
    config = config or DatasetConfig()
    columns = [
        config.title_column,
        config.tags_column,
        config.views_column,
        config.likes_column,
    ]

    try:
        frame = pd.read_csv(
            path,
            dtype=str,
            keep_default_na=False,
            encoding=config.encoding,
            encoding_errors="replace",
            on_bad_lines="skip",
        )
    except (OSError, pd.errors.ParserError) as e:
        raise DatasetError(f"Cannot read dataset {path}: {e}") from e
    except pd.errors.EmptyDataError:
        logger.warning(f"Dataset is empty: {path}")
        return LoadResult(path=path, records=[])

    missing = [c for c in columns if c not in frame.columns]
    if missing:
        raise DatasetFormatError(str(path), missing)

    views = pd.to_numeric(frame[config.views_column], errors="coerce")
    likes = pd.to_numeric(frame[config.likes_column], errors="coerce")
    # between() is false for NaN and for inf, which 1e400 also parses to
    valid = views.between(0, float("inf"), inclusive="left") & likes.between(
        0, float("inf"), inclusive="left"
    )
    skipped = int((~valid).sum())

    records = [
        Record(
            title=title,
            tags=split_tags(tags, config.tag_separator),
            views=float(v),
            likes=float(lk),
        )
        for title, tags, v, lk in zip(
            frame.loc[valid, config.title_column],
            frame.loc[valid, config.tags_column],
            views[valid],
            likes[valid],
        )
    ]

    if skipped:
        logger.warning(f"Skipped {skipped} rows with invalid counts in {path.name}")
    logger.debug(f"Loaded {len(records)} records from {path}")
    return LoadResult(path=path, records=records, skipped=skipped)


def load_all_datasets(
    base_path: Path | None = None,
    config: DatasetConfig | None = None,
) -> DatasetSummary:
    """Load and concatenate every dataset file under a directory.

    Args:
        base_path: Directory to scan (defaults to ``config.data_dir``).
        config: Dataset configuration.

    Returns:
        DatasetSummary with per-file results and the combined records.

    Raises:
        DatasetError: If the directory is missing or holds no dataset files.
    """
    config = config or DatasetConfig()
    base_path = Path(base_path or config.data_dir)

    paths = discover_datasets(base_path, config.glob_patterns)
    if not paths:
        raise DatasetError(f"No dataset files found in {base_path}")

    files: list[LoadResult] = []
    records: list[Record] = []
    for path in paths:
        logger.info(f"Loading: {path.name}")
        result = load_dataset(path, config)
        files.append(result)
        records.extend(result.records)

    summary = DatasetSummary(files=files, records=records)
    logger.info(
        f"Total records loaded from {len(files)} datasets: {summary.total_records}"
    )
    if summary.total_records < config.min_records_warning:
        logger.warning(
            f"Combined dataset has only {summary.total_records} records "
            f"(expected at least {config.min_records_warning})"
        )
    return summary
