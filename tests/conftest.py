"""Pytest configuration and fixtures."""

import os
from pathlib import Path

import pytest
from loguru import logger

from tagcorr.core.types import Record
from tests.fakes import CSV_HEADER, csv_row, make_record


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep TAGCORR_* variables from the outer environment out of tests."""
    for name in list(os.environ):
        if name.startswith("TAGCORR_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks the CLI attaches to captured streams."""
    yield
    logger.remove()


@pytest.fixture
def sample_records() -> list[Record]:
    """Provide a small record set with known ratios."""
    return [
        make_record("Live concert", ["music", "live"], views=100, likes=30),
        make_record("Musical theatre", ["musical", "theatre"], views=100, likes=20),
        make_record("Speedrun", ["gaming", "gamingnews"], views=100, likes=10),
        make_record("Cooking show", ["food"], views=100, likes=5),
        make_record("Unwatched", ["music"], views=0, likes=7),
    ]


@pytest.fixture
def write_csv(tmp_path: Path):
    """Return a function writing CSV rows under the temp directory."""

    def _write(name: str, rows: list[str], header: str = CSV_HEADER) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join([header, *rows]) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def data_dir(tmp_path: Path, write_csv) -> Path:
    """Provide a data directory holding two small datasets."""
    write_csv(
        "USvideos.csv",
        [
            csv_row('"Song, live"', '"""music""|""live"""', "1000", "50", "us1"),
            csv_row("Game review", "gaming|review", "200", "20", "us2"),
            csv_row("Broken counts", "music", "n/a", "5", "us3"),
        ],
    )
    write_csv(
        "GBvideos.csv",
        [
            csv_row("Musical night", "musical|night", "100", "25", "gb1"),
            csv_row("No views yet", "music", "0", "3", "gb2"),
        ],
    )
    return tmp_path
