"""Tests for core value types."""

import dataclasses

import pytest

from tagcorr.core.types import DatasetSummary, LoadResult, Record, TagSelection


class TestRecord:
    """Tests for Record."""

    def test_ratio_is_likes_over_views(self):
        record = Record(title="A", tags=("x",), views=200.0, likes=50.0)

        assert record.ratio == pytest.approx(0.25)

    def test_zero_views_gives_zero_ratio(self):
        """Zero views never divide; the ratio is 0 whatever the likes."""
        record = Record(title="A", tags=(), views=0.0, likes=1234.0)

        assert record.ratio == 0.0

    def test_ratio_not_accepted_as_argument(self):
        """The ratio is derived, never passed in."""
        with pytest.raises(TypeError):
            Record(title="A", tags=(), views=1.0, likes=1.0, ratio=5.0)

    def test_frozen(self):
        record = Record(title="A", tags=("x",), views=10.0, likes=1.0)

        with pytest.raises(dataclasses.FrozenInstanceError):
            record.likes = 9.0

    def test_tag_order_preserved(self):
        record = Record(title="A", tags=("z", "a", "m"), views=1.0, likes=0.0)

        assert record.tags == ("z", "a", "m")


class TestTagSelection:
    """Tests for TagSelection."""

    def test_parse_comma_separated(self):
        assert TagSelection.parse("music,gaming").queries == ("music", "gaming")

    def test_parse_strips_whitespace_and_drops_empty(self):
        selection = TagSelection.parse(" music , ,gaming,, ")

        assert selection.queries == ("music", "gaming")

    def test_parse_keeps_duplicates(self):
        assert TagSelection.parse("music,music").queries == ("music", "music")

    def test_empty_selection_is_falsy(self):
        assert not TagSelection()
        assert not TagSelection.parse(" , ")
        assert len(TagSelection.parse("a,b")) == 2


class TestDatasetSummary:
    """Tests for DatasetSummary totals."""

    def test_totals(self, tmp_path):
        record = Record(title="A", tags=(), views=1.0, likes=1.0)
        summary = DatasetSummary(
            files=[
                LoadResult(path=tmp_path / "a.csv", records=[record], skipped=2),
                LoadResult(path=tmp_path / "b.csv", records=[], skipped=1),
            ],
            records=[record],
        )

        assert summary.total_records == 1
        assert summary.total_skipped == 3
