"""Test doubles and builders for tagcorr tests."""

from tagcorr.core.types import Record

CSV_HEADER = (
    "video_id,trending_date,title,channel_title,category_id,publish_time,tags,"
    "views,likes,dislikes,comment_count,thumbnail_link,comments_disabled,"
    "ratings_disabled,video_error_or_removed,description"
)


def make_record(
    title: str,
    tags: list[str],
    views: float = 100.0,
    likes: float = 10.0,
) -> Record:
    """Helper to create Record objects for testing."""
    return Record(title=title, tags=tuple(tags), views=views, likes=likes)


def csv_row(
    title: str,
    tags: str,
    views: str,
    likes: str,
    video_id: str = "vid",
) -> str:
    """Build one trending-videos CSV row with the given fields."""
    return (
        f"{video_id},17.14.11,{title},Channel,10,2017-11-13T17:13:01.000Z,{tags},"
        f"{views},{likes},0,0,https://i.ytimg.com/vi/x/default.jpg,False,False,False,desc"
    )


class FakeClock:
    """Nanosecond clock that advances by scripted durations.

    Each timed call reads the clock twice; the n-th timed call lasts
    ``durations_ns[n]``.
    """

    def __init__(self, durations_ns: list[int]):
        self._ticks: list[int] = []
        now = 0
        for duration in durations_ns:
            self._ticks.extend([now, now + duration])
            now += duration
        self.calls = 0

    def __call__(self) -> int:
        tick = self._ticks[self.calls]
        self.calls += 1
        return tick


__all__ = ["CSV_HEADER", "make_record", "csv_row", "FakeClock"]
