"""Display formatting for analysis results.

Kept apart from the engines so benchmarks never time formatting.
"""

from typing import Mapping, Sequence

from ..core.types import BenchmarkReport, RankedEntry, Verdict


def format_ratio(ratio: float) -> str:
    """Render a ratio with six significant digits."""
    return format(ratio, "g")


def format_ranking(entries: Sequence[RankedEntry]) -> list[str]:
    """Format ranked entries as ``"N. title (ratio: R)"`` lines."""
    lines = [f"Top {len(entries)} videos by like/view ratio for selected tags:"]
    for entry in entries:
        lines.append(f"{entry.rank}. {entry.title} (ratio: {format_ratio(entry.ratio)})")
    if not entries:
        lines.append("(no data)")
    return lines


def format_aggregation(averages: Mapping[str, float | None]) -> list[str]:
    """Format per-tag averages, marking tags without matches."""
    lines = ["Average like/view ratio for each selected tag:"]
    for tag, average in averages.items():
        if average is None:
            lines.append(f"Tag '{tag}' not found.")
        else:
            lines.append(f" - {tag}: {format_ratio(average)}")
    return lines


_VERDICT_TEXT = {
    Verdict.RANKING_FASTER: "Heap (ranking) was faster on average.",
    Verdict.AGGREGATION_FASTER: "Hash table (aggregation) was faster on average.",
    Verdict.TIE: "Both structures took the same average time.",
}


def format_benchmark(report: BenchmarkReport) -> list[str]:
    """Format per-run timings, averages and the verdict."""
    lines = ["Benchmark: heap ranking vs hash table aggregation"]
    for i, run in enumerate(report.runs, start=1):
        lines.append(
            f"Run {i}: heap={run.ranking_ms} ms, hash={run.aggregation_ms} ms"
        )
    lines.append(
        f"Average: heap={report.avg_ranking_ms:.2f} ms, "
        f"hash={report.avg_aggregation_ms:.2f} ms"
    )
    lines.append(f"Verdict: {report.verdict.value} - {_VERDICT_TEXT[report.verdict]}")
    return lines
