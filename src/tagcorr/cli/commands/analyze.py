"""Analysis commands for the tagcorr CLI.

Provides three commands over the same tag selection:
- `tagcorr rank`: heap-based top-N ranking
- `tagcorr aggregate`: hash-table per-tag averages
- `tagcorr compare`: benchmark of both
"""

from ...analysis.report import format_aggregation, format_benchmark, format_ranking
from ...core.config import Config
from ...core.exceptions import ConfigurationError
from ...core.types import BenchmarkFailure, TagSelection
from ...services import AnalysisService


def add_tag_arguments(parser) -> None:
    """Add the tag selection argument shared by analysis commands.

    Args:
        parser: Argument parser for the command.
    """
    parser.add_argument(
        "tags",
        help=(
            "Comma-separated tag substrings (e.g. music,gaming); spaces around "
            "each tag are ignored, matching is case-sensitive"
        ),
    )


def _selection(args) -> TagSelection:
    selection = TagSelection.parse(args.tags)
    if not selection:
        raise ConfigurationError("No tags selected")
    return selection


def _print_lines(lines: list[str]) -> None:
    print()
    for line in lines:
        print(line)


def handle_rank(args, config: Config) -> None:
    """Handle rank command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.

    Raises:
        ConfigurationError: If the limit is not positive.
    """
    selection = _selection(args)
    if args.limit is not None and args.limit < 1:
        raise ConfigurationError("limit must be >= 1")
    service = AnalysisService.from_config(config)
    entries = service.rank(selection, limit=args.limit)
    _print_lines(format_ranking(entries))


def handle_aggregate(args, config: Config) -> None:
    """Handle aggregate command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    selection = _selection(args)
    service = AnalysisService.from_config(config)
    _print_lines(format_aggregation(service.aggregate(selection)))


def handle_compare(args, config: Config) -> None:
    """Handle compare command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.

    Raises:
        ConfigurationError: If the benchmark could not run.
    """
    selection = _selection(args)
    service = AnalysisService.from_config(config)
    report = service.compare(selection, runs=args.runs)
    if isinstance(report, BenchmarkFailure):
        raise ConfigurationError(report.error)
    _print_lines(format_benchmark(report))
