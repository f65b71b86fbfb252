"""Status command for the tagcorr CLI."""

from ...core.config import Config
from ...core.types import DatasetSummary
from ...sources import load_all_datasets


def handle_status(args, config: Config) -> None:
    """Handle status command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    summary = load_all_datasets(config.dataset.data_dir, config.dataset)
    _print_status(summary, config)


def _print_status(summary: DatasetSummary, config: Config) -> None:
    print("tagcorr Dataset Status")
    print("=" * 50)
    print(f"Data directory: {config.dataset.data_dir}")
    print(f"Files: {len(summary.files)}")
    print(f"Records: {summary.total_records}")
    print(f"Skipped rows: {summary.total_skipped}")
    print()

    for result in summary.files:
        print(f"  • {result.path.name}: {len(result.records)} records ({result.skipped} skipped)")

    if summary.total_records < config.dataset.min_records_warning:
        print()
        print(
            f"Warning: combined dataset has fewer than "
            f"{config.dataset.min_records_warning} records."
        )
