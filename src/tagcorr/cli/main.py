"""CLI entry point for tagcorr."""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from loguru import logger

from .. import __version__
from ..core.config import Config
from . import commands


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="tagcorr",
        description="YouTube tag correlation analyzer - like/view ratios by tag",
    )
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-c", "--config", help="TOML config file (default: $TAGCORR_CONFIG)")
    parser.add_argument("-d", "--data-dir", help="Directory holding dataset CSV files")
    parser.add_argument("--log-level", help="Log level (default: WARNING)")

    subparsers = parser.add_subparsers(dest="command", required=False)

    subparsers.add_parser("status", help="Show loaded dataset summary")

    rank_parser = subparsers.add_parser("rank", help="Top videos by ratio (heap)")
    commands.add_tag_arguments(rank_parser)
    rank_parser.add_argument(
        "-l",
        "--limit",
        type=int,
        help="Maximum results to return (default: 10)",
    )

    agg_parser = subparsers.add_parser("aggregate", help="Average ratio per tag (hash table)")
    commands.add_tag_arguments(agg_parser)

    compare_parser = subparsers.add_parser("compare", help="Benchmark heap vs hash table")
    commands.add_tag_arguments(compare_parser)
    compare_parser.add_argument(
        "-r",
        "--runs",
        type=int,
        help="Number of benchmark runs (default: 3)",
    )

    subparsers.add_parser("shell", help="Interactive menu")

    return parser


def load_config(args) -> Config:
    """Build configuration from file/env, then command-line overrides."""
    config = Config.from_env_or_file(args.config)
    if args.data_dir:
        config.dataset.data_dir = Path(args.data_dir)
    if args.log_level:
        config.log_level = args.log_level.upper()
    return config.validate()


def configure_logging(level: str) -> None:
    """Send log output to stderr at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level)


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
        configure_logging(config.log_level)

        if args.command == "status":
            commands.handle_status(args, config)
        elif args.command == "rank":
            commands.handle_rank(args, config)
        elif args.command == "aggregate":
            commands.handle_aggregate(args, config)
        elif args.command == "compare":
            commands.handle_compare(args, config)
        elif args.command == "shell":
            commands.handle_shell(args, config)
        else:
            parser.print_help()

        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
