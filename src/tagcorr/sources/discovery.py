"""Dataset file discovery.

Finds CSV files under a data directory using glob patterns with
include/exclude semantics (``!`` prefix excludes).
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from loguru import logger

from ..core.exceptions import DatasetError

DEFAULT_PATTERNS = ["**/*.csv"]


class MultiGlobMatcher:
    """Match files against multiple glob patterns.

    A file matches if it satisfies ANY include pattern AND does NOT match
    ANY exclude pattern.

    Example:
        matcher = MultiGlobMatcher(["**/*.csv", "!**/archive/**"])
        matcher.matches("USvideos.csv")          # True
        matcher.matches("archive/old.csv")       # False (excluded)
    """

    def __init__(self, patterns: list[str]) -> None:
        """Initialize with pattern list.

        Args:
            patterns: List of glob patterns. Use ! prefix for exclusions.

        Raises:
            ValueError: If no include patterns are provided.
        """
        self.includes = [p for p in patterns if not p.startswith("!")]
        self.excludes = [p[1:] for p in patterns if p.startswith("!")]

        if not self.includes:
            raise ValueError(
                "At least one include pattern required (patterns without ! prefix)"
            )

    def matches(self, path: str) -> bool:
        """Check if a relative path matches the pattern set.

        Args:
            path: Relative file path to check.

        Returns:
            True if path matches any include and no excludes.
        """
        normalized = path.replace("\\", "/")

        if not any(self._glob_match(normalized, inc) for inc in self.includes):
            return False

        return not any(self._glob_match(normalized, exc) for exc in self.excludes)

    def _glob_match(self, path: str, pattern: str) -> bool:
        p = Path(path)

        if not pattern.startswith("**/"):
            return p.match(pattern)

        # "**/*.csv" should match both "a.csv" and "sub/a.csv"
        suffix_pattern = pattern[3:]
        if suffix_pattern.startswith("**/") and self._glob_match(path, suffix_pattern):
            return True
        if p.match(suffix_pattern) or p.match(pattern):
            return True

        # **/X/** matches any path with a directory component X
        if suffix_pattern.endswith("/**"):
            return suffix_pattern[:-3] in path.split("/")

        return False

    def list_matching_files(self, base_path: Path) -> Iterator[Path]:
        """Yield files under base_path matching the pattern set, deduplicated."""
        seen: set[Path] = set()

        for pattern in self.includes:
            logger.debug(f"Globbing pattern: {pattern}")
            for file_path in base_path.glob(pattern):
                if not file_path.is_file() or file_path in seen:
                    continue

                rel_path = file_path.relative_to(base_path).as_posix()
                if any(self._glob_match(rel_path, exc) for exc in self.excludes):
                    logger.debug(f"Excluded by pattern: {rel_path}")
                    continue

                seen.add(file_path)
                yield file_path


def parse_glob_patterns(patterns: list[str] | str | None) -> list[str]:
    """Normalize glob pattern input to a list, defaulting to ``**/*.csv``."""
    if isinstance(patterns, str):
        return [patterns]
    if not patterns:
        return list(DEFAULT_PATTERNS)
    return list(patterns)


def discover_datasets(
    base_path: Path,
    patterns: list[str] | str | None = None,
) -> list[Path]:
    """List dataset files under base_path in sorted order.

    Raises:
        DatasetError: If base_path is not an existing directory.
    """
    if not base_path.is_dir():
        raise DatasetError(f"Data directory not found: {base_path}")

    matcher = MultiGlobMatcher(parse_glob_patterns(patterns))
    return sorted(matcher.list_matching_files(base_path))
