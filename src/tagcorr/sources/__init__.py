"""Dataset sources for tagcorr."""

from .csv_loader import load_all_datasets, load_dataset, split_tags
from .discovery import MultiGlobMatcher, discover_datasets, parse_glob_patterns

__all__ = [
    "load_dataset",
    "load_all_datasets",
    "split_tags",
    "MultiGlobMatcher",
    "discover_datasets",
    "parse_glob_patterns",
]
