"""Tag-matching analysis engines.

Two strategies compute views of the same match set:

- :func:`rank`: binary heap, top N records by like/view ratio.
- :func:`aggregate`: hash map of lists, mean ratio per selected tag.

:func:`compare` times both over identical input.
"""

from .aggregation import aggregate
from .benchmark import DEFAULT_RUNS, compare, decide_verdict
from .matching import iter_matches, matches
from .ranking import DEFAULT_LIMIT, rank

__all__ = [
    "matches",
    "iter_matches",
    "rank",
    "aggregate",
    "compare",
    "decide_verdict",
    "DEFAULT_LIMIT",
    "DEFAULT_RUNS",
]
