"""Command implementations for the tagcorr CLI."""

from .analyze import add_tag_arguments, handle_aggregate, handle_compare, handle_rank
from .shell import handle_shell
from .status import handle_status

__all__ = [
    "add_tag_arguments",
    "handle_rank",
    "handle_aggregate",
    "handle_compare",
    "handle_shell",
    "handle_status",
]
