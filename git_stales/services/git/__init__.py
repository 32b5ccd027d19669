"""Git-related services for git-stales."""

from .operations import GitOperations
from .parsing import parse_ahead_behind, parse_branch_listing

__all__ = [
    "GitOperations",
    "parse_ahead_behind",
    "parse_branch_listing",
]
