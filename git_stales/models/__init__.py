"""Data models for git-stales."""

from .branch import AheadBehind, BranchLine, BranchRef, Locality, StaleBranchSet, Staleness
from .action import ActionKind, PlannedAction, local_delete_argv, remote_delete_argv

__all__ = [
    "AheadBehind",
    "BranchLine",
    "BranchRef",
    "Locality",
    "StaleBranchSet",
    "Staleness",
    "ActionKind",
    "PlannedAction",
    "local_delete_argv",
    "remote_delete_argv",
]
