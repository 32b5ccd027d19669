"""Planned deletion commands"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple


class ActionKind(Enum):
    DELETE_LOCAL = "delete-local"
    DELETE_REMOTE = "delete-remote"


def local_delete_argv(names) -> List[str]:
    """Command that deletes local branches in one batch."""
    return ["git", "branch", "-d", *names]


def remote_delete_argv(remote: str, short_names) -> List[str]:
    """Command that deletes branches from one remote."""
    return ["git", "push", "--delete", remote, *short_names]


@dataclass(frozen=True)
class PlannedAction:
    """One deletion command covering a batch of branches.

    Local actions carry plain branch names; remote actions carry the remote
    and the branch names without the remote prefix.
    """
    kind: ActionKind
    branches: Tuple[str, ...]
    remote: Optional[str] = None

    def __post_init__(self):
        if not self.branches:
            raise ValueError("a planned action needs at least one branch")
        if self.kind is ActionKind.DELETE_REMOTE and not self.remote:
            raise ValueError("a remote deletion needs a remote name")
        if self.kind is ActionKind.DELETE_LOCAL and self.remote is not None:
            raise ValueError("a local deletion cannot name a remote")

    @property
    def argv(self) -> List[str]:
        if self.kind is ActionKind.DELETE_LOCAL:
            return local_delete_argv(self.branches)
        return remote_delete_argv(self.remote, self.branches)

    @property
    def command(self) -> str:
        return " ".join(self.argv)
