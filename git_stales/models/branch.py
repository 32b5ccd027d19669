"""Branch model and related enums"""
from dataclasses import dataclass, field
from enum import Enum
from itertools import groupby
from typing import Dict, Iterator, List, Optional


class Locality(Enum):
    """Where a branch lives."""
    LOCAL = "local"
    REMOTE = "remote"


class Staleness(Enum):
    """Outcome of classifying a branch."""
    STALE = "stale"
    NOT_STALE = "not-stale"


@dataclass(frozen=True)
class BranchLine:
    """One entry of a branch listing, already parsed.

    is_checked_out covers the current branch (``*``) and branches checked
    out in another worktree (``+``). is_symbolic marks ``origin/HEAD -> ...``
    style aliases.
    """
    name: str
    is_checked_out: bool = False
    is_symbolic: bool = False


@dataclass(frozen=True)
class BranchRef:
    """A single local or remote branch."""
    full_name: str
    locality: Locality = Locality.LOCAL

    def __post_init__(self):
        if self.locality is Locality.REMOTE and "/" not in self.full_name:
            raise ValueError(f"remote branch name must contain '/': {self.full_name!r}")

    @classmethod
    def local(cls, name: str) -> "BranchRef":
        return cls(name, Locality.LOCAL)

    @classmethod
    def remote(cls, name: str) -> "BranchRef":
        return cls(name, Locality.REMOTE)

    @property
    def is_remote(self) -> bool:
        return self.locality is Locality.REMOTE

    @property
    def remote_name(self) -> Optional[str]:
        """Remote part of ``<remote>/<branch>``; None for local branches."""
        if not self.is_remote:
            return None
        return self.full_name.split("/", 1)[0]

    @property
    def short_name(self) -> str:
        """Branch part of ``<remote>/<branch>``; the full name for local branches.

        Remote names never contain ``/``, so the first slash is the separator.
        """
        if not self.is_remote:
            return self.full_name
        return self.full_name.split("/", 1)[1]

    def __str__(self) -> str:
        return self.full_name


@dataclass(frozen=True)
class AheadBehind:
    """Commits unique to a branch (ahead) and unique to trunk (behind)."""
    ahead: int
    behind: int

    def __post_init__(self):
        if self.ahead < 0 or self.behind < 0:
            raise ValueError(f"ahead/behind counts cannot be negative: {self.ahead}, {self.behind}")

    @property
    def is_merged(self) -> bool:
        return self.ahead == 0


@dataclass
class StaleBranchSet:
    """Stale branches found during one run, in discovery order."""
    local: List[BranchRef] = field(default_factory=list)
    remote: List[BranchRef] = field(default_factory=list)

    def add(self, branch: BranchRef) -> None:
        if branch.is_remote:
            self.remote.append(branch)
        else:
            self.local.append(branch)

    def remote_groups(self) -> Dict[str, List[str]]:
        """Short names of the stale remote branches, keyed by remote.

        Remotes are ordered by name; within a remote, discovery order is kept.
        """
        ordered = sorted(self.remote, key=lambda ref: ref.remote_name)
        return {
            remote: [ref.short_name for ref in refs]
            for remote, refs in groupby(ordered, key=lambda ref: ref.remote_name)
        }

    def __iter__(self) -> Iterator[BranchRef]:
        yield from self.local
        yield from self.remote

    def __len__(self) -> int:
        return len(self.local) + len(self.remote)

    def __bool__(self) -> bool:
        return len(self) > 0
