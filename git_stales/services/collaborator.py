"""The interface git-stales needs from a version-control backend."""

from datetime import datetime
from typing import List, Protocol, Sequence

from git_stales.models.branch import AheadBehind, BranchLine


class VersionControlCollaborator(Protocol):
    """Queries and deletions used by the enumerator, classifier and planner.

    GitOperations implements this against a real repository. Every method
    raises CollaboratorError on failure.
    """

    def list_local_branches(self) -> List[BranchLine]:
        ...

    def list_remote_branches(self) -> List[BranchLine]:
        ...

    def last_commit_timestamp(self, ref: str) -> datetime:
        ...

    def ahead_behind_counts(self, branch: str, trunk: str) -> AheadBehind:
        ...

    def ref_exists(self, name: str) -> bool:
        ...

    def delete_local_branches(self, names: Sequence[str]) -> None:
        ...

    def delete_remote_branches(self, remote: str, short_names: Sequence[str]) -> None:
        ...
