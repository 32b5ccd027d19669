"""Service for deciding whether a branch is stale"""

from datetime import datetime, timezone
from typing import Callable, Optional

from git_stales.config import AgeReference
from git_stales.logging_config import get_logger
from git_stales.models.branch import BranchRef, Staleness
from git_stales.services.collaborator import VersionControlCollaborator

logger = get_logger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BranchStatusService:
    """Classifies branches as stale (merged into trunk and old enough) or not."""

    def __init__(
        self,
        git_service: VersionControlCollaborator,
        age_reference: AgeReference = AgeReference.TRUNK,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize the service.

        Args:
            git_service: Collaborator used for ahead/behind and date queries
            age_reference: Measure ages from trunk's last commit or from now
            clock: Returns the current time; only used with AgeReference.NOW
        """
        self.git_service = git_service
        self.age_reference = age_reference
        self.clock = clock or _utc_now

    def get_branch_age(self, branch_name: str, trunk: str) -> int:
        """Age of a branch in whole days, floored."""
        branch_time = self.git_service.last_commit_timestamp(branch_name)
        if self.age_reference is AgeReference.NOW:
            reference_time = self.clock()
        else:
            reference_time = self.git_service.last_commit_timestamp(trunk)
        return (reference_time - branch_time).days

    def classify(self, branch: BranchRef, trunk: str, age_cutoff_days: int) -> Staleness:
        """Get the staleness of a branch relative to trunk."""
        name = branch.full_name
        counts = self.git_service.ahead_behind_counts(name, trunk)

        # Unmerged branches are never stale, however old
        if counts.ahead > 0:
            logger.debug(f"{name} has {counts.ahead} unmerged commits. Skipping.")
            return Staleness.NOT_STALE

        age_days = self.get_branch_age(name, trunk)
        if age_days < age_cutoff_days:
            logger.debug(f"{name} is {age_days} days old. Skipping.")
            return Staleness.NOT_STALE

        logger.info(
            f"{name} is {age_days} days old and {counts.behind} commits behind {trunk}."
        )
        return Staleness.STALE

    def is_stale(self, branch: BranchRef, trunk: str, age_cutoff_days: int) -> bool:
        return self.classify(branch, trunk, age_cutoff_days) is Staleness.STALE
