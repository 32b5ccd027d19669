"""Core functionality for git-stales"""

from datetime import datetime
from typing import Callable, List, Optional, Union

from git_stales.config import Config
from git_stales.exceptions import TrunkNotFoundError
from git_stales.logging_config import get_logger
from git_stales.models.action import PlannedAction
from git_stales.models.branch import StaleBranchSet, Staleness
from git_stales.services.branch_enumeration_service import (
    BranchEnumerationService,
    compile_keep_patterns,
)
from git_stales.services.branch_status_service import BranchStatusService
from git_stales.services.collaborator import VersionControlCollaborator
from git_stales.services.deletion_service import DeletionService
from git_stales.services.display_service import DisplayService
from git_stales.services.git import GitOperations

logger = get_logger(__name__)


class StaleBranchFinder:
    """Finds stale branches and reports, prints or deletes them.

    The pipeline runs strictly in order: enumerate candidates, classify each
    one against trunk, then hand the stale ones to the deletion service.
    """

    def __init__(
        self,
        config: Union[Config, dict],
        git_service: Optional[VersionControlCollaborator] = None,
        repo_path: str = ".",
        display_service: Optional[DisplayService] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize the finder.

        Args:
            config: Config object or dict
            git_service: Collaborator to use; opens repo_path with git when omitted
            repo_path: Path to the repository, used only without git_service
            display_service: Where reports go; stdout by default
            clock: Current time source for age measured from now
        """
        if isinstance(config, dict):
            config = Config.from_dict(config)
        self.config = config

        # Bad keep patterns fail here, before git is touched
        compile_keep_patterns(config.protected_patterns)

        if git_service is None:
            git_service = GitOperations(repo_path)
        self.git_service = git_service

        self.enumeration_service = BranchEnumerationService(
            git_service, config.protected_patterns, config.trunk_branch
        )
        self.branch_status_service = BranchStatusService(
            git_service, config.age_reference, clock
        )
        self.deletion_service = DeletionService(git_service, display_service)

    def validate_trunk(self) -> None:
        if not self.git_service.ref_exists(self.config.trunk_branch):
            raise TrunkNotFoundError(self.config.trunk_branch)

    def find_stale_branches(self) -> StaleBranchSet:
        """Enumerate and classify branches, in collaborator order."""
        trunk = self.config.trunk_branch
        cutoff = self.config.age_cutoff_days

        candidates = self.enumeration_service.enumerate(self.config.branch_scope)
        stale_set = StaleBranchSet()
        for branch in candidates:
            if self.branch_status_service.classify(branch, trunk, cutoff) is Staleness.STALE:
                stale_set.add(branch)

        logger.info(
            f"Examined {len(candidates)} branches, {len(stale_set)} stale "
            f"(merged into {trunk}, at least {cutoff} days old)"
        )
        return stale_set

    def run(self) -> List[PlannedAction]:
        """Run the whole pipeline once.

        Returns:
            The deletion commands printed or executed (empty in report mode)
        """
        self.validate_trunk()
        stale_set = self.find_stale_branches()
        return self.deletion_service.plan(stale_set, self.config.mode)
