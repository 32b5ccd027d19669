"""Service for listing the branches that are candidates for staleness checks"""

import re
from typing import Iterable, List, Optional, Pattern

from git_stales.config import BranchScope
from git_stales.exceptions import PatternCompileError
from git_stales.logging_config import get_logger
from git_stales.models.branch import BranchRef
from git_stales.services.collaborator import VersionControlCollaborator

logger = get_logger(__name__)


def compile_keep_patterns(patterns: Iterable[str]) -> List[Pattern]:
    """Compile keep patterns, failing on the first invalid one."""
    compiled = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            raise PatternCompileError(pattern, str(e))
    return compiled


class BranchEnumerationService:
    """Lists local and remote branches, minus the ones that must be kept."""

    def __init__(
        self,
        git_service: VersionControlCollaborator,
        keep_patterns: Iterable[str],
        trunk: Optional[str] = None,
    ):
        # Compiled up front so a bad pattern fails before git is touched
        self.keep_patterns = compile_keep_patterns(keep_patterns)
        self.git_service = git_service
        self.trunk = trunk

    def is_kept(self, branch_name: str) -> bool:
        """Check if a branch name matches any keep pattern."""
        return any(pattern.search(branch_name) for pattern in self.keep_patterns)

    def local_branches(self) -> List[BranchRef]:
        branches = []
        for line in self.git_service.list_local_branches():
            # e.g. alias -> master
            if line.is_symbolic:
                logger.debug(f"{line.name} is a symbolic reference. Skipping.")
                continue
            if line.is_checked_out:
                logger.debug(f"{line.name} is checked out. Skipping.")
                continue
            if line.name == self.trunk:
                logger.debug(f"{line.name} is the trunk. Skipping.")
                continue
            if self.is_kept(line.name):
                logger.debug(f"{line.name} matches a keep pattern. Skipping.")
                continue
            branches.append(BranchRef.local(line.name))
        return branches

    def remote_branches(self) -> List[BranchRef]:
        branches = []
        for line in self.git_service.list_remote_branches():
            # e.g. origin/HEAD -> origin/master
            if line.is_symbolic:
                logger.debug(f"{line.name} is a symbolic reference. Skipping.")
                continue
            if "/" not in line.name:
                logger.warning(f"Ignoring remote branch without a remote prefix: {line.name}")
                continue
            branch = BranchRef.remote(line.name)
            if branch.full_name == self.trunk:
                logger.debug(f"{line.name} is the trunk. Skipping.")
                continue
            if self.is_kept(branch.short_name):
                logger.debug(f"{line.name} matches a keep pattern. Skipping.")
                continue
            branches.append(branch)
        return branches

    def enumerate(self, scope: BranchScope) -> List[BranchRef]:
        """List candidate branches for the given scope, local ones first."""
        branches = []
        if scope.includes_local:
            branches.extend(self.local_branches())
        if scope.includes_remote:
            branches.extend(self.remote_branches())
        logger.debug(f"Found {len(branches)} candidate branches ({scope.value})")
        return branches
