"""Service that turns stale branches into deletion commands and runs them"""

from typing import List, Optional

from git_stales.config import Mode
from git_stales.exceptions import CollaboratorError
from git_stales.logging_config import get_logger
from git_stales.models.action import ActionKind, PlannedAction
from git_stales.models.branch import StaleBranchSet
from git_stales.services.collaborator import VersionControlCollaborator
from git_stales.services.display_service import DisplayService

logger = get_logger(__name__)


def build_actions(stale_set: StaleBranchSet) -> List[PlannedAction]:
    """Build the deletion commands for a set of stale branches.

    One batch for all local branches, then one command per remote in remote
    name order. Local and remote names never share a command.
    """
    actions = []
    if stale_set.local:
        actions.append(PlannedAction(
            ActionKind.DELETE_LOCAL,
            tuple(branch.full_name for branch in stale_set.local),
        ))
    for remote, short_names in stale_set.remote_groups().items():
        actions.append(PlannedAction(ActionKind.DELETE_REMOTE, tuple(short_names), remote=remote))
    return actions


class DeletionService:
    """Reports, prints or executes the deletion of stale branches."""

    def __init__(
        self,
        git_service: VersionControlCollaborator,
        display_service: Optional[DisplayService] = None,
    ):
        self.git_service = git_service
        self.display_service = display_service or DisplayService()

    def plan(self, stale_set: StaleBranchSet, mode: Mode) -> List[PlannedAction]:
        """Handle the stale set according to mode.

        Returns the commands that were printed or executed; empty for an
        empty set and for report mode.
        """
        if not stale_set:
            self.display_service.show_nothing_to_do()
            return []

        if mode is Mode.REPORT:
            self.display_service.show_stale_branches(stale_set)
            return []

        actions = build_actions(stale_set)
        if mode is Mode.DRY_RUN:
            self.display_service.show_commands(actions)
        else:
            for action in actions:
                self.execute(action)
        return actions

    def execute(self, action: PlannedAction) -> None:
        """Run one deletion command. Any failure aborts the run."""
        logger.info(f"Running: {action.command}")
        try:
            if action.kind is ActionKind.DELETE_LOCAL:
                self.git_service.delete_local_branches(list(action.branches))
            else:
                self.git_service.delete_remote_branches(action.remote, list(action.branches))
        except CollaboratorError as e:
            detail = e.message or "command failed"
            raise CollaboratorError(e.operation, e.subject, f"{action.command}: {detail}") from e
        self.display_service.show_deleted(action)
