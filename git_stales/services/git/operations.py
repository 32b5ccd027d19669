"""Git operations service"""

from datetime import datetime, timezone
from typing import List, Optional, Sequence

import git

from git_stales.exceptions import CollaboratorError
from git_stales.models.action import local_delete_argv, remote_delete_argv
from git_stales.models.branch import AheadBehind, BranchLine
from git_stales.services.git.parsing import parse_ahead_behind, parse_branch_listing
from git_stales.logging_config import get_logger

logger = get_logger(__name__)


def _describe_git_error(e: git.exc.GitCommandError) -> str:
    """Build an informative message from a GitCommandError."""
    command = e.command if hasattr(e, "command") else "git"
    if isinstance(command, (list, tuple)):
        command = " ".join(str(part) for part in command)
    stderr = (e.stderr if hasattr(e, "stderr") and e.stderr else "").strip()
    status = e.status if hasattr(e, "status") else "unknown"

    if stderr:
        return f"'{command}' failed (exit {status}): {stderr}"
    return f"'{command}' failed with exit code {status}"


class GitOperations:
    """Runs the git queries and deletions git-stales needs.

    Every method runs one git command through GitPython and turns a failure
    into a CollaboratorError naming the operation and its subject.
    """

    def __init__(self, repo_path: str):
        """Open the repository.

        Args:
            repo_path: Path to the git repository (or any directory inside it)
        """
        self.repo_path = repo_path
        try:
            self.repo = git.Repo(repo_path, search_parent_directories=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise CollaboratorError("open_repository", str(repo_path), f"Not a git repository: {e}")

        logger.debug(f"Git operations initialized for {self.repo.working_dir}")

    def _run(self, operation: str, subject: Optional[str], *args: str) -> str:
        try:
            return self.repo.git.execute(["git", *args])
        except git.exc.GitCommandError as e:
            raise CollaboratorError(operation, subject, _describe_git_error(e))

    def list_local_branches(self) -> List[BranchLine]:
        output = self._run("list_local_branches", None, "branch", "--list", "--no-color", "--no-column")
        return parse_branch_listing(output)

    def list_remote_branches(self) -> List[BranchLine]:
        output = self._run("list_remote_branches", None, "branch", "-r", "--no-color", "--no-column")
        return parse_branch_listing(output)

    def last_commit_timestamp(self, ref: str) -> datetime:
        """Committer date of the tip of ``ref``, in UTC."""
        try:
            commit = self.repo.commit(ref)
        except (git.exc.BadName, git.exc.BadObject, ValueError) as e:
            raise CollaboratorError("last_commit_timestamp", ref, f"Unknown revision: {e}")
        return datetime.fromtimestamp(commit.committed_date, tz=timezone.utc)

    def ahead_behind_counts(self, branch: str, trunk: str) -> AheadBehind:
        """Commits unique to ``branch`` and to ``trunk``."""
        output = self._run(
            "ahead_behind_counts",
            f"{branch}...{trunk}",
            "rev-list", "--left-right", "--count", f"{branch}...{trunk}", "--",
        )
        return parse_ahead_behind(output, f"{branch}...{trunk}")

    def ref_exists(self, name: str) -> bool:
        try:
            self.repo.git.execute(["git", "rev-parse", "--verify", "--quiet", f"{name}^{{commit}}"])
            return True
        except git.exc.GitCommandError:
            return False

    def delete_local_branches(self, names: Sequence[str]) -> None:
        argv = local_delete_argv(names)
        logger.debug(f"Running: {' '.join(argv)}")
        try:
            self.repo.git.execute(argv)
        except git.exc.GitCommandError as e:
            raise CollaboratorError("delete_local_branches", ", ".join(names), _describe_git_error(e))

    def delete_remote_branches(self, remote: str, short_names: Sequence[str]) -> None:
        argv = remote_delete_argv(remote, short_names)
        logger.debug(f"Running: {' '.join(argv)}")
        try:
            self.repo.git.execute(argv)
        except git.exc.GitCommandError as e:
            raise CollaboratorError("delete_remote_branches", remote, _describe_git_error(e))
