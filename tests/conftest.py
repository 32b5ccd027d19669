"""Pytest fixtures for git-stales tests"""
import io
import logging
import tempfile
from datetime import datetime, timezone
from pathlib import Path

import git
import pytest
from rich.console import Console

from git_stales.exceptions import CollaboratorError
from git_stales.models.branch import AheadBehind, BranchLine
from git_stales.services.display_service import DisplayService


# Commit dates used by the git_repo fixture. main's tip is TRUNK_DATE.
OLD_DATE = "2020-01-01T12:00:00+00:00"
UNMERGED_DATE = "2020-01-02T12:00:00+00:00"
RECENT_DATE = "2020-02-20T12:00:00+00:00"
TRUNK_DATE = "2020-03-01T12:00:00+00:00"


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


class FakeGitService:
    """In-memory collaborator returning canned answers."""

    def __init__(self, local=None, remote=None, counts=None, timestamps=None, refs=None):
        self.local_lines = list(local or [])
        self.remote_lines = list(remote or [])
        self.counts = dict(counts or {})
        self.timestamps = dict(timestamps or {})
        self.refs = set(refs if refs is not None else ["master"])
        self.failing_deletes = set()
        self.calls = []
        self.deleted_local = []
        self.deleted_remote = []

    def list_local_branches(self):
        self.calls.append(("list_local_branches",))
        return list(self.local_lines)

    def list_remote_branches(self):
        self.calls.append(("list_remote_branches",))
        return list(self.remote_lines)

    def last_commit_timestamp(self, ref):
        self.calls.append(("last_commit_timestamp", ref))
        if ref not in self.timestamps:
            raise CollaboratorError("last_commit_timestamp", ref, "unknown revision")
        return self.timestamps[ref]

    def ahead_behind_counts(self, branch, trunk):
        self.calls.append(("ahead_behind_counts", branch, trunk))
        if branch not in self.counts:
            raise CollaboratorError("ahead_behind_counts", f"{branch}...{trunk}", "unknown revision")
        ahead, behind = self.counts[branch]
        return AheadBehind(ahead, behind)

    def ref_exists(self, name):
        self.calls.append(("ref_exists", name))
        return name in self.refs

    def delete_local_branches(self, names):
        self.calls.append(("delete_local_branches", list(names)))
        if "local" in self.failing_deletes:
            raise CollaboratorError("delete_local_branches", ", ".join(names), "not fully merged")
        self.deleted_local.append(list(names))

    def delete_remote_branches(self, remote, short_names):
        self.calls.append(("delete_remote_branches", remote, list(short_names)))
        if remote in self.failing_deletes:
            raise CollaboratorError("delete_remote_branches", remote, "permission denied")
        self.deleted_remote.append((remote, list(short_names)))


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging during a test."""
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    git_logger = logging.getLogger("git")
    saved_git_level = git_logger.level
    yield
    git_logger.setLevel(saved_git_level)
    for handler in root_logger.handlers[:]:
        if handler not in saved_handlers and type(handler) in (logging.StreamHandler, logging.FileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(saved_level)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def output():
    """A StringIO capturing everything a DisplayService prints."""
    return io.StringIO()


@pytest.fixture
def display_service(output):
    """DisplayService writing plain text into the output fixture."""
    return DisplayService(Console(file=output, width=200, color_system=None))


@pytest.fixture
def fake_git():
    """A collaborator with one stale local and two stale remote branches.

    trunk is master at 2020-03-01. Ages relative to trunk:
    old 60 days, recent 10 days, wip is unmerged.
    """
    return FakeGitService(
        local=[
            BranchLine("master", is_checked_out=True),
            BranchLine("old"),
            BranchLine("recent"),
            BranchLine("wip"),
        ],
        remote=[
            BranchLine("origin/HEAD", is_symbolic=True),
            BranchLine("origin/master"),
            BranchLine("origin/old"),
            BranchLine("upstream/feature/x"),
            BranchLine("origin/recent"),
        ],
        counts={
            "old": (0, 12),
            "recent": (0, 1),
            "wip": (3, 0),
            "origin/master": (0, 0),
            "origin/old": (0, 12),
            "upstream/feature/x": (0, 40),
            "origin/recent": (0, 1),
        },
        timestamps={
            "master": utc(2020, 3, 1, 12),
            "old": utc(2020, 1, 1, 12),
            "recent": utc(2020, 2, 20, 12),
            "wip": utc(2019, 1, 1),
            "origin/master": utc(2020, 3, 1, 12),
            "origin/old": utc(2020, 1, 1, 12),
            "upstream/feature/x": utc(2019, 6, 1),
            "origin/recent": utc(2020, 2, 20, 12),
        },
        refs=["master"],
    )


def _commit(repo: git.Repo, filename: str, date: str) -> None:
    path = Path(repo.working_dir) / filename
    path.write_text(f"{filename} {date}\n")
    repo.git.add(filename)
    repo.git.commit(
        "-m", f"Add {filename}",
        env={"GIT_AUTHOR_DATE": date, "GIT_COMMITTER_DATE": date},
    )


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with back-dated branches and two remotes.

    Local branches (main is checked out):
        feature/old       merged, 60 days older than main
        feature/recent    merged, 10 days older than main
        feature/unmerged  one commit main does not have
    origin has all of them plus HEAD -> main; upstream has feature/old only.
    """
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()
    repo = git.Repo.init(repo_path)

    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()
    repo.config_writer().set_value("commit", "gpgsign", "false").release()
    repo.git.symbolic_ref("HEAD", "refs/heads/main")

    _commit(repo, "README.md", OLD_DATE)
    repo.git.branch("feature/old")

    repo.git.checkout("-b", "feature/unmerged")
    _commit(repo, "unmerged.txt", UNMERGED_DATE)
    repo.git.checkout("main")

    _commit(repo, "recent.txt", RECENT_DATE)
    repo.git.branch("feature/recent")

    _commit(repo, "trunk.txt", TRUNK_DATE)

    for remote in ("origin", "upstream"):
        bare_path = temp_dir / f"{remote}.git"
        git.Repo.init(bare_path, bare=True)
        repo.git.remote("add", remote, str(bare_path))

    repo.git.push("origin", "main", "feature/old", "feature/recent", "feature/unmerged")
    repo.git.push("upstream", "feature/old")
    repo.git.remote("set-head", "origin", "main")

    yield repo

    repo.close()
