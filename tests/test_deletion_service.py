"""Tests for DeletionService"""
import pytest

from git_stales.config import Mode
from git_stales.exceptions import CollaboratorError
from git_stales.models.action import ActionKind, PlannedAction
from git_stales.models.branch import BranchRef, StaleBranchSet
from git_stales.services.deletion_service import DeletionService, build_actions


def make_stale_set(local=(), remote=()):
    stale_set = StaleBranchSet()
    for name in local:
        stale_set.add(BranchRef.local(name))
    for name in remote:
        stale_set.add(BranchRef.remote(name))
    return stale_set


@pytest.fixture
def stale_set():
    return make_stale_set(
        local=["old", "feature/done"],
        remote=["origin/a", "upstream/b", "origin/c"],
    )


class TestBuildActions:
    """Test deletion command construction."""

    def test_one_local_batch_and_one_command_per_remote(self, stale_set):
        actions = build_actions(stale_set)
        assert actions == [
            PlannedAction(ActionKind.DELETE_LOCAL, ("old", "feature/done")),
            PlannedAction(ActionKind.DELETE_REMOTE, ("a", "c"), remote="origin"),
            PlannedAction(ActionKind.DELETE_REMOTE, ("b",), remote="upstream"),
        ]

    def test_remote_only(self):
        actions = build_actions(make_stale_set(remote=["origin/feature/x"]))
        assert [a.argv for a in actions] == [["git", "push", "--delete", "origin", "feature/x"]]

    def test_local_only(self):
        actions = build_actions(make_stale_set(local=["a"]))
        assert [a.argv for a in actions] == [["git", "branch", "-d", "a"]]

    def test_local_and_remote_names_never_mixed(self, stale_set):
        for action in build_actions(stale_set):
            if action.kind is ActionKind.DELETE_LOCAL:
                assert action.remote is None
                assert set(action.branches) == {"old", "feature/done"}
            else:
                assert not set(action.branches) & {"old", "feature/done"}

    def test_empty_set_builds_nothing(self):
        assert build_actions(StaleBranchSet()) == []


class TestPlanModes:
    """Test report, dry-run and execute modes."""

    def test_empty_set_reports_nothing_to_do(self, fake_git, display_service, output):
        service = DeletionService(fake_git, display_service)
        for mode in Mode:
            assert service.plan(StaleBranchSet(), mode) == []
        assert output.getvalue().count("Nothing to do") == 3
        assert fake_git.deleted_local == []
        assert fake_git.deleted_remote == []

    def test_report_lists_full_names_local_first(self, fake_git, display_service, output, stale_set):
        service = DeletionService(fake_git, display_service)
        assert service.plan(stale_set, Mode.REPORT) == []
        assert output.getvalue().splitlines() == [
            "Stale branches:",
            "old",
            "feature/done",
            "origin/a",
            "upstream/b",
            "origin/c",
        ]
        assert fake_git.calls == []

    def test_dry_run_prints_commands(self, fake_git, display_service, output, stale_set):
        service = DeletionService(fake_git, display_service)
        actions = service.plan(stale_set, Mode.DRY_RUN)
        assert len(actions) == 3
        assert output.getvalue().splitlines() == [
            "git branch -d old feature/done",
            "git push --delete origin a c",
            "git push --delete upstream b",
        ]
        assert fake_git.calls == []

    def test_dry_run_prints_names_verbatim(self, fake_git, display_service, output):
        service = DeletionService(fake_git, display_service)
        service.plan(make_stale_set(local=["[bold]fix"]), Mode.DRY_RUN)
        assert output.getvalue() == "git branch -d [bold]fix\n"

    def test_execute_runs_commands(self, fake_git, display_service, stale_set):
        service = DeletionService(fake_git, display_service)
        service.plan(stale_set, Mode.EXECUTE)
        assert fake_git.deleted_local == [["old", "feature/done"]]
        assert fake_git.deleted_remote == [("origin", ["a", "c"]), ("upstream", ["b"])]

    def test_dry_run_and_execute_build_identical_commands(self, fake_git, display_service, stale_set):
        service = DeletionService(fake_git, display_service)
        dry_run_actions = service.plan(stale_set, Mode.DRY_RUN)
        executed_actions = service.plan(stale_set, Mode.EXECUTE)
        assert [a.argv for a in dry_run_actions] == [a.argv for a in executed_actions]

    def test_execute_reports_deletions(self, fake_git, display_service, output, stale_set):
        DeletionService(fake_git, display_service).plan(stale_set, Mode.EXECUTE)
        lines = output.getvalue().splitlines()
        assert lines == [
            "Deleted locally: old, feature/done",
            "Deleted from origin: a, c",
            "Deleted from upstream: b",
        ]


class TestExecuteFailures:
    """Test that a failing delete aborts the run."""

    def test_failure_aborts_remaining_groups(self, fake_git, display_service, stale_set):
        fake_git.failing_deletes.add("origin")
        service = DeletionService(fake_git, display_service)
        with pytest.raises(CollaboratorError) as exc_info:
            service.plan(stale_set, Mode.EXECUTE)

        assert "git push --delete origin a c" in str(exc_info.value)
        assert exc_info.value.subject == "origin"
        assert fake_git.deleted_local == [["old", "feature/done"]]
        # upstream comes after origin and is never attempted
        assert not any(call[0] == "delete_remote_branches" and call[1] == "upstream"
                       for call in fake_git.calls)

    def test_local_failure_stops_before_remotes(self, fake_git, display_service, stale_set):
        fake_git.failing_deletes.add("local")
        service = DeletionService(fake_git, display_service)
        with pytest.raises(CollaboratorError, match="git branch -d old feature/done"):
            service.plan(stale_set, Mode.EXECUTE)
        assert fake_git.deleted_remote == []
