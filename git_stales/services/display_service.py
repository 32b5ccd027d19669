"""Display service for stale branch reports and deletion commands"""
from typing import Iterable, Optional

from rich.console import Console
from rich.text import Text

from git_stales.models.action import PlannedAction
from git_stales.models.branch import StaleBranchSet

console = Console()


class DisplayService:
    """Writes the primary report to stdout.

    Branch names and commands are printed verbatim: no markup, no
    highlighting and no wrapping, so the output can be piped to a shell.
    """

    def __init__(self, out: Optional[Console] = None):
        self.console = out or console

    def _plain(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def show_nothing_to_do(self) -> None:
        self.console.print("[green]No stale branches found. Nothing to do.[/green]")

    def show_stale_branches(self, stale_set: StaleBranchSet) -> None:
        """List the stale branches, local ones first."""
        self.console.print("Stale branches:")
        for branch in stale_set:
            self._plain(branch.full_name)

    def show_commands(self, actions: Iterable[PlannedAction]) -> None:
        for action in actions:
            self._plain(action.command)

    def show_deleted(self, action: PlannedAction) -> None:
        if action.remote:
            where = f"from {action.remote}"
        else:
            where = "locally"
        message = Text.assemble((f"Deleted {where}: ", "green"), ", ".join(action.branches))
        self.console.print(message, highlight=False, soft_wrap=True)
