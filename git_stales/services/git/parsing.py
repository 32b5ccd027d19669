"""Parsers for the text git prints.

Everything that looks at raw git output lives here, so the rest of the
package only deals with BranchLine and AheadBehind values.
"""

from typing import List

from git_stales.exceptions import UnexpectedOutputError
from git_stales.models.branch import AheadBehind, BranchLine

SYMBOLIC_REF_MARKER = "->"
CHECKED_OUT_MARKERS = ("* ", "+ ")


def parse_branch_listing(output: str) -> List[BranchLine]:
    """Parse the output of ``git branch`` or ``git branch -r``.

    ``* name`` is the current branch, ``+ name`` is checked out in another
    worktree and ``origin/HEAD -> origin/main`` is a symbolic reference.
    """
    branches = []
    for raw_line in output.splitlines():
        if not raw_line.strip():
            continue

        is_checked_out = raw_line[:2] in CHECKED_OUT_MARKERS
        name = raw_line[2:] if is_checked_out else raw_line
        name = name.strip()

        is_symbolic = SYMBOLIC_REF_MARKER in name
        if is_symbolic:
            name = name.split(SYMBOLIC_REF_MARKER, 1)[0].strip()

        branches.append(BranchLine(name, is_checked_out=is_checked_out, is_symbolic=is_symbolic))
    return branches


def parse_ahead_behind(output: str, subject: str = None) -> AheadBehind:
    """Parse ``git rev-list --left-right --count A...B`` output (``<ahead>\\t<behind>``)."""
    fields = output.split()
    if len(fields) != 2 or not all(f.isdigit() for f in fields):
        raise UnexpectedOutputError("ahead_behind_counts", output, subject)
    return AheadBehind(ahead=int(fields[0]), behind=int(fields[1]))
