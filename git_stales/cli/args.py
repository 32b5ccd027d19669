"""Command-line argument parsing for git-stales."""

import argparse

from git_stales.__version__ import __version__


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="git-stales",
        description="List branches that are merged into the trunk branch and older than a "
        "given number of days, and optionally delete them locally and from their remotes.",
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"git-stales {__version__}"
    )
    parser.add_argument(
        "-m",
        "--main-branch",
        default="master",
        metavar="BRANCH",
        help='The main/trunk branch (default: "master")',
    )
    parser.add_argument(
        "-a",
        "--age-cutoff",
        type=int,
        default=30,
        metavar="DAYS",
        help="The oldest, in days, a merged branch can be before it is considered stale "
        "(default: 30)",
    )
    parser.add_argument(
        "-k",
        "--keep",
        action="append",
        default=None,
        metavar="PATTERN",
        help="A branch to keep; can be a regular expression. Can be given multiple times.",
    )
    parser.add_argument(
        "-t",
        "--branch-types",
        default="both",
        metavar="{local,remote,both}",
        help="Which branches to check (default: both)",
    )
    parser.add_argument(
        "--age-from",
        default="trunk",
        metavar="{trunk,now}",
        help="Measure branch age from the trunk's last commit or from the current time "
        "(default: trunk)",
    )
    parser.add_argument(
        "-d",
        "--push-deletes",
        action="store_true",
        help='Delete stale branches (locally with "git branch -d" and from the remote(s) '
        'with "git push --delete")',
    )
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Like --push-deletes, but only print the command(s) instead of running them",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Print extra info to stderr as branches are examined. "
        "Give it twice for additional info.",
    )
    parser.add_argument(
        "-C",
        "--repo",
        default=".",
        metavar="PATH",
        help="Run as if started in PATH (default: current directory)",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument(
        "--log-file", metavar="FILE", help="Also write detailed logs to FILE (for scheduled runs)"
    )

    return parser.parse_args(argv)
