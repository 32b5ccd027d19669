"""Command-line interface for git-stales"""

import sys

from rich.console import Console

from git_stales.cli.args import parse_args
from git_stales.config import AgeReference, BranchScope, Config, resolve_mode
from git_stales.core import StaleBranchFinder
from git_stales.exceptions import GitStalesError
from git_stales.logging_config import setup_logging

console = Console(stderr=True)


def build_config(parsed_args) -> Config:
    """Build the run configuration, validating every option."""
    return Config(
        trunk_branch=parsed_args.main_branch,
        keep_patterns=tuple(parsed_args.keep or ()),
        branch_scope=BranchScope.parse(parsed_args.branch_types),
        age_cutoff_days=parsed_args.age_cutoff,
        age_reference=AgeReference.parse(parsed_args.age_from),
        mode=resolve_mode(dry_run=parsed_args.dry_run, push_deletes=parsed_args.push_deletes),
        verbosity=parsed_args.verbose,
        debug=parsed_args.debug,
    )


def main(argv=None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    try:
        setup_logging(
            verbosity=parsed_args.verbose, debug=parsed_args.debug, log_file=parsed_args.log_file
        )
        config = build_config(parsed_args)

        if config.debug:
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}", markup=False, highlight=False)

        finder = StaleBranchFinder(config, repo_path=parsed_args.repo)
        finder.run()
        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 130
    except (GitStalesError, OSError) as e:
        console.print(f"Error: {e}", style="red", markup=False, highlight=False, soft_wrap=True)
        if parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
