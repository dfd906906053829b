"""Command line entry point for ``qc``."""

import argparse
import shlex
import sys
from pathlib import Path
from typing import List, Optional

from quick_check.config import get_settings
from quick_check.console import error
from quick_check.models import GitManager, NotAGitRepositoryError
from quick_check.schemas import ChangeSourceFlags, RunOptions
from quick_check.services import QuickCheckCoordinator

NOT_A_REPOSITORY_EXIT_CODE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qc",
        description="Run only the RSpec/Minitest files affected by your git changes.",
    )
    parser.add_argument(
        "--base",
        metavar="BRANCH",
        dest="base_branch",
        help="Base branch to diff against (overrides config)",
    )
    parser.add_argument(
        "--committed",
        dest="include_committed",
        action="store_true",
        default=True,
        help="Include committed changes vs base branch (default)",
    )
    parser.add_argument(
        "--no-committed",
        dest="include_committed",
        action="store_false",
        help="Do not include committed changes vs base branch",
    )
    parser.add_argument(
        "--no-staged",
        dest="include_staged",
        action="store_false",
        default=True,
        help="Ignore staged changes",
    )
    parser.add_argument(
        "--no-unstaged",
        dest="include_unstaged",
        action="store_false",
        default=True,
        help="Ignore unstaged and untracked changes",
    )
    parser.add_argument(
        "--cmd",
        dest="custom_command",
        type=shlex.split,
        help="Override test command (auto-detected when omitted)",
    )
    parser.add_argument(
        "-p",
        "--print",
        dest="print_only",
        action="store_true",
        help="Only print matched test files, do not run",
    )
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Print the commands that would run",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Verbose/debug output"
    )
    return parser


def parse_options(argv: Optional[List[str]] = None) -> RunOptions:
    args = build_parser().parse_args(argv)
    return RunOptions(
        base_branch=args.base_branch,
        sources=ChangeSourceFlags(
            include_unstaged=args.include_unstaged,
            include_staged=args.include_staged,
            include_committed=args.include_committed,
        ),
        custom_command=args.custom_command or None,
        print_only=args.print_only,
        dry_run=args.dry_run,
        verbose=args.verbose or get_settings().DEBUG,
    )


def main(argv: Optional[List[str]] = None) -> int:
    options = parse_options(argv)
    settings = get_settings()
    working_dir = Path.cwd()

    git_manager = GitManager(
        str(working_dir), remote_name=settings.REMOTE_NAME, verbose=options.verbose
    )
    coordinator = QuickCheckCoordinator(git_manager, settings, working_dir)
    try:
        return coordinator.run(options)
    except NotAGitRepositoryError:
        error("qc must be run inside a git repository")
        return NOT_A_REPOSITORY_EXIT_CODE


def run() -> None:
    sys.exit(main())
