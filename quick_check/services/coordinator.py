"""Coordinates a single quick-check run from git changes to test commands."""

from pathlib import Path
from typing import Optional

from quick_check.config.settings import Settings
from quick_check.models import CommandRunner, LocalFileSystem, TestResolver
from quick_check.protocols import (
    CommandRunnerProtocol,
    FileSystemProtocol,
    GitManagerProtocol,
)
from quick_check.schemas import ResolvedTests, RunOptions

from .change_collector import ChangeCollector
from .context_factory import create_run_context
from .runner_dispatcher import RunnerDispatcher

NO_TESTS_MESSAGE = "No changed/added test files detected."


class QuickCheckCoordinator:
    """Runs collection, resolution and dispatch for one invocation."""

    def __init__(
        self,
        git_manager: GitManagerProtocol,
        settings: Settings,
        working_dir: Path,
        file_system: Optional[FileSystemProtocol] = None,
        runner: Optional[CommandRunnerProtocol] = None,
    ):
        self.git_manager = git_manager
        self.settings = settings
        self.working_dir = working_dir
        self.file_system = file_system
        self.runner = runner

    def run(self, options: RunOptions) -> int:
        context = create_run_context(
            self.git_manager,
            self.settings,
            self.working_dir,
            base_branch=options.base_branch,
            verbose=options.verbose,
        )
        # Changed paths are relative to the repository root
        file_system = self.file_system or LocalFileSystem(context.repo_root)

        changed = ChangeCollector(self.git_manager, verbose=options.verbose).collect(
            options.sources, context.base_branch
        )
        resolved = TestResolver(file_system).resolve(changed)

        if resolved.is_empty():
            print(NO_TESTS_MESSAGE)
            return 0

        if options.print_only:
            self.print_paths(resolved)
            return 0

        dispatcher = RunnerDispatcher(
            runner=self.runner or CommandRunner(cwd=context.repo_root),
            file_system=file_system,
            custom_command=options.custom_command,
            dry_run=options.dry_run,
            verbose=options.verbose,
        )
        return dispatcher.dispatch(resolved)

    @staticmethod
    def print_paths(resolved: ResolvedTests) -> None:
        for path in resolved.all_paths():
            print(path)
