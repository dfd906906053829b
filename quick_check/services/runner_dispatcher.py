"""Turns resolved test files into runner commands and executes them."""

import re
import shlex
from typing import List, Optional, Sequence

from quick_check.console import debug
from quick_check.protocols import CommandRunnerProtocol, FileSystemProtocol
from quick_check.schemas import CONVENTIONS, Framework, ResolvedTests

RAILS_BINSTUB = "bin/rails"
DEPENDENCY_MANIFESTS = ("Gemfile", "gems.rb")


class RunnerDispatcher:
    """Builds, prints and runs the commands for each convention."""

    def __init__(
        self,
        runner: CommandRunnerProtocol,
        file_system: FileSystemProtocol,
        custom_command: Optional[Sequence[str]] = None,
        dry_run: bool = False,
        verbose: bool = False,
    ):
        self.runner = runner
        self.file_system = file_system
        self.custom_command = list(custom_command) if custom_command else None
        self.dry_run = dry_run
        self.verbose = verbose

    def dispatch(self, resolved: ResolvedTests) -> int:
        """Run every planned command and return the aggregate exit code.

        The last non-zero exit code wins. Dry runs always return 0.
        """
        exit_status = 0
        for framework in Framework:
            files = resolved.files_for(framework)
            if not files:
                continue
            for command in self.build_commands(framework, files):
                status = self.print_and_maybe_run(command)
                if status:
                    exit_status = status
        return exit_status

    def build_commands(self, framework: Framework, files: List[str]) -> List[List[str]]:
        if self.custom_command:
            return [self.custom_command + files]

        if framework is Framework.RSPEC:
            return [["bundle", "exec", "rspec"] + files]

        if CONVENTIONS[framework].batched or self.rails_available():
            return [self.rails_command() + ["test"] + files]

        # No framework runner, run each file on its own
        return [["ruby", "-I", CONVENTIONS[framework].test_root, path] for path in files]

    def print_and_maybe_run(self, command: List[str]) -> int:
        print(shlex.join(command))
        if self.dry_run:
            return 0
        return self.runner.run(command)

    def rails_available(self) -> bool:
        available = self.file_system.is_executable(RAILS_BINSTUB) or self.manifest_includes(
            "rails"
        )
        debug(f"Rails available: {available}", self.verbose)
        return available

    def rails_command(self) -> List[str]:
        if self.file_system.is_executable(RAILS_BINSTUB):
            return [RAILS_BINSTUB]
        return ["bundle", "exec", "rails"]

    def manifest_includes(self, gem_name: str) -> bool:
        pattern = re.compile(r"""\bgem\s+["']{}["']""".format(re.escape(gem_name)))
        for manifest in DEPENDENCY_MANIFESTS:
            if not self.file_system.is_file(manifest):
                continue
            content = self.file_system.read_text(manifest)
            if content and pattern.search(content):
                return True
        return False
