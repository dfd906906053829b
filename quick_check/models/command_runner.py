import subprocess
from pathlib import Path
from typing import Optional, Sequence

from ..console import error

# Exit status a shell reports for a command it cannot find.
COMMAND_NOT_FOUND = 127


class CommandRunner:
    """Runs test commands attached to the current terminal."""

    def __init__(self, cwd: Optional[Path] = None):
        self.cwd = cwd

    def run(self, command: Sequence[str]) -> int:
        try:
            completed = subprocess.run(list(command), cwd=self.cwd, check=False)
        except OSError as e:
            error(f"Failed to run {command[0]}: {e}")
            return COMMAND_NOT_FOUND
        return completed.returncode
