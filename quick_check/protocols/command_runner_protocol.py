"""Command runner protocol interface."""

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class CommandRunnerProtocol(Protocol):
    """Protocol for running an external command to completion."""

    def run(self, command: Sequence[str]) -> int:
        """Run ``command`` attached to the terminal and return its exit code."""
        ...
