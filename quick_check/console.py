"""Output helpers shared by the CLI and its services."""

import sys


def debug(message: str, verbose: bool) -> None:
    """Print a diagnostic line to stderr when verbose output is on."""
    if verbose:
        print(f"[qc] {message}", file=sys.stderr)


def error(message: str) -> None:
    print(message, file=sys.stderr)
