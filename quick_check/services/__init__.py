"""Services for the application."""

from .change_collector import ChangeCollector
from .context_factory import create_run_context, resolve_base_branch
from .coordinator import NO_TESTS_MESSAGE, QuickCheckCoordinator
from .runner_dispatcher import RunnerDispatcher

__all__ = [
    "ChangeCollector",
    "NO_TESTS_MESSAGE",
    "QuickCheckCoordinator",
    "RunnerDispatcher",
    "create_run_context",
    "resolve_base_branch",
]
