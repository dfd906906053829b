from .command_runner_protocol import CommandRunnerProtocol
from .file_system_protocol import FileSystemProtocol
from .git_manager_protocol import GitManagerProtocol

__all__ = ["CommandRunnerProtocol", "FileSystemProtocol", "GitManagerProtocol"]
