"""Custom exceptions for git-cleanup-merged"""

from typing import Optional, Sequence, Union


class GitCleanupError(Exception):
    """Base exception for all git-cleanup-merged errors."""
    pass


class CommandExecutionError(GitCleanupError):
    """Exception raised when a non-silent external command fails."""

    def __init__(
        self,
        command: Union[str, Sequence[str]],
        message: Optional[str] = None,
        timed_out: bool = False,
    ):
        if not isinstance(command, str):
            command = " ".join(command)
        self.command = command
        self.message = message
        self.timed_out = timed_out

        error_msg = f"Command '{command}' failed"
        if timed_out:
            error_msg = f"Command '{command}' timed out"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class SetupError(GitCleanupError):
    """Fatal error raised while preparing a run. Never retried."""
    pass


class InvalidDirectoryError(SetupError):
    """Exception raised when the target directory cannot be used."""

    def __init__(self, directory: str):
        self.directory = directory
        super().__init__(f"Failed to change directory to: {directory}")


class NotAGitRepositoryError(SetupError):
    """Exception raised when the target directory is not inside a git repository."""

    def __init__(self, path: Optional[str] = None):
        self.path = path
        super().__init__("Not in a git repository")


class GitHubCLINotInstalledError(SetupError):
    """Exception raised when the GitHub CLI cannot be found."""

    def __init__(self):
        super().__init__(
            "GitHub CLI (gh) is not installed. Please install it from https://cli.github.com/"
        )


class GitHubCLINotAuthenticatedError(SetupError):
    """Exception raised when the GitHub CLI has no authenticated session."""

    def __init__(self):
        super().__init__("GitHub CLI is not authenticated. Run: gh auth login")


class CurrentBranchError(SetupError):
    """Exception raised when the current branch cannot be determined."""

    def __init__(self, message: Optional[str] = None):
        error_msg = "Failed to get current branch"
        if message:
            error_msg += f": {message}"
        super().__init__(error_msg)
