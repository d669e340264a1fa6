"""Pre-flight checks that must pass before any branch is touched"""

from typing import TYPE_CHECKING

import git

from git_cleanup_merged.constants import (
    CURRENT_BRANCH_COMMAND,
    GH_AUTH_STATUS_COMMAND,
    GH_VERSION_COMMAND,
)
from git_cleanup_merged.exceptions import (
    CurrentBranchError,
    GitHubCLINotAuthenticatedError,
    GitHubCLINotInstalledError,
    NotAGitRepositoryError,
)
from git_cleanup_merged.logging_config import get_logger
from git_cleanup_merged.services.command_executor import is_timeout

if TYPE_CHECKING:
    from git_cleanup_merged.services.command_executor import CommandExecutor
    from git_cleanup_merged.services.reporter import ProgressReporter

logger = get_logger(__name__)


class SetupService:
    """Service for fail-hard setup checks.

    Every check raises a SetupError subclass on failure; the caller reports it
    once and ends the run.
    """

    def __init__(self, repo_path: str, executor: "CommandExecutor", reporter: "ProgressReporter"):
        self.repo_path = repo_path
        self.executor = executor
        self.reporter = reporter

    def check_repository(self) -> str:
        """Verify repo_path is inside a git work tree. Returns the work tree root."""
        try:
            repo = git.Repo(self.repo_path, search_parent_directories=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            logger.debug(f"{self.repo_path} is not a git repository: {e}")
            raise NotAGitRepositoryError(self.repo_path) from e

        try:
            if repo.bare:
                raise NotAGitRepositoryError(self.repo_path)
            logger.debug(f"Repository root: {repo.working_tree_dir}")
            return str(repo.working_tree_dir)
        finally:
            repo.close()

    def check_github_cli(self) -> None:
        """Verify gh is installed and logged in."""
        self.reporter.update("Checking GitHub CLI...")
        version = self.executor.execute(GH_VERSION_COMMAND, silent=True)
        if version is None or is_timeout(version):
            raise GitHubCLINotInstalledError()
        logger.debug(f"Using {version.splitlines()[0] if version else 'gh'}")

        self.reporter.update("Verifying GitHub authentication...")
        auth = self.executor.execute(GH_AUTH_STATUS_COMMAND, silent=True)
        if auth is None or is_timeout(auth):
            raise GitHubCLINotAuthenticatedError()

    def check_dependencies(self, require_github: bool = True) -> None:
        """Run all setup checks. GitHub checks are skipped when not needed."""
        self.reporter.start("Checking dependencies...")
        self.check_repository()
        if require_github:
            self.check_github_cli()
        self.reporter.success("Dependencies checked")

    def get_current_branch(self) -> str:
        """Name of the checked-out branch, or an empty string on a detached HEAD."""
        self.reporter.start("Getting current branch...")
        output = self.executor.execute(CURRENT_BRANCH_COMMAND, silent=True)
        if output is None:
            raise CurrentBranchError()
        if is_timeout(output):
            raise CurrentBranchError("timed out")

        self.reporter.success(f"Current branch: {output or '(detached HEAD)'}")
        return output
