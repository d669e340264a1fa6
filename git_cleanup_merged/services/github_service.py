"""GitHub pull request lookups through the gh CLI"""
from typing import TYPE_CHECKING, Union

from git_cleanup_merged.logging_config import get_logger
from git_cleanup_merged.models.branch import PRStatus
from git_cleanup_merged.services.command_executor import is_timeout

if TYPE_CHECKING:
    from git_cleanup_merged.config import Config
    from git_cleanup_merged.services.command_executor import CommandExecutor

logger = get_logger(__name__)

_KNOWN_STATES = {
    "MERGED": PRStatus.MERGED,
    "CLOSED": PRStatus.CLOSED,
    "OPEN": PRStatus.OPEN,
}


def pr_view_command(branch_name: str) -> list:
    return ["gh", "pr", "view", branch_name, "--json", "state", "--jq", ".state"]


class GitHubService:
    def __init__(self, executor: "CommandExecutor", config: Union["Config", dict]):
        """Initialize the service."""
        self.executor = executor
        self.config = config
        self.timeout_ms = config.get("pr_status_timeout_ms", 10000)

    def get_pr_status(self, branch_name: str) -> PRStatus:
        """Get the state of the PR opened from a branch.

        Never raises: a timeout becomes TIMEOUT, any other exception ERROR,
        and missing or unexpected output NONE.
        """
        try:
            output = self.executor.execute(
                pr_view_command(branch_name), silent=True, timeout_ms=self.timeout_ms
            )
        except Exception as e:
            logger.debug(f"[GitHub] Error getting PR status for {branch_name}: {e}")
            return PRStatus.ERROR

        if is_timeout(output):
            logger.debug(f"[GitHub] PR status query for {branch_name} timed out")
            return PRStatus.TIMEOUT

        if not output:
            return PRStatus.NONE

        status = _KNOWN_STATES.get(output.strip().upper(), PRStatus.NONE)
        logger.debug(f"[GitHub] Branch {branch_name} -> {status.value}")
        return status
