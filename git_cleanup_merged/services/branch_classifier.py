"""Splits the local branch list into tracked and untracked branches"""

import re
from typing import TYPE_CHECKING, Iterable, List, Union

from git_cleanup_merged.constants import BRANCH_LISTING_COMMAND
from git_cleanup_merged.logging_config import get_logger
from git_cleanup_merged.models.branch import BranchListing, BranchMode
from git_cleanup_merged.services.command_executor import is_timeout

if TYPE_CHECKING:
    from git_cleanup_merged.config import Config
    from git_cleanup_merged.services.command_executor import CommandExecutor
    from git_cleanup_merged.services.reporter import ProgressReporter

logger = get_logger(__name__)

DEFAULT_PROTECTED = ("main", "master")

_WHITESPACE_RUN = re.compile(r"\s+")

FAILURE_MESSAGES = {
    BranchMode.TRACKED: "Failed to get tracked branches",
    BranchMode.UNTRACKED: "Failed to get untracked branches",
    BranchMode.ALL: "Failed to get local branches",
}


def parse_branch_listing(
    text: str,
    current_branch: str = "",
    protected: Iterable[str] = DEFAULT_PROTECTED,
) -> BranchListing:
    """Parse ``name upstream`` lines into a BranchListing.

    The name and upstream may be separated by any run of whitespace. Protected
    branches and the current branch are dropped. Order is preserved.
    """
    excluded = set(protected)
    if current_branch:
        excluded.add(current_branch)

    listing = BranchListing()
    for raw_line in (text or "").splitlines():
        line = raw_line.strip()
        if not line:
            continue

        parts = _WHITESPACE_RUN.split(line, maxsplit=1)
        name = parts[0]
        upstream = parts[1].strip() if len(parts) > 1 else ""

        if name in excluded:
            continue

        listing.ordered.append(name)
        if upstream:
            listing.tracked.append(name)
        else:
            listing.untracked.append(name)

    return listing


def select_branches(listing: BranchListing, mode: BranchMode) -> List[str]:
    """Return the subset of a listing that a mode asks for."""
    if mode == BranchMode.TRACKED:
        return list(listing.tracked)
    if mode == BranchMode.UNTRACKED:
        return list(listing.untracked)
    return list(listing.ordered)


class BranchClassifier:
    """Service for enumerating candidate branches.

    Listing failures are reported and treated as "no branches"; they never
    abort the run.
    """

    def __init__(
        self,
        executor: "CommandExecutor",
        reporter: "ProgressReporter",
        config: Union["Config", dict],
    ):
        self.executor = executor
        self.reporter = reporter
        self.config = config
        self.protected_branches = config.get("protected_branches", list(DEFAULT_PROTECTED))

    def _fetch_listing(self, mode: BranchMode, current_branch: str) -> BranchListing:
        output = self.executor.execute(BRANCH_LISTING_COMMAND, silent=True)

        if output is None or is_timeout(output):
            message = FAILURE_MESSAGES[mode]
            if is_timeout(output):
                message += " (timed out)"
            self.reporter.error(message)
            return BranchListing()

        listing = parse_branch_listing(output, current_branch, self.protected_branches)
        logger.debug(
            f"Found {len(listing.tracked)} tracked and {len(listing.untracked)} untracked branches"
        )
        return listing

    def get_branches(self, mode: BranchMode, current_branch: str = "") -> List[str]:
        """Get candidate branch names for a mode, in listing order."""
        return select_branches(self._fetch_listing(mode, current_branch), mode)

    def get_tracked_branches(self, current_branch: str = "") -> List[str]:
        return self.get_branches(BranchMode.TRACKED, current_branch)

    def get_untracked_branches(self, current_branch: str = "") -> List[str]:
        return self.get_branches(BranchMode.UNTRACKED, current_branch)

    def get_listing(self, current_branch: str = "") -> BranchListing:
        """Get the full tracked/untracked split from a single listing command."""
        return self._fetch_listing(BranchMode.ALL, current_branch)
