"""Maps PR status to what the user sees and whether the branch may be deleted"""

from typing import NamedTuple, Optional

from git_cleanup_merged import constants
from git_cleanup_merged.models.branch import BranchResult, PRStatus


class StatusDisplay(NamedTuple):
    icon: str
    label: str
    deletable: bool


_STATUS_DISPLAY = {
    PRStatus.MERGED: StatusDisplay(constants.ICON_MERGED, constants.LABEL_MERGED, True),
    PRStatus.CLOSED: StatusDisplay(constants.ICON_CLOSED, constants.LABEL_CLOSED, True),
    PRStatus.OPEN: StatusDisplay(constants.ICON_OPEN, constants.LABEL_OPEN, False),
    PRStatus.TIMEOUT: StatusDisplay(constants.ICON_TIMEOUT, constants.LABEL_TIMEOUT, False),
    PRStatus.ERROR: StatusDisplay(constants.ICON_ERROR, constants.LABEL_ERROR, False),
    PRStatus.NONE: StatusDisplay(constants.ICON_NO_PR, constants.LABEL_NO_PR, False),
}

UNTRACKED_DISPLAY = StatusDisplay(constants.ICON_UNTRACKED, constants.LABEL_UNTRACKED, True)


def classify_pr_status(status: Optional[PRStatus]) -> StatusDisplay:
    """
    Map a PR status to its icon, label and deletion decision.

    Args:
        status: PR status, or None when nothing is known

    Returns:
        StatusDisplay; anything unrecognised is treated as "No PR"
    """
    return _STATUS_DISPLAY.get(status, _STATUS_DISPLAY[PRStatus.NONE])


def build_result(branch: str, status: Optional[PRStatus]) -> BranchResult:
    """Build the result record for a checked branch."""
    display = classify_pr_status(status)
    return BranchResult(
        branch=branch,
        icon=display.icon,
        label=display.label,
        deletable=display.deletable,
        status=status if isinstance(status, PRStatus) else PRStatus.NONE,
    )


def build_untracked_result(branch: str) -> BranchResult:
    """Build the result record for a local-only branch."""
    return BranchResult(
        branch=branch,
        icon=UNTRACKED_DISPLAY.icon,
        label=UNTRACKED_DISPLAY.label,
        deletable=UNTRACKED_DISPLAY.deletable,
        status=None,
    )
