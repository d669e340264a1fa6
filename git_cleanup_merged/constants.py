"""Shared constants for git-cleanup-merged."""

from dataclasses import dataclass
from typing import List


@dataclass
class ColumnDefinition:
    """Definition of a table column."""

    key: str
    label: str
    width: int = 0  # 0 means auto-width


# Results table columns
COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("branch", "Branch", 40),
    ColumnDefinition("icon", "Icon", 6),
    ColumnDefinition("status", "Status", 10),
]


# Status icons and labels
ICON_MERGED = "✅"
ICON_CLOSED = "🔒"
ICON_OPEN = "⏳"
ICON_TIMEOUT = "⏱️"
ICON_ERROR = "⚠️"
ICON_NO_PR = "❌"
ICON_UNTRACKED = "🏷️"

LABEL_MERGED = "Merged"
LABEL_CLOSED = "Closed"
LABEL_OPEN = "Open"
LABEL_TIMEOUT = "Timeout"
LABEL_ERROR = "Error"
LABEL_NO_PR = "No PR"
LABEL_UNTRACKED = "Untracked"


# Rich styles for each label
CLI_COLORS = {
    LABEL_MERGED: "green",
    LABEL_CLOSED: "green",
    LABEL_UNTRACKED: "green",
    LABEL_OPEN: "yellow",
    LABEL_TIMEOUT: "yellow",
    LABEL_ERROR: "red",
    LABEL_NO_PR: None,
}


# External commands
BRANCH_LISTING_COMMAND = [
    "git", "for-each-ref", "--format=%(refname:short) %(upstream:short)", "refs/heads/",
]
CURRENT_BRANCH_COMMAND = ["git", "branch", "--show-current"]
GH_VERSION_COMMAND = ["gh", "--version"]
GH_AUTH_STATUS_COMMAND = ["gh", "auth", "status"]
