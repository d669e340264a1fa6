"""Status and deletion formatting utilities."""

from typing import Sequence

from rich.text import Text

from git_cleanup_merged.constants import CLI_COLORS
from git_cleanup_merged.models.branch import BranchResult


def format_status_label(result: BranchResult) -> Text:
    """
    Format a result's label with the colour for its status.

    Args:
        result: Branch result

    Returns:
        Styled rich Text
    """
    style = CLI_COLORS.get(result.label) or ""
    return Text(result.label, style=style)


def format_deletion_candidates(branches: Sequence[str]) -> str:
    """
    Format branch names for the list shown before deletion.

    Example:
        "  feature/old\\n  bugfix/temp"
    """
    return "\n".join(f"  {branch}" for branch in branches)


def format_deletion_header(untracked_only: bool, dry_run: bool) -> str:
    if dry_run:
        return "DRY RUN: branches eligible for deletion:"
    if untracked_only:
        return "The following untracked local branches will be deleted:"
    return "The following branches have merged or closed PRs and will be deleted:"


def format_confirmation_question(untracked_only: bool) -> str:
    if untracked_only:
        return "Proceed with deletion of untracked branches? (y/N): "
    return "Proceed with deletion? (y/N): "
