"""Services used by git-cleanup-merged."""

from .command_executor import TIMEOUT, CommandExecutor, CommandTimeout, is_timeout
from .branch_classifier import BranchClassifier, parse_branch_listing, select_branches
from .github_service import GitHubService
from .branch_status_service import classify_pr_status
from .batch_processor import DeletionBatchProcessor, StatusBatchProcessor, WorkStealingBatch
from .reporter import ProgressReporter

__all__ = [
    "TIMEOUT",
    "CommandExecutor",
    "CommandTimeout",
    "is_timeout",
    "BranchClassifier",
    "parse_branch_listing",
    "select_branches",
    "GitHubService",
    "classify_pr_status",
    "DeletionBatchProcessor",
    "StatusBatchProcessor",
    "WorkStealingBatch",
    "ProgressReporter",
]
