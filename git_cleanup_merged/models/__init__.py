"""Data models for git-cleanup-merged."""

from .branch import (
    BranchListing,
    BranchMode,
    BranchResult,
    DeletionOutcome,
    DeletionReason,
    DeletionSummary,
    PRStatus,
    StatusBatchResult,
)

__all__ = [
    "BranchListing",
    "BranchMode",
    "BranchResult",
    "DeletionOutcome",
    "DeletionReason",
    "DeletionSummary",
    "PRStatus",
    "StatusBatchResult",
]
