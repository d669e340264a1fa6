"""Branch model and related enums"""
from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional


class PRStatus(Enum):
    """State of the pull request associated with a branch."""
    MERGED = "MERGED"
    CLOSED = "CLOSED"
    OPEN = "OPEN"
    NONE = "NONE"  # No PR, or the query returned nothing usable
    TIMEOUT = "TIMEOUT"
    ERROR = "ERROR"


class BranchMode(Enum):
    """Which subset of local branches to select."""
    TRACKED = "tracked"
    UNTRACKED = "untracked"
    ALL = "all"


class DeletionReason(Enum):
    """Why a single branch deletion ended the way it did."""
    OK = "ok"
    TIMEOUT = "timeout"
    FAILED = "failed"


@dataclass
class BranchListing:
    """Local branches split by whether they track an upstream."""
    tracked: List[str] = field(default_factory=list)
    untracked: List[str] = field(default_factory=list)
    # Every non-protected branch in listing order
    ordered: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.tracked) + len(self.untracked)


@dataclass
class BranchResult:
    """Outcome of checking one branch."""
    branch: str
    icon: str
    label: str
    deletable: bool
    status: Optional[PRStatus] = None  # None for untracked-mode results


@dataclass
class StatusBatchResult:
    """Results of a status batch, in input order."""
    results: List[BranchResult] = field(default_factory=list)
    to_delete: List[str] = field(default_factory=list)


@dataclass
class DeletionOutcome:
    """Outcome of deleting one branch."""
    branch: str
    success: bool
    reason: DeletionReason


@dataclass
class DeletionSummary:
    """Aggregated outcomes of a deletion batch, in input order."""
    outcomes: List[DeletionOutcome] = field(default_factory=list)

    @property
    def deleted(self) -> List[str]:
        return [o.branch for o in self.outcomes if o.success]

    @property
    def failed(self) -> List[DeletionOutcome]:
        return [o for o in self.outcomes if not o.success]

    @property
    def deleted_count(self) -> int:
        return len(self.deleted)

    @property
    def failed_count(self) -> int:
        return len(self.failed)
