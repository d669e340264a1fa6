"""Bounded-concurrency processing of branches: PR status checks and deletions"""

import time
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from threading import Event, Lock
from typing import (
    TYPE_CHECKING,
    Callable,
    Dict,
    List,
    Optional,
    Sequence,
    TypeVar,
    Union,
)

from git_cleanup_merged.logging_config import get_logger
from git_cleanup_merged.models.branch import (
    BranchResult,
    DeletionOutcome,
    DeletionReason,
    DeletionSummary,
    PRStatus,
    StatusBatchResult,
)
from git_cleanup_merged.services.branch_status_service import (
    build_result,
    build_untracked_result,
)
from git_cleanup_merged.services.command_executor import is_timeout
from git_cleanup_merged.utils.threading import get_worker_count

if TYPE_CHECKING:
    from git_cleanup_merged.config import Config
    from git_cleanup_merged.services.command_executor import CommandExecutor
    from git_cleanup_merged.services.github_service import GitHubService
    from git_cleanup_merged.services.reporter import ProgressReporter

logger = get_logger(__name__)

K = TypeVar("K")
R = TypeVar("R")


class _ClaimCursor:
    """Shared next-index counter. Each index is handed out exactly once.

    Once ``stop`` is set no further indices are handed out; units already
    claimed still finish.
    """

    def __init__(self, total: int, stop: Optional[Event] = None):
        self._next = 0
        self._total = total
        self._stop = stop if stop is not None else Event()
        self._lock = Lock()

    def claim(self) -> Optional[int]:
        if self._stop.is_set():
            return None
        with self._lock:
            if self._next >= self._total:
                return None
            index = self._next
            self._next += 1
            return index


class WorkStealingBatch:
    """Runs one unit of work per item on at most ``limit`` threads.

    Workers pull the next unclaimed index from a shared cursor rather than
    being handed a fixed slice, so a slow unit only holds up its own worker.
    Results come back in input order whatever order the units finish in.
    """

    def __init__(self, limit: int, name: str = "batch"):
        self.limit = limit
        self.name = name
        self.worker_count = 0

    def run(
        self,
        items: Sequence[K],
        handle: Callable[[K], R],
        on_error: Callable[[K, Exception], R],
        on_complete: Optional[Callable[[K, R, int], None]] = None,
    ) -> List[R]:
        """Process every item and return the results in input order.

        Args:
            items: Work units; duplicates are processed once per occurrence
            handle: Produces the result for one item
            on_error: Produces the result for an item whose handler raised
            on_complete: Called with (item, result, completed_count) as each unit
                finishes; calls are serialised and a failing call is only logged

        Returns:
            One result per item, in the order of ``items``. An item is left out
            only when both its handler and on_error raised.

        Raises:
            BaseException: anything a worker could not contain, such as
                KeyboardInterrupt. No new units are claimed once it surfaces.
        """
        items = list(items)
        self.worker_count = get_worker_count(self.limit, len(items))
        if self.worker_count == 0:
            return []

        stop = Event()
        cursor = _ClaimCursor(len(items), stop)
        results: Dict[int, R] = {}
        results_lock = Lock()
        completed = 0

        def worker() -> None:
            nonlocal completed
            while True:
                index = cursor.claim()
                if index is None:
                    return
                item = items[index]
                try:
                    result = handle(item)
                except Exception as e:
                    logger.debug(f"[{self.name}] Error processing {item}: {e}")
                    try:
                        result = on_error(item, e)
                    except Exception as fallback_error:
                        logger.error(
                            f"[{self.name}] No result for {item}: {fallback_error}"
                        )
                        continue

                with results_lock:
                    results[index] = result
                    completed += 1
                    if on_complete is not None:
                        try:
                            on_complete(item, result, completed)
                        except Exception as e:
                            logger.debug(
                                f"[{self.name}] Progress callback failed for {item}: {e}"
                            )

        logger.debug(f"[{self.name}] Processing {len(items)} items with {self.worker_count} workers")

        with ThreadPoolExecutor(
            max_workers=self.worker_count, thread_name_prefix=self.name
        ) as executor:
            futures = [executor.submit(worker) for _ in range(self.worker_count)]
            try:
                done, _ = wait(futures, return_when=FIRST_EXCEPTION)
                for future in done:
                    future.result()
            except BaseException:
                stop.set()
                raise

        return [results[index] for index in range(len(items)) if index in results]


class StatusBatchProcessor:
    """Checks the PR status of many branches concurrently."""

    def __init__(
        self,
        github_service: "GitHubService",
        reporter: "ProgressReporter",
        config: Union["Config", dict],
    ):
        self.github_service = github_service
        self.reporter = reporter
        self.config = config
        self.max_workers = config.get("status_workers", 5)
        self.untracked_pause_seconds = config.get("untracked_pause_seconds", 0.3)
        self.last_worker_count = 0

    def _check_branch(self, branch: str) -> BranchResult:
        status = self.github_service.get_pr_status(branch)
        self.reporter.debug(f"Checking branch {branch} -> PR state: {status.value}")
        return build_result(branch, status)

    @staticmethod
    def _error_result(branch: str, error: Exception) -> BranchResult:
        return build_result(branch, PRStatus.ERROR)

    def check_branches(self, branches: Sequence[str]) -> StatusBatchResult:
        """Resolve and classify every branch, keeping the input order."""
        total = len(branches)
        if total == 0:
            self.last_worker_count = 0
            self.reporter.warning("No tracked branches found to check.")
            self.reporter.info(
                "You might want to use --untracked-only to see local-only branches."
            )
            return StatusBatchResult()

        self.reporter.start(f"Checking {total} tracked branches against GitHub...")

        def on_complete(branch: str, result: BranchResult, done: int) -> None:
            self.reporter.update(f"Checking branches {done}/{total}: {branch}")

        batch = WorkStealingBatch(self.max_workers, name="pr-status")
        results = batch.run(branches, self._check_branch, self._error_result, on_complete)
        self.last_worker_count = batch.worker_count

        self.reporter.success(f"Finished checking {total} tracked branches")
        return StatusBatchResult(
            results=results,
            to_delete=[r.branch for r in results if r.deletable],
        )

    def mark_untracked(self, branches: Sequence[str]) -> StatusBatchResult:
        """Mark every untracked branch as deletable. No GitHub lookup is made."""
        total = len(branches)
        if total == 0:
            self.reporter.warning("No untracked local branches found.")
            return StatusBatchResult()

        self.reporter.start(f"Found {total} untracked local branches...")
        for branch in branches:
            self.reporter.debug(f"Processing untracked branch {branch}")
        if self.untracked_pause_seconds:
            time.sleep(self.untracked_pause_seconds)

        results = [build_untracked_result(branch) for branch in branches]
        self.reporter.success(f"Finished processing {total} untracked branches")
        return StatusBatchResult(results=results, to_delete=[r.branch for r in results])


class DeletionBatchProcessor:
    """Deletes many local branches concurrently."""

    def __init__(
        self,
        executor: "CommandExecutor",
        reporter: "ProgressReporter",
        config: Union["Config", dict],
    ):
        self.executor = executor
        self.reporter = reporter
        self.config = config
        self.max_workers = config.get("delete_workers", 3)
        self.timeout_ms = config.get("command_timeout_ms", 30000)
        self.last_worker_count = 0

    def _delete_branch(self, branch: str) -> DeletionOutcome:
        result = self.executor.execute(
            ["git", "branch", "-d", branch], silent=True, timeout_ms=self.timeout_ms
        )
        if is_timeout(result):
            return DeletionOutcome(branch, False, DeletionReason.TIMEOUT)
        if result is None:
            return DeletionOutcome(branch, False, DeletionReason.FAILED)
        return DeletionOutcome(branch, True, DeletionReason.OK)

    @staticmethod
    def _error_outcome(branch: str, error: Exception) -> DeletionOutcome:
        return DeletionOutcome(branch, False, DeletionReason.FAILED)

    def _report_outcome(self, branch: str, outcome: DeletionOutcome, done: int) -> None:
        if outcome.reason == DeletionReason.OK:
            self.reporter.log(f"✅ Deleted branch {branch}", style="green")
        elif outcome.reason == DeletionReason.TIMEOUT:
            self.reporter.log(f"⏱️ Timed out deleting branch {branch}", style="red")
        else:
            self.reporter.log(f"❌ Failed to delete branch {branch}", style="red")

    def delete_branches(self, branches: Sequence[str]) -> DeletionSummary:
        """Delete every branch and report the tally."""
        if not branches:
            self.last_worker_count = 0
            return DeletionSummary()

        self.reporter.start(f"Deleting {len(branches)} branches...")

        batch = WorkStealingBatch(self.max_workers, name="delete")
        outcomes = batch.run(branches, self._delete_branch, self._error_outcome, self._report_outcome)
        self.last_worker_count = batch.worker_count
        self.reporter.stop()

        summary = DeletionSummary(outcomes=outcomes)
        if summary.failed_count == 0:
            self.reporter.success(f"Successfully deleted {summary.deleted_count} branches")
        else:
            self.reporter.warning(
                f"Deleted {summary.deleted_count} branches, {summary.failed_count} failed"
            )
            for outcome in summary.failed:
                self.reporter.log(f"  Failed: {outcome.branch}", style="red")
        return summary
