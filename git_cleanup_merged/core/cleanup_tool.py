"""Core functionality for git-cleanup-merged"""

from functools import partial
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from git_cleanup_merged.config import Config
from git_cleanup_merged.formatters import format_confirmation_question, format_deletion_header
from git_cleanup_merged.logging_config import get_logger
from git_cleanup_merged.models.branch import (
    BranchListing,
    BranchMode,
    DeletionSummary,
    StatusBatchResult,
)
from git_cleanup_merged.services.batch_processor import (
    DeletionBatchProcessor,
    StatusBatchProcessor,
)
from git_cleanup_merged.services.branch_classifier import BranchClassifier
from git_cleanup_merged.services.command_executor import CommandExecutor
from git_cleanup_merged.services.display_service import DisplayService
from git_cleanup_merged.services.github_service import GitHubService
from git_cleanup_merged.services.prompt import ask_confirmation
from git_cleanup_merged.services.reporter import ProgressReporter
from git_cleanup_merged.services.setup_service import SetupService

logger = get_logger(__name__)


class GitCleanupTool:
    """Finds branches whose PRs are merged or closed and offers to delete them."""

    def __init__(
        self,
        config: Union[Config, dict],
        reporter: Optional[ProgressReporter] = None,
        confirm: Optional[Callable[[str], bool]] = None,
        executor: Optional[CommandExecutor] = None,
    ):
        """Initialize GitCleanupTool.

        Args:
            config: Configuration dict or Config object
            reporter: Spinner/status reporter; a console reporter by default
            confirm: Yes/no prompt; anything but True cancels deletion
            executor: Command runner; one bound to config.repo_path by default
        """
        if isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config

        self.repo_path = self.config.repo_path
        self.dry_run = self.config.dry_run
        self.verbose = self.config.verbose
        self.untracked_only = self.config.untracked_only
        self.count_only = self.config.count_only

        self.reporter = reporter or ProgressReporter(verbose=self.verbose)
        self.executor = executor or CommandExecutor(
            cwd=self.repo_path, default_timeout_ms=self.config.command_timeout_ms
        )
        self.confirm = confirm or partial(ask_confirmation, console=self.reporter.console)

        # Initialize services
        self.setup_service = SetupService(self.repo_path, self.executor, self.reporter)
        self.classifier = BranchClassifier(self.executor, self.reporter, self.config)
        self.github_service = GitHubService(self.executor, self.config)
        self.status_processor = StatusBatchProcessor(self.github_service, self.reporter, self.config)
        self.deletion_processor = DeletionBatchProcessor(self.executor, self.reporter, self.config)
        self.display_service = DisplayService(self.reporter.console)

        self.current_branch = ""
        self.branch_results = StatusBatchResult()

    def run(self) -> Optional[DeletionSummary]:
        """Run every phase in order. Setup failures propagate as SetupError."""
        repo_name = Path(self.repo_path).resolve().name
        self.reporter.log(f"📂 Scanning repository: {repo_name}", style="blue")

        self.setup_service.check_dependencies(
            require_github=not (self.untracked_only or self.count_only)
        )
        self.current_branch = self.setup_service.get_current_branch()

        if self.count_only:
            self.count_branches()
            return None

        if self.untracked_only:
            self.branch_results = self.check_untracked_branches()
        else:
            self.branch_results = self.check_branches()

        self.display_service.display_results(self.branch_results.results)
        return self.delete_branches(self.branch_results.to_delete)

    def count_branches(self) -> BranchListing:
        """Report how many tracked and untracked branches there are."""
        self.reporter.start("Counting branches...")
        listing = self.classifier.get_listing(self.current_branch)
        self.reporter.success("Branch count complete")
        self.display_service.display_count(listing)
        return listing

    def check_branches(self) -> StatusBatchResult:
        """Check every tracked branch against GitHub."""
        self.reporter.start("Fetching tracked branches...")
        branches = self.classifier.get_branches(BranchMode.TRACKED, self.current_branch)
        return self.status_processor.check_branches(branches)

    def check_untracked_branches(self) -> StatusBatchResult:
        """Collect local-only branches; they need no GitHub check."""
        self.reporter.start("Fetching untracked local branches...")
        branches = self.classifier.get_branches(BranchMode.UNTRACKED, self.current_branch)
        return self.status_processor.mark_untracked(branches)

    def delete_branches(self, branches: Sequence[str]) -> Optional[DeletionSummary]:
        """Show deletion candidates, confirm, then delete.

        Returns:
            The deletion summary, or None when nothing was deleted because there
            were no candidates, it was a dry run, or the user declined
        """
        if not branches:
            if self.untracked_only:
                self.reporter.warning("No untracked local branches found.")
            else:
                self.reporter.warning("No branches with merged or closed PRs found.")
            return None

        self.reporter.log("")
        header = format_deletion_header(self.untracked_only, self.dry_run)
        if self.dry_run:
            self.reporter.warning(header)
        else:
            self.reporter.error(header)
        self.display_service.display_deletion_candidates(branches)

        if self.dry_run:
            if self.untracked_only:
                self.reporter.info("Run without --dry-run to actually delete untracked branches.")
            else:
                self.reporter.info("Run without --dry-run to actually delete them.")
            return None

        confirmed = self.confirm(format_confirmation_question(self.untracked_only))
        if confirmed is not True:
            self.reporter.info("Cancelled.")
            return None

        self.reporter.log("")
        return self.deletion_processor.delete_branches(branches)
