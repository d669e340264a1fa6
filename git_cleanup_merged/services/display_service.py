"""Display and formatting service for branch information"""
from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table

from git_cleanup_merged.constants import COLUMNS
from git_cleanup_merged.formatters import format_deletion_candidates, format_status_label
from git_cleanup_merged.logging_config import get_logger
from git_cleanup_merged.models.branch import BranchListing, BranchResult

logger = get_logger(__name__)


class DisplayService:
    def __init__(self, console: Optional[Console] = None):
        self.console = console if console is not None else Console()

    def display_results(self, results: Sequence[BranchResult]) -> None:
        """Display a table of checked branches, in the order they were listed."""
        table = Table()
        for col in COLUMNS:
            table.add_column(col.label, min_width=col.width or None, no_wrap=col.key == "branch")

        for result in results:
            table.add_row(result.branch, result.icon, format_status_label(result))

        self.console.print(table)
        logger.debug(f"Displayed {len(results)} branch results")

    def display_count(self, listing: BranchListing) -> None:
        """Display the branch count summary."""
        self.console.print("")
        self.console.print("[bold]📊 Branch Count Summary[/bold]")
        self.console.print(f"  Total branches: {listing.total}")
        self.console.print(f"  Tracked: {len(listing.tracked)}")
        self.console.print(f"  Untracked: {len(listing.untracked)}")

    def display_deletion_candidates(self, branches: Sequence[str]) -> None:
        self.console.print(format_deletion_candidates(branches), style="red", markup=False)
