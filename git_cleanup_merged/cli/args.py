"""Command-line argument parsing for git-cleanup-merged."""

import argparse
from typing import Optional, Sequence

from git_cleanup_merged.__version__ import __version__

EPILOG = """\
requirements:
  - Git repository
  - GitHub CLI (gh) installed and authenticated (only for normal mode)

examples:
  git-cleanup-merged                    # Clean up merged branches in current directory
  git-cleanup-merged ../my/repo         # Clean up merged branches in another repo
  git-cleanup-merged --dry-run          # Preview what would be deleted
  git-cleanup-merged -u -n              # Preview untracked local branches
  git-cleanup-merged --count            # Display branch count summary
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git-cleanup-merged",
        description="Checks your local Git branches against GitHub PRs and deletes the "
        "ones whose PRs were merged or closed.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Path to a git repository to operate on (default: current directory)",
    )
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Show what would be deleted without actually deleting",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show detailed information during processing"
    )
    parser.add_argument(
        "-u",
        "--untracked-only",
        action="store_true",
        help="Only process untracked local branches (no remote tracking branch)",
    )
    parser.add_argument(
        "-c",
        "--count",
        action="store_true",
        help="Display branch count summary and exit (no deletion)",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument(
        "--version", action="version", version=f"git-cleanup-merged {__version__}"
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    return build_parser().parse_args(argv)
