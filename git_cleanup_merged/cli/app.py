"""Command-line interface for git-cleanup-merged"""

import os
import sys
from typing import Optional, Sequence

from rich.console import Console

from git_cleanup_merged.cli.args import parse_args
from git_cleanup_merged.config import Config
from git_cleanup_merged.core import GitCleanupTool
from git_cleanup_merged.exceptions import InvalidDirectoryError, SetupError
from git_cleanup_merged.logging_config import get_log_file, get_logger, setup_logging
from git_cleanup_merged.services.reporter import ProgressReporter
from git_cleanup_merged.utils.threading import get_threading_info

console = Console()
logger = get_logger(__name__)


def resolve_directory(directory: str) -> str:
    """Absolute path of the directory to operate on."""
    path = os.path.abspath(os.path.expanduser(directory))
    if not os.path.isdir(path):
        raise InvalidDirectoryError(directory)
    return path


def _print_debug_info(config: Config) -> None:
    console.print("[yellow]Debug mode enabled[/yellow]")
    console.print(f"[dim]Log file: {get_log_file()}[/dim]")

    console.print("[yellow]Threading Information:[/yellow]")
    for key, value in get_threading_info(config).items():
        console.print(f"  {key}: {value}")

    console.print("[yellow]Configuration:[/yellow]")
    for key, value in config.to_dict().items():
        console.print(f"  {key}: {value}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)

    # Setup logging before anything talks to git or gh
    setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

    reporter = ProgressReporter(console=console, verbose=parsed_args.verbose)
    try:
        config = Config(
            repo_path=resolve_directory(parsed_args.directory),
            dry_run=parsed_args.dry_run,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
            untracked_only=parsed_args.untracked_only,
            count_only=parsed_args.count,
        )

        if parsed_args.debug:
            _print_debug_info(config)

        tool = GitCleanupTool(config, reporter=reporter)
        tool.run()
        return 0
    except SetupError as e:
        logger.debug(f"Setup failed: {e!r}")
        reporter.error(str(e))
        return 1
    except KeyboardInterrupt:
        reporter.stop()
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        reporter.error(f"An error occurred: {e}")
        if parsed_args.debug:
            console.print_exception()
        return 1
    finally:
        reporter.stop()


if __name__ == "__main__":
    sys.exit(main())
