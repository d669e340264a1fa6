"""Spinner and status messages shown while a run is in progress"""

from threading import RLock
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.status import Status

from git_cleanup_merged.logging_config import get_logger

logger = get_logger(__name__)


class ProgressReporter:
    """Announces phase transitions and outcomes.

    Wraps a rich spinner. Every message is mirrored to the logger so the
    debug log file tells the same story as the terminal. Safe to call from
    worker threads.
    """

    def __init__(self, console: Optional[Console] = None, verbose: bool = False):
        self.console = console if console is not None else Console()
        self.verbose = verbose
        self.message = "Loading..."
        self._status: Optional[Status] = None
        self._lock = RLock()

    @property
    def is_spinning(self) -> bool:
        return self._status is not None

    def start(self, message: Optional[str] = None) -> None:
        with self._lock:
            if message is not None:
                self.message = message
            if self._status is not None:
                self._status.update(f"[bold blue]{escape(self.message)}")
                return
            self._status = self.console.status(
                f"[bold blue]{escape(self.message)}", spinner="dots"
            )
            self._status.start()

    def update(self, message: str) -> None:
        with self._lock:
            self.message = message
            if self._status is not None:
                self._status.update(f"[bold blue]{escape(message)}")
        logger.debug(message)

    def stop(self) -> None:
        with self._lock:
            if self._status is None:
                return
            self._status.stop()
            self._status = None

    def _print(self, text: str, style: Optional[str] = None) -> None:
        with self._lock:
            self.stop()
            self.console.print(escape(text), style=style)

    def success(self, message: str) -> None:
        logger.info(message)
        self._print(f"✅ {message}", style="green")

    def error(self, message: str) -> None:
        logger.error(message)
        self._print(f"❌ {message}", style="red")

    def warning(self, message: str) -> None:
        logger.warning(message)
        self._print(f"⚠️  {message}", style="yellow")

    def info(self, message: str) -> None:
        logger.info(message)
        self._print(f"ℹ️  {message}", style="blue")

    def debug(self, message: str) -> None:
        """Print a debug line, only in verbose mode. The spinner keeps running."""
        logger.debug(message)
        if not self.verbose:
            return
        with self._lock:
            self.console.print(escape(f"🔍 DEBUG: {message}"), style="blue")

    def log(self, message: str, style: Optional[str] = None) -> None:
        """Print a plain line without touching the spinner state."""
        with self._lock:
            self.console.print(escape(message), style=style)
