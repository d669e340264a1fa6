"""Runs external commands with a deadline"""

import shlex
import subprocess
from enum import Enum
from typing import Optional, Sequence, Union

from git_cleanup_merged.exceptions import CommandExecutionError
from git_cleanup_merged.logging_config import get_logger

logger = get_logger(__name__)


class CommandTimeout(Enum):
    """Sentinel returned by silent commands that exceeded their deadline."""
    TIMEOUT = "timeout"


TIMEOUT = CommandTimeout.TIMEOUT

Command = Union[str, Sequence[str]]
CommandResult = Union[str, CommandTimeout, None]


def is_timeout(result: CommandResult) -> bool:
    """Check whether a command result is the timeout sentinel."""
    return result is TIMEOUT


class CommandExecutor:
    """Service for running external commands.

    A silent command has three outcomes: its trimmed stdout, the TIMEOUT
    sentinel when it ran past its deadline, or None for any other failure.
    A non-silent command shares the terminal with the user and raises
    CommandExecutionError on failure.
    """

    def __init__(self, cwd: Optional[str] = None, default_timeout_ms: int = 30000):
        self.cwd = cwd
        self.default_timeout_ms = default_timeout_ms

    @staticmethod
    def _to_argv(command: Command) -> list:
        if isinstance(command, str):
            return shlex.split(command)
        return list(command)

    def execute(
        self,
        command: Command,
        silent: bool = False,
        timeout_ms: Optional[int] = None,
    ) -> CommandResult:
        """Run a command and return its trimmed output.

        Args:
            command: argv list, or a string split with shell rules (no shell is spawned)
            silent: capture and suppress output, and turn failures into return values
            timeout_ms: deadline in milliseconds, defaults to default_timeout_ms

        Returns:
            Trimmed stdout, TIMEOUT, or None (the last two only when silent)

        Raises:
            CommandExecutionError: when a non-silent command fails or times out
        """
        try:
            argv = self._to_argv(command)
        except ValueError as e:
            # Unbalanced quotes in a string command
            logger.debug(f"Could not parse command {command!r}: {e}")
            if silent:
                return None
            raise CommandExecutionError(command, str(e)) from e

        timeout = (timeout_ms if timeout_ms is not None else self.default_timeout_ms) / 1000
        logger.debug(f"Running {argv} (silent={silent}, timeout={timeout}s)")

        try:
            if silent:
                completed = subprocess.run(
                    argv,
                    cwd=self.cwd,
                    capture_output=True,
                    text=True,
                    encoding="utf-8",
                    errors="replace",
                    timeout=timeout,
                    check=True,
                )
                return completed.stdout.strip()

            # stdio is inherited so the user sees the command's own output
            subprocess.run(argv, cwd=self.cwd, timeout=timeout, check=True)
            return ""

        except subprocess.TimeoutExpired as e:
            logger.debug(f"Command {argv} timed out after {timeout}s")
            if silent:
                return TIMEOUT
            raise CommandExecutionError(argv, str(e), timed_out=True) from e

        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip() if silent else ""
            logger.debug(f"Command {argv} exited with {e.returncode}: {stderr}")
            if silent:
                return None
            raise CommandExecutionError(argv, str(e)) from e

        except OSError as e:
            # Missing executable, bad cwd, permission problems
            logger.debug(f"Command {argv} could not be started: {e}")
            if silent:
                return None
            raise CommandExecutionError(argv, str(e)) from e
