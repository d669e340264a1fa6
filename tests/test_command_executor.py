"""Tests for CommandExecutor"""
import sys

import pytest

from git_cleanup_merged.exceptions import CommandExecutionError
from git_cleanup_merged.services.command_executor import (
    TIMEOUT,
    CommandExecutor,
    CommandTimeout,
    is_timeout,
)


def python_command(code):
    return [sys.executable, "-c", code]


class TestSilentExecution:
    """Test silent mode: failures become return values."""

    def test_success_returns_trimmed_stdout(self):
        """Test stdout comes back with surrounding whitespace removed."""
        executor = CommandExecutor()

        result = executor.execute(python_command("print('  hello  ')"), silent=True)

        assert result == "hello"

    def test_string_command_is_split(self, temp_dir):
        """Test a string command is split into argv without a shell."""
        executor = CommandExecutor(cwd=str(temp_dir))

        result = executor.execute("git --version", silent=True)

        assert isinstance(result, str)
        assert result.startswith("git version")

    def test_non_zero_exit_returns_none(self):
        """Test a failing command gives None."""
        executor = CommandExecutor()

        result = executor.execute(python_command("import sys; sys.exit(3)"), silent=True)

        assert result is None

    def test_missing_executable_returns_none(self):
        """Test an executable that cannot be found gives None."""
        executor = CommandExecutor()

        result = executor.execute(["definitely-not-a-real-command-xyz"], silent=True)

        assert result is None

    def test_timeout_returns_sentinel(self):
        """Test a command past its deadline gives the TIMEOUT sentinel."""
        executor = CommandExecutor()

        result = executor.execute(
            python_command("import time; time.sleep(10)"), silent=True, timeout_ms=200
        )

        assert result is TIMEOUT
        assert is_timeout(result)

    def test_default_timeout_applies(self):
        """Test the executor default deadline is used when none is passed."""
        executor = CommandExecutor(default_timeout_ms=200)

        result = executor.execute(python_command("import time; time.sleep(10)"), silent=True)

        assert result is TIMEOUT

    def test_runs_in_configured_directory(self, temp_dir):
        """Test commands run in the executor working directory."""
        executor = CommandExecutor(cwd=str(temp_dir))

        result = executor.execute(python_command("import os; print(os.getcwd())"), silent=True)

        assert result is not None
        assert result.endswith(temp_dir.name)

    def test_unbalanced_quotes_return_none(self):
        """Test a string command that cannot be parsed gives None."""
        executor = CommandExecutor()

        result = executor.execute("git commit -m \"unterminated", silent=True)

        assert result is None


class TestTimeoutSentinel:
    """Test the timeout sentinel can't be confused with real output."""

    def test_sentinel_is_not_a_string(self):
        """Test the sentinel never equals any output string."""
        assert not isinstance(TIMEOUT, str)
        assert TIMEOUT != "timeout"
        assert TIMEOUT != ""
        assert TIMEOUT is not None

    def test_sentinel_is_enum_member(self):
        """Test the sentinel is the CommandTimeout member."""
        assert TIMEOUT is CommandTimeout.TIMEOUT

    def test_is_timeout_rejects_other_values(self):
        """Test is_timeout is False for every non-sentinel result."""
        assert not is_timeout(None)
        assert not is_timeout("")
        assert not is_timeout("TIMEOUT")


class TestNonSilentExecution:
    """Test non-silent mode: failures propagate."""

    def test_success_returns_empty_string(self):
        """Test a successful non-silent command returns an empty string."""
        executor = CommandExecutor()

        result = executor.execute(python_command("pass"))

        assert result == ""

    def test_failure_raises(self):
        """Test a failing non-silent command raises CommandExecutionError."""
        executor = CommandExecutor()

        with pytest.raises(CommandExecutionError) as exc_info:
            executor.execute(python_command("import sys; sys.exit(1)"))

        assert exc_info.value.timed_out is False
        assert exc_info.value.message

    def test_timeout_raises(self):
        """Test a non-silent timeout raises with timed_out set."""
        executor = CommandExecutor()

        with pytest.raises(CommandExecutionError) as exc_info:
            executor.execute(python_command("import time; time.sleep(10)"), timeout_ms=200)

        assert exc_info.value.timed_out is True
        assert "timed out" in str(exc_info.value)

    def test_missing_executable_raises(self):
        """Test a missing executable raises in non-silent mode."""
        executor = CommandExecutor()

        with pytest.raises(CommandExecutionError):
            executor.execute(["definitely-not-a-real-command-xyz"])

    def test_unbalanced_quotes_raise(self):
        """Test an unparseable string command raises CommandExecutionError."""
        executor = CommandExecutor()

        with pytest.raises(CommandExecutionError) as exc_info:
            executor.execute("echo \"unterminated")

        assert exc_info.value.command == "echo \"unterminated"
