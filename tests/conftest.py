"""Pytest fixtures for git-cleanup-merged tests"""
import io
import tempfile
from pathlib import Path
from unittest.mock import Mock

import git
import pytest
from rich.console import Console

from git_cleanup_merged.services.command_executor import CommandExecutor
from git_cleanup_merged.services.reporter import ProgressReporter


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_config():
    """Create a configuration dictionary suitable for fast tests."""
    return {
        'dry_run': False,
        'verbose': False,
        'debug': False,
        'untracked_only': False,
        'count_only': False,
        'protected_branches': ['main', 'master'],
        'status_workers': 5,
        'delete_workers': 3,
        'command_timeout_ms': 30000,
        'pr_status_timeout_ms': 10000,
        'untracked_pause_seconds': 0,
    }


@pytest.fixture
def quiet_console():
    """A rich console that writes into a buffer instead of the terminal."""
    return Console(file=io.StringIO(), force_terminal=False, width=120)


@pytest.fixture
def quiet_reporter(quiet_console):
    """A real reporter whose output goes to a buffer."""
    return ProgressReporter(console=quiet_console, verbose=False)


@pytest.fixture
def mock_reporter(quiet_console):
    """A reporter mock that records every call."""
    reporter = Mock(spec=ProgressReporter)
    reporter.console = quiet_console
    reporter.verbose = False
    return reporter


@pytest.fixture
def mock_executor():
    """A command executor mock; tests set return values per command."""
    return Mock(spec=CommandExecutor)


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository on main that tracks a bare remote."""
    remote_path = temp_dir / "remote.git"
    git.Repo.init(remote_path, bare=True)

    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()
    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    repo.git.branch('-M', 'main')
    repo.create_remote('origin', str(remote_path))
    repo.git.push('-u', 'origin', 'main')

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_branches(git_repo):
    """Repository with tracked, untracked and unmerged branches, on main.

    - feature/tracked-one, feature/tracked-two: pushed with an upstream
    - local/experiment: local only, merged into main
    - local/unmerged: local only, with a commit main does not have
    """
    repo = git_repo
    repo_path = Path(repo.working_dir)

    for name in ('feature/tracked-one', 'feature/tracked-two'):
        repo.git.branch(name)
        repo.git.push('-u', 'origin', name)

    repo.git.branch('local/experiment')

    repo.git.checkout('-b', 'local/unmerged')
    extra = repo_path / "unmerged.txt"
    extra.write_text("Not on main\n")
    repo.index.add(["unmerged.txt"])
    repo.index.commit("Unmerged work")

    repo.git.checkout('main')

    yield repo
