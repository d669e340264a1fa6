"""Tests for GitHubService"""
import pytest

from git_cleanup_merged.exceptions import CommandExecutionError
from git_cleanup_merged.models.branch import PRStatus
from git_cleanup_merged.services.command_executor import TIMEOUT
from git_cleanup_merged.services.github_service import GitHubService, pr_view_command


class TestPRStatusQuery:
    """Test the gh query that is issued."""

    def test_command_and_timeout(self, mock_executor, mock_config):
        """Test the gh command line and its deadline."""
        mock_executor.execute.return_value = "OPEN"
        service = GitHubService(mock_executor, mock_config)

        service.get_pr_status("feature/test")

        mock_executor.execute.assert_called_once_with(
            ["gh", "pr", "view", "feature/test", "--json", "state", "--jq", ".state"],
            silent=True,
            timeout_ms=10000,
        )

    def test_timeout_from_config(self, mock_executor, mock_config):
        """Test the deadline comes from pr_status_timeout_ms."""
        mock_config["pr_status_timeout_ms"] = 2500
        mock_executor.execute.return_value = "OPEN"
        service = GitHubService(mock_executor, mock_config)

        service.get_pr_status("feature/test")

        assert mock_executor.execute.call_args.kwargs["timeout_ms"] == 2500

    def test_branch_name_is_a_single_argument(self):
        """Test odd branch names stay one argument."""
        command = pr_view_command("feature/with space")

        assert command[3] == "feature/with space"


class TestPRStatusParsing:
    """Test mapping of gh output to PRStatus."""

    @pytest.mark.parametrize(
        "output, expected",
        [
            ("MERGED", PRStatus.MERGED),
            ("CLOSED", PRStatus.CLOSED),
            ("OPEN", PRStatus.OPEN),
            ("merged\n", PRStatus.MERGED),
            ("DRAFT", PRStatus.NONE),
            ("", PRStatus.NONE),
            (None, PRStatus.NONE),
        ],
    )
    def test_output_mapping(self, mock_executor, mock_config, output, expected):
        """Test gh output maps to a PR status."""
        mock_executor.execute.return_value = output
        service = GitHubService(mock_executor, mock_config)

        assert service.get_pr_status("feature/test") == expected

    def test_timeout_maps_to_timeout(self, mock_executor, mock_config):
        """Test a timed-out query gives TIMEOUT."""
        mock_executor.execute.return_value = TIMEOUT
        service = GitHubService(mock_executor, mock_config)

        assert service.get_pr_status("feature/test") == PRStatus.TIMEOUT

    def test_exception_maps_to_error(self, mock_executor, mock_config):
        """Test a failing executor gives ERROR."""
        mock_executor.execute.side_effect = CommandExecutionError("gh pr view", "boom")
        service = GitHubService(mock_executor, mock_config)

        assert service.get_pr_status("feature/test") == PRStatus.ERROR

    def test_unexpected_exception_maps_to_error(self, mock_executor, mock_config):
        """Test any exception gives ERROR instead of propagating."""
        mock_executor.execute.side_effect = RuntimeError("Network unreachable")
        service = GitHubService(mock_executor, mock_config)

        assert service.get_pr_status("feature/test") == PRStatus.ERROR
