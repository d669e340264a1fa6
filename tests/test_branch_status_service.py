"""Tests for PR status classification"""
import pytest

from git_cleanup_merged.models.branch import PRStatus
from git_cleanup_merged.services.branch_status_service import (
    build_result,
    build_untracked_result,
    classify_pr_status,
)


class TestClassifyPRStatus:
    """Test the status -> icon/label/deletable mapping."""

    @pytest.mark.parametrize(
        "status, icon, label, deletable",
        [
            (PRStatus.MERGED, "✅", "Merged", True),
            (PRStatus.CLOSED, "🔒", "Closed", True),
            (PRStatus.OPEN, "⏳", "Open", False),
            (PRStatus.TIMEOUT, "⏱️", "Timeout", False),
            (PRStatus.ERROR, "⚠️", "Error", False),
            (PRStatus.NONE, "❌", "No PR", False),
        ],
    )
    def test_mapping(self, status, icon, label, deletable):
        """Test each PR status maps to its icon, label and deletability."""
        display = classify_pr_status(status)

        assert display.icon == icon
        assert display.label == label
        assert display.deletable is deletable

    def test_every_status_is_mapped(self):
        """Test no PRStatus member is missing from the table."""
        labels = {classify_pr_status(status).label for status in PRStatus}

        assert len(labels) == len(PRStatus)

    @pytest.mark.parametrize("status", [None, "MERGED", "something-else"])
    def test_absent_or_unknown_is_no_pr(self, status):
        """Test missing or unknown statuses show as No PR."""
        display = classify_pr_status(status)

        assert display.label == "No PR"
        assert display.deletable is False

    def test_timeout_is_reported_distinctly(self):
        """Test a timeout is not shown as No PR."""
        assert classify_pr_status(PRStatus.TIMEOUT).label != classify_pr_status(PRStatus.NONE).label

    def test_is_pure(self):
        """Test classification gives the same answer every time."""
        assert classify_pr_status(PRStatus.MERGED) == classify_pr_status(PRStatus.MERGED)


class TestBuildResult:
    """Test result records."""

    def test_merged_result(self):
        """Test a merged branch result."""
        result = build_result("feature/done", PRStatus.MERGED)

        assert result.branch == "feature/done"
        assert result.deletable is True
        assert result.status == PRStatus.MERGED

    def test_unknown_status_recorded_as_none(self):
        """Test an unknown status is stored as NONE."""
        result = build_result("feature/x", None)

        assert result.status == PRStatus.NONE
        assert result.deletable is False

    def test_untracked_result(self):
        """Test the untracked result is deletable and has no PR status."""
        result = build_untracked_result("local/spike")

        assert result.label == "Untracked"
        assert result.icon == "🏷️"
        assert result.deletable is True
        assert result.status is None
