"""Core orchestration for git-cleanup-merged."""

from .cleanup_tool import GitCleanupTool

__all__ = ["GitCleanupTool"]
