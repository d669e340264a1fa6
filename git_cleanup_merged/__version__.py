"""Version information for git-cleanup-merged."""

__version__ = "1.0.0"
