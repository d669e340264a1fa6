"""
git-cleanup-merged - Clean up local Git branches whose GitHub PRs are merged or closed
"""

from .__version__ import __version__
from .core import GitCleanupTool
from .cli import main

__all__ = ["GitCleanupTool", "main", "__version__"]
