"""Utility functions for git-cleanup-merged.

This package provides utility modules:
- threading: worker sizing and Python threading mode detection
"""

from .threading import (
    is_free_threading_enabled,
    get_python_threading_mode,
    get_worker_count,
    get_threading_info,
)

__all__ = [
    "is_free_threading_enabled",
    "get_python_threading_mode",
    "get_worker_count",
    "get_threading_info",
]
