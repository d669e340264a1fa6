"""Threading utilities for sizing worker pools and reporting the threading mode."""

import os
import sys
from typing import Any, Dict, Optional


def is_free_threading_enabled() -> bool:
    """Detect if Python is running with free-threading enabled.

    Returns:
        True if running on Python 3.13+ with the GIL disabled
    """
    is_gil_enabled = getattr(sys, "_is_gil_enabled", None)
    return is_gil_enabled is not None and not is_gil_enabled()


def get_python_threading_mode() -> str:
    """Get a description of the current threading mode."""
    if not hasattr(sys, "_is_gil_enabled"):
        return "GIL-enabled (Python < 3.13)"
    return "free-threading" if is_free_threading_enabled() else "GIL-enabled"


def get_worker_count(limit: int, total: int) -> int:
    """Number of workers for a batch: never more than the limit or the work available.

    Args:
        limit: Configured concurrency limit
        total: Number of work units

    Returns:
        min(limit, total), or 0 when there is nothing to do
    """
    if total <= 0 or limit <= 0:
        return 0
    return min(limit, total)


def get_threading_info(config: Optional[Any] = None) -> Dict[str, Any]:
    """Get information about the threading configuration for debug output."""
    info: Dict[str, Any] = {
        "mode": get_python_threading_mode(),
        "free_threading": is_free_threading_enabled(),
        "cpu_count": os.cpu_count() or 1,
        "python_version": f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
    }
    if config is not None:
        info["status_workers"] = config.get("status_workers", 5)
        info["delete_workers"] = config.get("delete_workers", 3)
    return info
