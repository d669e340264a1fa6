"""Formatting utilities for git-cleanup-merged.

- status: result labels and deletion candidate lists
"""

from .status import (
    format_status_label,
    format_deletion_candidates,
    format_deletion_header,
    format_confirmation_question,
)

__all__ = [
    "format_status_label",
    "format_deletion_candidates",
    "format_deletion_header",
    "format_confirmation_question",
]
