"""Configuration handling for git-cleanup-merged"""

from dataclasses import dataclass, field, fields
from typing import List


@dataclass
class Config:
    """Configuration for git-cleanup-merged with validation."""

    # Target repository
    repo_path: str = "."

    # Execution modes
    dry_run: bool = False
    verbose: bool = False
    debug: bool = False
    untracked_only: bool = False
    count_only: bool = False

    # Branches never offered for deletion (the current branch is added at runtime)
    protected_branches: List[str] = field(default_factory=lambda: ["main", "master"])

    # Concurrency limits
    status_workers: int = 5
    delete_workers: int = 3

    # External command timeouts, in milliseconds
    command_timeout_ms: int = 30000
    pr_status_timeout_ms: int = 10000

    # Pause before untracked branches are reported (keeps the spinner visible)
    untracked_pause_seconds: float = 0.3

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_repo_path()
        self._validate_protected_branches()
        self._validate_workers()
        self._validate_timeouts()
        self._validate_untracked_pause()

    def _validate_repo_path(self):
        """Validate repo_path is not empty."""
        if not self.repo_path or not str(self.repo_path).strip():
            raise ValueError("repo_path cannot be empty")

    def _validate_protected_branches(self):
        """Validate protected_branches list."""
        if not isinstance(self.protected_branches, list):
            raise ValueError("protected_branches must be a list")

    def _validate_workers(self):
        """Validate worker limits are positive."""
        for name in ("status_workers", "delete_workers"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

    def _validate_timeouts(self):
        """Validate command timeouts are positive."""
        for name in ("command_timeout_ms", "pr_status_timeout_ms"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

    def _validate_untracked_pause(self):
        """Validate untracked_pause_seconds is not negative."""
        if self.untracked_pause_seconds < 0:
            raise ValueError(
                f"untracked_pause_seconds cannot be negative, got {self.untracked_pause_seconds}"
            )

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def get(self, key: str, default=None):
        """Get config value by key, mirroring dict access."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
