"""Configuration handling for git-branch-tidy"""

import re
from dataclasses import dataclass
from typing import Optional

from git_branch_tidy.exceptions import InvalidPatternError


@dataclass
class Config:
    """Configuration for git-branch-tidy with validation."""

    # Branch protection
    protected_pattern: str = "master"
    literal_protected: bool = False  # Treat protected_pattern as a plain substring

    # Git behaviour
    fetch: bool = True  # Run 'git fetch --all --prune' before listing remotes
    force_delete: bool = True  # 'git branch -D' instead of '-d'

    # Output
    verbose: bool = False
    debug: bool = False
    highlight_color: str = "yellow"
    notice_color: str = "cyan"

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_protected_pattern()
        self._validate_colors()

    def _validate_protected_pattern(self):
        """Validate protected_pattern is a usable pattern."""
        if self.protected_pattern is None:
            return
        if not isinstance(self.protected_pattern, str):
            raise ValueError("protected_pattern must be a string")
        try:
            self.protected_regex()
        except InvalidPatternError as e:
            raise ValueError(str(e)) from e

    def _validate_colors(self):
        """Validate color names are not empty."""
        for name in ("highlight_color", "notice_color"):
            value = getattr(self, name)
            if not value or not value.strip():
                raise ValueError(f"{name} cannot be empty")
            setattr(self, name, value.strip())

    def protected_regex(self) -> Optional[re.Pattern]:
        """Compile the pattern that protects branches from deletion.

        Returns None when protection is disabled (empty pattern).
        """
        if not self.protected_pattern:
            return None
        source = self.protected_pattern
        if self.literal_protected:
            source = re.escape(source)
        try:
            return re.compile(source)
        except re.error as e:
            raise InvalidPatternError(self.protected_pattern, str(e)) from e

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "protected_pattern": self.protected_pattern,
            "literal_protected": self.literal_protected,
            "fetch": self.fetch,
            "force_delete": self.force_delete,
            "verbose": self.verbose,
            "debug": self.debug,
            "highlight_color": self.highlight_color,
            "notice_color": self.notice_color,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        known_fields = {
            "protected_pattern",
            "literal_protected",
            "fetch",
            "force_delete",
            "verbose",
            "debug",
            "highlight_color",
            "notice_color",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
