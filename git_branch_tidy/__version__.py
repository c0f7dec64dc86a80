"""Version information for git-branch-tidy."""

__version__ = "0.1.0"
