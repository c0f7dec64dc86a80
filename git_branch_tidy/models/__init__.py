"""Data models for git-branch-tidy."""

from .branch import BranchRow
from .highlight import ColorSpec, Segment

__all__ = ["BranchRow", "ColorSpec", "Segment"]
