"""Custom exceptions for git-branch-tidy"""

from typing import Optional


class GitBranchTidyError(Exception):
    """Base exception for all git-branch-tidy errors."""
    pass


class CollaboratorError(GitBranchTidyError):
    """Exception raised when the git backend cannot be queried or mutated."""

    def __init__(self, operation: str, branch: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.branch = branch
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if branch:
            error_msg += f" for branch '{branch}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class NotARepositoryError(CollaboratorError):
    """Exception raised when a path is not a git working tree."""

    def __init__(self, path: str):
        self.path = path
        super().__init__("set_working_directory", message=f"{path} is not a valid git repository")


class BranchDeletionError(CollaboratorError):
    """Exception raised when a single local branch could not be deleted."""

    def __init__(self, branch: str, message: Optional[str] = None):
        super().__init__("delete_local_branch", branch, message)


class InvalidPatternError(GitBranchTidyError):
    """Exception raised when a highlight or protection pattern cannot be compiled."""

    def __init__(self, pattern: str, message: Optional[str] = None):
        self.pattern = pattern
        self.message = message

        error_msg = f"Invalid pattern '{pattern}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class InvalidInputError(GitBranchTidyError):
    """Exception raised when menu input does not match the accepted grammar."""

    def __init__(self, raw: str, message: Optional[str] = None):
        self.raw = raw
        self.message = message or "Unrecognized input"
        super().__init__(f"{self.message}: '{raw}'")
