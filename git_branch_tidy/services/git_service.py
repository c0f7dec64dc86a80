"""Git operations service"""
from typing import List, Optional, Union, TYPE_CHECKING

import git

from git_branch_tidy.exceptions import BranchDeletionError, CollaboratorError, NotARepositoryError
from git_branch_tidy.logging_config import get_logger

if TYPE_CHECKING:
    from git_branch_tidy.config import Config

logger = get_logger(__name__)

GIT_ERRORS = (git.exc.GitCommandError, git.exc.GitCommandNotFound)


def _error_text(error: Exception) -> str:
    """Best human-readable text of a GitPython error."""
    stderr = getattr(error, "stderr", None)
    if stderr:
        # GitPython wraps stderr as "\n  stderr: '...'"
        text = str(stderr).strip()
        if text.startswith("stderr:"):
            text = text[len("stderr:"):].strip()
        return text.strip("'").strip()
    return str(error)


class GitService:
    """Lists and deletes branches of one working tree."""

    def __init__(self, config: Union['Config', dict]):
        """Initialize the service.

        Args:
            config: Configuration dictionary or Config object
        """
        self.config = config
        self.fetch = config.get('fetch', True)
        self.force_delete = config.get('force_delete', True)
        self.repo_path: Optional[str] = None
        self._repo: Optional[git.Repo] = None

    def set_working_directory(self, path: str) -> None:
        """Open the working tree at ``path`` (or one of its parents).

        Raises:
            NotARepositoryError: If path does not exist or is not inside a non-bare clone
        """
        try:
            repo = git.Repo(path, search_parent_directories=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            logger.debug(f"Cannot open repository at {path}: {e!r}")
            raise NotARepositoryError(path) from e

        if repo.bare:
            repo.close()
            raise NotARepositoryError(path)

        if self._repo is not None:
            self._repo.close()
        self._repo = repo
        self.repo_path = repo.working_tree_dir
        logger.info(f"Working directory set to {self.repo_path}")

    def _get_repo(self, operation: str) -> git.Repo:
        if self._repo is None:
            raise CollaboratorError(operation, message="no working directory has been set")
        return self._repo

    def _branch_listing(self, operation: str, *args: str) -> List[str]:
        # color.ui and column.ui from the user's config would otherwise reshape the lines
        repo = self._get_repo(operation)
        try:
            output = repo.git.branch(*args, "--no-color", "--no-column")
        except GIT_ERRORS as e:
            raise CollaboratorError(operation, message=_error_text(e)) from e
        return [line for line in output.splitlines() if line.strip()]

    def list_local_branches(self) -> List[str]:
        """Raw 'git branch --list' lines, markers included."""
        branches = self._branch_listing("list_local_branches", "--list")
        logger.debug(f"Local branches: {branches}")
        return branches

    def fetch_remotes(self) -> None:
        """Update remote-tracking branches with 'git fetch --all --prune'."""
        repo = self._get_repo("fetch")
        if not repo.remotes:
            logger.debug("No remotes configured, skipping fetch")
            return
        logger.info("Fetching remotes...")
        try:
            repo.git.fetch("--all", "--prune")
        except GIT_ERRORS as e:
            raise CollaboratorError("fetch", message=_error_text(e)) from e

    def list_remote_branches(self) -> List[str]:
        """Raw 'git branch -r' lines, fetched first unless fetching is disabled."""
        if self.fetch:
            self.fetch_remotes()
        branches = self._branch_listing("list_remote_branches", "-r")
        logger.debug(f"Remote branches: {branches}")
        return branches

    def current_branch(self) -> Optional[str]:
        """Name of the checked out branch, None when HEAD is detached."""
        repo = self._get_repo("current_branch")
        try:
            return repo.active_branch.name
        except TypeError:
            return None

    def delete_local_branch(self, branch_name: str) -> None:
        """Delete a local branch.

        Raises:
            BranchDeletionError: If git refuses to delete the branch
        """
        repo = self._get_repo("delete_local_branch")

        if branch_name == self.current_branch():
            raise BranchDeletionError(branch_name, "Cannot delete current branch")

        try:
            repo.delete_head(branch_name, force=self.force_delete)
        except GIT_ERRORS as e:
            raise BranchDeletionError(branch_name, _error_text(e)) from e
        logger.info(f"Deleted local branch {branch_name}")

    def close(self) -> None:
        if self._repo is not None:
            self._repo.close()
            self._repo = None
