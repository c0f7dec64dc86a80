"""One reconciliation pass: compare, select, delete, compare again"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

from rich.console import Console

from git_branch_tidy.config import Config
from git_branch_tidy.core.session import SelectionSession, SessionOutcome
from git_branch_tidy.exceptions import BranchDeletionError, CollaboratorError
from git_branch_tidy.logging_config import get_logger
from git_branch_tidy.models.branch import BranchRow
from git_branch_tidy.services.comparator import compute_candidates
from git_branch_tidy.services.display_service import DisplayService
from git_branch_tidy.services.git_service import GitService

logger = get_logger(__name__)

NO_DIFFERENCES_TEXT = "No differences: every local branch exists on the remote."


class WorkflowOutcome(Enum):
    NO_DIFFERENCES = "no-differences"
    QUIT = "quit"
    COMPLETED = "completed"
    ABORTED = "aborted"


@dataclass
class ReconciliationResult:
    """Summary of one reconciliation pass."""
    outcome: WorkflowOutcome
    deleted: List[str] = field(default_factory=list)
    failed: List[Tuple[str, str]] = field(default_factory=list)
    remaining: List[BranchRow] = field(default_factory=list)
    error: Optional[str] = None


class ReconciliationWorkflow:
    """Runs one full pass against a git working tree.

    Nothing is deleted until the selection session is accepted, and the
    candidate rows are recomputed from fresh listings after deleting.
    """

    def __init__(
        self,
        git_service: GitService,
        config: Union[Config, dict],
        console: Optional[Console] = None,
    ):
        if isinstance(config, dict):
            config = Config.from_dict(config)
        self.config = config
        self.git_service = git_service
        self.display = DisplayService(
            console,
            highlight_color=config.highlight_color,
            notice_color=config.notice_color,
        )
        self.exclude = config.protected_regex()

    def _collect(self) -> List[BranchRow]:
        local = self.git_service.list_local_branches()
        remote = self.git_service.list_remote_branches()
        return compute_candidates(local, remote, self.exclude)

    def _abort(self, error: CollaboratorError, result: ReconciliationResult) -> ReconciliationResult:
        logger.error(str(error))
        self.display.error(f"Error: {error}")
        result.outcome = WorkflowOutcome.ABORTED
        result.error = str(error)
        return result

    def run(self, path: str) -> ReconciliationResult:
        """Reconcile the working tree at ``path``."""
        result = ReconciliationResult(WorkflowOutcome.COMPLETED)

        try:
            self.git_service.set_working_directory(path)
            repo_path = self.git_service.repo_path or path
            self.display.highlight(f"Checking branches in {repo_path}", repo_path)
            candidates = self._collect()
        except CollaboratorError as e:
            return self._abort(e, result)

        if not candidates:
            self.display.notice(NO_DIFFERENCES_TEXT)
            result.outcome = WorkflowOutcome.NO_DIFFERENCES
            return result

        self.display.notice(f"{len(candidates)} local branch(es) not found on the remote:")
        session_result = SelectionSession(candidates, self.display).run()
        if session_result.outcome is SessionOutcome.QUIT:
            self.display.notice("Quit: no branches were deleted.")
            result.outcome = WorkflowOutcome.QUIT
            result.remaining = session_result.rows
            return result

        self._delete(session_result.to_delete, result)

        try:
            result.remaining = self._collect()
        except CollaboratorError as e:
            return self._abort(e, result)

        self._report(result)
        return result

    def _delete(self, rows: List[BranchRow], result: ReconciliationResult) -> None:
        """Delete each row, carrying on past individual failures."""
        if not rows:
            self.display.notice("Nothing selected: no branches were deleted.")
            return

        for row in rows:
            try:
                self.git_service.delete_local_branch(row.branch)
            except BranchDeletionError as e:
                logger.warning(str(e))
                result.failed.append((row.branch, e.message or str(e)))
                self.display.highlight(
                    f"✗ Failed to delete {row.branch}: {e.message or e}", row.branch
                )
                continue
            result.deleted.append(row.branch)
            self.display.highlight(f"✓ Deleted branch {row.branch}", row.branch)

    def _report(self, result: ReconciliationResult) -> None:
        self.display.plain()
        summary = f"Deleted {len(result.deleted)} branch(es), {len(result.failed)} failed"
        if result.failed:
            self.display.error(summary)
        else:
            self.display.success(summary)
        if not result.remaining:
            self.display.notice(NO_DIFFERENCES_TEXT)
            return
        self.display.notice("Local branches still not found on the remote:")
        self.display.display_candidate_table(result.remaining, show_summary=False)
