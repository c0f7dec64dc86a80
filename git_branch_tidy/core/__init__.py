"""Core functionality for git-branch-tidy"""

from .session import (
    Command,
    CommandKind,
    SelectionSession,
    SessionOutcome,
    SessionResult,
    SessionState,
    parse_command,
    tokenize,
)
from .workflow import ReconciliationResult, ReconciliationWorkflow, WorkflowOutcome

__all__ = [
    "Command",
    "CommandKind",
    "SelectionSession",
    "SessionOutcome",
    "SessionResult",
    "SessionState",
    "parse_command",
    "tokenize",
    "ReconciliationResult",
    "ReconciliationWorkflow",
    "WorkflowOutcome",
]
