"""Shared constants for git-branch-tidy."""

from dataclasses import dataclass
from typing import List


@dataclass
class ColumnDefinition:
    """Definition of a table column."""

    key: str
    label: str
    width: int = 0  # 0 means auto-width


# Columns of the candidate table
COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("id", "ID", 4),
    ColumnDefinition("branch", "Branch", 40),
    ColumnDefinition("delete", "DELETE", 8),
]


# Symbol constants
SYMBOL_MARKED = "✓"
SYMBOL_UNMARKED = " "

# Leading characters 'git branch' puts in front of a name
# ('*' current branch, '+' checked out in another worktree)
BRANCH_MARKERS = "*+"


# Menu tokens (matched case-insensitively)
TOKEN_QUIT = "q"
TOKEN_SELECT_ALL = "a"
AFFIRMATIVE_RESPONSES = ("y", "yes")


class RowStyleType:
    """Style types for candidate rows."""

    MARKED = "marked"
    UNMARKED = "unmarked"


# CLI colors (Rich color names)
CLI_COLORS = {
    RowStyleType.MARKED: "red",  # Will be deleted
    RowStyleType.UNMARKED: None,  # Default color
}

ERROR_COLOR = "red"
SUCCESS_COLOR = "green"


MENU_TEXT = (
    "Enter branch IDs to toggle (e.g. 1,3), A to toggle all, Q to quit"
)
CONFIRM_PROMPT = "\nProceed with deletion? \\[y/N] "  # escaped for rich markup
SELECTION_PROMPT = "\nSelection: "
