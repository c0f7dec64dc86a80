"""Formatting utilities for git-branch-tidy."""

from typing import Iterable, List

from git_branch_tidy.constants import (
    CLI_COLORS,
    SYMBOL_MARKED,
    SYMBOL_UNMARKED,
    RowStyleType,
)
from git_branch_tidy.models.branch import BranchRow


def format_delete_flag(marked: bool) -> str:
    """
    Format the DELETE column value.

    Args:
        marked: Whether the row is marked for deletion

    Returns:
        Symbol for the deletion flag
    """
    return SYMBOL_MARKED if marked else SYMBOL_UNMARKED


def get_row_style(row: BranchRow):
    """Rich style for a candidate row, or None for the default style."""
    style_type = RowStyleType.MARKED if row.marked_for_deletion else RowStyleType.UNMARKED
    return CLI_COLORS.get(style_type)


def marked_rows(rows: Iterable[BranchRow]) -> List[BranchRow]:
    return [row for row in rows if row.marked_for_deletion]


def format_selection_summary(rows: List[BranchRow]) -> str:
    """
    Summarize how many rows are currently selected.

    Example:
        "2 of 5 branches selected for deletion"
    """
    selected = len(marked_rows(rows))
    noun = "branch" if len(rows) == 1 else "branches"
    return f"{selected} of {len(rows)} {noun} selected for deletion"


def format_deletion_confirmation_items(rows: List[BranchRow]) -> str:
    """
    Format the marked rows for the deletion confirmation message.

    Returns:
        One "  • branch-name" line per marked row, or a placeholder when
        nothing is marked.
    """
    lines = [f"  • {row.branch}" for row in marked_rows(rows)]
    if not lines:
        return "  (nothing selected)"
    return "\n".join(lines)
