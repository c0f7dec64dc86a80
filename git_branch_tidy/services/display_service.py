"""Display service for candidate tables and status lines"""
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from git_branch_tidy.constants import COLUMNS, ERROR_COLOR, SUCCESS_COLOR
from git_branch_tidy.exceptions import InvalidPatternError
from git_branch_tidy.formatters import format_delete_flag, format_selection_summary, get_row_style
from git_branch_tidy.logging_config import get_logger
from git_branch_tidy.models.branch import BranchRow
from git_branch_tidy.models.highlight import ColorSpec
from git_branch_tidy.services.highlighter import Highlighter, PatternLike

logger = get_logger(__name__)


class DisplayService:
    def __init__(
        self,
        console: Optional[Console] = None,
        highlight_color: str = "yellow",
        notice_color: str = "cyan",
    ):
        self.console = console or Console()
        self.highlight_color = ColorSpec(highlight_color)
        self.notice_color = ColorSpec(notice_color)
        self.highlighter = Highlighter(self.console, self.highlight_color)

    def display_candidate_table(self, rows: List[BranchRow], show_summary: bool = True) -> None:
        """Display the candidate rows as an ID / Branch / DELETE table."""
        table = Table()
        for col in COLUMNS:
            table.add_column(col.label, min_width=col.width or None)

        for row in rows:
            table.add_row(
                str(row.id),
                Text(row.branch),
                format_delete_flag(row.marked_for_deletion),
                style=get_row_style(row),
            )

        self.console.print(table)
        if show_summary:
            self.console.print(format_selection_summary(rows), style="dim", highlight=False)

    def highlight(
        self,
        text: str,
        pattern: PatternLike,
        color: Optional[ColorSpec] = None,
        simple_match: bool = True,
        whole_line: bool = False,
    ) -> None:
        """Print text with pattern matches colorized.

        A bad pattern only costs this one line: the error is reported and
        the caller carries on.
        """
        try:
            self.highlighter.highlight(text, pattern, color, simple_match, whole_line)
        except InvalidPatternError as e:
            logger.warning(str(e))
            self.error(str(e))

    def notice(self, text: str) -> None:
        self.console.print(Text(text, style=self.notice_color.style))

    def success(self, text: str) -> None:
        self.console.print(Text(text, style=SUCCESS_COLOR))

    def error(self, text: str) -> None:
        self.console.print(Text(text, style=ERROR_COLOR))

    def plain(self, text: str = "") -> None:
        self.console.print(Text(text))
