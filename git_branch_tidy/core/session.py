"""Interactive selection of branches to delete"""
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional

from git_branch_tidy.constants import (
    AFFIRMATIVE_RESPONSES,
    CONFIRM_PROMPT,
    MENU_TEXT,
    SELECTION_PROMPT,
    TOKEN_QUIT,
    TOKEN_SELECT_ALL,
)
from git_branch_tidy.exceptions import InvalidInputError
from git_branch_tidy.formatters import format_deletion_confirmation_items, marked_rows
from git_branch_tidy.logging_config import get_logger
from git_branch_tidy.models.branch import BranchRow
from git_branch_tidy.models.highlight import ColorSpec
from git_branch_tidy.services.display_service import DisplayService

logger = get_logger(__name__)

_ALLOWED_INPUT = re.compile(
    rf"[\d,\s{TOKEN_QUIT}{TOKEN_SELECT_ALL}]+", re.IGNORECASE
)
_MENU_KEYS = re.compile(r"\b[AQ]\b")


class CommandKind(Enum):
    """Kinds of menu input."""
    QUIT = "quit"
    SELECT_ALL = "select-all"
    TOGGLE_IDS = "toggle-ids"
    INVALID = "invalid"


@dataclass(frozen=True)
class Command:
    """One parsed line of menu input."""
    kind: CommandKind
    ids: FrozenSet[int] = frozenset()
    error: Optional[str] = None


class SessionState(Enum):
    PRESENTING = "presenting"
    AWAITING_SELECTION = "awaiting-selection"
    TOGGLING = "toggling"
    SELECTING_ALL = "selecting-all"
    QUITTING = "quitting"
    INVALID = "invalid"
    AWAITING_FINAL_CONFIRMATION = "awaiting-final-confirmation"
    ACCEPTED = "accepted"


class SessionOutcome(Enum):
    QUIT = "quit"
    ACCEPTED = "accepted"


@dataclass
class SessionResult:
    """How a session ended and the rows it ended with."""
    outcome: SessionOutcome
    rows: List[BranchRow] = field(default_factory=list)

    @property
    def to_delete(self) -> List[BranchRow]:
        if self.outcome is not SessionOutcome.ACCEPTED:
            return []
        return marked_rows(self.rows)


def tokenize(raw: str) -> Command:
    """
    Parse one line of menu input.

    Grammar (case-insensitive): anything containing Q quits, otherwise
    anything containing A toggles every row, otherwise a comma separated
    list of IDs toggles those rows. Only digits, commas, whitespace, Q and
    A are accepted.

    Raises:
        InvalidInputError: If the input is empty or outside the grammar
    """
    text = raw.strip()
    if not text:
        raise InvalidInputError(raw, "No selection entered")
    if not _ALLOWED_INPUT.fullmatch(text):
        raise InvalidInputError(raw, "Unrecognized input")

    lowered = text.lower()
    if TOKEN_QUIT in lowered:
        return Command(CommandKind.QUIT)
    if TOKEN_SELECT_ALL in lowered:
        return Command(CommandKind.SELECT_ALL)

    ids = set()
    for item in lowered.split(","):
        item = item.strip()
        if not item:
            continue
        if not item.isdigit():
            raise InvalidInputError(raw, "IDs must be separated by commas")
        ids.add(int(item))
    if not ids:
        raise InvalidInputError(raw, "No branch IDs entered")
    return Command(CommandKind.TOGGLE_IDS, frozenset(ids))


def parse_command(raw: str) -> Command:
    """Like tokenize(), but reports bad input as an INVALID command."""
    try:
        return tokenize(raw)
    except InvalidInputError as e:
        return Command(CommandKind.INVALID, error=str(e))


def is_affirmative(response: str) -> bool:
    return response.strip().lower() in AFFIRMATIVE_RESPONSES


class SelectionSession:
    """Select/confirm loop over a set of candidate rows.

    The loop only ends when the user quits or confirms a deletion plan.
    Declining the confirmation goes back to the table with the current
    marks kept.
    """

    def __init__(self, rows: Iterable[BranchRow], display: DisplayService):
        self.rows: List[BranchRow] = list(rows)
        if not self.rows:
            raise ValueError("SelectionSession needs at least one candidate branch")
        self.display = display
        self.console = display.console
        self.state = SessionState.PRESENTING
        self._transitions: Dict[CommandKind, Callable[[Command], SessionState]] = {
            CommandKind.QUIT: self._on_quit,
            CommandKind.SELECT_ALL: self._on_select_all,
            CommandKind.TOGGLE_IDS: self._on_toggle_ids,
            CommandKind.INVALID: self._on_invalid,
        }

    def toggle(self, ids: Iterable[int]) -> None:
        """Toggle the rows with the given IDs; unknown IDs are ignored."""
        wanted = set(ids)
        for row in self.rows:
            if row.id in wanted:
                row.toggle()

    def toggle_all(self) -> None:
        for row in self.rows:
            row.toggle()

    @property
    def marked(self) -> List[BranchRow]:
        return marked_rows(self.rows)

    def run(self) -> SessionResult:
        """Drive the session until it is quit or accepted."""
        while True:
            if self.state is SessionState.PRESENTING:
                self._present()
                self.state = SessionState.AWAITING_SELECTION
            elif self.state is SessionState.AWAITING_SELECTION:
                command = parse_command(self.console.input(SELECTION_PROMPT))
                logger.debug(f"Menu command: {command}")
                self.state = self._transitions[command.kind](command)
            elif self.state is SessionState.AWAITING_FINAL_CONFIRMATION:
                self.state = self._confirm()
            elif self.state is SessionState.QUITTING:
                return SessionResult(SessionOutcome.QUIT, self.rows)
            elif self.state is SessionState.ACCEPTED:
                return SessionResult(SessionOutcome.ACCEPTED, self.rows)
            else:
                raise RuntimeError(f"Unexpected session state {self.state}")

    def _present(self) -> None:
        self.display.display_candidate_table(self.rows)
        self.display.highlight(MENU_TEXT, _MENU_KEYS, simple_match=False)

    def _on_quit(self, command: Command) -> SessionState:
        logger.info("Selection cancelled by user")
        return SessionState.QUITTING

    def _on_select_all(self, command: Command) -> SessionState:
        self.state = SessionState.SELECTING_ALL
        self.toggle_all()
        return SessionState.AWAITING_FINAL_CONFIRMATION

    def _on_toggle_ids(self, command: Command) -> SessionState:
        self.state = SessionState.TOGGLING
        known = {row.id for row in self.rows}
        unknown = sorted(command.ids - known)
        if unknown:
            logger.debug(f"Ignoring unknown IDs {unknown}")
        self.toggle(command.ids)
        return SessionState.AWAITING_FINAL_CONFIRMATION

    def _on_invalid(self, command: Command) -> SessionState:
        self.state = SessionState.INVALID
        self.display.highlight(
            command.error or "Invalid input", r"'.*'", ColorSpec("red"), simple_match=False
        )
        return SessionState.PRESENTING

    def _confirm(self) -> SessionState:
        self.display.display_candidate_table(self.rows)
        self.display.plain("\nThe following branches will be deleted:")
        self.display.plain(format_deletion_confirmation_items(self.rows))
        if is_affirmative(self.console.input(CONFIRM_PROMPT)):
            return SessionState.ACCEPTED
        return SessionState.PRESENTING
