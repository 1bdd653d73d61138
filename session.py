"""Game session: cursor, turn handling and the timed reveal.

A session owns the secret word, the grid and the cursor. Callers drive it
through :meth:`GameSession.add_letter`, :meth:`GameSession.remove_letter` and
:meth:`GameSession.submit`, and read it back through
:meth:`GameSession.snapshot`. Submitting a valid guess starts a reveal that
sets one column's status per tick on the supplied scheduler; input is ignored
until the reveal, and the win delay chained after it, have finished.
"""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass
from typing import Any, Callable

from dictionary import Dictionary
from evaluator import evaluate
from grid import Cell, Grid, Status
from scheduler import Scheduler
from settings import (
    INCOMPLETE_WORD_MESSAGE,
    INVALID_WORD_MESSAGE,
    SETTINGS,
    GameSettings,
)

logger = logging.getLogger("wordgrid.session")

Listener = Callable[[], None]

# Keyboard precedence: a letter keeps the best status it has been shown with.
_STATUS_RANK = {
    Status.WRONG_LETTER: 0,
    Status.WRONG_PLACE: 1,
    Status.RIGHT_PLACE: 2,
}


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of a session for the presentation layer."""

    grid: tuple[tuple[Cell, ...], ...]
    row: int
    col: int
    player_win: bool
    player_lost: bool
    error_message: str
    revealing: bool
    attempts: int
    keyboard: dict[str, Status]

    @property
    def is_done(self) -> bool:
        return self.player_win or self.player_lost


class GameSession:
    """One game from the first letter to a win or a loss.

    Args:
        dictionary: Word list for validating guesses and drawing the secret.
        scheduler: Timer source (a Tk root or a ``ManualScheduler``).
        secret: Fixed secret word; drawn from the dictionary when omitted.
        settings: Board dimensions and timings.

    Raises:
        ValueError: If *secret* is not a word of the dictionary or the
            dictionary's word length does not match the settings.
    """

    def __init__(
        self,
        dictionary: Dictionary,
        scheduler: Scheduler,
        secret: str | None = None,
        settings: GameSettings = SETTINGS,
    ) -> None:
        if dictionary.word_length != settings.word_length:
            raise ValueError(
                f"Dictionary word length {dictionary.word_length} != "
                f"{settings.word_length}"
            )
        if secret is None:
            secret = dictionary.pick_random()
        elif not dictionary.contains(secret):
            raise ValueError(f"secret {secret!r} is not in the word list")

        self._dictionary = dictionary
        self._scheduler = scheduler
        self._settings = settings
        self._secret = secret.strip().lower()
        self._grid = Grid(settings.num_rows, settings.num_cols)

        self._row = 0
        self._col = 0
        self._player_win = False
        self._player_lost = False
        self._error_message = ""
        self._revealing = False

        self._reveal_handle: Any = None
        self._error_handle: Any = None
        self._win_handle: Any = None
        self._listeners: list[Listener] = []

        logger.debug("Secret for this session: '%s'", self._secret)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def row(self) -> int:
        return self._row

    @property
    def col(self) -> int:
        return self._col

    @property
    def player_win(self) -> bool:
        return self._player_win

    @property
    def player_lost(self) -> bool:
        return self._player_lost

    @property
    def error_message(self) -> str:
        return self._error_message

    @property
    def revealing(self) -> bool:
        return self._revealing

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def attempts(self) -> int:
        """Number of evaluated guesses, including a winning one."""
        return self._row + (1 if self._player_win else 0)

    @property
    def secret(self) -> str:
        """Reveal the secret word (only after the game is over)."""
        if not self.is_done():
            raise RuntimeError("Game is still in progress")
        return self._secret

    def is_done(self) -> bool:
        return self._player_win or self._player_lost

    def cell(self, row: int, col: int) -> Cell:
        return self._grid.cell(row, col)

    def keyboard_state(self) -> dict[str, Status]:
        """Return the best revealed status of every guessed letter, keyed by lowercase letter."""
        best: dict[str, Status] = {}
        for row in self._grid.rows():
            for cell in row:
                if cell.status is Status.EMPTY or not cell.letter:
                    continue
                key = cell.letter.lower()
                current = best.get(key)
                if current is None or _STATUS_RANK[cell.status] > _STATUS_RANK[current]:
                    best[key] = cell.status
        return best

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            grid=self._grid.rows(),
            row=self._row,
            col=self._col,
            player_win=self._player_win,
            player_lost=self._player_lost,
            error_message=self._error_message,
            revealing=self._revealing,
            attempts=self.attempts,
            keyboard=self.keyboard_state(),
        )

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> None:
        """Call *listener* after every state change."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    # ------------------------------------------------------------------
    # Input operations
    # ------------------------------------------------------------------

    def _accepts_input(self) -> bool:
        return not self.is_done() and not self._revealing

    def add_letter(self, ch: str) -> None:
        """Write *ch* at the cursor and move right.

        Ignored when the game is over, a reveal is running, *ch* is not a
        single ASCII letter, or the row is already full.
        """
        if not self._accepts_input():
            return
        if not isinstance(ch, str) or len(ch) != 1 or ch not in string.ascii_letters:
            return
        if self._col >= self._settings.num_cols:
            return
        self._grid.write(self._row, self._col, ch.upper())
        self._col += 1
        self._notify()

    def remove_letter(self) -> None:
        """Step back one column (never past the first) and clear that cell."""
        if not self._accepts_input():
            return
        self._col = max(0, self._col - 1)
        self._grid.clear(self._row, self._col)
        self._notify()

    def submit(self) -> None:
        """Evaluate the current row.

        Incomplete rows and unknown words only raise an advisory message.
        A valid guess starts the reveal.
        """
        if not self._accepts_input():
            return
        word = self._grid.read_row_text(self._row)
        if not self._grid.is_row_full(self._row):
            logger.info("Guess '%s' rejected: incomplete row", word)
            self._show_error(INCOMPLETE_WORD_MESSAGE)
            return
        if not self._dictionary.contains(word):
            logger.info("Guess '%s' rejected: not in word list", word)
            self._show_error(INVALID_WORD_MESSAGE)
            return

        statuses = evaluate(word, self._secret)
        logger.debug("Row %d guess '%s' scored %s", self._row, word, [s.name for s in statuses])
        self._start_reveal(word, statuses)

    # ------------------------------------------------------------------
    # Advisory message
    # ------------------------------------------------------------------

    def _show_error(self, message: str) -> None:
        if self._error_handle is not None:
            self._scheduler.after_cancel(self._error_handle)
        self._error_message = message
        self._error_handle = self._scheduler.after(
            self._settings.error_message_ms, self._clear_error
        )
        self._notify()

    def _clear_error(self) -> None:
        self._error_handle = None
        self._error_message = ""
        self._notify()

    # ------------------------------------------------------------------
    # Reveal
    # ------------------------------------------------------------------

    def _start_reveal(self, word: str, statuses: tuple[Status, ...]) -> None:
        if self._reveal_handle is not None:
            self._scheduler.after_cancel(self._reveal_handle)
            self._reveal_handle = None
        self._revealing = True
        self._schedule_tick(word, statuses, self._row, 0)
        self._notify()

    def _schedule_tick(
        self, word: str, statuses: tuple[Status, ...], row: int, col: int
    ) -> None:
        self._reveal_handle = self._scheduler.after(
            self._settings.reveal_interval_ms,
            lambda: self._reveal_tick(word, statuses, row, col),
        )

    def _reveal_tick(
        self, word: str, statuses: tuple[Status, ...], row: int, col: int
    ) -> None:
        self._reveal_handle = None
        self._grid.set_status(row, col, statuses[col])
        if col + 1 < self._settings.num_cols:
            self._schedule_tick(word, statuses, row, col + 1)
            self._notify()
            return
        self._finish_reveal(word)

    def _finish_reveal(self, word: str) -> None:
        if word == self._secret:
            # Input stays gated until the win is declared.
            self._win_handle = self._scheduler.after(
                self._settings.win_delay_ms, self._declare_win
            )
            self._notify()
            return
        self._move_to_next_row()
        self._revealing = False
        self._notify()

    def _declare_win(self) -> None:
        self._win_handle = None
        self._player_win = True
        self._revealing = False
        logger.info("Player won in %d guesses", self.attempts)
        self._notify()

    def _move_to_next_row(self) -> None:
        self._row += 1
        self._col = 0
        if self._row == self._settings.num_rows:
            self._player_lost = True
            logger.info("Player lost; the word was '%s'", self._secret)
