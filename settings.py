"""Fixed game constants for WordGrid."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameSettings:
    """Board dimensions and reveal timings (milliseconds)."""

    word_length: int = 5
    num_rows: int = 6
    reveal_interval_ms: int = 200
    error_message_ms: int = 2000
    win_delay_ms: int = 300

    @property
    def num_cols(self) -> int:
        return self.word_length


SETTINGS = GameSettings()

INVALID_WORD_MESSAGE = "Not in word list"
INCOMPLETE_WORD_MESSAGE = "Not enough letters"
