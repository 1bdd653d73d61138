"""Centralized styling constants and helpers for WordGrid's UI."""

from __future__ import annotations

from dataclasses import dataclass

from grid import Status


@dataclass(frozen=True)
class Colors:
    """Color palette used across the WordGrid UI."""

    background: str = "#121212"
    cell_background: str = "#121212"
    cell_border: str = "#3a3a3c"
    right_place: str = "#538d4e"
    wrong_place: str = "#b59f3b"
    wrong_letter: str = "#3a3a3c"
    key_background: str = "#818384"
    primary_text: str = "#ffffff"
    status_text: str = "#ffa500"
    footer_text: str = "#666666"


@dataclass(frozen=True)
class Layout:
    """Layout and spacing guidelines for WordGrid widgets."""

    outer_padding: int = 8
    status_padding_bottom: int = 6
    keyboard_padding_top: int = 8
    row_pady: int = 2
    cell_padx: int = 2
    key_padx: int = 2
    key_pady: int = 1


COLORS = Colors()

CELL_LABEL_WIDTH = 2
CELL_LABEL_HEIGHT = 1
CELL_BORDER_WIDTH = 2

FONT_FAMILY = "Helvetica"
BODY_FONT_SIZE = 12
CELL_FONT_SIZE = 20
KEY_FONT_SIZE = 11

KEYBOARD_ROWS = ("QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM")


def color_for_status(status: Status, *, for_keyboard: bool = False) -> str:
    """Return the background color for a cell or key in the given status."""

    if status is Status.RIGHT_PLACE:
        return COLORS.right_place
    if status is Status.WRONG_PLACE:
        return COLORS.wrong_place
    if status is Status.WRONG_LETTER:
        return COLORS.wrong_letter
    if status is Status.EMPTY:
        return COLORS.key_background if for_keyboard else COLORS.cell_background
    raise ValueError(f"Unknown status: {status!r}")


def compute_layout(cell_font_size: int) -> Layout:
    """Return a Layout scaled proportionally to the current cell font size."""

    base_size = CELL_FONT_SIZE or 12
    scale = max(0.5, abs(cell_font_size or base_size) / base_size)

    def scaled(value: int, minimum: int = 0) -> int:
        return max(minimum, int(round(value * scale)))

    return Layout(
        outer_padding=scaled(8, 2),
        status_padding_bottom=scaled(6, 2),
        keyboard_padding_top=scaled(8, 2),
        row_pady=scaled(2, 1),
        cell_padx=scaled(2, 1),
        key_padx=scaled(2, 1),
        key_pady=scaled(1, 0),
    )
