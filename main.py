"""WordGrid – a six-attempt, five-letter word guessing game.

This module holds the Tkinter front end and the command line entry point.
All game rules live in :mod:`session`; the window only forwards key presses
and redraws whenever the session reports a change.
"""

__version__ = "1.0.0"

import argparse
import logging
import sys
import tkinter as tk
from dataclasses import dataclass
from tkinter import font as tkfont

from dictionary import Dictionary, load_dictionary
from grid import Status
from keys import handle_key
from session import GameSession
from settings import SETTINGS
from style import (
    BODY_FONT_SIZE,
    CELL_BORDER_WIDTH,
    CELL_FONT_SIZE,
    CELL_LABEL_HEIGHT,
    CELL_LABEL_WIDTH,
    COLORS,
    FONT_FAMILY,
    KEY_FONT_SIZE,
    KEYBOARD_ROWS,
    color_for_status,
    compute_layout,
)


@dataclass(frozen=True)
class Fonts:
    """Container for Tk font instances used throughout the UI."""

    body: tkfont.Font
    cell: tkfont.Font
    key: tkfont.Font


def load_fonts(root: tk.Misc) -> Fonts:
    """Create the fonts used by the UI, falling back to Tk's default family."""

    def make(size: int, weight: str = "normal") -> tkfont.Font:
        try:
            return tkfont.Font(root=root, family=FONT_FAMILY, size=size, weight=weight)
        except tk.TclError:
            return tkfont.Font(root=root, size=size, weight=weight)

    return Fonts(
        body=make(BODY_FONT_SIZE),
        cell=make(CELL_FONT_SIZE, "bold"),
        key=make(KEY_FONT_SIZE, "bold"),
    )


def _create_cell_label(parent: tk.Widget, font: tkfont.Font) -> tk.Label:
    """Create an empty board cell."""
    return tk.Label(
        parent,
        text="",
        width=CELL_LABEL_WIDTH,
        height=CELL_LABEL_HEIGHT,
        bg=COLORS.cell_background,
        fg=COLORS.primary_text,
        font=font,
        highlightthickness=CELL_BORDER_WIDTH,
        highlightbackground=COLORS.cell_border,
    )


def play_gui(dictionary: Dictionary) -> None:
    """Run the game in a Tkinter window until it is closed.

    Args:
        dictionary: Word list for guesses and secrets.
    """
    logger = logging.getLogger("wordgrid")

    root = tk.Tk()
    root.title("WordGrid")
    root.configure(bg=COLORS.background)

    fonts = load_fonts(root)
    layout = compute_layout(int(fonts.cell.cget("size")))

    container = tk.Frame(root, bg=COLORS.background)
    container.pack(fill=tk.BOTH, expand=True, padx=layout.outer_padding, pady=layout.outer_padding)

    status_var = tk.StringVar()
    tk.Label(
        container,
        textvariable=status_var,
        fg=COLORS.status_text,
        bg=COLORS.background,
        font=fonts.body,
    ).pack(pady=(0, layout.status_padding_bottom))

    board = tk.Frame(container, bg=COLORS.background)
    board.pack()
    cell_labels: list[list[tk.Label]] = []
    for _ in range(SETTINGS.num_rows):
        row_frame = tk.Frame(board, bg=COLORS.background)
        row_frame.pack(pady=layout.row_pady)
        row_labels = []
        for _ in range(SETTINGS.num_cols):
            lbl = _create_cell_label(row_frame, fonts.cell)
            lbl.pack(side=tk.LEFT, padx=layout.cell_padx)
            row_labels.append(lbl)
        cell_labels.append(row_labels)

    keyboard_frame = tk.Frame(container, bg=COLORS.background)
    keyboard_frame.pack(pady=(layout.keyboard_padding_top, 0))
    key_labels: dict[str, tk.Label] = {}
    for letters in KEYBOARD_ROWS:
        row_frame = tk.Frame(keyboard_frame, bg=COLORS.background)
        row_frame.pack()
        for ch in letters:
            lbl = tk.Label(
                row_frame,
                text=ch,
                width=CELL_LABEL_WIDTH,
                bg=color_for_status(Status.EMPTY, for_keyboard=True),
                fg=COLORS.primary_text,
                font=fonts.key,
            )
            lbl.pack(side=tk.LEFT, padx=layout.key_padx, pady=layout.key_pady)
            key_labels[ch.lower()] = lbl

    footer = tk.Frame(container, bg=COLORS.background)
    footer.pack(side=tk.BOTTOM, fill=tk.X)
    tk.Label(
        footer,
        text=f"v{__version__}",
        fg=COLORS.footer_text,
        bg=COLORS.background,
        font=fonts.body,
    ).pack(side=tk.RIGHT)

    used_secrets: set[str] = set()
    current: dict[str, GameSession] = {}
    restart_button: tk.Button | None = None

    def render() -> None:
        """Redraw board, keyboard and status line from the session snapshot."""
        nonlocal restart_button
        session = current["session"]
        snap = session.snapshot()
        for r, row in enumerate(snap.grid):
            for c, cell in enumerate(row):
                cell_labels[r][c].configure(text=cell.letter, bg=color_for_status(cell.status))
        for letter, lbl in key_labels.items():
            lbl.configure(bg=color_for_status(snap.keyboard.get(letter, Status.EMPTY), for_keyboard=True))

        if snap.player_win:
            status_var.set(f"Solved in {snap.attempts} guesses!")
        elif snap.player_lost:
            status_var.set(f"The word was {session.secret.upper()}.")
        else:
            status_var.set(snap.error_message)

        if snap.is_done and restart_button is None:
            restart_button = tk.Button(
                footer,
                text="New game",
                command=new_game,
                bg=COLORS.cell_border,
                fg=COLORS.primary_text,
                font=fonts.body,
            )
            restart_button.pack(side=tk.LEFT)

    def new_game() -> None:
        """Start a fresh session, avoiding secrets already played in this run."""
        nonlocal restart_button
        if restart_button is not None:
            restart_button.destroy()
            restart_button = None
        secret = dictionary.pick_unused(used_secrets)
        if secret is None:
            used_secrets.clear()
            secret = dictionary.pick_random()
        used_secrets.add(secret)
        session = GameSession(dictionary, root, secret=secret)
        session.subscribe(render)
        current["session"] = session
        logger.info("New game started (%d secrets played)", len(used_secrets))
        render()

    def on_key(event) -> None:
        """Forward Tk key events to the session."""
        handle_key(current["session"], event.keysym, event.char)

    root.bind("<Key>", on_key)
    new_game()
    root.mainloop()


def main() -> None:
    """Parse arguments, load the word list and start the GUI game."""
    parser = argparse.ArgumentParser(description="WordGrid: guess the five-letter word in six tries")
    parser.add_argument(
        "--words",
        type=str,
        default=None,
        metavar="PATH",
        help="Word list with one five-letter word per line (default: bundled English list)",
    )
    parser.add_argument(
        "--no-filters",
        action="store_true",
        help="Allow every listed word as the secret, skipping profanity and blacklist filters.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging (includes the secret word).",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    try:
        dictionary = load_dictionary(args.words, SETTINGS.word_length, use_filters=not args.no_filters)
        play_gui(dictionary)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
