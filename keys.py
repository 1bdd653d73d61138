"""Translate raw key events into session operations."""

from __future__ import annotations

from session import GameSession

SUBMIT_KEYS = frozenset({"Return", "KP_Enter"})
DELETE_KEYS = frozenset({"BackSpace", "Delete"})


def handle_key(session: GameSession, keysym: str, char: str = "") -> bool:
    """Dispatch one key press to *session*.

    Args:
        session: Session receiving the input.
        keysym: Tk key symbol, e.g. ``"Return"`` or ``"a"``.
        char: Character produced by the key, empty for control keys.

    Returns:
        True if the key mapped to an operation, False if it was ignored.
    """
    if keysym in SUBMIT_KEYS:
        session.submit()
        return True
    if keysym in DELETE_KEYS:
        session.remove_letter()
        return True
    if len(char) == 1 and char.isascii() and char.isalpha():
        session.add_letter(char)
        return True
    return False
