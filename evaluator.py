"""Per-letter feedback for a guess."""

from __future__ import annotations

from grid import Status


def evaluate(guess: str, secret: str) -> tuple[Status, ...]:
    """Score *guess* against *secret* position by position.

    A letter in the right position is RIGHT_PLACE. Any other letter that
    occurs somewhere in the secret is WRONG_PLACE, without counting how often
    it occurs: a secret with a single ``e`` marks every misplaced ``e`` of the
    guess. Remaining letters are WRONG_LETTER.

    Args:
        guess: Guessed word.
        secret: Word to match against.

    Returns:
        One status per position.

    Raises:
        ValueError: If the words differ in length.
    """
    if len(guess) != len(secret):
        raise ValueError(
            f"guess length ({len(guess)}) != secret length ({len(secret)})"
        )
    result: list[Status] = []
    for g, s in zip(guess, secret):
        if g == s:
            result.append(Status.RIGHT_PLACE)
        elif g in secret:
            result.append(Status.WRONG_PLACE)
        else:
            result.append(Status.WRONG_LETTER)
    return tuple(result)
