"""Word list used to validate guesses and draw secret words."""

from __future__ import annotations

import logging
import os
import random
import re
import unicodedata
from collections.abc import Iterable

from filter import apply_solution_filters
from settings import SETTINGS

logger = logging.getLogger("wordgrid.dictionary")

DEFAULT_WORDS_PATH = os.path.join("solutions", "en5.txt")
_LETTERS_RE = re.compile(r"^[a-z]+$")


def _resource_path(relative_path: str) -> str:
    """Return *relative_path* resolved against this module's directory."""
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), relative_path)


def _normalize_word(word: str) -> str:
    """Normalize word to NFC Unicode, stripped and lowercase."""
    return unicodedata.normalize("NFC", word).strip().lower()


class Dictionary:
    """Immutable set of same-length words.

    Args:
        words: Valid guesses. Every word must have ``word_length`` letters.
        word_length: Required word length.
        solutions: Words the secret may be drawn from. Defaults to all words
            and must be a subset of them, so every secret is guessable.
        rng: Random source for :meth:`pick_random`.

    Raises:
        ValueError: On an empty list, a word of the wrong length or with
            characters outside a-z, or a solution that is not a valid guess.
    """

    def __init__(
        self,
        words: Iterable[str],
        word_length: int = SETTINGS.word_length,
        solutions: Iterable[str] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        normalized = sorted({_normalize_word(w) for w in words})
        if not normalized:
            raise ValueError("Dictionary needs at least one word")
        bad = [w for w in normalized if len(w) != word_length]
        if bad:
            raise ValueError(
                f"Words with wrong length (expected {word_length}): {bad[:5]}"
            )
        untypeable = [w for w in normalized if not _LETTERS_RE.match(w)]
        if untypeable:
            raise ValueError(f"Words must use only the letters a-z: {untypeable[:5]}")
        self._words = frozenset(normalized)
        self._word_length = word_length

        if solutions is None:
            candidates = normalized
        else:
            candidates = sorted({_normalize_word(w) for w in solutions})
            missing = [w for w in candidates if w not in self._words]
            if missing:
                raise ValueError(f"Solutions missing from word list: {missing[:5]}")
            if not candidates:
                raise ValueError("Dictionary needs at least one solution")
        self._solutions: tuple[str, ...] = tuple(candidates)
        self._rng = rng if rng is not None else random.Random()

    @property
    def word_length(self) -> int:
        return self._word_length

    @property
    def solutions(self) -> tuple[str, ...]:
        return self._solutions

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def contains(self, word: str) -> bool:
        """Case-insensitive membership test."""
        return _normalize_word(word) in self._words

    def pick_random(self) -> str:
        """Return a solution drawn uniformly at random.

        ``Random.choice`` picks an index uniformly from ``[0, size - 1]``, so
        every candidate has probability ``1 / size``.
        """
        return self._rng.choice(self._solutions)

    def pick_unused(self, used: Iterable[str]) -> str | None:
        """Pick a random solution not in *used*, or None if all have been used."""
        used_norm = {_normalize_word(w) for w in used}
        remaining = [w for w in self._solutions if w not in used_norm]
        if not remaining:
            return None
        word = self._rng.choice(remaining)
        logger.debug("Picked an unused secret (%d left)", len(remaining))
        return word


def read_word_file(path: str) -> list[str]:
    """Read non-empty, stripped lines from a UTF-8 word file.

    Raises:
        FileNotFoundError: If the file does not exist.
        UnicodeDecodeError: If file is not valid UTF-8.
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Word list not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return [w for w in (line.strip() for line in f) if w]


def load_dictionary(
    path: str | None = None,
    word_length: int = SETTINGS.word_length,
    *,
    use_filters: bool = True,
    rng: random.Random | None = None,
) -> Dictionary:
    """Build a Dictionary from a one-word-per-line file.

    Lines that are not purely alphabetic or have the wrong length are skipped.
    Secret candidates pass through the solution filters; if nothing survives,
    every word becomes a candidate.

    Args:
        path: Word file. None uses the bundled ``solutions/en5.txt``.
        word_length: Only keep words of this exact length.
        use_filters: Whether to filter secret candidates.
        rng: Random source handed to the Dictionary.

    Raises:
        FileNotFoundError: If the word file is missing.
        ValueError: If no usable word remains.
    """
    src = path if path is not None else _resource_path(DEFAULT_WORDS_PATH)
    pattern = re.compile(rf"^[a-z]{{{word_length}}}$")

    words: list[str] = []
    seen: set[str] = set()
    skipped = 0
    for raw in read_word_file(src):
        w = _normalize_word(raw)
        if w in seen:
            continue
        if not pattern.match(w):
            skipped += 1
            continue
        seen.add(w)
        words.append(w)

    if not words:
        raise ValueError(f"No {word_length}-letter words found in {src}")
    if skipped:
        logger.info("Skipped %d lines that are not %d-letter words", skipped, word_length)

    solutions = apply_solution_filters(words, enable_filters=use_filters)
    if not solutions:
        logger.warning(
            "Filtered solution list empty for %s; falling back to unfiltered words.",
            src,
        )
        solutions = list(words)

    logger.info(
        "Loaded word list %s (%d words, %d solutions)",
        src,
        len(words),
        len(solutions),
    )
    return Dictionary(words, word_length, solutions=solutions, rng=rng)
