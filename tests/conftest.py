import random

import pytest

from dictionary import Dictionary
from scheduler import ManualScheduler
from session import GameSession

WORDS = [
    "apple",
    "crate",
    "trace",
    "about",
    "berry",
    "chair",
    "dance",
    "eager",
    "fight",
]


@pytest.fixture
def dictionary():
    return Dictionary(WORDS, 5, rng=random.Random(7))


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def make_session(dictionary, scheduler):
    def _make(secret="apple"):
        return GameSession(dictionary, scheduler, secret=secret)

    return _make


def type_word(session, word):
    for ch in word:
        session.add_letter(ch)


def play_word(session, scheduler, word):
    """Type, submit and let the reveal (and any win delay) run out."""
    type_word(session, word)
    session.submit()
    scheduler.run_until_idle()
