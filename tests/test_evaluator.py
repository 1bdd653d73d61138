import pytest

from evaluator import evaluate
from grid import Status

R, W, X = Status.RIGHT_PLACE, Status.WRONG_PLACE, Status.WRONG_LETTER


def test_trace_against_crate():
    assert evaluate("trace", "crate") == (W, R, R, W, R)


def test_exact_match_is_all_right_place():
    assert evaluate("apple", "apple") == (R,) * 5


def test_absent_letters():
    assert evaluate("fight", "apple") == (X,) * 5


def test_repeated_letters_are_not_count_limited():
    # "crate" has a single e, yet every misplaced e is marked.
    assert evaluate("geese", "crate") == (X, W, W, X, R)


@pytest.mark.parametrize(
    "guess, secret",
    [
        ("eager", "crate"),
        ("berry", "apple"),
        ("dance", "chair"),
        ("about", "trace"),
        ("llama", "apple"),
    ],
)
def test_matches_positional_rule(guess, secret):
    statuses = evaluate(guess, secret)
    for g, s, status in zip(guess, secret, statuses):
        if g == s:
            assert status is R
        elif g in secret:
            assert status is W
        else:
            assert status is X


def test_length_mismatch():
    with pytest.raises(ValueError):
        evaluate("crates", "crate")
