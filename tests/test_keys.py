import pytest

from conftest import type_word
from keys import handle_key
from settings import INCOMPLETE_WORD_MESSAGE


def test_letters_are_added(make_session):
    session = make_session()
    assert handle_key(session, "a", "a")
    assert handle_key(session, "P", "P")
    assert session.col == 2
    assert session.cell(0, 1).letter == "P"


@pytest.mark.parametrize("keysym", ["BackSpace", "Delete"])
def test_delete_keys(make_session, keysym):
    session = make_session()
    type_word(session, "ab")
    assert handle_key(session, keysym, "\x08")
    assert session.col == 1


@pytest.mark.parametrize("keysym", ["Return", "KP_Enter"])
def test_submit_keys(make_session, keysym):
    session = make_session()
    type_word(session, "ab")
    assert handle_key(session, keysym, "\r")
    assert session.error_message == INCOMPLETE_WORD_MESSAGE


@pytest.mark.parametrize(
    "keysym, char",
    [("Shift_L", ""), ("1", "1"), ("space", " "), ("odiaeresis", "ö"), ("Escape", "\x1b")],
)
def test_other_keys_ignored(make_session, keysym, char):
    session = make_session()
    assert not handle_key(session, keysym, char)
    assert session.col == 0
