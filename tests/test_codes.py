import string

import pytest

from purpengine.codes import Key, MouseButton


@pytest.mark.parametrize("letter", string.ascii_uppercase)
def test_letter_keys_match_ascii(letter):
    assert Key(ord(letter)) is Key[letter]


@pytest.mark.parametrize("digit", string.digits)
def test_digit_keys_match_ascii(digit):
    assert Key(ord(digit)) is Key[f"DIGIT_{digit}"]


@pytest.mark.parametrize(
    "char, name",
    [(" ", "SPACE"), ("'", "APOSTROPHE"), (",", "COMMA"), ("-", "MINUS"), (".", "PERIOD"), ("/", "SLASH")],
)
def test_punctuation_keys_match_ascii(char, name):
    assert Key(ord(char)) is Key[name]


@pytest.mark.parametrize(
    "value, name",
    [(256, "ESCAPE"), (258, "TAB"), (259, "BACKSPACE"), (342, "LEFT_ALT")],
)
def test_function_keys(value, name):
    assert Key(value) is Key[name]


def test_lookup_by_value():
    assert Key(32) is Key.SPACE
    assert Key(263) is Key.LEFT


def test_unknown_key_value_raises():
    with pytest.raises(ValueError):
        Key(1000)


def test_mouse_aliases():
    assert MouseButton(0) is MouseButton.LEFT
    assert MouseButton(1) is MouseButton.RIGHT
    assert MouseButton(2) is MouseButton.MIDDLE


def test_mouse_buttons_are_zero_based_and_consecutive():
    by_value = [MouseButton(n) for n in range(8)]
    assert by_value == [MouseButton[f"BUTTON_{n}"] for n in range(1, 9)]