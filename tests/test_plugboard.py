"""Tests for the keyboard, the plugboard and the standalone swap function."""

import pytest

from errors import ConfigurationError, PlugboardError
from keyboard_and_plugboard import Keyboard, Plugboard, normalise_pairs, plugboard_swap
from rotor_and_reflector import ALPHABET


def test_plugboard_swap_pairs() -> None:
    pairs = [("A", "B"), ("C", "D")]
    assert plugboard_swap("A", pairs) == "B"
    assert plugboard_swap("B", pairs) == "A"
    assert plugboard_swap("C", pairs) == "D"
    assert plugboard_swap("D", pairs) == "C"
    assert plugboard_swap("E", pairs) == "E"


@pytest.mark.parametrize(
    "pairs",
    [
        [],
        [("A", "B"), ("C", "D")],
        ["AZ", "BY", "CX", "DW"],
        [a + b for a, b in zip(ALPHABET[::2], ALPHABET[1::2])],
    ],
)
def test_plugboard_swap_is_involution(pairs) -> None:
    for ch in ALPHABET:
        assert plugboard_swap(plugboard_swap(ch, pairs), pairs) == ch


def test_plugboard_swap_keeps_case_and_non_letters() -> None:
    assert plugboard_swap("a", ["AB"]) == "b"
    assert plugboard_swap("e", ["AB"]) == "e"
    assert plugboard_swap("1", ["AB"]) == "1"


def test_normalise_pairs_accepts_strings_and_tuples() -> None:
    assert normalise_pairs(["ab", ("c", "D")]) == [("A", "B"), ("C", "D")]


@pytest.mark.parametrize(
    "pairs",
    [
        [("A", "B"), ("B", "C")],   # B twice
        ["AB", "CA"],               # A twice
        ["AA"],
        ["A1"],
        ["ABC"],
        [("A",)],
        [("A", "B", "C")],
        [(1, 2)],
        [("AB", "C")],
        [("", "B"), ("A", "C")],
        [("XYZ", "Q")],
        ["aß"],
    ],
)
def test_bad_pairs_rejected(pairs) -> None:
    with pytest.raises(PlugboardError) as exc_info:
        Plugboard(pairs)
    assert exc_info.value.pair in pairs
    assert isinstance(exc_info.value, ConfigurationError)


def test_plugboard_swap_on_indices() -> None:
    pb = Plugboard(["AB", "YZ"])
    assert pb.swap(0) == 1
    assert pb.swap(1) == 0
    assert pb.swap(25) == 24
    assert pb.swap(4) == 4
    assert pb.pairs == (("A", "B"), ("Y", "Z"))


def test_full_plugboard_of_thirteen_pairs() -> None:
    pairs = [a + b for a, b in zip(ALPHABET[::2], ALPHABET[1::2])]
    pb = Plugboard(pairs)
    assert all(pb.swap(i) != i for i in range(26))


def test_empty_plugboard_is_identity() -> None:
    pb = Plugboard()
    assert [pb.swap(i) for i in range(26)] == list(range(26))


def test_keyboard_round_trip() -> None:
    kb = Keyboard()
    assert kb.forward("A") == 0
    assert kb.backward(25) == "Z"
    assert "Q" in kb
    assert "q" not in kb


def test_keyboard_rejects_bad_input() -> None:
    kb = Keyboard()
    with pytest.raises(ValueError):
        kb.forward("1")
    with pytest.raises(IndexError):
        kb.backward(26)


def test_plugboard_swap_ignores_letters_that_only_upper_case_into_a_z() -> None:
    assert plugboard_swap("ı", ["IJ"]) == "ı"
    assert plugboard_swap("ß", ["SZ"]) == "ß"
