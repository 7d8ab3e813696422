import string

import pytest

from problemset.text import (
    bit_plus_plus,
    decode_borze,
    fix_word_case,
    hulk_feeling,
    is_lucky_ticket,
    is_pangram,
    is_translation,
)


def _encode_borze(digits):
    table = {"0": ".", "1": "-.", "2": "--"}
    return "".join(table[d] for d in digits)


@pytest.mark.parametrize("count", [0, 1, 5])
def test_bit_plus_plus_increments(count):
    assert bit_plus_plus(["X++", "++X"] * count) == 2 * count


@pytest.mark.parametrize("count", [1, 4])
def test_bit_plus_plus_decrements(count):
    assert bit_plus_plus(["X--"] * count) == -count


def test_bit_plus_plus_is_additive():
    first = ["X++", "--X", "++X"]
    second = ["X--", "X--"]
    assert bit_plus_plus(first + second) == bit_plus_plus(first) + bit_plus_plus(second)


@pytest.mark.parametrize("digits", ["0", "012", "2012", "0000", "221100"])
def test_decode_borze_round_trip(digits):
    assert decode_borze(_encode_borze(digits)) == digits


def test_decode_borze_empty():
    assert decode_borze("") == ""


@pytest.mark.parametrize("code", ["-", ".-", "x", ".a."])
def test_decode_borze_rejects_bad_input(code):
    with pytest.raises(ValueError):
        decode_borze(code)


def test_hulk_feeling_single_layer():
    assert hulk_feeling(1) == "I hate it"


@pytest.mark.parametrize("n", [1, 2, 3, 7])
def test_hulk_feeling_structure(n):
    feeling = hulk_feeling(n)
    assert feeling.startswith("I hate")
    assert feeling.endswith(" it")
    assert feeling.count(" that ") == n - 1
    assert feeling.count("love") == n // 2


def test_lucky_ticket_balanced():
    assert is_lucky_ticket("213132")


def test_lucky_ticket_unbalanced():
    assert not is_lucky_ticket("973894")


@pytest.mark.parametrize("half", ["045", "999", "120"])
def test_lucky_ticket_reversed_half(half):
    assert is_lucky_ticket(half + half[::-1])


def test_lucky_ticket_too_short():
    with pytest.raises(ValueError):
        is_lucky_ticket("123")


def test_pangram_full_alphabet():
    assert is_pangram(string.ascii_lowercase)
    assert is_pangram(string.ascii_uppercase[:13] + string.ascii_lowercase[13:])


def test_pangram_missing_letter():
    assert not is_pangram(string.ascii_lowercase[1:] * 3)


def test_translation_reversed():
    assert is_translation("code", "edoc")


def test_translation_mismatch():
    assert not is_translation("abb", "aba")
    assert not is_translation("abc", "cbaa")


@pytest.mark.parametrize("word", ["HoUse", "maTRIx", "aB", "Z"])
def test_fix_word_case_picks_a_case(word):
    assert fix_word_case(word) in (word.upper(), word.lower())


def test_fix_word_case_majority_upper():
    assert fix_word_case("ViP") == "ViP".upper()


def test_fix_word_case_majority_lower():
    assert fix_word_case("HoUse") == "HoUse".lower()


def test_fix_word_case_tie_goes_lower():
    assert fix_word_case("aB") == "aB".lower()