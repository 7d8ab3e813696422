"""Solutions to short string-processing problems."""

from __future__ import annotations

import string
from collections.abc import Iterable

_BORZE_DIGITS = {".": "0", "-.": "1", "--": "2"}


def bit_plus_plus(statements: Iterable[str]) -> int:
    """Run Bit++ statements on a variable starting at zero and return its value."""
    return sum(1 if "+" in statement else -1 for statement in statements)


def decode_borze(code: str) -> str:
    """Decode a ternary number written in Borze code."""
    digits = []
    pos = 0
    while pos < len(code):
        if code[pos] == ".":
            token = "."
        elif code[pos] == "-":
            token = code[pos:pos + 2]
            if token not in _BORZE_DIGITS:
                raise ValueError(f"incomplete Borze symbol at position {pos}")
        else:
            raise ValueError(f"invalid Borze character {code[pos]!r} at position {pos}")
        digits.append(_BORZE_DIGITS[token])
        pos += len(token)
    return "".join(digits)


def hulk_feeling(n: int) -> str:
    """Describe Dr. Banner's feeling with ``n`` alternating layers."""
    layers = (" that I love" if i % 2 else " that I hate" for i in range(1, n))
    return "I hate" + "".join(layers) + " it"


def is_lucky_ticket(ticket: str) -> bool:
    """Tell whether the first three characters sum to the same as the next three."""
    if len(ticket) < 6:
        raise ValueError("a ticket has six characters")
    return sum(map(ord, ticket[:3])) == sum(map(ord, ticket[3:6]))


def is_pangram(text: str) -> bool:
    """Tell whether the text holds at least 26 distinct characters, ignoring case."""
    return len({char.lower() for char in text}) >= 26


def is_translation(s: str, t: str) -> bool:
    """Tell whether ``t`` is ``s`` written backwards."""
    return s == t[::-1]


def fix_word_case(word: str) -> str:
    """Change the word to the case most of its letters are already in."""
    uppercase = sum(char in string.ascii_uppercase for char in word)
    lowercase = len(word) - uppercase
    return word.upper() if uppercase > lowercase else word.lower()