"""Solutions to problems that call for sieves, two pointers and dynamic programming."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from functools import lru_cache
from math import isqrt

_SIEVE_LIMIT = 1_000_001
_MAX_BOREDOM_VALUE = 100_000


@lru_cache(maxsize=None)
def _prime_flags() -> bytearray:
    flags = bytearray([1]) * (_SIEVE_LIMIT + 1)
    flags[0] = flags[1] = 0
    for candidate in range(2, isqrt(_SIEVE_LIMIT) + 1):
        if flags[candidate]:
            start = candidate * candidate
            flags[start::candidate] = bytes(len(range(start, _SIEVE_LIMIT + 1, candidate)))
    return flags


def is_t_prime(number: int) -> bool:
    """Tell whether the number has exactly three positive divisors."""
    if number < 0:
        raise ValueError("number must not be negative")
    root = isqrt(number)
    if root * root != number:
        return False
    if root > _SIEVE_LIMIT:
        raise ValueError(f"number is too large; its root must not exceed {_SIEVE_LIMIT}")
    return bool(_prime_flags()[root])


def max_books(minutes: int, books: Sequence[int]) -> int:
    """Return the most consecutive books that can be read within the given minutes."""
    best = 0
    start = 0
    spent = 0
    for end, book in enumerate(books):
        spent += book
        while spent > minutes:
            spent -= books[start]
            start += 1
        best = max(best, end - start + 1)
    return best


def max_boredom_points(numbers: Iterable[int]) -> int:
    """Return the most points from deleting numbers, where taking ``v`` removes ``v - 1`` and ``v + 1``."""
    counts = Counter(numbers)
    invalid = [value for value in counts if not 0 <= value <= _MAX_BOREDOM_VALUE]
    if invalid:
        raise ValueError(f"numbers must be between 0 and {_MAX_BOREDOM_VALUE}, got {invalid[0]}")
    before_previous, previous = 0, 0
    for value in range(1, max(counts, default=0) + 1):
        before_previous, previous = previous, max(previous, before_previous + counts[value] * value)
    return previous