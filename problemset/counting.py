"""Solutions to short counting and arithmetic problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, groupby


def division(rating: int) -> int:
    """Return the contest division for a rating."""
    if rating > 1899:
        return 1
    if rating > 1599:
        return 2
    if rating > 1399:
        return 3
    return 4


def average_orange(percentages: Sequence[float]) -> float:
    """Return the orange-juice share of a cocktail mixed in equal parts."""
    if not percentages:
        raise ValueError("at least one drink is needed")
    return sum(percentages) / len(percentages)


def elephant_steps(x: int) -> int:
    """Return the fewest steps of length at most five needed to reach ``x``."""
    steps, rest = divmod(x, 5)
    return steps + (1 if rest else 0)


def football_scores(n: int, a: int, b: int) -> tuple[int, list[tuple[int, int]]]:
    """Spread ``a`` and ``b`` goals over ``n`` matches with as many draws as possible.

    Returns the number of draws and the score of every match.
    """
    if n == 1:
        return (1 if a == b else 0), [(a, b)]
    if a + b < n:
        draws = n - (a + b)
        return draws, [(1, 0)] * a + [(0, 1)] * b + [(0, 0)] * draws
    if a < n:
        wins_b = n - a - 1
        return 0, [(1, 0)] * a + [(0, 1)] * wins_b + [(0, b - wins_b)]
    if b < n:
        wins_a = n - b - 1
        return 0, [(0, 1)] * b + [(1, 0)] * wins_a + [(a - wins_a, 0)]
    return 0, [(1, 0)] * (n - 2) + [(a - (n - 2), 0), (0, b)]


def count_uniform_games(matches: Iterable[tuple[int, int]]) -> int:
    """Count games where the host plays in its guest uniform.

    Each match is a pair of (home colour, guest colour) of one team.
    """
    home: Counter[int] = Counter()
    guest: Counter[int] = Counter()
    for home_colour, guest_colour in matches:
        home[home_colour] += 1
        guest[guest_colour] += 1
    return sum(count * guest[colour] for colour, count in home.items() if colour in guest)


def count_magnet_groups(magnets: Iterable[str]) -> int:
    """Count groups of consecutive magnets laid the same way."""
    return sum(1 for _ in groupby(magnets))


def count_ahead(a: int, others: Iterable[int]) -> int:
    """Count participants who ran further than ``a``."""
    return sum(1 for distance in others if distance > a)


def gift_givers(recipients: Sequence[int]) -> list[int]:
    """For each friend, return who gave them a gift.

    ``recipients[i]`` is the friend (numbered from 1) that friend ``i + 1`` gave to.
    """
    n = len(recipients)
    givers = [0] * n
    for giver, recipient in enumerate(recipients, start=1):
        if not 1 <= recipient <= n:
            raise ValueError(f"recipient {recipient} is out of range 1..{n}")
        givers[recipient - 1] = giver
    return givers


def has_sum_triple(a: int, b: int, c: int) -> bool:
    """Tell whether one of the numbers is the sum of the other two."""
    low, mid, high = sorted((a, b, c))
    return low + mid == high


def count_solved(opinions: Iterable[Iterable[int]]) -> int:
    """Count problems that more than one friend is sure about."""
    return sum(1 for votes in opinions if sum(votes) > 1)


def tram_capacity(stops: Iterable[tuple[int, int]]) -> int:
    """Return the least tram capacity for the given (exits, entries) at each stop."""
    loads = accumulate(entering - leaving for leaving, entering in stops)
    return max(loads, default=0) if True else 0


def can_divide_watermelon(weight: int) -> bool:
    """Tell whether the weight splits into two positive even parts."""
    return not (weight == 2 or weight % 2)