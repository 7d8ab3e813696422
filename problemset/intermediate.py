"""Solutions to mid-level problems: strings, greedy choices and sorting."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence

_DUB = "WUB"
_DANGER_RUN = 7
_OUTPUT_INSTRUCTIONS = frozenset("HQ9")


def undub(remix: str) -> str:
    """Recover the original song from a dubstep remix.

    The remix is the song's words with ``WUB`` inserted before, between and
    after them; the words are returned separated by single spaces.
    """
    words = [word for word in remix.split(_DUB) if word]
    if not words:
        raise ValueError("the remix holds no words")
    return " ".join(words)


def is_dangerous(players: str) -> bool:
    """Tell whether seven or more players of one team stand in a row."""
    return "1" * _DANGER_RUN in players or "0" * _DANGER_RUN in players


def produces_output(program: str) -> bool:
    """Tell whether an HQ9+ program prints anything."""
    return not _OUTPUT_INSTRUCTIONS.isdisjoint(program)


def min_puzzle_difference(n: int, pieces: Iterable[int]) -> int:
    """Return the least spread between the largest and smallest of ``n`` chosen puzzles."""
    ordered = sorted(pieces)
    if not 1 <= n <= len(ordered):
        raise ValueError(f"cannot choose {n} puzzles out of {len(ordered)}")
    return min(high - low for low, high in zip(ordered, ordered[n - 1:]))


def min_coins_to_take(coins: Iterable[int]) -> int:
    """Return the fewest coins whose sum is strictly more than the rest."""
    ordered = sorted(coins, reverse=True)
    remaining = sum(ordered)
    taken = 0
    for count, coin in enumerate(ordered, start=1):
        taken += coin
        remaining -= coin
        if taken > remaining:
            return count
    raise ValueError("no choice of coins is worth more than the rest")


def can_defeat_dragons(strength: int, dragons: Iterable[tuple[int, int]]) -> bool:
    """Tell whether every dragon can be beaten.

    Each dragon is a pair of (strength, bonus); beating a dragon needs strictly
    more strength than it has and adds its bonus to the hero's strength.
    """
    for dragon_strength, bonus in sorted(dragons, key=lambda dragon: dragon[0]):
        if strength <= dragon_strength:
            return False
        strength += bonus
    return True


def max_expression(a: int, b: int, c: int) -> int:
    """Return the largest value made from ``a``, ``b``, ``c`` in order with + and *."""
    values: list[float] = [a, b, c]
    pos = 0
    while pos < len(values):
        if values[pos] == 1:
            left = values[pos - 1] if pos > 0 else math.inf
            right = values[pos + 1] if pos < len(values) - 1 else math.inf
            if left < right:
                values[pos - 1:pos + 1] = [left + 1]
            else:
                values[pos:pos + 2] = [right + 1]
        pos += 1
    return int(math.prod(values))


def winning_team(goals: Iterable[str]) -> str:
    """Return the team that scored the most goals, given the scorer of each goal."""
    counts = Counter(goals)
    if not counts:
        raise ValueError("no goals were scored")
    return max(counts, key=counts.__getitem__)


def min_taxis(groups: Iterable[int]) -> int:
    """Return the fewest four-seat taxis that carry every group without splitting one."""
    all_groups = list(groups)
    invalid = [size for size in all_groups if not 1 <= size <= 4]
    if invalid:
        raise ValueError(f"group sizes must be between 1 and 4, got {invalid[0]}")

    sizes = sorted(size for size in all_groups if size != 4)
    taxis = len(all_groups) - len(sizes)
    if len(sizes) < 2:
        return taxis + len(sizes)

    low, high = 0, len(sizes) - 1
    while low < high:
        load = sizes[low] + sizes[high]
        if load > 4:
            high -= 1
        elif load == 4:
            low += 1
            high -= 1
        else:
            low += 1
            while low < high and load + sizes[low] <= 4:
                load += sizes[low]
                low += 1
            high -= 1
        taxis += 1
        if low == high:
            taxis += 1
    return taxis