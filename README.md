# problemset

Small, self-contained solutions to classic competitive-programming problems.
Each solution is an ordinary Python function that takes its input as arguments
and returns its answer. Invalid input raises `ValueError` where a function
checks for it.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `problemset.text`

String problems.

- `bit_plus_plus(statements)`: the value of a variable that starts at zero,
  raised by one for each statement containing `+` and lowered by one for
  every other statement.
- `decode_borze(code)`: decodes Borze code (`.` → 0, `-.` → 1, `--` → 2);
  raises `ValueError` on an unknown character or an incomplete symbol.
- `hulk_feeling(n)`: "I hate that I love that I hate ... it" with `n` layers.
- `is_lucky_ticket(ticket)`: whether the first three characters sum to the
  same as the next three; raises `ValueError` for fewer than six characters.
- `is_pangram(text)`: whether the text holds at least 26 distinct characters,
  ignoring case.
- `is_translation(s, t)`: whether `t` is `s` written backwards.
- `fix_word_case(word)`: upper-cases the word if most of its letters are
  upper case, otherwise lower-cases it.

### `problemset.counting`

Counting and arithmetic.

- `division(rating)`: contest division 1–4 for a rating.
- `average_orange(percentages)`: the mean of the percentages; raises
  `ValueError` when empty.
- `elephant_steps(x)`: fewest steps of length at most five to reach `x`.
- `football_scores(n, a, b)`: spreads `a` and `b` goals over `n` matches with
  as many draws as possible; returns the number of draws and a list of
  `(goals_a, goals_b)` scores.
- `count_uniform_games(matches)`: from `(home colour, guest colour)` pairs,
  counts games where the host wears its guest uniform.
- `count_magnet_groups(magnets)`: number of runs of equal consecutive magnets.
- `count_ahead(a, others)`: how many distances in `others` exceed `a`.
- `gift_givers(recipients)`: for each friend, who gave them a gift (friends
  numbered from 1); raises `ValueError` on an out-of-range recipient.
- `has_sum_triple(a, b, c)`: whether one number is the sum of the other two.
- `count_solved(opinions)`: problems where more than one vote is a 1.
- `tram_capacity(stops)`: least capacity for `(exits, entries)` per stop.
- `can_divide_watermelon(weight)`: whether the weight splits into two
  positive even parts.

### `problemset.intermediate`

Greedy choices and sorting.

- `undub(remix)`: removes `WUB` separators and joins the words with single
  spaces; raises `ValueError` if no words remain.
- `is_dangerous(players)`: whether seven `1`s or seven `0`s stand in a row.
- `produces_output(program)`: whether an HQ9+ program contains `H`, `Q` or `9`.
- `min_puzzle_difference(n, pieces)`: least spread among `n` chosen values;
  raises `ValueError` if `n` is out of range.
- `min_coins_to_take(coins)`: fewest coins whose sum is strictly more than
  the rest; raises `ValueError` if there is no such choice.
- `can_defeat_dragons(strength, dragons)`: whether all `(strength, bonus)`
  dragons can be beaten in order of strength.
- `max_expression(a, b, c)`: largest value from `a`, `b`, `c` in order using
  `+` and `*`.
- `winning_team(goals)`: the team named most often; raises `ValueError` when
  empty.
- `min_taxis(groups)`: fewest four-seat taxis for groups of 1–4; raises
  `ValueError` on any other size.

### `problemset.advanced`

Sieves, two pointers and dynamic programming.

- `is_t_prime(number)`: whether the number has exactly three divisors (the
  square of a prime); the root may be at most 1,000,001.
- `max_books(minutes, books)`: most consecutive books readable in the time.
- `max_boredom_points(numbers)`: most points when taking `v` removes every
  `v - 1` and `v + 1`; values must lie between 0 and 100,000.

## Example

```python
from problemset.text import decode_borze
from problemset.intermediate import undub
from problemset.advanced import is_t_prime

decode_borze(".-.--")             # "012"
undub("WUBWUBABCWUB")             # "ABC"
is_t_prime(4)                     # True
```

## What it does not do

The package is a library only. It has no command-line program and does not
read problem input from standard input or print answers; call the functions
with already parsed values.