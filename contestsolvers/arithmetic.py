"""Solutions to number-based contest problems."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

_BILLS = (100, 20, 10, 5, 1)
_SEARCH_LIMIT = 1000


def watermelon(weight: int) -> bool:
    """Whether a watermelon can be split into two even, positive parts."""
    return weight % 2 == 0 and weight != 2 and weight > 0


def domino_piling(rows: int, cols: int) -> int:
    """Maximum number of 2x1 dominoes that fit on a rows x cols board."""
    return rows * cols // 2


def lottery_bills(amount: int) -> int:
    """Fewest bills of 1, 5, 10, 20 and 100 that add up to the amount."""
    bills = 0
    for bill in _BILLS:
        count, amount = divmod(amount, bill)
        bills += count
    return bills


def years_to_exceed(limak: int, bob: int) -> int:
    """Years until Limak (tripling yearly) outweighs Bob (doubling yearly)."""
    years = 0
    while limak <= bob:
        limak *= 3
        bob *= 2
        years += 1
    return years


def two_three_moves(distance: int) -> int:
    """Fewest moves of length 2 or 3 (either direction) to reach the point."""
    if distance == 1:
        return 2
    return -(-distance // 3)


def divide_to_one(n: int) -> int:
    """Steps to reach 1 using n/2, 2n/3 and 4n/5, or -1 if it cannot be done."""
    if n < 1:
        raise ValueError("n must be positive")
    steps = 0
    while n != 1:
        if n % 2 == 0:
            n //= 2
        elif n % 3 == 0:
            n = 2 * n // 3
        elif n % 5 == 0:
            n = 4 * n // 5
        else:
            return -1
        steps += 1
    return steps


def _digits(n: int) -> Iterator[int]:
    while n:
        n, digit = divmod(n, 10)
        yield digit


def only_one_digit(n: int) -> int:
    """Smallest decimal digit of n (10 when n is zero)."""
    if n < 0:
        raise ValueError("n must not be negative")
    return min(_digits(n), default=10)


def count_system_solutions(n: int, m: int) -> int:
    """Count pairs 0 <= a, b <= 1000 with a*a + b == n and a + b*b == m."""
    count = 0
    for a in range(_SEARCH_LIMIT + 1):
        b = n - a * a
        if 0 <= b <= _SEARCH_LIMIT and a + b * b == m:
            count += 1
    return count


def horseshoes_to_buy(colors: Sequence[int]) -> int:
    """How many horseshoes must be bought so that all colours differ."""
    return len(colors) - len(set(colors))


def arithmetic_array(values: Iterable[int]) -> int:
    """Fewest integers to append so the array's mean becomes exactly 1."""
    items = list(values)
    total, size = sum(items), len(items)
    return 1 if total < size else total - size


def election_votes(a: int, b: int, c: int) -> tuple[int, int, int]:
    """Votes each candidate needs to strictly beat both others."""
    win_a = 0 if a > b and a > c else max(b, c) + 1 - a
    win_b = 0 if b > a and b > c else max(a, c) + 1 - b
    win_c = 0 if c > a and c > b else max(a, b) + 1 - c
    return win_a, win_b, win_c