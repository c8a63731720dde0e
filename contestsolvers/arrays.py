"""Solutions to contest problems over lists and matrices."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence


def next_round(scores: Sequence[int], k: int) -> int:
    """Participants with a positive score at least the k-th place score."""
    if not 1 <= k <= len(scores):
        raise ValueError("k must be between 1 and the number of scores")
    threshold = scores[k - 1]
    return sum(1 for score in scores if score > 0 and score >= threshold)


def equal_candies(counts: Sequence[int]) -> int:
    """Candies to eat so that every box holds as many as the smallest."""
    smallest = min(counts, default=0)
    return sum(count - smallest for count in counts)


def can_be_increasing(values: Sequence[int]) -> bool:
    """Whether the values can be reordered into a strictly increasing array."""
    return len(set(values)) == len(values)


def good_kid_product(digits: Sequence[int]) -> int:
    """Largest product after adding one to exactly one digit."""
    if not digits:
        raise ValueError("at least one digit is required")
    ordered = sorted(digits)
    ordered[0] += 1
    return math.prod(ordered)


def team_problems(opinions: Iterable[Sequence[int]]) -> int:
    """Problems that at least two of the three friends are sure about."""
    return sum(1 for row in opinions if sum(1 for v in row if v) >= 2)


def descending_permutation(n: int) -> list[int] | None:
    """A permutation of 1..n that works, or None when n is odd."""
    if n % 2 != 0:
        return None
    return list(range(n, 0, -1))


def sereja_and_dima(cards: Sequence[int]) -> tuple[int, int]:
    """Scores of Sereja and Dima when each greedily takes the larger end card."""
    row = deque(cards)
    scores = [0, 0]
    turn = 0
    while row:
        card = row.popleft() if row[0] > row[-1] else row.pop()
        scores[turn] += card
        turn ^= 1
    return scores[0], scores[1]


def choosing_teams(participations: Iterable[int], k: int) -> int:
    """Teams of three who can all still take part at least k more times."""
    qualified = sum(1 for taken in participations if taken + k <= 5)
    return qualified // 3


def can_pass_all_levels(n: int, x_levels: Iterable[int], y_levels: Iterable[int]) -> bool:
    """Whether the two players together can pass every level from 1 to n."""
    passed = set(x_levels) | set(y_levels)
    return set(range(1, n + 1)) <= passed


def form_teams(skills: Sequence[int]) -> list[tuple[int, int, int]]:
    """Teams of a programmer, a mathematician and an athlete, by 1-based index."""
    groups: dict[int, list[int]] = {1: [], 2: [], 3: []}
    for index, skill in enumerate(skills, start=1):
        if skill in groups:
            groups[skill].append(index)
    return list(zip(groups[1], groups[2], groups[3]))


def good_matrix_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Sum of the diagonals, middle row and middle column of a square matrix."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    mid = (n - 1) // 2
    main = sum(matrix[i][i] for i in range(n))
    anti = sum(matrix[n - 1 - i][i] for i in range(n) if i != mid)
    row = sum(value for i, value in enumerate(matrix[mid]) if i != mid) if n else 0
    col = sum(matrix[i][mid] for i in range(n) if i != mid)
    return main + anti + row + col