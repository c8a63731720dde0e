"""Solutions to assorted gym contest problems."""

from __future__ import annotations

import enum
import math
from collections import deque
from collections.abc import Iterable, Sequence
from functools import lru_cache
from itertools import combinations, cycle, islice

from .arrays import good_kid_product

_DIRECTIONS = "NESW"
_START_DIRECTION = "E"
_TURNS = {"0": 1, "1": -1}
_MOVES = {"U": (0, 1), "D": (0, -1), "L": (-1, 0), "R": (1, 0)}
_INGREDIENTS = ("Barley", "Hops", "Malt")
_FILES = "abcdefgh"
_RANKS = range(1, 9)
_SIEVE_LIMIT = 31623  # about the square root of 10**9


class _Action(enum.Enum):
    SIGN = 0
    REJECT = 1
    SEND_BOTTOM = 2


def add_numbers(a: int, b: int) -> int:
    """Sum of two integers."""
    return a + b


def least_common_multiple(a: int, b: int) -> int:
    """Least common multiple of two integers."""
    return math.lcm(a, b)


def pig_latin_word(word: str) -> str:
    """Move the first letter to the end, add "ay", and keep a leading capital."""
    if not word:
        return "ay"
    first, rest = word[0], word[1:]
    moved = rest + first.lower() + "ay"
    if first.isupper() and moved[0].islower():
        moved = moved[0].upper() + moved[1:]
    return moved


def pig_latin_line(line: str) -> str:
    """Translate every space-separated word of a line into pig latin."""
    return " ".join(pig_latin_word(word) for word in line.split(" "))


def double_value(x: int) -> int:
    """Twice the given value."""
    return 2 * x


def one_and_n(n: int) -> tuple[int, int]:
    """The pair (1, n)."""
    return 1, n


def walk(x: int, y: int, moves: str) -> tuple[int, int]:
    """Final position after following U, D, L and R moves from (x, y)."""
    for move in moves:
        dx, dy = _MOVES.get(move, (0, 0))
        x += dx
        y += dy
    return x, y


def coin_steps(coins: Iterable[int], target: int) -> int:
    """Coins looked at, largest first, until the target is reached, or -1."""
    total = steps = 0
    for coin in sorted(coins, reverse=True):
        if total >= target:
            break
        if total + coin <= target:
            total += coin
        steps += 1
    return -1 if total < target else steps


def drives_needed(files: int, file_size: int, drive_size: int) -> int:
    """Drives needed to store the files when each drive holds whole files only."""
    per_drive = drive_size // file_size
    if per_drive < 1:
        raise ValueError("a drive must hold at least one file")
    return max(1, -(-files // per_drive))


def final_direction(turns: str) -> str:
    """Compass direction after the turns, starting east ('0' right, '1' left)."""
    index = _DIRECTIONS.index(_START_DIRECTION)
    for turn in turns:
        index = (index + _TURNS.get(turn, 0)) % len(_DIRECTIONS)
    return _DIRECTIONS[index]


def parity_steps(values: Sequence[int]) -> int:
    """Additions of an odd element needed to make every value odd, or -1."""
    if not any(value % 2 for value in values):
        return -1
    return sum(1 for value in values if value % 2 == 0)


def shares_bit(a: int, b: int) -> bool:
    """Whether the two numbers have a set bit in common."""
    return (a & b) > 0


def best_ingredients(a: int, b: int, c: int, x: int, y: int, z: int) -> list[str]:
    """Names of the ingredients with the largest amount times price."""
    totals = (a * x, b * y, c * z)
    best = max(totals)
    return [name for name, total in zip(_INGREDIENTS, totals) if total == best]


def can_split_evenly(pieces: Sequence[int]) -> bool:
    """Whether the pieces can be split into two non-empty groups of equal sum."""
    total = sum(pieces)
    return any(
        2 * sum(group) == total
        for size in range(1, len(pieces))
        for group in combinations(pieces, size)
    )


def triangle_count(n: int) -> int:
    """Number of triangles in a triangular grid of side n."""
    return n * (n + 2) * (2 * n + 1) // 8


def total_time(count: int, minutes: int, seconds: int, pause: int) -> tuple[int, int]:
    """Minutes and seconds for count pieces of the given length with pauses between."""
    total = count * (60 * minutes + seconds) + pause * (count - 1)
    return divmod(total, 60)


def _truncating_division(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def circle_intersection(distance: int, r1: int, r2: int) -> tuple[float, float]:
    """Lower intersection point of two circles whose centres are distance apart.

    The x coordinate is computed with integer division, truncated toward zero.
    """
    denominator = 2 * distance
    if denominator == 0:
        raise ZeroDivisionError("the circle centres must differ")
    x = float(_truncating_division(distance * distance + r1 * r1 - r2 * r2, denominator))
    radicand = r1 * r1 - x * x
    if radicand < 0:
        raise ValueError("the circles do not intersect")
    return x, -math.sqrt(radicand)


def sign_documents(n: int, k: int) -> tuple[bool, int]:
    """Whether document k gets signed, and the number of actions taken.

    Documents 1..n are handled in turn: sign, reject, send to the bottom.
    """
    pile = deque(range(1, n + 1))
    actions = cycle(_Action)
    steps = 0
    while pile:
        action = next(actions)
        document = pile.popleft()
        steps += 1
        if action is _Action.SIGN and document == k:
            return True, steps
        if action is _Action.SEND_BOTTOM:
            pile.append(document)
    return False, steps


def rook_moves(position: str) -> list[str]:
    """Squares a rook can reach from the position on an empty board."""
    if len(position) != 2 or not position[1].isdigit():
        raise ValueError(f"invalid square: {position!r}")
    column, rank = position[0], int(position[1])
    along_rank = [f"{file}{rank}" for file in _FILES if file != column]
    along_file = [f"{column}{r}" for r in _RANKS if r != rank]
    return along_rank + along_file


def grid_word(grid: Sequence[Sequence[str]]) -> str:
    """Word written downward in a square grid whose other cells are '.'."""
    size = len(grid)
    if any(len(row) != size for row in grid):
        raise ValueError("grid must be square")
    letters: list[str] = []
    y = 0
    while y < size:
        for x in range(size):
            while y < size and grid[y][x] != ".":
                letters.append(grid[y][x])
                y += 1
        y += 1
    return "".join(letters)


def game_winner(n: int) -> str:
    """Winner of the take-one-or-two game starting from n.

    Multiples of three are lost by the player to move; from a number one
    away from a multiple of three the first player wins.
    """
    if n % 3 == 0:
        return "Second"
    if (n - 1) % 3 == 0 or (n + 1) % 3 == 0:
        return "First"
    raise ValueError(f"no winner defined for {n!r}")


def product_after_increment(digits: Sequence[int]) -> int:
    """Largest product after adding one to exactly one digit."""
    return good_kid_product(digits)


def cheapest_option(x: int, y: int, z: int, t: int, v: int) -> int:
    """Cheapest of paying x, t times y, or v times z."""
    return min(x, t * y, v * z)


def max_k(distances: Iterable[int]) -> int:
    """Largest k such that k of the distances are each at least k."""
    k = 0
    for rank, distance in enumerate(sorted(distances, reverse=True), start=1):
        if distance < rank:
            break
        k += 1
    return k


def sieve(limit: int) -> list[bool]:
    """Primality flags for 0..limit by the sieve of Eratosthenes."""
    flags = [True] * (limit + 1)
    for small in range(min(2, limit + 1)):
        flags[small] = False
    for i in range(2, math.isqrt(max(limit, 0)) + 1):
        if flags[i]:
            flags[i * i :: i] = [False] * len(range(i * i, limit + 1, i))
    return flags


def is_prime(n: int, primes: Sequence[bool]) -> bool:
    """Whether no flagged prime below n divides n."""
    for candidate, flagged in islice(enumerate(primes), max(n, 0)):
        if flagged and n % candidate == 0:
            return False
    return True


@lru_cache(maxsize=1)
def _default_primes() -> list[bool]:
    return sieve(_SIEVE_LIMIT)


def gcd_in_range(n: int, low: int, high: int, primes: Sequence[bool] | None = None) -> int:
    """A prime n above low, else the first x in [low, high] whose gcd with n
    also lies in [low, high], else -1."""
    flags = _default_primes() if primes is None else primes
    if n > low and is_prime(n, flags):
        return n
    return next((x for x in range(low, high + 1) if low <= math.gcd(n, x) <= high), -1)