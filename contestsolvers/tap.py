"""Solutions to national programming contest problems."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from itertools import combinations

HIGHLIGHT = "\033[100m"
RESET = "\033[0m"
NOTES = ("DO", "DO#", "RE", "RE#", "MI", "FA", "FA#", "SOL", "SOL#", "LA", "LA#", "SI")
_PREFIX = "46248326122"
_CYCLE = "48326122"
_DIMINUTIVE_ENDINGS = frozenset("ao")


@dataclass
class TreeNode:
    """A node of the call tree, lit when one of the lights landed on it."""

    value: int
    lit: bool = False
    left: TreeNode | None = None
    right: TreeNode | None = None


@dataclass(frozen=True)
class Bank:
    """A circular bench at (x, y) with radius r."""

    x: int
    y: int
    r: int


def has_no_i(word: str) -> bool:
    """Whether the word has no letter 'i'."""
    return "i" not in word


def _take(remaining: list[int], value: int) -> bool:
    try:
        remaining.remove(value)
    except ValueError:
        return False
    return True


def _construct(n: int, remaining: list[int]) -> TreeNode:
    lit = _take(remaining, n)
    if n in (1, 2):
        return TreeNode(n, lit)
    left = _construct(n - 1, remaining)
    right = _construct(n - 2, remaining)
    return TreeNode(n, lit, left, right)


def build_tree(n: int, lights: Sequence[int]) -> TreeNode:
    """Build the Fibonacci call tree of n; each light marks the first node,
    in construction order, with its value that is not yet lit."""
    if n < 1:
        raise ValueError("n must be positive")
    return _construct(n, list(lights))


def preorder(root: TreeNode | None) -> Iterator[TreeNode]:
    """Nodes of the tree in preorder."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def render_tree(root: TreeNode | None) -> str:
    """Preorder listing of the tree with lit nodes highlighted for a terminal."""
    return "".join(
        f"{HIGHLIGHT if node.lit else ''}{node.value}{RESET} " for node in preorder(root)
    )


def transpose_note(semitones: int, note: str) -> str:
    """The note the given number of semitones below."""
    try:
        index = NOTES.index(note)
    except ValueError:
        raise ValueError(f"unknown note: {note!r}") from None
    return NOTES[(index - semitones) % len(NOTES)]


def digit_at(position: int) -> str:
    """Digit at the 1-based position of the eventually periodic sequence."""
    if position < 1:
        raise ValueError("position must be at least 1")
    if position > len(_PREFIX):
        return _CYCLE[(position - len(_PREFIX) - 1) % len(_CYCLE)]
    return _PREFIX[position - 1]


def diminutive(name: str) -> str | None:
    """Diminutive of a name ending in 'a' or 'o', or None for other names."""
    if not name or name[-1] not in _DIMINUTIVE_ENDINGS:
        return None
    return f"{name[:-1]}ic{name[-1]}"


def banks_collide(first: Bank, second: Bank) -> bool:
    """Whether the borders of the two benches touch or cross."""
    dx = second.x - first.x
    dy = second.y - first.y
    distance = dx * dx + dy * dy
    reach = first.r + second.r
    gap = abs(first.r - second.r)
    return gap * gap <= distance <= reach * reach


def any_intersection(banks: Sequence[Bank]) -> bool:
    """Whether any two of the benches collide."""
    return any(banks_collide(a, b) for a, b in combinations(banks, 2))


def method_a(first: int, second: int) -> float:
    """Plain average of two percentage grades, as a fraction."""
    return (first / 100.0 + second / 100.0) / 2.0


def method_b(first: int, second: int, n: int, m: int) -> float:
    """Average of two percentage grades weighted by n and m, as a fraction."""
    return (first / 100.0 * n + second / 100.0 * m) / (n + m)


def essentially_equal(a: float, b: float, epsilon: float = sys.float_info.epsilon) -> bool:
    """Whether a and b differ by at most epsilon relative to the smaller one."""
    return abs(a - b) <= min(abs(a), abs(b)) * epsilon


def compare_methods(a: float, b: float) -> str:
    """'C' if the grades are equal, 'B' if b is larger, 'A' if a is larger."""
    if essentially_equal(a, b):
        return "C"
    if a < b:
        return "B"
    if a > b:
        return "A"
    raise ValueError("grades cannot be compared")