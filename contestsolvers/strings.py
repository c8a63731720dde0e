"""Solutions to string-handling contest problems."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

_HELPFUL_DIGITS = frozenset("123")


def compare_ignore_case(first: str, second: str) -> int:
    """Compare two words case-insensitively, returning -1, 0 or 1."""
    a, b = first.lower(), second.lower()
    return (a > b) - (a < b)


def boy_or_girl(name: str) -> str:
    """Guess the gender of a user name by its number of distinct letters."""
    if len(set(name)) % 2 == 0:
        return "CHAT WITH HER!"
    return "IGNORE HIM!"


def capitalize_word(word: str) -> str:
    """Make the first letter of a word upper case, leaving the rest alone."""
    return word[:1].upper() + word[1:]


def fix_case(word: str) -> str:
    """Lower-case the word unless it holds more upper- than lower-case letters."""
    lower = sum(ch.islower() for ch in word)
    upper = sum(ch.isupper() for ch in word)
    return word.lower() if lower >= upper else word.upper()


def abbreviate(word: str) -> str:
    """Shorten words longer than ten letters to first letter, count, last letter."""
    if len(word) > 10:
        return f"{word[0]}{len(word) - 2}{word[-1]}"
    return word


def count_xxx(name: str) -> int:
    """Count (overlapping) occurrences of "xxx" in a file name."""
    return sum(name.startswith("xxx", i) for i in range(len(name)))


def assemble_word(start: str, letters: str, sides: str) -> str:
    """Grow a word by appending ('D') or prepending ('V') each given letter."""
    parts = deque(start)
    for letter, side in zip(letters, sides):
        if side == "D":
            parts.append(letter)
        elif side == "V":
            parts.appendleft(letter)
    return "".join(parts)


def bit_plus_plus(statements: Iterable[str]) -> int:
    """Run Bit++ statements starting from x = 0 and return the final x."""
    x = 0
    for statement in statements:
        if "+" in statement:
            x += 1
        elif "-" in statement:
            x -= 1
    return x


def helpful_maths(expression: str) -> str:
    """Rearrange the summands 1, 2 and 3 of a sum into non-decreasing order."""
    return "+".join(sorted(ch for ch in expression if ch in _HELPFUL_DIGITS))