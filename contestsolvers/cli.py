"""Command-line runner for the problems that read a whole case from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence

from .arrays import form_teams
from .gym import sign_documents
from .tap import build_tree, render_tree


class InputError(ValueError):
    """Raised when the problem input is malformed or incomplete."""


def _numbers(text: str) -> Iterator[int]:
    for token in text.split():
        try:
            yield int(token)
        except ValueError:
            raise InputError(f"not an integer: {token!r}") from None


def _take(numbers: Iterator[int]) -> int:
    try:
        return next(numbers)
    except StopIteration:
        raise InputError("unexpected end of input") from None


def _take_many(numbers: Iterator[int], count: int) -> list[int]:
    if count < 0:
        raise InputError(f"count must not be negative: {count}")
    return [_take(numbers) for _ in range(count)]


def _teams(numbers: Iterator[int]) -> list[str]:
    skills = _take_many(numbers, _take(numbers))
    teams = form_teams(skills)
    return [str(len(teams)), *(" ".join(map(str, team)) for team in teams)]


def _sign(numbers: Iterator[int]) -> list[str]:
    n, k = _take(numbers), _take(numbers)
    signed, steps = sign_documents(n, k)
    lines = []
    if signed:
        lines.append("Yes")
    elif steps:
        lines.append("No")
    lines.append(str(steps))
    return lines


def _tree(numbers: Iterator[int]) -> list[str]:
    n, k = _take(numbers), _take(numbers)
    lights = _take_many(numbers, k)
    return [render_tree(build_tree(n, lights))]


_COMMANDS: dict[str, tuple[Callable[[Iterator[int]], list[str]], str]] = {
    "teams": (_teams, "form teams of a programmer, a mathematician and an athlete"),
    "sign": (_sign, "decide whether a document in the pile gets signed"),
    "tree": (_tree, "print the Fibonacci call tree with its lit nodes"),
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contestsolvers",
        description="Solve a contest problem whose input is read from standard input.",
    )
    subparsers = parser.add_subparsers(dest="problem", required=True)
    for name, (_, help_text) in _COMMANDS.items():
        subparsers.add_parser(name, help=help_text)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen problem on standard input and print its answer."""
    args = _parser().parse_args(argv)
    solve, _ = _COMMANDS[args.problem]
    try:
        lines = solve(_numbers(sys.stdin.read()))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())