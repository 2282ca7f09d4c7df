"""Conversion of infix integer expressions to reverse Polish notation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from edados.stack import Stack

_OPERATORS = frozenset("()*/+-")
_DIGITS = frozenset("0123456789")
_BLANKS = frozenset(" \t")


def is_operator(c: str) -> bool:
    """Return True if ``c`` is a parenthesis or one of ``* / + -``."""
    return c in _OPERATORS


def lower_precedence(c1: str, c2: str | None) -> bool:
    """Return True if operator ``c1`` binds less tightly than ``c2``."""
    if c1 in ("+", "-"):
        return c2 in ("*", "/")
    return False


def shunting_yard(expression: str) -> str:
    """Return ``expression`` in reverse Polish notation, tokens each followed by a space.

    Blanks and characters that are neither digits nor operators are ignored.
    Raises ValueError on a closing parenthesis without a matching opening one.
    """
    output: list[str] = []
    number: list[str] = []
    operators = Stack()

    def flush_number() -> None:
        if number:
            output.append("".join(number))
            number.clear()

    for c in expression:
        if c in _BLANKS:
            continue
        if c in _DIGITS:
            number.append(c)
            continue
        if not is_operator(c):
            continue

        flush_number()

        if c == ")":
            top = operators.peek()
            while top != "(":
                if operators.is_empty():
                    raise ValueError("unbalanced ')' in expression")
                output.append(operators.pop())
                top = operators.peek()
            operators.pop()
            continue

        if c != "(":
            top = operators.peek()
            while lower_precedence(c, top) and not operators.is_empty():
                output.append(operators.pop())
                top = operators.peek()
        operators.push(c)

    flush_number()
    while not operators.is_empty():
        output.append(operators.pop())

    return "".join(f"{token} " for token in output)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the RPN form of the expression given as arguments, or of each stdin line."""
    args = sys.argv[1:] if argv is None else list(argv)
    expressions = [" ".join(args)] if args else [line.rstrip("\n") for line in sys.stdin]
    status = 0
    for expression in expressions:
        try:
            print(shunting_yard(expression))
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            status = 1
    return status


if __name__ == "__main__":
    raise SystemExit(main())