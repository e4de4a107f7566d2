"""Conversions between infix, prefix and postfix notation, and bracket checks."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from typing import TextIO

_PRIORITIES = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1}
_PAIRS = {")": "(", "]": "[", "}": "{"}


class MalformedExpressionError(ValueError):
    """Raised when an expression has missing operands or unmatched parentheses."""


def priority(operator: str) -> int:
    """Binding strength of an operator; -1 for anything that is not one."""
    return _PRIORITIES.get(operator, -1)


def is_operand(char: str) -> bool:
    """True for a single ASCII letter or digit."""
    return len(char) == 1 and char.isascii() and char.isalnum()


def _shunt(expression: str, should_pop: Callable[[str, str], bool]) -> str:
    output: list[str] = []
    operators: list[str] = []
    for char in expression:
        if is_operand(char):
            output.append(char)
        elif char == "(":
            operators.append(char)
        elif char == ")":
            while operators and operators[-1] != "(":
                output.append(operators.pop())
            if not operators:
                raise MalformedExpressionError("unmatched ')'")
            operators.pop()
        else:
            while operators and should_pop(char, operators[-1]):
                output.append(operators.pop())
            operators.append(char)
    while operators:
        operator = operators.pop()
        if operator == "(":
            raise MalformedExpressionError("unmatched '('")
        output.append(operator)
    return "".join(output)


def _postfix_pops(char: str, top: str) -> bool:
    if char == "^":
        return priority(char) < priority(top)
    return priority(char) <= priority(top)


def _prefix_pops(char: str, top: str) -> bool:
    return priority(char) < priority(top)


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression to postfix; ``^`` is right-associative."""
    return _shunt(expression, _postfix_pops)


def infix_to_prefix(expression: str) -> str:
    """Convert an infix expression to prefix."""
    swap = str.maketrans("()", ")(")
    mirrored = expression[::-1].translate(swap)
    return _shunt(mirrored, _prefix_pops)[::-1]


def _rebuild(chars: Iterable[str], combine: Callable[[str, str, str], str]) -> str:
    operands: list[str] = []
    for char in chars:
        if is_operand(char):
            operands.append(char)
            continue
        if len(operands) < 2:
            raise MalformedExpressionError(f"operator {char!r} is missing an operand")
        first = operands.pop()
        second = operands.pop()
        operands.append(combine(char, first, second))
    if len(operands) != 1:
        raise MalformedExpressionError("expression does not reduce to a single term")
    return operands[0]


def postfix_to_infix(expression: str) -> str:
    """Convert postfix to fully parenthesised infix."""
    return _rebuild(expression, lambda op, right, left: f"({left}{op}{right})")


def postfix_to_prefix(expression: str) -> str:
    """Convert postfix to prefix."""
    return _rebuild(expression, lambda op, right, left: f"{op}{left}{right}")


def prefix_to_infix(expression: str) -> str:
    """Convert prefix to fully parenthesised infix."""
    return _rebuild(reversed(expression), lambda op, left, right: f"({left}{op}{right})")


def prefix_to_postfix(expression: str) -> str:
    """Convert prefix to postfix."""
    return _rebuild(reversed(expression), lambda op, left, right: f"{left}{right}{op}")


def is_balanced(text: str) -> bool:
    """Check that brackets pair up; any non-opening character must close one."""
    openers: list[str] = []
    for char in text:
        if char in "({[":
            openers.append(char)
            continue
        if not openers or _PAIRS.get(char) != openers.pop():
            return False
    return not openers


def print_string(text: str, file: TextIO | None = None) -> None:
    """Write ``text`` under a label, preceded by a blank line."""
    print(f"\nString is :{text}", file=file if file is not None else sys.stdout)