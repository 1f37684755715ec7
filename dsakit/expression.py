"""Infix to postfix conversion and evaluation of arithmetic expressions.

Operand values are kept at six significant digits, as printed by ``format_number``.
"""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence

_OPERATORS = "+-*/^"
_PRECEDENCE = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1}
_DEMO_EXPRESSION = "12+13-5*(0.5+0.5)+1"


def precedence(op: str) -> int:
    """Binding strength of an operator; -1 for anything that is not one."""
    return _PRECEDENCE.get(op, -1)


def _is_operand_char(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char == ".")


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression to space-separated postfix tokens.

    Operators of equal precedence, ``^`` included, associate to the left.
    Characters that are neither operands, operators nor parentheses are skipped.
    """
    output: list[str] = []
    operand: list[str] = []
    pending: list[str] = []

    def flush() -> None:
        if operand:
            output.append("".join(operand))
            operand.clear()

    for char in infix:
        if _is_operand_char(char):
            operand.append(char)
        elif char == "(":
            flush()
            pending.append(char)
        elif char == ")":
            flush()
            while pending and pending[-1] != "(":
                output.append(pending.pop())
            if not pending:
                raise ValueError("unbalanced ')' in expression")
            pending.pop()
        elif char in _OPERATORS:
            flush()
            while pending and precedence(pending[-1]) >= precedence(char):
                output.append(pending.pop())
            pending.append(char)
    flush()
    while pending:
        op = pending.pop()
        if op == "(":
            raise ValueError("unbalanced '(' in expression")
        output.append(op)
    return " ".join(output)


def format_number(value: float) -> str:
    """Render ``value`` with six significant digits, trailing zeros dropped."""
    return f"{value:g}"


def _rounded(value: float) -> float:
    return float(format_number(value))


def _divide(left: float, right: float) -> float:
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def _odd_integer(value: float) -> bool:
    return value.is_integer() and int(value) % 2 == 1


def _power(base: float, exponent: float) -> float:
    if base == 0 and exponent < 0:
        return math.copysign(math.inf, base) if _odd_integer(exponent) else math.inf
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return -math.inf if base < 0 and _odd_integer(exponent) else math.inf
    except ValueError:
        return math.nan


def _apply(op: str, left: float, right: float) -> float:
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    if op == "/":
        return _divide(left, right)
    return _power(left, right)


def evaluate_postfix(postfix: str) -> float:
    """Evaluate space-separated postfix tokens."""
    operands: list[float] = []
    for token in postfix.split():
        if token in _OPERATORS:
            if len(operands) < 2:
                raise ValueError(f"operator {token!r} is missing an operand")
            right = operands.pop()
            left = operands.pop()
            operands.append(_rounded(_apply(token, left, right)))
            continue
        if not all(char.isdigit() or char == "." for char in token):
            raise ValueError(f"not a number: {token!r}")
        try:
            operands.append(_rounded(float(token)))
        except ValueError:
            raise ValueError(f"not a number: {token!r}") from None
    if len(operands) != 1:
        raise ValueError("expression does not reduce to a single value")
    return operands[0]


def evaluate(expression: str) -> float:
    """Evaluate an infix arithmetic expression."""
    return evaluate_postfix(infix_to_postfix(expression))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dsakit-expression", description=__doc__)
    parser.add_argument("expression", nargs="?", default=_DEMO_EXPRESSION)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        result = evaluate(args.expression)
    except ValueError as error:
        parser.error(str(error))
    shown = format_number(result)
    print(f"{shown} = x")
    print(f"Answer is: {shown}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())