"""Infix to postfix conversion and postfix evaluation."""

from __future__ import annotations

import argparse
import operator
import sys
from collections.abc import Callable, Sequence
from typing import Optional

from .bounded_stack import BoundedStack

STACK_CAPACITY = 20
_OPERATORS = frozenset("^$*/+-")


def precedence(op: str) -> int:
    """Binding strength of an operator; 0 for anything else."""
    if op in ("^", "$"):
        return 3
    if op in ("*", "/"):
        return 2
    if op in ("+", "-"):
        return 1
    return 0


def _is_operand(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression of single-character operands to postfix."""
    stack = BoundedStack(STACK_CAPACITY)
    output: list[str] = []
    for ch in infix:
        if _is_operand(ch):
            output.append(ch)
        elif ch == "(":
            stack.push(ch)
        elif ch == ")":
            while True:
                if stack.is_empty():
                    raise ValueError("Invalid Expression: unbalanced ')'")
                top = stack.pop()
                if top == "(":
                    break
                output.append(top)
        elif ch in _OPERATORS:
            if (
                not stack.is_empty()
                and stack.peek() != "("
                and precedence(ch) <= precedence(stack.peek())
            ):
                output.append(stack.pop())
            stack.push(ch)
        else:
            raise ValueError(f"Invalid Expression: unexpected {ch!r}")
    while not stack.is_empty():
        top = stack.pop()
        if top == "(":
            raise ValueError("Invalid Expression: unbalanced '('")
        output.append(top)
    return "".join(output)


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _power(a: int, b: int) -> int:
    return a**b if b >= 0 else int(a**b)


_CALCULATE: dict[str, Callable[[int, int], int]] = {
    "^": _power,
    "*": operator.mul,
    "/": _truncating_div,
    "+": operator.add,
    "-": operator.sub,
}


def evaluate_postfix(postfix: str) -> int:
    """Evaluate a postfix expression whose operands are single digits."""
    stack = BoundedStack(STACK_CAPACITY)
    for ch in postfix:
        if "0" <= ch <= "9":
            stack.push(int(ch))
        elif ch in _CALCULATE:
            try:
                op2 = stack.pop()
                op1 = stack.pop()
            except IndexError:
                raise ValueError(f"missing operand for {ch!r}") from None
            stack.push(_CALCULATE[ch](op1, op2))
        else:
            raise ValueError(f"Invalid Expression: unexpected {ch!r}")
    if len(stack) != 1:
        raise ValueError("malformed postfix expression")
    return stack.pop()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dsalab-expr",
        description="Convert an infix expression to postfix, or evaluate postfix.",
    )
    parser.add_argument("expression", nargs="?", help="expression without spaces")
    parser.add_argument(
        "-e",
        "--evaluate",
        action="store_true",
        help="evaluate a postfix expression of single digits",
    )
    args = parser.parse_args(argv)

    expression = args.expression
    if expression is None:
        prompt = "Enter postfix exp.:" if args.evaluate else "Enter Your Infix Expression:"
        tokens = input(prompt).split()
        expression = tokens[0] if tokens else ""

    try:
        if args.evaluate:
            print(f"After evaluation:{evaluate_postfix(expression)}")
        else:
            print(f"The Postfix Expression is:{infix_to_postfix(expression)}")
    except (ValueError, ZeroDivisionError, OverflowError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0