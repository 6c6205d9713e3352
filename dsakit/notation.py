"""Conversions between infix, prefix and postfix expression notation.

Operands are single ASCII letters or digits; every other character except a
space is treated as an operator.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

__all__ = [
    "is_operator",
    "precedence",
    "infix_to_postfix",
    "infix_to_prefix",
    "prefix_to_infix",
    "prefix_to_postfix",
    "postfix_to_infix",
    "postfix_to_prefix",
]


def _is_operand(char: str) -> bool:
    return char.isascii() and char.isalnum()


def is_operator(char: str) -> bool:
    """Return True if ``char`` is neither an operand nor a space."""
    return not _is_operand(char) and char != " "


def precedence(op: str) -> int:
    """Binding strength of an operator: 2 for ``*`` and ``/``, 1 for ``+`` and ``-``, else 0."""
    if op in ("+", "-"):
        return 1
    if op in ("*", "/"):
        return 2
    return 0


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression to postfix using the shunting-yard method."""
    stack: list[str] = []
    output: list[str] = []
    for char in infix:
        if _is_operand(char):
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unbalanced ')' in expression")
            stack.pop()
        else:
            while stack and precedence(stack[-1]) >= precedence(char):
                output.append(stack.pop())
            stack.append(char)
    output.extend(reversed(stack))
    return "".join(output)


def infix_to_prefix(infix: str) -> str:
    """Convert an infix expression to prefix by reversing, converting and reversing back."""
    swap = {"(": ")", ")": "("}
    mirrored = "".join(swap.get(char, char) for char in reversed(infix))
    return infix_to_postfix(mirrored)[::-1]


def _reduce(chars: Iterable[str], combine: Callable[[str, str, str], str]) -> str:
    """Fold operands on a stack; ``combine(lower, op, upper)`` joins the two topmost."""
    stack: list[str] = []
    for char in chars:
        if _is_operand(char):
            stack.append(char)
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {char!r} lacks operands")
        upper = stack.pop()
        lower = stack.pop()
        stack.append(combine(lower, char, upper))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def prefix_to_infix(prefix: str) -> str:
    """Convert a prefix expression to a fully parenthesised infix expression."""
    return _reduce(reversed(prefix), lambda lower, op, upper: f"({upper}{op}{lower})")


def prefix_to_postfix(prefix: str) -> str:
    """Convert a prefix expression to postfix."""
    return _reduce(reversed(prefix), lambda lower, op, upper: f"{upper}{lower}{op}")


def postfix_to_infix(postfix: str) -> str:
    """Convert a postfix expression to a fully parenthesised infix expression."""
    return _reduce(postfix, lambda lower, op, upper: f"({lower}{op}{upper})")


def postfix_to_prefix(postfix: str) -> str:
    """Convert a postfix expression to prefix."""
    return _reduce(postfix, lambda lower, op, upper: f"{op}{lower}{upper}")