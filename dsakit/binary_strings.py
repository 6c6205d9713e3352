"""Enumeration of fixed-length binary strings by backtracking."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = ["binary_strings"]


def binary_strings(n: int) -> Iterator[str]:
    """Yield every string of ``n`` binary digits in ascending order."""
    if n < 0:
        raise ValueError("length must not be negative")

    def extend(prefix: str, remaining: int) -> Iterator[str]:
        if remaining == 0:
            yield prefix
            return
        for digit in "01":
            yield from extend(prefix + digit, remaining - 1)

    return extend("", n)