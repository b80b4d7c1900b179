"""Scoring of nested angle-bracket strings."""

from __future__ import annotations

_OPEN = None


def bracket_marks(s: str) -> int:
    """Score a string of angle brackets.

    An empty pair ``<>`` is worth 1, a pair wrapped around other pairs is
    worth three times their sum, and adjacent groups add up. Every character
    other than ``<`` closes the innermost open bracket.

    Raises ValueError when a closing character has nothing to close or when
    an opening bracket is never closed.
    """
    stack: list[int | None] = []
    for position, char in enumerate(s):
        if char == "<":
            stack.append(_OPEN)
            continue
        if not stack:
            raise ValueError(f"unmatched closing bracket at position {position}")
        if stack[-1] is _OPEN:
            stack[-1] = 1
            continue
        inner = 0
        while stack and stack[-1] is not _OPEN:
            inner += stack.pop()
        if not stack:
            raise ValueError(f"unmatched closing bracket at position {position}")
        stack[-1] = 3 * inner
    if any(entry is _OPEN for entry in stack):
        raise ValueError("unclosed opening bracket")
    return sum(stack)