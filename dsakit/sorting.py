"""Bubble sort and counting sort."""

from __future__ import annotations

from typing import Any, MutableSequence, Sequence


def bubble_sort(items: MutableSequence[Any]) -> int:
    """Sort ``items`` in place and return the number of swaps performed."""
    swaps = 0
    n = len(items)
    for pass_number in range(n - 1):
        for j in range(n - pass_number - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swaps += 1
    return swaps


def bubble_sort_recursive(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place, one bubbling pass per level of recursion."""

    def _sort(length: int) -> None:
        if length <= 1:
            return
        for j in range(length - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
        _sort(length - 1)

    _sort(len(items))


def count_sort(items: Sequence[int]) -> list[int]:
    """Return the non-negative integers of ``items`` in ascending order.

    Raises ValueError for a negative value.
    """
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("count_sort accepts only non-negative integers")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    for index in range(1, len(counts)):
        counts[index] += counts[index - 1]
    output = [0] * len(items)
    for value in reversed(items):
        counts[value] -= 1
        output[counts[value]] = value
    return output