"""Questions about arrays answered with hash sets and maps."""

from __future__ import annotations

from collections import Counter
from itertools import chain, count
from typing import Any, Hashable, Iterable, Sequence


def reduced_form(values: Sequence[Any]) -> list[int]:
    """Replace each value by its position among the values in sorted order.

    For distinct values the result is a permutation of 0..n-1. Equal values
    all take the last position their value occupies in sorted order.
    """
    rank = {value: index for index, value in enumerate(sorted(values))}
    return [rank[value] for value in values]


def kth_missing(sequence: Iterable[Hashable], present: Iterable[Hashable], k: int) -> Any:
    """Return the ``k``-th value of ``sequence`` (counting from 1) not in ``present``.

    Raises ValueError when ``k`` is not positive or fewer than ``k`` values
    are missing.
    """
    if k < 1:
        raise ValueError("k must be positive")
    excluded = set(present)
    missing = [value for value in sequence if value not in excluded]
    if len(missing) < k:
        raise ValueError(f"fewer than {k} values are missing")
    return missing[k - 1]


def missing_in_range(values: Iterable[int], low: int, high: int) -> list[int]:
    """Return the integers from ``low`` up to but not including ``high`` absent from ``values``."""
    present = set(values)
    return [number for number in range(low, high) if number not in present]


def only_in_first(first: Iterable[Hashable], second: Iterable[Hashable]) -> list[Any]:
    """Return the values of ``first``, in order, that do not occur in ``second``."""
    excluded = set(second)
    return [value for value in first if value not in excluded]


def count_common(first: Iterable[Hashable], second: Iterable[Hashable]) -> int:
    """Count the values of ``second`` that also occur in ``first``.

    This is the fewest removals that leave the two with no common value.
    """
    present = set(first)
    return sum(1 for value in second if value in present)


def sum_not_common(first: Iterable[int], second: Iterable[int]) -> int:
    """Return the sum of the values occurring exactly once over both sequences."""
    counts = Counter(chain(first, second))
    return sum(value for value, occurrences in counts.items() if occurrences == 1)


def are_disjoint(first: Iterable[Hashable], second: Iterable[Hashable]) -> bool:
    """Return whether the two sequences share no value."""
    return set(first).isdisjoint(second)


def make_permutation(values: Sequence[int]) -> list[int]:
    """Change the fewest values so that the result is a permutation of 1..n.

    Values already in 1..n are kept at their first occurrence; every repeat
    and every value outside 1..n is replaced by the smallest number not yet
    used, scanning left to right. ``values`` is not modified.
    """
    n = len(values)
    counts = Counter(values)
    taken = set(values)
    candidates = (number for number in count(1) if number not in taken)
    result: list[int] = []
    for value in values:
        if counts[value] != 1 or not 1 <= value <= n:
            counts[value] -= 1
            replacement = next(candidates)
            taken.add(replacement)
            counts[replacement] = 1
            result.append(replacement)
        else:
            result.append(value)
    return result


def max_occurrence_distance(values: Iterable[Hashable]) -> int:
    """Return the greatest distance between two occurrences of the same value.

    Returns 0 when no value repeats.
    """
    first: dict[Any, int] = {}
    best = 0
    for index, value in enumerate(values):
        if value in first:
            best = max(best, index - first[value])
        else:
            first[value] = index
    return best