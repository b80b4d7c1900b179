"""Questions answered by counting how often values occur."""

from __future__ import annotations

from collections import Counter
from math import isqrt
from typing import Any, Hashable, Iterable, NamedTuple, Sequence


class DuplicateOccurrence(NamedTuple):
    """A repeated value, seen again at some distance from its first occurrence."""

    value: Any
    count: int
    distance: int
    at_distance: bool


def _first_positions(values: Iterable[Hashable]) -> dict[Any, int]:
    positions: dict[Any, int] = {}
    for index, value in enumerate(values):
        positions.setdefault(value, index)
    return positions


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, isqrt(n) + 1))


def cumulative_frequency(values: Sequence[Hashable]) -> list[tuple[Any, int]]:
    """Pair each distinct value with the running total of counts.

    Values come in the order they first occur, and each total includes the
    counts of every value before it.
    """
    counts = Counter(values)
    result: list[tuple[Any, int]] = []
    running = 0
    for value, count in counts.items():
        running += count
        result.append((value, running))
    return result


def duplicates(values: Iterable[Hashable]) -> dict[Any, int]:
    """Map every value occurring at least twice to its number of occurrences."""
    return {value: count for value, count in Counter(values).items() if count >= 2}


def occurring_k_times(values: Iterable[Hashable], k: int) -> list[Any]:
    """Return the values occurring exactly ``k`` times, by first occurrence."""
    return [value for value, count in Counter(values).items() if count == k]


def min_deletions(values: Sequence[Hashable]) -> int:
    """Return how many values must go for all that remain to be equal."""
    counts = Counter(values)
    if not counts:
        return 0
    return len(values) - max(counts.values())


def min_operations(values: Sequence[Hashable]) -> int:
    """Return how many values must change for all of them to be equal."""
    highest = max(Counter(values).values(), default=0)
    return len(values) - highest


def min_distinct_subsets(values: Iterable[Hashable]) -> int:
    """Return the fewest subsets of distinct values that hold all the values.

    Raises ValueError for an empty input.
    """
    counts = Counter(values)
    if not counts:
        raise ValueError("no values given")
    return max(counts.values())


def most_frequent(values: Iterable[Hashable]) -> Any:
    """Return the most frequent value; on a tie, the one met first.

    Raises ValueError for an empty input.
    """
    counts = Counter(values)
    if not counts:
        raise ValueError("no values given")
    return counts.most_common(1)[0][0]


def group_occurrences(values: Iterable[Hashable]) -> list[Any]:
    """Gather all occurrences of each value together, by first occurrence."""
    return [value for value, count in Counter(values).items() for _ in range(count)]


def prime_frequency_elements(values: Iterable[Hashable], k: int) -> list[Any]:
    """Return the values whose count is prime and greater than ``k``."""
    return [
        value
        for value, count in Counter(values).items()
        if _is_prime(count) and count > k
    ]


def first_repeated(values: Iterable[Hashable]) -> Any | None:
    """Return the first value seen a second time while scanning, or None."""
    seen: set[Any] = set()
    for value in values:
        if value in seen:
            return value
        seen.add(value)
    return None


def smallest_repeated_k_times(values: Sequence[Hashable], k: int) -> Any | None:
    """Among values occurring exactly ``k`` times, return the one that occurs first.

    Returns None when no value occurs exactly ``k`` times.
    """
    counts = Counter(values)
    positions = _first_positions(values)
    candidates = [value for value, count in counts.items() if count == k]
    if not candidates:
        return None
    return min(candidates, key=positions.__getitem__)


def duplicates_at_distance(
    values: Sequence[Hashable], k: int
) -> list[DuplicateOccurrence]:
    """Report every repeat of a value in the order the repeats occur.

    Each report carries the number of occurrences so far, the distance from
    the value's first occurrence, and whether that distance is exactly ``k``.
    """
    first: dict[Any, int] = {}
    counts: Counter[Any] = Counter()
    reports: list[DuplicateOccurrence] = []
    for index, value in enumerate(values):
        counts[value] += 1
        if value not in first:
            first[value] = index
            continue
        distance = index - first[value]
        reports.append(
            DuplicateOccurrence(value, counts[value], distance, distance == k)
        )
    return reports


def frequencies_by_key(values: Iterable[Any]) -> list[tuple[Any, int]]:
    """Return (value, count) pairs in ascending order of value."""
    return sorted(Counter(values).items())


def frequencies_by_value(values: Iterable[Any]) -> list[tuple[Any, int]]:
    """Return (value, count) pairs in ascending order of count, then of value."""
    return sorted(Counter(values).items(), key=lambda item: (item[1], item[0]))