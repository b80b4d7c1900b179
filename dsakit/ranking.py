"""Ranking values by how often they occur."""

from __future__ import annotations

from collections import Counter
from typing import Any, Hashable, Iterable, Iterator


def _by_count_then_first_seen(values: Iterable[Hashable]) -> list[tuple[Any, int]]:
    # Counter keeps first-occurrence order and sorted() is stable,
    # so ties stay in the order the values were first met.
    return sorted(Counter(values).items(), key=lambda item: -item[1])


def sort_by_frequency(values: Iterable[Hashable]) -> list[Any]:
    """Return all values grouped and ordered by descending frequency.

    Values with equal frequency keep the order of their first occurrence.
    """
    return [
        value for value, count in _by_count_then_first_seen(values) for _ in range(count)
    ]


def top_k_stream(values: Iterable[Any], k: int) -> Iterator[list[Any]]:
    """Yield, after each value of the stream, the current top ``k`` values.

    Values are ranked by how often they have occurred so far, most frequent
    first; equally frequent values are ranked smallest first.

    Raises ValueError for a negative ``k``.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    return _top_k_snapshots(values, k)


def _top_k_snapshots(values: Iterable[Any], k: int) -> Iterator[list[Any]]:
    counts: Counter[Any] = Counter()
    top: list[Any] = []

    def ranks_before(first: Any, second: Any) -> bool:
        if counts[first] != counts[second]:
            return counts[first] > counts[second]
        return first < second

    for value in values:
        counts[value] += 1
        if value in top:
            index = top.index(value)
        else:
            top.append(value)
            index = len(top) - 1
        while index > 0 and ranks_before(top[index], top[index - 1]):
            top[index], top[index - 1] = top[index - 1], top[index]
            index -= 1
        del top[k:]
        yield list(top)


def top_three(values: Iterable[Hashable]) -> list[Any]:
    """Return the three most frequent distinct values, most frequent first.

    Values with equal frequency keep the order of their first occurrence.
    """
    return [value for value, _ in _by_count_then_first_seen(values)[:3]]


def top_k_frequent(values: Iterable[Any], k: int) -> list[Any]:
    """Return the ``k`` most frequent distinct values, most frequent first.

    Among equally frequent values the larger one comes first. Fewer than
    ``k`` values are returned when there are fewer distinct values.

    Raises ValueError for a negative ``k``.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    ranked = sorted(
        Counter(values).items(), key=lambda item: (item[1], item[0]), reverse=True
    )
    return [value for value, _ in ranked[:k]]