"""Questions answered by where values occur."""

from __future__ import annotations

from collections import Counter
from math import isqrt
from typing import Any, Hashable, Sequence


def find_repeating_readonly(values: Sequence[int], n: int) -> int | None:
    """Find a value repeated among the first ``n + 1`` values, all in 1..n.

    The values are split into blocks of about sqrt(n) consecutive numbers;
    a block holding more values than it has numbers must hold a repeat, and
    only that block is then scanned with a hash map. ``values`` is not
    modified. Returns None if no repeat is found.

    Raises ValueError when ``n`` is not positive, fewer than ``n + 1`` values
    are given, or a value lies outside 1..n.
    """
    if n < 1:
        raise ValueError("n must be positive")
    if len(values) < n + 1:
        raise ValueError("at least n + 1 values are needed")
    window = values[: n + 1]
    if any(not 1 <= value <= n for value in window):
        raise ValueError(f"every value must lie in 1..{n}")

    block_size = isqrt(n)
    block_count = n // block_size + 1
    per_block = Counter((value - 1) // block_size for value in window)
    selected = next(
        (block for block in range(block_count - 1) if per_block[block] > block_size),
        block_count - 1,
    )
    low, high = selected * block_size, (selected + 1) * block_size
    seen: set[int] = set()
    for value in window:
        if low < value <= high:
            if value in seen:
                return value
            seen.add(value)
    return None


def count_subarrays_with_sum(values: Sequence[int], target: int) -> int:
    """Return the number of contiguous subarrays summing to ``target``."""
    prefix_counts: Counter[int] = Counter({0: 1})
    running = 0
    total = 0
    for value in values:
        running += value
        total += prefix_counts[running - target]
        prefix_counts[running] += 1
    return total


def smallest_subarray_of_most_frequent(values: Sequence[Hashable]) -> list[Any]:
    """Return the shortest slice holding every occurrence of a most frequent value.

    Among equally frequent values the one with the shortest span wins, and
    among equal spans the one that starts first.

    Raises ValueError for an empty input.
    """
    if not values:
        raise ValueError("no values given")
    first: dict[Any, int] = {}
    last: dict[Any, int] = {}
    for index, value in enumerate(values):
        first.setdefault(value, index)
        last[value] = index
    counts = Counter(values)
    best = min(
        counts,
        key=lambda value: (-counts[value], last[value] - first[value], first[value]),
    )
    return list(values[first[best] : last[best] + 1])


def max_shortest_distance(values: Sequence[int], target: int) -> int | None:
    """Return the fewest steps needed to reach two distinct values summing to ``target``.

    Two walkers start at the two ends of the sequence; picking a value costs
    its distance from the nearer end, counting the end element as 1, and a
    pair costs the larger of its two values' costs. Returns None when no
    pair of distinct values sums to ``target``.
    """
    n = len(values)
    nearest: dict[int, int] = {}
    for index, value in enumerate(values):
        distance = min(index + 1, n - index)
        nearest[value] = min(distance, nearest.get(value, distance))
    costs = [
        max(nearest[value], nearest[target - value])
        for value in nearest
        if value != target - value and target - value in nearest
    ]
    return min(costs, default=None)