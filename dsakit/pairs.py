"""Finding pairs of values with a given sum or product, using hash sets and maps."""

from __future__ import annotations

from collections import Counter
from itertools import combinations
from typing import Any, Hashable, Iterable, Sequence


def cross_sum_pairs(
    first: Iterable[int], second: Iterable[int], target: int
) -> list[tuple[int, int]]:
    """Return pairs summing to ``target`` with one value from each sequence.

    Each pair is (value from ``second``, value from ``first``), in the order
    of ``second``.
    """
    available = set(first)
    return [(value, target - value) for value in second if target - value in available]


def sum_pairs(values: Iterable[int], target: int) -> list[tuple[int, int]]:
    """Return pairs of values at different positions summing to ``target``.

    The values are scanned in order; each pair is (current value, earlier
    value), reported when the earlier partner has already been seen.
    """
    seen: set[int] = set()
    pairs: list[tuple[int, int]] = []
    for value in values:
        rest = target - value
        if rest in seen:
            pairs.append((value, rest))
        seen.add(value)
    return pairs


def has_product_pair(values: Iterable[int], target: int) -> bool:
    """Return whether two values at different positions multiply to ``target``."""
    seen: set[int] = set()
    for value in values:
        if value == 0:
            if target == 0 and seen:
                return True
        elif target % value == 0 and target // value in seen:
            return True
        seen.add(value)
    return False


def product_pairs(values: Sequence[int]) -> list[tuple[int, int]]:
    """Return the pairs of values whose product is itself one of the values.

    Pairs are taken from the values in ascending order, each pair smaller
    value first. ``values`` is not modified.
    """
    present = set(values)
    return [
        (low, high)
        for low, high in combinations(sorted(values), 2)
        if low * high in present
    ]


def positive_negative_pairs(values: Iterable[int]) -> list[tuple[int, int]]:
    """Return pairs of a value and its negation both present in ``values``.

    Each pair is (later value, its negation seen earlier); the pairs come in
    descending order of their first element.
    """
    seen: set[int] = set()
    pairs: list[tuple[int, int]] = []
    for value in values:
        if -value in seen:
            pairs.append((value, -value))
        seen.add(value)
    return sorted(pairs, key=lambda pair: pair[0], reverse=True)


def symmetric_pairs(pairs: Iterable[tuple[Hashable, Hashable]]) -> list[tuple[Any, Any]]:
    """Return each pair (a, b) whose mirror (b, a) occurs later in ``pairs``.

    The earlier pair of each symmetric couple is reported, in the order the
    mirrors are found.
    """
    mapping: dict[Any, Any] = {}
    found: list[tuple[Any, Any]] = []
    for first, second in pairs:
        if second in mapping and mapping[second] == first:
            found.append((second, first))
        else:
            mapping[first] = second
    return found


def greatest_product(values: Sequence[int]) -> int | None:
    """Return the greatest value equal to the product of two other values.

    The two factors must occupy positions other than the product's own and
    each other's. Returns None when no value is such a product.
    """
    counts = Counter(values)
    ordered = sorted(values)
    for index in range(len(ordered) - 1, 1, -1):
        product = ordered[index]
        for divisor in ordered[:index]:
            if divisor * divisor > product:
                break
            if divisor == 0 or product % divisor:
                continue
            quotient = product // divisor
            if quotient != divisor and quotient != product and counts[quotient] > 0:
                return product
            if quotient == divisor and counts[quotient] > 1:
                return product
    return None