"""Questions about words and named items, answered with hash maps."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence


def count_items_with_different_price(
    first: Iterable[tuple[str, int]], second: Iterable[tuple[str, int]]
) -> int:
    """Count the items of ``second`` also named in ``first`` at another price.

    Both arguments hold (name, price) pairs. When ``first`` names an item
    more than once, its last price counts.
    """
    prices = dict(first)
    return sum(
        1 for name, price in second if name in prices and prices[name] != price
    )


def second_most_repeated(words: Iterable[str]) -> str:
    """Return the word with the second highest number of occurrences.

    Words that occur equally often keep the order of their first occurrence.

    Raises ValueError when fewer than two distinct words are given.
    """
    ranked = sorted(Counter(words).items(), key=lambda item: -item[1])
    if len(ranked) < 2:
        raise ValueError("at least two distinct words are needed")
    return ranked[1][0]


def charset_key(word: str) -> str:
    """Return the distinct characters of ``word`` in sorted order."""
    return "".join(sorted(set(word)))


def group_by_charset(words: Iterable[str]) -> dict[str, list[str]]:
    """Group words that are made of the same set of characters.

    Keys are the character-set keys, in the order they are first met; each
    group keeps its words in their original order.
    """
    groups: dict[str, list[str]] = {}
    for word in words:
        groups.setdefault(charset_key(word), []).append(word)
    return groups


def min_index_sum_common(first: Sequence[str], second: Sequence[str]) -> list[str]:
    """Return the common strings whose two indices add up to the least.

    All strings sharing the least sum are returned, in the order of
    ``second``. An empty list means the sequences share nothing.
    """
    index_in_first = {value: index for index, value in enumerate(first)}
    best: list[str] = []
    least: int | None = None
    for index, value in enumerate(second):
        if value not in index_in_first:
            continue
        total = index + index_in_first[value]
        if least is None or total < least:
            least = total
            best = [value]
        elif total == least:
            best.append(value)
    return best