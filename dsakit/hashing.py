"""Hash tables: separate chaining, double hashing and direct indexing."""

from __future__ import annotations

from typing import Iterable


class ChainedHashTable:
    """A hash table of integers whose buckets hold chains of entries."""

    def __init__(self, buckets: int) -> None:
        if buckets <= 0:
            raise ValueError("the number of buckets must be positive")
        self.buckets = buckets
        self.table: list[list[int]] = [[] for _ in range(buckets)]

    def __contains__(self, item: int) -> bool:
        return item in self.table[self.hash(item)]

    def hash(self, item: int) -> int:
        """Return the bucket index of ``item``."""
        return item % self.buckets

    def insert(self, item: int) -> None:
        """Append ``item`` to the end of its bucket's chain."""
        self.table[self.hash(item)].append(item)

    def delete(self, item: int) -> bool:
        """Remove the first occurrence of ``item``; return whether one was found."""
        chain = self.table[self.hash(item)]
        if item in chain:
            chain.remove(item)
            return True
        return False

    def render(self) -> str:
        """Return one line per bucket: its index followed by its chain."""
        return "\n".join(
            str(index) + "".join(f" ---> {item}" for item in chain)
            for index, chain in enumerate(self.table)
        )


class DoubleHashTable:
    """An open-addressing table of integers resolving collisions by double hashing."""

    def __init__(self, size: int = 13, prime: int = 7) -> None:
        if size <= 0:
            raise ValueError("the table size must be positive")
        if not 0 < prime < size:
            raise ValueError("the prime must lie between 0 and the table size")
        self.size = size
        self.prime = prime
        self.slots: list[int | None] = [None] * size
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def is_full(self) -> bool:
        """Return whether every slot is taken."""
        return self._count == self.size

    def _probe(self, item: int) -> Iterable[int]:
        start = item % self.size
        step = self.prime - item % self.prime
        for attempt in range(self.size):
            yield (start + attempt * step) % self.size

    def insert(self, item: int) -> bool:
        """Store ``item`` in the first free slot of its probe sequence.

        Returns False, storing nothing, when the table is full or the probe
        sequence reaches no free slot.
        """
        if self.is_full():
            return False
        for index in self._probe(item):
            if self.slots[index] is None:
                self.slots[index] = item
                self._count += 1
                return True
        return False

    def search(self, item: int) -> int | None:
        """Return the slot index holding ``item``, or None if it is absent."""
        for index in self._probe(item):
            slot = self.slots[index]
            if slot is None:
                return None
            if slot == item:
                return index
        return None

    def render(self) -> str:
        """Return one line per slot: its index and, if taken, its value."""
        return "\n".join(
            str(index) if value is None else f"{index} ---> {value}"
            for index, value in enumerate(self.slots)
        )


class DirectIndexTable:
    """Membership of integers whose magnitude is at most ``limit``, by direct index."""

    def __init__(self, limit: int = 1000) -> None:
        if limit < 0:
            raise ValueError("the limit must not be negative")
        self.limit = limit
        self._non_negative = [False] * (limit + 1)
        self._negative = [False] * (limit + 1)

    def __contains__(self, value: int) -> bool:
        return self.contains(value)

    def insert(self, values: Iterable[int]) -> None:
        """Mark every value as present.

        Raises ValueError for a value whose magnitude exceeds the limit.
        """
        for value in values:
            if abs(value) > self.limit:
                raise ValueError(f"{value} lies outside -{self.limit}..{self.limit}")
            if value >= 0:
                self._non_negative[value] = True
            else:
                self._negative[-value] = True

    def contains(self, value: int) -> bool:
        """Return whether ``value`` was inserted."""
        if abs(value) > self.limit:
            return False
        if value >= 0:
            return self._non_negative[value]
        return self._negative[-value]