"""Doubly linked, circular and singly linked lists."""

from __future__ import annotations

from collections import Counter
from itertools import chain, zip_longest
from typing import Any, Iterable, Iterator

_VOWELS = frozenset("aeiouAEIOU")
_MISSING = object()


class _DoubleNode:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: _DoubleNode | None = None
        self.next: _DoubleNode | None = None


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: _Node | None = None


class DoublyLinkedList:
    """A list whose nodes link both to their successor and predecessor."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _DoubleNode | None = None
        self._tail: _DoubleNode | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self) + "NULL"

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the first node."""
        node = _DoubleNode(value)
        node.next = self._head
        if self._head is not None:
            self._head.prev = node
        else:
            self._tail = node
        self._head = node
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Insert ``value`` after the last node."""
        node = _DoubleNode(value)
        node.prev = self._tail
        if self._tail is not None:
            self._tail.next = node
        else:
            self._head = node
        self._tail = node
        self._size += 1

    def _unlink(self, node: _DoubleNode) -> None:
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        self._size -= 1

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``.

        Raises ValueError when no node holds it.
        """
        node = self._head
        while node is not None:
            if node.value == value:
                self._unlink(node)
                return
            node = node.next
        raise ValueError(f"{value!r} is not in the list")

    def pop_front(self) -> Any:
        """Remove and return the first value; IndexError when empty."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._unlink(node)
        return node.value

    def pop_back(self) -> Any:
        """Remove and return the last value; IndexError when empty."""
        if self._tail is None:
            raise IndexError("pop from an empty list")
        node = self._tail
        self._unlink(node)
        return node.value

    def bubble_sort(self) -> None:
        """Sort the values in place by exchanging neighbouring node values."""
        end: _DoubleNode | None = None
        swapped = self._head is not None
        while swapped:
            swapped = False
            node = self._head
            while node.next is not end:
                following = node.next
                if node.value > following.value:
                    node.value, following.value = following.value, node.value
                    swapped = True
                node = following
            end = node


class CircularList:
    """A singly linked list whose last node links back to the first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            yield node.value
            node = node.next

    def __str__(self) -> str:
        """Render the ring, repeating the first value at the end."""
        if self._tail is None:
            return ""
        return "".join(f"{value}->" for value in self) + str(self._tail.next.value)

    def append(self, value: Any) -> None:
        """Insert ``value`` after the last node, before the first."""
        node = _Node(value)
        if self._tail is None:
            node.next = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._tail = node
        self._size += 1

    def concatenate(self, other: CircularList) -> None:
        """Splice the nodes of ``other`` onto the end of this ring.

        ``other`` is left empty. Raises ValueError when ``other`` is this list.
        """
        if other is self:
            raise ValueError("cannot concatenate a list with itself")
        if other._tail is None:
            return
        if self._tail is not None:
            first = self._tail.next
            self._tail.next = other._tail.next
            other._tail.next = first
        self._tail = other._tail
        self._size += other._size
        other._tail = None
        other._size = 0

    def remove_duplicates(self) -> None:
        """Drop every node whose value already occurred earlier in the ring."""
        if self._tail is None:
            return
        seen: set[Any] = set()
        previous = self._tail
        node = self._tail.next
        for _ in range(self._size):
            following = node.next
            if node.value in seen:
                previous.next = following
                if node is self._tail:
                    self._tail = previous
                self._size -= 1
            else:
                seen.add(node.value)
                previous = node
            node = following


class SinglyLinkedList:
    """A list of nodes each linking to its successor."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self) + "NULL"

    def append(self, value: Any) -> None:
        """Insert ``value`` after the last node."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def remove_vowels(self) -> None:
        """Remove every node holding a vowel, in either case."""
        previous: _Node | None = None
        node = self._head
        while node is not None:
            following = node.next
            if node.value in _VOWELS:
                if previous is None:
                    self._head = following
                else:
                    previous.next = following
                if node is self._tail:
                    self._tail = previous
                self._size -= 1
            else:
                previous = node
            node = following


def union_and_intersection(
    first: Iterable[Any], second: Iterable[Any]
) -> tuple[list[Any], list[Any]]:
    """Return the union and the intersection of two sequences.

    Both are walked side by side, one value from each in turn, and values
    are reported in the order they are first met. The intersection holds the
    values that occur exactly twice over both sequences, which for sequences
    without repeats of their own is the common values.
    """
    interleaved = chain.from_iterable(zip_longest(first, second, fillvalue=_MISSING))
    counts = Counter(value for value in interleaved if value is not _MISSING)
    union = list(counts)
    intersection = [value for value, count in counts.items() if count == 2]
    return union, intersection