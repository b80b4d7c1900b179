"""Fibonacci numbers and factorials by memoization and by tabulation."""

from __future__ import annotations

_fibonacci_memo: dict[int, int] = {0: 0, 1: 1}


def _check(n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")


def fibonacci_memo(n: int) -> int:
    """Return the n-th Fibonacci number, top down with a shared memo."""
    _check(n)

    def _fib(k: int) -> int:
        if k not in _fibonacci_memo:
            _fibonacci_memo[k] = _fib(k - 1) + _fib(k - 2)
        return _fibonacci_memo[k]

    return _fib(n)


def fibonacci_table(n: int) -> int:
    """Return the n-th Fibonacci number, bottom up from a table."""
    _check(n)
    table = [0, 1]
    for index in range(2, n + 1):
        table.append(table[index - 1] + table[index - 2])
    return table[n]


def factorial_table(n: int) -> int:
    """Return n factorial, bottom up from a table."""
    _check(n)
    table = [1]
    for index in range(1, n + 1):
        table.append(table[index - 1] * index)
    return table[n]