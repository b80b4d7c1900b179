"""Questions about the rows of a matrix, answered with hash maps."""

from __future__ import annotations

from typing import Any, Hashable, Iterable, Sequence

Matrix = Sequence[Sequence[Any]]


def permuted_rows(matrix: Matrix, row: int) -> list[int]:
    """Return the indices of the other rows made only of elements of ``row``.

    Raises IndexError when ``row`` does not name a row of the matrix.
    """
    reference = set(matrix[row])
    return [
        index
        for index, current in enumerate(matrix)
        if index != row and all(value in reference for value in current)
    ]


def _reach_of_first_row(matrix: Matrix) -> tuple[dict[Hashable, int], list[Any]]:
    """Track, for elements of the first row, how many leading rows hold them.

    Returns the final reach of each element and the elements that reach the
    last row, in the order they are met there.
    """
    reach = {value: 1 for value in matrix[0]}
    completed: list[Any] = [] if len(matrix) > 1 else list(dict.fromkeys(matrix[0]))
    for row_number, current in enumerate(matrix[1:], start=1):
        for value in current:
            if reach.get(value) == row_number:
                reach[value] = row_number + 1
                if row_number == len(matrix) - 1:
                    completed.append(value)
    return reach, completed


def common_in_all_rows(matrix: Matrix) -> list[Any]:
    """Return each element present in every row, once.

    Elements come in the order they appear in the last row.
    """
    if not matrix:
        return []
    return _reach_of_first_row(matrix)[1]


def distinct_common_in_all_rows(matrix: Matrix) -> set[Any]:
    """Return the set of distinct elements present in every row."""
    if not matrix:
        return set()
    return set(_reach_of_first_row(matrix)[1])


def not_common_in_all_rows(matrix: Matrix) -> set[Any]:
    """Return the elements of the matrix that are missing from some row."""
    if not matrix:
        return set()
    everything = {value for current in matrix for value in current}
    return everything - set(_reach_of_first_row(matrix)[1])


def pairs_in_different_rows(matrix: Matrix, target: int) -> list[tuple[int, int]]:
    """Return pairs summing to ``target`` whose elements lie in different rows.

    The matrix is scanned row by row; each pair is reported as (later
    element, earlier element) when the earlier one was last seen in an
    earlier row.
    """
    last_row: dict[int, int] = {}
    pairs: list[tuple[int, int]] = []
    for row_number, current in enumerate(matrix):
        for value in current:
            rest = target - value
            if rest in last_row and last_row[rest] < row_number:
                pairs.append((value, rest))
            last_row[value] = row_number
    return pairs


def unvisited_positions(
    size: int, visited: Iterable[tuple[int, int]]
) -> list[tuple[int, int]]:
    """Return the positions of a ``size`` by ``size`` grid not in ``visited``.

    Positions come in row-major order. Raises ValueError for a negative size.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    seen = set(visited)
    return [
        (row, column)
        for row in range(size)
        for column in range(size)
        if (row, column) not in seen
    ]