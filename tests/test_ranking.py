import pytest

from dsakit.ranking import sort_by_frequency, top_k_frequent, top_k_stream, top_three


def test_sort_by_frequency_worked_example():
    assert sort_by_frequency([2, 5, 2, 8, 5, 6, 8, 8]) == [8, 8, 8, 2, 2, 5, 5, 6]


def test_sort_by_frequency_is_a_permutation():
    data = [4, 9, 4, 1, 9, 9, 0, 7]
    assert sorted(sort_by_frequency(data)) == sorted(data)


def test_sort_by_frequency_ties_keep_first_occurrence():
    assert sort_by_frequency([3, 1, 3, 1]) == [3, 3, 1, 1]


def test_sort_by_frequency_empty():
    assert sort_by_frequency([]) == []


def test_top_k_stream_worked_example():
    snapshots = list(top_k_stream([5, 2, 1, 3, 2], 4))
    assert snapshots == [
        [5],
        [2, 5],
        [1, 2, 5],
        [1, 2, 3, 5],
        [2, 1, 3, 5],
    ]


def test_top_k_stream_one_snapshot_per_value_and_bounded():
    data = [5, 2, 1, 3, 2, 5, 5, 7]
    snapshots = list(top_k_stream(data, 2))
    assert len(snapshots) == len(data)
    assert all(len(snapshot) <= 2 for snapshot in snapshots)


def test_top_k_stream_zero_k_yields_empty():
    assert list(top_k_stream([1, 2, 3], 0)) == [[], [], []]


def test_top_k_stream_negative_k():
    with pytest.raises(ValueError):
        top_k_stream([1, 2], -1)


def test_top_three_worked_example():
    assert top_three([2, 4, 3, 2, 3, 4, 5, 5, 3, 2, 2, 5]) == [2, 3, 5]


def test_top_three_fewer_distinct_values():
    assert top_three([7, 7, 9]) == [7, 9]


def test_top_three_empty():
    assert top_three([]) == []


def test_top_k_frequent_worked_example():
    assert top_k_frequent([3, 1, 4, 4, 5, 2, 6, 1], 2) == [4, 1]


def test_top_k_frequent_ties_prefer_larger():
    assert top_k_frequent([1, 2], 2) == [2, 1]


def test_top_k_frequent_k_beyond_distinct():
    result = top_k_frequent([6, 6, 8], 5)
    assert sorted(result) == [6, 8]


def test_top_k_frequent_negative_k():
    with pytest.raises(ValueError):
        top_k_frequent([1], -2)