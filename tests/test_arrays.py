import pytest

from dsakit.arrays import (
    are_disjoint,
    count_common,
    kth_missing,
    make_permutation,
    max_occurrence_distance,
    missing_in_range,
    only_in_first,
    reduced_form,
    sum_not_common,
)


def test_reduced_form_example():
    assert reduced_form([10, 20, 15, 12, 11, 50]) == [0, 4, 3, 2, 1, 5]


def test_reduced_form_preserves_order():
    values = [7, -3, 42, 0, 19]
    reduced = reduced_form(values)
    assert sorted(reduced) == list(range(len(values)))
    for i, a in enumerate(values):
        for j, b in enumerate(values):
            assert (a < b) == (reduced[i] < reduced[j])


def test_reduced_form_empty():
    assert reduced_form([]) == []


def test_kth_missing_example():
    assert kth_missing([0, 2, 4, 6, 8, 10, 12, 14, 15], [4, 10, 6, 8, 12], 3) == 14


def test_kth_missing_first():
    assert kth_missing([0, 2, 4], [4], 1) == 0


@pytest.mark.parametrize("k", [0, -1, 4])
def test_kth_missing_out_of_range(k):
    with pytest.raises(ValueError):
        kth_missing([1, 2, 3, 4], [4], k)


def test_missing_in_range_example():
    assert missing_in_range([1, 14, 11, 51, 15], 50, 55) == [50, 52, 53, 54]


def test_missing_in_range_all_present():
    assert missing_in_range([10, 11, 12, 13, 14], 10, 15) == []


def test_only_in_first_example():
    assert only_in_first([1, 5, 3, 8], [5, 4, 6, 7]) == [1, 3, 8]


def test_count_common_none():
    assert not count_common([1, 2, 3, 4], [5, 6, 7])


def test_count_common_matches_only_in_first():
    first = [1, 2, 3, 4]
    second = [2, 3, 4, 5, 8]
    assert count_common(first, second) == len(second) - len(only_in_first(second, first))


def test_count_common_self():
    values = [4, 9, 1]
    assert count_common(values, values) == len(values)


def test_sum_not_common_example():
    assert sum_not_common([1, 5, 3, 8], [5, 4, 6, 7]) == 29


def test_sum_not_common_identical():
    assert not sum_not_common([1, 2, 3], [3, 2, 1])


def test_are_disjoint():
    assert are_disjoint([12, 34, 11, 9, 3], [2, 1, 3, 5]) is False
    assert are_disjoint([1, 2], [3, 4]) is True


def test_are_disjoint_duplicates_in_first():
    assert are_disjoint([4, 4], [4]) is False


@pytest.mark.parametrize(
    "values", [[1, 8, 7, 3], [2, 2, 3, 3], [10, 1, 2], [1, 3, 2], [0, -5, 9, 9, 9]]
)
def test_make_permutation_is_permutation(values):
    original = list(values)
    result = make_permutation(values)
    assert sorted(result) == list(range(1, len(values) + 1))
    assert values == original


def test_make_permutation_keeps_valid_values():
    assert make_permutation([1, 3, 2]) == [1, 3, 2]
    result = make_permutation([10, 1, 2])
    assert result[1:] == [1, 2]
    result = make_permutation([1, 8, 7, 3])
    assert result[0] == 1 and result[3] == 3


def test_max_occurrence_distance_example():
    assert max_occurrence_distance([3, 2, 1, 2, 1, 4, 5, 8, 6, 7, 4, 2]) == 10


def test_max_occurrence_distance_no_repeat():
    assert not max_occurrence_distance([1, 2, 3, 4, 5])


def test_max_occurrence_distance_ends():
    values = [7, 1, 2, 3, 7]
    assert max_occurrence_distance(values) == len(values) - 1