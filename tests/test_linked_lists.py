import pytest

from dsakit.linked_lists import (
    CircularList,
    DoublyLinkedList,
    SinglyLinkedList,
    union_and_intersection,
)


def _built_doubly():
    values = [1, 2, 3, 4, 5, 6]
    dll = DoublyLinkedList()
    for value in values:
        dll.push_back(value)
    dll.push_front(7)
    return dll, [7] + values


def test_push_front_and_back_order():
    dll, expected = _built_doubly()
    assert list(dll) == expected
    assert len(dll) == len(expected)


def test_prev_links_match_next_links():
    dll, expected = _built_doubly()
    assert list(reversed(dll)) == expected[::-1]


def test_remove_value():
    dll, expected = _built_doubly()
    dll.remove(4)
    expected.remove(4)
    assert list(dll) == expected
    assert list(reversed(dll)) == expected[::-1]


def test_remove_missing_raises():
    dll, _ = _built_doubly()
    with pytest.raises(ValueError):
        dll.remove(99)


def test_pop_front_and_back():
    dll, expected = _built_doubly()
    assert dll.pop_front() == expected[0]
    assert dll.pop_back() == expected[-1]
    assert list(dll) == expected[1:-1]
    assert list(reversed(dll)) == expected[1:-1][::-1]


def test_pop_from_empty_raises():
    with pytest.raises(IndexError):
        DoublyLinkedList().pop_front()
    with pytest.raises(IndexError):
        DoublyLinkedList().pop_back()


def test_pop_until_empty():
    dll = DoublyLinkedList([5])
    assert dll.pop_back() == 5
    assert len(dll) == 0
    assert list(dll) == []


def test_bubble_sort_matches_sorted():
    values = [1, 3, 10, 9, 6, 7]
    dll = DoublyLinkedList()
    for value in reversed(values):
        dll.push_front(value)
    dll.bubble_sort()
    assert list(dll) == sorted(values)
    assert list(reversed(dll)) == sorted(values, reverse=True)


def test_bubble_sort_empty():
    dll = DoublyLinkedList()
    dll.bubble_sort()
    assert list(dll) == []


def test_doubly_str_format():
    assert str(DoublyLinkedList([1, 2])) == "1->2->NULL"


def test_circular_append_and_str():
    ring = CircularList(range(1, 11))
    assert list(ring) == list(range(1, 11))
    assert str(ring) == "".join(f"{i}->" for i in range(1, 11)) + "1"


def test_circular_concatenate():
    first = CircularList(range(1, 11))
    second = CircularList(range(11, 21))
    first.concatenate(second)
    assert list(first) == list(range(1, 21))
    assert len(first) == 20
    assert len(second) == 0
    assert list(second) == []


def test_circular_concatenate_onto_empty():
    first = CircularList()
    second = CircularList([4, 5])
    first.concatenate(second)
    assert list(first) == [4, 5]
    first.append(6)
    assert list(first) == [4, 5, 6]


def test_circular_concatenate_self_raises():
    ring = CircularList([1])
    with pytest.raises(ValueError):
        ring.concatenate(ring)


def test_circular_remove_duplicates():
    values = [12, 11, 12, 21, 41, 43, 21]
    ring = CircularList(values)
    ring.remove_duplicates()
    assert list(ring) == list(dict.fromkeys(values))
    ring.append(100)
    assert list(ring)[-1] == 100
    assert len(ring) == len(set(values)) + 1


def test_singly_remove_vowels():
    letters = SinglyLinkedList("Education")
    letters.remove_vowels()
    assert "".join(letters) == "dctn"


def test_singly_remove_all_vowels():
    letters = SinglyLinkedList("AeIoU")
    letters.remove_vowels()
    assert list(letters) == []
    assert len(letters) == 0
    letters.append("x")
    assert list(letters) == ["x"]


def test_singly_remove_vowels_keeps_order():
    word = "Programming Language"
    letters = SinglyLinkedList(word)
    letters.remove_vowels()
    remaining = list(letters)
    assert not set(remaining) & set("aeiouAEIOU")
    iterator = iter(word)
    assert all(char in iterator for char in remaining)


def test_union_and_intersection_source_example():
    union, intersection = union_and_intersection([1, 2, 3, 4, 5], [1, 3, 5, 6])
    assert union == [1, 2, 3, 5, 4, 6]
    assert intersection == [1, 3, 5]


def test_union_and_intersection_sets():
    first = [9, 4, 7, 1]
    second = [7, 8, 9]
    union, intersection = union_and_intersection(first, second)
    assert set(union) == set(first) | set(second)
    assert len(union) == len(set(union))
    assert set(intersection) == set(first) & set(second)


def test_union_and_intersection_accepts_linked_list():
    first = SinglyLinkedList([1, 2])
    union, intersection = union_and_intersection(first, [])
    assert union == [1, 2]
    assert intersection == []