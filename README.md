# dsakit

A collection of classic data-structure and algorithm routines in plain
Python, with no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsakit.brackets` | `bracket_marks` scores a string of `<` and `>` brackets: `<>` is 1, a pair around others is three times their sum, neighbours add up |
| `dsakit.sorting` | `bubble_sort` (in place, returns the swap count), `bubble_sort_recursive` (in place), `count_sort` (non-negative integers, returns a new list) |
| `dsakit.trees` | `TreeNode`; `preorder_iterative`, `preorder_recursive`, `inorder_iterative`, `inorder_recursive`; `vertical_order` (dict of columns by horizontal distance) and `vertical_order_levels` (columns in level order) |
| `dsakit.linked_lists` | `DoublyLinkedList` (`push_front`, `push_back`, `remove`, `pop_front`, `pop_back`, `bubble_sort`), `CircularList` (`append`, `concatenate`, `remove_duplicates`), `SinglyLinkedList` (`append`, `remove_vowels`), and `union_and_intersection` |
| `dsakit.hashing` | `ChainedHashTable` (separate chaining), `DoubleHashTable` (open addressing with double hashing), `DirectIndexTable` (membership by direct index, negatives included) |
| `dsakit.frequency` | counting problems: `cumulative_frequency`, `duplicates`, `occurring_k_times`, `min_deletions`, `min_operations`, `min_distinct_subsets`, `most_frequent`, `group_occurrences`, `prime_frequency_elements`, `first_repeated`, `smallest_repeated_k_times`, `duplicates_at_distance`, `frequencies_by_key`, `frequencies_by_value` |
| `dsakit.dp` | `fibonacci_memo`, `fibonacci_table`, `factorial_table` |
| `dsakit.ranking` | `sort_by_frequency`, `top_k_stream` (a generator of running top-k lists), `top_three`, `top_k_frequent` |
| `dsakit.positions` | `find_repeating_readonly`, `count_subarrays_with_sum`, `smallest_subarray_of_most_frequent`, `max_shortest_distance` |
| `dsakit.words` | `count_items_with_different_price`, `second_most_repeated`, `charset_key`, `group_by_charset`, `min_index_sum_common` |
| `dsakit.matrix` | `permuted_rows`, `common_in_all_rows`, `distinct_common_in_all_rows`, `not_common_in_all_rows`, `pairs_in_different_rows`, `unvisited_positions` |
| `dsakit.pairs` | `cross_sum_pairs`, `sum_pairs`, `has_product_pair`, `product_pairs`, `positive_negative_pairs`, `symmetric_pairs`, `greatest_product` |
| `dsakit.arrays` | `reduced_form`, `kth_missing`, `missing_in_range`, `only_in_first`, `count_common`, `sum_not_common`, `are_disjoint`, `make_permutation`, `max_occurrence_distance` |

## Examples

```python
from dsakit.brackets import bracket_marks
from dsakit.sorting import count_sort
from dsakit.trees import TreeNode, inorder_recursive
from dsakit.hashing import ChainedHashTable
from dsakit.frequency import most_frequent
from dsakit.dp import fibonacci_table

bracket_marks("<<>>")          # 3
count_sort([4, 1, 3, 1])       # [1, 1, 3, 4]

root = TreeNode(1, TreeNode(2), TreeNode(3))
inorder_recursive(root)        # [2, 1, 3]

table = ChainedHashTable(7)
for value in (15, 11, 27, 8, 12):
    table.insert(value)
print(table.render())

most_frequent([1, 3, 2, 1, 4, 1])   # 1
fibonacci_table(10)                 # 55
```

## Results and errors

Functions return their results rather than printing them; the hash tables
offer `render()` to produce a printable text view. Invalid input raises a
standard exception, such as `ValueError` (for example an empty sequence
where a value is needed, or a negative `n`) or `IndexError` (popping from an
empty list). Where "nothing found" is an ordinary answer, functions such as
`first_repeated`, `smallest_repeated_k_times`, `greatest_product` and
`DoubleHashTable.search` return `None` instead.

## What this package does not do

It is a library only: it has no command-line program and reads no input
from the terminal. Callers pass values in and use what comes back.