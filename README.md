# algosuite

Well-known algorithm problems solved as plain Python functions, grouped by
theme. There are no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `algosuite.arrays`: `max_area`, `max_profit`, `num_subseq` (result taken
  modulo 10**9 + 7), `maximum_gap`, `rob`, `h_index`, `h_index_sorted` (for
  citations already in ascending order), `trap`, `find_duplicates` (in order
  of first appearance), `min_moves`, `can_jump`, `find_lhs`,
  `longest_mountain`.
- `algosuite.strings`: `length_of_longest_substring`,
  `longest_valid_parentheses`, `possible_string_count`, `longest_palindrome`,
  `character_replacement`, `check_inclusion`, `longest_subsequence`.
- `algosuite.dynamic`: `can_cross` (frog jump), `can_partition` (equal-sum
  split), `find_target_sum_ways` (number of +/- sign assignments).
- `algosuite.linked_list`: the `ListNode` dataclass (iterating a node yields
  the values from it to the end of the list), `from_values`, `merge_two` and
  `merge_k_lists`, which splice sorted lists together.
- `algosuite.pair_sums`: `FindSumPairs`, which counts pairs with a given sum
  across two lists while `add` changes values in the second list.
- `algosuite.backtracking`: `letter_combinations`, `generate_parentheses`,
  `combination_sum`, `combination_sum2`, `solve_n_queens`, `combine`,
  `subsets`, `all_paths_source_target`.
- `algosuite.disjoint_set`: `DisjointSet` with `find` and `union` (union by
  size with path compression; `union` returns `False` when both elements were
  already in one set), and `remove_stones`.
- `algosuite.grids`: `shortest_path_binary_matrix`, `solve_surrounded`
  (returns a new board and leaves the input untouched), `num_islands`,
  `max_area_of_island`, `minimum_effort_path`.
- `algosuite.graphs`: `ladder_length`, `max_probability`, `can_finish`,
  `find_order`, `min_mutation`, `network_delay_time`, `is_bipartite`,
  `find_cheapest_price`, `can_visit_all_rooms`, `possible_bipartition`.

Functions that have no meaningful answer for empty input, such as
`max_profit`, `rob`, `trap`, `can_cross` or `minimum_effort_path`, raise
`ValueError`. `combination_sum` raises `ValueError` for non-positive
candidates, and `DisjointSet.find` raises `IndexError` for an element outside
the set.

## Examples

```python
from algosuite.arrays import trap, max_profit
from algosuite.graphs import find_order
from algosuite.linked_list import from_values, merge_k_lists

trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])   # 6
max_profit([7, 1, 5, 3, 6, 4])               # 5
find_order(2, [[1, 0]])                      # [0, 1]

merged = merge_k_lists([from_values([1, 4, 5]), from_values([1, 3, 4])])
list(merged)                                 # [1, 1, 3, 4, 4, 5]
```

```python
from algosuite.pair_sums import FindSumPairs

pairs = FindSumPairs([1, 1, 2, 2, 2, 3], [1, 4, 5, 2, 5, 4])
pairs.count(7)    # 8
pairs.add(3, 2)
pairs.count(8)    # 2
```

## What it does not do

This is a library only. It has no command-line program, and it does not read
problem input from files or standard input: call the functions from Python.