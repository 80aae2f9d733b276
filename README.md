# problemset

Solutions to classic algorithm exercises, grouped by theme, together with a
small command that regenerates a problem index table inside a README file.
The package has no dependencies beyond the standard library.

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

- `problemset.arrays`: array edits and scans. Some functions change the list
  they are given in place (`remove_duplicates`, `remove_element`,
  `remove_duplicates_keep_two`, `merge_sorted`, `sort_colors`, `plus_one`,
  `reverse_string`); others return a new value (`two_sum`, `intersect`,
  `min_moves_to_seat`, `num_rescue_boats`, `three_consecutive_odds`,
  `is_array_special`, `special_array_queries`, `min_operations_flip_three`).
- `problemset.strings`: `compare_version`, `common_chars`,
  `palindrome_partitions`, `append_characters`, `score_of_string`,
  `permutation_difference`, `minimum_chairs`, `clear_stars`, `clear_digits`,
  `longest_palindrome`, `replace_words`, and the prefix tree `Trie` with
  `insert` and `root_of`.
- `problemset.linked_lists`: `ListNode` (build one with
  `ListNode.from_values`, iterate it to get its values) and `reverse_list`,
  `delete_node`, `remove_nodes`, `double_it`.
- `problemset.trees`: the `TreeNode` dataclass with `max_depth`,
  `tree_height`, `is_balanced`, `build_tree_pre_in`, `build_tree_in_post`,
  `remove_leaf_nodes`, `evaluate_tree` and `distribute_coins`.
  `remove_leaf_nodes` and `distribute_coins` modify the tree they are given.
- `problemset.ordering`: sorting, counting and greedy problems:
  `height_checker`, `relative_sort_array`, `min_increment_for_unique`,
  `special_array`, `is_n_straight_hand`, `lemonade_change`,
  `find_relative_ranks`, `max_profit_assignment`, `maximum_happiness_sum`,
  `find_maximized_capital`.
- `problemset.numeric`: number theory, bit tricks and search: `is_ugly`,
  `judge_square_sum`, `subset_xor_sum`, `ways_to_reach_stair`,
  `sum_digit_differences`, `longest_nice_subarray`, `minimum_difference`,
  `min_patches`, `min_days`, `kth_smallest_prime_fraction`, `subsets`,
  `beautiful_subsets`.
- `problemset.assorted`: `check_subarray_sum`, `subarrays_div_by_k`,
  `maximum_energy`, `max_score`, `count_days`, `find_winning_player`,
  `can_finish`, `largest_local`, and the `FoodRatings` class with
  `change_rating` and `highest_rated`.

Inputs that a function cannot handle, such as a star in `clear_stars` with
nothing before it to remove, raise `ValueError`.

## Example

```python
from problemset.arrays import two_sum
from problemset.linked_lists import ListNode, double_it
from problemset.assorted import FoodRatings

two_sum([2, 7, 11, 15], 9)                         # [0, 1]
list(double_it(ListNode.from_values([1, 8, 9])))   # [3, 7, 8]

ratings = FoodRatings(["kimchi", "ramen"], ["korean", "japanese"], [9, 14])
ratings.highest_rated("korean")                    # "kimchi"
```

## Updating a README index

`problemset.readme` rebuilds a Markdown table of problems. Problems live in
directories named `<number>.<slug>`, each holding a `main.cpp`; the first
line of that file matching `// #KEYPOINT <text>` fills the key point column.
Directories without that file are reported on stderr and left out. The
README must contain the markers

```
<!-- BEGIN DIRECTORY STRUCTURE -->
<!-- END DIRECTORY STRUCTURE -->
```

and everything between them is replaced with a table sorted by problem
number, each row linking to `Problems/<name>/main.cpp`.

```
problemset-update-readme [--readme PATH] [--problems DIR]
```

`--readme` defaults to `../README.md` and `--problems` to `../Problems/`.
The command exits with status 1 if the README cannot be read or written, the
markers are missing or out of order, or a problem directory name does not
start with a number. If the problems directory cannot be read, an error is
printed and an empty table is written.

The same steps are available as functions: `scan_problems`, `render_table`,
`splice_readme` and `update_readme`, with `ProblemEntry` holding one row.