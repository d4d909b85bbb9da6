# algoshelf

A library of classic algorithms written as plain functions on Python lists,
integers and strings, with small node classes for linked lists and binary
trees. It has no dependencies outside the standard library.

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

### `algoshelf.nodes`

- `ListNode(val=0, next=None)`: a singly linked list node.
- `TreeNode(val=0, left=None, right=None)`: a binary tree node.
- `LinkedTreeNode`: a `TreeNode` with an extra `next` pointer to its right
  neighbour on the same level.
- `RandomListNode(val=0, next=None, random=None)`: a list node with a pointer
  to any node of the list.
- `build_list(values)`: a linked list of `values` in order; `None` for no values.
- `list_values(head)`: the values of a linked list as a Python list.
- `build_tree(values)`: a binary tree from level-order values, with `None`
  marking a missing child.

Nodes compare by identity, not by value.

### `algoshelf.arrays`

`two_sum` (indices of every matching pair, flattened), `three_sum`,
`four_sum`, `remove_duplicates`, `remove_element`, `next_permutation`,
`trap`, `max_subarray`, `can_jump`, `merge_intervals`, `sort_colors`,
`subsets`, `max_profit`, `max_profit_unlimited`, `single_number`,
`max_product`, `rob`, `sum_divisible_by_k`, `max_alternating_sum`.

`max_subarray` and `max_product` raise `ValueError` on an empty sequence.

### `algoshelf.integers`

`reverse_integer` (0 when the result leaves the 32-bit range),
`climb_stairs`, `min_moves`, `number_of_steps`, `num_water_bottles`,
`total_money`, `count_operations`, `smallest_all_set_bits`, `remove_zeros`.

`number_of_steps` and `total_money` raise `ValueError` on negative input;
`num_water_bottles` raises `ValueError` when `num_exchange` is below 2.

### `algoshelf.text`

- `length_of_last_word(s)`
- `remove_k_digits(num, k)`: the smallest number left, as a string, `"0"` if
  nothing remains.
- `max_sum_of_squares(num, total)`: the largest `num`-digit string whose
  digits add up to `total`, or `""` if there is none.

### `algoshelf.searching`

`find_median_sorted_arrays` (raises `ValueError` when both inputs are empty
or not sorted), `search_rotated` (index or -1), `search_insert`,
`search_rotated_with_duplicates`, `longest_consecutive`, `intersect`,
`max_distance`, `sneaky_numbers`.

### `algoshelf.stacks`

- `max_sliding_window(nums, k)`: raises `ValueError` unless
  `1 <= k <= len(nums)`.
- `next_greater_element(nums1, nums2)`: -1 where no larger value follows,
  0 for an item of `nums1` that is absent from `nums2`.
- `next_greater_elements(nums)`: circular search, -1 where none.
- `daily_temperatures(temperatures)`

### `algoshelf.matrices`

`rotate` (a quarter turn clockwise), `spiral_order`, `set_zeroes`,
`search_matrix`, `solve_n_queens`.

### `algoshelf.linked_lists`

- `add_two_numbers(l1, l2)`: digits stored least significant first.
- `copy_random_list(head)`: a deep copy of a list of `RandomListNode`.
- `delete_node(node)`: removes a node given only itself; raises `ValueError`
  for the last node.
- `modified_list(nums, head)`: drops every node whose value is in `nums`.
- `LinkedList(values=())`: an indexable list with `get`, `add_at_head`,
  `add_at_tail`, `add_at_index`, `delete_at_index`, `len()` and iteration.
  `get` returns -1 for an index out of range; out-of-range inserts and deletes
  are ignored.

### `algoshelf.trees`

`has_path_sum`, `connect`, `sum_numbers`, `right_side_view`, `invert_tree`,
`inorder` (a generator), `kth_smallest`, `lowest_common_ancestor`,
`is_same_tree`, `is_subtree`, `max_level_sum`, `check_tree`,
`kth_largest_level_sum`.

`kth_smallest` raises `ValueError` for `k < 1` and `IndexError` when the tree
is too small; `kth_largest_level_sum` raises `ValueError` for `k < 1` and
returns -1 when there are fewer than `k` levels.

### `algoshelf.bank`

`Bank(balance)` holds accounts numbered from 1. `transfer`, `deposit` and
`withdraw` return `True` on success and `False` when an account does not
exist or lacks the funds.

## Examples

```python
from algoshelf.arrays import two_sum, three_sum
from algoshelf.integers import reverse_integer
from algoshelf.nodes import build_list, list_values, build_tree
from algoshelf.linked_lists import add_two_numbers
from algoshelf.trees import right_side_view
from algoshelf.bank import Bank

two_sum([2, 7, 11, 15], 9)          # [0, 1]
three_sum([-1, 0, 1, 2, -1, -4])    # [[-1, -1, 2], [-1, 0, 1]]
reverse_integer(-123)               # -321

total = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
list_values(total)                  # [7, 0, 8]

root = build_tree([1, 2, 3, None, 5, None, 4])
right_side_view(root)               # [1, 3, 4]

bank = Bank([10, 100, 20, 50, 30])
bank.withdraw(3, 10)                # True
bank.transfer(5, 1, 20)             # True
```

`next_permutation`, `sort_colors`, `rotate`, `set_zeroes`,
`remove_duplicates` and `remove_element` change the list they are given;
`invert_tree`, `connect`, `delete_node` and `modified_list` change the nodes
they are given.

## What it does not do

This is a library only: it has no command-line program, and the `Bank`
keeps its balances in memory without saving them anywhere.