# algokit

A small library of classic data-structure and algorithm routines written in
plain Python, with no runtime dependencies. Python 3.10 or later is required.

## Installation

```
pip install algokit
```

To run the test suite from a checkout:

```
pip install ".[test]"
pytest
```

## What is inside

| Module                | Contents |
|-----------------------|----------|
| `algokit.trees`       | `Node`, `NULL_MARKER`, `height`, `is_balanced`, `diameter`, `is_identical`, `leaf_count`, `left_view`, `spiral_level_order`, `max_path_sum`, `serialize`, `deserialize`, `vertical_traversal`, `bottom_view`, `connect_nodes`, `mirror`, `lca` |
| `algokit.bst`         | `lca_bst`, `is_bst`, `kth_smallest` (these work on `algokit.trees.Node`) |
| `algokit.arrays`      | `count_inversions`, `equilibrium_point`, `repeated_occurrences`, `repeating_elements`, `missing_number`, `max_subarray_sum`, `kth_smallest_element`, `merge_sorted`, `sort_012`, `max_profit_single`, `max_profit_multiple` |
| `algokit.subarrays`   | `longest_balanced_binary_subarray`, `leaders`, `majority_candidate`, `is_majority`, `majority_by_bits`, `subarray_with_sum`, `subarray_with_sum_any` |
| `algokit.dp`          | `longest_common_substring`, `longest_common_subsequence`, `longest_increasing_subsequence` |
| `algokit.search`      | `single_element`, `search_rotated` |
| `algokit.graph`       | `bfs`, `dfs`, `is_cyclic` |
| `algokit.linked_list` | `ListNode`, `build_list`, `find_cycle`, `middle_node`, `reverse`, `reverse_recursive` |
| `algokit.platforms`   | `min_platforms`, `min_platforms_events` |
| `algokit.stacks`      | `MinStack`, `QueueUsingStacks`, `StackUsingQueues`, `next_larger_elements`, `is_balanced_parentheses` |
| `algokit.strings`     | `permutations`, `is_anagram` |

Import from the modules directly; the top-level `algokit` package only
lists them.

## Conventions

- "Not found" is `None`, not a sentinel number: `equilibrium_point`,
  `search_rotated`, `majority_by_bits`, `subarray_with_sum`,
  `subarray_with_sum_any`, `lca` and `lca_bst` return `None` when there is
  no answer. `next_larger_elements` puts `None` where no larger value follows.
- Invalid input raises `ValueError`. Examples are an empty list passed to
  `max_subarray_sum`, `majority_candidate` or `single_element`, a `k` out of
  range, a value other than 0, 1 or 2 passed to `sort_012`, or arrival and
  departure lists of different lengths.
- Popping or peeking at an empty `MinStack`, `QueueUsingStacks` or
  `StackUsingQueues` raises `IndexError`.
- `height` and `diameter` count nodes, not edges.
- `max_path_sum` never goes below 0, so a tree of only negative values gives 0.
- `serialize` writes a preorder list with `NULL_MARKER` (`-1`) for each
  missing child. `deserialize` reverses it and treats input that ends early
  as if it were padded with markers. Because of this, a tree that holds the
  value `-1` cannot be round-tripped.
- `sort_012`, `mirror`, `connect_nodes`, `reverse` and `reverse_recursive`
  change their argument in place.

## Examples

Binary trees:

```python
from algokit.trees import Node, height, vertical_traversal, bottom_view, serialize

#       1
#      / \
#     2   3
#    / \   \
#   4   5   6
root = Node(1, Node(2, Node(4), Node(5)), Node(3, None, Node(6)))

height(root)              # 3
vertical_traversal(root)  # [4, 2, 1, 5, 3, 6]
bottom_view(root)         # [4, 2, 5, 3, 6]
serialize(Node(1, Node(2)))  # [1, 2, -1, -1, -1]
```

Arrays and dynamic programming:

```python
from algokit.arrays import max_subarray_sum, merge_sorted, max_profit_single
from algokit.dp import longest_common_substring, longest_common_subsequence

max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # 6
merge_sorted([1, 3, 5, 7], [2, 4, 6, 8])           # [1, 2, 3, 4, 5, 6, 7, 8]
max_profit_single([7, 1, 5, 3, 6, 4])              # 5

longest_common_substring("ABCDGH", "ACDGHRX")     # 4
longest_common_subsequence("ABCDGH", "AEDFHR")    # 3
```

Stacks and queues:

```python
from algokit.stacks import MinStack, is_balanced_parentheses, next_larger_elements

stack = MinStack()
for value in (8, 10, 3, 7):
    stack.push(value)
stack.minimum()   # 3
stack.pop()       # 7
stack.pop()       # 3
stack.minimum()   # 8

is_balanced_parentheses("{[()]}")          # True
next_larger_elements([18, 7, 6, 12, 15])   # [None, 12, 12, 15, None]
```

Graphs are given as adjacency lists indexed by vertex number:

```python
from algokit.graph import bfs, dfs, is_cyclic

bfs([[1, 2], [3], [], []])     # [0, 1, 2, 3]
dfs([[1, 2], [3], [], []], 0)  # [0, 1, 3, 2]
is_cyclic([[1], [2], [0]])     # True
```

Linked lists and strings:

```python
from algokit.linked_list import build_list, middle_node
from algokit.strings import permutations, is_anagram

middle_node(build_list([1, 2, 3, 4, 5])).data   # 3
list(permutations("ABC"))   # ['ABC', 'ACB', 'BAC', 'BCA', 'CBA', 'CAB']
is_anagram("LISTEN", "SILENT")   # True
```

## What it does not do

algokit is a library only. It has no command-line program, reads no input
and prints nothing; every routine takes its data as arguments and returns
its result.