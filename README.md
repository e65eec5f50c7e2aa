# dsakit

A collection of classic data structures and algorithms in plain Python, with
no runtime dependencies. Every routine returns its result (or yields it from
a generator) rather than printing it, and errors are raised as exceptions.

## Modules

### `dsakit.arrays`

- `spiral_order(matrix)`: elements of a rectangular matrix in clockwise spiral order.
- `staircase_search(matrix, key)`: search a row- and column-sorted matrix from the
  top-right corner; returns `(row, column)` or `None`.
- `diagonal_sum(matrix)`: sum of both diagonals of a square matrix, the centre of an
  odd-sized matrix counted once; raises `ValueError` for a non-square matrix.
- `trap(height)`: units of rain water an elevation map holds.

### `dsakit.maths`

- `gcd_ascending`, `gcd_descending`, `gcd` (Euclid's algorithm).
- `is_armstrong(n)`, `check_prime(n)`, `is_prime(n)`.
- `divisors(n)` (ascending) and `paired_divisors(n)` (in `i, n // i` pairs).

### `dsakit.recursion`

- `binary_strings(n, last_place=0)`: generator of binary strings of length `n`
  where a `1` may only follow a `1` (or the start when `last_place` is non-zero).
- `pair_friends(n)`, `power(x, n)`, `tiling_ways(n)`.
- `subsets(items)`: generator of every subset, including each element before excluding it.
- `remove_duplicates(text)`: keep the first occurrence of each character.

### `dsakit.strings`

- `to_upper(text)`, `reverse_chars(chars)`, `is_palindrome(text)`, `is_anagram(s, t)`.

### `dsakit.sorting`

Each function returns a new sorted list and leaves its argument untouched:
`bubble_sort`, `selection_sort`, `insertion_sort`, `count_sort` (non-negative
integers only), `merge_sort`, `iterative_merge_sort`, `quick_sort` (numbers),
`shell_sort`, and `sort_chars_descending`.

### `dsakit.stacks`

- `ArrayStack` and `LinkedStack` with `push`, `pop`, `peek`, `is_empty` and `len()`.
- `find_celebrity(knows)`: index of the person everyone knows who knows no one, or `None`.
- `has_duplicate_parentheses(expression)`, `is_balanced(text)`.
- `insert_at_bottom(stack, value)` and `reverse_stack(stack)` on a list whose end is the top.
- `next_greater(items)` and `previous_smaller(items)`: `None` where no such element exists.
- `reverse_string(text)`, `stock_span(prices)`.

### `dsakit.queues`

- `CircularQueue(capacity)`: fixed-size ring buffer with `push`, `pop`, `front`,
  `is_empty`, `is_full` and `len()`.
- `LinkedQueue` (`enqueue`, `dequeue`, `peek`, `is_empty`).
- `DequeQueue` and `DequeStack`, backed by `collections.deque`.
- `TwoStackQueue` and `RecursiveStackQueue`: queues built on stacks.
- `PushCostlyStack` and `PopCostlyStack`: stacks built on two queues.
- `interleave(queue)` and `reverse_queue(queue)` on a `collections.deque`, in place.
- `first_non_repeating(text)`: first character occurring once, or `None`.

### `dsakit.linked_list`

- `LinkedList` (`push_front`, `push_back`, `insert`, `pop_front`, `pop_back`,
  `search`, `search_recursive`, `reverse`, `remove_nth_from_end`, iteration, `len()`)
  built from `Node`.
- `DoublyLinkedList` (`push_front`, `pop_front`, iteration, `len()`) built from `DoublyNode`.
- Helpers on raw node chains: `from_values`, `to_values`, `has_cycle`,
  `remove_cycle`, `split_at_mid`, `merge_sorted`, `merge_sort`, `reverse_nodes`, `zigzag`.

### `dsakit.backtracking`

- `change_array(n)`, `all_subsets(text)`, `all_permutations(text)`.
- `n_queens(n)` (solutions as lists of `Q`/`.` row strings) and `is_safe_queen`.
- `grid_ways(n, m)`: right/down paths across an `n` x `m` grid.
- `solve_sudoku(grid)` (0 marks a blank; returns the solved grid or `None`) and `is_safe_digit`.
- `find_paths(maze)` and `find_paths_in_place(maze)`: rat-in-a-maze paths using
  the moves `D`, `U`, `L`, `R`.

## Examples

```python
from dsakit.arrays import spiral_order, trap
from dsakit.stacks import stock_span

spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
# [1, 2, 3, 6, 9, 8, 7, 4, 5]

trap([4, 2, 0, 6, 3, 2, 5])
# 11

stock_span([100, 80, 60, 70, 60, 75, 85])
# [1, 1, 1, 2, 1, 4, 6]
```

## Errors

Removing from or peeking at an empty container raises `IndexError`, as does
inserting into a `LinkedList` past its end. Pushing onto a full
`CircularQueue` raises `OverflowError`. Invalid arguments such as negative
sizes raise `ValueError`.

## What it does not do

dsakit is a library only: it has no command-line tool and no interactive
prompts, and it prints nothing.

## Tests

The test suite uses pytest, available through the `test` extra.