# ctcikit

A collection of classic interview exercises. Each one is a small function or
class that you import and call. The collection covers string and matrix puzzles,
a doubly linked list and problems built on it, stacks and queues, and binary
trees and graphs. It has no dependencies beyond the standard library.

## Installation

```
pip install ctcikit
```

To run the tests:

```
pip install "ctcikit[test]"
pytest
```

## Contents

| Module | What it offers |
| --- | --- |
| `ctcikit.strings` | `is_unique`, `check_permutation`, `urlify`, `palindrome_permutation`, `one_away`, `compress_string` |
| `ctcikit.matrix` | `rotate_matrix`, `set_zeros`, `zero_matrix` |
| `ctcikit.linked_list` | `LinkedList`, `Node`, `LinkedListError`, `NotFoundError`, `EmptyListError` |
| `ctcikit.list_search` | `return_kth_to_last`, `delete_middle_node` |
| `ctcikit.list_algorithms` | `partition`, `sum_lists_in_reverse`, `is_palindrome`, `intersection`, `detect_loop` |
| `ctcikit.stack` | `Stack`, `StackNode` |
| `ctcikit.three_in_one` | `StackSimulation`: three stacks, numbered 1 to 3, held in one list |
| `ctcikit.stack_min` | `MinStack`: a stack whose `min` is the smallest value ever pushed |
| `ctcikit.stack_of_plates` | `SizedStack`, `StackOfPlates` |
| `ctcikit.stacked_queue` | `StackedQueue`: a first-in, first-out queue built from two stacks |
| `ctcikit.sort_stack` | `SortStack`: a stack that sorts itself so items pop in ascending order |
| `ctcikit.animal_shelter` | `Species`, `Animal`, `AnimalShelter` |
| `ctcikit.graph` | `State`, `GraphNode`, `Graph`, `search` |
| `ctcikit.binary_tree` | `BinNode`, `create_binary_search_tree`, `list_of_depths`, `is_balanced`, `validate_bst` |
| `ctcikit.successor` | `BinNodeLink`, `get_top_left`, `successor` |

## Behaviour worth knowing

- `is_unique` looks at the bytes of the UTF-8 encoding, not at characters.
- `one_away` compares only lengths: strings whose encoded lengths differ by
  exactly one count as one edit apart, and strings of equal length never do.
- `compress_string` returns the input unchanged when the compressed form is not
  shorter.
- `rotate_matrix`, `set_zeros` and `zero_matrix` change the matrix in place.
  `rotate_matrix` raises `ValueError` for an empty or non-square matrix.
- `LinkedList.pop_back` raises `EmptyListError` on an empty list, and
  `delete_middle_node` raises `NotFoundError` for a node without both neighbours.
- `Stack.pop` and `Stack.peek` return `None` on an empty stack.
- `search` marks the nodes it reaches as `State.VISITED`, and they stay marked.
- `is_balanced` returns a `(height, balanced)` pair; `validate_bst` raises
  `ValueError` when given `None`.
- `successor` raises `ValueError` when a parent link it needs is missing.

## Examples

```python
from ctcikit.strings import compress_string, one_away

compress_string("aabcccccaaa")   # "a2b1c5a3"
one_away("CtCI", "CCI")          # True
```

```python
from ctcikit.linked_list import LinkedList
from ctcikit.list_algorithms import sum_lists_in_reverse

a = LinkedList([7, 1, 6])
b = LinkedList([5, 9, 2])
print(sum_lists_in_reverse(a, b))   # [2,1,9]
```

```python
from ctcikit.stacked_queue import StackedQueue

queue = StackedQueue()
for n in range(3):
    queue.push(n)
queue.pop()   # 0
```

```python
from ctcikit.binary_tree import create_binary_search_tree, validate_bst

root = create_binary_search_tree([1, 2, 3, 4, 5, 6, 7, 8, 9, 10])
validate_bst(root)   # True
```

## What it does not do

The package is a library only. It has no command-line program and no
demonstration scripts; use it by importing the modules above.