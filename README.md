# algokit

A small collection of classic algorithms and data structures in plain Python,
with no third-party dependencies. Requires Python 3.10 or later.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.numbers` | `Quadrant`, `quadrant`, `DayCount`, `convert_days`, `binary_to_decimal`, `decimal_to_binary`, `add_binary`, `factorial`, `is_armstrong`, `is_palindrome_number`, `is_vowel` |
| `algokit.text` | `strip_tags` |
| `algokit.sorting` | `exchange_sort`, `bubble_sort`, `insertion_sort`, `selection_sort`, `quick_sort` |
| `algokit.heap` | `MaxHeap`, `heap_sort` |
| `algokit.searching` | `linear_search`, `binary_search`, `two_sum`, `max_profit`, `remove_duplicates` (returns `Deduplicated`), `min_max` (returns `Extremes`) |
| `algokit.matrix` | `path_matrix`, `transpose`, `binomial`, `pascal_triangle`, `pascal_row` |
| `algokit.polynomial` | `Term`, `Polynomial` |
| `algokit.linked_list` | `Node`, `LinkedList`, `SortedList`, `has_cycle`, `merge_sorted` |
| `algokit.doubly_linked_list` | `DoublyLinkedList` |
| `algokit.circular_list` | `CircularList` |
| `algokit.queues` | `LinearQueue`, `CircularQueue`, `PriorityQueue`, `QueueOverflow`, `QueueUnderflow` |
| `algokit.bst` | `BinarySearchTree` |
| `algokit.quiz` | `Question`, `QUESTIONS`, `score`, `run_quiz`, `main` |

All sorting functions take any iterable and return a new ascending list;
the input is left untouched.

## Examples

```python
from algokit.sorting import quick_sort
from algokit.heap import heap_sort
from algokit.matrix import pascal_triangle, path_matrix
from algokit.bst import BinarySearchTree

quick_sort([5, 2, 9, 1])        # [1, 2, 5, 9]
heap_sort([3, 8, 1])            # [1, 3, 8]
pascal_triangle(4)              # [[1], [1, 1], [1, 2, 1], [1, 3, 3, 1]]
path_matrix([[0, 1], [0, 0]])   # [[0, 1], [0, 0]]

tree = BinarySearchTree([45, 32, 37, 31, 96, 213])
list(tree.inorder())            # [31, 32, 37, 45, 96, 213]
list(tree.preorder())           # [45, 32, 31, 37, 96, 213]
96 in tree                      # True
tree.delete(96)
list(tree.inorder())            # [31, 32, 37, 45, 213]
```

```python
from algokit.numbers import add_binary, decimal_to_binary, quadrant, Quadrant

add_binary("11", "1")           # "100"
decimal_to_binary(6)            # "110"
quadrant(-2, 3) is Quadrant.SECOND
```

```python
from algokit.queues import LinearQueue, PriorityQueue, QueueUnderflow

queue = LinearQueue()           # capacity 5 by default
queue.enqueue(25)
queue.dequeue()                 # 25
try:
    queue.dequeue()
except QueueUnderflow:
    print("empty")

jobs = PriorityQueue()
jobs.insert(4, "low")
jobs.insert(1, "urgent")
jobs.pop()                      # "urgent"
```

## Behaviour worth knowing

- `quadrant` reports `Quadrant.ORIGIN` for the origin and for any point on an axis.
- `convert_days` splits a day count into 365-day years, then 12-day months, then days.
- `binary_to_decimal` weights each decimal digit of its argument by a power of two,
  so digits other than 0 and 1 are taken at face value.
- `LinearQueue` never reuses its slots: after `capacity` values have been enqueued it
  raises `QueueOverflow`, even if some were dequeued. `CircularQueue` reuses them.
- `PriorityQueue` hands out the lowest priority number first; a new entry goes ahead
  of existing entries with the same priority.
- `remove_duplicates` drops every element equal to the one after it, sorts what is
  left and reports how many were dropped.
- Deleting a missing value from a list or tree raises `ValueError`; removing from an
  empty list raises `IndexError`.

## Quiz

A short five-question multiple-choice quiz runs in the terminal:

```
algokit-quiz
```

Enter `1` to start, then answer each question by its number. Each correct
answer is worth 10 points, out of 50; anything that is not a number counts as
a wrong answer. `run_quiz` can also be called with your own input function and
output stream, and `score` grades a list of answers directly.

The quiz is the only command; everything else is used as a library.