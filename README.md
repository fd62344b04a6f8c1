# dsalab

A small collection of classic data structures and algorithms, written as
plain Python classes and functions. It has no dependencies beyond the
standard library and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsalab.linked_list` | `LinkedList`, a singly linked list with insertion and deletion at either end |
| `dsalab.circular_list` | `CircularList`, a circular singly linked list, plus `delete_item` to remove the first matching value |
| `dsalab.priority_queue` | `PriorityQueue`: lower priority numbers leave first; equal priorities leave in insertion order |
| `dsalab.bounded_stack` | `BoundedStack`, a stack of fixed capacity (default 5) |
| `dsalab.bounded_queue` | `BoundedQueue`, a linear queue of fixed capacity (default 5) whose slots are not reused |
| `dsalab.polynomial` | `Polynomial`, terms kept in insertion order, with `+` |
| `dsalab.expressions` | `precedence`, `infix_to_postfix`, `evaluate_postfix` |
| `dsalab.intervals` | `merge_intervals`, `covered_length`, and `IntervalUnion`, which merges as intervals arrive |
| `dsalab.graphs` | `bellman_ford`, `ShortestPaths` (with `path`), `format_report`, `SAMPLE_WEIGHTS` |
| `dsalab.maxmin` | `max_min`, divide-and-conquer maximum and minimum |
| `dsalab.pattern` | `odd_triangle`, a triangle of consecutive odd numbers |

### Behaviour worth knowing

- Operations that cannot be carried out raise exceptions:
  deleting from an empty `LinkedList` or `CircularList`, removing from an
  empty `PriorityQueue`, popping or peeking an empty `BoundedStack`, and
  dequeuing or peeking an empty `BoundedQueue` raise `IndexError`;
  pushing onto a full stack or enqueuing into a full queue raises
  `OverflowError`; `CircularList.delete_item` raises `ValueError` when the
  value is absent.
- The delete and remove methods return the value they took out.
- `BoundedQueue` reports full once `capacity` items have been enqueued,
  even if some have since been dequeued.
- `Polynomial` addition merges two polynomials whose terms are ordered by
  descending exponent; `str()` writes terms such as `13x3+5x2-3x1-3`.
- `infix_to_postfix` accepts single-character ASCII letters and digits as
  operands, the operators `^ $ * / + -` and parentheses; anything else, or
  unbalanced parentheses, raises `ValueError`.
- `evaluate_postfix` accepts single-digit operands and the operators
  `^ * / + -`; division truncates toward zero. Both use a stack of 20
  entries, so deeper expressions raise `OverflowError`.
- `bellman_ford` takes a square adjacency matrix in which `999`
  (`INFINITY`) and the diagonal mean "no edge". Unreachable vertices get
  distance `999`, and a reachable negative-weight cycle raises `ValueError`.
- `max_min` returns `(maximum, minimum)` and raises `ValueError` for an
  empty input.

## Examples

```python
from dsalab.linked_list import LinkedList
from dsalab.priority_queue import PriorityQueue
from dsalab.polynomial import Polynomial
from dsalab.expressions import infix_to_postfix, evaluate_postfix
from dsalab.intervals import covered_length
from dsalab.graphs import SAMPLE_WEIGHTS, bellman_ford, format_report
from dsalab.maxmin import max_min

items = LinkedList([1, 2, 3])
items.insert_at_beginning(0)
items.delete_from_end()
print(list(items))                     # [0, 1, 2]

queue = PriorityQueue()
queue.insert(10, 2)
queue.insert(20, 1)
print(list(queue))                     # [(20, 1), (10, 2)]
print(queue.remove())                  # 20

p1 = Polynomial([(10, 3), (5, 2), (2, 1), (-7, 0)])
p2 = Polynomial([(3, 3), (-5, 1), (4, 0)])
print(p1 + p2)                         # 13x3+5x2-3x1-3

print(infix_to_postfix("a+b*c"))       # abc*+
print(evaluate_postfix("23*4+"))       # 10

print(covered_length([(1, 3), (2, 5), (7, 8)]))  # 5
print(max_min([5, 6, 3, 8, 2, 9]))     # (9, 2)

print(format_report(bellman_ford(SAMPLE_WEIGHTS, 0)), end="")
```

## Commands

Installing the package provides four commands:

- `dsalab-expr [EXPRESSION] [-e]` converts an infix expression to postfix.
  With `-e`/`--evaluate` it evaluates a postfix expression of single digits
  instead. Without an expression it prompts for one.
- `dsalab-intervals [--incremental]` reads a count `K` followed by `K`
  pairs `L R` from standard input and prints the total length covered by
  their union. `--incremental` merges intervals as they are read instead
  of sorting them first; the result is the same.
- `dsalab-bellman-ford [--source LETTER]` runs Bellman-Ford on the
  built-in four-vertex graph (vertices `A` to `D`, default source `A`) and
  prints each route with its cost.
- `dsalab-pattern [ROWS]` prints a triangle of consecutive odd numbers,
  five rows by default.

For example:

```
dsalab-expr "(a+b)*c"
dsalab-expr -e 23*4+
printf '3\n1 3\n2 5\n7 8\n' | dsalab-intervals
dsalab-bellman-ford --source A
dsalab-pattern
```

## What it does not do

The list, stack, queue and polynomial types are library classes only:
there is no interactive menu program for building or editing them from
the terminal. Use them from Python code.