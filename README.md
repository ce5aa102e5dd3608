# algodrills

Classic data-structure and algorithm drills in plain Python, with no
third-party dependencies.

## Installation

```
pip install algodrills
```

To run the test suite:

```
pip install "algodrills[test]"
pytest
```

## Modules

| Module                   | Contents |
|--------------------------|----------|
| `algodrills.linked_list` | `LinkedList`, `DoublyLinkedList` |
| `algodrills.stacks`      | `ArrayStack`, `PushHeavyStack`, `PopHeavyStack`, `insert_at_bottom`, `reverse_stack` |
| `algodrills.queues`      | `ArrayQueue`, `LinkedQueue`, `TwoStackQueue`, `RecursiveStackQueue` |
| `algodrills.expressions` | `precedence`, `infix_to_postfix`, `infix_to_prefix`, `evaluate_postfix`, `evaluate_prefix`, `has_redundant_parentheses`, `reverse_words` |
| `algodrills.monotonic`   | `largest_rectangle_area`, `stock_span`, `trapped_water`, `sliding_window_max_sorted`, `sliding_window_max` |
| `algodrills.dynamic`     | `longest_increasing_subsequence`, `max_non_adjacent_sum`, `tiling_ways` |
| `algodrills.arrays`      | `three_sum_exists`, `max_consecutive_ones`, `roll_string` |
| `algodrills.codeforces`  | `contest_dissatisfaction`, `max_deletion_points`, `level_passable`, `split_min_char`, `can_make_progression`, `closest_word`, `sort_string`, `min_operations`, `main` |

## Containers

`LinkedList` and `DoublyLinkedList` take an optional iterable of starting
values, support `len()` and iteration, and draw themselves with `display()`.
`DoublyLinkedList` can also be walked with `reversed()`. `delete(value)`
removes the first matching node and raises `ValueError` if there is none.

```python
from algodrills.linked_list import LinkedList

items = LinkedList()
for value in (1, 2, 3):
    items.insert_at_tail(value)
items.insert_at_head(0)
items.delete(2)
list(items)        # [0, 1, 3]
items.display()    # '0->1->3->NULL'
```

The stacks and queues raise `IndexError` when popped or inspected while empty.
`ArrayStack` holds at most 100 values by default and `ArrayQueue` accepts at
most 20 pushes over its lifetime by default (consumed slots are not reused);
beyond that they raise `OverflowError`. Both take a `capacity` argument.

`insert_at_bottom` and `reverse_stack` work in place on a list whose end is
the top of the stack.

## Expressions

Conversion works on single-letter operands with `+ - * / ^` and parentheses;
evaluation works on single-digit operands, with `/` truncating toward zero.

```python
from algodrills.expressions import infix_to_postfix, evaluate_postfix, evaluate_prefix

infix_to_postfix("(a-b/c)*(d/e+f)")   # 'abc/-de/f+*'
evaluate_postfix("46+2/5*7+")          # 32
evaluate_prefix("-+7*45+20")           # 25
```

Malformed expressions given to the evaluators raise `ValueError`.

## Stack and window problems

```python
from algodrills.monotonic import stock_span, trapped_water, largest_rectangle_area

stock_span([100, 80, 60, 70, 60, 75, 85])            # [1, 1, 1, 2, 1, 4, 6]
trapped_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])  # 6
largest_rectangle_area([2, 1, 5, 6, 2, 3])           # 10
```

`sliding_window_max` and `sliding_window_max_sorted` return the maximum of
every window of `k` values and raise `ValueError` unless `1 <= k <= len(values)`.

## Command line

The contest solutions can be run as a command. Name the problem, then feed the
test cases on standard input as whitespace-separated tokens, the first being
the number of cases; one answer is printed per case:

```
echo "1 4 2 5" | algodrills-codeforces 1529A
```

The problems available are `1529A`, `1550B`, `1598A`, `1602A`, `1624B`,
`1625A`, `1626A` and `1627A`. If the input ends before every case has been
read, the command stops with the error "input ended early".