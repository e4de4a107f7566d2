# stackalgos

Stack and queue data structures, expression notation conversion and
monotonic-stack algorithms, in plain Python.

## Installation

```
pip install stackalgos
```

The package depends on `sortedcontainers`.

## Stacks (`stackalgos.stacks`)

- `ArrayStack(capacity=100)`: a stack with a fixed capacity, readable through
  the `capacity` property. Pushing onto a full stack raises
  `StackOverflowError`. A negative capacity raises `ValueError`.
- `LinkedStack()`: an unbounded stack built from linked nodes.
- `QueueStack()`: a stack kept in a single queue, newest item at the front.

Every stack has `push`, `pop`, `peek`, `is_empty` and supports `len()`.
Popping or peeking an empty stack raises `StackEmptyError`, a subclass of
`IndexError`. `StackOverflowError` is a subclass of `OverflowError`.

## Queues (`stackalgos.queues`)

- `ArrayQueue(capacity=100)`: a circular array of fixed capacity, readable
  through the `capacity` property. Pushing onto a full queue raises
  `QueueFullError`. A negative capacity raises `ValueError`.
- `LinkedQueue()`: an unbounded queue of linked nodes.
- `StackQueue()`: a queue kept in one stack with the oldest item on top, using
  a second stack while pushing. Each push costs O(n).
- `AmortizedStackQueue()`: a queue over an inbox and an outbox stack. Each
  item moves between them at most once, so operations cost amortised O(1).

Every queue has `push`, `pop`, `peek`, `is_empty` and supports `len()`.
Popping or peeking an empty queue raises `QueueEmptyError` (an `IndexError`);
`QueueFullError` is an `OverflowError`.

## Minimum stacks (`stackalgos.min_stack`)

`MinStack` and `EncodedMinStack` support `push`, `pop`, `top`, `get_min` and
`len()`, each in constant time. `MinStack` stores every value with the minimum
beneath it. `EncodedMinStack` uses one slot per item: a value below the current
minimum is stored as `2 * value - minimum`, so the previous minimum can be
recovered on pop. `pop` returns the removed value. On an empty stack, `pop`,
`top` and `get_min` raise `StackEmptyError`.

```python
from stackalgos.min_stack import MinStack

s = MinStack()
for v in (5, 3, 7):
    s.push(v)
s.get_min()   # 3
s.pop()       # 7
s.top()       # 3
```

## Expression notation (`stackalgos.notation`)

Operands are single ASCII letters or digits. The operators are `+ - * / ^`,
and `^` is right-associative when converting infix to postfix.

```python
from stackalgos import notation

notation.infix_to_postfix("a+b*(c^d-e)")   # 'abcd^e-*+'
notation.postfix_to_infix("ab+")           # '(a+b)'
notation.prefix_to_postfix("*+ab-cd")      # 'ab+cd-*'
notation.is_balanced("{[()]}")             # True
```

The module also provides:

- `infix_to_prefix`, `postfix_to_prefix` and `prefix_to_infix`. Infix output
  is fully parenthesised.
- `priority(operator)`: 3 for `^`, 2 for `*` and `/`, 1 for `+` and `-`, and
  -1 for anything else.
- `is_operand(char)`: true for a single ASCII letter or digit.
- `is_balanced(text)`: checks that `()`, `[]` and `{}` pair up. Any character
  that does not open a bracket must close the most recent open one.
- `print_string(text, file=None)`: writes a blank line, then
  `String is :<text>`, to `file` or to standard output.

`MalformedExpressionError`, a `ValueError`, is raised in two cases. It is
raised when an infix expression has unmatched parentheses. It is also raised
when a postfix or prefix expression has an operator without two operands, or
does not reduce to a single term.

## Monotonic-stack problems (`stackalgos.monotonic`)

- `next_greater(values)` and `next_smaller(values)` give, for each element,
  the first strictly greater or smaller value to its right. The result is `-1`
  where there is none.
- `next_greater_circular(values)` does the same but wraps around the end of
  the list.
- `count_greater_to_right(values)` counts the strictly greater elements to the
  right of each element.
- `asteroid_collision(asteroids)` returns the asteroids left after all
  collisions. Positive values move right and negative values move left. When
  two asteroids meet, the smaller one explodes, and asteroids of equal size
  destroy each other.

`next_greater`, `next_smaller`, `next_greater_circular` and
`count_greater_to_right` each have a `_brute` counterpart, for example
`next_greater_brute`. The counterpart gives the same results with a quadratic
algorithm.

## Subarray problems (`stackalgos.subarrays`)

- `sum_subarray_minimums` and `sum_subarray_maximums` compute the sum of the
  minimum or maximum of every contiguous subarray, modulo 1,000,000,007.
- `sum_subarray_ranges` returns `sum_subarray_maximums - sum_subarray_minimums`.
  Both terms are reduced, so the result can differ from the exact sum of
  ranges once the sums exceed the modulus.
- `sum_subarray_minimums_brute` and `sum_subarray_ranges_brute` return exact,
  unreduced sums in O(n²).
- `trapped_water`, `trapped_water_prefix` and `trapped_water_brute` compute
  the rain water held between bars. They use two pointers, prefix and suffix
  maxima, and a full scan respectively.
- The index helpers used by the sums:
  - `next_smaller_indices` and `next_greater_indices` give the index of the
    next strictly smaller or greater value, or `len(values)`.
  - `previous_smaller_indices` and `previous_greater_indices` give the index of
    the previous smaller-or-equal or greater-or-equal value, or `-1`.

```python
from stackalgos.subarrays import sum_subarray_minimums, trapped_water

sum_subarray_minimums([3, 1, 2, 4])                   # 17
trapped_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])   # 6
```

## What the package does not do

This is a library only. It has no command-line program, and the expression
functions convert between notations but do not evaluate expressions.

## Running the tests

```
pip install "stackalgos[test]"
pytest
```