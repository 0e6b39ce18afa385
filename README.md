# sliceops

Small helpers for querying Python sequences, with no dependencies. They
cover filtering, projection, aggregation, set operations, ordering,
partitioning and element access.

Each function takes an iterable and returns a new list or a single
value. It does not modify its input. A source of `None` counts as an
empty sequence. A one-shot iterator, such as a generator, is consumed
by the call.

## Installation

```
pip install sliceops
```

## Modules

### `sliceops.aggregation`

- `aggregate(source, seed, accumulate)` folds the elements into one
  value, starting from `seed`.
- `all_of(source, predicate)` returns True if every element passes.
  It is True for an empty sequence.
- `any_of(source, predicate=None)` returns True if some element passes.
  Without a predicate, it is True if the sequence has any element.
- `average(source)` returns the mean as a float. It raises
  `EmptySequenceError` for an empty sequence.
- `cast(source, type_)` returns a list of the elements. It raises
  `InvalidCastError` if any element is not an instance of `type_`.
- `chunk(source, size)` returns lists of at most `size` elements. It
  raises `SizeBelowOneError` if `size < 1`.
- `convert(source, converter)` and `select(source, selector)` map every
  element.
- `count(source, predicate=None)` counts all elements, or only those
  that pass the predicate.
- `group_by(source, key_selector)` returns a dict of lists keyed by the
  selector. Elements keep their order within each group.
- `select_many(source, selector)` maps each element to an iterable and
  flattens the results.
- `sum_of(source, start=None)` adds the elements with `+`, so it works
  for numbers and strings. An empty sequence sums to 0, unless you pass
  a `start` value.
- `where(source, predicate)` keeps the elements that pass the predicate.

### `sliceops.membership`

- `contains(source, value, equality=None)`
- `contains_by(source, value, selector, equality=None)` compares
  `selector(value)` with `selector(element)`.
- `contains_all(source, *values, equality=None)` is True when no values
  are given.
- `contains_any(source, *values, equality=None)` is False when no values
  are given.

### `sliceops.sets`

All of these keep source order.

- `distinct(source, equality=None)` keeps the first occurrence of each
  element.
- `distinct_by(source, selector, equality=None)` does the same, judging
  by the selected value.
- `difference(source, excluded, equality=None)` drops the elements that
  appear in `excluded`. Duplicates in `source` are kept.
- `difference_by(source, excluded, selector, equality=None)` does the
  same, judging by the selected value.
- `intersect(first, second, equality=None)` returns the distinct
  elements of `first` that also appear in `second`.
- `union(first, second, equality=None)` returns the distinct elements of
  both, with those from `first` coming first.

### `sliceops.elements`

- `first(source, predicate=None)`
- `last(source, predicate=None)`
- `single(source, predicate=None)`
- `first_or_default(source, default=None, predicate=None)`
- `last_or_default(source, default=None, predicate=None)`
- `single_or_default(source, default=None, predicate=None)`

The `_or_default` forms return `default` in the cases where the plain
forms would raise. `single_or_default` therefore returns `default`
unless there is exactly one element, or exactly one element that
matches the predicate.

### `sliceops.extrema`

- `maximum(source, key=None)` and `minimum(source, key=None)` return the
  first of several equal extremes.
- `min_max(source, key=None)` returns `(smallest, largest)` in one pass.

All three raise `EmptySequenceError` for an empty sequence.

### `sliceops.ordering`

- `order(source, key=None)` returns a new ascending list.
- `order_descending(source, key=None)` returns a new descending list.

### `sliceops.partition`

- `take(source, count)` and `skip(source, count)` work on the leading
  `count` elements.
- `take_last(source, count)` and `skip_last(source, count)` work on the
  trailing `count` elements.
- `take_while(source, predicate)` returns the leading run of elements
  that pass the predicate.
- `skip_while(source, predicate)` drops that leading run and returns the
  rest.

A negative `count` raises `ValueError`.

## Examples

```python
from sliceops.aggregation import aggregate, chunk, where
from sliceops.sets import intersect
from sliceops.elements import single
from sliceops.extrema import maximum
from sliceops.errors import EmptySequenceError

aggregate([1, 2, 3], "Seed ", lambda acc, n: acc + f"{n} ")
# 'Seed 1 2 3 '

chunk([1, 2, 3, 4, 5, 6, 7], 3)
# [[1, 2, 3], [4, 5, 6], [7]]

where(range(10), lambda n: n % 2 == 0)
# [0, 2, 4, 6, 8]

intersect([1, 1, 2, 2, 3], [1, 2, 2, 3, 3])
# [1, 2, 3]

maximum([{"v": 1}, {"v": 3}], key=lambda item: item["v"])
# {'v': 3}

try:
    single([])
except EmptySequenceError:
    ...
```

## Equality and keys

**Equality.** The membership and set functions compare elements with
`==` by default. Pass an `equality(a, b)` callable to compare them
another way.

**Keys.** The extrema and ordering functions take a `key` callable, as
`sorted` and `max` do.

## Errors

All errors come from `sliceops.errors`. They derive from
`SequenceError`, which is a subclass of `ValueError`.

- `EmptySequenceError`: the sequence is empty.
- `NoMatchError`: no element satisfies the predicate. `last` raises it
  for an empty sequence when a predicate is given.
- `MultipleMatchError`: more than one element satisfies the predicate
  given to `single`.
- `MoreThanOneElementError`: `single` was given several elements and no
  predicate.
- `SizeBelowOneError`: the size passed to `chunk` is below 1.
- `InvalidCastError`: `cast` found an element of the wrong type. It is
  also a `TypeError`.

## Running the tests

```
pip install -e ".[test]"
pytest
```