# iterkit

Small helpers for working with Python iterables. The package uses only the standard library.

## Installation

```
pip install iterkit
```

## Modules

### `iterkit.kmerge`

- `kmerge(iterables)` merges any number of iterables into one stream in ascending order. If every input is sorted, the output is sorted too.
- `kmerge_by(iterables, less_than)` does the same merge, with `less_than(a, b)` as the ordering.

Both functions read the first item of every input as soon as they are called. They then return an iterator. Empty inputs are skipped.

```python
from iterkit.kmerge import kmerge, kmerge_by

list(kmerge([[0, 2, 4], [1, 3, 5], [6, 7]]))
# [0, 1, 2, 3, 4, 5, 6, 7]

list(kmerge_by([[5, 3], [4, 1]], lambda a, b: a > b))
# [5, 4, 3, 1]
```

### `iterkit.intersperse`

- `intersperse(iterable, element)` yields the items of `iterable` with `element` between each pair.
- `intersperse_with(iterable, make_element)` calls `make_element()` to build each separator. It calls it only when another item actually follows.

```python
from iterkit.intersperse import intersperse

list(intersperse([1, 2, 3], 0))
# [1, 0, 2, 0, 3]
```

### `iterkit.k_smallest`

`k_smallest(iterable, k)` returns a list of the `k` smallest items, in ascending order.

- It consumes the whole iterable.
- `k == 0` gives an empty list.
- A negative `k` raises `ValueError`.

```python
from iterkit.k_smallest import k_smallest

k_smallest([5, 1, 4, 2, 3], 2)
# [1, 2]
```

### `iterkit.lazy_buffer`

`LazyBuffer(iterable)` remembers the items it draws from an iterator. It draws them only when asked:

- `get_next()` draws one item and returns whether it got one.
- `prefill(length)` draws items until the buffer holds `length` of them, or until the source runs out.
- `len(buffer)` gives the number of items held.
- `buffer[i]` and `buffer[i:j]` index into the items held.
- The `done` property is true once the source has been found exhausted. From then on the source is never asked again.

```python
from iterkit.lazy_buffer import LazyBuffer

buf = LazyBuffer(iter("abc"))
buf.prefill(2)
len(buf), buf[0], buf[1]
# (2, 'a', 'b')
```

### `iterkit.grouping_map`

This module groups items by key and folds each group in a single pass. Two functions start the work:

- `into_grouping_map(pairs)` takes `(key, value)` pairs.
- `into_grouping_map_by(iterable, key)` keys each item with `key(item)`.

Both return a `GroupingMap`. Every method on it consumes the source and returns a `dict` from each key to that group's result.

A `GroupingMap` can be used only once. A second call raises `RuntimeError`.

| Method | What each group gets |
| --- | --- |
| `aggregate(operation)` | The result of `operation(acc, key, value)`. `acc` is `None` at the start. A `None` return discards the accumulator, and a group whose last step discards it has no entry. |
| `fold(init, operation)` | The fold of `operation(acc, key, value)`, starting from a deep copy of `init`. |
| `fold_first(operation)` | The fold of `operation(acc, key, value)`, with the group's first element as the starting accumulator. |
| `collect(factory=list)` | Its elements in order, in a collection made by `factory()`. The collection must have `append` or `add`. |
| `max()`, `max_by(compare)`, `max_by_key(key)` | Its maximum. Among equal maxima, the last one. |
| `min()`, `min_by(compare)`, `min_by_key(key)` | Its minimum. Among equal minima, the first one. |
| `minmax()`, `minmax_by(compare)`, `minmax_by_key(key)` | `OneElement(value)` if it has one element, otherwise `MinMax(min, max)`. Ties are broken as for `min` and `max`. |
| `sum()`, `product()` | Its elements added, or multiplied, from left to right. |

The two kinds of function argument work like this:

- **Comparison functions** take `(group_key, a, b)`. They return a negative number, zero or a positive number.
- **Key functions** take `(group_key, value)`.

```python
from iterkit.grouping_map import into_grouping_map_by, MinMax, OneElement

into_grouping_map_by(range(1, 8), lambda n: n % 3).fold(0, lambda acc, key, val: acc + val)
# {1: 12, 2: 7, 0: 9}

into_grouping_map_by([1, 3, 4, 5, 7, 9, 12], lambda n: n % 3).minmax()
# {1: MinMax(min=1, max=7), 0: MinMax(min=3, max=12), 2: OneElement(value=5)}
```

## Running the tests

```
pip install -e ".[test]"
pytest
```