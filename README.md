# iterweave

Iterator adaptors and helpers for everyday Python code. They work on any
iterable, and most of them are lazy: they pull elements from their source
only as they need them. The package has no dependencies beyond the standard
library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What's inside

| Module | Provides |
| --- | --- |
| `iterweave.either_or_both` | `EitherOrBoth`, built with `left`, `right` and `both` |
| `iterweave.extrema` | `min_set`, `max_set`, `min_set_by`, `max_set_by` |
| `iterweave.concat` | `concat` |
| `iterweave.combinatorics` | `binomial`, `combinations`, `combinations_with_replacement` |
| `iterweave.duplicates` | `duplicates`, `duplicates_by` |
| `iterweave.adaptors` | `PutBack`, `put_back`, `interleave`, `interleave_shortest`, `cartesian_product`, `batching`, `step`, `take_while_ref`, `while_some`, `positions`, `update`, `tuple_combinations` |
| `iterweave.diff` | `diff_with`, with the results `FirstMismatch`, `Shorter` and `Longer` |
| `iterweave.cons_tuples` | `cons_tuples` |
| `iterweave.results` | `Ok`, `Err`, `filter_ok`, `filter_map_ok`, `map_ok`, `map_into`, `flatten_ok` |
| `iterweave.coalesce` | `coalesce`, `dedup`, `dedup_by`, `dedup_with_count`, `dedup_by_with_count` |
| `iterweave.multi_product` | `MultiProduct`, `multi_cartesian_product` |
| `iterweave.exactly_one` | `exactly_one`, `ExactlyOneError` |
| `iterweave.formatting` | `Format`, `FormatWith`, `format_iter`, `format_with` |
| `iterweave.iris` | `Iris`, `IrisParseError`, `parse_iris`, `load_irises`, `render`, `main` |

A few notes on behaviour:

- `combinations` and `combinations_with_replacement` yield lists. Their
  `count()` method draws the rest of the source and returns how many
  combinations are still to come.
- `take_while_ref` works on a `PutBack` iterator: the first element the
  predicate rejects is put back, so it is not lost.
- `coalesce(iterable, f)` expects `f(last, item)` to return `Ok(merged)` to
  join two elements, or `Err((done, next_last))` to yield `done` and carry on.
- The adaptors in `iterweave.results` expect every element to be an `Ok` or
  an `Err`, and raise `TypeError` otherwise.
- `Format` and `FormatWith` can be formatted once only; a second attempt
  raises `RuntimeError`.

## Examples

Combinations that pull from their source only as they need it:

```python
from iterweave.combinatorics import combinations, binomial

list(combinations("abc", 2))   # [['a', 'b'], ['a', 'c'], ['b', 'c']]
binomial(5, 2)                 # 10
```

Interleaving, and putting an item back in front of an iterator:

```python
from iterweave.adaptors import interleave, put_back

list(interleave([7, 9, 8, 10], [2, 77]))   # [7, 2, 9, 77, 8, 10]

pb = put_back([1, 2, 3])
pb.put_back(0)
list(pb)                                   # [0, 1, 2, 3]
```

Runs of equal items:

```python
from iterweave.coalesce import dedup, dedup_with_count

list(dedup([1, 1, 2, 3, 3, 3]))             # [1, 2, 3]
list(dedup_with_count([1, 1, 2]))           # [(2, 1), (1, 2)]
```

Expecting exactly one item:

```python
from iterweave.exactly_one import exactly_one, ExactlyOneError

exactly_one(x for x in range(10) if x == 2)   # 2

try:
    exactly_one(x for x in range(10) if 1 < x < 4)
except ExactlyOneError as err:
    list(err)                                   # [2, 3]: nothing is lost
```

Formatting the items of an iterator, once, without building a list:

```python
from iterweave.formatting import format_iter

f"{format_iter([1.0, 2.5], ', '):>3.1f}"    # '1.0, 2.5'
```

## The iris command

The package installs a small command that reads comma-separated iris
records (four measurements followed by a species name, one per line),
groups the flowers by species and draws a text scatter plot for every pair
of the four measured columns:

```
iterweave-iris path/to/iris.data
iterweave-iris --size 20 < path/to/iris.data
```

With no file, or with `-`, it reads standard input. `--size` sets the width
and height of each plot (30 by default). If a line cannot be parsed, it
prints `Error parsing: ...` and exits with status 1.

The same steps are available from Python through `parse_iris`,
`load_irises` and `render`.

## What it does not do

The package does not ship an iris data set; the command only works on a
file or input you give it.