# sparsekit

Sparse matrices for Python with two storage strategies behind the same
interface, and a small solver for the classic two-sum problem.

- `SparseMatrixArray` (in `sparsekit.array_matrix`) keeps its non-zero entries
  sorted in row-major order and finds them by binary search. It also tracks a
  nominal capacity that starts at 10 and doubles when full, and reports an
  approximate memory footprint and how full that capacity is.
- `SparseMatrix` (in `sparsekit.linked_matrix`) keeps its non-zero entries in
  a dictionary keyed by `(row, col)` and hands them out in row-major order.

Both only store non-zero values: writing `0.0` to a cell removes it.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Working with matrices

```python
from sparsekit.linked_matrix import SparseMatrix

m = SparseMatrix(3, 3)
m.insert(0, 0, 1.0)
m.insert(0, 2, 2.0)
m.insert(1, 1, 3.0)
m.set(2, 2, 5.0)          # same as insert

m.get(0, 2)               # 2.0
m.get(1, 0)               # 0.0, absent cells read as zero
m.nonzero_count()         # 4
len(m)                    # 4
m.dimensions()            # (3, 3)
m.entries()               # [(0, 0, 1.0), (0, 2, 2.0), (1, 1, 3.0), (2, 2, 5.0)]

for row, col, value in m: # non-zero entries in row-major order
    ...

m.set(0, 0, 0.0)          # storing zero removes the entry
m.remove(1, 1)            # removing a missing cell does nothing

print(m.render())         # the full grid as tab-separated text
m.display_sparse()        # only the non-zero entries, to stdout
```

`display` and `display_sparse` write to standard output by default and accept
any text stream instead; `render` and `render_sparse` return the same text as
a string.

Arithmetic returns new matrices and leaves its operands untouched:

```python
total = a.add(b)          # shapes must match
product = a.multiply(b)   # a's column count must equal b's row count
flipped = a.transpose()
clone = a.copy()
```

Two matrices of the same class compare equal when their dimensions and
non-zero entries match.

Errors follow Python conventions:

- reading or writing outside the matrix raises `IndexError`;
- adding or multiplying matrices of incompatible shapes raises `ValueError`.

`SparseMatrixArray` offers the same interface, plus:

```python
from sparsekit.array_matrix import SparseMatrixArray

m = SparseMatrixArray(100, 100)
m.capacity()        # starts at 10 and doubles when an insert finds it full
m.memory_usage()    # approximate bytes for the current capacity
m.efficiency()      # stored entries divided by capacity
m.clear()           # drop every entry; the capacity is kept
m.is_empty()        # True
```

## Two sum

```python
from sparsekit.two_sum import two_sum

two_sum([2, 7, 11, 15], 9)   # [0, 1]
two_sum([1, 2], 10)          # [] when no pair adds up to the target
```

The first pair of indices `i < j` found in order is returned.

## Command-line tools

```
sparsekit-array      # prints a small example 3x3 matrix
sparsekit-linked     # walks through insert, add, multiply, transpose and errors
sparsekit-two-sum    # reads an array and a target from standard input
```

`sparsekit-two-sum` asks for the number of elements (2 to 10000), the elements
themselves and the target (each between -10^9 and 10^9). It prints the pair of
indices that adds up to the target, or says that none exists, and exits with
status 1 on invalid input.