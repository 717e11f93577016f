"""Sparse matrix stored as sorted coordinate arrays."""

from __future__ import annotations

import argparse
import sys
from bisect import bisect_left
from collections.abc import Iterator
from typing import TextIO

_INITIAL_CAPACITY = 10
_INT_SIZE = 4
_DOUBLE_SIZE = 8
# Four integer fields and three array references.
_HEADER_SIZE = 4 * _INT_SIZE + 3 * 8


def _format_value(value: float) -> str:
    return f"{value:g}"


class SparseMatrixArray:
    """A sparse matrix keeping its non-zero entries sorted by (row, col).

    Storage grows by doubling a nominal capacity, which starts at 10.
    """

    def __init__(self, rows: int, cols: int) -> None:
        self._rows = rows
        self._cols = cols
        self._capacity = _INITIAL_CAPACITY
        self._keys: list[tuple[int, int]] = []
        self._values: list[float] = []

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError("Index out of bounds")

    def _find(self, row: int, col: int) -> int | None:
        key = (row, col)
        index = bisect_left(self._keys, key)
        if index < len(self._keys) and self._keys[index] == key:
            return index
        return None

    def insert(self, row: int, col: int, value: float) -> None:
        """Store a value; storing zero removes the entry."""
        self._check_bounds(row, col)
        if value == 0.0:
            self.remove(row, col)
            return
        index = self._find(row, col)
        if index is not None:
            self._values[index] = value
            return
        if len(self._keys) >= self._capacity:
            self._capacity *= 2
        position = bisect_left(self._keys, (row, col))
        self._keys.insert(position, (row, col))
        self._values.insert(position, value)

    def get(self, row: int, col: int) -> float:
        """Return the value at a position, 0.0 where nothing is stored."""
        self._check_bounds(row, col)
        index = self._find(row, col)
        return self._values[index] if index is not None else 0.0

    def set(self, row: int, col: int, value: float) -> None:
        """Same as insert."""
        self.insert(row, col, value)

    def remove(self, row: int, col: int) -> None:
        """Drop the entry at a position if there is one."""
        index = self._find(row, col)
        if index is not None:
            del self._keys[index]
            del self._values[index]

    def add(self, other: SparseMatrixArray) -> SparseMatrixArray:
        """Return the sum of two matrices of equal dimensions."""
        if (self._rows, self._cols) != (other._rows, other._cols):
            raise ValueError("Matrix dimensions must match for addition")
        result = SparseMatrixArray(self._rows, self._cols)
        for row, col, value in self:
            result.insert(row, col, value)
        for row, col, value in other:
            result.insert(row, col, result.get(row, col) + value)
        return result

    def multiply(self, other: SparseMatrixArray) -> SparseMatrixArray:
        """Return the matrix product self x other."""
        if self._cols != other._rows:
            raise ValueError("Matrix dimensions incompatible for multiplication")
        result = SparseMatrixArray(self._rows, other._cols)
        for row, inner, value in self:
            for other_row, col, other_value in other:
                if inner == other_row:
                    product = value * other_value
                    result.insert(row, col, result.get(row, col) + product)
        return result

    def transpose(self) -> SparseMatrixArray:
        """Return the transposed matrix."""
        result = SparseMatrixArray(self._cols, self._rows)
        for row, col, value in self:
            result.insert(col, row, value)
        return result

    def render(self) -> str:
        """Return the full matrix as tab-separated text."""
        lines = [f"Sparse Matrix ({self._rows}x{self._cols}):"]
        for row in range(self._rows):
            lines.append(
                "".join(_format_value(self.get(row, col)) + "\t" for col in range(self._cols))
            )
        return "\n".join(lines) + "\n\n"

    def render_sparse(self) -> str:
        """Return the non-zero entries, one per line."""
        lines = ["Non-zero elements:"]
        lines.extend(f"({row}, {col}) = {_format_value(value)}" for row, col, value in self)
        return "\n".join(lines) + "\n\n"

    def display(self, file: TextIO | None = None) -> None:
        """Write the full matrix to a stream, stdout by default."""
        (file or sys.stdout).write(self.render())

    def display_sparse(self, file: TextIO | None = None) -> None:
        """Write the non-zero entries to a stream, stdout by default."""
        (file or sys.stdout).write(self.render_sparse())

    def entries(self) -> list[tuple[int, int, float]]:
        """Return the non-zero entries as (row, col, value) in order."""
        return [(row, col, value) for (row, col), value in zip(self._keys, self._values)]

    def nonzero_count(self) -> int:
        return len(self._keys)

    def is_empty(self) -> bool:
        return not self._keys

    def clear(self) -> None:
        """Remove every entry; the capacity is kept."""
        self._keys.clear()
        self._values.clear()

    def dimensions(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    def capacity(self) -> int:
        return self._capacity

    def memory_usage(self) -> int:
        """Approximate storage in bytes for the current capacity."""
        return (
            _INT_SIZE * self._capacity * 2
            + _DOUBLE_SIZE * self._capacity
            + _HEADER_SIZE
        )

    def efficiency(self) -> float:
        """Ratio of stored entries to capacity."""
        return len(self._keys) / self._capacity if self._capacity > 0 else 0.0

    def copy(self) -> SparseMatrixArray:
        """Return an independent copy, capacity included."""
        result = SparseMatrixArray(self._rows, self._cols)
        result._capacity = self._capacity
        result._keys = list(self._keys)
        result._values = list(self._values)
        return result

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[tuple[int, int, float]]:
        return iter(self.entries())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseMatrixArray):
            return NotImplemented
        return self.dimensions() == other.dimensions() and self.entries() == other.entries()

    def __repr__(self) -> str:
        return f"SparseMatrixArray({self._rows}, {self._cols}, nnz={len(self)})"


def main(argv: list[str] | None = None) -> int:
    """Print an example 3x3 sparse matrix."""
    parser = argparse.ArgumentParser(description="Show an example sparse matrix.")
    parser.parse_args(argv)
    matrix = SparseMatrixArray(3, 3)
    matrix.insert(0, 0, 1.0)
    matrix.insert(0, 2, 2.0)
    matrix.insert(1, 1, 3.0)
    matrix.insert(2, 0, 4.0)
    matrix.insert(2, 2, 5.0)
    print("Sparse Matrix:")
    matrix.display()
    return 0


if __name__ == "__main__":
    sys.exit(main())