"""Sparse matrix whose non-zero entries are kept in (row, col) order."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import TextIO


def _format_value(value: float) -> str:
    return f"{value:g}"


class SparseMatrix:
    """A sparse matrix holding only its non-zero entries, ordered by (row, col)."""

    def __init__(self, rows: int, cols: int) -> None:
        self._rows = rows
        self._cols = cols
        self._cells: dict[tuple[int, int], float] = {}

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError("Index out of bounds")

    def insert(self, row: int, col: int, value: float) -> None:
        """Store a value; storing zero removes the entry."""
        self._check_bounds(row, col)
        if value == 0.0:
            self.remove(row, col)
            return
        self._cells[(row, col)] = value

    def get(self, row: int, col: int) -> float:
        """Return the value at a position, 0.0 where nothing is stored."""
        self._check_bounds(row, col)
        return self._cells.get((row, col), 0.0)

    def set(self, row: int, col: int, value: float) -> None:
        """Same as insert."""
        self.insert(row, col, value)

    def remove(self, row: int, col: int) -> None:
        """Drop the entry at a position if there is one."""
        self._cells.pop((row, col), None)

    def add(self, other: SparseMatrix) -> SparseMatrix:
        """Return the sum of two matrices of equal dimensions."""
        if self.dimensions() != other.dimensions():
            raise ValueError("Matrix dimensions must match for addition")
        result = SparseMatrix(self._rows, self._cols)
        for row, col, value in self:
            result.insert(row, col, value)
        for row, col, value in other:
            result.insert(row, col, result.get(row, col) + value)
        return result

    def multiply(self, other: SparseMatrix) -> SparseMatrix:
        """Return the matrix product self x other."""
        if self._cols != other._rows:
            raise ValueError("Matrix dimensions incompatible for multiplication")
        result = SparseMatrix(self._rows, other._cols)
        for row, inner, value in self:
            for other_row, col, other_value in other:
                if inner == other_row:
                    product = value * other_value
                    result.insert(row, col, result.get(row, col) + product)
        return result

    def transpose(self) -> SparseMatrix:
        """Return the transposed matrix."""
        result = SparseMatrix(self._cols, self._rows)
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
        return [(row, col, value) for (row, col), value in sorted(self._cells.items())]

    def nonzero_count(self) -> int:
        return len(self._cells)

    def is_empty(self) -> bool:
        return not self._cells

    def clear(self) -> None:
        """Remove every entry."""
        self._cells.clear()

    def dimensions(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    def copy(self) -> SparseMatrix:
        """Return an independent copy."""
        result = SparseMatrix(self._rows, self._cols)
        result._cells = dict(self._cells)
        return result

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[tuple[int, int, float]]:
        return iter(self.entries())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return self.dimensions() == other.dimensions() and self.entries() == other.entries()

    def __repr__(self) -> str:
        return f"SparseMatrix({self._rows}, {self._cols}, nnz={len(self)})"


def _filled(rows: int, cols: int, cells: dict[tuple[int, int], float]) -> SparseMatrix:
    matrix = SparseMatrix(rows, cols)
    for (row, col), value in cells.items():
        matrix.insert(row, col, value)
    return matrix


def run_demo(file: TextIO | None = None) -> None:
    """Exercise the matrix operations and write a report to a stream."""
    out = file or sys.stdout

    def say(text: str = "") -> None:
        out.write(text + "\n")

    say("=== Sparse Matrix LinkedList Implementation Tests ===")
    say()

    say("Test 1: Basic Insert and Display")
    matrix1 = _filled(3, 3, {(0, 0): 1.0, (0, 2): 2.0, (1, 1): 3.0, (2, 0): 4.0, (2, 2): 5.0})
    matrix1.display(out)
    matrix1.display_sparse(out)
    say(f"Non-zero elements: {matrix1.nonzero_count()}")
    say()

    say("Test 2: Matrix Addition")
    matrix2 = _filled(3, 3, {(0, 0): 1.0, (1, 1): 2.0, (2, 2): 3.0})
    say("Matrix 2:")
    matrix2.display(out)
    total = matrix1.add(matrix2)
    say("Sum (Matrix1 + Matrix2):")
    total.display(out)
    say()

    say("Test 3: Matrix Multiplication")
    matrix3 = _filled(
        3, 2, {(0, 0): 1.0, (0, 1): 2.0, (1, 0): 3.0, (1, 1): 4.0, (2, 0): 5.0, (2, 1): 6.0}
    )
    say("Matrix 3 (3x2):")
    matrix3.display(out)
    matrix4 = _filled(
        2, 3, {(0, 0): 1.0, (0, 1): 2.0, (0, 2): 3.0, (1, 0): 4.0, (1, 1): 5.0, (1, 2): 6.0}
    )
    say("Matrix 4 (2x3):")
    matrix4.display(out)
    product = matrix3.multiply(matrix4)
    say("Product (Matrix3 * Matrix4):")
    product.display(out)
    say()

    say("Test 4: Matrix Transpose")
    transposed = matrix1.transpose()
    say("Original Matrix1:")
    matrix1.display_sparse(out)
    say("Transposed Matrix1:")
    transposed.display_sparse(out)
    say()

    say("Test 5: Edge Cases")
    empty = SparseMatrix(2, 2)
    say(f"Empty matrix is empty: {'true' if empty.is_empty() else 'false'}")
    matrix1.set(0, 0, 0.0)
    say("After setting (0,0) to 0:")
    matrix1.display_sparse(out)
    say(f"Non-zero elements: {matrix1.nonzero_count()}")
    say()

    say("Test 6: Error Handling")
    try:
        matrix1.insert(5, 5, 1.0)
    except IndexError as error:
        say(f"Caught expected error: {error}")
    try:
        SparseMatrix(2, 3).add(SparseMatrix(4, 2))
    except ValueError as error:
        say(f"Caught expected error: {error}")
    say()


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration and print its report."""
    parser = argparse.ArgumentParser(description="Demonstrate sparse matrix operations.")
    parser.parse_args(argv)
    run_demo(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())