import io

import pytest

from sparsekit.array_matrix import SparseMatrixArray, main


def _example():
    matrix = SparseMatrixArray(3, 3)
    matrix.insert(0, 0, 1.0)
    matrix.insert(0, 2, 2.0)
    matrix.insert(1, 1, 3.0)
    matrix.insert(2, 0, 4.0)
    matrix.insert(2, 2, 5.0)
    return matrix


def _identity(n):
    matrix = SparseMatrixArray(n, n)
    for i in range(n):
        matrix.insert(i, i, 1.0)
    return matrix


def test_insert_and_get_round_trip():
    matrix = _example()
    assert matrix.get(1, 1) == 3.0
    assert matrix.get(2, 2) == 5.0
    assert matrix.get(1, 0) == 0.0


def test_entries_are_sorted():
    matrix = SparseMatrixArray(4, 4)
    for row, col in [(3, 1), (0, 2), (2, 0), (0, 1)]:
        matrix.insert(row, col, 1.5)
    positions = [(r, c) for r, c, _ in matrix]
    assert positions == sorted(positions)
    assert len(matrix) == 4


def test_update_existing_keeps_count():
    matrix = _example()
    matrix.set(1, 1, 7.5)
    assert matrix.get(1, 1) == 7.5
    assert matrix.nonzero_count() == 5


def test_setting_zero_removes():
    matrix = _example()
    matrix.set(0, 0, 0.0)
    assert matrix.get(0, 0) == 0.0
    assert matrix.nonzero_count() == 4


def test_remove_missing_is_noop():
    matrix = _example()
    matrix.remove(1, 2)
    assert matrix.nonzero_count() == 5


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5)])
def test_out_of_bounds(row, col):
    matrix = _example()
    with pytest.raises(IndexError, match="Index out of bounds"):
        matrix.insert(row, col, 1.0)
    with pytest.raises(IndexError):
        matrix.get(row, col)


def test_add_dimension_mismatch():
    with pytest.raises(ValueError, match="must match"):
        SparseMatrixArray(2, 3).add(SparseMatrixArray(4, 2))


def test_multiply_dimension_mismatch():
    with pytest.raises(ValueError, match="incompatible"):
        SparseMatrixArray(2, 3).multiply(SparseMatrixArray(2, 3))


def test_add_sums_elementwise():
    a = _example()
    b = SparseMatrixArray(3, 3)
    b.insert(0, 0, 1.0)
    b.insert(1, 1, 2.0)
    b.insert(2, 2, 3.0)
    total = a.add(b)
    for row in range(3):
        for col in range(3):
            assert total.get(row, col) == a.get(row, col) + b.get(row, col)
    assert total == b.add(a)


def test_add_cancelling_drops_entries():
    a = _example()
    negated = SparseMatrixArray(3, 3)
    for row, col, value in a:
        negated.insert(row, col, -value)
    assert a.add(negated).is_empty()


def test_multiply_by_identity():
    matrix = _example()
    assert matrix.multiply(_identity(3)) == matrix
    assert _identity(3).multiply(matrix) == matrix


def test_multiply_shape():
    a = SparseMatrixArray(3, 2)
    a.insert(0, 0, 1.0)
    b = SparseMatrixArray(2, 4)
    b.insert(0, 3, 2.0)
    product = a.multiply(b)
    assert product.dimensions() == (3, 4)
    assert product.get(0, 3) == 2.0


def test_transpose_twice_is_identity():
    matrix = SparseMatrixArray(2, 3)
    matrix.insert(0, 2, 4.0)
    matrix.insert(1, 0, 6.0)
    transposed = matrix.transpose()
    assert transposed.dimensions() == (3, 2)
    assert transposed.get(2, 0) == 4.0
    assert transposed.transpose() == matrix


def test_capacity_starts_at_ten_and_doubles():
    matrix = SparseMatrixArray(5, 5)
    assert matrix.capacity() == 10
    for i in range(10):
        matrix.insert(i // 5, i % 5, 1.0)
    assert matrix.capacity() == 10
    before = matrix.memory_usage()
    matrix.insert(4, 4, 1.0)
    assert matrix.capacity() == 20
    assert matrix.memory_usage() > before


def test_efficiency_and_clear():
    matrix = _example()
    assert matrix.efficiency() == matrix.nonzero_count() / matrix.capacity()
    matrix.clear()
    assert matrix.is_empty()
    assert matrix.efficiency() == 0.0
    assert matrix.capacity() == 10


def test_copy_is_independent():
    matrix = _example()
    duplicate = matrix.copy()
    duplicate.set(0, 0, 9.0)
    assert matrix.get(0, 0) == 1.0
    assert duplicate.capacity() == matrix.capacity()


def test_render_shape():
    text = _example().render()
    lines = text.split("\n")
    assert lines[0] == "Sparse Matrix (3x3):"
    assert lines[1] == "1\t0\t2\t"
    assert text.endswith("\n\n")


def test_render_sparse_lists_entries():
    text = _example().render_sparse()
    lines = text.strip("\n").split("\n")
    assert lines[0] == "Non-zero elements:"
    assert "(1, 1) = 3" in lines
    assert len(lines) == 6


def test_display_writes_to_file():
    matrix = _example()
    buffer = io.StringIO()
    matrix.display(buffer)
    matrix.display_sparse(buffer)
    assert buffer.getvalue() == matrix.render() + matrix.render_sparse()


def test_main_prints_example(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Sparse Matrix:\nSparse Matrix (3x3):\n")
    assert out.endswith(_example().render())