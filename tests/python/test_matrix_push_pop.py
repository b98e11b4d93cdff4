from __future__ import annotations

import pytest

from lanegrid import Matrix, ShapeError


def _assert_shape_consistent(m: Matrix) -> None:
    grid = m.as_grid()
    assert m.columns == len(grid)
    if grid:
        assert all(len(lane) == m.rows for lane in grid)
    else:
        assert m.rows == 0


def test_push_scenario(pushed):
    assert pushed.as_grid() == [[2.0, 34.2, 5.7], [4.6, 6.4, 9.5]]
    assert pushed.shape == (3, 2)


def test_push_column_steps():
    m = Matrix()
    m.push_column([2.0, 34.2])
    assert m.as_grid() == [[2.0, 34.2]]
    assert m.shape == (2, 1)

    m.push_column([4.6, 6.4])
    assert m.as_grid() == [[2.0, 34.2], [4.6, 6.4]]
    assert m.shape == (2, 2)


def test_pop_scenario(pushed):
    assert pushed.pop_column() == [4.6, 6.4, 9.5]
    assert pushed.as_grid() == [[2.0, 34.2, 5.7]]
    assert pushed.shape == (3, 1)

    assert pushed.pop_row() == [5.7]
    assert pushed.as_grid() == [[2.0, 34.2]]
    assert pushed.shape == (2, 1)


def test_push_row_increments_rows_once():
    m = Matrix.zeros(2, 4)
    m.push_row([1, 2, 3, 4])
    assert m.rows == 3
    assert m.row(2) == [1, 2, 3, 4]
    _assert_shape_consistent(m)


def test_push_row_length_mismatch_leaves_matrix_untouched(pushed):
    before = pushed.as_grid()
    with pytest.raises(ShapeError) as excinfo:
        pushed.push_row([1.0])
    assert excinfo.value.expected == 2
    assert excinfo.value.actual == 1
    assert pushed.as_grid() == before
    assert pushed.shape == (3, 2)


def test_push_row_into_matrix_without_columns():
    m = Matrix()
    with pytest.raises(ShapeError):
        m.push_row([])
    with pytest.raises(ShapeError):
        m.push_row([1])
    assert m.shape == (0, 0)


def test_push_column_length_mismatch(pushed):
    with pytest.raises(ShapeError) as excinfo:
        pushed.push_column([1.0, 2.0])
    assert excinfo.value.expected == 3
    assert excinfo.value.actual == 2
    assert pushed.columns == 2


def test_push_column_accepts_any_length_on_empty_matrix():
    m = Matrix()
    m.push_column([1, 2, 3, 4, 5])
    assert m.shape == (5, 1)


def test_push_column_onto_zero_row_matrix():
    m = Matrix.from_values([[], []])
    with pytest.raises(ShapeError):
        m.push_column([1])
    m.push_column([])
    assert m.shape == (0, 3)


def test_push_copies_input():
    col = [1, 2]
    m = Matrix()
    m.push_column(col)
    col.append(3)
    assert m.shape == (2, 1)
    _assert_shape_consistent(m)


def test_pop_on_empty_is_noop():
    m = Matrix()
    assert m.pop_row() is None
    assert m.pop_column() is None
    assert m.shape == (0, 0)


def test_pop_row_down_to_zero_rows():
    m = Matrix.from_values([[1], [2]])
    assert m.pop_row() == [1, 2]
    assert m.shape == (0, 2)
    assert m.as_grid() == [[], []]
    assert m.pop_row() is None


def test_pop_last_column_resets_rows():
    m = Matrix.from_values([[1, 2, 3]])
    assert m.pop_column() == [1, 2, 3]
    assert m.shape == (0, 0)
    m.push_column([7])
    assert m.shape == (1, 1)


def test_shape_invariant_over_mixed_sequence():
    m = Matrix()
    steps = [
        ("col", [1, 2, 3]),
        ("col", [4, 5, 6]),
        ("row", [7, 8]),
        ("pop_row", None),
        ("pop_row", None),
        ("col", [0, 0]),
        ("pop_col", None),
        ("row", [9, 9]),
        ("pop_col", None),
        ("pop_col", None),
        ("col", [1]),
        ("row", [2]),
    ]
    for op, arg in steps:
        if op == "col":
            m.push_column(arg)
        elif op == "row":
            m.push_row(arg)
        elif op == "pop_row":
            m.pop_row()
        else:
            m.pop_column()
        _assert_shape_consistent(m)

    assert m.as_grid() == [[1, 2]]
