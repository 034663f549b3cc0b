import pytest

from tablecraft.iterators import column_cells, column_cells_with_header
from tablecraft.row import Row


def _rows():
    return [Row(["First", "Second"]), Row(["Third"]), Row(["Fourth", "Fifth"])]


def _contents(cells):
    return [None if cell is None else cell.content() for cell in cells]


def test_column_cells_second_column():
    assert _contents(column_cells(_rows(), 1)) == ["Second", None, "Fifth"]


def test_column_cells_first_column():
    assert _contents(column_cells(_rows(), 0)) == ["First", "Third", "Fourth"]


def test_column_cells_out_of_range_yields_none_per_row():
    rows = _rows()
    assert list(column_cells(rows, 10)) == [None] * len(rows)


def test_column_cells_empty_rows():
    assert list(column_cells([], 0)) == []


def test_column_cells_returns_same_cell_objects():
    rows = _rows()
    cells = list(column_cells(rows, 0))
    assert all(cell is row.cells[0] for cell, row in zip(cells, rows))


def test_with_header_second_column():
    header = Row(["A", "B"])
    result = _contents(column_cells_with_header(header, _rows(), 1))
    assert result == ["B", "Second", None, "Fifth"]


def test_with_missing_header_yields_none_first():
    result = _contents(column_cells_with_header(None, _rows(), 0))
    assert result == [None, "First", "Third", "Fourth"]


def test_with_short_header():
    header = Row(["A"])
    result = _contents(column_cells_with_header(header, _rows(), 1))
    assert result[0] is None
    assert result[1:] == _contents(column_cells(_rows(), 1))


def test_with_header_and_no_rows():
    header = Row(["A", "B"])
    assert _contents(column_cells_with_header(header, [], 0)) == ["A"]


def test_with_header_length_is_rows_plus_one():
    rows = _rows()
    assert len(list(column_cells_with_header(None, rows, 3))) == len(rows) + 1


def test_negative_index_rejected():
    with pytest.raises(ValueError):
        column_cells(_rows(), -1)


def test_negative_index_rejected_with_header():
    with pytest.raises(ValueError):
        column_cells_with_header(Row(["A"]), _rows(), -1)


def test_non_integer_index_rejected():
    with pytest.raises(TypeError):
        column_cells(_rows(), "1")