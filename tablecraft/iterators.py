"""Iteration over the cells of a single column of a table."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from tablecraft.cell import Cell
from tablecraft.row import Row


def _check_index(column_index: int) -> None:
    if not isinstance(column_index, int) or isinstance(column_index, bool):
        raise TypeError(f"column index must be an integer, got {column_index!r}")
    if column_index < 0:
        raise ValueError(f"column index must not be negative, got {column_index}")


def _cell_at(row: Row, column_index: int) -> Optional[Cell]:
    cells = row.cells
    return cells[column_index] if column_index < len(cells) else None


def _iter_column(rows: Iterable[Row], column_index: int) -> Iterator[Optional[Cell]]:
    for row in rows:
        yield _cell_at(row, column_index)


def column_cells(rows: Iterable[Row], column_index: int) -> Iterator[Optional[Cell]]:
    """Yield the cell of each row at ``column_index``.

    Rows that have no cell in that column yield None.
    """
    _check_index(column_index)
    return _iter_column(rows, column_index)


def _iter_with_header(
    header: Optional[Row], rows: Iterable[Row], column_index: int
) -> Iterator[Optional[Cell]]:
    yield _cell_at(header, column_index) if header is not None else None
    yield from _iter_column(rows, column_index)


def column_cells_with_header(
    header: Optional[Row], rows: Iterable[Row], column_index: int
) -> Iterator[Optional[Cell]]:
    """Yield the header cell at ``column_index`` first, then the cell of each row.

    A missing header or a missing cell yields None.
    """
    _check_index(column_index)
    return _iter_with_header(header, rows, column_index)