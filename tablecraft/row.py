"""Table rows and the display width of text."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Optional

from wcwidth import wcswidth, wcwidth

from tablecraft.cell import Cell, to_cells


def measure_text_width(text: str) -> int:
    """The number of terminal columns the text occupies."""
    width = wcswidth(text)
    if width >= 0:
        return width
    return sum(max(wcwidth(char), 0) for char in text)


class Row:
    """A row of cells that can be added to a table."""

    def __init__(self, cells: Optional[Iterable[Any]] = None) -> None:
        self.index: Optional[int] = None
        self.cells: List[Cell] = to_cells(cells) if cells is not None else []
        self.height_limit: Optional[int] = None

    def add_cell(self, cell: Cell) -> Row:
        """Append a cell to the row."""
        if not isinstance(cell, Cell):
            cell = Cell(cell)
        self.cells.append(cell)
        return self

    def max_height(self, lines: int) -> Row:
        """Truncate cells whose content takes more than this many lines."""
        if not isinstance(lines, int) or isinstance(lines, bool) or lines < 0:
            raise ValueError(f"max height must be a non-negative integer, got {lines!r}")
        self.height_limit = lines
        return self

    def max_content_widths(self) -> List[int]:
        """The width of the widest line of each cell."""
        return [
            max((measure_text_width(line) for line in cell.lines), default=0)
            for cell in self.cells
        ]

    def cell_count(self) -> int:
        """The number of cells in this row."""
        return len(self.cells)

    def cell_iter(self) -> Iterator[Cell]:
        """An iterator over the cells of this row."""
        return iter(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __repr__(self) -> str:
        return f"Row({[cell.content() for cell in self.cells]!r})"