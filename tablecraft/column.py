"""Table columns: padding, delimiter, alignment and width constraints."""

from __future__ import annotations

from typing import Optional, Tuple

from tablecraft.style import CellAlignment, ColumnConstraint, ConstraintKind

_U16_MAX = 65535


class Column:
    """A column of a table.

    Columns are created by the table as rows are added.
    Setter methods return the column itself so calls can be chained.
    """

    def __init__(self, index: int) -> None:
        self.index = index
        self.padding: Tuple[int, int] = (1, 1)
        self.delimiter: Optional[str] = None
        self.cell_alignment: Optional[CellAlignment] = None
        self._constraint: Optional[ColumnConstraint] = None

    def set_padding(self, padding: Tuple[int, int]) -> Column:
        """Set the (left, right) padding in spaces; the default is (1, 1)."""
        left, right = padding
        for side in (left, right):
            if not isinstance(side, int) or isinstance(side, bool):
                raise TypeError(f"padding must be integers, got {side!r}")
            if not 0 <= side <= _U16_MAX:
                raise ValueError(f"padding must be within 0..={_U16_MAX}, got {side}")
        self.padding = (left, right)
        return self

    def padding_width(self) -> int:
        """Total width of left and right padding, capped at 65535."""
        return min(self.padding[0] + self.padding[1], _U16_MAX)

    def set_delimiter(self, delimiter: str) -> Column:
        """Set the word delimiter for this column's cells."""
        if not isinstance(delimiter, str) or len(delimiter) != 1:
            raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
        self.delimiter = delimiter
        return self

    def set_constraint(self, constraint: ColumnConstraint) -> Column:
        """Set the width constraint of this column."""
        if not isinstance(constraint, ColumnConstraint):
            raise TypeError(f"not a ColumnConstraint: {constraint!r}")
        self._constraint = constraint
        return self

    def constraint(self) -> Optional[ColumnConstraint]:
        """The constraint of this column, or None."""
        return self._constraint

    def remove_constraint(self) -> Column:
        """Remove any constraint from this column."""
        self._constraint = None
        return self

    def is_hidden(self) -> bool:
        """Whether the column is hidden by its constraint."""
        return self._constraint is not None and self._constraint.kind is ConstraintKind.HIDDEN

    def set_cell_alignment(self, alignment: CellAlignment) -> Column:
        """Set the default alignment for cells of this column."""
        if not isinstance(alignment, CellAlignment):
            raise TypeError(f"alignment must be a CellAlignment, got {alignment!r}")
        self.cell_alignment = alignment
        return self

    def __repr__(self) -> str:
        return f"Column(index={self.index})"