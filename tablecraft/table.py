"""The table: rows, a header, columns and the characters used to draw it."""

from __future__ import annotations

import os
import sys
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

from tablecraft.column import Column
from tablecraft.iterators import column_cells, column_cells_with_header
from tablecraft.presets import ASCII_FULL
from tablecraft.row import Row
from tablecraft.style import ColumnConstraint, ContentArrangement, TableComponent
from tablecraft.cell import Cell

_U16_MAX = 65535


def _as_row(row: Any) -> Row:
    return row if isinstance(row, Row) else Row(row)


def _check_char(name: str, character: str) -> str:
    if not isinstance(character, str) or len(character) != 1:
        raise ValueError(f"{name} must be a single character, got {character!r}")
    return character


class Table:
    """A table built from rows of cells.

    Columns are created automatically as rows or a header are added.
    Setter methods return the table itself so calls can be chained.
    """

    def __init__(self) -> None:
        self.columns: List[Column] = []
        self.rows: List[Row] = []
        self.delimiter: Optional[str] = None
        self.truncation_indicator: str = "..."
        self._style: Dict[TableComponent, str] = {}
        self._header: Optional[Row] = None
        self._arrangement = ContentArrangement.DISABLED
        self._width: Optional[int] = None
        self._no_tty = False
        self._use_stderr = False
        self._is_tty_cache: Optional[bool] = None
        self._enforce_styling = False
        self._style_text_only = False
        self.load_preset(ASCII_FULL)

    # ----- rows and header -----

    def set_header(self, row: Any) -> Table:
        """Set the header row, usually the title of each column."""
        row = _as_row(row)
        self._autogenerate_columns(row)
        self._header = row
        return self

    def header(self) -> Optional[Row]:
        """The header row, or None if none was set."""
        return self._header

    def column_count(self) -> int:
        """The number of columns, after discovering any new ones."""
        self.discover_columns()
        return len(self.columns)

    def add_row(self, row: Any) -> Table:
        """Append a row to the table."""
        row = _as_row(row)
        self._autogenerate_columns(row)
        row.index = len(self.rows)
        self.rows.append(row)
        return self

    def add_row_if(self, predicate: Callable[[int, Any], bool], row: Any) -> Table:
        """Append the row if ``predicate(row_count, row)`` is true."""
        if predicate(len(self.rows), row):
            return self.add_row(row)
        return self

    def add_rows(self, rows: Iterable[Any]) -> Table:
        """Append several rows in order."""
        for row in rows:
            self.add_row(row)
        return self

    def add_rows_if(self, predicate: Callable[[int, Any], bool], rows: Iterable[Any]) -> Table:
        """Append the rows if ``predicate(row_count, rows)`` is true."""
        if predicate(len(self.rows), rows):
            return self.add_rows(rows)
        return self

    def row_count(self) -> int:
        """The number of data rows."""
        return len(self.rows)

    def is_empty(self) -> bool:
        """Whether the table holds no data rows."""
        return not self.rows

    # ----- width and arrangement -----

    def set_width(self, width: int) -> Table:
        """Set the width the table should fit into."""
        if not isinstance(width, int) or isinstance(width, bool):
            raise TypeError(f"width must be an integer, got {width!r}")
        if not 0 <= width <= _U16_MAX:
            raise ValueError(f"width must be within 0..={_U16_MAX}, got {width}")
        self._width = width
        return self

    def width(self) -> Optional[int]:
        """The set width, else the terminal width when printing to a tty, else None."""
        if self._width is not None:
            return self._width
        if not self.is_tty():
            return None
        stream = sys.stderr if self._use_stderr else sys.stdout
        try:
            columns = os.get_terminal_size(stream.fileno()).columns
        except (OSError, ValueError, AttributeError):
            return None
        return min(columns, _U16_MAX)

    def set_content_arrangement(self, arrangement: ContentArrangement) -> Table:
        """Choose how content is arranged."""
        if not isinstance(arrangement, ContentArrangement):
            raise TypeError(f"not a ContentArrangement: {arrangement!r}")
        self._arrangement = arrangement
        return self

    def content_arrangement(self) -> ContentArrangement:
        """The current content arrangement."""
        return self._arrangement

    def set_delimiter(self, delimiter: str) -> Table:
        """Set the word delimiter for all cells."""
        self.delimiter = _check_char("delimiter", delimiter)
        return self

    def set_truncation_indicator(self, indicator: str) -> Table:
        """Set the text shown where content is cut off."""
        if not isinstance(indicator, str):
            raise TypeError(f"indicator must be a string, got {indicator!r}")
        self.truncation_indicator = indicator
        return self

    # ----- tty handling -----

    def force_no_tty(self) -> Table:
        """Treat the output as not a tty: no width lookup and no styling."""
        self._no_tty = True
        return self

    def use_stderr(self) -> Table:
        """Check stderr instead of stdout when deciding whether output is a tty."""
        self._use_stderr = True
        return self

    def is_tty(self) -> bool:
        """Whether the table is handled as if printed to a tty."""
        if self._no_tty:
            return False
        if self._is_tty_cache is None:
            stream = sys.stderr if self._use_stderr else sys.stdout
            try:
                self._is_tty_cache = bool(stream.isatty())
            except (AttributeError, ValueError, OSError):
                self._is_tty_cache = False
        return self._is_tty_cache

    def enforce_styling(self) -> Table:
        """Style content even when the output is not a tty."""
        self._enforce_styling = True
        return self

    def should_style(self) -> bool:
        """Whether cell content should be styled."""
        return self._enforce_styling or self.is_tty()

    def style_text_only(self) -> Table:
        """Style only the text of cells, not their padding."""
        self._style_text_only = True
        return self

    @property
    def styles_text_only(self) -> bool:
        """Whether only the text of cells is styled."""
        return self._style_text_only

    # ----- constraints and styles -----

    def set_constraints(self, constraints: Iterable[ColumnConstraint]) -> Table:
        """Set constraints on columns left to right; surplus ones are ignored."""
        for column, constraint in zip(self.columns, constraints):
            column.set_constraint(constraint)
        return self

    def load_preset(self, preset: str) -> Table:
        """Load a preset string; a space removes that component's character."""
        for component, character in zip(TableComponent, preset):
            if character == " ":
                self.remove_style(component)
            else:
                self.set_style(component, character)
        return self

    def current_style_as_preset(self) -> str:
        """The current style as a preset string."""
        return "".join(self._style.get(component, " ") for component in TableComponent)

    def apply_modifier(self, modifier: str) -> Table:
        """Apply a modifier string; a space leaves that component unchanged."""
        for component, character in zip(TableComponent, modifier):
            if character != " ":
                self.set_style(component, character)
        return self

    def set_style(self, component: TableComponent, character: str) -> Table:
        """Set the character used to draw a component."""
        if not isinstance(component, TableComponent):
            raise TypeError(f"not a TableComponent: {component!r}")
        self._style[component] = _check_char("style character", character)
        return self

    def style(self, component: TableComponent) -> Optional[str]:
        """The character used to draw a component, or None."""
        return self._style.get(component)

    def remove_style(self, component: TableComponent) -> Table:
        """Stop drawing a component."""
        self._style.pop(component, None)
        return self

    def style_or_default(self, component: TableComponent) -> str:
        """The character for a component, or a space if it is not drawn."""
        return self._style.get(component, " ")

    def style_exists(self, component: TableComponent) -> bool:
        """Whether a character is set for the component."""
        return component in self._style

    # ----- access -----

    def column(self, index: int) -> Optional[Column]:
        """The column at ``index``, or None."""
        return self.columns[index] if 0 <= index < len(self.columns) else None

    def column_iter(self) -> Iterator[Column]:
        """An iterator over all columns."""
        return iter(self.columns)

    def column_cells_iter(self, column_index: int) -> Iterator[Optional[Cell]]:
        """The cell of each row in a column; None where a row lacks it."""
        return column_cells(self.rows, column_index)

    def column_cells_with_header_iter(self, column_index: int) -> Iterator[Optional[Cell]]:
        """Like column_cells_iter, but starting with the header cell."""
        return column_cells_with_header(self._header, self.rows, column_index)

    def row(self, index: int) -> Optional[Row]:
        """The row at ``index``, or None."""
        return self.rows[index] if 0 <= index < len(self.rows) else None

    def row_iter(self) -> Iterator[Row]:
        """An iterator over all rows."""
        return iter(self.rows)

    def column_max_content_widths(self) -> List[int]:
        """The widest line of each column, at least 1, scanning header and rows."""
        max_widths = [0] * len(self.columns)
        sources = ([self._header] if self._header is not None else []) + self.rows
        for row in sources:
            widths = row.max_content_widths()
            if len(widths) > len(max_widths):
                raise IndexError(
                    "row has more cells than known columns; call discover_columns() first"
                )
            for index, width in enumerate(widths):
                width = max(1, min(width, _U16_MAX))
                if max_widths[index] < width:
                    max_widths[index] = width
        return max_widths

    def discover_columns(self) -> None:
        """Create columns for cells added to rows after they joined the table."""
        for row in self.rows:
            self._autogenerate_columns(row)

    def _autogenerate_columns(self, row: Row) -> None:
        for index in range(len(self.columns), row.cell_count()):
            self.columns.append(Column(index))