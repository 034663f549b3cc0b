"""Table cells: content split into lines, plus alignment and styling."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from tablecraft.style import AnsiValue, Attribute, CellAlignment, NamedColor, Rgb

_COLOR_TYPES = (NamedColor, Rgb, AnsiValue)


def _check_delimiter(delimiter: str) -> str:
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
    return delimiter


class Cell:
    """A stylable table cell.

    The content is kept as a list of lines, split on newlines.
    Setter methods return the cell itself so calls can be chained.
    """

    def __init__(self, content: Any) -> None:
        self.lines: List[str] = str(content).split("\n")
        self.delimiter: Optional[str] = None
        self.alignment: Optional[CellAlignment] = None
        self.foreground = None
        self.background = None
        self.attributes: List[Attribute] = []

    def content(self) -> str:
        """The content of the cell, lines joined by newlines."""
        return "\n".join(self.lines)

    def set_delimiter(self, delimiter: str) -> Cell:
        """Set the character used to split the content into words."""
        self.delimiter = _check_delimiter(delimiter)
        return self

    def set_alignment(self, alignment: CellAlignment) -> Cell:
        """Set the alignment; it overrides the column's alignment."""
        if not isinstance(alignment, CellAlignment):
            raise TypeError(f"alignment must be a CellAlignment, got {alignment!r}")
        self.alignment = alignment
        return self

    def fg(self, color) -> Cell:
        """Set the foreground color."""
        if not isinstance(color, _COLOR_TYPES):
            raise TypeError(f"not a color: {color!r}")
        self.foreground = color
        return self

    def bg(self, color) -> Cell:
        """Set the background color."""
        if not isinstance(color, _COLOR_TYPES):
            raise TypeError(f"not a color: {color!r}")
        self.background = color
        return self

    def add_attribute(self, attribute: Attribute) -> Cell:
        """Add a text attribute such as bold or italic."""
        if not isinstance(attribute, Attribute):
            raise TypeError(f"not an Attribute: {attribute!r}")
        self.attributes.append(attribute)
        return self

    def add_attributes(self, attributes: Iterable[Attribute]) -> Cell:
        """Add several text attributes in order."""
        for attribute in attributes:
            self.add_attribute(attribute)
        return self

    def _key(self) -> tuple:
        return (
            tuple(self.lines),
            self.delimiter,
            self.alignment,
            self.foreground,
            self.background,
            tuple(self.attributes),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self._key() == other._key()

    def __repr__(self) -> str:
        return f"Cell({self.content()!r})"


def to_cells(items: Iterable[Any]) -> List[Cell]:
    """Turn an iterable of cells or arbitrary values into a list of cells."""
    if isinstance(items, (str, bytes)):
        raise TypeError("expected an iterable of cell values, not a single string")
    return [item if isinstance(item, Cell) else Cell(item) for item in items]