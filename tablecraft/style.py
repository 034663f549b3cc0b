"""Styling types: alignments, arrangements, table components, colors and constraints."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union

_U8_MAX = 255
_U16_MAX = 65535


class CellAlignment(Enum):
    """How the content of a cell is aligned inside the cell."""

    LEFT = auto()
    RIGHT = auto()
    CENTER = auto()


class ContentArrangement(Enum):
    """How the content of a table is arranged.

    DISABLED: no arrangement; the table may grow wider than the output.
    DYNAMIC: wrap content to fit the table or terminal width.
    DYNAMIC_FULL_WIDTH: like DYNAMIC, but always use the whole available width.
    """

    DISABLED = auto()
    DYNAMIC = auto()
    DYNAMIC_FULL_WIDTH = auto()


class TableComponent(Enum):
    """Every drawable part of a table.

    The definition order is the order of characters in preset strings.
    """

    LEFT_BORDER = auto()
    RIGHT_BORDER = auto()
    TOP_BORDER = auto()
    BOTTOM_BORDER = auto()
    LEFT_HEADER_INTERSECTION = auto()
    HEADER_LINES = auto()
    MIDDLE_HEADER_INTERSECTIONS = auto()
    RIGHT_HEADER_INTERSECTION = auto()
    VERTICAL_LINES = auto()
    HORIZONTAL_LINES = auto()
    MIDDLE_INTERSECTIONS = auto()
    LEFT_BORDER_INTERSECTIONS = auto()
    RIGHT_BORDER_INTERSECTIONS = auto()
    TOP_BORDER_INTERSECTIONS = auto()
    BOTTOM_BORDER_INTERSECTIONS = auto()
    TOP_LEFT_CORNER = auto()
    TOP_RIGHT_CORNER = auto()
    BOTTOM_LEFT_CORNER = auto()
    BOTTOM_RIGHT_CORNER = auto()


class Attribute(Enum):
    """A terminal text attribute that can be applied to a cell."""

    RESET = auto()
    BOLD = auto()
    DIM = auto()
    ITALIC = auto()
    UNDERLINED = auto()
    DOUBLE_UNDERLINED = auto()
    UNDERCURLED = auto()
    UNDERDOTTED = auto()
    UNDERDASHED = auto()
    SLOW_BLINK = auto()
    RAPID_BLINK = auto()
    REVERSE = auto()
    HIDDEN = auto()
    CROSSED_OUT = auto()
    FRAKTUR = auto()
    NO_BOLD = auto()
    NORMAL_INTENSITY = auto()
    NO_ITALIC = auto()
    NO_UNDERLINE = auto()
    NO_BLINK = auto()
    NO_REVERSE = auto()
    NO_HIDDEN = auto()
    NOT_CROSSED_OUT = auto()
    FRAMED = auto()
    ENCIRCLED = auto()
    OVER_LINED = auto()
    NOT_FRAMED_OR_ENCIRCLED = auto()
    NOT_OVER_LINED = auto()


class NamedColor(Enum):
    """One of the base terminal colors."""

    RESET = auto()
    BLACK = auto()
    DARK_GREY = auto()
    RED = auto()
    DARK_RED = auto()
    GREEN = auto()
    DARK_GREEN = auto()
    YELLOW = auto()
    DARK_YELLOW = auto()
    BLUE = auto()
    DARK_BLUE = auto()
    MAGENTA = auto()
    DARK_MAGENTA = auto()
    CYAN = auto()
    DARK_CYAN = auto()
    WHITE = auto()
    GREY = auto()


def _check_byte(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if not 0 <= value <= _U8_MAX:
        raise ValueError(f"{name} must be within 0..={_U8_MAX}, got {value}")


@dataclass(frozen=True, order=True)
class Rgb:
    """A 24-bit RGB color."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        _check_byte("r", self.r)
        _check_byte("g", self.g)
        _check_byte("b", self.b)


@dataclass(frozen=True, order=True)
class AnsiValue:
    """A color from the 256-color ANSI palette."""

    value: int

    def __post_init__(self) -> None:
        _check_byte("value", self.value)


Color = Union[NamedColor, Rgb, AnsiValue]


class WidthKind(Enum):
    """Whether a width is a fixed character count or a percentage."""

    FIXED = auto()
    PERCENTAGE = auto()


@dataclass(frozen=True)
class Width:
    """A width, either a fixed number of characters or a percentage of the table width.

    Percentages above 100 are treated as 100 when the layout is computed.
    """

    kind: WidthKind
    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.kind, WidthKind):
            raise TypeError(f"kind must be a WidthKind, got {self.kind!r}")
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"width must be an integer, got {type(self.value).__name__}")
        if not 0 <= self.value <= _U16_MAX:
            raise ValueError(f"width must be within 0..={_U16_MAX}, got {self.value}")

    @classmethod
    def fixed(cls, value: int) -> Width:
        """A fixed amount of characters."""
        return cls(WidthKind.FIXED, value)

    @classmethod
    def percentage(cls, value: int) -> Width:
        """A percentage of the available width."""
        return cls(WidthKind.PERCENTAGE, value)


class ConstraintKind(Enum):
    """The kinds of column constraints."""

    HIDDEN = auto()
    CONTENT_WIDTH = auto()
    ABSOLUTE = auto()
    LOWER_BOUNDARY = auto()
    UPPER_BOUNDARY = auto()
    BOUNDARIES = auto()


@dataclass(frozen=True)
class ColumnConstraint:
    """A constraint on the width of a column.

    An absolute constraint carries its width as both ``lower`` and ``upper``;
    a lower or upper boundary carries only the matching side.
    """

    kind: ConstraintKind
    lower: Optional[Width] = None
    upper: Optional[Width] = None

    def __post_init__(self) -> None:
        if not isinstance(self.kind, ConstraintKind):
            raise TypeError(f"kind must be a ConstraintKind, got {self.kind!r}")
        for side in (self.lower, self.upper):
            if side is not None and not isinstance(side, Width):
                raise TypeError(f"boundaries must be Width values, got {side!r}")
        needs_lower = self.kind in (
            ConstraintKind.ABSOLUTE,
            ConstraintKind.LOWER_BOUNDARY,
            ConstraintKind.BOUNDARIES,
        )
        needs_upper = self.kind in (
            ConstraintKind.ABSOLUTE,
            ConstraintKind.UPPER_BOUNDARY,
            ConstraintKind.BOUNDARIES,
        )
        if needs_lower != (self.lower is not None):
            raise ValueError(f"{self.kind.name} constraint has an invalid lower boundary")
        if needs_upper != (self.upper is not None):
            raise ValueError(f"{self.kind.name} constraint has an invalid upper boundary")
        if self.kind is ConstraintKind.ABSOLUTE and self.lower != self.upper:
            raise ValueError("ABSOLUTE constraint needs identical boundaries")

    @classmethod
    def hidden(cls) -> ColumnConstraint:
        """Hide the column completely."""
        return cls(ConstraintKind.HIDDEN)

    @classmethod
    def content_width(cls) -> ColumnConstraint:
        """Force the column to be as wide as its content."""
        return cls(ConstraintKind.CONTENT_WIDTH)

    @classmethod
    def absolute(cls, width: Width) -> ColumnConstraint:
        """Enforce an exact width for the column."""
        return cls(ConstraintKind.ABSOLUTE, width, width)

    @classmethod
    def lower_boundary(cls, width: Width) -> ColumnConstraint:
        """The column is at least this wide."""
        return cls(ConstraintKind.LOWER_BOUNDARY, lower=width)

    @classmethod
    def upper_boundary(cls, width: Width) -> ColumnConstraint:
        """The column is at most this wide."""
        return cls(ConstraintKind.UPPER_BOUNDARY, upper=width)

    @classmethod
    def boundaries(cls, lower: Width, upper: Width) -> ColumnConstraint:
        """The column lies between both boundaries."""
        return cls(ConstraintKind.BOUNDARIES, lower, upper)

    def is_hidden(self) -> bool:
        """Whether this constraint hides the column."""
        return self.kind is ConstraintKind.HIDDEN