# tablecraft

A library for describing text tables meant for the terminal: rows of cells, a
header, columns that are created as rows are added, per-column padding,
alignment and width constraints, cell colors and attributes, and the
characters used to draw each part of the table, loaded from preset strings.

## Installation

```
pip install tablecraft
```

The only dependency is `wcwidth`, used to measure the display width of text.

## Building a table

```python
from tablecraft.table import Table
from tablecraft.cell import Cell
from tablecraft.style import Attribute, NamedColor, Rgb

table = Table()
table.set_header([
    Cell("Header1").add_attribute(Attribute.BOLD),
    Cell("Header2").fg(NamedColor.GREEN),
    "Header3",
])
table.add_row(["One", "Two\nlines", "Three"])
table.add_rows([[1, 2, 3], [4, 5]])
table.add_row_if(lambda index, row: index < 10, ["conditional", "row"])

table.row_count()                  # 4
table.column_count()               # 3
table.column_max_content_widths()  # [11, 5, 7]
```

Rows and headers accept a `Row`, or any iterable of `Cell` objects and other
values; non-cell values are turned into cells with `str()`. A cell keeps its
content as lines split on newlines; `Cell.content()` joins them again.
`Cell.fg` / `Cell.bg` accept a `NamedColor`, an `Rgb(r, g, b)` or an
`AnsiValue(n)` (components within 0–255). Setters on `Cell`, `Row`, `Column`
and `Table` return the object itself, so calls can be chained.

`Row.max_content_widths()` gives the widest line of each cell, measured in
terminal columns by `tablecraft.row.measure_text_width` (wide characters such
as CJK count as two). `Row.max_height(lines)` records a line limit for the row.

If cells are appended to a row after it was added, call
`Table.discover_columns()` so the table creates the missing columns.

### Iterating over a column

```python
for cell in table.column_cells_iter(1):
    print(None if cell is None else cell.content())
```

Rows that lack a cell in that column yield `None`.
`Table.column_cells_with_header_iter(i)` yields the header's cell first. The
same iteration is available as `column_cells` and `column_cells_with_header`
in `tablecraft.iterators`.

## Columns and constraints

```python
from tablecraft.style import CellAlignment, ColumnConstraint, Width

column = table.column(1)
column.set_padding((2, 2))
column.set_cell_alignment(CellAlignment.CENTER)
column.set_constraint(ColumnConstraint.upper_boundary(Width.fixed(20)))

table.set_constraints([
    ColumnConstraint.lower_boundary(Width.fixed(10)),
    ColumnConstraint.absolute(Width.percentage(30)),
])
```

`set_constraints` applies constraints left to right and ignores any beyond the
number of columns. Other constraints are `ColumnConstraint.hidden()`,
`ColumnConstraint.content_width()` and `ColumnConstraint.boundaries(lower, upper)`;
`Column.is_hidden()` reports a hidden column.

## Styles

Every drawable part of a table is a `TableComponent`. A preset is a string
with one character per component in the enum's order; `tablecraft.presets`
holds `ASCII_FULL` (the default), `ASCII_FULL_CONDENSED`, `ASCII_NO_BORDERS`,
`ASCII_BORDERS_ONLY`, `ASCII_BORDERS_ONLY_CONDENSED`, `ASCII_HORIZONTAL_ONLY`,
`ASCII_MARKDOWN`, `UTF8_FULL`, `UTF8_FULL_CONDENSED`, `UTF8_NO_BORDERS`,
`UTF8_BORDERS_ONLY`, `UTF8_HORIZONTAL_ONLY`, `NOTHING`, and the modifiers
`UTF8_ROUND_CORNERS` and `UTF8_SOLID_INNER_BORDERS`.

```python
from tablecraft.presets import UTF8_FULL, UTF8_ROUND_CORNERS
from tablecraft.style import TableComponent

table.load_preset(UTF8_FULL)          # a space removes that component
table.apply_modifier(UTF8_ROUND_CORNERS)  # a space leaves it unchanged
table.style(TableComponent.TOP_LEFT_CORNER)  # '╭'
table.remove_style(TableComponent.VERTICAL_LINES)
table.current_style_as_preset()
```

## Settings

- `set_content_arrangement(ContentArrangement.DISABLED | DYNAMIC | DYNAMIC_FULL_WIDTH)`
- `set_width(n)`; `width()` returns it, or the terminal width when stdout
  (or stderr after `use_stderr()`) is a tty, else `None`.
- `force_no_tty()`, `is_tty()`, `enforce_styling()`, `should_style()`,
  `style_text_only()`
- `set_delimiter(char)` on the table, a column or a cell, and
  `set_truncation_indicator(text)` (default `"..."`).

## What this package does not do

It does not draw tables. There is no function that lays out columns, wraps
or truncates content, applies colors, or produces the text lines of a table;
`print(table)` shows only the default object representation. The arrangement,
width, constraint, delimiter, truncation and styling settings above are
recorded on the objects and can be read back, but nothing in the package
turns them into output.