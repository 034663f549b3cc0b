import sys

import pytest

from tablecraft.cell import Cell
from tablecraft.presets import (
    ASCII_FULL,
    ASCII_MARKDOWN,
    NOTHING,
    UTF8_FULL,
    UTF8_ROUND_CORNERS,
)
from tablecraft.row import Row
from tablecraft.style import (
    ColumnConstraint,
    ContentArrangement,
    TableComponent,
    Width,
)
from tablecraft.table import Table


def test_column_generation():
    table = Table()
    table.set_header(["thr", "four", "fivef"])
    assert len(table.columns) == 3
    assert table.column_max_content_widths() == [3, 4, 5]

    table.add_row(["four", "fivef", "very long text with 23"])
    assert table.column_max_content_widths() == [4, 5, 22]

    table.add_row(["", "", "shorter"])
    assert table.column_max_content_widths() == [4, 5, 22]


def test_empty_cells_count_as_width_one():
    table = Table()
    table.add_row(["", "x"])
    assert table.column_max_content_widths() == [1, 1]


def test_default_style_is_ascii_full():
    table = Table()
    assert table.style(TableComponent.TOP_LEFT_CORNER) == "+"
    assert table.current_style_as_preset() == ASCII_FULL


def test_load_utf8_preset_round_trip():
    table = Table()
    table.load_preset(UTF8_FULL)
    assert table.current_style_as_preset() == UTF8_FULL


def test_load_nothing_removes_styles():
    table = Table()
    table.load_preset(NOTHING)
    assert table.current_style_as_preset() == NOTHING
    assert not table.style_exists(TableComponent.LEFT_BORDER)
    assert table.style(TableComponent.LEFT_BORDER) is None
    assert table.style_or_default(TableComponent.LEFT_BORDER) == " "


def test_long_preset_ignores_surplus():
    table = Table()
    table.load_preset(ASCII_MARKDOWN)
    assert table.current_style_as_preset() == ASCII_MARKDOWN[:19]


def test_short_preset_keeps_remaining_components():
    table = Table()
    table.load_preset("abc")
    assert table.current_style_as_preset() == "abc" + ASCII_FULL[3:]


def test_apply_modifier_round_corners():
    table = Table()
    table.load_preset(UTF8_FULL).apply_modifier(UTF8_ROUND_CORNERS)
    assert table.current_style_as_preset() == UTF8_FULL[:15] + "╭╮╰╯"
    assert table.style(TableComponent.TOP_LEFT_CORNER) == "╭"
    assert table.style(TableComponent.LEFT_BORDER) == "│"


def test_set_and_remove_style():
    table = Table()
    table.set_style(TableComponent.TOP_LEFT_CORNER, "#")
    assert table.style(TableComponent.TOP_LEFT_CORNER) == "#"
    table.remove_style(TableComponent.TOP_LEFT_CORNER)
    assert table.style_exists(TableComponent.TOP_LEFT_CORNER) is False


def test_set_style_rejects_multiple_characters():
    with pytest.raises(ValueError):
        Table().set_style(TableComponent.TOP_BORDER, "--")


def test_counts_and_emptiness():
    table = Table()
    assert table.is_empty()
    table.set_header(["Col 1", "Col 2", "Col 3"])
    assert table.column_count() == 3
    table.add_row(["One", "Two"])
    assert table.row_count() == 1
    assert not table.is_empty()
    assert table.row(0).index == 0
    assert table.row(5) is None


def test_add_row_if():
    table = Table()
    seen = []

    def predicate(index, row):
        seen.append(index)
        return len(row) == 2

    table.add_row(["a", "b"])
    table.add_row_if(predicate, ["c", "d"])
    table.add_row_if(predicate, ["e", "f", "g"])
    assert table.row_count() == 2
    assert seen == [1, 2]
    assert table.column_count() == 2


def test_add_rows_if():
    table = Table()
    rows = [Row(["a", "b"]), Row(["c", "d"])]
    table.add_rows_if(lambda _, r: len(r) == 2, rows)
    table.add_rows_if(lambda _, r: False, [["x", "y"]])
    assert [row.cells[0].content() for row in table.row_iter()] == ["a", "c"]
    assert [row.index for row in table.rows] == [0, 1]


def test_column_cells_iter():
    table = Table()
    table.add_row(["First", "Second"])
    table.add_row(["Third"])
    table.add_row(["Fourth", "Fifth"])
    cells = list(table.column_cells_iter(1))
    assert cells[0].content() == "Second"
    assert cells[1] is None
    assert cells[2].content() == "Fifth"
    assert len(cells) == 3


def test_column_cells_with_header_iter():
    table = Table()
    table.set_header(["A", "B"])
    table.add_row(["First", "Second"])
    table.add_row(["Third"])
    table.add_row(["Fourth", "Fifth"])
    contents = [c.content() if c else None for c in table.column_cells_with_header_iter(1)]
    assert contents == ["B", "Second", None, "Fifth"]


def test_set_constraints_ignores_surplus():
    table = Table()
    table.add_row(["one", "two"])
    table.set_constraints(
        [
            ColumnConstraint.upper_boundary(Width.fixed(15)),
            ColumnConstraint.lower_boundary(Width.fixed(20)),
            ColumnConstraint.hidden(),
        ]
    )
    assert table.column(0).constraint() == ColumnConstraint.upper_boundary(Width.fixed(15))
    assert table.column(1).constraint() == ColumnConstraint.lower_boundary(Width.fixed(20))
    assert table.column(2) is None


def test_discover_columns_after_adding_cells():
    table = Table()
    table.add_row(["one"])
    table.row(0).add_cell(Cell("two"))
    assert len(table.columns) == 1
    with pytest.raises(IndexError):
        table.column_max_content_widths()
    assert table.column_count() == 2
    assert table.column_max_content_widths() == [3, 3]


def test_width_and_tty():
    table = Table()
    table.force_no_tty()
    assert table.is_tty() is False
    assert table.width() is None
    table.set_width(80)
    assert table.width() == 80


def test_set_width_out_of_range():
    with pytest.raises(ValueError):
        Table().set_width(70000)


def test_is_tty_follows_stream(monkeypatch):
    class FakeTerminal:
        def isatty(self):
            return True

        def fileno(self):
            raise OSError("no descriptor")

    monkeypatch.setattr(sys, "stdout", FakeTerminal())
    table = Table()
    assert table.is_tty() is True
    assert table.should_style() is True
    assert table.width() is None


def test_should_style_enforced():
    table = Table()
    table.force_no_tty()
    assert table.should_style() is False
    table.enforce_styling()
    assert table.should_style() is True


def test_style_text_only_flag():
    table = Table()
    assert table.styles_text_only is False
    table.style_text_only()
    assert table.styles_text_only is True


def test_arrangement_delimiter_and_indicator():
    table = Table()
    assert table.content_arrangement() is ContentArrangement.DISABLED
    table.set_content_arrangement(ContentArrangement.DYNAMIC)
    assert table.content_arrangement() is ContentArrangement.DYNAMIC
    assert table.truncation_indicator == "..."
    table.set_truncation_indicator("…").set_delimiter("-")
    assert table.truncation_indicator == "…"
    assert table.delimiter == "-"
    with pytest.raises(ValueError):
        table.set_delimiter("ab")


def test_header_access():
    table = Table()
    assert table.header() is None
    table.set_header(["Header One", "Header Two"])
    assert [c.content() for c in table.header().cell_iter()] == ["Header One", "Header Two"]
    assert [column.index for column in table.column_iter()] == [0, 1]