"""Tests for pi.table.table and pi.table.borders -- the table description."""

from __future__ import annotations

import pytest

from pi.table import table as table_module
from pi.table.borders import border_overhead, count_visible_columns
from pi.table.constraints import ContentWidth, Hidden, MaxWidth, Width
from pi.table.display import ColumnDisplayInfo
from pi.table.table import Column, Table


# ---------------------------------------------------------------------------
# Column
# ---------------------------------------------------------------------------


class TestColumn:
    """Natural width measurement of a column."""

    def test_defaults(self) -> None:
        column = Column()
        assert column.padding == (1, 1)
        assert column.max_content_width == 0
        assert column.constraint is None

    def test_from_cells_uses_widest_cell(self) -> None:
        column = Column.from_cells(["a", "abcd", "ab"])
        assert column.max_content_width == 4

    def test_multiline_cell_uses_widest_line(self) -> None:
        column = Column.from_cells(["ab\nabcde\nabc"])
        assert column.max_content_width == 5

    def test_wide_characters(self) -> None:
        column = Column.from_cells(["日本"])
        assert column.max_content_width == 4

    def test_ansi_codes_do_not_count(self) -> None:
        column = Column.from_cells(["\x1b[1mbold\x1b[0m"])
        assert column.max_content_width == 4

    def test_from_cells_forwards_options(self) -> None:
        column = Column.from_cells(["abc"], padding=(0, 2), cell_alignment="center")
        assert column.padding == (0, 2)
        assert column.cell_alignment == "center"

    def test_from_cells_sets_constraint_and_delimiter(self) -> None:
        column = Column.from_cells(["abc", "a"], constraint=MaxWidth(2), delimiter="/")
        assert column.max_content_width == 3
        assert column.constraint == MaxWidth(2)
        assert column.delimiter == "/"
        assert column.padding == (1, 1)


# ---------------------------------------------------------------------------
# Table
# ---------------------------------------------------------------------------


class TestTableFromRows:
    """Build a table description from string rows."""

    def test_header_and_ragged_rows(self) -> None:
        table = Table.from_rows([["ccc"], ["d", "eeee", "f"]], header=["a", "bb"])
        assert [c.max_content_width for c in table.columns] == [3, 4, 1]

    def test_empty(self) -> None:
        table = Table.from_rows([])
        assert table.columns == []
        assert table.arrange() == []

    def test_arrange_disabled(self) -> None:
        table = Table.from_rows(
            [["four", "fivef", "sixsix"]], header=["head", "head", "head"]
        )
        table.detect_width = False
        infos = table.arrange()
        assert [info.width() for info in infos] == [6, 7, 8]


class TestTableWidth:
    """Where the target width comes from."""

    def test_explicit_width(self) -> None:
        assert Table(width=42).get_table_width() == 42

    def test_explicit_width_wins_over_terminal(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(table_module, "detect_terminal_width", lambda: 120)
        assert Table(width=42).get_table_width() == 42

    def test_terminal_width(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(table_module, "detect_terminal_width", lambda: 77)
        assert Table().get_table_width() == 77

    def test_no_terminal(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(table_module, "detect_terminal_width", lambda: None)
        assert Table().get_table_width() is None

    def test_detection_disabled(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(table_module, "detect_terminal_width", lambda: 77)
        assert Table(detect_width=False).get_table_width() is None

    def test_terminal_width_drives_dynamic_arrangement(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(table_module, "detect_terminal_width", lambda: 12)
        table = Table(
            columns=[Column(max_content_width=10), Column(max_content_width=3)],
            arrangement="dynamic",
            left_border=False,
            right_border=False,
        )
        assert [info.width() for info in table.arrange()] == [6, 5]


class TestSetConstraints:
    """Assign constraints by column position."""

    def test_parses_values(self) -> None:
        table = Table(columns=[Column(), Column(), Column()])
        table.set_constraints(["content", 10, MaxWidth(4)])
        assert [c.constraint for c in table.columns] == [ContentWidth(), Width(10), MaxWidth(4)]

    def test_extra_constraints_ignored(self) -> None:
        table = Table(columns=[Column()])
        table.set_constraints(["hidden", "content"])
        assert table.columns[0].constraint == Hidden()

    def test_none_clears(self) -> None:
        table = Table(columns=[Column(constraint=Width(3))])
        table.set_constraints([None])
        assert table.columns[0].constraint is None

    def test_invalid_value_raises(self) -> None:
        table = Table(columns=[Column()])
        with pytest.raises(ValueError):
            table.set_constraints(["huge"])


# ---------------------------------------------------------------------------
# Borders
# ---------------------------------------------------------------------------


class TestBorderOverhead:
    """Space reserved for borders and separators."""

    def test_all_borders(self) -> None:
        assert border_overhead(Table(), 3) == 4

    def test_no_side_borders(self) -> None:
        assert border_overhead(Table(left_border=False, right_border=False), 3) == 2

    def test_no_vertical_lines(self) -> None:
        assert border_overhead(Table(vertical_lines=False), 3) == 2

    def test_single_and_no_column(self) -> None:
        assert border_overhead(Table(), 1) == 2
        assert border_overhead(Table(), 0) == 2

    def test_count_visible_columns(self) -> None:
        infos = [ColumnDisplayInfo(), ColumnDisplayInfo(), ColumnDisplayInfo()]
        infos[1].constraint = Hidden()
        assert count_visible_columns(infos) == 2
