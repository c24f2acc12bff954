"""Space taken by borders and column separators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from pi.table.display import ColumnDisplayInfo
    from pi.table.table import Table


def should_draw_left_border(table: Table) -> bool:
    return table.left_border


def should_draw_right_border(table: Table) -> bool:
    return table.right_border


def should_draw_vertical_lines(table: Table) -> bool:
    return table.vertical_lines


def count_visible_columns(infos: Iterable[ColumnDisplayInfo]) -> int:
    return sum(1 for info in infos if not info.is_hidden())


def border_overhead(table: Table, visible_columns: int) -> int:
    """Columns of the table width used by borders and separators.

    One unit per drawn side border and one separator between each pair of
    adjacent visible columns.
    """
    overhead = 0
    if should_draw_left_border(table):
        overhead += 1
    if should_draw_right_border(table):
        overhead += 1
    if should_draw_vertical_lines(table) and visible_columns > 1:
        overhead += visible_columns - 1
    return overhead
