"""Column width arrangement.

Decides the content width of every column of a table in a single pass:

1. Each column's constraint is evaluated on its own.  Most constraints fix
   the column width right away; ``MaxWidth`` and ``Hidden`` are carried over
   as residual constraints, percentage limits being reduced to absolute ones.
2. Exactly one strategy then sizes the remaining columns:

   * *disabled* -- every column gets its natural width (capped by
     ``MaxWidth``).  Used whenever the table width is unknown.
   * *dynamic* -- columns are fitted into the table width.  Columns needing
     less than their fair share get exactly what they need, the rest is
     split evenly with the remainder going to the leftmost columns.

The arrangement never fails.  If the fixed widths alone exceed the table
width, the leftover columns are clamped to a content width of 1 and the
table overflows.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pi.table.borders import border_overhead, count_visible_columns
from pi.table.constraints import (
    ColumnConstraint,
    ContentWidth,
    Hidden,
    MaxPercentage,
    MaxWidth,
    MinPercentage,
    MinWidth,
    Percentage,
    Width,
)
from pi.table.display import ColumnDisplayInfo

if TYPE_CHECKING:
    from pi.table.table import Table

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def arrange_content(table: Table) -> list[ColumnDisplayInfo]:
    """Determine the width of each column of *table*.

    Returns one display info per column, in column order.  Hidden columns
    are included; check ``is_hidden()`` before drawing.
    """
    table_width = table.get_table_width()

    infos: list[ColumnDisplayInfo] = []
    for column in table.columns:
        info = ColumnDisplayInfo.from_column(column)
        if column.constraint is not None:
            evaluate_constraint(info, column.constraint, table_width)
        infos.append(info)

    if table_width is None:
        logger.debug("No table width known, falling back to disabled arrangement")
        disabled_arrangement(infos)
    elif table.arrangement == "dynamic":
        dynamic_arrangement(table, infos, table_width)
    else:
        disabled_arrangement(infos)

    for info in infos:
        if not info.is_hidden():
            info.needs_splitting = info.content_width < info.max_content_width

    return infos


# ---------------------------------------------------------------------------
# Constraint evaluation
# ---------------------------------------------------------------------------


def _percent_of(table_width: int, percent: int) -> int:
    return table_width * percent // 100


def evaluate_constraint(
    info: ColumnDisplayInfo,
    constraint: ColumnConstraint,
    table_width: int | None,
) -> None:
    """Apply a column's *constraint* to its display *info*.

    Either fixes the content width right away or stores a residual
    ``MaxWidth`` / ``Hidden`` constraint for the arrangement strategies.
    Percentage constraints have no effect while *table_width* is unknown.
    """
    if isinstance(constraint, ContentWidth):
        info.set_content_width(info.max_content_width)
        info.fixed = True
    elif isinstance(constraint, Width):
        info.set_content_width(info.without_padding(constraint.width))
        info.fixed = True
    elif isinstance(constraint, MinWidth):
        # Only a minimum above the natural width pins the column now;
        # otherwise the content already satisfies it.
        if info.max_width() <= constraint.width:
            info.set_content_width(info.without_padding(constraint.width))
            info.fixed = True
    elif isinstance(constraint, MaxWidth):
        info.constraint = constraint
    elif isinstance(constraint, Percentage):
        if table_width is not None:
            width = _percent_of(table_width, constraint.percent)
            info.set_content_width(info.without_padding(width))
            info.fixed = True
    elif isinstance(constraint, MinPercentage):
        if table_width is not None:
            min_width = _percent_of(table_width, constraint.percent)
            if info.max_width() <= min_width:
                info.set_content_width(info.without_padding(min_width))
                info.fixed = True
    elif isinstance(constraint, MaxPercentage):
        if table_width is not None:
            info.constraint = MaxWidth(_percent_of(table_width, constraint.percent))
    elif isinstance(constraint, Hidden):
        info.constraint = constraint


# ---------------------------------------------------------------------------
# Disabled arrangement
# ---------------------------------------------------------------------------


def disabled_arrangement(infos: list[ColumnDisplayInfo]) -> None:
    """Give every unfixed column its natural width, capped by ``MaxWidth``."""
    for info in infos:
        if info.fixed or info.is_hidden():
            continue

        constraint = info.constraint
        if isinstance(constraint, MaxWidth) and constraint.width < info.max_width():
            info.set_content_width(info.without_padding(constraint.width))
        else:
            info.set_content_width(info.max_content_width)
        info.fixed = True


# ---------------------------------------------------------------------------
# Dynamic arrangement
# ---------------------------------------------------------------------------


def _exceeds_max_width(info: ColumnDisplayInfo) -> bool:
    constraint = info.constraint
    return isinstance(constraint, MaxWidth) and constraint.width < info.max_width()


def dynamic_arrangement(
    table: Table,
    infos: list[ColumnDisplayInfo],
    table_width: int,
) -> None:
    """Fit all columns into *table_width*.

    1. Subtract borders, separators and all already fixed columns from the
       table width.
    2. Fix every column that needs less than the average remaining space
       (or whose ``MaxWidth`` is below it) and repeat while that frees space.
    3. Split what is left evenly over the remaining columns, handing the
       division remainder out one unit at a time from left to right.  If
       their natural widths add up to exactly what is left, use those.

    May go below zero on tiny widths; every column still gets at least 1.
    """
    column_count = count_visible_columns(infos)
    remaining_width = table_width - border_overhead(table, column_count)

    checked: set[int] = set()
    for index, info in enumerate(infos):
        if info.fixed:
            remaining_width -= info.width()
            checked.add(index)

    logger.debug(
        "Dynamic arrangement: table width %d, %d visible columns, %d fixed, %d remaining",
        table_width,
        column_count,
        len(checked),
        remaining_width,
    )

    remaining_width = find_columns_less_than_average(
        remaining_width, column_count, infos, checked
    )

    remaining_columns = column_count - len(checked)
    if remaining_columns <= 0:
        return

    unchecked = [
        info
        for index, info in enumerate(infos)
        if not info.is_hidden() and index not in checked
    ]
    # Natural widths fill the rest exactly: keep them
    if sum(info.max_width() for info in unchecked) == remaining_width and not any(
        _exceeds_max_width(info) for info in unchecked
    ):
        for info in unchecked:
            info.set_content_width(info.max_content_width)
            info.fixed = True
        return

    if remaining_width < remaining_columns:
        logger.debug(
            "Table width %d too small: %d columns left with %d units, table will overflow",
            table_width,
            remaining_columns,
            remaining_width,
        )
        remaining_width = remaining_columns

    average_space = remaining_width // remaining_columns
    excess = remaining_width - average_space * remaining_columns

    for info in unchecked:
        width = average_space
        if excess > 0:
            width += 1
            excess -= 1

        info.set_content_width(info.without_padding(width))
        info.fixed = True


def find_columns_less_than_average(
    remaining_width: int,
    column_count: int,
    infos: list[ColumnDisplayInfo],
    checked: set[int],
) -> int:
    """Fix all columns that need less than the average remaining space.

    *checked* holds the indices of columns that are already fixed and is
    updated in place.  Fixing a column may raise the average for the
    others, so the scan repeats until a pass fixes nothing.

    Returns the width that is still unassigned.
    """
    found_smaller = True
    while found_smaller:
        found_smaller = False
        remaining_columns = column_count - len(checked)
        if remaining_columns <= 0:
            break

        average_space = remaining_width // remaining_columns
        # Tiny terminal or huge fixed columns: nothing left to hand out
        if average_space <= 0:
            break

        for index, info in enumerate(infos):
            if info.is_hidden() or index in checked:
                continue

            constraint = info.constraint
            if (
                isinstance(constraint, MaxWidth)
                and constraint.width <= average_space
                and info.max_width() >= constraint.width
            ):
                info.set_content_width(info.without_padding(constraint.width))
            elif info.max_width() < average_space:
                info.set_content_width(info.max_content_width)
            else:
                continue

            info.fixed = True
            remaining_width -= info.width()
            checked.add(index)
            found_smaller = True

    return remaining_width
