"""Table description: ordered columns, target width, arrangement mode, borders.

This is the input of :func:`pi.table.arrangement.arrange_content`.  Cell
contents only matter here as far as they determine a column's natural width.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Literal, Sequence

from pi.table.arrangement import arrange_content
from pi.table.constraints import ColumnConstraint, parse_constraint
from pi.table.terminal import detect_terminal_width
from pi.table.width import content_width_of

if TYPE_CHECKING:
    from pi.table.display import ColumnDisplayInfo
    from pi.table.settings import TableSettings

CellAlignment = Literal["left", "center", "right"]

# disabled -> size by content and constraints only
# dynamic  -> fit everything into the table width
ContentArrangement = Literal["disabled", "dynamic"]


@dataclass
class Column:
    """Definition of a single table column."""

    padding: tuple[int, int] = (1, 1)
    max_content_width: int = 0
    constraint: ColumnConstraint | None = None
    cell_alignment: CellAlignment | None = None
    delimiter: str | None = None

    @classmethod
    def from_cells(
        cls,
        cells: Iterable[str],
        padding: tuple[int, int] = (1, 1),
        constraint: ColumnConstraint | None = None,
        cell_alignment: CellAlignment | None = None,
        delimiter: str | None = None,
    ) -> Column:
        """Create a column whose natural width fits the widest of *cells*."""
        column = cls(
            padding=padding,
            constraint=constraint,
            cell_alignment=cell_alignment,
            delimiter=delimiter,
        )
        for cell in cells:
            column.add_cell(cell)
        return column

    def add_cell(self, content: str) -> None:
        """Widen the natural width so that *content* fits."""
        self.max_content_width = max(self.max_content_width, content_width_of(content))


@dataclass
class Table:
    """Everything the arrangement needs to know about a table."""

    columns: list[Column] = field(default_factory=list)
    width: int | None = None
    arrangement: ContentArrangement = "disabled"
    left_border: bool = True
    right_border: bool = True
    vertical_lines: bool = True
    # Fall back to the terminal width when no explicit width is set
    detect_width: bool = True

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[str]],
        header: Sequence[str] | None = None,
        settings: TableSettings | None = None,
    ) -> Table:
        """Build a table from rows of cell strings.

        The column count is that of the longest row (header included); short
        rows simply contribute nothing to the missing columns.
        """
        all_rows: list[Sequence[str]] = []
        if header is not None:
            all_rows.append(header)
        all_rows.extend(rows)

        column_count = max((len(row) for row in all_rows), default=0)
        table = cls(columns=[Column() for _ in range(column_count)])
        if settings is not None:
            settings.apply(table)

        for row in all_rows:
            for column, cell in zip(table.columns, row):
                column.add_cell(cell)
        return table

    def set_constraints(
        self, constraints: Sequence[ColumnConstraint | int | str | None]
    ) -> None:
        """Assign *constraints* to columns by position.

        Extra constraints beyond the column count are ignored.
        """
        for column, value in zip(self.columns, constraints):
            column.constraint = parse_constraint(value)

    def get_table_width(self) -> int | None:
        """Target width of the whole table, or ``None`` if unknown."""
        if self.width is not None:
            return self.width
        if self.detect_width:
            return detect_terminal_width()
        return None

    def arrange(self) -> list[ColumnDisplayInfo]:
        return arrange_content(self)
