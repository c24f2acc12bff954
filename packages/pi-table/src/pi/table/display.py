"""Per-render column display state.

A ``ColumnDisplayInfo`` is built from a ``Column`` at the start of every
arrangement and holds the intermediate results (resolved content width,
residual constraint, ...) without ever writing back to the column itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pi.table.constraints import ColumnConstraint, Hidden

if TYPE_CHECKING:
    from pi.table.table import CellAlignment, Column


class ColumnDisplayInfo:
    """Scratch state for one column during a single arrangement pass."""

    __slots__ = (
        "padding",
        "delimiter",
        "max_content_width",
        "_content_width",
        "fixed",
        "constraint",
        "cell_alignment",
        "needs_splitting",
    )

    def __init__(
        self,
        padding: tuple[int, int] = (0, 0),
        max_content_width: int = 0,
        cell_alignment: CellAlignment | None = None,
        delimiter: str | None = None,
    ) -> None:
        self.padding = padding
        self.delimiter = delimiter
        # Widest line over all cells of the column
        self.max_content_width = max_content_width
        # Zero is never a valid content width
        self._content_width = 1
        self.fixed = False
        # Residual constraint: only MaxWidth or Hidden survive evaluation
        self.constraint: ColumnConstraint | None = None
        self.cell_alignment = cell_alignment
        self.needs_splitting = False

    @classmethod
    def from_column(cls, column: Column) -> ColumnDisplayInfo:
        return cls(
            padding=column.padding,
            max_content_width=column.max_content_width,
            cell_alignment=column.cell_alignment,
            delimiter=column.delimiter,
        )

    def __repr__(self) -> str:
        return (
            f"ColumnDisplayInfo(content_width={self._content_width}, "
            f"max_content_width={self.max_content_width}, padding={self.padding}, "
            f"fixed={self.fixed}, constraint={self.constraint!r})"
        )

    # ------------------------------------------------------------------
    # Widths
    # ------------------------------------------------------------------

    @property
    def content_width(self) -> int:
        return self._content_width

    def set_content_width(self, width: int) -> None:
        """Set the content width, coercing anything below 1 to 1."""
        self._content_width = max(width, 1)

    def padding_width(self) -> int:
        return self.padding[0] + self.padding[1]

    def max_width(self) -> int:
        """Natural total width: widest content plus padding."""
        return self.max_content_width + self.padding_width()

    def width(self) -> int:
        """Total width: content width plus padding."""
        return self._content_width + self.padding_width()

    def without_padding(self, width: int) -> int:
        """Return *width* minus padding, never less than 1."""
        padding = self.padding_width()
        if padding >= width:
            return 1
        return width - padding

    def is_hidden(self) -> bool:
        return isinstance(self.constraint, Hidden)
