"""pi-table: column width arrangement for fixed-width text tables."""

# Arrangement
from pi.table.arrangement import (
    arrange_content,
    disabled_arrangement,
    dynamic_arrangement,
    evaluate_constraint,
    find_columns_less_than_average,
)

# Borders
from pi.table.borders import (
    border_overhead,
    count_visible_columns,
    should_draw_left_border,
    should_draw_right_border,
    should_draw_vertical_lines,
)

# Constraints
from pi.table.constraints import (
    AbsoluteWidth,
    ColumnConstraint,
    ContentWidth,
    Hidden,
    MaxPercentage,
    MaxWidth,
    MinPercentage,
    MinWidth,
    Percentage,
    Width,
    parse_constraint,
)

# Display state
from pi.table.display import ColumnDisplayInfo

# Settings
from pi.table.settings import TableSettings, load_settings

# Table description
from pi.table.table import CellAlignment, Column, ContentArrangement, Table

# Terminal
from pi.table.terminal import detect_terminal_width

# Width measurement
from pi.table.width import content_width_of, strip_escapes, visible_width

__all__ = [
    # Arrangement
    "arrange_content",
    "disabled_arrangement",
    "dynamic_arrangement",
    "evaluate_constraint",
    "find_columns_less_than_average",
    # Borders
    "border_overhead",
    "count_visible_columns",
    "should_draw_left_border",
    "should_draw_right_border",
    "should_draw_vertical_lines",
    # Constraints
    "AbsoluteWidth",
    "ColumnConstraint",
    "ContentWidth",
    "Hidden",
    "MaxPercentage",
    "MaxWidth",
    "MinPercentage",
    "MinWidth",
    "Percentage",
    "Width",
    "parse_constraint",
    # Display state
    "ColumnDisplayInfo",
    # Settings
    "TableSettings",
    "load_settings",
    # Table description
    "CellAlignment",
    "Column",
    "ContentArrangement",
    "Table",
    # Terminal
    "detect_terminal_width",
    # Width measurement
    "content_width_of",
    "strip_escapes",
    "visible_width",
]
