"""Table settings loaded from JSON.

Keys use camelCase in files and snake_case in Python::

    {
        "arrangement": "dynamic",
        "width": 100,
        "leftBorder": true,
        "rightBorder": true,
        "verticalLines": true,
        "padding": [1, 1],
        "detectWidth": true,
        "constraints": ["content", "max:50%", null, "hidden"]
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pi.table.constraints import parse_constraint

if TYPE_CHECKING:
    from pi.table.table import Table

ConstraintValue = Union[int, str, None]


class TableSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    arrangement: Literal["disabled", "dynamic"] = "disabled"
    width: int | None = Field(default=None, ge=0)
    left_border: bool = Field(default=True, alias="leftBorder")
    right_border: bool = Field(default=True, alias="rightBorder")
    vertical_lines: bool = Field(default=True, alias="verticalLines")
    padding: tuple[int, int] = (1, 1)
    detect_width: bool = Field(default=True, alias="detectWidth")
    constraints: list[ConstraintValue] = Field(default_factory=list)

    @field_validator("padding")
    @classmethod
    def _check_padding(cls, value: tuple[int, int]) -> tuple[int, int]:
        if value[0] < 0 or value[1] < 0:
            raise ValueError("padding must not be negative")
        return value

    @field_validator("constraints")
    @classmethod
    def _check_constraints(cls, value: list[ConstraintValue]) -> list[ConstraintValue]:
        # Fail at load time rather than on first render
        for item in value:
            parse_constraint(item)
        return value

    def apply(self, table: Table) -> None:
        """Copy these settings onto *table* and its columns."""
        table.arrangement = self.arrangement
        table.width = self.width
        table.left_border = self.left_border
        table.right_border = self.right_border
        table.vertical_lines = self.vertical_lines
        table.detect_width = self.detect_width
        for column in table.columns:
            column.padding = self.padding
        if self.constraints:
            table.set_constraints(self.constraints)


def load_settings(path: str | Path) -> TableSettings:
    """Read settings from the JSON file at *path*.

    A missing file yields the defaults; malformed JSON raises
    ``json.JSONDecodeError`` and invalid values ``pydantic.ValidationError``.
    """
    path = Path(path)
    if not path.exists():
        return TableSettings()
    data = json.loads(path.read_text(encoding="utf-8"))
    return TableSettings.model_validate(data)
