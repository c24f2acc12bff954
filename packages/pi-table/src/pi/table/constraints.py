"""Column constraints: sizing directives attached to a table column.

A column carries at most one constraint.  Constraints are plain immutable
values; all behaviour lives in :mod:`pi.table.arrangement`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


# ---------------------------------------------------------------------------
# Constraint variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ContentWidth:
    """Column width equals its natural content width."""


@dataclass(frozen=True)
class Width:
    """Column width (padding included) is fixed to *width*."""

    width: int


@dataclass(frozen=True)
class MinWidth:
    """Column is at least *width* columns wide (padding included)."""

    width: int


@dataclass(frozen=True)
class MaxWidth:
    """Column is at most *width* columns wide (padding included)."""

    width: int


@dataclass(frozen=True)
class Percentage:
    """Column takes *percent* % of the total table width."""

    percent: int


@dataclass(frozen=True)
class MinPercentage:
    """Column takes at least *percent* % of the total table width."""

    percent: int


@dataclass(frozen=True)
class MaxPercentage:
    """Column takes at most *percent* % of the total table width."""

    percent: int


@dataclass(frozen=True)
class Hidden:
    """Column is not displayed and takes no space."""


AbsoluteWidth = Width

ColumnConstraint = Union[
    ContentWidth,
    Width,
    MinWidth,
    MaxWidth,
    Percentage,
    MinPercentage,
    MaxPercentage,
    Hidden,
]

_CONSTRAINT_TYPES = (
    ContentWidth,
    Width,
    MinWidth,
    MaxWidth,
    Percentage,
    MinPercentage,
    MaxPercentage,
    Hidden,
)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def _parse_amount(text: str, original: object) -> tuple[int, bool]:
    """Parse ``"12"`` or ``"50%"`` into ``(value, is_percentage)``."""
    text = text.strip()
    is_percentage = text.endswith("%")
    if is_percentage:
        text = text[:-1].strip()
    try:
        value = int(text)
    except ValueError:
        raise ValueError(f"Invalid column constraint {original!r}") from None
    if value < 0:
        raise ValueError(f"Column constraint must not be negative: {original!r}")
    return value, is_percentage


def parse_constraint(value: ColumnConstraint | int | str | None) -> ColumnConstraint | None:
    """Resolve a configuration value into a constraint.

    * ``None`` / ``""`` -> ``None``
    * constraint instance -> returned as-is
    * ``12`` or ``"12"`` -> ``Width(12)``
    * ``"50%"``          -> ``Percentage(50)``
    * ``"min:8"`` / ``"max:20"``     -> ``MinWidth`` / ``MaxWidth``
    * ``"min:10%"`` / ``"max:50%"``  -> ``MinPercentage`` / ``MaxPercentage``
    * ``"content"`` / ``"hidden"``   -> ``ContentWidth()`` / ``Hidden()``

    Raises ``ValueError`` for anything else.
    """
    if value is None:
        return None
    if isinstance(value, _CONSTRAINT_TYPES):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Invalid column constraint {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"Column constraint must not be negative: {value!r}")
        return Width(value)
    if not isinstance(value, str):
        raise ValueError(f"Invalid column constraint {value!r}")

    text = value.strip().lower()
    if not text:
        return None
    if text == "content":
        return ContentWidth()
    if text == "hidden":
        return Hidden()

    prefix, sep, rest = text.partition(":")
    if sep:
        amount, is_percentage = _parse_amount(rest, value)
        if prefix == "min":
            return MinPercentage(amount) if is_percentage else MinWidth(amount)
        if prefix == "max":
            return MaxPercentage(amount) if is_percentage else MaxWidth(amount)
        raise ValueError(f"Unknown column constraint kind {prefix!r} in {value!r}")

    amount, is_percentage = _parse_amount(text, value)
    return Percentage(amount) if is_percentage else Width(amount)
