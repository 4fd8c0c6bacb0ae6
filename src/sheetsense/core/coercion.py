"""Cell classification and coercion shared by every analysis module.

Cells are native Python values (None, bool, int/float, str, dict/list).
All numeric and text interpretation of a cell goes through this module so
that type inference, statistics, correlation, aggregation and text analytics
agree on what a number is.
"""

from __future__ import annotations

import json
import math
import numbers
import re
from typing import Any

from sheetsense.core.models.base import CellKind

# ASCII decimal or scientific literal, or an explicit infinity. Hex, octal and
# binary literals are not numbers here.
_NUMERIC_LITERAL = re.compile(
    r"^[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|Infinity)$",
)

UNKNOWN_KEY = "Unknown"


def classify_cell(value: Any) -> CellKind:
    """Tag a cell value.

    Empty or whitespace-only strings and float NaN count as null.
    """
    if value is None:
        return CellKind.NULL
    if isinstance(value, bool):
        return CellKind.BOOLEAN
    if isinstance(value, numbers.Real):
        if math.isnan(value):
            return CellKind.NULL
        return CellKind.NUMBER
    if isinstance(value, str):
        return CellKind.TEXT if value.strip() else CellKind.NULL
    if isinstance(value, dict | list | tuple):
        return CellKind.NESTED
    return CellKind.TEXT


def is_blank(value: Any) -> bool:
    """Check whether a cell is null for analysis purposes."""
    return classify_cell(value) is CellKind.NULL


def parse_number(value: Any) -> float | None:
    """Interpret a cell as a number using the permissive numeric test.

    Only ASCII digits count; hex literals such as ``"0x1A"`` are text.

    Args:
        value: Cell value

    Returns:
        The number, or None when the cell is not numeric
    """
    kind = classify_cell(value)
    if kind is CellKind.BOOLEAN:
        return 1.0 if value else 0.0
    if kind is CellKind.NUMBER:
        return float(value)
    if kind is CellKind.TEXT and isinstance(value, str):
        text = value.strip()
        if not _NUMERIC_LITERAL.match(text):
            return None
        if text.endswith("Infinity"):
            return -math.inf if text.startswith("-") else math.inf
        return float(text)
    return None


def is_numeric(value: Any) -> bool:
    """Check whether a cell passes the numeric test."""
    return parse_number(value) is not None


def coerce_number(value: Any) -> float:
    """Lenient numeric coercion: anything that is not a number becomes 0."""
    number = parse_number(value)
    return 0.0 if number is None else number


def to_text(value: Any) -> str:
    """Render a cell as display text.

    None becomes the empty string; integral floats drop the fractional part.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if math.isinf(value):
            return "-Infinity" if value < 0 else "Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, dict | list | tuple):
        return json.dumps(value, ensure_ascii=False, default=str)
    return str(value)


def partition_key(value: Any) -> str:
    """Text key used to group rows; null and empty cells share ``"Unknown"``."""
    return to_text(value) or UNKNOWN_KEY
