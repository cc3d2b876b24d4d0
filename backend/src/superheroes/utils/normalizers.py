"""Boundary normalization for hero identifiers and powerstat values.

Identifiers and stat values arrive loosely typed: ids may be ints or strings
from a URL, and stat values in the dataset may be missing, numeric strings or
junk like "null". Everything is normalized here once so the comparison code
only ever sees numbers.
"""

import math
from typing import Any


def normalize_hero_id(value: Any) -> int | None:
    """Normalize a hero identifier to an int.

    Args:
        value: Identifier as int or string (e.g. 1, "1", " 42 ")

    Returns:
        The integer id, or None if the value is not a whole number

    Examples:
        >>> normalize_hero_id("1")
        1
        >>> normalize_hero_id(7)
        7
        >>> normalize_hero_id("abc")
        None
        >>> normalize_hero_id("1.5")
        None
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return int(value)
        return None

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            return None

    return None


def normalize_stat_value(value: Any) -> int | float:
    """Coerce a raw powerstat value to a number.

    Missing and non-numeric values become 0. Numeric strings are parsed, and
    whole floats are returned as ints so "38" and 38.0 both become 38.
    """
    if value is None or isinstance(value, bool):
        return 0

    if isinstance(value, int):
        return value

    if isinstance(value, str):
        text = value.strip()
        try:
            value = float(text)
        except ValueError:
            return 0

    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        return int(value) if value.is_integer() else value

    return 0
