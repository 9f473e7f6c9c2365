"""
Tolerant numeric parsing helpers.

Definition strings are parsed best-effort: a value that is not a number
becomes NaN instead of aborting the whole parse.
"""

import math
import re
from typing import Any, Union

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_float(value: Any) -> float:
    """
    Parse a value as a float, returning NaN when it cannot be parsed.

    Args:
        value: String (or number) to parse. ``None`` is accepted.

    Returns:
        Parsed float, or ``math.nan``
    """
    if value is None:
        return math.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def parse_int(value: Any) -> Union[int, float]:
    """
    Parse the leading integer of a value ("33N" -> 33).

    Returns ``math.nan`` when no leading integer is present.
    """
    if value is None:
        return math.nan
    match = _LEADING_INT.match(str(value))
    if not match:
        return math.nan
    return int(match.group(1))


def is_nan(value: Any) -> bool:
    """True if value is a float NaN."""
    return isinstance(value, float) and math.isnan(value)
