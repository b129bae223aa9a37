"""Centralized numeric coercion for years and state codes."""

import math
from typing import Any, Optional


def coerce_int(value: Any) -> Optional[int]:
    """Convert *value* to an ``int``, or ``None`` when it is not numeric.

    Floats and numeric strings are truncated toward zero.  ``bool``,
    NaN, infinities and unparsable strings all yield ``None``.

    Args:
        value: Year or state code as int, float or string.

    Returns:
        The truncated integer, or ``None``.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return int(number)
