"""
FARS State Selection and Coordinate Sanitisation (Functional Core)

Pure functions only. No I/O, no side effects.
Prepares a single year's accident DataFrame for mapping.

Package Location: src/fars/analysis/states.py

Sentinel Rule:
    FARS encodes unknown coordinates as out-of-range numbers rather than
    blanks.  A LONGITUD above 900 or a LATITUDE above 90 is not a real
    position and is replaced by NaN before any range or point is
    computed.  The two columns are sanitised independently.
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

import numpy as np
import pandas as pd

from ..utils.coerce import coerce_int

# ---------------------------------------------------------------------------
# Sentinel thresholds
# ---------------------------------------------------------------------------

LONGITUDE_SENTINEL: float = 900
LATITUDE_SENTINEL: float = 90

Range = Optional[Tuple[float, float]]


class InvalidStateError(ValueError):
    """Raised when a state number does not occur in the year's data."""

    def __init__(self, state_num: Any):
        self.state_num = state_num
        super().__init__(f"invalid STATE number: {state_num}")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def select_state(df: pd.DataFrame, state_num: Any) -> pd.DataFrame:
    """
    Return the accidents recorded for one state.

    Args:
        df: Full year DataFrame with a ``STATE`` column.
        state_num: FARS state code.  Coerced with ``coerce_int``.

    Returns:
        Filtered copy of *df*.

    Raises:
        InvalidStateError: If the code is not numeric or no row carries it.
        ValueError: If *df* has no ``STATE`` column.
    """
    _validate_columns(df, required=["STATE"])

    state = coerce_int(state_num)
    if state is None or not (df["STATE"] == state).any():
        raise InvalidStateError(state if state is not None else state_num)

    return df.loc[df["STATE"] == state].copy()


def sanitize_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel coordinates with NaN.

    Args:
        df: DataFrame with ``LONGITUD`` and ``LATITUDE`` columns.

    Returns:
        Copy of *df* with out-of-range coordinates set to NaN.
    """
    _validate_columns(df, required=["LONGITUD", "LATITUDE"])

    out = df.copy()
    lon = pd.to_numeric(out["LONGITUD"], errors="coerce")
    lat = pd.to_numeric(out["LATITUDE"], errors="coerce")
    out["LONGITUD"] = lon.where(lon <= LONGITUDE_SENTINEL, np.nan)
    out["LATITUDE"] = lat.where(lat <= LATITUDE_SENTINEL, np.nan)
    return out


def coordinate_ranges(df: pd.DataFrame) -> Tuple[Range, Range]:
    """
    Longitude and latitude extents, each ignoring NaN.

    Returns:
        ``((lon_min, lon_max), (lat_min, lat_max))``.  A column with no
        valid value gives ``None`` in its slot.
    """
    return _range(df["LONGITUD"]), _range(df["LATITUDE"])


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _range(values: pd.Series) -> Range:
    valid = values.dropna()
    if valid.empty:
        return None
    return float(valid.min()), float(valid.max())


def _validate_columns(df: pd.DataFrame, required: List[str]) -> None:
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"accident data is missing required columns: {missing}")
