"""
FARS Accident Record (Functional Core)

Typed view of a single accident row, for callers only.  Neither the
summary nor the map path reads rows through it; both stay on
DataFrames.  ``records_from_frame`` converts a DataFrame returned by
``fars.data.reader.fars_read`` for callers that want named, typed
fields instead of column lookups.

Package Location: src/fars/analysis/records.py
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional

import pandas as pd

from ..utils.coerce import coerce_int
from .states import LATITUDE_SENTINEL, LONGITUDE_SENTINEL

_CORE_COLUMNS = ("STATE", "MONTH", "LONGITUD", "LATITUDE")


@dataclass(frozen=True)
class AccidentRecord:
    """One accident.  Sentinel coordinates are stored as ``None``."""

    state: Optional[int]
    month: Optional[int]
    longitude: Optional[float]
    latitude: Optional[float]
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def has_location(self) -> bool:
        return self.longitude is not None and self.latitude is not None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "AccidentRecord":
        """Build a record from a column → value mapping."""
        return cls(
            state=coerce_int(row.get("STATE")),
            month=coerce_int(row.get("MONTH")),
            longitude=_coordinate(row.get("LONGITUD"), LONGITUDE_SENTINEL),
            latitude=_coordinate(row.get("LATITUDE"), LATITUDE_SENTINEL),
            extra={k: v for k, v in row.items() if k not in _CORE_COLUMNS},
        )


def records_from_frame(df: pd.DataFrame) -> Iterator[AccidentRecord]:
    """Yield an ``AccidentRecord`` per DataFrame row, in row order."""
    for row in df.to_dict(orient="records"):
        yield AccidentRecord.from_row(row)


def _coordinate(value: Any, sentinel: float) -> Optional[float]:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or number > sentinel:
        return None
    return number
