"""
FARS Monthly Summary (Functional Core)

Pure functions only. No I/O, no side effects.
Input is the list of per-year ``[MONTH, year]`` tables produced by
``fars.data.reader.fars_read_years``; output is a month × year count
matrix.

Package Location: src/fars/analysis/summary.py

Fill Rule:
    The matrix always has twelve rows, months 1–12 in order.  A month
    with no accidents in a given year is reported as ``0`` rather than
    being left out, so columns for different years line up row for row.
    Month codes outside 1–12 (FARS records unknown months as 99) are
    not counted.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import pandas as pd

MONTHS: List[int] = list(range(1, 13))


class EmptySummaryError(ValueError):
    """Raised when no valid year is left to summarise."""


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def summarize_months(tables: Sequence[Optional[pd.DataFrame]]) -> pd.DataFrame:
    """
    Count accidents per month for each year.

    ``None`` entries (years that failed to load) are skipped.

    Args:
        tables: Per-year DataFrames with columns ``[MONTH, year]``, or
            ``None`` placeholders.

    Returns:
        DataFrame indexed by ``MONTH`` (1–12) with one integer column per
        year, columns in ascending year order.

    Raises:
        EmptySummaryError: If no rows remain after dropping ``None``
            entries.
        ValueError: If a table is missing the ``MONTH`` or ``year`` column.
    """
    present = [t for t in tables if t is not None]
    if not present:
        raise EmptySummaryError("no valid years to summarize")

    for table in present:
        _validate_columns(table, required=["MONTH", "year"])

    combined = pd.concat(present, ignore_index=True)
    if combined.empty:
        raise EmptySummaryError("no accident records to summarize")

    # Columns come from every loaded year, even one with no countable month.
    years = sorted(int(y) for y in combined["year"].dropna().unique())

    combined = combined.dropna(subset=["MONTH"])
    combined = combined.assign(MONTH=combined["MONTH"].astype(int))
    combined = combined[combined["MONTH"].isin(MONTHS)]

    counts = (
        combined.groupby(["year", "MONTH"])
        .size()
        .rename("n")
        .reset_index()
    )

    matrix = (
        counts.pivot(index="MONTH", columns="year", values="n")
        .reindex(index=MONTHS, columns=years)
        .fillna(0)
        .astype(int)
    )
    matrix.index.name = "MONTH"
    matrix.columns.name = "year"
    return matrix


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _validate_columns(df: pd.DataFrame, required: List[str]) -> None:
    """
    Raise ValueError if any required columns are absent.

    Args:
        df: DataFrame to check.
        required: List of column names that must be present.

    Raises:
        ValueError: Listing the missing columns.
    """
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"year table is missing required columns: {missing}")
