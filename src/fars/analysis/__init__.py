"""
FARS Analysis Package (Functional Core)

This package contains pure transformation functions with no I/O.
All functions accept DataFrames and return transformed data.

Modules:
- summary: Month × year accident count matrix
- states:  State selection and coordinate sanitisation
- records: Typed per-accident record view
"""

from .summary import (
    EmptySummaryError,
    summarize_months,
)

from .states import (
    InvalidStateError,
    select_state,
    sanitize_coordinates,
    coordinate_ranges,
)

from .records import (
    AccidentRecord,
    records_from_frame,
)

__all__ = [
    # Summary
    'EmptySummaryError',
    'summarize_months',
    # States
    'InvalidStateError',
    'select_state',
    'sanitize_coordinates',
    'coordinate_ranges',
    # Records
    'AccidentRecord',
    'records_from_frame',
]
