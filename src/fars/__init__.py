"""
FARS - Fatality Analysis Reporting System accident reports

Reads yearly US traffic-fatality files, summarises accidents per month
across years and maps accident locations for a state, using the
Functional Core, Imperative Shell architecture.

Structure:
- data/     : Imperative Shell (file I/O)
- analysis/ : Functional Core (pure transformations)
- plotting/ : (plotting functions)
- reports/  : Orchestration and the public entry points
"""

from .analysis.states import InvalidStateError
from .analysis.summary import EmptySummaryError
from .reports.generators import (
    ReportGenerator,
    fars_map_state,
    fars_summarize_years,
)

__version__ = "0.1.0"

__all__ = [
    'fars_summarize_years',
    'fars_map_state',
    'ReportGenerator',
    'EmptySummaryError',
    'InvalidStateError',
]
