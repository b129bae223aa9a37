"""
FARS Reports Package (Imperative Shell)

Orchestrates file reads, core transforms and figure building.
No analysis logic lives here; this package calls the functional core
(src/fars/analysis/) and plotting (src/fars/plotting/) via the data
reader (src/fars/data/reader.py).

Modules:
    generators: ReportGenerator class plus the fars_summarize_years()
                and fars_map_state() convenience functions.
"""

from .generators import (
    ReportGenerator,
    fars_summarize_years,
    fars_map_state,
)

__all__ = [
    'ReportGenerator',
    'fars_summarize_years',
    'fars_map_state',
]
