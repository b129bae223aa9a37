"""
FARS Data Package (Imperative Shell)

This package handles all file I/O for the FARS pipeline.

Modules:
- reader: File naming, single-file reads and multi-year loading
"""

from .reader import (
    DEFAULT_DATA_DIR,
    make_filename,
    fars_read,
    fars_read_years,
)

__all__ = [
    'DEFAULT_DATA_DIR',
    'make_filename',
    'fars_read',
    'fars_read_years',
]
