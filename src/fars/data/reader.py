"""
FARS Data Reader (Imperative Shell)

Locates yearly accident files on disk and loads them into DataFrames.
All file access for the package goes through this module.

Package Location: src/fars/data/reader.py

File convention:
    One bz2-compressed CSV per year named ``accident_<year>.csv.bz2``,
    e.g. ``accident_2014.csv.bz2``.  Files are looked up in the package's
    bundled ``extdata/`` directory unless a ``data_dir`` is supplied.

Year coercion:
    Years arrive as ints, floats or strings.  ``coerce_int`` is total:
    fractional values are truncated toward zero and anything that is not
    numeric maps to ``None``.  A ``None`` year renders as ``NA`` in the
    filename, so the read fails downstream with a normal
    ``FileNotFoundError`` rather than at name construction.
"""

from __future__ import annotations

import logging
import warnings
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

import pandas as pd

from ..utils.coerce import coerce_int

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

FILENAME_TEMPLATE: str = "accident_{}.csv.bz2"
MISSING_YEAR_LABEL: str = "NA"

DEFAULT_DATA_DIR: Path = Path(__file__).resolve().parent.parent / "extdata"

# Columns the pipeline relies on; coerced to numeric on read when present.
_NUMERIC_COLUMNS = ("STATE", "MONTH", "LONGITUD", "LATITUDE")

_YEAR_COLUMNS: List[str] = ["MONTH", "year"]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def make_filename(year: Any) -> str:
    """
    Build the accident file name for *year*.

    Args:
        year: Year as int, float or numeric string.  Fractions are
            truncated; non-numeric input renders as ``NA``.

    Returns:
        File name such as ``'accident_2014.csv.bz2'``.
    """
    year_int = coerce_int(year)
    label = MISSING_YEAR_LABEL if year_int is None else str(year_int)
    return FILENAME_TEMPLATE.format(label)


def fars_read(
    filename: Union[str, Path],
    data_dir: Optional[Union[str, Path]] = None,
    quiet: bool = True,
) -> pd.DataFrame:
    """
    Read one accident file into a DataFrame.

    Args:
        filename: Bare file name (looked up in *data_dir*) or a path
            with a directory part, used as given.
        data_dir: Directory holding the yearly files.  Defaults to the
            bundled ``extdata/`` directory.
        quiet: When ``True``, pandas parser warnings raised during this
            read are suppressed.

    Returns:
        DataFrame with one row per accident.  STATE, MONTH, LONGITUD and
        LATITUDE are numeric when present.

    Raises:
        FileNotFoundError: If the file cannot be found.
    """
    path = _resolve_path(filename, data_dir)
    if not path.is_file():
        raise FileNotFoundError(f"file '{filename}' does not exist")

    if quiet:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", pd.errors.DtypeWarning)
            warnings.simplefilter("ignore", pd.errors.ParserWarning)
            df = pd.read_csv(path, compression="infer")
    else:
        df = pd.read_csv(path, compression="infer")

    for col in _NUMERIC_COLUMNS:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")

    logger.debug(
        f"Read {len(df)} rows from {path.name}",
        extra={"data_file": str(filename), "rows": len(df)},
    )
    return df


def fars_read_years(
    years: Union[Any, Iterable[Any]],
    data_dir: Optional[Union[str, Path]] = None,
) -> List[Optional[pd.DataFrame]]:
    """
    Load the MONTH column of several yearly files, tagged with their year.

    Each year is handled on its own: a year whose file is missing or
    unreadable logs an ``invalid year`` warning and contributes ``None``
    at its position instead of aborting the whole call.

    Args:
        years: A single year or an iterable of years.
        data_dir: Directory holding the yearly files.

    Returns:
        List aligned with *years*.  Each entry is a DataFrame with columns
        ``[MONTH, year]`` or ``None`` for an invalid year.
    """
    tables: List[Optional[pd.DataFrame]] = []
    for year in as_year_list(years):
        filename = make_filename(year)
        try:
            df = fars_read(filename, data_dir=data_dir)
            df = df.assign(year=coerce_int(year))
            tables.append(df[_YEAR_COLUMNS].copy())
        except Exception as exc:
            logger.warning(
                f"invalid year: {year}",
                extra={"year": str(year), "data_file": filename, "error": str(exc)},
            )
            tables.append(None)
    return tables


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _resolve_path(
    filename: Union[str, Path],
    data_dir: Optional[Union[str, Path]],
) -> Path:
    """
    Locate *filename*.

    A path with a directory part is used as given.  A bare name is joined
    onto *data_dir* when one is passed; otherwise a file of that name in
    the working directory is used, falling back to ``DEFAULT_DATA_DIR``.
    """
    candidate = Path(filename)
    if candidate.is_absolute() or candidate.parent != Path("."):
        return candidate
    if data_dir is not None:
        return Path(data_dir) / candidate
    if candidate.is_file():
        return candidate
    return DEFAULT_DATA_DIR / candidate


def as_year_list(years: Union[Any, Iterable[Any]]) -> List[Any]:
    # Strings are iterable but mean a single year here.
    if isinstance(years, (str, bytes)) or not isinstance(years, Iterable):
        return [years]
    return list(years)
