"""Shared fixtures: small FARS-shaped accident files written to tmp_path."""

from pathlib import Path

import pandas as pd
import pytest

# (STATE, MONTH, LONGITUD, LATITUDE)
_ROWS_2013 = [
    (1, 1, -86.80, 33.52),
    (1, 1, -86.30, 32.37),
    (1, 2, -87.10, 31.90),
    (2, 3, -149.90, 61.22),
    (4, 7, -112.07, 33.45),
    (4, 7, -110.97, 32.22),
    (4, 12, -111.65, 35.20),
]

_ROWS_2014 = [
    (1, 1, -86.50, 32.50),
    (1, 5, -87.00, 33.00),
    (1, 5, -85.90, 31.80),
    # sentinel longitude: unknown position
    (1, 6, 999.9999, 32.00),
    # sentinel latitude: unknown position
    (1, 6, -86.00, 99.9999),
    (6, 8, -118.24, 34.05),
    (6, 99, -121.49, 38.58),
]

_ROWS_2015 = [
    (1, 3, -86.60, 32.70),
    (4, 4, -112.00, 33.40),
    (56, 10, -104.82, 41.14),
]


def _write_year(directory: Path, year: int, rows) -> Path:
    df = pd.DataFrame(rows, columns=['STATE', 'MONTH', 'LONGITUD', 'LATITUDE'])
    df.insert(0, 'ST_CASE', range(10001, 10001 + len(df)))
    df['FATALS'] = 1
    path = directory / f"accident_{year}.csv.bz2"
    df.to_csv(path, index=False, compression='bz2')
    return path


@pytest.fixture
def fars_dir(tmp_path: Path) -> Path:
    """Directory holding accident files for 2013, 2014 and 2015."""
    data_dir = tmp_path / "extdata"
    data_dir.mkdir()
    _write_year(data_dir, 2013, _ROWS_2013)
    _write_year(data_dir, 2014, _ROWS_2014)
    _write_year(data_dir, 2015, _ROWS_2015)
    return data_dir


@pytest.fixture
def frame_2014() -> pd.DataFrame:
    """The 2014 rows as an in-memory DataFrame."""
    return pd.DataFrame(_ROWS_2014, columns=['STATE', 'MONTH', 'LONGITUD', 'LATITUDE'])
