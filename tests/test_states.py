import math

import pandas as pd
import pytest

from fars.analysis.records import AccidentRecord, records_from_frame
from fars.analysis.states import (
    InvalidStateError,
    coordinate_ranges,
    sanitize_coordinates,
    select_state,
)


# ---------------------------------------------------------------------------
# select_state
# ---------------------------------------------------------------------------

def test_select_state_filters_rows(frame_2014):
    out = select_state(frame_2014, 6)
    assert len(out) == 2
    assert (out["STATE"] == 6).all()


def test_select_state_coerces_state_num(frame_2014):
    assert len(select_state(frame_2014, "1")) == 5
    assert len(select_state(frame_2014, 1.6)) == 5


def test_select_state_unknown_code(frame_2014):
    with pytest.raises(InvalidStateError, match="invalid STATE number: 75") as info:
        select_state(frame_2014, 75)
    assert info.value.state_num == 75


def test_select_state_non_numeric_code(frame_2014):
    with pytest.raises(InvalidStateError):
        select_state(frame_2014, "Alabama")


def test_select_state_requires_state_column():
    with pytest.raises(ValueError, match="STATE"):
        select_state(pd.DataFrame({"MONTH": [1]}), 1)


# ---------------------------------------------------------------------------
# sanitize_coordinates / coordinate_ranges
# ---------------------------------------------------------------------------

def test_sanitize_replaces_sentinels_independently(frame_2014):
    out = sanitize_coordinates(frame_2014)

    lon_sentinel = out.iloc[3]
    lat_sentinel = out.iloc[4]
    assert math.isnan(lon_sentinel["LONGITUD"])
    assert lon_sentinel["LATITUDE"] == 32.0
    assert math.isnan(lat_sentinel["LATITUDE"])
    assert lat_sentinel["LONGITUD"] == -86.0


def test_sanitize_does_not_mutate_input(frame_2014):
    sanitize_coordinates(frame_2014)
    assert frame_2014.iloc[3]["LONGITUD"] > 900


def test_sanitize_keeps_boundary_values():
    df = pd.DataFrame({"LONGITUD": [900.0], "LATITUDE": [90.0]})
    out = sanitize_coordinates(df)
    assert out.iloc[0]["LONGITUD"] == 900.0
    assert out.iloc[0]["LATITUDE"] == 90.0


def test_coordinate_ranges_ignore_nan(frame_2014):
    lon_range, lat_range = coordinate_ranges(
        sanitize_coordinates(select_state(frame_2014, 1))
    )
    assert lon_range == (-87.0, -85.9)
    assert lat_range == (31.8, 33.0)


def test_coordinate_ranges_all_missing():
    df = pd.DataFrame({"LONGITUD": [float("nan")], "LATITUDE": [45.0]})
    assert coordinate_ranges(df) == (None, (45.0, 45.0))


# ---------------------------------------------------------------------------
# AccidentRecord
# ---------------------------------------------------------------------------

def test_records_from_frame_typed_fields(frame_2014):
    frame = frame_2014.assign(FATALS=1)
    records = list(records_from_frame(frame))

    assert len(records) == len(frame)
    first = records[0]
    assert first == AccidentRecord(
        state=1, month=1, longitude=-86.5, latitude=32.5, extra={"FATALS": 1}
    )
    assert first.has_location


def test_records_sentinels_become_none(frame_2014):
    records = list(records_from_frame(frame_2014))

    assert records[3].longitude is None
    assert records[3].latitude == 32.0
    assert records[4].latitude is None
    assert not records[3].has_location
    assert not records[4].has_location
