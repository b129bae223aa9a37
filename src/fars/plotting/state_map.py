"""
FARS State Accident Map (Functional Core)

Pure function – no file I/O, no side effects.
Input: one state's sanitised accident DataFrame.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Map Extent:
    The geo view is clipped to the longitude/latitude range of the plotted
    points, so the state outline fills the frame.  A row is plotted only
    when both coordinates are valid; a row with either coordinate NaN
    (sentinels removed upstream by ``sanitize_coordinates``) contributes
    neither a point nor a range bound.  A degenerate range (single
    accident) is widened to ``_MIN_SPAN_DEG`` so the view never collapses
    to a point.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import pandas as pd
import plotly.graph_objects as go

from ..analysis.states import coordinate_ranges

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_MIN_SPAN_DEG: float = 0.5

# Whole continental view used when a column has no valid coordinate at all.
_FALLBACK_LON: Tuple[float, float] = (-125.0, -66.0)
_FALLBACK_LAT: Tuple[float, float] = (24.0, 50.0)

_MARKER_STYLE: Dict[str, Any] = {
    'color': 'black',
    'size': 3,
    'symbol': 'circle',
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_map(
    df_state: pd.DataFrame,
    state_num: int,
    year: int,
) -> go.Figure:
    """
    Build a scatter map of accident locations for one state and year.

    Args:
        df_state: Accidents for a single state with columns::

            LONGITUD : float, degrees (NaN when unknown)
            LATITUDE : float, degrees (NaN when unknown)

        state_num: FARS state code, used in the title.
        year: Data year, used in the title.

    Returns:
        ``plotly.graph_objects.Figure`` with one ``Scattergeo`` trace.

    Raises:
        ValueError: If ``df_state`` is missing required columns.
    """
    _validate_columns(df_state, required=['LONGITUD', 'LATITUDE'])

    points = df_state.dropna(subset=['LONGITUD', 'LATITUDE'])
    lon_range, lat_range = coordinate_ranges(points)

    fig = go.Figure()
    fig.add_trace(go.Scattergeo(
        lon=points['LONGITUD'],
        lat=points['LATITUDE'],
        mode='markers',
        marker=dict(_MARKER_STYLE),
        name='Accident',
        showlegend=False,
        hovertemplate=(
            'Lon: %{lon:.4f}<br>'
            'Lat: %{lat:.4f}'
            '<extra></extra>'
        ),
    ))

    fig.update_geos(
        scope='north america',
        projection_type='mercator',
        showsubunits=True,
        subunitcolor='gray',
        showcountries=True,
        countrycolor='gray',
        showland=True,
        landcolor='white',
        lonaxis_range=_padded(lon_range, _FALLBACK_LON),
        lataxis_range=_padded(lat_range, _FALLBACK_LAT),
    )

    fig.update_layout(
        title=dict(
            text=f'FARS Accidents – State {state_num}, {year}',
            x=0.5,
            xanchor='center',
        ),
        template='plotly_white',
        height=600,
        margin=dict(l=20, r=20, t=60, b=20),
    )

    return fig


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _padded(
    value_range: Optional[Tuple[float, float]],
    fallback: Tuple[float, float],
) -> List[float]:
    """Return ``[lo, hi]`` widened to at least ``_MIN_SPAN_DEG``."""
    if value_range is None:
        return list(fallback)
    lo, hi = value_range
    if hi - lo < _MIN_SPAN_DEG:
        mid = (lo + hi) / 2.0
        lo, hi = mid - _MIN_SPAN_DEG / 2.0, mid + _MIN_SPAN_DEG / 2.0
    return [lo, hi]


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
        raise ValueError(
            f"df_state is missing required columns: {missing}"
        )
