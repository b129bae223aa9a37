"""
FARS Report Generator (Imperative Shell)

Thin orchestration layer: builds file names, calls reader.py to load
DataFrames, calls the functional core to aggregate / filter and the
plotting functions to build figures, and optionally writes results.

No parsing or aggregation logic lives here.

Package Location: src/fars/reports/generators.py

Usage::

    from pathlib import Path
    from fars.reports.generators import ReportGenerator

    gen = ReportGenerator(
        data_dir=Path("data/fars"),
        output_dir=Path("reports/fars"),
    )
    gen.summarize_years([2013, 2014, 2015])
    gen.map_state(1, 2014)
    # Writes:
    #   reports/fars/accident_summary_2013-2015.csv
    #   reports/fars/accident_map_1_2014.html
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Union

import pandas as pd
import plotly.graph_objects as go

from ..analysis.states import sanitize_coordinates, select_state
from ..analysis.summary import EmptySummaryError, summarize_months
from ..data import reader
from ..plotting.state_map import plot_state_map
from ..utils.coerce import coerce_int

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ReportGenerator:
    """
    Produces monthly summaries and state maps from one FARS data directory.

    Args:
        data_dir: Directory holding ``accident_<year>.csv.bz2`` files.
            Defaults to the package's bundled ``extdata/`` directory.
        output_dir: When set, every result is also written here (CSV for
            summaries, HTML for maps).  Created on first write.
    """

    def __init__(
        self,
        data_dir: Optional[PathLike] = None,
        output_dir: Optional[PathLike] = None,
    ) -> None:
        self.data_dir = Path(data_dir) if data_dir is not None else None
        self.output_dir = Path(output_dir) if output_dir is not None else None

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def summarize_years(self, years: Union[Any, Iterable[Any]]) -> pd.DataFrame:
        """
        Count accidents per month for each requested year.

        Years whose file is missing or unreadable are skipped with an
        ``invalid year`` warning.

        Args:
            years: A single year or an iterable of years.

        Returns:
            DataFrame indexed by ``MONTH`` (1–12), one integer column per
            valid year in ascending order.

        Raises:
            EmptySummaryError: If none of the requested years could be read.
        """
        year_list = reader.as_year_list(years)
        tables = reader.fars_read_years(year_list, data_dir=self.data_dir)

        try:
            matrix = summarize_months(tables)
        except EmptySummaryError as exc:
            raise EmptySummaryError(
                f"no accident data for years {year_list}: {exc}"
            ) from exc

        if self.output_dir is not None:
            cols = list(matrix.columns)
            out_path = self._output_path(
                f"accident_summary_{cols[0]}-{cols[-1]}.csv"
            )
            matrix.to_csv(out_path)
            logger.info(f"Summary saved → {out_path}")

        return matrix

    def map_state(self, state_num: Any, year: Any) -> Optional[go.Figure]:
        """
        Map the accident locations of one state for one year.

        Args:
            state_num: FARS state code.
            year: Data year.

        Returns:
            The figure, or ``None`` when the state has no accidents to plot.

        Raises:
            FileNotFoundError: If the year's file does not exist.
            InvalidStateError: If *state_num* does not occur in that year.
        """
        filename = reader.make_filename(year)
        data = reader.fars_read(filename, data_dir=self.data_dir)

        df_state = select_state(data, state_num)
        if df_state.empty:
            logger.info(
                "no accidents to plot",
                extra={"state": str(state_num), "year": str(year)},
            )
            return None

        df_state = sanitize_coordinates(df_state)
        state = coerce_int(state_num)
        year_int = coerce_int(year)
        fig = plot_state_map(df_state, state_num=state, year=year_int)

        if self.output_dir is not None:
            out_path = self._output_path(f"accident_map_{state}_{year_int}.html")
            fig.write_html(str(out_path))
            logger.info(f"Map saved → {out_path}")

        return fig

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _output_path(self, name: str) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        return self.output_dir / name


# ---------------------------------------------------------------------------
# Convenience entry-points
# ---------------------------------------------------------------------------

def fars_summarize_years(
    years: Union[Any, Iterable[Any]],
    data_dir: Optional[PathLike] = None,
) -> pd.DataFrame:
    """
    Convenience function: monthly accident counts for *years*.

    Example::

        from fars import fars_summarize_years

        fars_summarize_years([2013, 2014], data_dir="data/fars")
    """
    return ReportGenerator(data_dir=data_dir).summarize_years(years)


def fars_map_state(
    state_num: Any,
    year: Any,
    data_dir: Optional[PathLike] = None,
    output_path: Optional[PathLike] = None,
) -> Optional[go.Figure]:
    """
    Convenience function: map one state's accidents for one year.

    When *output_path* is given the figure is also written there as HTML.

    Example::

        from fars import fars_map_state

        fig = fars_map_state(1, 2014, data_dir="data/fars")
        fig.show()
    """
    fig = ReportGenerator(data_dir=data_dir).map_state(state_num, year)
    if fig is not None and output_path is not None:
        out_path = Path(output_path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        fig.write_html(str(out_path))
        logger.info(f"Map saved → {out_path}")
    return fig
