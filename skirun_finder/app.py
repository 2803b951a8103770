"""Ski Run Finder - Streamlit height map viewer.

Paste or upload a map, see the longest descending run, its metrics, the
height map with the run drawn on it and the turn-by-turn directions.

Run: streamlit run skirun_finder/app.py
"""

import logging
from typing import Optional

import streamlit as st

from skirun_finder.constants import AppConfig, ChartConfig, LogConfig
from skirun_finder.core.graph_builder import build_graph
from skirun_finder.core.map_reader import MapParseError, decode_map_bytes, parse_map
from skirun_finder.core.path_engine import PathEngine
from skirun_finder.model.grid import Grid
from skirun_finder.model.path import Path
from skirun_finder.model.route_summary import NO_PATH_MESSAGE, RouteSummary
from skirun_finder.ui.grid_chart import GridChart

logging.basicConfig(level=LogConfig.DEFAULT_LEVEL, format=LogConfig.FORMAT)
logger = logging.getLogger(__name__)


# =============================================================================
# COMPUTATION
# =============================================================================


@st.cache_resource(show_spinner=False)
def solve(map_text: str) -> tuple[Grid, Optional[Path]]:
    """Parse map text and find its best run (cached per map text)."""
    grid = parse_map(map_text)
    best = PathEngine(build_graph(grid)).find_best_path()
    return grid, best


def read_map_input() -> str:
    """Map text from an uploaded file, or from the text area."""
    uploaded = st.sidebar.file_uploader("Upload map file", type=["txt"])
    text = st.sidebar.text_area(
        "Map (WIDTH HEIGHT, then one row of altitudes per line)",
        value=AppConfig.SAMPLE_MAP,
        height=AppConfig.MAP_INPUT_HEIGHT,
    )
    if uploaded is not None:
        return decode_map_bytes(uploaded.getvalue())
    return text


# =============================================================================
# RENDERING
# =============================================================================


def render_summary(summary: RouteSummary) -> None:
    col_steps, col_descent, col_start, col_end = st.columns(4)
    col_steps.metric("Steps", summary.steps)
    col_descent.metric("Descent", summary.descent)
    col_start.metric("Start", f"{summary.start[0]},{summary.start[1]}")
    col_end.metric("End", f"{summary.end[0]},{summary.end[1]}")


def render_directions(summary: RouteSummary) -> None:
    st.subheader("Directions")
    if not summary.directions:
        st.info("The best run is a single cell - nowhere lower to go.")
        return
    st.text("\n".join(f"{i}. {d.arrow} {d}" for i, d in enumerate(summary.directions, start=1)))


# =============================================================================
# MAIN
# =============================================================================


def main() -> None:
    """Application entry point."""
    st.set_page_config(page_title=AppConfig.TITLE, page_icon=AppConfig.ICON, layout=AppConfig.LAYOUT)
    st.title(AppConfig.TITLE)

    try:
        grid, best = solve(read_map_input())
    except MapParseError as e:
        logger.warning(f"Map rejected: {e}")
        st.error(f"Parse error: {e}")
        return

    if best is None:
        st.warning(NO_PATH_MESSAGE)
        return

    summary = RouteSummary.from_path(best)
    st.subheader(summary.headline)
    render_summary(summary)

    col_map, col_dirs = st.columns([3, 1])
    with col_map:
        chart = GridChart(width=ChartConfig.APP_HEIGHT, height=ChartConfig.APP_HEIGHT)
        st.plotly_chart(chart.render(grid=grid, path=best), key="height_map")
    with col_dirs:
        render_directions(summary)


if __name__ == "__main__":
    main()
