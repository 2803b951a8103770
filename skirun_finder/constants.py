"""Configuration constants for Ski Run Finder.

All configurable parameters are centralized here for easy tuning.

Classes:
    AppConfig: Streamlit viewer settings and the bundled sample map
    LogConfig: Logging format and default level for the entry points
    GraphConfig: Neighbour search order for the graph builder
    MapFileConfig: Map file format details
    DirectionConfig: Compass names used in route directions
    StyleConfig: Heatmap and route colors
    ChartConfig: Chart rendering dimensions
"""

from pathlib import Path

# Package root directory (where skirun_finder/ lives)
PACKAGE_DIR = Path(__file__).parent

# Project root directory (parent of skirun_finder/)
PROJECT_ROOT = PACKAGE_DIR.parent

# Output directory for exported charts
OUTPUT_DIR = PROJECT_ROOT / "output"


class AppConfig:
    """Streamlit viewer settings."""

    TITLE = "Ski Run Finder - Longest Descent on a Height Map"
    ICON = "⛷️"
    LAYOUT = "wide"

    # 4x4 sample: best run is 9-5-3-2-1 (5 steps, descent 8)
    SAMPLE_MAP = "4 4\n4 8 7 3\n2 5 9 3\n6 3 2 5\n4 4 1 6\n"
    MAP_INPUT_HEIGHT = 240


class LogConfig:
    """Logging setup shared by the CLI and the app."""

    FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    DEFAULT_LEVEL = "INFO"
    LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class GraphConfig:
    """Graph builder parameters."""

    # (dx, dy) offsets in the order neighbours are tested: west, east,
    # previous row, next row. The first neighbour wins exact ties.
    NEIGHBOR_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))
    assert len(set(NEIGHBOR_OFFSETS)) == 4
    assert all(abs(dx) + abs(dy) == 1 for dx, dy in NEIGHBOR_OFFSETS)

    # NumPy dtype for altitude storage
    ALTITUDE_DTYPE = "int64"


class MapFileConfig:
    """Text map file format.

    Line 1 holds "WIDTH HEIGHT", followed by HEIGHT lines of WIDTH
    whitespace-separated integer altitudes.
    """

    HEADER_FIELDS = 2
    ENCODING = "utf-8"


class DirectionConfig:
    """Compass names for route directions.

    Rows are counted from the southern edge, so a larger y is further north.
    """

    NORTH = "North"
    SOUTH = "South"
    EAST = "East"
    WEST = "West"

    ARROWS = {
        NORTH: "↑",
        SOUTH: "↓",
        EAST: "→",
        WEST: "←",
    }
    assert set(ARROWS.keys()) == {NORTH, SOUTH, EAST, WEST}


class StyleConfig:
    """Visual colors and styling."""

    # Altitude gradient: lowest blue, middle green, highest red
    ALTITUDE_COLORSCALE = [
        [0.0, "rgb(0, 0, 255)"],
        [0.5, "rgb(0, 255, 0)"],
        [1.0, "rgb(255, 0, 0)"],
    ]
    assert ALTITUDE_COLORSCALE[0][0] == 0.0 and ALTITUDE_COLORSCALE[-1][0] == 1.0

    ROUTE_COLOR = "#F9FAFB"  # gray-50, readable on every colorscale stop
    ROUTE_WIDTH = 3
    START_MARKER_COLOR = "#22C55E"  # green-500
    END_MARKER_COLOR = "#1F2937"  # gray-800
    MARKER_SIZE = 12


class ChartConfig:
    """Chart rendering dimensions and settings."""

    DEFAULT_WIDTH = 800
    DEFAULT_HEIGHT = 800
    APP_HEIGHT = 600

    # Plotly bundle for HTML export ("cdn" keeps files small)
    HTML_PLOTLYJS = "cdn"
    HTML_SUFFIX = ".html"
