"""Data model classes for the ski graph.

- Grid: Immutable altitude matrix (the problem input)
- Node: One grid cell (coordinates + altitude)
- Path: Strictly descending run, ranked by compare_paths
- Direction: Compass projection of a run's steps
- RouteSummary: Report values for the winning run
"""

from skirun_finder.model.direction import Direction, path_directions
from skirun_finder.model.grid import Grid
from skirun_finder.model.node import Node
from skirun_finder.model.path import Path, compare_paths, is_better_path
from skirun_finder.model.route_summary import RouteSummary, report_lines

__all__ = [
    "Grid",
    "Node",
    "Path",
    "compare_paths",
    "is_better_path",
    "Direction",
    "path_directions",
    "RouteSummary",
    "report_lines",
]
