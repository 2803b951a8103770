"""Core graph and search classes.

This module provides the longest-descent engine and its input reader:
- build_graph / SkiGraph: Grid -> descending-move DAG
- PathEngine: Memoized best run per node and the global best run
- find_longest_run: Grid -> best Path in one call
- parse_map / read_map_file: Text map format -> Grid
"""

from skirun_finder.core.graph_builder import SkiGraph, build_graph
from skirun_finder.core.map_reader import MapParseError, decode_map_bytes, parse_map, read_map_file
from skirun_finder.core.path_engine import PathEngine, PathMemo, find_longest_run

__all__ = [
    # Graph builder
    "SkiGraph",
    "build_graph",
    # Path engine
    "PathEngine",
    "PathMemo",
    "find_longest_run",
    # Map reader
    "MapParseError",
    "decode_map_bytes",
    "parse_map",
    "read_map_file",
]
