"""Shared pytest fixtures for skirun_finder tests.

Grids are written as rows of altitudes, origin top-left, addressed (x, y).

SAMPLE MAP (4x4):
    4 8 7 3
    2 5 9 3
    6 3 2 5
    4 4 1 6
Best run: 9-5-3-2-1 from (2, 1), 5 steps, descent 8. The run 8-5-3-2-1 also
has 5 steps but only descent 7, so the descent tie-break decides.
"""

from collections.abc import Callable

import pytest

from skirun_finder.constants import AppConfig
from skirun_finder.core.graph_builder import SkiGraph, build_graph
from skirun_finder.core.path_engine import PathEngine
from skirun_finder.model.grid import Grid

SAMPLE_ROWS = [
    [4, 8, 7, 3],
    [2, 5, 9, 3],
    [6, 3, 2, 5],
    [4, 4, 1, 6],
]


# =============================================================================
# GRID FIXTURES
# =============================================================================


@pytest.fixture
def sample_map_text() -> str:
    """Text of the 4x4 sample map."""
    return AppConfig.SAMPLE_MAP


@pytest.fixture
def sample_grid() -> Grid:
    """The 4x4 sample map as a Grid."""
    return Grid.from_rows(SAMPLE_ROWS)


@pytest.fixture
def sample_graph(sample_grid: Grid) -> SkiGraph:
    return build_graph(sample_grid)


@pytest.fixture
def sample_engine(sample_graph: SkiGraph) -> PathEngine:
    return PathEngine(sample_graph)


@pytest.fixture
def engine_for() -> Callable[[list[list[int]]], PathEngine]:
    """Factory: rows of altitudes -> PathEngine on a freshly built graph."""

    def _make(rows: list[list[int]]) -> PathEngine:
        return PathEngine(build_graph(Grid.from_rows(rows)))

    return _make


@pytest.fixture
def map_file(tmp_path, sample_map_text: str):
    """Sample map written to a temporary file."""
    path = tmp_path / "map.txt"
    path.write_text(sample_map_text, encoding="utf-8")
    return path
