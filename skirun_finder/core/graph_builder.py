"""Graph builder - turns a Grid into the descending-move DAG.

One Node per cell, addressed by its flat row-major index. Each node owns a
tuple of neighbour indices: the orthogonally adjacent cells of strictly
lower altitude, tested in GraphConfig.NEIGHBOR_OFFSETS order. Since
altitude strictly drops along every edge the graph has no cycles.

The descent masks are computed with whole-array NumPy comparisons; only
the final adjacency tuples are assembled per node.
"""

import logging
import time
from typing import Iterator

import numpy as np

from skirun_finder.constants import GraphConfig
from skirun_finder.model.grid import Grid
from skirun_finder.model.node import Node

logger = logging.getLogger(__name__)


class SkiGraph:
    """Node arena plus adjacency lists for one Grid.

    Nodes live in a flat list indexed by y * width + x. Neighbour lists hold
    indices into that list, so a node never owns the nodes it points to.

    Example:
        graph = build_graph(Grid.from_rows([[3, 2, 1]]))
        graph.neighbors(graph.node_at(x=1, y=0))  # (Node((2, 0), alt=1),)
    """

    def __init__(self, grid: Grid, nodes: list[Node], neighbor_indices: list[tuple[int, ...]]) -> None:
        assert len(nodes) == grid.size == len(neighbor_indices)
        self._grid = grid
        self._nodes = nodes
        self._neighbor_indices = neighbor_indices

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def nodes(self) -> tuple[Node, ...]:
        """All nodes in row-major order."""
        return tuple(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def node(self, index: int) -> Node:
        assert 0 <= index < len(self._nodes), f"Node index {index} outside graph of {len(self._nodes)} nodes"
        return self._nodes[index]

    def node_at(self, x: int, y: int) -> Node:
        return self._nodes[self._grid.index_of(x, y)]

    def neighbor_indices(self, index: int) -> tuple[int, ...]:
        """Indices of the strictly lower orthogonal neighbours, in search order."""
        assert 0 <= index < len(self._nodes), f"Node index {index} outside graph of {len(self._nodes)} nodes"
        return self._neighbor_indices[index]

    def neighbors(self, node: Node) -> tuple[Node, ...]:
        return tuple(self._nodes[i] for i in self.neighbor_indices(node.index))

    @property
    def edge_count(self) -> int:
        return sum(len(indices) for indices in self._neighbor_indices)

    def edges(self) -> Iterator[tuple[Node, Node]]:
        """Every descending edge as (from_node, to_node)."""
        for node, indices in zip(self._nodes, self._neighbor_indices):
            for i in indices:
                yield node, self._nodes[i]

    def __repr__(self) -> str:
        return f"SkiGraph({self.width}x{self.height}, nodes={len(self)}, edges={self.edge_count})"


def _descent_masks(altitudes: np.ndarray) -> np.ndarray:
    """Boolean masks of shape (len(offsets), height, width).

    masks[k, y, x] is True when the neighbour at offset k exists and is
    strictly lower than cell (x, y).
    """
    height, width = altitudes.shape
    masks = np.zeros((len(GraphConfig.NEIGHBOR_OFFSETS), height, width), dtype=bool)
    for k, (dx, dy) in enumerate(GraphConfig.NEIGHBOR_OFFSETS):
        src_y = slice(max(0, -dy), height - max(0, dy))
        src_x = slice(max(0, -dx), width - max(0, dx))
        dst_y = slice(max(0, dy), height - max(0, -dy))
        dst_x = slice(max(0, dx), width - max(0, -dx))
        masks[k, src_y, src_x] = altitudes[dst_y, dst_x] < altitudes[src_y, src_x]
    return masks


def build_graph(grid: Grid) -> SkiGraph:
    """Build the descending-move graph for a grid.

    Args:
        grid: Altitude grid (may be empty)

    Returns:
        SkiGraph with one node per cell and its descending neighbours.
    """
    start_time = time.time()
    width = grid.width

    nodes = [
        Node(index=index, x=index % width, y=index // width, altitude=altitude)
        for index, altitude in enumerate(grid.altitudes.ravel().tolist())
    ]

    flat_offsets = [dy * width + dx for dx, dy in GraphConfig.NEIGHBOR_OFFSETS]
    # One row of flags per cell, in offset order
    flags_per_cell = _descent_masks(grid.altitudes).reshape(len(flat_offsets), grid.size).T.tolist()
    neighbor_indices = [
        tuple(index + offset for offset, is_lower in zip(flat_offsets, flags) if is_lower)
        for index, flags in enumerate(flags_per_cell)
    ]

    graph = SkiGraph(grid=grid, nodes=nodes, neighbor_indices=neighbor_indices)
    elapsed = time.time() - start_time
    logger.info(f"Built ski graph {grid.width}x{grid.height}: {len(graph)} nodes, {graph.edge_count} edges in {elapsed:.2f}s")
    return graph
