"""Node - One grid cell in the ski graph.

A Node carries its coordinates and the altitude copied from the Grid.
Nodes are created once by build_graph and addressed by their flat
row-major index (y * width + x). They hold no links themselves: the
SkiGraph owns the adjacency lists.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Node:
    """A graph vertex for one grid cell.

    Attributes:
        index: Flat row-major index (y * width + x), identity within its graph
        x: Column
        y: Row
        altitude: Altitude copied from the grid at construction

    Example:
        node = Node(index=5, x=1, y=1, altitude=5)
    """

    index: int
    x: int
    y: int
    altitude: int

    @property
    def xy(self) -> tuple[int, int]:
        """Return (x, y) coordinates."""
        return (self.x, self.y)

    def is_adjacent_to(self, other: "Node") -> bool:
        """True if other is one orthogonal step away."""
        return abs(self.x - other.x) + abs(self.y - other.y) == 1

    def __repr__(self) -> str:
        return f"Node(({self.x}, {self.y}), alt={self.altitude})"
