"""Direction - Turn-by-turn compass projection of a Path.

Each step of a run is a single orthogonal move, so exactly one compass
direction describes it. Rows are counted from the southern edge: a step
to a larger y heads North, a step to a smaller y heads South.
"""

from enum import Enum

from skirun_finder.constants import DirectionConfig
from skirun_finder.model.node import Node
from skirun_finder.model.path import Path


class Direction(Enum):
    """Compass direction of one step."""

    NORTH = DirectionConfig.NORTH
    SOUTH = DirectionConfig.SOUTH
    EAST = DirectionConfig.EAST
    WEST = DirectionConfig.WEST

    @property
    def arrow(self) -> str:
        return DirectionConfig.ARROWS[self.value]

    @classmethod
    def between(cls, from_node: Node, to_node: Node) -> "Direction":
        """Direction of the single orthogonal step from_node -> to_node."""
        assert from_node.is_adjacent_to(to_node), f"{from_node} -> {to_node} is not a single step"
        if to_node.y > from_node.y:
            return cls.NORTH
        if to_node.y < from_node.y:
            return cls.SOUTH
        if to_node.x > from_node.x:
            return cls.EAST
        return cls.WEST

    def __str__(self) -> str:
        return self.value


def path_directions(path: Path) -> list[Direction]:
    """One Direction per step of the path (empty for a single-node path)."""
    nodes = path.nodes
    return [Direction.between(nodes[i - 1], nodes[i]) for i in range(1, len(nodes))]
