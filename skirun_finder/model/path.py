"""Path - A strictly descending run through the grid.

A Path is an ordered, non-empty sequence of Nodes where every step moves
to an orthogonally adjacent cell of strictly lower altitude.

Paths are stored as a head node followed by the rest of the run (another
Path). The best path of a node is its head plus the best path of one of
its neighbours, so extending a neighbour's run costs O(1) and every
neighbour's result is shared rather than copied.

Ranking is defined once, in compare_paths: more steps wins, then more
descent. Both the per-node search and the global scan use it.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence

from skirun_finder.model.node import Node


@dataclass(frozen=True, eq=False)
class Path:
    """An immutable descending run starting at ``head``.

    Attributes:
        head: First node of the run
        rest: The run continuing from the next node, or None if head is terminal

    Computed Attributes:
        steps: Number of nodes visited (>= 1)
        terminal: Last node of the run
        descent: head altitude minus terminal altitude (>= 0)

    Example:
        low = Path(head=Node(index=1, x=1, y=0, altitude=2))
        run = Path(head=Node(index=0, x=0, y=0, altitude=3), rest=low)
        run.steps, run.descent  # (2, 1)
    """

    head: Node
    rest: Optional["Path"] = None
    steps: int = field(init=False)
    terminal: Node = field(init=False)

    def __post_init__(self) -> None:
        """Check the link to ``rest`` and derive steps and terminal node."""
        if self.rest is None:
            object.__setattr__(self, "steps", 1)
            object.__setattr__(self, "terminal", self.head)
            return

        nxt = self.rest.head
        if not self.head.is_adjacent_to(nxt):
            raise ValueError(f"Path step {self.head} -> {nxt} is not an orthogonal move")
        if nxt.altitude >= self.head.altitude:
            raise ValueError(f"Path step {self.head} -> {nxt} does not strictly descend")

        object.__setattr__(self, "steps", self.rest.steps + 1)
        object.__setattr__(self, "terminal", self.rest.terminal)

    @classmethod
    def from_nodes(cls, nodes: Sequence[Node]) -> "Path":
        """Build a Path from an explicit node sequence (first node first).

        Raises:
            ValueError: If the sequence is empty or breaks the descent rules.
        """
        if not nodes:
            raise ValueError("Path needs at least one node")
        path: Optional[Path] = None
        for node in reversed(nodes):
            path = cls(head=node, rest=path)
        assert path is not None
        return path

    def extended_from(self, node: Node) -> "Path":
        """Return the run that starts at ``node`` and continues with this path."""
        return Path(head=node, rest=self)

    @property
    def descent(self) -> int:
        """Total altitude drop, telescoped from the endpoints."""
        return self.head.altitude - self.terminal.altitude

    def __iter__(self) -> Iterator[Node]:
        path: Optional[Path] = self
        while path is not None:
            yield path.head
            path = path.rest

    def __len__(self) -> int:
        return self.steps

    @property
    def nodes(self) -> tuple[Node, ...]:
        """The full node sequence, first node first."""
        return tuple(self)

    @property
    def coordinates(self) -> list[tuple[int, int]]:
        """(x, y) of every node in order."""
        return [node.xy for node in self]

    def __repr__(self) -> str:
        return f"Path(start={self.head.xy}, end={self.terminal.xy}, steps={self.steps}, descent={self.descent})"


def compare_paths(p: Path, q: Path) -> int:
    """Order two paths: steps first, then descent.

    Returns:
        1 if p ranks above q, -1 if below, 0 if they are interchangeable.
    """
    if p.steps != q.steps:
        return 1 if p.steps > q.steps else -1
    if p.descent != q.descent:
        return 1 if p.descent > q.descent else -1
    return 0


def is_better_path(candidate: Path, incumbent: Optional[Path]) -> bool:
    """True if candidate strictly beats incumbent (ties keep the incumbent)."""
    return incumbent is None or compare_paths(candidate, incumbent) > 0
