"""Path engine - best descending run from every node, and the global best.

Algorithm (memoized depth-first search over the DAG):
1. A node whose best path is memoized returns it immediately.
2. Otherwise every neighbour is evaluated first, then each candidate
   [node] + best_path(neighbour) is ranked with compare_paths.
3. The greatest candidate wins; the first neighbour in builder order keeps
   exact ties. A node without neighbours is its own single-node run.
4. The winner is written once into the node's memo slot.

The depth-first walk uses an explicit work stack, so a monotone chain as
long as the whole grid does not hit Python's recursion limit. Every node
is evaluated exactly once, so total work is O(nodes + edges).
"""

import logging
import time
from typing import Iterator, Optional

from skirun_finder.core.graph_builder import SkiGraph, build_graph
from skirun_finder.model.grid import Grid
from skirun_finder.model.node import Node
from skirun_finder.model.path import Path, is_better_path

logger = logging.getLogger(__name__)


class PathMemo:
    """Write-once slots holding each node's best Path, indexed like the nodes."""

    def __init__(self, size: int) -> None:
        self._slots: list[Optional[Path]] = [None] * size
        self._filled = 0

    def get(self, index: int) -> Optional[Path]:
        return self._slots[index]

    def __contains__(self, index: int) -> bool:
        return self._slots[index] is not None

    def store(self, index: int, path: Path) -> None:
        """Fill a slot.

        Raises:
            RuntimeError: If the slot already holds a path.
        """
        if self._slots[index] is not None:
            raise RuntimeError(f"Best path for node {index} is already memoized")
        self._slots[index] = path
        self._filled += 1

    def __len__(self) -> int:
        """Number of filled slots."""
        return self._filled


class PathEngine:
    """Computes and caches best descending runs on one SkiGraph.

    Example:
        engine = PathEngine(build_graph(grid))
        best = engine.find_best_path()
        print(best.steps, best.descent)
    """

    def __init__(self, graph: SkiGraph) -> None:
        self._graph = graph
        self._memo = PathMemo(len(graph))

    @property
    def graph(self) -> SkiGraph:
        return self._graph

    @property
    def memo(self) -> PathMemo:
        return self._memo

    def best_path_from(self, node: Node) -> Path:
        """Best descending run starting at node."""
        cached = self._memo.get(node.index)
        if cached is not None:
            return cached

        self._evaluate(node.index)
        path = self._memo.get(node.index)
        assert path is not None
        return path

    def best_paths(self) -> Iterator[Path]:
        """Best run of every node, in row-major order."""
        for node in self._graph:
            yield self.best_path_from(node)

    def find_best_path(self) -> Optional[Path]:
        """Scan all nodes row-major and return the greatest run.

        The first node seen keeps exact ties.

        Returns:
            Best Path, or None if the graph has no nodes.
        """
        start_time = time.time()
        best: Optional[Path] = None
        for path in self.best_paths():
            if is_better_path(path, best):
                best = path

        elapsed = time.time() - start_time
        if best is None:
            logger.warning("Empty grid - no path to find")
        else:
            logger.info(
                f"Best path from {best.head.xy}: {best.steps} steps, descent {best.descent} "
                f"({len(self._memo)} nodes evaluated in {elapsed:.2f}s)"
            )
        return best

    def _evaluate(self, root: int) -> None:
        """Fill memo slots for root and everything reachable from it, children first."""
        graph = self._graph
        memo = self._memo
        # (index, expanded): expanded entries are ready once their children are memoized
        stack: list[tuple[int, bool]] = [(root, False)]
        while stack:
            index, expanded = stack.pop()
            if index in memo:
                continue
            if expanded:
                memo.store(index, self._select_best(index))
                continue

            stack.append((index, True))
            # Reversed so the first neighbour in search order is evaluated first
            for child in reversed(graph.neighbor_indices(index)):
                if child not in memo:
                    stack.append((child, False))

    def _select_best(self, index: int) -> Path:
        """Pick the best candidate run for a node whose neighbours are all memoized."""
        node = self._graph.node(index)
        best: Optional[Path] = None
        for child in self._graph.neighbor_indices(index):
            child_path = self._memo.get(child)
            assert child_path is not None, f"Neighbour {child} of node {index} evaluated out of order"
            candidate = child_path.extended_from(node)
            if is_better_path(candidate, best):
                best = candidate

        if best is None:
            return Path(head=node)
        return best


def find_longest_run(grid: Grid) -> Optional[Path]:
    """Build the graph for grid and return its best descending run."""
    return PathEngine(build_graph(grid)).find_best_path()
