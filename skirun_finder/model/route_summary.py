"""RouteSummary - Report values for the winning run.

Collects what the CLI and the app show for a best path: steps, descent,
start and end cells, and the turn-by-turn directions.
"""

from dataclasses import dataclass
from typing import Optional

from skirun_finder.model.direction import Direction, path_directions
from skirun_finder.model.path import Path

NO_PATH_MESSAGE = "Failed to find best path"


@dataclass(frozen=True)
class RouteSummary:
    """Summary of a best run.

    Attributes:
        steps: Nodes visited
        descent: Altitude dropped from start to end
        start: (x, y) of the first cell
        end: (x, y) of the last cell
        start_altitude: Altitude at the first cell
        end_altitude: Altitude at the last cell
        directions: One compass direction per step
    """

    steps: int
    descent: int
    start: tuple[int, int]
    end: tuple[int, int]
    start_altitude: int
    end_altitude: int
    directions: tuple[Direction, ...]

    @classmethod
    def from_path(cls, path: Path) -> "RouteSummary":
        return cls(
            steps=path.steps,
            descent=path.descent,
            start=path.head.xy,
            end=path.terminal.xy,
            start_altitude=path.head.altitude,
            end_altitude=path.terminal.altitude,
            directions=tuple(path_directions(path)),
        )

    @property
    def headline(self) -> str:
        return f"Best path has {self.steps} steps with a descent of {self.descent}"

    def report_lines(self) -> list[str]:
        """Lines printed by the CLI: headline, start cell, then one direction per line."""
        x, y = self.start
        lines = [self.headline]
        if self.directions:
            lines.append(f"Starts at {x},{y} and follows these directions:")
            lines.extend(str(direction) for direction in self.directions)
        else:
            lines.append(f"Starts and ends at {x},{y}")
        return lines


def report_lines(path: Optional[Path]) -> list[str]:
    """Report lines for an optional best path."""
    if path is None:
        return [NO_PATH_MESSAGE]
    return RouteSummary.from_path(path).report_lines()
