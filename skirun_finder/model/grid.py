"""Grid - Immutable rectangular altitude matrix.

The Grid is the problem input: width x height integer altitudes stored
row-major in a read-only NumPy array. It has no behaviour beyond
bounds-checked lookup.

Used by:
- build_graph (one Node per cell)
- GridChart (heatmap rendering)
- read_map_file / parse_map (produce Grids from text)
"""

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from skirun_finder.constants import GraphConfig


@dataclass(frozen=True, eq=False)
class Grid:
    """An immutable width x height matrix of integer altitudes.

    Attributes:
        width: Number of columns (x axis), >= 0
        height: Number of rows (y axis), >= 0
        altitudes: Read-only int64 array of shape (height, width)

    An empty grid (width or height of 0) is valid and simply has no cells.

    Example:
        grid = Grid(width=3, height=1, altitudes=[3, 2, 1])
        grid.altitude(x=0, y=0)  # 3
    """

    width: int
    height: int
    altitudes: np.ndarray = field(repr=False)

    def __post_init__(self) -> None:
        """Validate dimensions and freeze the altitude array."""
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Grid dimensions must not be negative, got {self.width}x{self.height}")

        data = np.asarray(self.altitudes)
        if data.ndim == 2 and data.shape != (self.height, self.width):
            raise ValueError(
                f"Grid {self.width}x{self.height} needs altitude shape {(self.height, self.width)}, got {data.shape}"
            )
        expected = self.width * self.height
        if data.size != expected:
            raise ValueError(
                f"Grid {self.width}x{self.height} needs {expected} altitudes, got {data.size}"
            )
        if data.size and not np.issubdtype(data.dtype, np.integer):
            raise ValueError(f"Grid altitudes must be integers, got dtype {data.dtype}")

        # Copy so the caller's buffer can't change the grid afterwards
        frozen = np.array(data, dtype=GraphConfig.ALTITUDE_DTYPE).reshape(self.height, self.width)
        frozen.setflags(write=False)
        object.__setattr__(self, "altitudes", frozen)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        """Create a Grid from a list of rows (row 0 first).

        Raises:
            ValueError: If the rows have different lengths.
        """
        height = len(rows)
        width = len(rows[0]) if height else 0
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {y} has {len(row)} altitudes, expected {width}")
        flat = [altitude for row in rows for altitude in row]
        return cls(width=width, height=height, altitudes=np.asarray(flat))

    @property
    def size(self) -> int:
        """Number of cells."""
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        return self.size == 0

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def index_of(self, x: int, y: int) -> int:
        """Flat row-major index of cell (x, y)."""
        assert self.in_bounds(x, y), f"Cell ({x}, {y}) outside {self.width}x{self.height} grid"
        return y * self.width + x

    def altitude(self, x: int, y: int) -> int:
        """Altitude at cell (x, y).

        Out-of-range coordinates are a programming error, never clamped.
        """
        assert self.in_bounds(x, y), f"Cell ({x}, {y}) outside {self.width}x{self.height} grid"
        return int(self.altitudes[y, x])

    @property
    def max_altitude(self) -> int:
        """Highest altitude on the grid (0 for an empty grid)."""
        return int(self.altitudes.max()) if self.size else 0

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"
