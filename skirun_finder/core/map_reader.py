"""Map reader - parses the text map format into a Grid.

Format:
    line 1:        WIDTH HEIGHT
    next HEIGHT:   WIDTH whitespace-separated integer altitudes

Blank lines inside the grid and extra non-blank lines after it are
rejected. Trailing blank lines are ignored. Error messages carry 1-based
line numbers.
"""

import logging
from pathlib import Path
from typing import Union

import numpy as np

from skirun_finder.constants import GraphConfig, MapFileConfig
from skirun_finder.model.grid import Grid

logger = logging.getLogger(__name__)


class MapParseError(ValueError):
    """Raised when map text does not follow the map file format."""


def _parse_int(token: str, what: str) -> int:
    try:
        value = int(token)
    except ValueError:
        raise MapParseError(f"Unable to parse {what} ({token})") from None
    limits = np.iinfo(GraphConfig.ALTITUDE_DTYPE)
    if not limits.min <= value <= limits.max:
        raise MapParseError(f"Unable to parse {what} ({token}): outside {limits.min}..{limits.max}")
    return value


def decode_map_bytes(data: bytes) -> str:
    """Decode raw map file contents.

    Raises:
        MapParseError: If the bytes are not valid map text.
    """
    try:
        return data.decode(MapFileConfig.ENCODING)
    except UnicodeDecodeError as e:
        raise MapParseError(f"Map file is not valid {MapFileConfig.ENCODING} text: {e.reason} at byte {e.start}") from None


def parse_map(text: str) -> Grid:
    """Parse map text into a Grid.

    Args:
        text: Full map file contents

    Returns:
        Grid with the parsed altitudes.

    Raises:
        MapParseError: If the header or any altitude line is malformed.
    """
    lines = text.splitlines()
    if not lines or not lines[0].strip():
        raise MapParseError("Line 1 is empty")

    header = lines[0].split()
    if len(header) != MapFileConfig.HEADER_FIELDS:
        raise MapParseError("Unable to parse width and height of map")
    width = _parse_int(header[0], "grid width")
    height = _parse_int(header[1], "grid height")
    if width < 0 or height < 0:
        raise MapParseError(f"Grid size must not be negative ({width} x {height})")

    altitudes = np.empty((height, width), dtype=GraphConfig.ALTITUDE_DTYPE)
    # A zero-width map has no altitude lines at all
    row_count = height if width else 0
    for y in range(row_count):
        line_number = y + 2
        if line_number > len(lines):
            raise MapParseError(f"Failed to read expected number of lines: expected {row_count + 1}, got {len(lines)}")

        line = lines[line_number - 1]
        if not line.strip():
            raise MapParseError(f"Line {line_number} is empty")

        parts = line.split()
        if len(parts) != width:
            raise MapParseError(f"Line {line_number} does not have {width} altitude values")
        altitudes[y] = [_parse_int(part, f"value {x} on line {line_number}") for x, part in enumerate(parts)]

    trailing = [n for n, line in enumerate(lines[row_count + 1 :], start=row_count + 2) if line.strip()]
    if trailing:
        raise MapParseError(f"Unexpected lines at end of file (first at line {trailing[0]})")

    logger.info(f"Parsed {width}x{height} map")
    return Grid(width=width, height=height, altitudes=altitudes)


def read_map_file(path: Union[str, Path]) -> Grid:
    """Read and parse a map file.

    Raises:
        OSError: If the file cannot be read.
        MapParseError: If the contents are not valid text or are malformed.
    """
    path = Path(path)
    logger.info(f"Reading map file {path}")
    return parse_map(decode_map_bytes(path.read_bytes()))
