"""Command-line entry point.

Reads a map file, finds the longest descending run and prints the
report: steps, descent, start cell and one direction per line.

Run: skirun-finder MAP_FILE [--export-html OUT] [--log-level LEVEL]
"""

import argparse
import logging
from typing import Optional, Sequence

from skirun_finder.constants import LogConfig
from skirun_finder.core.graph_builder import build_graph
from skirun_finder.core.map_reader import MapParseError, read_map_file
from skirun_finder.core.path_engine import PathEngine
from skirun_finder.model.route_summary import report_lines
from skirun_finder.ui.grid_chart import GridChart

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BAD_MAP = 2


def build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser."""
    p = argparse.ArgumentParser(
        prog="skirun-finder",
        description="Find the longest strictly descending ski run on a height map.",
    )
    p.add_argument("map_file", help="Map file: 'WIDTH HEIGHT' header, then HEIGHT rows of WIDTH altitudes")
    p.add_argument(
        "--export-html",
        dest="export_html",
        default=None,
        help="Write the height map with the best run drawn on it to this HTML file",
    )
    p.add_argument(
        "--log-level",
        dest="log_level",
        default=LogConfig.DEFAULT_LEVEL,
        choices=LogConfig.LEVELS,
        help="Logging verbosity (default: %(default)s)",
    )
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI.

    Returns:
        Process exit code (0 on success, 2 if the map cannot be read or parsed).
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LogConfig.FORMAT)

    try:
        grid = read_map_file(args.map_file)
    except OSError as e:
        logger.error(f"Failed to open map file '{args.map_file}': {e}")
        return EXIT_BAD_MAP
    except MapParseError as e:
        logger.error(f"Parse error in '{args.map_file}': {e}")
        return EXIT_BAD_MAP

    engine = PathEngine(build_graph(grid))
    best = engine.find_best_path()

    print("\n".join(report_lines(best)))

    if args.export_html:
        chart = GridChart()
        fig = chart.render(grid=grid, path=best)
        target = chart.export_html(fig=fig, target=args.export_html)
        print(f"Height map written to {target}")

    return EXIT_OK
