"""Ski Run Finder - Longest strictly descending run on a height map.

Movement goes from a cell to an orthogonally adjacent cell of strictly
lower altitude. Runs are ranked by steps, then by total descent.

Modules:
    model: Data structures (Grid, Node, Path, Direction, RouteSummary)
    core: Graph builder, memoized path engine, map file reader
    ui: Plotly height map chart
    cli: Command-line entry point
    app: Streamlit viewer (streamlit run skirun_finder/app.py)

Example:
    from skirun_finder.core import find_longest_run, read_map_file

    best = find_longest_run(read_map_file("map.txt"))
    print(best.steps, best.descent)
"""
