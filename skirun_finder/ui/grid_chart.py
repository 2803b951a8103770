"""GridChart - Plotly height map rendering.

Renders the altitude grid as a heatmap (blue low, green middle, red high,
scaled over 0..max altitude) with origin at the top-left, and optionally
overlays a run as a line with start and end markers.
"""

import logging
from pathlib import Path as FilePath
from typing import Optional, Union

import plotly.graph_objects as go

from skirun_finder.constants import ChartConfig, StyleConfig
from skirun_finder.model.grid import Grid
from skirun_finder.model.path import Path

logger = logging.getLogger(__name__)


class GridChart:
    """Renders height maps and runs using Plotly.

    Example:
        chart = GridChart(width=800, height=800)
        fig = chart.render(grid=grid, path=best)
        chart.export_html(fig=fig, target="run.html")
    """

    def __init__(
        self,
        width: int = ChartConfig.DEFAULT_WIDTH,
        height: int = ChartConfig.DEFAULT_HEIGHT,
    ) -> None:
        """Initialize chart renderer.

        Args:
            width: Chart width in pixels
            height: Chart height in pixels
        """
        self.width = width
        self.height = height

    def render(
        self,
        grid: Grid,
        path: Optional[Path] = None,
        title: Optional[str] = None,
    ) -> go.Figure:
        """Render the height map, with the run drawn on top if given.

        Args:
            grid: Altitude grid
            path: Optional run to overlay
            title: Optional chart title (defaults to a size/run summary)

        Returns:
            Plotly Figure object.
        """
        fig = go.Figure()

        fig.add_trace(
            go.Heatmap(
                z=grid.altitudes,
                colorscale=StyleConfig.ALTITUDE_COLORSCALE,
                zmin=0,
                zmax=max(grid.max_altitude, 1),
                colorbar=dict(title="Altitude"),
                name="Altitude",
                hovertemplate="x: %{x}<br>y: %{y}<br>Altitude: %{z}<extra></extra>",
            )
        )

        if path is not None:
            self._add_route(fig=fig, path=path)

        if title is None:
            title = f"Height map {grid.width}x{grid.height}"
            if path is not None:
                title += f" - best run {path.steps} steps, descent {path.descent}"

        fig.update_layout(
            title=title,
            width=self.width,
            height=self.height,
            showlegend=path is not None,
            xaxis=dict(title="x", constrain="domain"),
            # Row 0 at the top, one cell per unit on both axes
            yaxis=dict(title="y", autorange="reversed", scaleanchor="x"),
        )
        return fig

    def _add_route(self, fig: go.Figure, path: Path) -> None:
        """Overlay the run as a line plus start/end markers."""
        nodes = path.nodes
        xs = [node.x for node in nodes]
        ys = [node.y for node in nodes]
        altitudes = [node.altitude for node in nodes]

        fig.add_trace(
            go.Scatter(
                x=xs,
                y=ys,
                mode="lines+markers",
                line=dict(color=StyleConfig.ROUTE_COLOR, width=StyleConfig.ROUTE_WIDTH),
                marker=dict(color=StyleConfig.ROUTE_COLOR, size=StyleConfig.ROUTE_WIDTH * 2),
                customdata=altitudes,
                name="Best run",
                hovertemplate="(%{x}, %{y})<br>Altitude: %{customdata}<extra></extra>",
            )
        )
        for node, label, color in (
            (path.head, "Start", StyleConfig.START_MARKER_COLOR),
            (path.terminal, "End", StyleConfig.END_MARKER_COLOR),
        ):
            fig.add_trace(
                go.Scatter(
                    x=[node.x],
                    y=[node.y],
                    mode="markers",
                    marker=dict(color=color, size=StyleConfig.MARKER_SIZE, line=dict(color="white", width=1)),
                    name=f"{label} ({node.x}, {node.y}) alt {node.altitude}",
                    hoverinfo="name",
                )
            )

    @staticmethod
    def export_html(fig: go.Figure, target: Union[str, FilePath]) -> FilePath:
        """Write the figure to a standalone HTML file.

        A missing ".html" suffix is appended.

        Returns:
            Path of the written file.
        """
        target = FilePath(target)
        if target.suffix.lower() != ChartConfig.HTML_SUFFIX:
            target = target.with_name(target.name + ChartConfig.HTML_SUFFIX)
        target.parent.mkdir(parents=True, exist_ok=True)
        fig.write_html(str(target), include_plotlyjs=ChartConfig.HTML_PLOTLYJS)
        logger.info(f"Height map exported to {target}")
        return target
