"""Presentation components (Plotly charts for the CLI export and the Streamlit app)."""

from skirun_finder.ui.grid_chart import GridChart

__all__ = ["GridChart"]
