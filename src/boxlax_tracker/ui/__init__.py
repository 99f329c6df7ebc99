"""Presentation helpers: plotly figures and text formatting."""
