# src/frameviz/charts/__init__.py
from __future__ import annotations

from .base import Chart, ChartFamily, ChartOptions
from .google import GOOGLE_CHART_TYPES, GoogleChart
from .image import ImageChart
from .render import (
    display_chart,
    display_figure,
    display_ggplot,
    new_chart_token,
    to_html,
    to_javascript,
)

__all__ = [
    "Chart",
    "ChartFamily",
    "ChartOptions",
    "GOOGLE_CHART_TYPES",
    "GoogleChart",
    "ImageChart",
    "display_chart",
    "display_figure",
    "display_ggplot",
    "new_chart_token",
    "to_html",
    "to_javascript",
]
