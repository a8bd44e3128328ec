# src/frameviz/displayers.py
from __future__ import annotations

from .charts.render import display_chart, display_figure, display_ggplot
from .registry import Displayer, DisplayRegistry, Registration, get_registry
from .table import display_frame

# The registry matches on concrete classes, so every leaf type gets its own
# entry. Optional libraries that are not installed are skipped.
TABLE_DISPLAYERS: tuple[tuple[str, Displayer], ...] = (
    ("pandas:DataFrame", display_frame),
    ("polars:DataFrame", display_frame),
)

CHART_DISPLAYERS: tuple[tuple[str, Displayer], ...] = (
    ("frameviz.charts.google:GoogleChart", display_chart),
    ("frameviz.charts.image:ImageChart", display_chart),
    ("matplotlib.figure:Figure", display_figure),
    ("plotnine:ggplot", display_ggplot),
)


def register_table_display(registry: DisplayRegistry | None = None) -> list[Registration]:
    """Register the data frame table displayers."""
    if registry is None:
        registry = get_registry()
    return registry.register_many(TABLE_DISPLAYERS)


def register_chart_display(registry: DisplayRegistry | None = None) -> list[Registration]:
    """Register one HTML displayer per chart type."""
    if registry is None:
        registry = get_registry()
    return registry.register_many(CHART_DISPLAYERS)


def register_all(registry: DisplayRegistry | None = None) -> list[Registration]:
    if registry is None:
        registry = get_registry()
    return register_table_display(registry) + register_chart_display(registry)
