# src/frameviz/charts/google.py
from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, ClassVar

import pandas as pd

from ..frames import is_null
from ..js import JsCode, js_json
from .base import ChartFamily, ChartOptions

GOOGLE_CHART_TYPES = frozenset(
    {
        "AreaChart",
        "BarChart",
        "ColumnChart",
        "Histogram",
        "LineChart",
        "PieChart",
        "ScatterChart",
        "SteppedAreaChart",
    }
)


def _json_safe(x: Any) -> Any:
    if x is None:
        return None

    if isinstance(x, (str, bool, int)):
        return x

    if isinstance(x, float):
        if math.isnan(x) or math.isinf(x):
            return None
        return x

    if is_null(x):
        return None

    if isinstance(x, (datetime, date)):
        return x.isoformat()

    # numpy scalars
    item = getattr(x, "item", None)
    if callable(item):
        try:
            return _json_safe(item())
        except (TypeError, ValueError):
            pass

    return str(x)


@dataclass(slots=True)
class GoogleChart:
    """
    A Google Charts visualisation of a pandas DataFrame.

    The domain axis is taken from column `x`, or from the index when `x` is
    None. Series default to every other column.
    """

    frame: pd.DataFrame
    chart_type: str = "LineChart"
    title: str | None = None
    x: str | None = None
    columns: list[str] | None = None
    chart_options: dict[str, Any] = field(default_factory=dict)
    options: ChartOptions = field(default_factory=ChartOptions)

    family: ClassVar[ChartFamily] = "google"

    def __post_init__(self) -> None:
        if self.chart_type not in GOOGLE_CHART_TYPES:
            raise ValueError(
                f"Unsupported Google chart type {self.chart_type!r}; "
                f"expected one of {sorted(GOOGLE_CHART_TYPES)}"
            )
        if self.x is not None and self.x not in self.frame.columns:
            raise KeyError(f"Domain column {self.x!r} not in frame")

    def series(self) -> list[Any]:
        if self.columns is not None:
            return list(self.columns)
        return [c for c in self.frame.columns if c != self.x]

    def data_table(self) -> list[list[Any]]:
        series = self.series()
        if self.x is not None:
            domain = self.frame[self.x]
            domain_label = str(self.x)
        else:
            domain = self.frame.index.to_series()
            domain_label = str(self.frame.index.name or "")

        header: list[Any] = [domain_label] + [str(c) for c in series]
        rows: list[list[Any]] = [header]
        values = self.frame[series]
        for key, row in zip(domain, values.itertuples(index=False, name=None)):
            rows.append([_json_safe(key)] + [_json_safe(v) for v in row])
        return rows

    def draw_options(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.title:
            out["title"] = self.title
        out.update(self.chart_options)
        return out

    def accept(self, js: JsCode, function_name: str, div_id: str) -> None:
        with js.block("function %s()", function_name):
            js.write(
                "var data = google.visualization.arrayToDataTable(%s);",
                js_json(self.data_table()),
            ).new_line()
            js.write("var options = %s;", js_json(self.draw_options())).new_line()
            js.write(
                "var chart = new google.visualization.%s(document.getElementById(%s));",
                self.chart_type,
                js_json(div_id),
            ).new_line()
            js.write("chart.draw(data, options);")
