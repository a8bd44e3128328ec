from __future__ import annotations

import json
import re

import numpy as np
import pandas as pd
import pytest

from frameviz.charts import ChartOptions, GoogleChart
from frameviz.js import JsCode


@pytest.fixture
def cars() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "EngineSize": [1.8, 3.2, np.nan],
            "Horsepower": [140, 200, 172],
            "Price": [15.9, 33.9, 29.1],
        }
    )


def test_unknown_chart_type_raises(cars: pd.DataFrame) -> None:
    with pytest.raises(ValueError):
        GoogleChart(cars, chart_type="SpiderChart")


def test_unknown_domain_column_raises(cars: pd.DataFrame) -> None:
    with pytest.raises(KeyError):
        GoogleChart(cars, x="Weight")


def test_data_table_uses_x_column_and_json_safe_values(cars: pd.DataFrame) -> None:
    chart = GoogleChart(cars, chart_type="ScatterChart", x="EngineSize", columns=["Horsepower"])
    table = chart.data_table()

    assert table[0] == ["EngineSize", "Horsepower"]
    assert table[1] == [1.8, 140]
    assert table[3] == [None, 172]
    # numpy scalars are converted to plain python values
    assert type(table[1][1]) is int
    json.dumps(table)


def test_data_table_defaults_to_index_domain() -> None:
    df = pd.DataFrame(
        {"sales": [1, 2]},
        index=pd.Index([pd.Timestamp("2024-01-01"), pd.Timestamp("2024-01-02")], name="day"),
    )
    table = GoogleChart(df).data_table()

    assert table[0] == ["day", "sales"]
    assert table[1] == ["2024-01-01T00:00:00", 1]


def test_accept_emits_named_drawing_function(cars: pd.DataFrame) -> None:
    chart = GoogleChart(
        cars,
        chart_type="LineChart",
        title="Horsepower by engine",
        x="EngineSize",
        chart_options={"legend": {"position": "bottom"}},
        options=ChartOptions(),
    )
    js = JsCode()
    chart.accept(js, "drawChart_abc", "chart_abc")
    out = str(js)

    assert out.startswith("function drawChart_abc() {")
    assert out.endswith("}")
    assert "google.visualization.arrayToDataTable(" in out
    assert 'new google.visualization.LineChart(document.getElementById("chart_abc"))' in out
    assert "chart.draw(data, options);" in out

    options = re.search(r"var options = (\{.*\});", out)
    assert options is not None
    assert json.loads(options.group(1)) == {
        "title": "Horsepower by engine",
        "legend": {"position": "bottom"},
    }
