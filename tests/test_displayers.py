from __future__ import annotations

import logging

import pandas as pd
import pytest
from matplotlib.figure import Figure

import frameviz.displayers as disp
from frameviz.charts import GoogleChart, ImageChart
from frameviz.registry import DisplayRegistry


def test_register_table_display_registers_pandas() -> None:
    reg = DisplayRegistry()
    results = disp.register_table_display(reg)

    assert [r.target for r in results] == ["pandas:DataFrame", "polars:DataFrame"]
    assert pd.DataFrame in reg
    assert all(r.ok for r in results if r.target.startswith("pandas"))


def test_register_chart_display_registers_each_leaf_type() -> None:
    reg = DisplayRegistry()
    results = disp.register_chart_display(reg)

    assert [r.target for r in results] == [target for target, _ in disp.CHART_DISPLAYERS]
    assert GoogleChart in reg
    assert ImageChart in reg
    assert Figure in reg


def test_one_failing_chart_type_does_not_block_others(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setattr(
        disp,
        "CHART_DISPLAYERS",
        (
            ("frameviz.charts.google:NoSuchChart", lambda c: {}),
            ("frameviz.charts.image:ImageChart", lambda c: {"text/html": "img"}),
        ),
    )
    reg = DisplayRegistry()
    with caplog.at_level(logging.WARNING, logger="frameviz.registry"):
        results = disp.register_chart_display(reg)

    assert [r.ok for r in results] == [False, True]
    assert reg.display(ImageChart(png=b"x")) == {"text/html": "img"}
    assert "frameviz.charts.google:NoSuchChart" in caplog.text


def test_register_all_uses_default_registry(monkeypatch: pytest.MonkeyPatch) -> None:
    reg = DisplayRegistry()
    monkeypatch.setattr(disp, "get_registry", lambda: reg)

    results = disp.register_all()

    assert len(results) == len(disp.TABLE_DISPLAYERS) + len(disp.CHART_DISPLAYERS)
    assert pd.DataFrame in reg
    assert GoogleChart in reg


def test_registered_chart_displayer_returns_html() -> None:
    reg = DisplayRegistry()
    disp.register_all(reg)

    df = pd.DataFrame({"x": [1, 2], "y": [3, 4]})
    bundle = reg.display(GoogleChart(df, x="x"))

    assert bundle is not None
    assert bundle["text/html"].count("<div") == 1
    assert "google.charts.load" in bundle["text/html"]


def test_registered_table_displayer_is_hidden(monkeypatch: pytest.MonkeyPatch) -> None:
    import frameviz.table as table_mod

    pushed: list[object] = []
    monkeypatch.setattr(table_mod, "display", lambda obj: pushed.append(obj))
    reg = DisplayRegistry()
    disp.register_all(reg)

    assert reg.display(pd.DataFrame({"a": [1, None]})) is None
    assert len(pushed) == 1
