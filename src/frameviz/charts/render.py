# src/frameviz/charts/render.py
from __future__ import annotations

import logging
import uuid
from typing import Any

from .. import config
from ..js import JsCode, js_json
from ..registry import MimeBundle
from .base import Chart
from .image import ImageChart

logger = logging.getLogger(__name__)


def new_chart_token() -> str:
    return uuid.uuid4().hex


def chart_size(chart: Chart) -> tuple[int, int]:
    size = chart.options.preferred_size
    if size is None:
        settings = config.get_settings()
        return settings.default_width, settings.default_height
    width, height = size
    return int(width), int(height)


def to_html(chart: Chart, *, token: str | None = None) -> str:
    """
    Return the HTML that draws chart in a notebook output cell: one script
    element followed by the chart_<token> div it draws into.
    """
    token = token or new_chart_token()
    javascript = to_javascript(token, chart)
    width, height = chart_size(chart)
    return (
        '<script type="text/javascript">\n'
        f"{javascript}\n"
        "</script>\n"
        f'<div id="chart_{token}" style="float:left;width:{width}px;height:{height}px;"></div>'
    )


def to_javascript(token: str, chart: Chart) -> str:
    """
    Return the script that loads (Google charts) or directly invokes the
    drawing function emitted by the chart.
    """
    function_name = f"drawChart_{token}"
    # The div is always chart_<token>; a configured id is only used as the
    # drawing target and must name an element that exists elsewhere.
    div_id = chart.options.id or f"chart_{token}"
    if chart.options.id:
        logger.debug(
            "Chart id %r differs from generated div id chart_%s", chart.options.id, token
        )

    js = JsCode()
    if chart.family == "google":
        settings = config.get_settings()
        packages = ", ".join(f"'{p}'" for p in settings.google_packages)
        with js.block("function loadCharts_%s()", token):
            js.write("google.charts.load('current', {'packages':[%s]});", packages).new_line()
            js.write("google.charts.setOnLoadCallback(%s);", function_name)
        js.new_line()
        with js.block("if (typeof google !== 'undefined' && google.charts)"):
            js.write("loadCharts_%s();", token)
        with js.block(" else"):
            js.write("var loader = document.createElement('script');").new_line()
            js.write("loader.src = %s;", js_json(settings.google_loader_url)).new_line()
            js.write("loader.onload = loadCharts_%s;", token).new_line()
            js.write("document.head.appendChild(loader);")
    else:
        js.write("console.info('Writing charts...');")
        js.new_line().write("%s();", function_name)

    js.new_line().new_line()
    chart.accept(js, function_name, div_id)
    return str(js)


def display_chart(chart: Chart) -> MimeBundle:
    return {"text/html": to_html(chart)}


def display_figure(fig: Any) -> MimeBundle:
    return display_chart(ImageChart.from_figure(fig))


def display_ggplot(plot: Any) -> MimeBundle:
    return display_chart(ImageChart.from_ggplot(plot))
