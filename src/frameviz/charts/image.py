# src/frameviz/charts/image.py
from __future__ import annotations

import base64
import html
import io
from dataclasses import dataclass, field
from typing import Any, ClassVar

from matplotlib.figure import Figure

from .. import config
from ..js import JsCode, js_json
from .base import ChartFamily, ChartOptions

_MAX_DRAW_ATTEMPTS = 50


def fig_to_png_bytes(fig: Figure, *, dpi: int | None = None) -> bytes:
    """Render a matplotlib Figure to PNG bytes."""
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=dpi or config.get_settings().image_dpi)
    buf.seek(0)
    return buf.read()


@dataclass(slots=True)
class ImageChart:
    """
    A chart rendered ahead of time to PNG and embedded as a data URI.
    """

    png: bytes
    title: str | None = None
    options: ChartOptions = field(default_factory=ChartOptions)

    family: ClassVar[ChartFamily] = "image"

    @classmethod
    def from_figure(
        cls,
        fig: Figure,
        *,
        dpi: int | None = None,
        options: ChartOptions | None = None,
    ) -> ImageChart:
        dpi = dpi or config.get_settings().image_dpi
        if options is None:
            width_in, height_in = fig.get_size_inches()
            options = ChartOptions(
                preferred_size=(int(round(width_in * dpi)), int(round(height_in * dpi)))
            )
        title = fig.get_suptitle() if hasattr(fig, "get_suptitle") else ""
        return cls(
            png=fig_to_png_bytes(fig, dpi=dpi),
            title=title or None,
            options=options,
        )

    @classmethod
    def from_ggplot(
        cls,
        plot: Any,
        *,
        dpi: int | None = None,
        options: ChartOptions | None = None,
    ) -> ImageChart:
        import matplotlib.pyplot as plt

        fig = plot.draw()
        try:
            return cls.from_figure(fig, dpi=dpi, options=options)
        finally:
            plt.close(fig)

    def data_uri(self) -> str:
        return "data:image/png;base64," + base64.b64encode(self.png).decode("ascii")

    def accept(self, js: JsCode, function_name: str, div_id: str) -> None:
        alt = html.escape(self.title or "Chart", quote=True)
        img = (
            f'<img src="{self.data_uri()}" alt="{alt}" '
            'style="max-width:100%;max-height:100%;" />'
        )
        # the script runs before its div is parsed, so wait for it a few frames
        with js.block("function %s(attempt)", function_name):
            js.write("attempt = attempt || 0;").new_line()
            js.write("var target = document.getElementById(%s);", js_json(div_id)).new_line()
            with js.block("if (target === null)"):
                with js.block("if (attempt < %d)", _MAX_DRAW_ATTEMPTS):
                    with js.block("window.requestAnimationFrame(function()"):
                        js.write("%s(attempt + 1);", function_name)
                    js.write(");")
                with js.block(" else"):
                    js.write(
                        "console.warn(%s);", js_json(f"No element with id {div_id} to draw into")
                    )
                js.new_line().write("return;")
            js.new_line().write("target.innerHTML = %s;", js_json(img))
