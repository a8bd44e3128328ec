# src/frameviz/table.py
from __future__ import annotations

import html
import logging
import uuid
from typing import Any, Callable

from IPython.display import HTML, display

from . import config
from .formatting import Formatter, SmartFormat
from .frames import as_frame_handle, is_null
from .js import js_json
from .registry import DISPLAYER_HIDDEN, DisplayResult

logger = logging.getLogger(__name__)

CellAccessor = Callable[[int, int], "str | None"]


class TableDisplay:
    """
    Grid of row_count x col_count cells rendered into the output cell.

    cell(row, col) returns the text for a cell, or None when it has no
    content.
    """

    def __init__(
        self,
        row_count: int,
        col_count: int,
        columns: list[str],
        cell: CellAccessor,
    ) -> None:
        if len(columns) != col_count:
            raise ValueError(
                f"Expected {col_count} column labels, got {len(columns)}"
            )
        self.row_count = row_count
        self.col_count = col_count
        self.columns = columns
        self.cell = cell

    def visible_rows(self) -> int:
        return min(self.row_count, config.get_settings().max_rows)

    def values(self) -> list[list[str | None]]:
        return [
            [self.cell(row, col) for col in range(self.col_count)]
            for row in range(self.visible_rows())
        ]

    def to_html(self) -> str:
        if config.get_table_view_mode() == "simple":
            return self._to_html_simple()
        return self._to_html_rich()

    def display(self) -> None:
        display(HTML(self.to_html()))

    def _footer(self) -> str:
        shown = self.visible_rows()
        if shown < self.row_count:
            return f"<div class=\"frameviz-note\">Showing {shown} of {self.row_count} rows.</div>"
        return ""

    def _to_html_simple(self) -> str:
        th = "".join(f"<th>{html.escape(c)}</th>" for c in self.columns)
        trs = []
        for row in self.values():
            tds = "".join(
                f"<td>{'' if v is None else html.escape(v)}</td>" for v in row
            )
            trs.append(f"<tr>{tds}</tr>")
        return (
            "<table class=\"frameviz-table\">"
            f"<thead><tr>{th}</tr></thead>"
            "<tbody>" + "".join(trs) + "</tbody>"
            "</table>" + self._footer()
        )

    def _to_html_rich(self) -> str:
        settings = config.get_settings()
        grid_id = f"table_{uuid.uuid4().hex}"

        # Tabulator fields must be identifiers; labels go into titles
        fields = [f"c{i}" for i in range(self.col_count)]
        columns = [
            {"title": label, "field": field}
            for label, field in zip(self.columns, fields)
        ]
        rows = [dict(zip(fields, row)) for row in self.values()]

        base = f"https://unpkg.com/tabulator-tables@{settings.tabulator_version}/dist"
        return f"""
<link href="{base}/css/tabulator.min.css" rel="stylesheet">
<div id="{grid_id}" class="frameviz-grid"></div>
<script type="text/javascript">
(function() {{
  function build() {{
    new Tabulator("#{grid_id}", {{
      data: {js_json(rows)},
      columns: {js_json(columns)},
      layout: "fitDataStretch",
      pagination: "local",
      paginationSize: {settings.page_size},
      movableColumns: true
    }});
  }}
  if (typeof Tabulator !== "undefined") {{
    build();
  }} else {{
    var s = document.createElement("script");
    s.src = "{base}/js/tabulator.min.js";
    s.onload = build;
    document.head.appendChild(s);
  }}
}})();
</script>
{self._footer()}
""".strip()


def frame_table(frame: Any, *, formatter: Formatter | None = None) -> TableDisplay:
    """
    Build the TableDisplay for a data frame.

    Null cells (None, NaN, NaT, pd.NA) are left empty instead of being
    handed to the formatter.
    """
    fmt = formatter or SmartFormat()
    handle = as_frame_handle(frame)
    columns = [str(key) for key in handle.column_keys()]

    def cell(row: int, col: int) -> str | None:
        value = handle.get_value(row, col)
        return None if is_null(value) else fmt.format(value)

    return TableDisplay(handle.row_count, handle.col_count, columns, cell)


def display_frame(frame: Any, *, formatter: Formatter | None = None) -> DisplayResult:
    """Push a data frame into the output cell as a table."""
    table = frame_table(frame, formatter=formatter)
    logger.debug("Displaying %dx%d table", table.row_count, table.col_count)
    table.display()
    return DISPLAYER_HIDDEN
