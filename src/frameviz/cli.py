# src/frameviz/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import pandas as pd

from . import config
from .charts import GOOGLE_CHART_TYPES, ChartOptions, GoogleChart, to_html
from .table import frame_table


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="frameviz", description="frameviz - notebook HTML for frames and charts"
    )
    p.add_argument(
        "--verbose", action="store_true", help="Log debug output to stderr"
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    chart_p = sub.add_parser("chart", help="Print the HTML for a Google chart of a CSV file")
    chart_p.add_argument("csv", type=Path, help="CSV file to chart")
    chart_p.add_argument(
        "--kind",
        default="LineChart",
        choices=sorted(GOOGLE_CHART_TYPES),
        help="Google chart type (default: LineChart)",
    )
    chart_p.add_argument("--x", default=None, help="Domain column (default: row index)")
    chart_p.add_argument(
        "--columns", nargs="+", default=None, help="Series columns (default: all others)"
    )
    chart_p.add_argument("--title", default=None, help="Chart title")
    chart_p.add_argument("--width", type=int, default=None, help="Chart width in px")
    chart_p.add_argument("--height", type=int, default=None, help="Chart height in px")
    chart_p.add_argument("--id", default=None, help="Element id the chart draws into")
    chart_p.add_argument("--output", type=Path, default=None, help="Write HTML here")

    table_p = sub.add_parser("table", help="Print the HTML table for a CSV file")
    table_p.add_argument("csv", type=Path, help="CSV file to render")
    table_p.add_argument(
        "--mode", choices=("simple", "rich"), default=None, help="Table view mode"
    )
    table_p.add_argument("--max-rows", type=int, default=None, help="Only render the first N rows")
    table_p.add_argument("--output", type=Path, default=None, help="Write HTML here")

    return p


def _emit(html: str, output: Path | None) -> None:
    if output is None:
        sys.stdout.write(html + "\n")
    else:
        output.write_text(html, encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    if args.cmd == "chart" and (args.width is None) != (args.height is None):
        print("frameviz: --width and --height must be given together", file=sys.stderr)
        return 2
    if args.cmd == "chart" and args.width is not None and min(args.width, args.height) <= 0:
        print("frameviz: --width and --height must be positive", file=sys.stderr)
        return 2
    if not args.csv.is_file():
        print(f"frameviz: no such file: {args.csv}", file=sys.stderr)
        return 2

    frame = pd.read_csv(args.csv)

    if args.cmd == "chart":
        wanted = ([args.x] if args.x is not None else []) + (args.columns or [])
        missing = [c for c in wanted if c not in frame.columns]
        if missing:
            print(
                f"frameviz: {args.csv} has no column(s): {', '.join(missing)}",
                file=sys.stderr,
            )
            return 2
        options = ChartOptions(id=args.id)
        if args.width is not None:
            options.with_preferred_size(args.width, args.height)
        chart = GoogleChart(
            frame,
            chart_type=args.kind,
            title=args.title,
            x=args.x,
            columns=args.columns,
            options=options,
        )
        _emit(to_html(chart), args.output)
        return 0

    if args.cmd == "table":
        if args.mode is not None:
            config.set_table_view_mode(args.mode)
        if args.max_rows is not None:
            frame = frame.head(args.max_rows)
        _emit(frame_table(frame).to_html(), args.output)
        return 0

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
