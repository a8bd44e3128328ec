from __future__ import annotations

import re
from pathlib import Path

import pytest

from frameviz.cli import build_parser, main


@pytest.fixture
def cars_csv(tmp_path: Path) -> Path:
    p = tmp_path / "cars.csv"
    p.write_text(
        "Model,EngineSize,Horsepower\nA,1.8,140\nB,3.2,200\nC,,172\n", encoding="utf-8"
    )
    return p


def test_cli_parses_chart_args() -> None:
    args = build_parser().parse_args(
        [
            "chart",
            "data.csv",
            "--kind",
            "ScatterChart",
            "--x",
            "EngineSize",
            "--columns",
            "Horsepower",
            "--width",
            "400",
            "--height",
            "300",
        ]
    )
    assert args.cmd == "chart"
    assert args.csv == Path("data.csv")
    assert args.kind == "ScatterChart"
    assert args.x == "EngineSize"
    assert args.columns == ["Horsepower"]
    assert (args.width, args.height) == (400, 300)


def test_cli_rejects_unknown_chart_kind() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["chart", "data.csv", "--kind", "Radar"])


def test_chart_command_prints_html(
    cars_csv: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    rc = main(
        [
            "chart",
            str(cars_csv),
            "--kind",
            "ScatterChart",
            "--x",
            "EngineSize",
            "--columns",
            "Horsepower",
            "--title",
            "Horsepower regressed on EngineSize",
            "--width",
            "400",
            "--height",
            "300",
        ]
    )
    out = capsys.readouterr().out

    assert rc == 0
    assert "new google.visualization.ScatterChart" in out
    assert re.search(r'<div id="chart_[0-9a-f]{32}" style="float:left;width:400px;height:300px;">', out)


def test_chart_command_requires_both_dimensions(
    cars_csv: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    rc = main(["chart", str(cars_csv), "--width", "400"])
    assert rc == 2
    assert "--width and --height" in capsys.readouterr().err


def test_table_command_writes_output_file(cars_csv: Path, tmp_path: Path) -> None:
    out = tmp_path / "table.html"
    rc = main(["table", str(cars_csv), "--mode", "simple", "--max-rows", "2", "--output", str(out)])

    html = out.read_text(encoding="utf-8")
    assert rc == 0
    assert "<th>Horsepower</th>" in html
    assert "<td>B</td>" in html
    assert "<td>C</td>" not in html


def test_chart_command_reports_unknown_columns(
    cars_csv: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    rc = main(["chart", str(cars_csv), "--x", "Weight", "--columns", "Horsepower", "Price"])
    err = capsys.readouterr().err

    assert rc == 2
    assert "Weight, Price" in err


def test_arguments_are_checked_before_reading_csv(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    missing = tmp_path / "nope.csv"

    assert main(["chart", str(missing), "--width", "400"]) == 2
    assert "--width and --height" in capsys.readouterr().err

    assert main(["chart", str(missing), "--width", "0", "--height", "300"]) == 2
    assert "positive" in capsys.readouterr().err

    assert main(["table", str(missing)]) == 2
    assert "no such file" in capsys.readouterr().err


def test_description_is_ascii() -> None:
    assert build_parser().description.isascii()
