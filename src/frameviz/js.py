# src/frameviz/js.py
from __future__ import annotations

import json
from contextlib import contextmanager
from typing import Any, Iterator


class JsCode:
    """
    Line-oriented JavaScript writer handed to chart visitors.

    write() appends to the current line, new_line() starts the next one.
    Text passed with args is %-formatted.
    """

    def __init__(self, indent: str = "    ") -> None:
        self._indent = indent
        self._depth = 0
        self._lines: list[tuple[int, str]] = [(0, "")]

    def write(self, text: str, *args: Any) -> JsCode:
        if args:
            text = text % args
        depth, current = self._lines[-1]
        if not current:
            depth = self._depth
        self._lines[-1] = (depth, current + text)
        return self

    def new_line(self) -> JsCode:
        self._lines.append((self._depth, ""))
        return self

    @contextmanager
    def block(self, header: str, *args: Any) -> Iterator[JsCode]:
        """Write `header {`, indent the body, close with `}`."""
        self.write(header + " {", *args)
        self._depth += 1
        self.new_line()
        try:
            yield self
        finally:
            self._depth -= 1
            if self._lines[-1][1]:
                self.new_line()
            self.write("}")

    def __str__(self) -> str:
        return "\n".join(
            (self._indent * depth + text) if text else ""
            for depth, text in self._lines
        ).strip("\n")


def js_json(value: Any) -> str:
    """JSON literal safe to embed inside a <script> element."""
    out = json.dumps(value, ensure_ascii=False)
    # no "<" at all, so data cannot open or close markup inside the script
    return (
        out.replace("<", "\\u003c")
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )
