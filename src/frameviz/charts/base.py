# src/frameviz/charts/base.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol

from ..js import JsCode

ChartFamily = Literal["google", "image"]


@dataclass(slots=True)
class ChartOptions:
    preferred_size: tuple[int, int] | None = None
    id: str | None = None

    def with_preferred_size(self, width: int, height: int) -> ChartOptions:
        if width <= 0 or height <= 0:
            raise ValueError("Preferred size must be positive")
        self.preferred_size = (int(width), int(height))
        return self

    def with_id(self, id: str) -> ChartOptions:
        self.id = id
        return self


class Chart(Protocol):
    family: ChartFamily
    options: ChartOptions

    def accept(self, js: JsCode, function_name: str, div_id: str) -> None:
        """Emit `function <function_name>()` drawing into element div_id."""
        ...
