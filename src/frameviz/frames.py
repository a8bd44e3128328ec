# src/frameviz/frames.py
from __future__ import annotations

from typing import Any, Protocol

import pandas as pd

# Optional: polars support
try:  # pragma: no cover
    import polars as pl  # type: ignore
except ImportError:  # pragma: no cover
    pl = None  # type: ignore[assignment]


class FrameHandle(Protocol):
    row_count: int
    col_count: int

    def column_keys(self) -> list[Any]: ...
    def get_value(self, row: int, col: int) -> Any: ...


class PandasFrame:
    def __init__(self, frame: pd.DataFrame) -> None:
        self.frame = frame
        self.row_count, self.col_count = frame.shape

    def column_keys(self) -> list[Any]:
        return list(self.frame.columns)

    def get_value(self, row: int, col: int) -> Any:
        return self.frame.iat[row, col]


class PolarsFrame:
    def __init__(self, frame: Any) -> None:
        self.frame = frame
        self.row_count = frame.height
        self.col_count = frame.width

    def column_keys(self) -> list[Any]:
        return list(self.frame.columns)

    def get_value(self, row: int, col: int) -> Any:
        return self.frame.item(row, col)


def as_frame_handle(obj: Any) -> FrameHandle:
    if isinstance(obj, pd.DataFrame):
        return PandasFrame(obj)
    if pl is not None and isinstance(obj, pl.DataFrame):  # type: ignore[arg-type]
        return PolarsFrame(obj)
    raise TypeError(f"Expected pandas/polars DataFrame, got {type(obj)!r}")


def is_null(x: Any) -> bool:
    """
    Return True only for scalar-like NA values (None, NaN, NaT, pd.NA).
    pd.isna(list/dict/array) returns array-like -> must NOT be used as bool.
    """
    if x is None:
        return True
    try:
        res = pd.isna(x)
    except (TypeError, ValueError):
        return False

    if isinstance(res, bool):
        return res

    # numpy scalar bool
    if getattr(res, "shape", None) == ():
        return bool(res)

    # array-like result => not a scalar NA check
    return False
