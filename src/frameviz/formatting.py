# src/frameviz/formatting.py
from __future__ import annotations

import datetime as dt
import math
import numbers
from decimal import Decimal
from typing import Any, Protocol

import pandas as pd

from . import config


class Formatter(Protocol):
    def format(self, value: Any) -> str: ...


class SmartFormat:
    """
    Type-aware cell formatter.

    Integers get digit grouping, floats a fixed precision with trailing
    zeros trimmed, timestamps drop their time part at midnight.
    """

    def __init__(
        self,
        *,
        float_precision: int | None = None,
        thousands_separator: bool | None = None,
    ) -> None:
        settings = config.get_settings()
        self.float_precision = (
            settings.float_precision if float_precision is None else float_precision
        )
        self.thousands_separator = (
            settings.thousands_separator
            if thousands_separator is None
            else thousands_separator
        )

    def format(self, value: Any) -> str:
        # bool is an Integral and numpy.bool_ is neither, check them first
        if pd.api.types.is_bool(value):
            return "true" if value else "false"
        if isinstance(value, numbers.Integral):
            return self._format_int(int(value))
        if isinstance(value, Decimal):
            return self._format_decimal(value)
        if isinstance(value, numbers.Real):
            return self._format_float(float(value))
        if isinstance(value, (pd.Timestamp, dt.datetime)):
            return _format_datetime(value)
        if isinstance(value, (dt.date, dt.time)):
            return value.isoformat()
        if isinstance(value, pd.Timedelta):
            return str(value.to_pytimedelta())
        return str(value)

    def _format_int(self, value: int) -> str:
        return f"{value:,d}" if self.thousands_separator else f"{value:d}"

    def _format_float(self, value: float) -> str:
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if math.isnan(value):
            return "NaN"
        sep = "," if self.thousands_separator else ""
        return _trim_zeros(f"{value:{sep}.{self.float_precision}f}")

    def _format_decimal(self, value: Decimal) -> str:
        if not value.is_finite():
            return self._format_float(float(value))
        sep = "," if self.thousands_separator else ""
        return _trim_zeros(f"{value:{sep}.{self.float_precision}f}")


def _trim_zeros(s: str) -> str:
    if "." not in s:
        return s
    s = s.rstrip("0").rstrip(".")
    return "0" if s in ("-0", "") else s


def _format_datetime(value: dt.datetime) -> str:
    at_midnight = (
        value.hour == 0
        and value.minute == 0
        and value.second == 0
        and value.microsecond == 0
    )
    out = value.strftime("%Y-%m-%d" if at_midnight else "%Y-%m-%d %H:%M:%S")
    if value.tzinfo is not None:
        out = f"{out} {value.tzname()}"
    return out
