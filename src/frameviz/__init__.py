# src/frameviz/__init__.py
from __future__ import annotations

from .config import set_table_view_mode
from .displayers import register_all, register_chart_display, register_table_display
from .extension import (
    install,
    load_ipython_extension,
    uninstall,
    unload_ipython_extension,
)
from .registry import DISPLAYER_HIDDEN, DisplayRegistry, Registration, get_registry

__all__ = [
    "DISPLAYER_HIDDEN",
    "DisplayRegistry",
    "Registration",
    "get_registry",
    "install",
    "load_ipython_extension",
    "register_all",
    "register_chart_display",
    "register_table_display",
    "set_table_view_mode",
    "uninstall",
    "unload_ipython_extension",
]
