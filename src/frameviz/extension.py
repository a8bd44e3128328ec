# src/frameviz/extension.py
from __future__ import annotations

import logging
from typing import Any, Callable

from IPython import get_ipython
from IPython.display import publish_display_data

from .displayers import register_all
from .registry import DisplayRegistry, get_registry

logger = logging.getLogger(__name__)


def _resolve_shell(shell: Any | None) -> Any:
    shell = shell if shell is not None else get_ipython()
    if shell is None:
        raise RuntimeError("No active IPython shell; run this inside a notebook or IPython")
    return shell


def _printer(registry: DisplayRegistry) -> Callable[[Any], None]:
    def printer(obj: Any) -> None:
        bundle = registry.display(obj)
        if bundle is not None:
            publish_display_data(bundle)

    return printer


def install(registry: DisplayRegistry | None = None, shell: Any | None = None) -> None:
    """
    Route display of every type in registry through frameviz.

    Uses IPython's ipython_display_formatter, whose printers publish their
    own output; the shell then skips its default repr for those values.
    """
    if registry is None:
        registry = get_registry()
    formatter = _resolve_shell(shell).display_formatter.ipython_display_formatter
    printer = _printer(registry)
    for typ in registry.types():
        formatter.for_type(typ, printer)
    logger.debug("Installed %d displayers into IPython", len(registry))


def uninstall(registry: DisplayRegistry | None = None, shell: Any | None = None) -> None:
    if registry is None:
        registry = get_registry()
    formatter = _resolve_shell(shell).display_formatter.ipython_display_formatter
    for typ in registry.types():
        formatter.pop(typ, None)


def load_ipython_extension(ipython: Any) -> None:
    """%load_ext frameviz"""
    register_all()
    install(get_registry(), ipython)


def unload_ipython_extension(ipython: Any) -> None:
    uninstall(get_registry(), ipython)
