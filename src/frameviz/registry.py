# src/frameviz/registry.py
from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Literal, Union

logger = logging.getLogger(__name__)


class _Hidden:
    """Marker type for displayers that already pushed their own output."""

    _instance: _Hidden | None = None

    def __new__(cls) -> _Hidden:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "DISPLAYER_HIDDEN"


DISPLAYER_HIDDEN = _Hidden()

MimeBundle = dict[str, str]
DisplayResult = Union[MimeBundle, _Hidden]
Displayer = Callable[[Any], DisplayResult]


FailureReason = Literal[
    "invalid-target", "missing-module", "missing-type", "not-a-type", "error"
]


class UnresolvedTarget(LookupError):
    """A "module:Type" display target that does not name an importable class."""

    def __init__(self, target: str, reason: FailureReason, detail: str) -> None:
        super().__init__(f"{target}: {detail}")
        self.target = target
        self.reason = reason


def _is_module_or_parent(missing: str | None, module: str) -> bool:
    if not missing:
        return False
    return module == missing or module.startswith(missing + ".")


def resolve_target(target: str) -> type:
    """
    Resolve "package.module:Type" to a class. Type may be dotted
    ("pkg.mod:Outer.Inner").

    Raises UnresolvedTarget when the module is not installed or does not
    define the type. A module that is installed but fails while importing
    raises its own error.
    """
    module_name, _, qualname = (part.strip() for part in target.partition(":"))
    if not module_name or not qualname:
        raise UnresolvedTarget(
            target, "invalid-target", "expected the form 'package.module:Type'"
        )

    try:
        obj: Any = importlib.import_module(module_name)
    except ModuleNotFoundError as exc:
        if not _is_module_or_parent(exc.name, module_name):
            raise
        raise UnresolvedTarget(
            target, "missing-module", f"module {exc.name!r} is not installed"
        ) from exc

    for part in qualname.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise UnresolvedTarget(
                target, "missing-type", f"{module_name} has no attribute {qualname!r}"
            ) from exc

    if not isinstance(obj, type):
        raise UnresolvedTarget(
            target, "not-a-type", f"resolved to {type(obj).__name__}, not a class"
        )
    return obj


@dataclass(frozen=True, slots=True)
class Registration:
    target: str
    type: type | None
    ok: bool
    error: Exception | None = None
    reason: FailureReason | None = None


def _target_name(target: type | str) -> str:
    if isinstance(target, str):
        return target
    if isinstance(target, type):
        return f"{target.__module__}:{target.__qualname__}"
    return repr(target)


class DisplayRegistry:
    """
    Runtime type -> displayer mapping consulted when a value is displayed.

    Registering the same type twice replaces the earlier displayer.
    """

    def __init__(self) -> None:
        self._displayers: dict[type, Displayer] = {}

    def register(self, target: type | str, displayer: Displayer) -> Registration:
        """
        Associate a type (or a "module:Type" path) with a displayer.

        Resolution errors never propagate: they are logged and reported in
        the returned Registration so other registrations can proceed.
        """
        name = _target_name(target)
        try:
            if isinstance(target, str):
                typ = resolve_target(target)
            elif isinstance(target, type):
                typ = target
            else:
                raise UnresolvedTarget(name, "not-a-type", "display targets must be classes")
        except UnresolvedTarget as exc:
            # optional libraries (polars, plotnine) are expected to be absent
            if exc.reason == "missing-module":
                logger.info("Skipping displayer for %s", exc)
            else:
                logger.warning("Failed to register displayer for %s", exc)
            return Registration(
                target=name, type=None, ok=False, error=exc, reason=exc.reason
            )
        except Exception as exc:
            logger.warning("Failed to register displayer for %s", name, exc_info=True)
            return Registration(
                target=name, type=None, ok=False, error=exc, reason="error"
            )

        self._displayers[typ] = displayer
        logger.debug("Registered displayer for %s", name)
        return Registration(target=name, type=typ, ok=True)

    def register_many(
        self, entries: Iterable[tuple[type | str, Displayer]]
    ) -> list[Registration]:
        results = [self.register(target, displayer) for target, displayer in entries]
        failed = [r.target for r in results if not r.ok]
        if failed:
            logger.warning(
                "%d of %d displayers were not registered: %s",
                len(failed),
                len(results),
                ", ".join(failed),
            )
        return results

    def unregister(self, typ: type) -> Displayer | None:
        return self._displayers.pop(typ, None)

    def lookup(self, obj: Any) -> Displayer | None:
        cls = type(obj)
        displayer = self._displayers.get(cls)
        if displayer is not None:
            return displayer
        for base in cls.__mro__[1:]:
            displayer = self._displayers.get(base)
            if displayer is not None:
                return displayer
        return None

    def display(self, obj: Any) -> MimeBundle | None:
        """
        Run the displayer registered for obj.

        Returns the MIME bundle to render, or None when the displayer
        already produced its output.
        """
        displayer = self.lookup(obj)
        if displayer is None:
            raise LookupError(f"No displayer registered for {type(obj)!r}")
        result = displayer(obj)
        if result is DISPLAYER_HIDDEN:
            return None
        return result  # type: ignore[return-value]

    def types(self) -> list[type]:
        return list(self._displayers)

    def clear(self) -> None:
        self._displayers.clear()

    def __contains__(self, typ: object) -> bool:
        return typ in self._displayers

    def __len__(self) -> int:
        return len(self._displayers)


_DEFAULT_REGISTRY: DisplayRegistry | None = None


def get_registry() -> DisplayRegistry:
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = DisplayRegistry()
    return _DEFAULT_REGISTRY
