"""Headless stand-ins for the display host the solver was written against.

The solver reads ``window``, ``document`` and ``localStorage`` as bare globals
during import. ``install`` publishes no-op replacements for those names into
``builtins`` so the solver module resolves them without a real display. Every
hook accepts any arguments, never raises and never calls back.
"""

from __future__ import annotations

import builtins as _builtins
from dataclasses import dataclass
from typing import Any

AMBIENT_NAMES = ("window", "document", "localStorage")


class DisplayContext:
    """Screen metrics and the animation scheduler (``window``)."""

    devicePixelRatio = 1

    def addEventListener(self, *_args: Any, **_kwargs: Any) -> None:  # noqa: N802
        return None

    def requestAnimationFrame(self, *_args: Any, **_kwargs: Any) -> None:  # noqa: N802
        return None

    def __repr__(self) -> str:
        return "<headless window>"


class DocumentContext:
    """Document tree lookups (``document``). Nothing is ever found."""

    def getElementById(self, *_args: Any, **_kwargs: Any) -> None:  # noqa: N802
        return None

    def addEventListener(self, *_args: Any, **_kwargs: Any) -> None:  # noqa: N802
        return None

    def __repr__(self) -> str:
        return "<headless document>"


class PersistentStorageContext:
    """Key/value storage (``localStorage``). Writes are dropped."""

    def getItem(self, *_args: Any, **_kwargs: Any) -> None:  # noqa: N802
        return None

    def setItem(self, *_args: Any, **_kwargs: Any) -> None:  # noqa: N802
        return None

    def __repr__(self) -> str:
        return "<headless localStorage>"


@dataclass(frozen=True)
class HostEnvironmentStub:
    window: DisplayContext
    document: DocumentContext
    localStorage: PersistentStorageContext  # noqa: N815

    def bindings(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in AMBIENT_NAMES}


_STUB = HostEnvironmentStub(
    window=DisplayContext(),
    document=DocumentContext(),
    localStorage=PersistentStorageContext(),
)


def stub() -> HostEnvironmentStub:
    """Return the process-wide stub without publishing it."""
    return _STUB


def installed() -> bool:
    for name, group in _STUB.bindings().items():
        if getattr(_builtins, name, None) is not group:
            return False
    return True


def install() -> HostEnvironmentStub:
    setattr(_builtins, "window", _STUB.window)
    setattr(_builtins, "document", _STUB.document)
    setattr(_builtins, "localStorage", _STUB.localStorage)
    return _STUB
