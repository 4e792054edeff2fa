"""Resolve a solver module, fetch its entry point and run it once."""

from __future__ import annotations

import asyncio
import hashlib
import importlib
import importlib.util
import inspect
import os
import sys
from collections.abc import Callable
from pathlib import Path
from types import ModuleType

from sapperbench import host
from sapperbench.errors import EntryPointError, ModuleLoadError

DEFAULT_ENTRY = "bench"

Trace = Callable[[str], None]


def _is_path_location(location: str) -> bool:
    if location.endswith(".py"):
        return True
    if os.sep in location:
        return True
    return os.altsep is not None and os.altsep in location


def _module_name_for_path(path: Path) -> str:
    stem = "".join(ch if ch.isalnum() else "_" for ch in path.stem)
    digest = hashlib.sha1(str(path).encode("utf-8")).hexdigest()[:10]
    return f"sapperbench_solver_{stem}_{digest}"


def _add_solver_dir(path: Path) -> None:
    # Sibling modules stay importable for the rest of the process, as under
    # `python solver.py`.
    solver_dir = str(path.parent)
    if solver_dir not in sys.path:
        sys.path.insert(0, solver_dir)


def _load_from_path(location: str) -> ModuleType:
    path = Path(location).expanduser().resolve()
    if not path.is_file():
        raise ModuleLoadError(location, f"file not found: {path}")
    module_name = _module_name_for_path(path)
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ModuleLoadError(location, f"not an importable Python file: {path}")
    module = importlib.util.module_from_spec(spec)
    # dataclasses resolves type metadata via sys.modules[cls.__module__]
    sys.modules[module_name] = module
    _add_solver_dir(path)
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        if sys.modules.get(module_name) is module:
            del sys.modules[module_name]
        raise ModuleLoadError(location, f"{type(exc).__name__}: {exc}") from exc
    return module


def _load_from_name(location: str) -> ModuleType:
    try:
        return importlib.import_module(location)
    except Exception as exc:
        raise ModuleLoadError(location, f"{type(exc).__name__}: {exc}") from exc


async def load_solver(location: str | os.PathLike[str]) -> ModuleType:
    """Import the solver at ``location``.

    ``location`` is either a path to a ``.py`` file or a dotted module name.
    Module-level code runs here, so the host stub has to be installed first.
    """
    location = os.fspath(location)
    if not location:
        raise ModuleLoadError(location, "empty solver location")
    if _is_path_location(location):
        module = _load_from_path(location)
    else:
        module = _load_from_name(location)
    # the load is the harness's one suspension point
    await asyncio.sleep(0)
    return module


def entry_point(
    module: ModuleType, name: str = DEFAULT_ENTRY
) -> Callable[[], object]:
    location = getattr(module, "__file__", None) or module.__name__
    try:
        entry = getattr(module, name)
    except AttributeError as exc:
        raise EntryPointError(location, name, "no such export") from exc
    if not callable(entry):
        raise EntryPointError(
            location, name, f"export is {type(entry).__name__}, not callable"
        )
    return entry


async def invoke(entry: Callable[[], object]) -> None:
    result = entry()
    if inspect.isawaitable(result):
        await result


async def run(
    location: str | os.PathLike[str],
    *,
    entry: str = DEFAULT_ENTRY,
    trace: Trace | None = None,
) -> None:
    if not host.installed():
        raise RuntimeError("host stub must be installed before loading the solver")
    module = await load_solver(location)
    if trace is not None:
        trace(f"loaded {module.__name__} from {os.fspath(location)}")
    func = entry_point(module, entry)
    if trace is not None:
        trace(f"invoking {entry}()")
    await invoke(func)
    if trace is not None:
        trace(f"{entry}() returned")


def run_sync(
    location: str | os.PathLike[str],
    *,
    entry: str = DEFAULT_ENTRY,
    trace: Trace | None = None,
) -> None:
    asyncio.run(run(location, entry=entry, trace=trace))
