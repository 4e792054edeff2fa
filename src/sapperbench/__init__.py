"""sapperbench: run a display-bound solver's benchmark headlessly."""

from __future__ import annotations

from sapperbench.errors import EntryPointError, HarnessError, ModuleLoadError
from sapperbench.host import HostEnvironmentStub, install, installed, stub
from sapperbench.loader import entry_point, invoke, load_solver, run, run_sync

__all__ = [
    "EntryPointError",
    "HarnessError",
    "HostEnvironmentStub",
    "ModuleLoadError",
    "entry_point",
    "install",
    "installed",
    "invoke",
    "load_solver",
    "run",
    "run_sync",
    "stub",
]
