"""Fatal harness errors."""

from __future__ import annotations


class HarnessError(RuntimeError):
    pass


class ModuleLoadError(HarnessError):
    def __init__(self, location: str, detail: str) -> None:
        super().__init__(f"failed to load solver {location}: {detail}")
        self.location = location
        self.detail = detail


class EntryPointError(HarnessError):
    def __init__(self, location: str, name: str, detail: str) -> None:
        super().__init__(f"solver {location} has no usable '{name}' entry: {detail}")
        self.location = location
        self.name = name
        self.detail = detail
