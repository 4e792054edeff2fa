import argparse
import os
import sys
from pathlib import Path

from sapperbench import host, loader
from sapperbench.errors import HarnessError

DEFAULT_SOLVER = Path("public") / "sapper" / "solver.py"
_TRUTHY = {"1", "true", "yes", "on"}


def _trace_enabled() -> bool:
    return os.environ.get("SAPPERBENCH_TRACE", "").strip().lower() in _TRUTHY


def _trace(message: str) -> None:
    print(f"sapperbench: {message}", file=sys.stderr)


def _find_project_root(start: Path) -> Path:
    for parent in [start] + list(start.parents):
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            return parent
    return start


def resolve_solver_location(cli_value: str | None) -> str:
    if cli_value:
        return cli_value
    env_value = os.environ.get("SAPPERBENCH_SOLVER", "").strip()
    if env_value:
        return env_value
    return str(_find_project_root(Path.cwd()) / DEFAULT_SOLVER)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sapperbench",
        description="Run a solver's bench() entry point without a display host.",
    )
    parser.add_argument(
        "solver",
        nargs="?",
        help=(
            "Solver file path or dotted module name "
            f"(default: $SAPPERBENCH_SOLVER or {DEFAULT_SOLVER})."
        ),
    )
    parser.add_argument(
        "--entry",
        default=os.environ.get("SAPPERBENCH_ENTRY") or loader.DEFAULT_ENTRY,
        help="Name of the zero-argument export to invoke (default: bench).",
    )
    args = parser.parse_args(argv)

    trace = _trace if _trace_enabled() else None
    location = resolve_solver_location(args.solver)

    host.install()
    if trace is not None:
        trace(f"host stub installed: {', '.join(host.AMBIENT_NAMES)}")

    try:
        loader.run_sync(location, entry=args.entry, trace=trace)
    except HarnessError as exc:
        print(f"sapperbench: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
