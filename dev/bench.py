#!/usr/bin/env python3
from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from sapperbench import host, loader  # noqa: E402

host.install()
loader.run_sync(ROOT / "public" / "sapper" / "solver.py")
