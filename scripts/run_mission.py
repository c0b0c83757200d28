#!/usr/bin/env python3
"""
Run a Venus explorer mission from a file or stdin.

Example:
    python scripts/run_mission.py --input missions/sample.txt --trace runs/sample_trace.jsonl
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure src/ on sys.path for venus.* imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from venus.cli.run_mission import main


if __name__ == "__main__":
    raise SystemExit(main())
