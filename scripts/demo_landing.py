#!/usr/bin/env python3
"""
Run the two-explorer landing demo on a 5x5 landing area.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Sequence

# Ensure src/ on sys.path for venus.* imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from venus import Err, Orientation, process_input


DEMO_MISSION: Sequence[str] = (
    "5 5",
    "1 2 N",
    "LMLMLMLMM",
    "3 3 E",
    "MMRMMRMRRM",
)


def run_landing_demo(lines: Sequence[str] = DEMO_MISSION) -> List[Orientation]:
    result = process_input(lines)
    if isinstance(result, Err):
        raise RuntimeError(result.display())
    return result.value


def main() -> int:
    print("Mission:")
    for line in DEMO_MISSION:
        print(f"  {line}")
    print("Final orientations:")
    for idx, orientation in enumerate(run_landing_demo()):
        print(f"{idx:02d}: {orientation}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
