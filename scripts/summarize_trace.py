#!/usr/bin/env python3
"""
Aggregate explorer step traces into a per-explorer CSV summary.

The script computes, for every explorer of every trace:
  * instruction counts (moves and turns)
  * starting and final orientation
  * bounding box and number of distinct cells visited

Example:
    python scripts/summarize_trace.py \
        --input runs/sample_trace.jsonl \
        --output runs/sample_summary.csv
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

try:
    import pandas as pd
except ImportError as exc:  # pragma: no cover - defensive guard
    raise SystemExit(
        "pandas is required for summarize_trace.py. "
        "Install project dependencies (pip install -e .)."
    ) from exc

# Ensure src/ on sys.path for venus.* imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from venus.telemetry import iter_entries


LOGGER = logging.getLogger("summarize_trace")
SUMMARY_COLUMNS = [
    "run_id",
    "source_path",
    "explorer",
    "steps",
    "moves",
    "turns",
    "start_x",
    "start_y",
    "start_heading",
    "final_x",
    "final_y",
    "final_heading",
    "min_x",
    "max_x",
    "min_y",
    "max_y",
    "cells_visited",
]


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Summarize explorer step traces.")
    parser.add_argument(
        "--input",
        required=True,
        nargs="+",
        help="One or more trace JSONL files or directories containing them.",
    )
    parser.add_argument(
        "--output",
        required=True,
        type=Path,
        help="Destination CSV file for the per-explorer summary.",
    )
    parser.add_argument(
        "--run-id",
        help="Optional run identifier applied to all records. "
        "Defaults to each file's stem when omitted.",
    )
    parser.add_argument(
        "--print-summary",
        action="store_true",
        help="Log the aggregated summary after writing the CSV file.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Abort on malformed trace lines instead of skipping them.",
    )
    return parser.parse_args(argv)


def resolve_inputs(paths: Sequence[str]) -> List[Path]:
    files: List[Path] = []
    for item in paths:
        path = Path(item)
        if not path.exists():
            LOGGER.warning("Input path not found: %s", path)
            continue
        if path.is_dir():
            files.extend(sorted(path.glob("*.jsonl")))
        else:
            files.append(path)
    return files


def collect_records(
    paths: Iterable[Path],
    *,
    run_id_override: Optional[str],
    strict: bool,
) -> List[Dict[str, Any]]:
    records: List[Dict[str, Any]] = []
    for path in paths:
        run_id = run_id_override or path.stem
        for entry in iter_entries(path, strict=strict):
            records.append(_flatten(entry, run_id=run_id, source_path=str(path)))
    return records


def _flatten(entry: Mapping[str, Any], *, run_id: str, source_path: str) -> Dict[str, Any]:
    orientation = entry["orientation"]
    return {
        "run_id": run_id,
        "source_path": source_path,
        "explorer": int(entry["explorer"]),
        "step": int(entry["step"]),
        "instruction": entry.get("instruction"),
        "x": int(orientation["x"]),
        "y": int(orientation["y"]),
        "heading": orientation["heading"],
    }


def build_summary(records: Sequence[Mapping[str, Any]]) -> pd.DataFrame:
    if not records:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    df = pd.DataFrame(records).sort_values(["run_id", "source_path", "explorer", "step"])
    df["is_move"] = df["instruction"].eq("M")
    df["is_turn"] = df["instruction"].isin(["L", "R"])
    df["cell"] = list(zip(df["x"], df["y"]))

    summary = (
        df.groupby(["run_id", "source_path", "explorer"], sort=True)
        .agg(
            steps=("step", "max"),
            moves=("is_move", "sum"),
            turns=("is_turn", "sum"),
            start_x=("x", "first"),
            start_y=("y", "first"),
            start_heading=("heading", "first"),
            final_x=("x", "last"),
            final_y=("y", "last"),
            final_heading=("heading", "last"),
            min_x=("x", "min"),
            max_x=("x", "max"),
            min_y=("y", "min"),
            max_y=("y", "max"),
            cells_visited=("cell", "nunique"),
        )
        .reset_index()
    )
    for column in ("steps", "moves", "turns", "cells_visited"):
        summary[column] = summary[column].astype(int)
    return summary[SUMMARY_COLUMNS]


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    args = parse_args(argv)

    inputs = resolve_inputs(args.input)
    if not inputs:
        LOGGER.error("No trace files found for inputs: %s", ", ".join(args.input))
        return 1

    try:
        records = collect_records(inputs, run_id_override=args.run_id, strict=args.strict)
    except ValueError as exc:
        LOGGER.error("%s", exc)
        return 1

    summary = build_summary(records)
    args.output.parent.mkdir(parents=True, exist_ok=True)
    summary.to_csv(args.output, index=False)
    LOGGER.info("Wrote %d explorer summaries to %s", len(summary), args.output)

    if args.print_summary:
        LOGGER.info("%s", summary.to_string(index=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
