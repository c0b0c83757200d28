"""
Entry point for running a Venus explorer mission.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import IO, Iterator, List, Optional

from ..orientation import Orientation
from ..pipeline import StepEvent, process_input
from ..recording import TraceRecorder, TraceValidationError
from ..result import Err

LOGGER = logging.getLogger("venus.cli")

EXIT_OK = 0
EXIT_FAILURE = 1


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Move explorers around a landing area and report their final orientations."
    )
    parser.add_argument(
        "--input",
        type=Path,
        help="Mission file to read. Defaults to standard input.",
    )
    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format for results and errors (default: text).",
    )
    parser.add_argument(
        "--trace",
        type=Path,
        help="Optional JSONL file receiving every explorer step of a successful run.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        type=str.upper,
        help="Diagnostics level written to stderr (default: WARNING).",
    )
    return parser.parse_args(argv)


def iter_lines(handle: IO[str]) -> Iterator[str]:
    """Yield lines from ``handle`` with their line terminators removed."""

    for line in handle:
        yield line.rstrip("\r\n")


def render_text(orientations: List[Orientation]) -> str:
    return "\n".join(str(orientation) for orientation in orientations)


def render_json(orientations: List[Orientation]) -> str:
    return json.dumps([orientation.to_dict() for orientation in orientations])


def write_trace(path: Path, events: List[StepEvent]) -> int:
    with TraceRecorder(path) as recorder:
        for event in events:
            recorder.observe(event)
        return recorder.count


def run(handle: IO[str], args: argparse.Namespace, out: IO[str]) -> int:
    events: List[StepEvent] = []
    observer = events.append if args.trace else None
    result = process_input(iter_lines(handle), observer=observer)

    if isinstance(result, Err):
        LOGGER.info("Mission rejected: %s", result.message)
        if args.format == "json":
            print(json.dumps({"error": result.display()}), file=out)
        else:
            print(result.display(), file=out)
        return EXIT_FAILURE

    if args.trace:
        try:
            written = write_trace(args.trace, events)
        except TraceValidationError as exc:
            details = "\n".join(f"- {err}" for err in exc.errors)
            raise SystemExit(f"Unable to write trace: {exc}\n{details}") from exc
        except OSError as exc:
            raise SystemExit(f"Unable to write trace {args.trace}: {exc}") from exc
        LOGGER.info("Wrote %d trace entries to %s", written, args.trace)

    if args.format == "json":
        print(render_json(result.value), file=out)
    elif result.value:
        print(render_text(result.value), file=out)
    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(message)s")

    if args.input is None:
        LOGGER.info("Reading mission from stdin")
        return run(sys.stdin, args, sys.stdout)

    LOGGER.info("Reading mission from %s", args.input)
    try:
        handle = args.input.open("r", encoding="utf-8")
    except OSError as exc:
        raise SystemExit(f"Unable to open mission file {args.input}: {exc}") from exc
    with handle:
        return run(handle, args, sys.stdout)


__all__ = ["iter_lines", "main", "parse_args", "render_json", "render_text", "run"]


if __name__ == "__main__":
    raise SystemExit(main())
