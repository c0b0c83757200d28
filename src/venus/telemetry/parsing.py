"""
Conversion and loading helpers for explorer step traces.

A trace is a JSON Lines file with one record per step::

    {
        "source": "venus.pipeline",
        "explorer": 0,
        "step": 3,
        "instruction": "M",
        "orientation": {"x": 1, "y": 3, "heading": "N"},
    }

Step ``0`` carries ``"instruction": null`` and records where the explorer
started.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Iterator

from jsonschema import ValidationError

from .schema import TRACE_SOURCE, make_validator

JsonDict = Dict[str, object]

LOGGER = logging.getLogger("venus.telemetry")


def entry_from_event(event, *, source: str = TRACE_SOURCE) -> JsonDict:
    """Build a trace payload from a pipeline ``StepEvent``."""

    instruction = event.instruction.value if event.instruction is not None else None
    return {
        "source": source,
        "explorer": event.explorer_index,
        "step": event.step_index,
        "instruction": instruction,
        "orientation": event.orientation.to_dict(),
    }


def iter_entries(path: Path | str, *, strict: bool = False) -> Iterator[JsonDict]:
    """
    Yield validated trace entries from a JSONL file.

    Parameters
    ----------
    path:
        Path to a JSON Lines trace written by ``TraceRecorder``.
    strict:
        When ``True`` malformed or schema-invalid lines raise ``ValueError``;
        otherwise they are logged and skipped.
    """

    validator = make_validator()
    file_path = Path(path)
    with file_path.open("r", encoding="utf-8") as handle:
        for line_number, line in enumerate(handle, 1):
            line = line.strip()
            if not line:
                continue
            try:
                raw = json.loads(line)
                validator.validate(raw)
            except (json.JSONDecodeError, ValidationError) as exc:
                message = f"Invalid trace entry in {file_path} line {line_number}: {exc}"
                if strict:
                    raise ValueError(message) from exc
                LOGGER.warning("%s", message)
                continue
            yield raw


def load_entries(path: Path | str, *, strict: bool = False) -> list[JsonDict]:
    """Return a list of trace entries from ``path``."""

    return list(iter_entries(path, strict=strict))


__all__ = ["entry_from_event", "iter_entries", "load_entries"]
