"""
JSONL trace recorder for explorer steps.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import IO, List, Mapping, Optional

from jsonschema import Draft7Validator, ValidationError

from ..telemetry import entry_from_event, make_validator


class TraceValidationError(RuntimeError):
    """A step payload did not match the trace schema; ``errors`` lists each violation."""

    def __init__(self, message: str, *, errors: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])


class TraceRecorder:
    """
    Append explorer steps to a JSON Lines file, one object per line.

    Parameters
    ----------
    path:
        Trace file to create; missing parent directories are made first.
    validate:
        Check every payload against the trace schema before it is written
        (default ``True``). Invalid payloads are never written.
    """

    def __init__(self, path: str | Path, *, validate: bool = True) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._handle: IO[str] = self.path.open("w", encoding="utf-8")
        self._validator: Optional[Draft7Validator] = make_validator() if validate else None
        self.count = 0

    def record(self, payload: Mapping[str, object]) -> None:
        if self._validator is not None:
            errors = sorted(
                self._validator.iter_errors(payload),
                key=lambda err: [str(part) for part in err.absolute_path],
            )
            if errors:
                raise TraceValidationError(
                    f"Trace payload failed validation: {errors[0].message}",
                    errors=[_describe(err) for err in errors],
                )

        self._handle.write(json.dumps(payload, ensure_ascii=False) + "\n")
        self._handle.flush()
        self.count += 1

    def observe(self, event) -> None:
        """Pipeline observer hook: record a ``StepEvent``."""

        self.record(entry_from_event(event))

    def close(self) -> None:
        if self._handle.closed:
            return
        self._handle.close()

    def __enter__(self) -> "TraceRecorder":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def _describe(error: ValidationError) -> str:
    path = ".".join(str(part) for part in error.absolute_path)
    return f"{path}: {error.message}" if path else error.message


__all__ = ["TraceRecorder", "TraceValidationError"]
