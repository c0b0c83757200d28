"""
Helpers for the explorer step trace JSON schema.
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict

from jsonschema import Draft7Validator

TRACE_SOURCE = "venus.pipeline"

TRACE_ENTRY_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["source", "explorer", "step", "instruction", "orientation"],
    "properties": {
        "source": {"type": "string"},
        "explorer": {"type": "integer", "minimum": 0},
        "step": {"type": "integer", "minimum": 0},
        "instruction": {"enum": ["L", "R", "M", None]},
        "orientation": {
            "type": "object",
            "required": ["x", "y", "heading"],
            "properties": {
                "x": {"type": "integer"},
                "y": {"type": "integer"},
                "heading": {"enum": ["N", "E", "S", "W"]},
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": True,
}


def load_schema() -> Dict[str, Any]:
    """Return a copy of the step trace schema."""

    return deepcopy(TRACE_ENTRY_SCHEMA)


def make_validator() -> Draft7Validator:
    """Construct a Draft7 validator for step trace entries."""

    return Draft7Validator(load_schema())


__all__ = ["TRACE_ENTRY_SCHEMA", "TRACE_SOURCE", "load_schema", "make_validator"]
