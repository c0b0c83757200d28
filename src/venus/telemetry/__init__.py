"""
Step trace schema and JSONL helpers.
"""

from .parsing import entry_from_event, iter_entries, load_entries
from .schema import TRACE_ENTRY_SCHEMA, TRACE_SOURCE, load_schema, make_validator

__all__ = [
    "TRACE_ENTRY_SCHEMA",
    "TRACE_SOURCE",
    "entry_from_event",
    "iter_entries",
    "load_entries",
    "load_schema",
    "make_validator",
]
