"""
Pair explorer position lines with their instruction lines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List

from .parsing import Position, parse_instructions, parse_position
from .result import Err, Ok, Result

MISSING_INSTRUCTIONS = "Missing explorer instructions after line '{line}'"


@dataclass(frozen=True)
class ExplorerRecord:
    """Initial position and instruction string for one explorer."""

    position: Position
    instructions: str


def assemble_single_explorer(position_line: str, lines: Iterator[str]) -> Result[ExplorerRecord]:
    """
    Parse ``position_line`` and pull the instruction line that follows it from ``lines``.
    """

    position = parse_position(position_line)
    if isinstance(position, Err):
        return position

    instructions_line = next(lines, None)
    if instructions_line is None:
        return Err(MISSING_INSTRUCTIONS.format(line=position_line))

    instructions = parse_instructions(instructions_line)
    if isinstance(instructions, Err):
        return instructions
    return Ok(ExplorerRecord(position=position.value, instructions=instructions.value))


def assemble_explorers(lines: Iterable[str]) -> Result[List[ExplorerRecord]]:
    """
    Read explorer records until the line source is exhausted.

    Stops at the first malformed or missing line and returns its error; no
    partial list is returned in that case.
    """

    source = iter(lines)
    records: List[ExplorerRecord] = []
    for position_line in source:
        record = assemble_single_explorer(position_line, source)
        if isinstance(record, Err):
            return record
        records.append(record.value)
    return Ok(records)


__all__ = ["ExplorerRecord", "MISSING_INSTRUCTIONS", "assemble_explorers", "assemble_single_explorer"]
