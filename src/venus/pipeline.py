"""
End-to-end processing of a mission: landing area, explorer records, final orientations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from .assembly import ExplorerRecord, assemble_explorers
from .orientation import Instruction, Orientation, iter_moves
from .parsing import LandingArea, parse_landing_area
from .result import Err, Ok, Result

LOGGER = logging.getLogger("venus.pipeline")

NO_INPUT = "No input lines"
OUTSIDE_LANDING_AREA = "Explorer has initial position ({orientation}) which is outside the landing area"


@dataclass(frozen=True)
class StepEvent:
    """
    One step of an explorer's walk, reported to the pipeline observer.

    Attributes
    ----------
    explorer_index:
        Zero-based position of the explorer in the input.
    step_index:
        Zero for the starting orientation, then the one-based index of the
        instruction within the explorer's string.
    instruction:
        The instruction that was applied, ``None`` for the starting orientation.
    orientation:
        Orientation after the instruction.
    """

    explorer_index: int
    step_index: int
    instruction: Optional[Instruction]
    orientation: Orientation


StepObserver = Callable[[StepEvent], None]


def check_initial_position(landing_area: LandingArea, record: ExplorerRecord) -> Result[Orientation]:
    """Build the starting orientation and reject it when it lies outside ``landing_area``."""

    orientation = Orientation.from_position(record.position)
    if not landing_area.contains(orientation.x, orientation.y):
        return Err(OUTSIDE_LANDING_AREA.format(orientation=orientation))
    return Ok(orientation)


def run_explorer(
    index: int,
    orientation: Orientation,
    instructions: str,
    observer: Optional[StepObserver] = None,
) -> Orientation:
    # Bounds are not re-checked once the explorer starts moving.
    if observer is not None:
        observer(StepEvent(index, 0, None, orientation))
    current = orientation
    for step_index, (instruction, current) in enumerate(iter_moves(orientation, instructions), 1):
        if observer is not None:
            observer(StepEvent(index, step_index, instruction, current))
    return current


def process_input(
    lines: Iterable[str],
    observer: Optional[StepObserver] = None,
) -> Result[List[Orientation]]:
    """
    Parse the mission in ``lines`` and return every explorer's final orientation.

    Args:
        lines: Single-pass source of input lines without line terminators.
        observer: Optional callback invoked once per applied instruction.

    Returns:
        ``Ok`` with the final orientations in input order, or ``Err`` with the
        first failure. Every initial position is validated before any explorer
        moves, so the observer only sees steps of a run that succeeds.
    """

    source = iter(lines)
    first_line = next(source, None)
    if first_line is None:
        return Err(NO_INPUT)

    landing_area = parse_landing_area(first_line)
    if isinstance(landing_area, Err):
        return landing_area
    LOGGER.debug("Landing area upper right corner: %s %s", landing_area.value.max_x, landing_area.value.max_y)

    records = assemble_explorers(source)
    if isinstance(records, Err):
        return records
    LOGGER.debug("Assembled %d explorer record(s)", len(records.value))

    starts: List[Orientation] = []
    for index, record in enumerate(records.value):
        start = check_initial_position(landing_area.value, record)
        if isinstance(start, Err):
            LOGGER.debug("Explorer %d rejected: %s", index, start.message)
            return start
        starts.append(start.value)

    finals: List[Orientation] = []
    for index, (start, record) in enumerate(zip(starts, records.value)):
        final = run_explorer(index, start, record.instructions, observer)
        LOGGER.debug("Explorer %d moved from %s to %s", index, start, final)
        finals.append(final)
    return Ok(finals)


__all__ = [
    "NO_INPUT",
    "OUTSIDE_LANDING_AREA",
    "StepEvent",
    "StepObserver",
    "check_initial_position",
    "process_input",
    "run_explorer",
]
