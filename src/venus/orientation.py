"""
Orientation state machine for explorers on the landing area.

An orientation is an immutable ``(x, y, heading)`` value. Instructions never
mutate it; each one yields the next orientation through the transition
tables below.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import reduce
from typing import Dict, Iterable, Iterator, Tuple, Union


class Heading(str, Enum):
    N = "N"
    E = "E"
    S = "S"
    W = "W"


class Instruction(str, Enum):
    LEFT = "L"
    RIGHT = "R"
    MOVE = "M"


# Clockwise order; turning right advances one slot, turning left goes back one.
_COMPASS: Tuple[Heading, ...] = (Heading.N, Heading.E, Heading.S, Heading.W)

_DELTAS: Dict[Heading, Tuple[int, int]] = {
    Heading.N: (0, 1),
    Heading.E: (1, 0),
    Heading.S: (0, -1),
    Heading.W: (-1, 0),
}

RIGHT_OF: Dict[Heading, Heading] = {
    heading: _COMPASS[(idx + 1) % len(_COMPASS)] for idx, heading in enumerate(_COMPASS)
}
LEFT_OF: Dict[Heading, Heading] = {
    heading: _COMPASS[(idx - 1) % len(_COMPASS)] for idx, heading in enumerate(_COMPASS)
}


@dataclass(frozen=True)
class Orientation:
    """Position and compass heading of a single explorer."""

    x: int
    y: int
    heading: Heading

    @classmethod
    def from_position(cls, position) -> "Orientation":
        """Build the initial orientation from a parsed ``Position``."""
        return cls(x=position.x, y=position.y, heading=Heading(position.heading))

    def move(self, instruction: Union[Instruction, str]) -> "Orientation":
        return move(self, instruction)

    def to_dict(self) -> Dict[str, object]:
        return {"x": self.x, "y": self.y, "heading": self.heading.value}

    def __str__(self) -> str:
        return f"{self.x} {self.y} {self.heading.value}"


def move(orientation: Orientation, instruction: Union[Instruction, str]) -> Orientation:
    """
    Apply a single instruction and return the resulting orientation.

    ``M`` advances one unit along the current heading, ``R`` and ``L`` rotate
    a quarter turn in place. Characters outside ``L``/``R``/``M`` raise
    ``ValueError``; the instruction-line parser rejects them before they can
    reach this point.
    """

    step = Instruction(instruction)
    heading = orientation.heading
    if step is Instruction.MOVE:
        dx, dy = _DELTAS[heading]
        return Orientation(orientation.x + dx, orientation.y + dy, heading)
    if step is Instruction.RIGHT:
        return Orientation(orientation.x, orientation.y, RIGHT_OF[heading])
    return Orientation(orientation.x, orientation.y, LEFT_OF[heading])


def apply_instructions(orientation: Orientation, instructions: Iterable[str]) -> Orientation:
    """Fold ``move`` over ``instructions`` from left to right."""
    return reduce(move, instructions, orientation)


def iter_moves(
    orientation: Orientation, instructions: Iterable[str]
) -> Iterator[Tuple[Instruction, Orientation]]:
    """Yield ``(instruction, orientation_after)`` for every applied instruction."""
    current = orientation
    for raw in instructions:
        step = Instruction(raw)
        current = move(current, step)
        yield step, current


__all__ = [
    "Heading",
    "Instruction",
    "LEFT_OF",
    "Orientation",
    "RIGHT_OF",
    "apply_instructions",
    "iter_moves",
    "move",
]
