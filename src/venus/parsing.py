"""
Line parsers for the mission input format.

Each parser validates one raw line and returns ``Ok`` with a structured value
or ``Err`` with the operator-facing message. Patterns must match the whole
line; prefix matches are rejected.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .orientation import Heading
from .result import Err, Ok, Result

LANDING_AREA_PATTERN = re.compile(r"(?P<x>\d+) (?P<y>\d+)", re.ASCII)
POSITION_PATTERN = re.compile(r"(?P<x>\d+) (?P<y>\d+) (?P<heading>[NSEW])", re.ASCII)
INSTRUCTIONS_PATTERN = re.compile(r"[LRM]+")

# Blank means only space and control characters (U+0000..U+0020); NBSP and other
# Unicode spaces make a line malformed rather than empty.
_BLANK_CHARACTERS = "".join(chr(code) for code in range(0x21))

EMPTY_LANDING_AREA = "Expected upper right coordinate of landing area but found an empty line"
MALFORMED_LANDING_AREA = (
    "Upper right landing area coordinate must be in the format '<x-coord> <y-coord>' but was '{line}'"
)
EMPTY_POSITION = "Expected explorer position but found an empty line"
MALFORMED_POSITION = (
    "Explorer position must be in the format '<x-coord> <y-coord> <orientation>' but was '{line}'"
)
EMPTY_INSTRUCTIONS = "Expected explorer instructions but found an empty line"
MALFORMED_INSTRUCTIONS = "Explorer instructions must be in the format '<instruction string>' but was '{line}'"


@dataclass(frozen=True)
class LandingArea:
    """Inclusive upper-right corner of the landing area; lower-left is (0, 0)."""

    max_x: int
    max_y: int

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x <= self.max_x and 0 <= y <= self.max_y


@dataclass(frozen=True)
class Position:
    """Initial explorer position as read from the input."""

    x: int
    y: int
    heading: Heading


def parse_landing_area(line: str) -> Result[LandingArea]:
    match = LANDING_AREA_PATTERN.fullmatch(line)
    if match:
        return Ok(LandingArea(int(match.group("x")), int(match.group("y"))))
    if _is_blank(line):
        return Err(EMPTY_LANDING_AREA)
    return Err(MALFORMED_LANDING_AREA.format(line=line))


def parse_position(line: str) -> Result[Position]:
    match = POSITION_PATTERN.fullmatch(line)
    if match:
        return Ok(
            Position(
                x=int(match.group("x")),
                y=int(match.group("y")),
                heading=Heading(match.group("heading")),
            )
        )
    if _is_blank(line):
        return Err(EMPTY_POSITION)
    return Err(MALFORMED_POSITION.format(line=line))


def parse_instructions(line: str) -> Result[str]:
    """
    Validate an instruction line.

    Only a literally empty line is reported as missing; a line holding just
    whitespace is malformed.
    """

    if INSTRUCTIONS_PATTERN.fullmatch(line):
        return Ok(line)
    if line == "":
        return Err(EMPTY_INSTRUCTIONS)
    return Err(MALFORMED_INSTRUCTIONS.format(line=line))



def _is_blank(line: str) -> bool:
    return not line.strip(_BLANK_CHARACTERS)

__all__ = [
    "EMPTY_INSTRUCTIONS",
    "EMPTY_LANDING_AREA",
    "EMPTY_POSITION",
    "LandingArea",
    "MALFORMED_INSTRUCTIONS",
    "MALFORMED_LANDING_AREA",
    "MALFORMED_POSITION",
    "Position",
    "parse_instructions",
    "parse_landing_area",
    "parse_position",
]
