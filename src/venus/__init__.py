"""
Landing-area mission planner for Venus explorers.
"""

from .assembly import ExplorerRecord, assemble_explorers, assemble_single_explorer
from .orientation import Heading, Instruction, Orientation, apply_instructions, iter_moves, move
from .parsing import LandingArea, Position, parse_instructions, parse_landing_area, parse_position
from .pipeline import StepEvent, process_input
from .result import Err, Ok, Result

__all__ = [
    "Err",
    "ExplorerRecord",
    "Heading",
    "Instruction",
    "LandingArea",
    "Ok",
    "Orientation",
    "Position",
    "Result",
    "StepEvent",
    "apply_instructions",
    "assemble_explorers",
    "assemble_single_explorer",
    "iter_moves",
    "move",
    "parse_instructions",
    "parse_landing_area",
    "parse_position",
    "process_input",
]
