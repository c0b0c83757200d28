from venus.orientation import Heading, Instruction, Orientation
from venus.pipeline import StepEvent, process_input
from venus.result import Err, Ok


def test_two_explorers_reach_expected_orientations():
    result = process_input(iter(["5 5", "1 2 N", "LMLMLMLMM", "3 3 E", "MMRMMRMRRM"]))
    assert result == Ok([Orientation(1, 3, Heading.N), Orientation(5, 1, Heading.E)])
    assert [str(orientation) for orientation in result.value] == ["1 3 N", "5 1 E"]


def test_single_explorer_turns_around():
    result = process_input(iter(["10 10", "1 1 N", "MRRMR"]))
    assert result == Ok([Orientation(1, 1, Heading.W)])


def test_initial_position_outside_landing_area():
    result = process_input(iter(["5 5", "6 6 N", "MRRMR"]))
    assert result == Err("Explorer has initial position (6 6 N) which is outside the landing area")
    assert result.display() == "Error: Explorer has initial position (6 6 N) which is outside the landing area"


def test_first_explorer_outside_landing_area_wins():
    result = process_input(iter(["5 5", "1 1 N", "M", "0 6 S", "M", "7 0 E", "M"]))
    assert result == Err("Explorer has initial position (0 6 S) which is outside the landing area")


def test_no_input_lines():
    assert process_input(iter([])) == Err("No input lines")


def test_landing_area_error_is_propagated():
    assert process_input(["", "1 2 N", "M"]) == Err(
        "Expected upper right coordinate of landing area but found an empty line"
    )


def test_missing_instructions_is_propagated():
    result = process_input(["5 5", "1 2 N", "LMLM", "3 3 E"])
    assert result == Err("Missing explorer instructions after line '3 3 E'")


def test_landing_area_without_explorers():
    assert process_input(["5 5"]) == Ok([])


def test_explorer_may_leave_landing_area_after_start():
    result = process_input(["1 1", "1 1 N", "MMM"])
    assert result == Ok([Orientation(1, 4, Heading.N)])


def test_observer_sees_start_and_every_step():
    events = []
    result = process_input(["5 5", "1 2 N", "LM", "0 0 E", "R"], observer=events.append)

    assert isinstance(result, Ok)
    assert events == [
        StepEvent(0, 0, None, Orientation(1, 2, Heading.N)),
        StepEvent(0, 1, Instruction.LEFT, Orientation(1, 2, Heading.W)),
        StepEvent(0, 2, Instruction.MOVE, Orientation(0, 2, Heading.W)),
        StepEvent(1, 0, None, Orientation(0, 0, Heading.E)),
        StepEvent(1, 1, Instruction.RIGHT, Orientation(0, 0, Heading.S)),
    ]


def test_observer_not_called_when_a_later_explorer_is_rejected():
    events = []
    result = process_input(["5 5", "1 2 N", "LM", "9 9 E", "R"], observer=events.append)
    assert isinstance(result, Err)
    assert events == []
