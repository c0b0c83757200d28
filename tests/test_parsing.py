import pytest

from venus.orientation import Heading
from venus.parsing import LandingArea, Position, parse_instructions, parse_landing_area, parse_position
from venus.result import Err, Ok


POSITION_FORMAT = "Explorer position must be in the format '<x-coord> <y-coord> <orientation>' but was '{}'"
INSTRUCTIONS_FORMAT = "Explorer instructions must be in the format '<instruction string>' but was '{}'"


@pytest.mark.parametrize("x, y", [(0, 0), (5, 5), (6, 7), (12345678901234567890, 3)])
def test_parse_landing_area_accepts_non_negative_pairs(x, y):
    assert parse_landing_area(f"{x} {y}") == Ok(LandingArea(x, y))


def test_parse_landing_area_empty_line():
    result = parse_landing_area("")
    assert result == Err("Expected upper right coordinate of landing area but found an empty line")
    assert parse_landing_area("   ") == result


@pytest.mark.parametrize("line", ["G ", "5", "5 5 5", "5  5", " 5 5", "-1 5", "+1 5", "5 5 "])
def test_parse_landing_area_rejects_malformed_lines(line):
    assert parse_landing_area(line) == Err(
        f"Upper right landing area coordinate must be in the format '<x-coord> <y-coord>' but was '{line}'"
    )


def test_parse_landing_area_rejects_non_ascii_digits():
    assert isinstance(parse_landing_area("\u0665 5"), Err)


def test_parse_position_accepts_each_heading():
    assert parse_position("1 2 N") == Ok(Position(1, 2, Heading.N))
    for heading in "NSEW":
        result = parse_position(f"0 9 {heading}")
        assert isinstance(result, Ok)
        assert result.value.heading is Heading(heading)


def test_parse_position_empty_line():
    assert parse_position("") == Err("Expected explorer position but found an empty line")


@pytest.mark.parametrize("line", ["1 2 3", "1 2 M", "1 2 NN", "1 2", "1 2 n", "1 2 N ", "a 2 N"])
def test_parse_position_rejects_malformed_lines(line):
    assert parse_position(line) == Err(POSITION_FORMAT.format(line))


def test_parse_instructions():
    assert parse_instructions("MLRLRM") == Ok("MLRLRM")
    assert parse_instructions("MLRLRP") == Err(INSTRUCTIONS_FORMAT.format("MLRLRP"))
    assert parse_instructions("") == Err("Expected explorer instructions but found an empty line")


@pytest.mark.parametrize("line", ["  ", "LM R", "lmr", "LMR\t"])
def test_parse_instructions_rejects_whitespace_and_other_characters(line):
    assert parse_instructions(line) == Err(INSTRUCTIONS_FORMAT.format(line))


def test_landing_area_contains_is_inclusive():
    area = LandingArea(5, 5)
    assert area.contains(0, 0)
    assert area.contains(5, 5)
    assert not area.contains(6, 5)
    assert not area.contains(5, -1)


def test_only_space_and_control_characters_count_as_empty():
    assert parse_landing_area("\t \x00") == Err("Expected upper right coordinate of landing area but found an empty line")
    assert parse_position("\x00") == Err("Expected explorer position but found an empty line")

    assert parse_landing_area("\u00a0") == Err(
        "Upper right landing area coordinate must be in the format '<x-coord> <y-coord>' but was '\u00a0'"
    )
    assert parse_position("\u2003") == Err(POSITION_FORMAT.format("\u2003"))
