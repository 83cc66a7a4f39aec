import datetime
import json

import pytest
from inline_snapshot import snapshot

from letterboxed.puzzle_input import (
    DATES_BY_INPUT,
    INPUTS_BY_DATE,
    DatesByInput,
    InputsByDate,
    PuzzleInput,
    validate_side,
)

CHRISTMAS = datetime.date(2023, 12, 25)


def test_normalized():
    puzzle = PuzzleInput(CHRISTMAS, "CABXYZPONMLK")
    assert puzzle.normalized() == "ABCXYZNOPKLM"


def test_validate_side():
    assert validate_side("ABC") == "ABC"
    with pytest.raises(ValueError, match="exactly 3 letters"):
        validate_side("AB")
    with pytest.raises(ValueError, match="ASCII"):
        validate_side("ABÉ")
    with pytest.raises(ValueError, match="uppercase"):
        validate_side("abc")
    with pytest.raises(ValueError, match="uppercase"):
        validate_side("AbC")


def test_from_game_data():
    puzzle = PuzzleInput.from_game_data(
        {
            "id": 1234,
            "printDate": "2023-12-25",
            "sides": ["EIO", "NRS", "TDG", "LAU"],
            "ourSolution": ["EIDOLONS", "STAGING"],
        }
    )
    assert puzzle == PuzzleInput(CHRISTMAS, "EIONRSTDGLAU")


@pytest.mark.parametrize(
    "game_data,message",
    [
        ({"printDate": "2023-12-25"}, "'sides'"),
        ({"printDate": "2023-12-25", "sides": "EIONRSTDGLAU"}, "'sides'"),
        ({"printDate": "2023-12-25", "sides": ["EIO", "NRS", "TDG"]}, "4 sides"),
        ({"printDate": "2023-12-25", "sides": ["EIO", 7, "TDG", "LAU"]}, "right"),
        ({"printDate": "2023-12-25", "sides": ["EIO", "NRS", "TD", "LAU"]}, "TD"),
        ({"sides": ["EIO", "NRS", "TDG", "LAU"]}, "'printDate'"),
        ({"printDate": "Dec 25", "sides": ["EIO", "NRS", "TDG", "LAU"]}, "Dec 25"),
    ],
)
def test_from_game_data_errors(game_data, message):
    with pytest.raises(ValueError, match=message):
        PuzzleInput.from_game_data(game_data)


def test_inputs_by_date(tmp_path):
    inputs = InputsByDate()
    inputs.insert(PuzzleInput(datetime.date(2023, 12, 24), "ABCDEFGHIJKL"))
    inputs.insert(PuzzleInput(CHRISTMAS, "EIONRSTDGLAU"))
    inputs.insert(PuzzleInput(datetime.date(2023, 12, 23), "CABXYZPONMLK"))
    assert len(inputs) == 3

    inputs.write_to_file(str(tmp_path))
    with open(tmp_path / INPUTS_BY_DATE) as f:
        assert f.read() == snapshot(
            """\
{
  "2023-12-25": "EIONRSTDGLAU",
  "2023-12-24": "ABCDEFGHIJKL",
  "2023-12-23": "CABXYZPONMLK"
}"""
        )

    again = InputsByDate.read_from_file(str(tmp_path))
    assert again.inputs == inputs.inputs
    assert [*again.inputs] == [
        CHRISTMAS,
        datetime.date(2023, 12, 24),
        datetime.date(2023, 12, 23),
    ]

    # Re-inserting a date replaces its input.
    again.insert(PuzzleInput(CHRISTMAS, "ABCXYZNOPKLM"))
    assert len(again) == 3
    assert again.inputs[CHRISTMAS] == "ABCXYZNOPKLM"


def test_dates_by_input(tmp_path):
    dates = DatesByInput()
    dates.insert(PuzzleInput(CHRISTMAS, "CABXYZPONMLK"))
    dates.insert(PuzzleInput(datetime.date(2023, 12, 24), "EIONRSTDGLAU"))
    assert dates.get("ABCXYZNOPKLM") == CHRISTMAS
    assert dates.get("BCAYZXOPNLMK") == CHRISTMAS
    assert dates.get("ABCDEFGHIJKL") is None

    dates.write_to_file(str(tmp_path))
    with open(tmp_path / DATES_BY_INPUT) as f:
        assert json.load(f) == snapshot(
            {"ABCXYZNOPKLM": "2023-12-25", "EIONRSDGTALU": "2023-12-24"}
        )
    assert DatesByInput.read_from_file(str(tmp_path)).dates == dates.dates


def test_read_from_file_or_create(tmp_path):
    # Missing files
    with pytest.raises(FileNotFoundError):
        InputsByDate.read_from_file(str(tmp_path))
    assert len(InputsByDate.read_from_file_or_create(str(tmp_path))) == 0
    assert len(DatesByInput.read_from_file_or_create(str(tmp_path))) == 0

    # Malformed files
    (tmp_path / INPUTS_BY_DATE).write_text("{not json")
    (tmp_path / DATES_BY_INPUT).write_text('["ABCDEFGHIJKL"]')
    with pytest.raises(ValueError):
        InputsByDate.read_from_file(str(tmp_path))
    with pytest.raises(ValueError):
        DatesByInput.read_from_file(str(tmp_path))
    assert len(InputsByDate.read_from_file_or_create(str(tmp_path))) == 0
    assert len(DatesByInput.read_from_file_or_create(str(tmp_path))) == 0
