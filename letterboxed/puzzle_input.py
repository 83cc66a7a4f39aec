"""History of daily puzzles, stored as two JSON files.

inputsByDate.json maps each date (newest first) to that day's twelve letters.
datesByInput.json maps each normalized board to the date it was used, so a
board entered by hand can be matched to its puzzle.
"""

import dataclasses
import datetime
import json
import os
from typing import Any, Self

from letterboxed.board import canonicalize
from letterboxed.letter_group import LETTERS_PER_SIDE, NUM_SIDES

INPUTS_BY_DATE = "inputsByDate.json"
DATES_BY_INPUT = "datesByInput.json"

SIDE_NAMES = ("top", "right", "bottom", "left")


def validate_side(side: str) -> str:
    if not side.isascii():
        raise ValueError(f"The side {side!r} is not an ASCII string.")
    if len(side) != LETTERS_PER_SIDE:
        raise ValueError(
            f"The side {side!r} does not have exactly {LETTERS_PER_SIDE} letters."
        )
    if not all("A" <= letter <= "Z" for letter in side):
        raise ValueError(f"The letters of the side {side!r} are not all uppercase.")
    return side


@dataclasses.dataclass(frozen=True)
class PuzzleInput:
    date: datetime.date
    input: str
    """The four sides, concatenated: top, right, bottom, left."""

    def normalized(self) -> str:
        """Sort the letters within each side, e.g. CABXYZPONMLK -> ABCXYZNOPKLM."""
        return canonicalize(self.input)

    @classmethod
    def from_game_data(cls, game_data: dict[str, Any]) -> Self:
        """Parse the gameData object embedded in the puzzle's web page."""
        sides = game_data.get("sides")
        if not isinstance(sides, list):
            raise ValueError("Missing or invalid 'sides' field")
        if len(sides) != NUM_SIDES:
            raise ValueError(f"Expected {NUM_SIDES} sides, got {len(sides)}")
        for side, name in zip(sides, SIDE_NAMES):
            if not isinstance(side, str):
                raise ValueError(f"Non-string value found in 'sides' {name} value.")
            validate_side(side)

        print_date = game_data.get("printDate")
        if not isinstance(print_date, str):
            raise ValueError("Missing or invalid 'printDate' field")
        try:
            date = datetime.date.fromisoformat(print_date)
        except ValueError:
            raise ValueError(f"Failed to parse printDate {print_date!r} as a date")

        return cls(date=date, input="".join(sides))


class InputsByDate:
    """Puzzle inputs keyed by date, newest first."""

    def __init__(self, inputs: dict[datetime.date, str] | None = None):
        self.inputs = dict(sorted((inputs or {}).items(), reverse=True))

    def insert(self, puzzle_input: PuzzleInput):
        self.inputs[puzzle_input.date] = puzzle_input.input
        self.inputs = dict(sorted(self.inputs.items(), reverse=True))

    def to_json(self) -> dict[str, str]:
        return {date.isoformat(): input for date, input in self.inputs.items()}

    @classmethod
    def from_json(cls, data: dict[str, str]) -> Self:
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
        return cls(
            {datetime.date.fromisoformat(date): input for date, input in data.items()}
        )

    @classmethod
    def read_from_file(cls, directory: str) -> Self:
        with open(os.path.join(directory, INPUTS_BY_DATE)) as f:
            return cls.from_json(json.load(f))

    @classmethod
    def read_from_file_or_create(cls, directory: str) -> Self:
        try:
            return cls.read_from_file(directory)
        except (OSError, TypeError, ValueError):
            return cls()

    def write_to_file(self, directory: str):
        with open(os.path.join(directory, INPUTS_BY_DATE), "w") as f:
            json.dump(self.to_json(), f, indent=2)

    def __len__(self):
        return len(self.inputs)


class DatesByInput:
    """Puzzle dates keyed by normalized input."""

    def __init__(self, dates: dict[str, datetime.date] | None = None):
        self.dates = dict(sorted((dates or {}).items()))

    def insert(self, puzzle_input: PuzzleInput):
        self.dates[puzzle_input.normalized()] = puzzle_input.date
        self.dates = dict(sorted(self.dates.items()))

    def get(self, board: str) -> datetime.date | None:
        """When was this board used? The order of letters within a side doesn't matter."""
        return self.dates.get(canonicalize(board))

    def to_json(self) -> dict[str, str]:
        return {input: date.isoformat() for input, date in self.dates.items()}

    @classmethod
    def from_json(cls, data: dict[str, str]) -> Self:
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
        return cls(
            {input: datetime.date.fromisoformat(date) for input, date in data.items()}
        )

    @classmethod
    def read_from_file(cls, directory: str) -> Self:
        with open(os.path.join(directory, DATES_BY_INPUT)) as f:
            return cls.from_json(json.load(f))

    @classmethod
    def read_from_file_or_create(cls, directory: str) -> Self:
        try:
            return cls.read_from_file(directory)
        except (OSError, TypeError, ValueError):
            return cls()

    def write_to_file(self, directory: str):
        with open(os.path.join(directory, DATES_BY_INPUT), "w") as f:
            json.dump(self.to_json(), f, indent=2)

    def __len__(self):
        return len(self.dates)
