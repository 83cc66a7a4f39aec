"""Classify letters by which side of the board they sit on."""

from enum import IntEnum
from typing import Callable

from letterboxed.letters import NUM_LETTERS, compress_letter

LETTERS_PER_SIDE = 3
NUM_SIDES = 4
BOARD_SIZE = LETTERS_PER_SIDE * NUM_SIDES


class LetterGroup(IntEnum):
    INVALID = 0
    SIDE1 = 1
    SIDE2 = 2
    SIDE3 = 3
    SIDE4 = 4

    def can_be_adjacent_to(self, other: "LetterGroup") -> bool:
        """Two letters can be adjacent in a word if they're on different sides."""
        return (
            self != LetterGroup.INVALID
            and other != LetterGroup.INVALID
            and self != other
        )


def get_letter_groups(board: str) -> tuple[LetterGroup, ...]:
    """Returns a table from compressed letter -> LetterGroup.

    The board is four sides of three letters, e.g. "ABCDEFGHIJKL" has sides
    ABC, DEF, GHI and JKL. Letters which aren't on the board are INVALID.
    """
    assert len(board) == BOARD_SIZE, board
    table = [LetterGroup.INVALID] * NUM_LETTERS
    for i, letter in enumerate(board):
        table[compress_letter(letter)] = LetterGroup(1 + i // LETTERS_PER_SIDE)
    return tuple(table)


def make_letter_group(board: str) -> Callable[[int], LetterGroup]:
    return get_letter_groups(board).__getitem__
