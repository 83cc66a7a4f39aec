"""Validation and normalization of board strings from outside the solver."""

import re

from letterboxed.letter_group import BOARD_SIZE, LETTERS_PER_SIDE

SEPARATORS = re.compile(r"[\s,\-_/|]+")


def normalize_board(board: str) -> str:
    """Turn user input like "eio nrs tdg lau" into "EIONRSTDGLAU".

    Raises ValueError if this isn't twelve distinct letters.
    """
    letters = SEPARATORS.sub("", board).upper()
    if len(letters) != BOARD_SIZE:
        raise ValueError(
            f"Expected a board with {BOARD_SIZE} letters, got {len(letters)}: {board!r}"
        )
    if not all("A" <= letter <= "Z" for letter in letters):
        raise ValueError(f"Board may only contain the letters A-Z: {board!r}")
    if len(set(letters)) != BOARD_SIZE:
        raise ValueError(f"Board letters must be distinct: {board!r}")
    return letters


def get_sides(board: str) -> list[str]:
    return [
        board[i : i + LETTERS_PER_SIDE] for i in range(0, len(board), LETTERS_PER_SIDE)
    ]


def canonicalize(board: str) -> str:
    """Sort the letters within each side, e.g. CABXYZPONMLK -> ABCXYZNOPKLM.

    Boards which only differ in the order of letters within a side have the
    same solutions.
    """
    return "".join("".join(sorted(side)) for side in get_sides(board))
