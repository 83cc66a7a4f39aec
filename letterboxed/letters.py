"""Conversions between ASCII letters and their 0-25 "compressed" form."""

LETTER_A = ord("A")
NUM_LETTERS = 26


def compress_letter(letter: str) -> int:
    assert "A" <= letter <= "Z", letter
    return ord(letter) - LETTER_A


def decompress_letter(letter: int) -> str:
    assert 0 <= letter < NUM_LETTERS, letter
    return chr(LETTER_A + letter)
