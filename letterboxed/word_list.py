"""Load a dictionary and filter it down to the words that work on a board."""

import functools
from typing import Iterable, Sequence

from letterboxed.letter_group import make_letter_group
from letterboxed.letter_sequence import CAPACITY, LetterSequence

MIN_WORD_LENGTH = 3
# An 11-letter word can't be part of a solution: there's no room for a
# second word, and it doesn't use all twelve letters alone.
MAX_CHAINED_WORD_LENGTH = 10


def is_candidate_word(word: str) -> bool:
    """Could this word appear in a solution to some puzzle?"""
    size = len(word)
    if not (MIN_WORD_LENGTH <= size <= MAX_CHAINED_WORD_LENGTH or size == CAPACITY):
        return False
    if not word.isascii() or not word.isalpha():
        return False
    return len(set(word.upper())) == size


def read_word_list(lines: Iterable[str]) -> list[str]:
    """Candidate words, uppercased. Leading "//" comment lines are skipped."""
    words = []
    in_header = True
    for line in lines:
        line = line.strip()
        if in_header and line.startswith("//"):
            continue
        in_header = False
        if is_candidate_word(line):
            words.append(line.upper())
    return words


@functools.cache
def load_words(dict_file: str) -> tuple[LetterSequence, ...]:
    with open(dict_file) as f:
        return tuple(LetterSequence.from_str(word) for word in read_word_list(f))


def valid_words_for_board(
    board: str, words: Sequence[LetterSequence]
) -> list[LetterSequence]:
    letter_group = make_letter_group(board)
    return [word for word in words if word.is_valid_word(letter_group)]
