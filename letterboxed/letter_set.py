"""An immutable set of letters, stored as a 26-bit integer."""

from dataclasses import dataclass
from typing import Iterator, Self

from letterboxed.letters import LETTER_A, NUM_LETTERS, compress_letter

BITS_PER_LETTER = 5
LETTER_MASK = 0b1_1111


@dataclass(frozen=True, slots=True, order=True)
class LetterSet:
    """Bit i is set iff the i-th letter of the alphabet is a member."""

    bits: int = 0

    @staticmethod
    def empty() -> "LetterSet":
        return EMPTY

    @staticmethod
    def from_raw_letters(letters: int) -> "LetterSet":
        """Collect the letters of a packed LetterSequence integer."""
        bits = 0
        while letters != 1:
            letter = letters & LETTER_MASK
            assert not bits & (1 << letter), "letters should be distinct"
            bits |= 1 << letter
            letters >>= BITS_PER_LETTER
        return LetterSet(bits)

    @staticmethod
    def from_ascii(letters: str) -> "LetterSet":
        letter_set = EMPTY
        for letter in letters:
            letter_set = letter_set.insert(compress_letter(letter))
        return letter_set

    def __len__(self):
        return self.bits.bit_count()

    def is_empty(self):
        return self.bits == 0

    def has(self, letter: int) -> bool:
        return self.bits & (1 << letter) != 0

    def has_ascii(self, letter: str) -> bool:
        return "A" <= letter <= "Z" and self.has(ord(letter) - LETTER_A)

    def insert(self, letter: int) -> Self:
        assert 0 <= letter < NUM_LETTERS, "letter should be within A through Z"
        assert not self.has(letter), "set should not already contain the letter"
        return LetterSet(self.bits | (1 << letter))

    def intersection(self, other: Self) -> Self:
        return LetterSet(self.bits & other.bits)

    def union(self, other: Self) -> Self:
        return LetterSet(self.bits | other.bits)

    def __iter__(self) -> Iterator[str]:
        bits = self.bits
        letter = LETTER_A
        while bits:
            if bits & 1:
                yield chr(letter)
            bits >>= 1
            letter += 1

    def __str__(self):
        return "[" + "".join(self) + "]"

    def __repr__(self):
        return f"LetterSet({str(self)!r})"


EMPTY = LetterSet()
