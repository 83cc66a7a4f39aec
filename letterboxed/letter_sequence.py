"""A sequence of up to 12 distinct letters, packed into a single integer.

Each letter takes 5 bits, with the most recently appended letter in the low
bits. A "length-tracker" bit sits just above the first letter, so the length
can be recovered from the bit length alone. The empty sequence is 1.

    NICE -> 1 01101 01000 00010 00100
            ^   N     I     C     E
            length-tracker bit

A LetterSequence also carries the set of its letters and a Solution, which
records where the words end when the sequence is a chain of several words.
"""

from dataclasses import dataclass, field
from typing import Callable, Iterator, Self

from letterboxed.letter_group import LetterGroup
from letterboxed.letter_set import BITS_PER_LETTER, LETTER_MASK, LetterSet
from letterboxed.letters import compress_letter, decompress_letter
from letterboxed.solution import Solution

CAPACITY = 12


@dataclass(frozen=True, slots=True)
class LetterSequence:
    letters: int = 1
    letter_set: LetterSet = LetterSet()
    # Two chains with the same letters are interchangeable for the search,
    # however they're split into words.
    solution: Solution = field(default=Solution(), compare=False)

    @staticmethod
    def empty() -> "LetterSequence":
        return EMPTY

    @staticmethod
    def from_str(letters: str) -> "LetterSequence":
        assert len(letters) <= CAPACITY, letters
        sequence = EMPTY
        for letter in letters:
            sequence = sequence.with_letter(letter)
        return sequence

    def __len__(self):
        return (self.letters.bit_length() - 1) // BITS_PER_LETTER

    def is_empty(self):
        return self.letters == 1

    def has_all_letters(self):
        return len(self) == CAPACITY

    def word_count(self) -> int:
        return self.solution.word_count()

    def with_letter(self, letter: str) -> Self:
        assert len(self) < CAPACITY, f"{self} is full"
        c = compress_letter(letter)
        return LetterSequence(
            (self.letters << BITS_PER_LETTER) | c,
            self.letter_set.insert(c),
            self.solution.extend_top_word(),
        )

    def cut_from_start(self, n: int) -> Self:
        """Remove the first n letters."""
        assert 0 <= n <= len(self)
        bits_to_retain = self.letters.bit_length() - n * BITS_PER_LETTER
        tracker = 1 << (bits_to_retain - 1)
        letters = (self.letters & (tracker - 1)) | tracker
        return LetterSequence(letters, LetterSet.from_raw_letters(letters))

    def cut_from_end(self, n: int) -> Self:
        """Remove the last n letters."""
        assert 0 <= n <= len(self)
        letters = self.letters >> (n * BITS_PER_LETTER)
        return LetterSequence(letters, LetterSet.from_raw_letters(letters))

    def slice(self, start: int = 0, end: int | None = None) -> Self:
        """The letters in [start, end). Word boundaries are not carried over."""
        n = len(self)
        if end is None:
            end = n
        assert 0 <= start <= end <= n, (start, end, n)
        return self.cut_from_start(start).cut_from_end(n - end)

    def __getitem__(self, key):
        n = len(self)
        if isinstance(key, slice):
            start, end, step = key.indices(n)
            assert step == 1, "only contiguous slices are supported"
            return self.slice(start, max(start, end))
        if key < 0:
            key += n
        if not 0 <= key < n:
            raise IndexError(key)
        return decompress_letter(self._letter_at(key))

    def _letter_at(self, index: int) -> int:
        shift = (len(self) - 1 - index) * BITS_PER_LETTER
        return (self.letters >> shift) & LETTER_MASK

    def first_letter(self) -> int:
        assert not self.is_empty()
        return self._letter_at(0)

    def last_letter(self) -> int:
        assert not self.is_empty()
        return self.letters & LETTER_MASK

    def letters_rev(self) -> Iterator[int]:
        """Compressed letters, from last to first."""
        letters = self.letters
        while letters != 1:
            yield letters & LETTER_MASK
            letters >>= BITS_PER_LETTER

    def __iter__(self) -> Iterator[str]:
        for i in range(len(self)):
            yield decompress_letter(self._letter_at(i))

    def shared_letter_count(self, other: Self) -> int:
        return len(self.letter_set.intersection(other.letter_set))

    def can_append_to(self, other: Self) -> bool:
        """Can this word be added to the end of other?

        The two must share exactly one letter: other's last letter, which is
        also this one's first letter.
        """
        shared = self.letter_set.intersection(other.letter_set)
        return (
            len(shared) == 1
            and shared.has(other.last_letter())
            and shared.has(self.first_letter())
            and len(self.letter_set.union(other.letter_set)) <= CAPACITY
        )

    def can_prepend_to(self, other: Self) -> bool:
        return other.can_append_to(self)

    def append_to(self, other: Self) -> Self:
        """Add this word to the end of other, overlapping on the shared letter."""
        assert self.can_append_to(other), f"can't append {self} to {other}"
        n = len(self)
        letters = self._without_length_tracker_bit() | (
            other.letters << ((n - 1) * BITS_PER_LETTER)
        )
        return LetterSequence(
            letters,
            other.letter_set.union(self.letter_set),
            other.solution.mark(n + len(other) - 2),
        )

    def prepend_to(self, other: Self) -> Self:
        assert self.can_prepend_to(other), f"can't prepend {self} to {other}"
        return other.append_to(self)

    def _without_length_tracker_bit(self) -> int:
        return self.letters & ~(1 << (self.letters.bit_length() - 1))

    def is_valid_word(self, letter_group: Callable[[int], LetterGroup]) -> bool:
        """Are all pairs of adjacent letters on different sides of the board?"""
        groups = [letter_group(letter) for letter in self.letters_rev()]
        return all(a.can_be_adjacent_to(b) for a, b in zip(groups, groups[1:]))

    def words(self) -> Iterator[Self]:
        for word_range in self.solution.word_ranges():
            yield self.slice(word_range.start, word_range.stop)

    def solution_string(self) -> str:
        return " ".join(str(word) for word in self.words())

    def __str__(self):
        return "".join(self)

    def __repr__(self):
        return (
            f"LetterSequence({str(self)!r}, letter_set={self.letter_set}, "
            f"solution={self.solution!r})"
        )


EMPTY = LetterSequence()
