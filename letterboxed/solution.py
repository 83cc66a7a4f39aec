"""Word boundaries within a chain of letters.

A Solution is a 16-bit mask where bit i is set if the letter at index i ends a
word. Words in a chain share their boundary letters: "FISH" + "HOPE" is stored
as the seven letters FISHOPE with bits 3 and 6 set, and its word ranges are
[0, 4) and [3, 7).
"""

from dataclasses import dataclass
from typing import Iterator, Self

MAX_WORDS = 5
NUM_BITS = 16


@dataclass(frozen=True, slots=True)
class Solution:
    mask: int = 0

    FINAL_LETTER_INDEX = 11

    @staticmethod
    def empty() -> "Solution":
        return EMPTY

    def is_empty(self):
        return self.mask == 0

    def word_count(self) -> int:
        count = self.mask.bit_count()
        assert count <= MAX_WORDS, self
        return count

    def mark(self, index: int) -> Self:
        assert 0 <= index < NUM_BITS
        assert not self.mask & (1 << index), f"{index} is already marked"
        return Solution(self.mask | (1 << index))

    def unmark(self, index: int) -> Self:
        assert self.is_empty() or self.mask & (1 << index), f"{index} is not marked"
        return Solution(self.mask & ~(1 << index))

    def extend_top_word(self) -> Self:
        """Move the boundary of the last word up by one letter."""
        index = self.mask.bit_length()
        return self.unmark(max(index - 1, 0)).mark(index)

    def word_ranges(self) -> Iterator[range]:
        assert self.mask >> self.FINAL_LETTER_INDEX <= 1, self
        mask = self.mask
        index = 0
        while True:
            start = index
            mask >>= 1
            index += 1
            if mask == 0:
                return
            while mask & 1 == 0:
                mask >>= 1
                index += 1
            yield range(start, index + 1)

    def __lt__(self, other: Self) -> bool:
        return (self.word_count(), self.mask) < (other.word_count(), other.mask)

    def __repr__(self):
        return f"Solution({self.mask:016b})"


EMPTY = Solution()
