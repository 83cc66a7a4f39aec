"""Find every chain of words that uses all twelve letters on a board.

The search starts from each valid word and repeatedly appends words which
begin with the chain's last letter and share no other letters with it. Any
word that shares two or more letters with the chain can never be appended to
it or to any of its extensions, so it's dropped from the candidate pool for
that whole subtree.

There are three strategies. They find exactly the same solutions:

- filter_only: drop the words that share too many letters, then test each
  survivor for can_append_to. Children see the same reduced pool.
- partition: split the reduced pool into words that can be appended now and
  words that can't. Children only see the second group. (A word which could
  be appended to a chain starts with its last letter. Once something else
  is appended, that letter is in the middle of the chain, so the word can
  never be appended again.)
- partition_once: partition at the top level, where the pool is largest,
  then switch to filter_only.
"""

from typing import Callable, Protocol, Sequence, TypeAlias

from letterboxed.letter_sequence import CAPACITY, LetterSequence
from letterboxed.solution import MAX_WORDS
from letterboxed.util import partition
from letterboxed.word_list import valid_words_for_board


class SolutionSink(Protocol):
    def append(self, sequence: LetterSequence, /) -> None: ...


Strategy: TypeAlias = Callable[[LetterSequence, SolutionSink, Sequence[LetterSequence]], None]


def solve_filter_only(
    sequence: LetterSequence,
    solutions: SolutionSink,
    valid_words: Sequence[LetterSequence],
):
    n = len(sequence)
    if n == CAPACITY:
        solutions.append(sequence)
    elif n == CAPACITY - 1:
        # Every word adds at least two letters.
        return
    else:
        remaining = [w for w in valid_words if w.shared_letter_count(sequence) <= 1]
        for word in remaining:
            if word.can_append_to(sequence):
                solve_filter_only(word.append_to(sequence), solutions, remaining)


def solve_partition(
    sequence: LetterSequence,
    solutions: SolutionSink,
    valid_words: Sequence[LetterSequence],
):
    n = len(sequence)
    if n == CAPACITY:
        solutions.append(sequence)
    elif n == CAPACITY - 1:
        return
    else:
        remaining, appendable = partition(
            (w for w in valid_words if w.shared_letter_count(sequence) <= 1),
            lambda w: w.can_append_to(sequence),
        )
        for word in appendable:
            solve_partition(word.append_to(sequence), solutions, remaining)


def solve_partition_once(
    sequence: LetterSequence,
    solutions: SolutionSink,
    valid_words: Sequence[LetterSequence],
):
    n = len(sequence)
    if n == CAPACITY:
        solutions.append(sequence)
    elif n == CAPACITY - 1:
        return
    else:
        remaining, appendable = partition(
            (w for w in valid_words if w.shared_letter_count(sequence) <= 1),
            lambda w: w.can_append_to(sequence),
        )
        for word in appendable:
            solve_filter_only(word.append_to(sequence), solutions, remaining)


STRATEGIES: dict[str, Strategy] = {
    "filter_only": solve_filter_only,
    "partition": solve_partition,
    "partition_once": solve_partition_once,
}


class SolutionCounter:
    """A sink which only keeps track of how many solutions it's seen."""

    def __init__(self):
        self.count = 0

    def append(self, sequence: LetterSequence):
        self.count += 1

    def __len__(self):
        return self.count


class SolutionBuckets:
    """Solution strings, grouped by the number of words in them."""

    def __init__(self):
        self._buckets: dict[int, list[str]] = {
            n: [] for n in range(1, MAX_WORDS + 1)
        }

    def append(self, sequence: LetterSequence):
        word_count = sequence.word_count()
        assert word_count in self._buckets, f"{sequence!r} has {word_count} words"
        self._buckets[word_count].append(sequence.solution_string())

    def extend(self, other: "SolutionBuckets"):
        for word_count, solutions in other._buckets.items():
            self._buckets[word_count].extend(solutions)

    def get(self, word_count: int) -> list[str]:
        return self._buckets[word_count]

    def take(self, word_count: int) -> list[str]:
        """Return the solutions with this many words and clear them."""
        solutions = self._buckets[word_count]
        self._buckets[word_count] = []
        return solutions

    def __len__(self):
        return sum(len(solutions) for solutions in self._buckets.values())


def solve_words(
    valid_words: Sequence[LetterSequence],
    solutions: SolutionSink,
    strategy: Strategy = solve_partition_once,
    start: int = 0,
    end: int | None = None,
):
    """Search from each word in valid_words[start:end] as the first word."""
    for word in valid_words[start:end]:
        strategy(word, solutions, valid_words)


def solve_range(
    valid_words: Sequence[LetterSequence], start: int, end: int
) -> SolutionBuckets:
    solutions = SolutionBuckets()
    solve_words(valid_words, solutions, solve_partition_once, start, end)
    return solutions


def solve(
    board: str,
    words: Sequence[LetterSequence],
    strategy: Strategy = solve_partition_once,
) -> list[LetterSequence]:
    solutions = []
    solve_words(valid_words_for_board(board, words), solutions, strategy)
    return solutions


def count_solutions(
    board: str,
    words: Sequence[LetterSequence],
    strategy: Strategy = solve_partition_once,
) -> int:
    counter = SolutionCounter()
    solve_words(valid_words_for_board(board, words), counter, strategy)
    return counter.count
