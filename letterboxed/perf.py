#!/usr/bin/env python
"""Time the three search strategies against one another.

$ python -m letterboxed.perf EIONRSTDGLAU --repeat 3
"""

import argparse
import time

from letterboxed.args import add_standard_args, board_arg, get_words_from_args
from letterboxed.solver import STRATEGIES, SolutionCounter, solve_words
from letterboxed.word_list import valid_words_for_board

REFERENCE_BOARD = "EIONRSTDGLAU"


def time_strategy(valid_words, strategy, repeat: int) -> tuple[int, float]:
    """Returns the solution count and the best time over the runs."""
    best_s = float("inf")
    count = 0
    for _ in range(repeat):
        counter = SolutionCounter()
        start_s = time.time()
        solve_words(valid_words, counter, strategy)
        best_s = min(best_s, time.time() - start_s)
        count = counter.count
    return count, best_s


def main():
    parser = argparse.ArgumentParser(
        prog="Solver perf test",
        description="Measure the speed of each search strategy, free from I/O.",
    )
    parser.add_argument(
        "board",
        nargs="?",
        type=board_arg,
        default=REFERENCE_BOARD,
        help="Board to solve.",
    )
    add_standard_args(parser)
    parser.add_argument(
        "--repeat",
        type=int,
        default=1,
        help="Number of times to run each strategy. The best time is reported.",
    )
    args = parser.parse_args()

    words = get_words_from_args(args)
    start_s = time.time()
    valid_words = valid_words_for_board(args.board, words)
    print(
        f"{len(valid_words)} / {len(words)} words are valid for {args.board} "
        f"({time.time() - start_s:.02f}s)"
    )

    counts = set()
    for name, strategy in STRATEGIES.items():
        count, elapsed_s = time_strategy(valid_words, strategy, args.repeat)
        counts.add(count)
        print(f"{name:>15}: {count} solutions, {elapsed_s:.02f}s")

    assert len(counts) == 1, f"Strategies disagree: {counts}"


if __name__ == "__main__":
    main()
