#!/usr/bin/env python
"""Find all the solutions to a Letter Boxed puzzle and print them.

$ python -m letterboxed.solve EIONRSTDGLAU
"""

import argparse
import time

from letterboxed.args import add_standard_args
from letterboxed.parallel import count_parallel, solve_parallel
from letterboxed.util import group_by


def main():
    parser = argparse.ArgumentParser(
        prog="Letter Boxed solver",
        description="Print every chain of words which uses all twelve letters.",
    )
    add_standard_args(parser, board=True, strategy=True, threads=True)
    parser.add_argument(
        "--count_only",
        action="store_true",
        help="Only print the number of solutions.",
    )
    parser.add_argument(
        "--max_words",
        type=int,
        default=5,
        help="Only print solutions with at most this many words.",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while solving.",
    )
    args = parser.parse_args()

    start_s = time.time()
    if args.count_only:
        count = count_parallel(
            args.dictionary, args.board, args.strategy, args.num_threads, args.progress
        )
        print(f"{count} solutions")
        return

    solutions = solve_parallel(
        args.dictionary, args.board, args.strategy, args.num_threads, args.progress
    )
    elapsed_s = time.time() - start_s

    by_count = group_by(solutions, lambda s: s.word_count())
    for word_count in sorted(by_count):
        if word_count > args.max_words:
            continue
        for solution in by_count[word_count]:
            print(solution.solution_string())

    print(f"\n\n{len(solutions)} solutions")
    for word_count in sorted(by_count):
        print(f"  {word_count} words: {len(by_count[word_count])}")
    print(f"{elapsed_s:.02f}s")


if __name__ == "__main__":
    main()
