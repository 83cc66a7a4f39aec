#!/usr/bin/env python
"""Search over many boards for the ones with the most solutions.

Each pool of twelve letters is the five vowels plus seven consonants chosen
from --consonants. Every way of splitting a pool into four sides is a
candidate board: there are 15,400 of these per pool.

$ python -m letterboxed.board_search --consonants SRNTLCDG --num_threads 8
"""

import argparse
import heapq
import itertools
import multiprocessing
import time
from typing import Iterable, Iterator

from tqdm import tqdm

from letterboxed.args import add_standard_args
from letterboxed.letter_group import BOARD_SIZE, LETTERS_PER_SIDE
from letterboxed.solver import SolutionCounter, solve_partition_once, solve_words
from letterboxed.word_list import load_words, valid_words_for_board

VOWELS = "AEIOU"
DEFAULT_CONSONANTS = "SRNTLCD"


def candidate_pools(consonants: str, vowels: str = VOWELS) -> Iterator[str]:
    """All sorted 12-letter pools with every vowel and some of the consonants."""
    consonants = "".join(sorted(set(consonants.upper()) - set(vowels)))
    num_consonants = BOARD_SIZE - len(vowels)
    for combo in itertools.combinations(consonants, num_consonants):
        yield "".join(sorted(vowels + "".join(combo)))


def side_partitions(letters: str) -> Iterator[str]:
    """Every distinct way to split twelve letters into four sides of three.

    The order of the sides and of letters within a side doesn't matter, so
    each split is yielded once, with sorted sides in order of their first
    letter.
    """
    assert len(letters) == BOARD_SIZE, letters

    def helper(remaining: str, sides: str) -> Iterator[str]:
        if not remaining:
            yield sides
            return
        first, rest = remaining[0], remaining[1:]
        for others in itertools.combinations(rest, LETTERS_PER_SIDE - 1):
            left = "".join(c for c in rest if c not in others)
            yield from helper(left, sides + first + "".join(others))

    yield from helper("".join(sorted(letters)), "")


def candidate_boards(consonants: str) -> Iterator[str]:
    for pool in candidate_pools(consonants):
        yield from side_partitions(pool)


def board_init(dictionary: str):
    board_worker.words = load_words(dictionary)


def board_worker(task: tuple[int, str]) -> tuple[int, str, int]:
    n, board = task
    valid_words = valid_words_for_board(board, board_worker.words)
    counter = SolutionCounter()
    solve_words(valid_words, counter, solve_partition_once)
    return n, board, counter.count


def search_boards(
    boards: Iterable[str],
    dictionary: str,
    num_threads: int = 1,
    total: int | None = None,
    log_new_max: bool = False,
) -> list[tuple[int, str]]:
    """Count the solutions for each board. Returns (count, board) pairs."""
    tasks = enumerate(boards)
    pool = None
    if num_threads > 1:
        pool = multiprocessing.Pool(num_threads, board_init, (dictionary,))
        it = pool.imap_unordered(board_worker, tasks)
    else:
        board_init(dictionary)
        it = (board_worker(task) for task in tasks)

    max_count = 0
    results = []
    # smoothing=0 means to show the average pace so far, which is the best estimator.
    for n, board, count in tqdm(it, smoothing=0, total=total, disable=not log_new_max):
        results.append((count, board))
        if count > max_count:
            max_count = count
            if log_new_max:
                tqdm.write(f"{board}: {count}\tboard: {n}\tsolved: {len(results)}")

    if pool:
        pool.close()
        pool.join()
    return results


def main():
    parser = argparse.ArgumentParser(
        prog="Board search",
        description="Find the boards with the most solutions.",
    )
    add_standard_args(parser, threads=True)
    parser.add_argument(
        "--consonants",
        type=str,
        default=DEFAULT_CONSONANTS,
        help="Consonants to choose from. Every board has all five vowels and "
        f"{BOARD_SIZE - len(VOWELS)} of these.",
    )
    parser.add_argument(
        "--max_boards",
        type=int,
        default=0,
        help="Limit the number of boards to consider.",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=10,
        help="Number of best and worst boards to print at the end.",
    )
    args = parser.parse_args()

    num_pools = sum(1 for _ in candidate_pools(args.consonants))
    total = num_pools * sum(1 for _ in side_partitions("ABCDEFGHIJKL"))
    boards = candidate_boards(args.consonants)
    if args.max_boards:
        boards = itertools.islice(boards, args.max_boards)
        total = min(total, args.max_boards)
    print(f"Searching {total} boards from {num_pools} letter pools.")

    start_s = time.time()
    results = search_boards(
        boards, args.dictionary, args.num_threads, total=total, log_new_max=True
    )
    end_s = time.time()
    print(f"Solved {len(results)} boards in {end_s - start_s:.02f}s.")

    print("---")
    print(f"Top {args.top} boards:")
    for count, board in heapq.nlargest(args.top, results):
        print(f"{count}\t{board}")
    print(f"Bottom {args.top} boards:")
    for count, board in heapq.nsmallest(args.top, results):
        print(f"{count}\t{board}")


if __name__ == "__main__":
    main()
