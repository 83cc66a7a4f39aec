"""Solve a board using a pool of worker processes.

The search from each starting word is independent of the others, so the
valid words are split into one contiguous range per worker. Each worker
loads its own copy of the dictionary and runs the sequential solver over its
range; the results are concatenated in whatever order the workers finish.
"""

import multiprocessing
from typing import Sequence

from tqdm import tqdm

from letterboxed.letter_sequence import LetterSequence
from letterboxed.solver import STRATEGIES, SolutionCounter, solve_words
from letterboxed.util import chunks
from letterboxed.word_list import load_words, valid_words_for_board


def solve_init(dictionary: str, board: str, strategy: str, count_only: bool):
    # See https://stackoverflow.com/a/30816116/388951 for this trick to avoid a global
    solve_worker.valid_words = valid_words_for_board(board, load_words(dictionary))
    solve_worker.strategy = STRATEGIES[strategy]
    solve_worker.count_only = count_only


def solve_worker(task: range) -> list[LetterSequence] | int:
    valid_words: Sequence[LetterSequence] = solve_worker.valid_words
    if solve_worker.count_only:
        counter = SolutionCounter()
        solve_words(valid_words, counter, solve_worker.strategy, task.start, task.stop)
        return counter.count
    solutions = []
    solve_words(valid_words, solutions, solve_worker.strategy, task.start, task.stop)
    return solutions


def get_tasks(num_words: int, num_threads: int) -> list[range]:
    return [
        range(chunk[0], chunk[-1] + 1)
        for chunk in chunks([*range(num_words)], num_threads)
    ]


def run_parallel(
    dictionary: str,
    board: str,
    strategy: str = "partition_once",
    num_threads: int = 1,
    count_only: bool = False,
    progress: bool = False,
):
    assert strategy in STRATEGIES, strategy
    assert num_threads >= 1
    num_words = len(valid_words_for_board(board, load_words(dictionary)))
    tasks = get_tasks(num_words, num_threads)

    init_args = (dictionary, board, strategy, count_only)
    pool = None
    if num_threads > 1:
        pool = multiprocessing.Pool(num_threads, solve_init, init_args)
        it = pool.imap_unordered(solve_worker, tasks)
    else:
        # This keeps stack traces simpler in the single-threaded case.
        solve_init(*init_args)
        it = (solve_worker(task) for task in tasks)

    results = [*tqdm(it, smoothing=0, total=len(tasks), disable=not progress)]

    if pool:
        pool.close()
        pool.join()
    return results


def solve_parallel(
    dictionary: str,
    board: str,
    strategy: str = "partition_once",
    num_threads: int = 1,
    progress: bool = False,
) -> list[LetterSequence]:
    results = run_parallel(
        dictionary, board, strategy, num_threads, count_only=False, progress=progress
    )
    return [solution for solutions in results for solution in solutions]


def count_parallel(
    dictionary: str,
    board: str,
    strategy: str = "partition_once",
    num_threads: int = 1,
    progress: bool = False,
) -> int:
    results = run_parallel(
        dictionary, board, strategy, num_threads, count_only=True, progress=progress
    )
    return sum(results)
