"""Standard command-line arguments share across many tools."""

import argparse
import multiprocessing

from letterboxed.board import normalize_board
from letterboxed.letter_sequence import LetterSequence
from letterboxed.solver import STRATEGIES
from letterboxed.word_list import load_words

DEFAULT_DICTIONARY = "wordlists/all_words.txt"


def add_standard_args(
    parser: argparse.ArgumentParser, *, board=False, strategy=False, threads=False
):
    if board:
        parser.add_argument(
            "board",
            type=board_arg,
            help="The twelve letters of the puzzle, side by side, e.g. EIONRSTDGLAU "
            'or "EIO NRS TDG LAU".',
        )
    parser.add_argument(
        "--dictionary",
        type=str,
        default=DEFAULT_DICTIONARY,
        help="Path to dictionary file with one word per line.",
    )
    if strategy:
        parser.add_argument(
            "--strategy",
            type=str,
            choices=STRATEGIES.keys(),
            default="partition_once",
            help="Pruning strategy for the recursive search. All of them find the "
            "same solutions.",
        )
    if threads:
        parser.add_argument(
            "--num_threads",
            type=int,
            default=multiprocessing.cpu_count(),
            help="Number of worker processes to use.",
        )


def board_arg(value: str) -> str:
    try:
        return normalize_board(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def get_words_from_args(args: argparse.Namespace) -> tuple[LetterSequence, ...]:
    words = load_words(args.dictionary)
    assert words, f"No usable words in {args.dictionary}"
    return words
