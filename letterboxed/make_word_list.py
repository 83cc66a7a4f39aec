#!/usr/bin/env python
"""Filter a raw word list down to words that could appear in a solution.

The output has one uppercase word per line. A CRC32 of the raw list is saved
next to the output, and the list is only rebuilt when the raw list changes.

$ python -m letterboxed.make_word_list wordlists/raw_words.txt wordlists/all_words.txt
"""

import argparse
import os
import zlib

from letterboxed.word_list import read_word_list


def crc_path(output_file: str) -> str:
    return output_file + ".crc"


def file_hash(path: str) -> int:
    with open(path, "rb") as f:
        return zlib.crc32(f.read())


def load_hash(path: str) -> int | None:
    if not os.path.exists(path):
        return None
    with open(path) as f:
        text = f.read().strip()
    try:
        return int(text, 16)
    except ValueError:
        raise ValueError(f"Invalid hash in {path}: {text!r}")


def save_hash(path: str, crc: int):
    with open(path, "w") as f:
        f.write(f"{crc:08X}")


def make_word_list(input_file: str, output_file: str, force=False) -> int | None:
    """Returns the number of words written, or None if the output is current."""
    crc = file_hash(input_file)
    if not force and load_hash(crc_path(output_file)) == crc:
        return None

    with open(input_file) as f:
        words = read_word_list(f)
    with open(output_file, "w") as out:
        for word in words:
            out.write(word)
            out.write("\n")
    save_hash(crc_path(output_file), crc)
    return len(words)


def main():
    parser = argparse.ArgumentParser(
        prog="Make word list",
        description="Filter a raw word list to Letter Boxed candidate words.",
    )
    parser.add_argument("input_file", type=str, help="Raw word list, one per line.")
    parser.add_argument("output_file", type=str, help="Where to write the words.")
    parser.add_argument(
        "--force",
        action="store_true",
        help="Rebuild the output even if the raw list hasn't changed.",
    )
    args = parser.parse_args()

    num_words = make_word_list(args.input_file, args.output_file, args.force)
    if num_words is None:
        print(f"{args.output_file} is up to date.")
    else:
        print(f"Wrote {num_words} words to {args.output_file}.")


if __name__ == "__main__":
    main()
