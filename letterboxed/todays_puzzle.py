#!/usr/bin/env python
"""Fetch today's puzzle from the NYT and add it to the puzzle history.

$ python -m letterboxed.todays_puzzle site/data
"""

import argparse
import json
import os
import re
import sys
from typing import Any

import requests
from bs4 import BeautifulSoup

from letterboxed.puzzle_input import DatesByInput, InputsByDate, PuzzleInput

PUZZLE_URL = "https://www.nytimes.com/puzzles/letter-boxed"
GAME_DATA_RE = re.compile(r"window\.gameData\s*=\s*")


def find_game_data(html: str) -> dict[str, Any]:
    """Extract the `window.gameData = {...}` object from a script tag."""
    soup = BeautifulSoup(html, "html.parser")
    decoder = json.JSONDecoder()
    for script in soup.find_all("script"):
        text = script.get_text()
        m = GAME_DATA_RE.search(text)
        if not m:
            continue
        game_data, _ = decoder.raw_decode(text, m.end())
        if isinstance(game_data, dict):
            return game_data
    raise ValueError("Failed to retrieve data for today's puzzle.")


def parse_puzzle_input(html: str) -> PuzzleInput:
    return PuzzleInput.from_game_data(find_game_data(html))


def fetch_todays_puzzle_input(url=PUZZLE_URL) -> PuzzleInput:
    response = requests.get(url, timeout=10)
    response.raise_for_status()
    return parse_puzzle_input(response.text)


def update_history(puzzle_input: PuzzleInput, output_dir: str):
    inputs_by_date = InputsByDate.read_from_file_or_create(output_dir)
    dates_by_input = DatesByInput.read_from_file_or_create(output_dir)

    inputs_by_date.insert(puzzle_input)
    dates_by_input.insert(puzzle_input)

    inputs_by_date.write_to_file(output_dir)
    dates_by_input.write_to_file(output_dir)


def main():
    parser = argparse.ArgumentParser(
        prog="Today's puzzle",
        description="Add today's Letter Boxed puzzle to the history files.",
    )
    parser.add_argument(
        "output_dir",
        type=str,
        help="Directory containing inputsByDate.json and datesByInput.json.",
    )
    args = parser.parse_args()

    output_dir = args.output_dir
    if not os.path.exists(output_dir):
        sys.stderr.write(f"The path '{output_dir}' does not exist.\n")
        sys.exit(1)
    if not os.path.isdir(output_dir):
        sys.stderr.write(f"The path '{output_dir}' is not a directory.\n")
        sys.exit(1)

    puzzle_input = fetch_todays_puzzle_input()
    update_history(puzzle_input, output_dir)
    print(f"{puzzle_input.date}: {puzzle_input.input}")


if __name__ == "__main__":
    main()
