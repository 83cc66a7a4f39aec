import pytest
from inline_snapshot import snapshot

from letterboxed.board import canonicalize
from letterboxed.board_search import (
    candidate_boards,
    candidate_pools,
    search_boards,
    side_partitions,
)

TEST_WORDS = "testdata/letter-boxed-words.txt"


def test_candidate_pools():
    assert [*candidate_pools("SRNTLCD")] == ["ACDEILNORSTU"]
    assert [*candidate_pools("srntlcd")] == ["ACDEILNORSTU"]
    # Vowels and duplicates in the consonants are ignored.
    assert [*candidate_pools("SSRNTLCDA")] == ["ACDEILNORSTU"]
    assert len([*candidate_pools("SRNTLCDG")]) == 8
    assert [*candidate_pools("SRNTLC")] == []


def test_side_partitions():
    boards = [*side_partitions("LKJIHGFEDCBA")]
    assert len(boards) == 15_400
    assert len(set(boards)) == 15_400
    assert boards[:3] == snapshot(["ABCDEFGHIJKL", "ABCDEFGHJIKL", "ABCDEFGHKIJL"])
    assert boards[-1] == snapshot("AKLBIJCGHDEF")
    for board in boards[:500]:
        assert canonicalize(board) == board
        sides = [board[i : i + 3] for i in range(0, 12, 3)]
        assert [s[0] for s in sides] == sorted(s[0] for s in sides)


def test_candidate_boards():
    assert sum(1 for _ in candidate_boards("SRNTLCDG")) == 8 * 15_400


@pytest.mark.parametrize("num_threads", [1, 2])
def test_search_boards(num_threads):
    boards = ["ABCDEFGHIJKL", "CBAFEDIHGLKJ", "ABDCEFGHIJKL", "AEIOUSRNTLCD"]
    results = search_boards(boards, TEST_WORDS, num_threads)
    assert sorted(results, key=lambda r: boards.index(r[1])) == [
        (5, "ABCDEFGHIJKL"),
        (5, "CBAFEDIHGLKJ"),
        (0, "ABDCEFGHIJKL"),
        (0, "AEIOUSRNTLCD"),
    ]
