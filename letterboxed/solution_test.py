import pytest

from letterboxed.solution import Solution


def test_empty():
    assert Solution.empty().is_empty()
    assert Solution.empty().word_count() == 0
    assert [*Solution.empty().word_ranges()] == []


def test_is_empty():
    assert not Solution.empty().mark(2).is_empty()


def test_word_count():
    solution = Solution.empty()
    for expected_word_count, index in enumerate([2, 4, 6, 8, 11], start=1):
        solution = solution.mark(index)
        assert solution.word_count() == expected_word_count


def test_mark_twice():
    with pytest.raises(AssertionError):
        Solution.empty().mark(3).mark(3)


def test_unmark():
    assert Solution.empty().unmark(0).is_empty()
    assert Solution.empty().mark(2).unmark(2).is_empty()
    assert Solution.empty().mark(7).mark(9) == Solution.empty().mark(7).mark(
        8
    ).mark(9).unmark(8)


def test_unmark_unmarked():
    with pytest.raises(AssertionError):
        Solution.empty().mark(3).unmark(4)


def test_extend_top_word():
    assert Solution.empty().extend_top_word() == Solution.empty().mark(0)

    for n in range(15):
        assert Solution.empty().mark(n).extend_top_word() == Solution.empty().mark(
            n + 1
        )

    # Lower boundaries are left alone.
    for n in range(1, 15):
        assert Solution.empty().mark(n - 1).mark(
            n
        ).extend_top_word() == Solution.empty().mark(n - 1).mark(n + 1)

    for n in range(3, 15):
        assert Solution.empty().mark(n - 3).mark(n - 1).mark(
            n
        ).extend_top_word() == Solution.empty().mark(n - 3).mark(n - 1).mark(n + 1)


def test_word_ranges():
    # FISH + HOPE = FISHOPE
    solution = Solution.empty().mark(3).mark(6)
    assert [*solution.word_ranges()] == [range(0, 4), range(3, 7)]

    # A single 12-letter word.
    assert [*Solution.empty().mark(11).word_ranges()] == [range(0, 12)]

    solution = Solution.empty().mark(2).mark(4).mark(6).mark(8).mark(11)
    assert [*solution.word_ranges()] == [
        range(0, 3),
        range(2, 5),
        range(4, 7),
        range(6, 9),
        range(8, 12),
    ]


def test_word_ranges_past_final_letter():
    with pytest.raises(AssertionError):
        [*Solution.empty().mark(12).word_ranges()]


def test_equality_is_exact():
    assert Solution.empty().mark(3).mark(11) != Solution.empty().mark(5).mark(11)
    assert Solution.empty().mark(3).mark(11) == Solution.empty().mark(3).mark(11)


def test_repr():
    assert repr(Solution.empty().mark(3).mark(6)) == "Solution(0000000001001000)"


def test_sort_by_word_count():
    one = Solution.empty().mark(11)
    two = Solution.empty().mark(5).mark(11)
    three = Solution.empty().mark(2).mark(6).mark(11)
    other_two = Solution.empty().mark(8).mark(11)
    assert sorted([three, other_two, one, two]) == [one, two, other_two, three]
    assert one == Solution(1 << 11)
    assert two != other_two
