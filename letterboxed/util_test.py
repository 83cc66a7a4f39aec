from letterboxed.util import chunks, group_by, partition


def test_group_by():
    words = ["FISH", "HOPE", "HAT", "ADGJBEHKCFIL", "SOAP"]
    assert group_by(words, len) == {
        4: ["FISH", "HOPE", "SOAP"],
        3: ["HAT"],
        12: ["ADGJBEHKCFIL"],
    }


def test_partition():
    falses, trues = partition(range(10), lambda x: x % 3 == 0)
    assert trues == [0, 3, 6, 9]
    assert falses == [1, 2, 4, 5, 7, 8]


def test_chunks():
    assert chunks([*range(10)], 3) == [[0, 1, 2, 3], [4, 5, 6, 7], [8, 9]]
    assert chunks([*range(3)], 8) == [[0], [1], [2]]
    assert chunks([], 4) == []
    assert sum(chunks([*range(101)], 7), []) == [*range(101)]
