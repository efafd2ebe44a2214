from collections import Counter

import pytest

from iterweave.duplicates import duplicates, duplicates_by


def _repeating():
    n = 0
    while True:
        yield n // 2
        n += 1


def test_simple_example():
    assert list(duplicates([0, 1, 2, 3, 2, 1, 2])) == [2, 1]


@pytest.mark.parametrize(
    "data",
    [
        [],
        [1],
        [1, 1],
        [5, 4, 5, 4, 5, 4, 3],
        list("mississippi"),
        [i % 7 for i in range(50)],
    ],
)
def test_duplicates_invariants(data):
    result = list(duplicates(data))
    counts = Counter(data)
    assert set(result) == {x for x, c in counts.items() if c >= 2}
    assert len(result) == len(set(result))


@pytest.mark.parametrize("data", [list("abracadabra"), [3, 1, 3, 1, 2, 2]])
def test_order_follows_second_occurrence(data):
    second_seen = {}
    seen = Counter()
    for position, item in enumerate(data):
        seen[item] += 1
        if seen[item] == 2:
            second_seen[item] = position
    result = list(duplicates(data))
    assert [second_seen[x] for x in result] == sorted(second_seen.values())


def test_no_duplicates_yields_nothing():
    assert list(duplicates(range(20))) == []


def test_duplicates_by_key_yields_second_element():
    words = ["apple", "avocado", "banana", "blueberry", "cherry"]
    result = list(duplicates_by(words, lambda w: w[0]))
    assert result == ["avocado", "blueberry"]


def test_duplicates_by_length():
    data = ["a", "bb", "c", "dd", "eee", "f"]
    result = list(duplicates_by(data, len))
    assert [len(x) for x in result] == [1, 2]
    assert all(x in data for x in result)


def test_lazy_over_infinite_source():
    it = duplicates(_repeating())
    assert [next(it) for _ in range(5)] == [0, 1, 2, 3, 4]


def test_exhausted_iterator_stays_exhausted():
    it = duplicates([1, 1])
    assert list(it) == [1]
    with pytest.raises(StopIteration):
        next(it)