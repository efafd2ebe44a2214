import operator

from iterweave.diff import FirstMismatch, Longer, Shorter, diff_with


def test_equal_iterables_give_none():
    assert diff_with([1, 2, 3], iter([1, 2, 3]), operator.eq) is None


def test_both_empty_gives_none():
    assert diff_with([], [], operator.eq) is None


def test_first_mismatch():
    shared = [1, 2]
    result = diff_with(shared + [3, 4], shared + [9, 4], operator.eq)
    assert isinstance(result, FirstMismatch)
    assert result.index == len(shared)
    assert list(result.first) == [3, 4]
    assert list(result.second) == [9, 4]


def test_shorter():
    shared = [1, 2]
    result = diff_with(shared + [3], shared, operator.eq)
    assert isinstance(result, Shorter)
    assert result.index == len(shared)
    assert list(result.remaining) == [3]


def test_longer():
    shared = [1, 2]
    result = diff_with(shared, shared + [3, 4], operator.eq)
    assert isinstance(result, Longer)
    assert result.index == len(shared)
    assert list(result.remaining) == [3, 4]


def test_custom_equality():
    words = ["Alpha", "Beta"]
    lowered = [w.lower() for w in words]
    assert diff_with(words, lowered, lambda a, b: a.lower() == b) is None
    result = diff_with(words, lowered, operator.eq)
    assert isinstance(result, FirstMismatch)
    assert result.index == 0


def test_is_equal_argument_order():
    calls = []

    def record(a, b):
        calls.append((a, b))
        return a == "x" and b == "y"

    result = diff_with(["x"], ["y"], record)
    assert result is None
    assert calls == [("x", "y")]

    swapped = diff_with(["y"], ["x"], record)
    assert isinstance(swapped, FirstMismatch)
    assert swapped.index == 0