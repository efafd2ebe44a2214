from iterweave.extrema import max_set, max_set_by, min_set, min_set_by


def _cmp(a, b):
    return (a > b) - (a < b)


def test_empty_inputs_give_empty_lists():
    assert min_set([]) == []
    assert max_set([]) == []
    assert min_set_by([], _cmp) == []
    assert max_set_by([], _cmp) == []


def test_min_set_collects_all_ties():
    data = [3, 1, 2, 1, 4]
    result = min_set(data)
    assert result == [min(data)] * data.count(min(data))


def test_max_set_collects_all_ties():
    data = [3, 4, 2, 4, 1]
    result = max_set(data)
    assert result == [max(data)] * data.count(max(data))


def test_min_set_with_key_keeps_original_objects_in_order():
    a, b, c, d = ("a", 2), ("b", 1), ("c", 3), ("d", 1)
    result = min_set([a, b, c, d], key=lambda p: p[1])
    assert len(result) == 2
    assert result[0] is b
    assert result[1] is d


def test_max_set_with_key_keeps_original_objects_in_order():
    a, b, c, d = ("a", 3), ("b", 1), ("c", 3), ("d", 2)
    result = max_set([a, b, c, d], key=lambda p: p[1])
    assert [item is ref for item, ref in zip(result, [a, c])] == [True, True]
    assert len(result) == 2


def test_by_compare_matches_key_versions():
    words = ["pear", "fig", "kiwi", "yam", "banana"]
    by_len = lambda x, y: _cmp(len(x), len(y))  # noqa: E731
    assert min_set_by(words, by_len) == min_set(words, key=len)
    assert max_set_by(words, by_len) == max_set(words, key=len)


def test_every_result_element_is_extremal():
    data = [5, -2, 7, -2, 7, 0]
    for value in min_set(data):
        assert all(value <= other for other in data)
    for value in max_set(data):
        assert all(value >= other for other in data)


def test_works_with_one_shot_iterators():
    data = [2, 1, 1]
    assert min_set(iter(data)) == [1, 1]