import pytest

from iterweave.formatting import format_iter, format_with


def _recording_source(seen):
    for value in (1, 2, 3):
        seen.append(value)
        yield value


def test_str_joins_with_separator():
    assert str(format_iter([1, 2, 3], ", ")) == "1, 2, 3"


def test_format_spec_applies_to_each_element():
    assert f"{format_iter([1, 2, 3], '-'):03d}" == "001-002-003"


def test_empty_iterable():
    assert str(format_iter([], ", ")) == ""


def test_empty_separator():
    assert str(format_iter("abc", "")) == "abc"


def test_matches_join_of_str():
    words = ["alpha", 2, None, 3.5]
    assert str(format_iter(words, " / ")) == " / ".join(map(str, words))


def test_format_only_once():
    fmt = format_iter([1, 2], ",")
    assert str(fmt) == "1,2"
    with pytest.raises(RuntimeError, match="Format: was already formatted once"):
        str(fmt)


def test_is_lazy():
    seen = []
    fmt = format_iter(_recording_source(seen), ",")
    assert seen == []
    assert str(fmt) == "1,2,3"
    assert seen == [1, 2, 3]


def test_format_with_emits_pieces():
    fmt = format_with([1, 2], "|", lambda item, emit: (emit(item), emit("!")))
    assert str(fmt) == "1!|2!"


def test_format_with_single_element_has_no_separator():
    fmt = format_with(["x"], ", ", lambda item, emit: emit(item))
    assert str(fmt) == "x"


def test_format_with_only_once():
    fmt = format_with([1], ",", lambda item, emit: emit(item))
    assert str(fmt) == "1"
    with pytest.raises(RuntimeError, match="FormatWith: was already formatted once"):
        str(fmt)