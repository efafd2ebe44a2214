"""Collect every element that ties for the minimum or maximum."""

from __future__ import annotations

from typing import Any, Callable, Iterable


def _order(a: Any, b: Any) -> int:
    if a < b:
        return -1
    if a == b:
        return 0
    return 1


def _min_set_impl(
    iterable: Iterable[Any],
    key_for: Callable[[Any], Any] | None,
    compare: Callable[[Any, Any, Any, Any], int],
) -> list[Any]:
    iterator = iter(iterable)
    for first in iterator:
        current_key = key_for(first) if key_for is not None else first
        result = [first]
        for element in iterator:
            key = key_for(element) if key_for is not None else element
            order = compare(element, result[0], key, current_key)
            if order < 0:
                result = [element]
                current_key = key
            elif order == 0:
                result.append(element)
        return result
    return []


def _max_set_impl(
    iterable: Iterable[Any],
    key_for: Callable[[Any], Any] | None,
    compare: Callable[[Any, Any, Any, Any], int],
) -> list[Any]:
    return _min_set_impl(
        iterable, key_for, lambda a, b, ka, kb: compare(b, a, kb, ka)
    )


def min_set(iterable: Iterable[Any], key: Callable[[Any], Any] | None = None) -> list[Any]:
    """All elements whose key is minimal, in their original order."""
    return _min_set_impl(iterable, key, lambda _a, _b, ka, kb: _order(ka, kb))


def max_set(iterable: Iterable[Any], key: Callable[[Any], Any] | None = None) -> list[Any]:
    """All elements whose key is maximal, in their original order."""
    return _max_set_impl(iterable, key, lambda _a, _b, ka, kb: _order(ka, kb))


def min_set_by(iterable: Iterable[Any], compare: Callable[[Any, Any], int]) -> list[Any]:
    """All minimal elements under ``compare``, which returns <0, 0 or >0."""
    return _min_set_impl(iterable, None, lambda a, b, _ka, _kb: compare(a, b))


def max_set_by(iterable: Iterable[Any], compare: Callable[[Any, Any], int]) -> list[Any]:
    """All maximal elements under ``compare``, which returns <0, 0 or >0."""
    return _max_set_impl(iterable, None, lambda a, b, _ka, _kb: compare(a, b))