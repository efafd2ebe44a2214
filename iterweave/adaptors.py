"""General-purpose iterator adaptors."""

from __future__ import annotations

import itertools
from typing import Any, Callable, Iterable, Iterator

_MISSING: Any = object()


class PutBack:
    """Iterator that can take back a single element to yield next.

    A second ``put_back`` before the slot is drained overwrites the first.
    """

    __slots__ = ("_top", "_iter")

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._top: Any = _MISSING
        self._iter = iter(iterable)

    def with_value(self, value: Any) -> PutBack:
        """Put ``value`` back and return this iterator, for chaining."""
        self.put_back(value)
        return self

    def into_parts(self) -> tuple[Any, Iterator[Any]]:
        """The put-back element (None if empty) and the underlying iterator."""
        top = None if self._top is _MISSING else self._top
        return top, self._iter

    def put_back(self, value: Any) -> None:
        """Make ``value`` the next element yielded."""
        self._top = value

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if self._top is not _MISSING:
            value = self._top
            self._top = _MISSING
            return value
        return next(self._iter)


def put_back(iterable: Iterable[Any]) -> PutBack:
    """Wrap ``iterable`` so that one element can be put back."""
    return PutBack(iterable)


def interleave(first: Iterable[Any], second: Iterable[Any]) -> Iterator[Any]:
    """Alternate elements of both iterables until both run out."""
    iterators = (iter(first), iter(second))
    turn = 0
    while True:
        primary, other = iterators[turn], iterators[1 - turn]
        turn ^= 1
        item = next(primary, _MISSING)
        if item is _MISSING:
            item = next(other, _MISSING)
            if item is _MISSING:
                return
        yield item


def interleave_shortest(first: Iterable[Any], second: Iterable[Any]) -> Iterator[Any]:
    """Alternate elements of both iterables until the one whose turn it is runs out."""
    iterators = (iter(first), iter(second))
    turn = 0
    while True:
        item = next(iterators[turn], _MISSING)
        if item is _MISSING:
            return
        turn ^= 1
        yield item


def cartesian_product(first: Iterable[Any], second: Iterable[Any]) -> Iterator[tuple[Any, Any]]:
    """Every pair ``(a, b)`` with ``a`` from ``first`` and ``b`` from ``second``."""
    first_iter = iter(first)
    second_items = list(second)
    if not second_items:
        return
    for a in first_iter:
        for b in second_items:
            yield a, b


def batching(
    iterable: Iterable[Any], f: Callable[[Iterator[Any]], Any]
) -> Iterator[Any]:
    """Call ``f`` with the iterator repeatedly, yielding results until it returns None."""
    iterator = iter(iterable)
    while True:
        try:
            value = f(iterator)
        except StopIteration:
            return
        if value is None:
            return
        yield value


def step(iterable: Iterable[Any], n: int) -> Iterator[Any]:
    """Yield one element, then skip ``n - 1``, repeatedly. ``n`` must be positive."""
    if n < 1:
        raise ValueError("step must be at least 1")
    return itertools.islice(iterable, 0, None, n)


def take_while_ref(source: PutBack, predicate: Callable[[Any], bool]) -> Iterator[Any]:
    """Take from ``source`` while ``predicate`` holds.

    The first rejected element is put back into ``source``, so it is not lost.
    """
    if not isinstance(source, PutBack):
        raise TypeError("take_while_ref needs a PutBack iterator")
    return _take_while_ref(source, predicate)


def _take_while_ref(source: PutBack, predicate: Callable[[Any], bool]) -> Iterator[Any]:
    for item in source:
        if not predicate(item):
            source.put_back(item)
            return
        yield item


def while_some(iterable: Iterable[Any]) -> Iterator[Any]:
    """Yield elements until the first None."""
    for item in iterable:
        if item is None:
            return
        yield item


def positions(iterable: Iterable[Any], predicate: Callable[[Any], bool]) -> Iterator[int]:
    """Indices of the elements for which ``predicate`` holds."""
    for index, item in enumerate(iterable):
        if predicate(item):
            yield index


def update(iterable: Iterable[Any], f: Callable[[Any], Any]) -> Iterator[Any]:
    """Call ``f`` on each element, for its side effect, before yielding it."""
    for item in iterable:
        f(item)
        yield item


def tuple_combinations(iterable: Iterable[Any], k: int) -> Iterator[tuple[Any, ...]]:
    """All ``k``-tuples of elements in increasing position order. ``k`` must be positive."""
    if k < 1:
        raise ValueError("tuple size must be at least 1")
    return itertools.combinations(iterable, k)