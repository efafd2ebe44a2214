"""Lazy k-combinations of an iterable, with and without replacement."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


def binomial(n: int, k: int) -> int:
    """The binomial coefficient ``n choose k``, or 0 when ``k > n``."""
    if n < k:
        return 0
    k = min(k, n - k)
    result = 1
    for i in range(1, k + 1):
        result = result * n // i
        n -= 1
    return result


class _LazyPool:
    """Elements drawn from an iterator on demand and kept for reuse."""

    __slots__ = ("_source", "_items", "_done")

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._source = iter(iterable)
        self._items: list[Any] = []
        self._done = False

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def get_next(self) -> bool:
        """Pull one more element; return whether one was available."""
        if self._done:
            return False
        for item in self._source:
            self._items.append(item)
            return True
        self._done = True
        return False

    def prefill(self, size: int) -> None:
        """Pull elements until the pool holds ``size`` or the source runs dry."""
        while len(self._items) < size and self.get_next():
            pass

    def fill(self) -> int:
        """Pull every remaining element and return the pool's full length."""
        if not self._done:
            self._items.extend(self._source)
            self._done = True
        return len(self._items)


class Combinations:
    """Iterator over the ``k``-length combinations of an iterable, as lists.

    Elements are drawn from the source only as they are needed.
    """

    def __init__(self, iterable: Iterable[Any], k: int) -> None:
        if k < 0:
            raise ValueError("k must be non-negative")
        self._pool = _LazyPool(iterable)
        self._pool.prefill(k)
        self._indices = list(range(k))
        self._first = True

    def k(self) -> int:
        """Length of each combination produced."""
        return len(self._indices)

    def n(self) -> int:
        """Current number of elements drawn from the source."""
        return len(self._pool)

    def reset(self, k: int) -> None:
        """Restart with combinations of length ``k`` over the same source."""
        if k < 0:
            raise ValueError("k must be non-negative")
        self._first = True
        grow = k > len(self._indices)
        self._indices = list(range(k))
        if grow:
            self._pool.prefill(k)

    def count(self) -> int:
        """Number of combinations still to come; draws the whole source."""
        n = self._pool.fill()
        return _remaining(n, self._first, self._indices)

    def __iter__(self) -> Iterator[list[Any]]:
        return self

    def __next__(self) -> list[Any]:
        indices = self._indices
        pool = self._pool
        if self._first:
            if self.k() > self.n():
                raise StopIteration
            self._first = False
        elif not indices:
            raise StopIteration
        else:
            k = len(indices)
            i = k - 1
            if indices[i] == len(pool) - 1:
                pool.get_next()
            while indices[i] == i + len(pool) - k:
                if i == 0:
                    raise StopIteration
                i -= 1
            indices[i] += 1
            for j in range(i + 1, k):
                indices[j] = indices[j - 1] + 1
        return [pool[index] for index in indices]


def _remaining(n: int, first: bool, indices: list[int]) -> int:
    k = len(indices)
    if n < k:
        return 0
    if first:
        return binomial(n, k)
    return sum(binomial(n - 1 - n0, k - i) for i, n0 in enumerate(indices))


class CombinationsWithReplacement:
    """Iterator over the ``k``-length combinations with replacement, as lists."""

    def __init__(self, iterable: Iterable[Any], k: int) -> None:
        if k < 0:
            raise ValueError("k must be non-negative")
        self._pool = _LazyPool(iterable)
        self._indices = [0] * k
        self._first = True

    def _current(self) -> list[Any]:
        return [self._pool[index] for index in self._indices]

    def count(self) -> int:
        """Number of combinations still to come; draws the whole source."""
        n = self._pool.fill()
        return _remaining_with_replacement(n, self._first, self._indices)

    def __iter__(self) -> Iterator[list[Any]]:
        return self

    def __next__(self) -> list[Any]:
        indices = self._indices
        pool = self._pool
        if self._first:
            if not (not indices or pool.get_next()):
                raise StopIteration
            self._first = False
            return self._current()

        pool.get_next()
        last = len(pool) - 1
        for i in reversed(range(len(indices))):
            if indices[i] < last:
                value = indices[i] + 1
                indices[i:] = [value] * (len(indices) - i)
                return self._current()
        raise StopIteration


def _count_with_replacement(n: int, k: int) -> int:
    positions = max(k - 1, 0) if n == 0 else n - 1 + k
    return binomial(positions, k)


def _remaining_with_replacement(n: int, first: bool, indices: list[int]) -> int:
    k = len(indices)
    if first:
        return _count_with_replacement(n, k)
    return sum(
        _count_with_replacement(n - 1 - n0, k - i) for i, n0 in enumerate(indices)
    )


def combinations(iterable: Iterable[Any], k: int) -> Combinations:
    """Lazy ``k``-combinations of ``iterable`` in lexicographic index order."""
    return Combinations(iterable, k)


def combinations_with_replacement(
    iterable: Iterable[Any], k: int
) -> CombinationsWithReplacement:
    """Lazy ``k``-combinations of ``iterable`` where elements may repeat."""
    return CombinationsWithReplacement(iterable, k)