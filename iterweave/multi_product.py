"""Cartesian product over any number of iterables."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

_MISSING: Any = object()


class _Slot:
    """One factor of the product: its elements and a cursor into them."""

    __slots__ = ("items", "pos", "cur")

    def __init__(self, iterable: Iterable[Any]) -> None:
        self.items = tuple(iterable)
        self.pos = 0
        self.cur: Any = _MISSING

    def iterate(self) -> None:
        if self.pos < len(self.items):
            self.cur = self.items[self.pos]
            self.pos += 1
        else:
            self.cur = _MISSING

    def reset(self) -> None:
        self.pos = 0

    def in_progress(self) -> bool:
        return self.cur is not _MISSING

    def remaining(self) -> int:
        return len(self.items) - self.pos


class MultiProduct:
    """Iterator over the cartesian product of several iterables, as lists.

    The rightmost factor varies fastest. No iterables give no elements.
    """

    def __init__(self, iterables: Iterable[Iterable[Any]]) -> None:
        self._slots = [_Slot(iterable) for iterable in iterables]
        self._done = False

    def _advance(self, upto: int, on_first: bool | None) -> bool:
        if upto == 0:
            return False if on_first is None else on_first
        last = self._slots[upto - 1]
        if on_first is None:
            on_first = not last.in_progress()
        if not on_first:
            last.iterate()
        if last.in_progress():
            return True
        if self._advance(upto - 1, on_first):
            last.reset()
            last.iterate()
            return last.in_progress()
        return False

    def _in_progress(self) -> bool:
        return bool(self._slots) and self._slots[-1].in_progress()

    def __iter__(self) -> Iterator[list[Any]]:
        return self

    def __next__(self) -> list[Any]:
        if not self._done and self._advance(len(self._slots), None):
            return [slot.cur for slot in self._slots]
        self._done = True
        raise StopIteration

    def count(self) -> int:
        """Number of products still to come."""
        if self._done or not self._slots:
            return 0
        if not self._in_progress():
            total = 1
            for slot in self._slots:
                total *= slot.remaining()
            return total
        total = 0
        for slot in self._slots:
            total = total * len(slot.items) + slot.remaining()
        return total

    def last(self) -> list[Any] | None:
        """The final product still to come, or None; exhausts the iterator."""
        remaining = self.count()
        self._done = True
        if remaining == 0:
            return None
        return [slot.items[-1] for slot in self._slots]


def multi_cartesian_product(iterables: Iterable[Iterable[Any]]) -> MultiProduct:
    """Cartesian product of every iterable in ``iterables``."""
    return MultiProduct(iterables)