"""Take the only element of an iterable, or fail without losing any."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable, Iterator

_MISSING: Any = object()


class ExactlyOneError(ValueError):
    """Raised by :func:`exactly_one`; iterating it yields every original element."""

    def __init__(self, first_two: Iterable[Any], inner: Iterator[Any]) -> None:
        self._pending: deque[Any] = deque(first_two)
        self._inner = inner
        super().__init__(str(self))

    def __str__(self) -> str:
        if self._pending:
            return "got at least 2 elements when exactly one was expected"
        return "got zero elements when exactly one was expected"

    def __repr__(self) -> str:
        if len(self._pending) == 2:
            first, second = self._pending
            return (
                f"ExactlyOneError[First: {first!r}, Second: {second!r}, "
                f"RemainingIter: {self._inner!r}]"
            )
        if self._pending:
            return (
                f"ExactlyOneError[Second: {self._pending[0]!r}, "
                f"RemainingIter: {self._inner!r}]"
            )
        return f"ExactlyOneError[RemainingIter: {self._inner!r}]"

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if self._pending:
            return self._pending.popleft()
        return next(self._inner)


def exactly_one(iterable: Iterable[Any]) -> Any:
    """Return the only element; raise :class:`ExactlyOneError` for zero or several."""
    iterator = iter(iterable)
    first = next(iterator, _MISSING)
    if first is _MISSING:
        raise ExactlyOneError((), iterator)
    second = next(iterator, _MISSING)
    if second is _MISSING:
        return first
    raise ExactlyOneError((first, second), iterator)