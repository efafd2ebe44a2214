"""Compare two iterables in lock-step and describe where they part ways."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable

from iterweave.adaptors import PutBack, put_back

_MISSING: Any = object()


@dataclass
class FirstMismatch:
    """Elements at ``index`` differ; both iterators resume at the mismatch."""

    index: int
    first: PutBack
    second: PutBack


@dataclass
class Shorter:
    """``second`` ended after ``index`` elements; ``remaining`` holds the rest of ``first``."""

    index: int
    remaining: PutBack


@dataclass
class Longer:
    """``first`` ended after ``index`` elements; ``remaining`` holds the rest of ``second``."""

    index: int
    remaining: PutBack


def diff_with(
    first: Iterable[Any],
    second: Iterable[Any],
    is_equal: Callable[[Any, Any], bool],
) -> FirstMismatch | Shorter | Longer | None:
    """Describe how ``second`` differs from ``first``, or None if they match."""
    first_iter = iter(first)
    second_iter = iter(second)
    index = 0
    for a in first_iter:
        b = next(second_iter, _MISSING)
        if b is _MISSING:
            return Shorter(index, put_back(first_iter).with_value(a))
        if not is_equal(a, b):
            return FirstMismatch(
                index,
                put_back(first_iter).with_value(a),
                put_back(second_iter).with_value(b),
            )
        index += 1
    b = next(second_iter, _MISSING)
    if b is _MISSING:
        return None
    return Longer(index, put_back(second_iter).with_value(b))