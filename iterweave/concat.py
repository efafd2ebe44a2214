"""Join an iterable of sequences into one."""

from __future__ import annotations

import copy
from typing import Any, Iterable

_MISSING: Any = object()


def concat(iterable: Iterable[Any]) -> Any:
    """Extend the first item with each of the rest, without mutating the inputs.

    Items must support ``+=``. An empty iterable gives an empty list.
    """
    iterator = iter(iterable)
    first = next(iterator, _MISSING)
    if first is _MISSING:
        return []
    result = copy.copy(first)
    for item in iterator:
        result += item
    return result