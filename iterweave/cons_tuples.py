"""Flatten nested pairs ``((a, b, ...), x)`` into ``(a, b, ..., x)``."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


def cons_tuples(iterable: Iterable[tuple[tuple[Any, ...], Any]]) -> Iterator[tuple[Any, ...]]:
    """Append each pair's last element to its leading tuple."""
    for head, last in iterable:
        yield (*head, last)