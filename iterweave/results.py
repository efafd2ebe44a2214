"""Adaptors for iterables of ``Ok``/``Err`` results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Union


@dataclass(frozen=True, slots=True)
class Ok:
    """A successful result holding ``value``."""

    value: Any

    def is_ok(self) -> bool:
        """Always True."""
        return True


@dataclass(frozen=True, slots=True)
class Err:
    """A failed result holding ``error``."""

    error: Any

    def is_ok(self) -> bool:
        """Always False."""
        return False


Result = Union[Ok, Err]


def _check(item: Any) -> Result:
    if not isinstance(item, (Ok, Err)):
        raise TypeError(f"expected Ok or Err, got {type(item).__name__}")
    return item


def filter_ok(
    iterable: Iterable[Result], predicate: Callable[[Any], bool]
) -> Iterator[Result]:
    """Keep ``Ok`` values for which ``predicate`` holds; pass every ``Err`` through."""
    for item in iterable:
        if isinstance(_check(item), Err) or predicate(item.value):
            yield item


def filter_map_ok(
    iterable: Iterable[Result], f: Callable[[Any], Any]
) -> Iterator[Result]:
    """Map ``Ok`` values with ``f``, dropping those where it returns None.

    Every ``Err`` is passed through unchanged.
    """
    for item in iterable:
        if isinstance(_check(item), Err):
            yield item
            continue
        mapped = f(item.value)
        if mapped is not None:
            yield Ok(mapped)


def map_ok(iterable: Iterable[Result], f: Callable[[Any], Any]) -> Iterator[Result]:
    """Apply ``f`` inside each ``Ok``; pass every ``Err`` through."""
    for item in iterable:
        if isinstance(_check(item), Err):
            yield item
        else:
            yield Ok(f(item.value))


def map_into(iterable: Iterable[Any], convert: Callable[[Any], Any]) -> Iterator[Any]:
    """Convert every element with ``convert``, such as a type constructor."""
    for item in iterable:
        yield convert(item)


def flatten_ok(iterable: Iterable[Result]) -> Iterator[Result]:
    """Yield each element of an ``Ok``'s iterable as its own ``Ok``; pass ``Err`` through."""
    for item in iterable:
        if isinstance(_check(item), Err):
            yield item
        else:
            for inner in item.value:
                yield Ok(inner)