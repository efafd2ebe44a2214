"""Yield elements the second time they are seen."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterable, Iterator


class DuplicatesBy:
    """Iterator yielding each element whose key repeats, once, at its second sighting."""

    def __init__(self, iterable: Iterable[Any], key: Callable[[Any], Hashable]) -> None:
        self._source = iter(iterable)
        self._key = key
        self._produced: dict[Hashable, bool] = {}

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        for item in self._source:
            key = self._key(item)
            produced = self._produced.get(key)
            if produced is None:
                self._produced[key] = False
            elif not produced:
                self._produced[key] = True
                return item
        raise StopIteration


def duplicates(iterable: Iterable[Hashable]) -> DuplicatesBy:
    """Elements that occur more than once, each yielded once."""
    return DuplicatesBy(iterable, lambda item: item)


def duplicates_by(iterable: Iterable[Any], key: Callable[[Any], Hashable]) -> DuplicatesBy:
    """Elements whose ``key`` occurs more than once, each key yielded once."""
    return DuplicatesBy(iterable, key)