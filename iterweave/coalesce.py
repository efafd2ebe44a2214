"""Adaptors that merge adjacent elements of an iterable."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator

from iterweave.results import Err, Ok

_MISSING: Any = object()


def _run(iterator: Iterator[Any], last: Any, f: Callable[[Any, Any], Any]) -> Iterator[Any]:
    for item in iterator:
        result = f(last, item)
        if isinstance(result, Ok):
            last = result.value
        elif isinstance(result, Err):
            finished, last = result.error
            yield finished
        else:
            raise TypeError(
                f"coalesce function must return Ok or Err, got {type(result).__name__}"
            )
    yield last


def coalesce(iterable: Iterable[Any], f: Callable[[Any, Any], Any]) -> Iterator[Any]:
    """Merge adjacent elements with ``f``.

    ``f(last, item)`` returns ``Ok(merged)`` to join the two, or
    ``Err((done, next_last))`` to yield ``done`` and carry on from ``next_last``.
    """
    iterator = iter(iterable)
    first = next(iterator, _MISSING)
    if first is _MISSING:
        return iter(())
    return _run(iterator, first, f)


def dedup_by(iterable: Iterable[Any], same: Callable[[Any, Any], bool]) -> Iterator[Any]:
    """Drop each element that ``same`` judges equal to the one kept before it."""

    def merge(last: Any, item: Any) -> Any:
        return Ok(last) if same(last, item) else Err((last, item))

    return coalesce(iterable, merge)


def dedup(iterable: Iterable[Any]) -> Iterator[Any]:
    """Drop consecutive repeats, keeping the first of each run."""
    return dedup_by(iterable, lambda a, b: a == b)


def dedup_by_with_count(
    iterable: Iterable[Any], same: Callable[[Any, Any], bool]
) -> Iterator[tuple[int, Any]]:
    """Like :func:`dedup_by`, yielding ``(run_length, first_of_run)`` pairs."""

    def merge(last: tuple[int, Any], item: Any) -> Any:
        count, value = last
        if same(value, item):
            return Ok((count + 1, value))
        return Err((last, (1, item)))

    iterator = iter(iterable)
    first = next(iterator, _MISSING)
    if first is _MISSING:
        return iter(())
    return _run(iterator, (1, first), merge)


def dedup_with_count(iterable: Iterable[Any]) -> Iterator[tuple[int, Any]]:
    """Like :func:`dedup`, yielding ``(run_length, element)`` pairs."""
    return dedup_by_with_count(iterable, lambda a, b: a == b)