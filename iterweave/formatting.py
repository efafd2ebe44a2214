"""Lazy, one-shot formatting of an iterable's elements with a separator."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator


class Format:
    """Formats each element with the given spec, joined by ``sep``.

    It can be formatted once only; the elements are consumed then.
    """

    def __init__(self, iterable: Iterable[Any], sep: str) -> None:
        self._sep = sep
        self._iter: Iterator[Any] | None = iter(iterable)

    def __str__(self) -> str:
        return self.__format__("")

    def __format__(self, spec: str) -> str:
        iterator = self._iter
        if iterator is None:
            raise RuntimeError("Format: was already formatted once")
        self._iter = None
        return self._sep.join(format(item, spec) for item in iterator)


class FormatWith:
    """Formats elements through a callback, joined by ``sep``.

    The callback is called as ``f(item, emit)`` and passes each piece of text
    to ``emit``. It can be formatted once only.
    """

    def __init__(
        self,
        iterable: Iterable[Any],
        sep: str,
        f: Callable[[Any, Callable[[Any], None]], Any],
    ) -> None:
        self._sep = sep
        self._inner: tuple[Iterator[Any], Callable[..., Any]] | None = (iter(iterable), f)

    def __str__(self) -> str:
        inner = self._inner
        if inner is None:
            raise RuntimeError("FormatWith: was already formatted once")
        self._inner = None
        iterator, f = inner
        pieces: list[str] = []

        def emit(value: Any) -> None:
            pieces.append(str(value))

        for index, item in enumerate(iterator):
            if index and self._sep:
                pieces.append(self._sep)
            f(item, emit)
        return "".join(pieces)


def format_iter(iterable: Iterable[Any], sep: str) -> Format:
    """Lazily format ``iterable``'s elements separated by ``sep``."""
    return Format(iterable, sep)


def format_with(
    iterable: Iterable[Any], sep: str, f: Callable[[Any, Callable[[Any], None]], Any]
) -> FormatWith:
    """Lazily format ``iterable``'s elements through ``f``, separated by ``sep``."""
    return FormatWith(iterable, sep, f)