"""A value holding a left item, a right item, or both."""

from __future__ import annotations

from typing import Any, Callable

_MISSING: Any = object()


class EitherOrBoth:
    """Holds a left value, a right value, or both at once.

    Build instances with :func:`left`, :func:`right` and :func:`both`.
    The ``insert_*`` methods change the instance in place.
    """

    __slots__ = ("_left", "_right")

    def __init__(self, left: Any = _MISSING, right: Any = _MISSING) -> None:
        if left is _MISSING and right is _MISSING:
            raise ValueError("EitherOrBoth needs a left value, a right value, or both")
        self._left = left
        self._right = right

    # -- inspection ---------------------------------------------------------

    def has_left(self) -> bool:
        """True for ``Left`` and ``Both``."""
        return self._left is not _MISSING

    def has_right(self) -> bool:
        """True for ``Right`` and ``Both``."""
        return self._right is not _MISSING

    def is_left(self) -> bool:
        """True only for ``Left``."""
        return self.has_left() and not self.has_right()

    def is_right(self) -> bool:
        """True only for ``Right``."""
        return self.has_right() and not self.has_left()

    def is_both(self) -> bool:
        """True only for ``Both``."""
        return self.has_left() and self.has_right()

    # -- extraction ---------------------------------------------------------

    def left(self) -> Any:
        """The left value of ``Left`` or ``Both``, otherwise None."""
        return self._left if self.has_left() else None

    def right(self) -> Any:
        """The right value of ``Right`` or ``Both``, otherwise None."""
        return self._right if self.has_right() else None

    def left_and_right(self) -> tuple[Any, Any]:
        """Both sides as a pair, with None for a missing side."""
        return self.left(), self.right()

    def just_left(self) -> Any:
        """The left value of ``Left`` only, otherwise None."""
        return self._left if self.is_left() else None

    def just_right(self) -> Any:
        """The right value of ``Right`` only, otherwise None."""
        return self._right if self.is_right() else None

    def both(self) -> tuple[Any, Any] | None:
        """The pair of ``Both``, otherwise None."""
        return (self._left, self._right) if self.is_both() else None

    def into_left(self, convert: Callable[[Any], Any]) -> Any:
        """The left value, or the right value passed through ``convert``."""
        if self.has_left():
            return self._left
        return convert(self._right)

    def into_right(self, convert: Callable[[Any], Any]) -> Any:
        """The right value, or the left value passed through ``convert``."""
        if self.has_right():
            return self._right
        return convert(self._left)

    # -- transformation -----------------------------------------------------

    def flip(self) -> EitherOrBoth:
        """Swap the sides."""
        return EitherOrBoth(self._right, self._left)

    def map_left(self, f: Callable[[Any], Any]) -> EitherOrBoth:
        """Apply ``f`` to the left value if present, keeping the variant."""
        new_left = f(self._left) if self.has_left() else _MISSING
        return EitherOrBoth(new_left, self._right)

    def map_right(self, f: Callable[[Any], Any]) -> EitherOrBoth:
        """Apply ``f`` to the right value if present, keeping the variant."""
        new_right = f(self._right) if self.has_right() else _MISSING
        return EitherOrBoth(self._left, new_right)

    def map_any(self, f: Callable[[Any], Any], g: Callable[[Any], Any]) -> EitherOrBoth:
        """Apply ``f`` to the left and ``g`` to the right value, where present."""
        new_left = f(self._left) if self.has_left() else _MISSING
        new_right = g(self._right) if self.has_right() else _MISSING
        return EitherOrBoth(new_left, new_right)

    def left_and_then(self, f: Callable[[Any], EitherOrBoth]) -> EitherOrBoth:
        """Return ``f(left)`` if a left value is present, else a copy of ``Right``."""
        if self.has_left():
            return f(self._left)
        return EitherOrBoth(right=self._right)

    def right_and_then(self, f: Callable[[Any], EitherOrBoth]) -> EitherOrBoth:
        """Return ``f(right)`` if a right value is present, else a copy of ``Left``."""
        if self.has_right():
            return f(self._right)
        return EitherOrBoth(left=self._left)

    # -- defaults -----------------------------------------------------------

    def or_(self, left_default: Any, right_default: Any) -> tuple[Any, Any]:
        """Both sides as a pair, filling a missing side with the given default."""
        return (
            self._left if self.has_left() else left_default,
            self._right if self.has_right() else right_default,
        )

    def or_default(self) -> tuple[Any, Any]:
        """Both sides as a pair, with None standing in for a missing side."""
        return self.left_and_right()

    def or_else(
        self, left_factory: Callable[[], Any], right_factory: Callable[[], Any]
    ) -> tuple[Any, Any]:
        """Both sides as a pair, computing a missing side lazily."""
        return (
            self._left if self.has_left() else left_factory(),
            self._right if self.has_right() else right_factory(),
        )

    # -- in-place updates ---------------------------------------------------

    def left_or_insert(self, value: Any) -> Any:
        """Return the left value, inserting ``value`` first if it is missing."""
        return self.left_or_insert_with(lambda: value)

    def right_or_insert(self, value: Any) -> Any:
        """Return the right value, inserting ``value`` first if it is missing."""
        return self.right_or_insert_with(lambda: value)

    def left_or_insert_with(self, factory: Callable[[], Any]) -> Any:
        """Return the left value, inserting ``factory()`` first if it is missing."""
        if self.has_left():
            return self._left
        return self.insert_left(factory())

    def right_or_insert_with(self, factory: Callable[[], Any]) -> Any:
        """Return the right value, inserting ``factory()`` first if it is missing."""
        if self.has_right():
            return self._right
        return self.insert_right(factory())

    def insert_left(self, value: Any) -> Any:
        """Set the left value, leaving the right one alone, and return it."""
        self._left = value
        return value

    def insert_right(self, value: Any) -> Any:
        """Set the right value, leaving the left one alone, and return it."""
        self._right = value
        return value

    def insert_both(self, left_value: Any, right_value: Any) -> tuple[Any, Any]:
        """Make this ``Both(left_value, right_value)`` and return the pair."""
        self._left = left_value
        self._right = right_value
        return left_value, right_value

    def reduce(self, f: Callable[[Any, Any], Any]) -> Any:
        """Return the single present value, or ``f(left, right)`` for ``Both``."""
        if self.is_both():
            return f(self._left, self._right)
        return self._left if self.has_left() else self._right

    # -- protocol -----------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EitherOrBoth):
            return NotImplemented
        return (
            self.has_left() == other.has_left()
            and self.has_right() == other.has_right()
            and (not self.has_left() or self._left == other._left)
            and (not self.has_right() or self._right == other._right)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.is_both():
            return f"Both({self._left!r}, {self._right!r})"
        if self.has_left():
            return f"Left({self._left!r})"
        return f"Right({self._right!r})"


def left(value: Any) -> EitherOrBoth:
    """Build a ``Left`` value."""
    return EitherOrBoth(left=value)


def right(value: Any) -> EitherOrBoth:
    """Build a ``Right`` value."""
    return EitherOrBoth(right=value)


def both(left_value: Any, right_value: Any) -> EitherOrBoth:
    """Build a ``Both`` value."""
    return EitherOrBoth(left_value, right_value)