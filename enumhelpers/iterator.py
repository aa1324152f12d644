"""Iterator over the members of a sequential enumeration.

`EnumIterator` is a small value type holding an integer position. It walks the
positions ``0, step, 2*step, ...`` up to (excluding) the enumeration's terminal
value and turns each position back into an enum member on dereference.

Example:
    class Foo(IntEnum):
        Bar = 0
        Baz = 1
        Fooz = 2
        Count = 3

    for member in EnumIterator(Foo):
        ...  # Foo.Bar, Foo.Baz, Foo.Fooz

    it = EnumIterator(Foo)
    while it != it.end():
        use(it.value)
        it.increment()
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, Iterator, Optional, Type, TypeVar

from enumhelpers.contracts import DereferenceOutOfRange, check
from enumhelpers.utils.enums import (
    EnumBound,
    terminal_value,
    underlying_value,
    validate_step,
)

E = TypeVar("E", bound=Enum)


class EnumIterator(Generic[E]):
    """Forward iterator over a sequential enumeration.

    Comparisons look only at the raw position, so two iterators are equal
    whenever they sit on the same integer.

    Attributes:
        enum_type: Enumeration being iterated.
        last: Terminal value; never dereferenced.
        step: Distance between consecutive positions.
    """

    __slots__ = ("enum_type", "last", "step", "_position")

    def __init__(
        self,
        enum_type: Type[E],
        start: Optional[EnumBound] = None,
        *,
        last: Optional[EnumBound] = None,
        step: int = 1,
    ) -> None:
        """Create an iterator.

        Args:
            enum_type: Enumeration class to iterate.
            start: Member (or integer) to start from. Defaults to position 0.
            last: Terminal member or integer. Defaults to the ``Count`` member,
                or the member count times `step` when there is none.
            step: Positive increment between members.
        """
        self.enum_type = enum_type
        self.step = validate_step(step)
        self.last = terminal_value(enum_type, last, self.step)
        self._position = 0 if start is None else underlying_value(start)

    @property
    def position(self) -> int:
        """Current raw integer position."""
        return self._position

    def _at(self, position: int) -> "EnumIterator[E]":
        other = self.copy()
        other._position = position
        return other

    def copy(self) -> "EnumIterator[E]":
        """Return an independent iterator at the same position."""
        other = EnumIterator.__new__(type(self))
        other.enum_type = self.enum_type
        other.last = self.last
        other.step = self.step
        other._position = self._position
        return other

    __copy__ = copy

    def increment(self) -> "EnumIterator[E]":
        """Advance by one step and return this iterator (pre-increment)."""
        self._position += self.step
        return self

    def post_increment(self) -> "EnumIterator[E]":
        """Advance by one step and return a copy of the previous state."""
        old = self.copy()
        self._position += self.step
        return old

    def advance(self, n: int = 1) -> "EnumIterator[E]":
        """Advance by `n` steps and return this iterator."""
        self._position += n * self.step
        return self

    def deref(self) -> E:
        """Return the member at the current position.

        Raises:
            DereferenceOutOfRange: If the position is outside ``[0, last)``
                while contract checks are enabled.
        """
        check(
            0 <= self._position < self.last,
            DereferenceOutOfRange,
            f"cannot dereference {self.enum_type.__name__} iterator at position "
            f"{self._position} (terminal {self.last})",
        )
        return self.enum_type(self._position)

    @property
    def value(self) -> E:
        """Member at the current position; see `deref`."""
        return self.deref()

    def begin(self) -> "EnumIterator[E]":
        """Return a fresh iterator at position 0."""
        return self._at(0)

    def end(self) -> "EnumIterator[E]":
        """Return the sentinel iterator positioned at the terminal value."""
        return self._at(self.last)

    def __iter__(self) -> Iterator[E]:
        cursor = self.begin()
        end = self.end()
        while cursor < end:
            yield cursor.deref()
            cursor.increment()

    def __len__(self) -> int:
        return len(range(0, max(self.last, 0), self.step))

    def _compare_key(self, other: Any) -> Optional[int]:
        if not isinstance(other, EnumIterator):
            return None
        return other._position

    def __eq__(self, other: Any) -> bool:
        pos = self._compare_key(other)
        if pos is None:
            return NotImplemented
        return self._position == pos

    def __ne__(self, other: Any) -> bool:
        pos = self._compare_key(other)
        if pos is None:
            return NotImplemented
        return self._position != pos

    def __lt__(self, other: Any) -> bool:
        pos = self._compare_key(other)
        if pos is None:
            return NotImplemented
        return self._position < pos

    def __gt__(self, other: Any) -> bool:
        pos = self._compare_key(other)
        if pos is None:
            return NotImplemented
        return self._position > pos

    def __le__(self, other: Any) -> bool:
        pos = self._compare_key(other)
        if pos is None:
            return NotImplemented
        return self._position <= pos

    def __ge__(self, other: Any) -> bool:
        pos = self._compare_key(other)
        if pos is None:
            return NotImplemented
        return self._position >= pos

    # Mutable value type
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"EnumIterator({self.enum_type.__name__}, position={self._position}, "
            f"last={self.last}, step={self.step})"
        )
