"""Fixed-size array indexed by a sequential enumeration.

`EnumArray` stores exactly one element per enum member below the terminal
value, in declaration order. Elements can be read and written by raw position
or by member; both forms are bounds-checked through `enumhelpers.contracts`.
Traversal (``iter``/``reversed`` and the `ElementCursor` pairs returned by
``begin``/``end``/``rbegin``/``rend``) runs directly over the backing list
without checks.

Example:
    names = EnumArray(Foo, ["Bar", "Baz", "Fooz"])
    names[Foo.Baz]                    # "Baz"
    list(zip(names.keys(), names))    # [(Foo.Bar, "Bar"), ...]
"""

from __future__ import annotations

from enum import Enum
from typing import (
    Any,
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from enumhelpers.contracts import IndexOutOfRange, SizeMismatchError, check
from enumhelpers.iterator import EnumIterator
from enumhelpers.logging import get_logger
from enumhelpers.utils.enums import EnumBound, terminal_value, underlying_value

E = TypeVar("E", bound=Enum)
T = TypeVar("T")

logger = get_logger(__name__)


class ElementCursor(Generic[T]):
    """Unchecked positional cursor over an `EnumArray`'s storage.

    The cursor aliases the array: writes through `value` land in the array,
    and array mutations are visible through the cursor. A reverse cursor walks
    from the last element towards the first. Dereferencing an end cursor is
    caller error and is not checked.
    """

    __slots__ = ("_array", "_index", "_reverse")

    def __init__(self, array: "EnumArray[Any, T]", index: int, reverse: bool = False):
        self._array = array
        self._index = index
        self._reverse = reverse

    @property
    def index(self) -> int:
        """Storage position the cursor refers to."""
        return self._index

    @property
    def reverse(self) -> bool:
        return self._reverse

    @property
    def value(self) -> T:
        return self._array._elements[self._index]

    @value.setter
    def value(self, new_value: T) -> None:
        self._array._elements[self._index] = new_value

    def copy(self) -> "ElementCursor[T]":
        return ElementCursor(self._array, self._index, self._reverse)

    __copy__ = copy

    def increment(self) -> "ElementCursor[T]":
        """Move one element along the traversal direction and return self."""
        self._index += -1 if self._reverse else 1
        return self

    def post_increment(self) -> "ElementCursor[T]":
        """Move one element along and return a copy of the previous state."""
        old = self.copy()
        self.increment()
        return old

    def until(self, end: "ElementCursor[T]") -> Iterator[T]:
        """Yield values from this cursor up to (excluding) `end`.

        The receiver is not moved.

        Raises:
            TypeError: If `end` walks another array or the other direction.
        """
        if self._offset(end) is None:
            raise TypeError(
                "until() needs an end cursor over the same array and direction"
            )
        return self._walk(end)

    def _walk(self, end: "ElementCursor[T]") -> Iterator[T]:
        cursor = self.copy()
        while cursor != end:
            yield cursor.value
            cursor.increment()

    def _offset(self, other: Any) -> Optional[Tuple[int, int]]:
        if (
            not isinstance(other, ElementCursor)
            or other._array is not self._array
            or other._reverse != self._reverse
        ):
            return None
        if self._reverse:
            return -self._index, -other._index
        return self._index, other._index

    def __eq__(self, other: Any) -> bool:
        pair = self._offset(other)
        if pair is None:
            return NotImplemented
        return pair[0] == pair[1]

    def __ne__(self, other: Any) -> bool:
        pair = self._offset(other)
        if pair is None:
            return NotImplemented
        return pair[0] != pair[1]

    def __lt__(self, other: Any) -> bool:
        pair = self._offset(other)
        if pair is None:
            return NotImplemented
        return pair[0] < pair[1]

    def __le__(self, other: Any) -> bool:
        pair = self._offset(other)
        if pair is None:
            return NotImplemented
        return pair[0] <= pair[1]

    def __gt__(self, other: Any) -> bool:
        pair = self._offset(other)
        if pair is None:
            return NotImplemented
        return pair[0] > pair[1]

    def __ge__(self, other: Any) -> bool:
        pair = self._offset(other)
        if pair is None:
            return NotImplemented
        return pair[0] >= pair[1]

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        direction = "reverse" if self._reverse else "forward"
        return f"ElementCursor(index={self._index}, {direction})"


class EnumArray(Generic[E, T]):
    """Fixed-size array with one slot per enumeration member.

    The size is the enumeration's terminal value and never changes. Position
    ``i`` holds the value for the member whose integer value is ``i``.

    Attributes:
        enum_type: Enumeration providing the keys.
    """

    __slots__ = ("enum_type", "_elements")

    def __init__(
        self,
        enum_type: Type[E],
        elements: Iterable[T],
        *,
        last: Optional[EnumBound] = None,
    ) -> None:
        """Create an array from one element per member, in declaration order.

        Args:
            enum_type: Enumeration used for keyed access.
            elements: Values for positions ``0 .. size - 1``.
            last: Terminal member or integer fixing the size. Defaults to the
                ``Count`` member, or the number of members.

        Raises:
            SizeMismatchError: If the number of elements differs from the size.
        """
        size = terminal_value(enum_type, last)
        if size < 0:
            raise ValueError(f"Array size must be non-negative, got {size}")
        values = list(elements)
        if len(values) != size:
            raise SizeMismatchError(
                f"EnumArray[{enum_type.__name__}] expects {size} elements, "
                f"got {len(values)}"
            )
        self.enum_type = enum_type
        self._elements: List[T] = values
        logger.debug(f"Created EnumArray[{enum_type.__name__}] with {size} elements")

    @classmethod
    def from_mapping(
        cls,
        enum_type: Type[E],
        mapping: Mapping[E, T],
        *,
        last: Optional[EnumBound] = None,
    ) -> "EnumArray[E, T]":
        """Create an array from a ``{member: value}`` mapping covering every key.

        Raises:
            SizeMismatchError: If keys are missing or the mapping holds keys
                outside the array.
        """
        keys = list(EnumIterator(enum_type, last=terminal_value(enum_type, last)))
        missing = [k for k in keys if k not in mapping]
        extra = [k for k in mapping if k not in keys]
        if missing or extra:
            logger.debug(
                f"Mapping for {enum_type.__name__} has {len(missing)} missing and "
                f"{len(extra)} unexpected keys"
            )
            parts = []
            if missing:
                parts.append("missing " + ", ".join(repr(k) for k in missing))
            if extra:
                parts.append("unexpected " + ", ".join(repr(k) for k in extra))
            raise SizeMismatchError(
                f"EnumArray[{enum_type.__name__}] mapping mismatch: {'; '.join(parts)}"
            )
        return cls(enum_type, (mapping[k] for k in keys), last=len(keys))

    @classmethod
    def filled(
        cls, enum_type: Type[E], value: T, *, last: Optional[EnumBound] = None
    ) -> "EnumArray[E, T]":
        """Create an array whose every slot holds `value`."""
        size = terminal_value(enum_type, last)
        logger.debug(f"Filling EnumArray[{enum_type.__name__}] with {value!r}")
        return cls(enum_type, [value] * max(size, 0), last=size)

    def _position(self, index: Union[E, int]) -> int:
        if isinstance(index, Enum):
            if not isinstance(index, self.enum_type):
                raise TypeError(
                    f"EnumArray[{self.enum_type.__name__}] cannot be indexed by "
                    f"{type(index).__name__} member {index!r}"
                )
            position = underlying_value(index)
        elif isinstance(index, int) and not isinstance(index, bool):
            position = index
        else:
            raise TypeError(
                f"EnumArray indices must be integers or {self.enum_type.__name__} "
                f"members, not {type(index).__name__}"
            )
        check(
            0 <= position < len(self._elements),
            IndexOutOfRange,
            f"index {index!r} out of range for EnumArray[{self.enum_type.__name__}] "
            f"of size {len(self._elements)}",
        )
        return position

    def __getitem__(self, index: Union[E, int, slice]) -> Any:
        """Return the element at a position or member, or a list for a slice."""
        if isinstance(index, slice):
            return self._elements[index]
        return self._elements[self._position(index)]

    def __setitem__(self, index: Union[E, int], value: T) -> None:
        # No slice assignment: the size is fixed
        self._elements[self._position(index)] = value

    def size(self) -> int:
        """Return the fixed number of slots."""
        return len(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def keys(self) -> EnumIterator[E]:
        """Return an iterator over the members matching each position."""
        return EnumIterator(self.enum_type, last=len(self._elements))

    def items(self) -> Iterator[Tuple[E, T]]:
        """Yield ``(member, value)`` pairs in position order."""
        return zip(self.keys(), self._elements)

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._elements)

    def begin(self) -> ElementCursor[T]:
        return ElementCursor(self, 0)

    def end(self) -> ElementCursor[T]:
        return ElementCursor(self, len(self._elements))

    def rbegin(self) -> ElementCursor[T]:
        return ElementCursor(self, len(self._elements) - 1, reverse=True)

    def rend(self) -> ElementCursor[T]:
        return ElementCursor(self, -1, reverse=True)

    def __contains__(self, value: Any) -> bool:
        return value in self._elements

    def index(self, value: Any) -> int:
        """Return the first position holding `value` (ValueError if absent)."""
        return self._elements.index(value)

    def count(self, value: Any) -> int:
        return self._elements.count(value)

    def to_list(self) -> List[T]:
        """Return a shallow copy of the elements."""
        return list(self._elements)

    def to_dict(self) -> Dict[E, T]:
        """Return a ``{member: value}`` dictionary."""
        return dict(self.items())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, EnumArray):
            return NotImplemented
        return self.enum_type is other.enum_type and self._elements == other._elements

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"EnumArray({self.enum_type.__name__}, {self._elements!r})"
