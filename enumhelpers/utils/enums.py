"""Integer layout of sequential enumerations.

The helpers here assume enumerations whose members are integers starting at
0 and spaced by a fixed step, optionally closed by a ``Count`` member whose
value is one step past the last real member.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Type, Union

#: Conventional name of the terminating member.
TERMINAL_NAME = "Count"

EnumBound = Union[Enum, int]


def underlying_value(member: EnumBound) -> int:
    """Return the integer representation of an enum member or integer.

    Args:
        member: Enum member with an integer value, or a plain integer.

    Returns:
        The integer value.

    Raises:
        TypeError: If the value is not an integer.
    """
    value = member.value if isinstance(member, Enum) else member
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"Enumeration values must be integers, got {type(value).__name__} "
            f"from {member!r}"
        )
    return int(value)


def validate_step(step: int) -> int:
    """Return `step` if it is a positive integer, else raise ValueError."""
    if isinstance(step, bool) or not isinstance(step, int) or step < 1:
        raise ValueError(f"step must be a positive integer, got {step!r}")
    return step


def terminal_value(
    enum_type: Type[Enum], last: Optional[EnumBound] = None, step: int = 1
) -> int:
    """Resolve the one-past-the-end value of a sequential enumeration.

    Resolution order: an explicit `last`, then a member named ``Count``, then
    the number of members multiplied by `step`.

    Args:
        enum_type: The enumeration class.
        last: Explicit terminal member or integer (optional).
        step: Spacing between consecutive members.

    Returns:
        The terminal value as an integer.
    """
    if last is not None:
        return underlying_value(last)
    members = enum_type.__members__
    if TERMINAL_NAME in members:
        return underlying_value(members[TERMINAL_NAME])
    return len(enum_type) * validate_step(step)


def is_sequential(
    enum_type: Type[Enum], last: Optional[EnumBound] = None, step: int = 1
) -> bool:
    """Check that the members below the terminal value are ``0, step, 2*step, ...``.

    Construction of iterators and arrays never calls this; it is available for
    callers who want to verify an enumeration up front.

    Args:
        enum_type: The enumeration class.
        last: Explicit terminal member or integer (optional).
        step: Spacing between consecutive members.

    Returns:
        True if every position the iterator would visit names exactly one member.
    """
    step = validate_step(step)
    end = terminal_value(enum_type, last, step)
    try:
        values = sorted(
            v for v in (underlying_value(m) for m in enum_type) if v < end
        )
    except TypeError:
        return False
    return values == list(range(0, end, step))
