"""enumhelpers: iteration and fixed arrays for sequential enumerations.

Primary API:
    EnumIterator - Walk the members of an enumeration in declaration order
    EnumArray - Fixed-size array indexed by position or by enum member
    ElementCursor - Unchecked forward/reverse cursor over an EnumArray

Example:
    from enum import IntEnum
    from enumhelpers import EnumArray, EnumIterator

    class Foo(IntEnum):
        Bar = 0
        Baz = 1
        Fooz = 2
        Count = 3

    list(EnumIterator(Foo))          # [Foo.Bar, Foo.Baz, Foo.Fooz]

    names = EnumArray(Foo, ["Bar", "Baz", "Fooz"])
    names[Foo.Fooz]                  # "Fooz"
    list(reversed(names))            # ["Fooz", "Baz", "Bar"]

Contract violations (out-of-range dereference or indexed access) raise
`ContractViolation` subclasses while `CONFIG.checks_enabled` is true, which is
the default unless Python runs with ``-O`` or ``ENUMHELPERS_DISABLE_CHECKS``
is set.
"""

from __future__ import annotations

from collections.abc import Sequence

from enumhelpers import logging
from enumhelpers._version import __version__
from enumhelpers.array import ElementCursor, EnumArray
from enumhelpers.config import CONFIG, EnumHelpersConfig, configure, reset_config
from enumhelpers.contracts import (
    ContractViolation,
    DereferenceOutOfRange,
    IndexOutOfRange,
    SizeMismatchError,
)
from enumhelpers.iterator import EnumIterator
from enumhelpers.utils.enums import is_sequential, terminal_value, underlying_value

if CONFIG.std_includes:
    Sequence.register(EnumArray)

__all__ = [
    # Version
    "__version__",
    # Containers
    "EnumIterator",
    "EnumArray",
    "ElementCursor",
    # Errors
    "ContractViolation",
    "DereferenceOutOfRange",
    "IndexOutOfRange",
    "SizeMismatchError",
    # Configuration
    "CONFIG",
    "EnumHelpersConfig",
    "configure",
    "reset_config",
    # Enumeration layout
    "is_sequential",
    "terminal_value",
    "underlying_value",
    # Utilities
    "logging",
]
