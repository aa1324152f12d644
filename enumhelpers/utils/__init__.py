"""Helpers for reading the integer layout of enumerations."""

from enumhelpers.utils.enums import (
    TERMINAL_NAME,
    is_sequential,
    terminal_value,
    underlying_value,
)

__all__ = [
    "TERMINAL_NAME",
    "is_sequential",
    "terminal_value",
    "underlying_value",
]
