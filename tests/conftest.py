"""Shared fixtures for the enumhelpers test suite."""

from __future__ import annotations

from enum import IntEnum

import pytest

from enumhelpers.config import reset_config


class Foo(IntEnum):
    Bar = 0
    Baz = 1
    Fooz = 2
    Count = 3


class Spaced(IntEnum):
    """Members deliberately spaced by two."""

    A = 0
    B = 2
    C = 4
    Count = 6


class Color(IntEnum):
    """Enumeration without a terminating member."""

    RED = 0
    GREEN = 1
    BLUE = 2
    ALPHA = 3


@pytest.fixture(autouse=True)
def _default_config():
    """Every test starts and ends with the environment default configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def foo():
    return Foo


@pytest.fixture
def spaced():
    return Spaced


@pytest.fixture
def color():
    return Color
