"""Tests for EnumIterator."""

import copy
from enum import IntEnum

import pytest

from enumhelpers import DereferenceOutOfRange, EnumIterator


class TestConstruction:
    """Construction and configuration."""

    def test_default_starts_at_zero(self, foo):
        it = EnumIterator(foo)
        assert it.position == 0
        assert it.value is foo.Bar

    def test_start_from_member(self, foo):
        it = EnumIterator(foo, foo.Fooz)
        assert it.position == 2
        assert it.value is foo.Fooz

    def test_start_from_integer(self, foo):
        assert EnumIterator(foo, 1).value is foo.Baz

    def test_terminal_defaults_to_count(self, foo):
        assert EnumIterator(foo).last == 3

    def test_terminal_from_cardinality(self, color):
        assert EnumIterator(color).last == 4

    def test_explicit_terminal(self, foo):
        it = EnumIterator(foo, last=foo.Fooz)
        assert list(it) == [foo.Bar, foo.Baz]

    @pytest.mark.parametrize("step", [0, -1, 1.5, True])
    def test_invalid_step(self, foo, step):
        with pytest.raises(ValueError, match="step must be a positive integer"):
            EnumIterator(foo, step=step)

    def test_repr(self, foo):
        assert repr(EnumIterator(foo)) == (
            "EnumIterator(Foo, position=0, last=3, step=1)"
        )


class TestIteration:
    """Range traversal."""

    def test_unit_step_yields_all_members(self, foo):
        values = list(EnumIterator(foo))
        assert values == [foo.Bar, foo.Baz, foo.Fooz]
        assert [int(v) for v in values] == [0, 1, 2]

    def test_count_is_never_yielded(self, foo):
        assert foo.Count not in list(EnumIterator(foo))

    def test_len(self, foo, spaced):
        assert len(EnumIterator(foo)) == 3
        assert len(EnumIterator(spaced, step=2)) == 3

    def test_spaced_members(self, spaced):
        assert list(EnumIterator(spaced, step=2)) == [spaced.A, spaced.B, spaced.C]

    def test_step_does_not_overshoot_terminal(self):
        class Odd(IntEnum):
            A = 0
            B = 2
            C = 4
            Count = 5

        values = list(EnumIterator(Odd, step=2))
        assert values == [Odd.A, Odd.B, Odd.C]
        assert all(int(v) < 5 for v in values)

    def test_iteration_is_multi_pass(self, foo):
        it = EnumIterator(foo)
        assert list(it) == list(it)
        assert it.position == 0

    def test_iterates_full_range_from_any_position(self, foo):
        it = EnumIterator(foo, foo.Fooz)
        assert list(it) == [foo.Bar, foo.Baz, foo.Fooz]

    def test_manual_loop_reaches_end(self, foo):
        it = EnumIterator(foo).begin()
        seen = []
        while it != it.end():
            seen.append(it.value)
            it.increment()
        assert seen == [foo.Bar, foo.Baz, foo.Fooz]
        assert it == EnumIterator(foo).end()

    def test_cardinality_terminal_iteration(self, color):
        assert list(EnumIterator(color)) == list(color)


class TestIncrement:
    """Pre- and post-increment semantics."""

    def test_pre_increment_returns_new_state(self, foo):
        b = EnumIterator(foo)
        result = b.increment()
        assert result is b
        assert result.value is foo.Baz

    def test_post_increment_returns_old_state(self, foo):
        a = EnumIterator(foo)
        old = a.post_increment()
        assert old.value is foo.Bar
        assert a.value is foo.Baz
        assert old is not a

    def test_increment_uses_step(self, spaced):
        it = EnumIterator(spaced, step=2)
        it.increment()
        assert it.position == 2
        it.post_increment()
        assert it.position == 4

    def test_advance(self, foo):
        it = EnumIterator(foo).advance(2)
        assert it.value is foo.Fooz

    def test_advancing_past_terminal_does_not_wrap(self, foo):
        it = EnumIterator(foo).advance(5)
        assert it.position == 5
        assert it > it.end()


class TestDereference:
    """Bounds checks on dereference."""

    def test_end_dereference_is_violation(self, foo):
        with pytest.raises(DereferenceOutOfRange):
            EnumIterator(foo).end().value

    def test_violation_is_assertion_error(self, foo):
        with pytest.raises(AssertionError):
            EnumIterator(foo, foo.Count).deref()

    def test_past_end_dereference_is_violation(self, foo):
        it = EnumIterator(foo).advance(4)
        with pytest.raises(DereferenceOutOfRange, match="position 4"):
            it.deref()

    def test_negative_position_is_violation(self, foo):
        with pytest.raises(DereferenceOutOfRange):
            EnumIterator(foo, -1).deref()


class TestComparison:
    """Comparisons look at raw positions only."""

    def test_independent_begins_are_equal(self, foo):
        a = EnumIterator(foo)
        b = EnumIterator(foo)
        assert a == b
        assert a is not b
        assert a.begin() == b.begin()

    def test_ordering(self, foo):
        first = EnumIterator(foo)
        second = EnumIterator(foo, foo.Baz)
        assert first < second
        assert first <= second
        assert second > first
        assert second >= first
        assert first != second
        assert first <= first.copy()
        assert first >= first.copy()

    def test_equality_ignores_enum_type(self, foo, color):
        assert EnumIterator(foo, 1) == EnumIterator(color, 1)

    def test_comparison_with_other_types(self, foo):
        it = EnumIterator(foo)
        assert it != 0
        assert (it == 0) is False
        with pytest.raises(TypeError):
            it < 1

    def test_unhashable(self, foo):
        with pytest.raises(TypeError):
            hash(EnumIterator(foo))


class TestCopy:
    """Iterators are independent values."""

    def test_copy_is_independent(self, foo):
        a = EnumIterator(foo)
        b = a.copy()
        b.increment()
        assert a.position == 0
        assert b.position == 1

    def test_copy_module(self, foo):
        a = EnumIterator(foo, foo.Baz, step=1)
        b = copy.copy(a)
        assert b == a
        assert b.enum_type is foo
        assert b.last == a.last

    def test_begin_and_end_keep_configuration(self, spaced):
        it = EnumIterator(spaced, spaced.B, step=2)
        assert it.begin().position == 0
        assert it.end().position == 6
        assert it.end().step == 2
        assert it.position == 2
