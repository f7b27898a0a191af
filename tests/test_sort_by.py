from enum import Enum

import pytest

from sortable import Direction, NullHandling, SortableField, SortBy


def test_direction_invert_swaps():
    assert Direction.ASCENDING.invert() is Direction.DESCENDING
    assert Direction.DESCENDING.invert() is Direction.ASCENDING


def test_null_handling_defaults_to_last():
    assert NullHandling.default() is NullHandling.LAST


def test_factories():
    assert SortBy.unsortable() is None
    assert SortBy.increasing() == SortBy.fixed(Direction.ASCENDING)
    assert SortBy.decreasing() == SortBy.fixed(Direction.DESCENDING)
    assert SortBy.increasing_or_decreasing() == SortBy.reversible_from(Direction.ASCENDING)
    assert SortBy.decreasing_or_increasing() == SortBy.reversible_from(Direction.DESCENDING)
    assert SortBy.default() == SortBy.increasing_or_decreasing()


@pytest.mark.parametrize("direction", list(Direction))
def test_direction_reports_initial(direction):
    assert SortBy.fixed(direction).direction() is direction
    assert SortBy.reversible_from(direction).direction() is direction


def test_fixed_and_reversible_predicates():
    fixed = SortBy.decreasing()
    assert fixed.is_fixed() and not fixed.is_reversible()
    rev = SortBy.increasing_or_decreasing()
    assert rev.is_reversible() and not rev.is_fixed()


@pytest.mark.parametrize("requested", list(Direction))
def test_ensure_direction_clamps_fixed(requested):
    assert SortBy.decreasing().ensure_direction(requested) is Direction.DESCENDING
    assert SortBy.increasing().ensure_direction(requested) is Direction.ASCENDING


@pytest.mark.parametrize("requested", list(Direction))
def test_ensure_direction_passes_reversible(requested):
    assert SortBy.increasing_or_decreasing().ensure_direction(requested) is requested
    assert SortBy.decreasing_or_increasing().ensure_direction(requested) is requested


def test_descriptor_is_immutable():
    sb = SortBy.increasing()
    with pytest.raises(AttributeError):
        sb.initial = Direction.DESCENDING  # type: ignore[misc]


def test_named_factories_always_return_descriptors():
    for factory in (
        SortBy.increasing,
        SortBy.decreasing,
        SortBy.increasing_or_decreasing,
        SortBy.decreasing_or_increasing,
        SortBy.default,
    ):
        assert isinstance(factory(), SortBy)


def test_mixin_requires_partial_cmp_by_override():
    class Bare(SortableField, Enum):
        ONLY = "only"

    with pytest.raises(NotImplementedError):
        Bare.ONLY.partial_cmp_by(object(), object())
