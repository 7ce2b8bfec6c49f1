"""
Tests for Container.

These tests verify:
1. Volume stays within [0, capacity] after every operation
2. Pour moves water until the source is empty or the destination is full
3. Pour conserves total volume
4. Self-pour, empty-source and full-destination pours are no-ops
"""

import itertools

import pytest

from pourpuzzle.config import DEFAULT_CONTAINER_CAPACITY
from pourpuzzle.container import Container
from pourpuzzle.errors import PuzzleError, PuzzleErrorKind


def make(capacity: int, volume: int) -> Container:
    """Build a container holding volume units."""
    container = Container(capacity)
    for _ in range(volume):
        assert container.add_unit()
    return container


# =============================================================================
# CONSTRUCTION
# =============================================================================

class TestConstruction:
    """Test container creation."""

    def test_starts_empty(self):
        container = Container(5)

        assert container.volume == 0
        assert container.capacity == 5
        assert container.is_empty()
        assert not container.is_full()

    def test_default_capacity(self):
        assert Container().capacity == DEFAULT_CONTAINER_CAPACITY

    def test_zero_capacity_is_empty_and_full(self):
        container = Container(0)

        assert container.is_empty()
        assert container.is_full()

    def test_negative_capacity_rejected(self):
        with pytest.raises(PuzzleError) as exc_info:
            Container(-1)

        assert exc_info.value.kind is PuzzleErrorKind.INVALID_CAPACITY

    def test_non_integer_capacity_rejected(self):
        with pytest.raises(PuzzleError, match="invalid_capacity"):
            Container(2.5)


# =============================================================================
# FILL / EMPTY / UNITS
# =============================================================================

class TestFillAndEmpty:
    """Test saturating fill and empty."""

    def test_fill_reaches_capacity(self):
        container = make(8, 3)
        container.fill()

        assert container.volume == 8
        assert container.is_full()

    def test_fill_is_idempotent(self):
        container = Container(8)
        container.fill()
        container.fill()

        assert container.volume == 8

    def test_empty_is_idempotent(self):
        container = make(8, 6)
        container.empty()
        container.empty()

        assert container.volume == 0
        assert container.is_empty()

    def test_add_unit_stops_at_capacity(self):
        container = make(2, 2)

        assert container.add_unit() is False
        assert container.volume == 2

    def test_remove_unit_stops_at_zero(self):
        container = make(2, 1)

        assert container.remove_unit() is True
        assert container.remove_unit() is False
        assert container.volume == 0


# =============================================================================
# POUR
# =============================================================================

class TestPour:
    """Test the pour-until-exhausted rule."""

    def test_partial_pour_fills_destination(self):
        source = make(8, 8)
        dest = Container(5)

        moved = source.pour(dest)

        assert moved == 5
        assert source.volume == 3
        assert dest.volume == 5

    def test_pour_empties_source(self):
        source = make(3, 2)
        dest = make(5, 1)

        moved = source.pour(dest)

        assert moved == 2
        assert source.is_empty()
        assert dest.volume == 3

    def test_self_pour_is_noop(self):
        container = make(5, 3)

        assert container.pour(container) == 0
        assert container.volume == 3

    def test_pour_from_empty_is_noop(self):
        source = Container(5)
        dest = make(3, 1)

        assert source.pour(dest) == 0
        assert source.volume == 0
        assert dest.volume == 1

    def test_pour_into_full_is_noop(self):
        source = make(8, 4)
        dest = make(3, 3)

        assert source.pour(dest) == 0
        assert source.volume == 4
        assert dest.volume == 3

    def test_pour_properties_hold_for_all_small_states(self):
        """Bounds, conservation and exhaustion for every small pair."""
        for cap_a, cap_b in [(0, 3), (3, 5), (5, 3), (4, 4)]:
            for vol_a, vol_b in itertools.product(range(cap_a + 1), range(cap_b + 1)):
                a = make(cap_a, vol_a)
                b = make(cap_b, vol_b)

                a.pour(b)

                assert 0 <= a.volume <= a.capacity
                assert 0 <= b.volume <= b.capacity
                assert a.volume + b.volume == vol_a + vol_b
                assert a.is_empty() or b.is_full()


# =============================================================================
# RESIZE
# =============================================================================

class TestResize:
    """Test capacity changes."""

    def test_grow_keeps_volume(self):
        container = make(3, 3)
        container.resize(10)

        assert container.capacity == 10
        assert container.volume == 3
        assert not container.is_full()

    def test_shrink_truncates_volume(self):
        container = make(8, 6)
        container.resize(4)

        assert container.capacity == 4
        assert container.volume == 4
        assert container.is_full()

    def test_negative_resize_rejected_without_change(self):
        container = make(8, 6)

        with pytest.raises(PuzzleError) as exc_info:
            container.resize(-2)

        assert exc_info.value.kind is PuzzleErrorKind.INVALID_CAPACITY
        assert container.capacity == 8
        assert container.volume == 6
