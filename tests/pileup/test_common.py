"""Tests for common ordering types and functions."""

from pileup.common import (
    EmptyHeap,
    HeapError,
    InvalidArgument,
    Ordering,
    Orientation,
    Priority,
    compare,
)


def test_compare_natural_order():
    """Test compare follows __eq__ and __lt__."""
    assert compare(1, 2) == Ordering.Lt
    assert compare(2, 1) == Ordering.Gt
    assert compare(1, 1) == Ordering.Eq
    assert compare("a", "b") == Ordering.Lt


def test_ordering_flip():
    """Test flipping an ordering swaps Lt and Gt."""
    assert Ordering.Lt.flip() == Ordering.Gt
    assert Ordering.Gt.flip() == Ordering.Lt
    assert Ordering.Eq.flip() == Ordering.Eq


def test_orientation_flip():
    """Test the two orientations are each other's opposite."""
    assert Orientation.Max.flip() == Orientation.Min
    assert Orientation.Min.flip() == Orientation.Max
    assert Orientation("max") == Orientation.Max


def test_priority_max():
    """Test a max priority prefers greater values."""
    priority = Priority(compare, Orientation.Max)
    assert priority.better(3, 2)
    assert not priority.better(2, 3)
    assert not priority.better(2, 2)
    assert priority.worse(2, 3)
    assert priority.rank(3, 2) == Ordering.Gt


def test_priority_min_is_flipped_max():
    """Test a min priority is the max priority with the comparison flipped."""
    priority = Priority(compare, Orientation.Min)
    assert priority.better(2, 3)
    assert not priority.better(3, 2)
    assert not priority.worse(2, 2)
    assert priority.rank(2, 3) == Ordering.Gt


def test_priority_custom_comparator():
    """Test the comparator decides before the orientation is applied."""

    def by_abs(a: int, b: int) -> Ordering:
        return compare(abs(a), abs(b))

    assert Priority(by_abs, Orientation.Max).better(-5, 3)
    assert Priority(by_abs, Orientation.Min).better(3, -5)


def test_error_hierarchy():
    """Test heap errors remain catchable as builtin exceptions."""
    assert issubclass(EmptyHeap, HeapError)
    assert issubclass(EmptyHeap, IndexError)
    assert issubclass(InvalidArgument, HeapError)
    assert issubclass(InvalidArgument, ValueError)
