from typing import List

import pytest

from pileup.binary import BinaryHeap, BinaryMaxHeap, BinaryMinHeap
from pileup.binomial import BinomialMinHeap
from pileup.common import EmptyHeap, InvalidArgument, Ordering, Orientation
from tests.pileup.checks import check_heap


def test_empty_heap():
    """Test a new heap is empty and refuses to peek, pop or replace"""
    heap = BinaryMinHeap[int]()
    assert heap.null()
    assert heap.size() == 0
    assert len(heap) == 0
    assert not heap
    assert heap.to_list() == []

    with pytest.raises(EmptyHeap):
        heap.peek_extreme()
    with pytest.raises(EmptyHeap):
        heap.pop_extreme()
    with pytest.raises(EmptyHeap):
        heap.replace_extreme(1)
    with pytest.raises(EmptyHeap):
        heap.remove_extreme()
    assert heap.null()


def test_empty_heap_error_is_index_error():
    """Test EmptyHeap can be caught like an empty list pop"""
    heap = BinaryMaxHeap[int]()
    with pytest.raises(IndexError):
        heap.pop_extreme()


def test_min_heap_scenario():
    """Test the extraction order of a small min-heap"""
    heap = BinaryMinHeap[int]()
    for value in [5, 3, 8, 1]:
        heap.add(value)
    assert heap.peek_extreme() == 1
    assert [heap.pop_extreme() for _ in range(4)] == [1, 3, 5, 8]
    assert heap.null()


def test_max_heap_scenario():
    """Test the extraction order of a small max-heap"""
    heap = BinaryMaxHeap[int]()
    for value in [5, 3, 8, 1]:
        heap.add(value)
    assert heap.peek_extreme() == 8
    assert [heap.pop_extreme() for _ in range(4)] == [8, 5, 3, 1]


def test_array_layout():
    """Test the backing array keeps parents at least as extreme as children"""
    heap = BinaryMaxHeap[int]()
    for value in range(10):
        heap.add(value)
    data = heap.to_list()
    assert data[0] == 9
    for i in range(1, len(data)):
        assert data[(i - 1) // 2] >= data[i]
    check_heap(heap)


def test_replace_extreme():
    """Test replace overwrites the root and sifts it down"""
    heap = BinaryMinHeap[int](values=[1, 4, 7, 9])
    heap.replace_extreme(8)
    assert heap.size() == 4
    assert heap.peek_extreme() == 4
    check_heap(heap)
    assert sorted(heap.to_list()) == [4, 7, 8, 9]


def test_remove_extreme():
    """Test remove drops the extreme element"""
    heap = BinaryMaxHeap[int](values=[2, 6, 4])
    heap.remove_extreme()
    assert heap.size() == 2
    assert heap.peek_extreme() == 4


def test_heapify_replaces_contents():
    """Test heapify discards previous contents and builds bottom-up"""
    heap = BinaryMinHeap[int](values=[100, 200])
    heap.heapify([9, 4, 7, 1, 8, 2])
    assert heap.size() == 6
    assert heap.peek_extreme() == 1
    assert sorted(heap.to_list()) == [1, 2, 4, 7, 8, 9]
    check_heap(heap)


def test_heapify_accepts_generators():
    """Test heapify consumes any iterable"""
    heap = BinaryMaxHeap[int]()
    heap.heapify(x * x for x in range(5))
    assert heap.peek_extreme() == 16


def test_heapify_empty_keeps_contents():
    """Test heapify with an empty iterable is a no-op"""
    heap = BinaryMinHeap[int](values=[3, 1, 2])
    heap.heapify([])
    assert heap.size() == 3
    assert heap.peek_extreme() == 1


def test_heapify_none_rejected():
    """Test heapify refuses None without touching the heap"""
    heap = BinaryMinHeap[int](values=[3, 1, 2])
    with pytest.raises(InvalidArgument):
        heap.heapify(None)
    assert heap.size() == 3


def test_negative_capacity_rejected():
    """Test a negative capacity is refused"""
    with pytest.raises(InvalidArgument):
        BinaryMinHeap[int](capacity=-1)
    with pytest.raises(ValueError):
        BinaryHeap[int](Orientation.Max, capacity=-5)
    assert BinaryMinHeap[int](capacity=16).null()


def test_merge_empties_other():
    """Test merge moves every element and empties the donor"""
    first = BinaryMaxHeap[int](values=[1, 5, 3])
    second = BinaryMaxHeap[int](values=[4, 9])
    first.merge(second)
    assert first.size() == 5
    assert second.size() == 0
    assert second.null()
    assert first.peek_extreme() == 9
    check_heap(first)


def test_merge_rejects_mismatch():
    """Test merge refuses other kinds, orientations and itself"""
    heap = BinaryMaxHeap[int](values=[1, 2])
    with pytest.raises(InvalidArgument):
        heap.merge(BinaryMinHeap[int](values=[3]))
    with pytest.raises(InvalidArgument):
        heap.merge(BinomialMinHeap[int](values=[3]))  # type: ignore[arg-type]
    with pytest.raises(InvalidArgument):
        heap.merge(heap)
    assert heap.size() == 2


def test_merge_with_generic_same_orientation():
    """Test the generic class merges with its oriented subclass"""
    heap = BinaryHeap[int](Orientation.Min, values=[5, 6])
    other = BinaryMinHeap[int](values=[1])
    heap.merge(other)
    assert heap.peek_extreme() == 1
    assert other.null()


def test_clear():
    """Test clear empties the heap and allows reuse"""
    heap = BinaryMinHeap[int](values=[3, 2, 1])
    heap.clear()
    assert heap.null()
    heap.add(7)
    assert heap.peek_extreme() == 7


def test_to_opposite():
    """Test conversion to the opposite orientation keeps the elements"""
    heap = BinaryMaxHeap[int](values=[4, 1, 3, 2])
    opposite = heap.to_opposite()
    assert isinstance(opposite, BinaryMinHeap)
    assert opposite.peek_extreme() == 1
    assert sorted(opposite.to_list()) == [1, 2, 3, 4]
    assert heap.size() == 4
    back = opposite.to_opposite()
    assert isinstance(back, BinaryMaxHeap)
    assert back.peek_extreme() == 4


def test_custom_comparator():
    """Test a comparator ordering strings by length"""

    def by_length(a: str, b: str) -> Ordering:
        if len(a) < len(b):
            return Ordering.Lt
        elif len(a) > len(b):
            return Ordering.Gt
        else:
            return Ordering.Eq

    heap = BinaryMaxHeap[str](by_length, values=["a", "ccc", "bb"])
    assert heap.peek_extreme() == "ccc"
    assert heap.to_opposite().peek_extreme() == "a"


def test_duplicates():
    """Test equal elements are all kept and extracted"""
    heap = BinaryMinHeap[int](values=[2, 1, 2, 1, 2])
    out: List[int] = []
    while heap:
        out.append(heap.pop_extreme())
    assert out == [1, 1, 2, 2, 2]


def test_iteration_snapshot():
    """Test iterating yields the array order and tolerates mutation"""
    heap = BinaryMinHeap[int](values=[3, 1, 2])
    seen = []
    for value in heap:
        seen.append(value)
        heap.add(value + 10)
    assert sorted(seen) == [1, 2, 3]
    assert heap.size() == 6
