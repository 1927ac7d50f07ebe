"""Array-backed binary heaps.

The heap is a complete binary tree laid out in a Python list: the children
of slot `i` live at `2i + 1` and `2i + 2` and its parent at `(i - 1) // 2`.
No slot holds a value worse than either of its children.

The sift helpers work on any slice of a list so that `pileup.sorting` can
reuse them in place.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Self, override

from pileup.base import Heap
from pileup.common import (
    Comparator,
    HeapKind,
    Impossible,
    InvalidArgument,
    Orientation,
    compare,
)

__all__ = [
    "BinaryHeap",
    "BinaryMaxHeap",
    "BinaryMinHeap",
    "build_heap",
    "sift_down",
    "sift_up",
]


def sift_up[T](data: List[T], node: int, better: Callable[[T, T], bool]) -> None:
    """Move `data[node]` towards the root while it beats its parent.

    Args:
        data: The backing list of a heap rooted at index 0.
        node: Index of the element to move.
        better: Strict "more extreme than" predicate.
    """
    while node > 0:
        parent = (node - 1) // 2
        if not better(data[node], data[parent]):
            break
        data[parent], data[node] = data[node], data[parent]
        node = parent


def sift_down[T](
    data: List[T],
    node: int,
    better: Callable[[T, T], bool],
    start: int = 0,
    end: Optional[int] = None,
) -> None:
    """Move `data[node]` towards the leaves while a child beats it.

    The heap occupies `data[start:end]` with its root at `start`; at each
    step the node swaps with the more extreme of its children.

    Args:
        data: The backing list.
        node: Absolute index of the element to move.
        better: Strict "more extreme than" predicate.
        start: Absolute index of the heap root.
        end: Absolute index one past the last heap slot (defaults to len).
    """
    if end is None:
        end = len(data)
    while True:
        left = start + 2 * (node - start) + 1
        if left >= end:
            break
        right = left + 1
        chosen = node
        if right < end and better(data[right], data[chosen]):
            chosen = right
        if better(data[left], data[chosen]):
            chosen = left
        if chosen == node:
            break
        data[node], data[chosen] = data[chosen], data[node]
        node = chosen


def build_heap[T](
    data: List[T],
    better: Callable[[T, T], bool],
    start: int = 0,
    end: Optional[int] = None,
) -> None:
    """Arrange `data[start:end]` into a heap in O(n) by bottom-up sifting."""
    if end is None:
        end = len(data)
    count = end - start
    for node in reversed(range(start, start + count // 2)):
        sift_down(data, node, better, start, end)


class BinaryHeap[T](Heap[T]):
    """A binary heap stored in a contiguous list.

    Time Complexity:
        add, pop_extreme, replace_extreme: O(log n)
        peek_extreme: O(1)
        heapify: O(n)
    """

    kind = HeapKind.Binary

    def __init__(
        self,
        orientation: Orientation,
        comparator: Comparator[T] = compare,
        capacity: int = 0,
        values: Optional[Iterable[T]] = None,
    ) -> None:
        """Create a binary heap.

        Args:
            orientation: Which end of the order is extreme.
            comparator: Total order over the elements.
            capacity: Expected number of elements, a sizing hint (must be >= 0).
            values: Optional initial contents.

        Raises:
            InvalidArgument: If capacity is negative.
        """
        if capacity < 0:
            raise InvalidArgument("BinaryHeap capacity must be non-negative")
        super().__init__(orientation, comparator)
        self._data: List[T] = []
        if values is not None:
            self.heapify(values)

    @override
    def size(self) -> int:
        return len(self._data)

    @override
    def add(self, value: T) -> None:
        self._data.append(value)
        sift_up(self._data, len(self._data) - 1, self._priority.better)

    @override
    def _peek(self) -> T:
        return self._data[0]

    @override
    def _pop(self) -> T:
        data = self._data
        top = data[0]
        last = data.pop()
        if data:
            data[0] = last
            sift_down(data, 0, self._priority.better)
        return top

    @override
    def _replace(self, value: T) -> None:
        self._data[0] = value
        sift_down(self._data, 0, self._priority.better)

    @override
    def heapify(self, values: Optional[Iterable[T]]) -> None:
        """Rebuild the heap from `values` in O(n).

        An empty iterable leaves the current contents in place.

        Raises:
            InvalidArgument: If `values` is None.
        """
        if values is None:
            raise InvalidArgument("cannot heapify None")
        data = list(values)
        if data:
            build_heap(data, self._priority.better)
            self._data = data

    @override
    def _absorb(self, other: Self) -> None:
        for value in other._data:
            self.add(value)
        other.clear()

    @override
    def clear(self) -> None:
        self._data = []

    @override
    def to_list(self) -> List[T]:
        return list(self._data)

    @override
    def _spawn(self, orientation: Orientation) -> BinaryHeap[T]:
        match orientation:
            case Orientation.Max:
                return BinaryMaxHeap(self.comparator, capacity=self.size())
            case Orientation.Min:
                return BinaryMinHeap(self.comparator, capacity=self.size())
            case _:
                raise Impossible


class BinaryMaxHeap[T](BinaryHeap[T]):
    """A binary heap surfacing its greatest element."""

    def __init__(
        self,
        comparator: Comparator[T] = compare,
        capacity: int = 0,
        values: Optional[Iterable[T]] = None,
    ) -> None:
        super().__init__(Orientation.Max, comparator, capacity, values)


class BinaryMinHeap[T](BinaryHeap[T]):
    """A binary heap surfacing its least element."""

    def __init__(
        self,
        comparator: Comparator[T] = compare,
        capacity: int = 0,
        values: Optional[Iterable[T]] = None,
    ) -> None:
        super().__init__(Orientation.Min, comparator, capacity, values)
