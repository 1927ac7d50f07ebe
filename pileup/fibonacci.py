"""Fibonacci heaps with lazy consolidation.

Roots live in a circular doubly-linked ring and the heap keeps a pointer to
the most extreme root. Insertion and merging only splice rings together in
constant time; the work of combining trees of equal degree is deferred to
`pop_extreme`, which consolidates the whole root ring at once.

There is no decrease-key, so `replace_extreme` is a pop followed by an add.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterable, Iterator, List, Optional, Self, override

from pileup.base import Heap
from pileup.common import (
    Comparator,
    HeapKind,
    Impossible,
    Orientation,
    Priority,
    compare,
)

__all__ = ["FibonacciHeap", "FibonacciMaxHeap", "FibonacciMinHeap", "FibonacciNode"]


@dataclass(eq=False)
class FibonacciNode[T]:
    """A node of a heap-ordered tree in a Fibonacci heap.

    A fresh node forms a ring of one: `prev` and `next` point to itself.

    Attributes:
        value: The stored element.
        degree: Number of children.
        parent: Back-reference to the parent, None for roots.
        child: Any node of the ring of children.
        prev: Previous node in the sibling ring.
        next: Next node in the sibling ring.
    """

    value: T
    degree: int = 0
    parent: Optional[FibonacciNode[T]] = field(default=None, repr=False)
    child: Optional[FibonacciNode[T]] = field(default=None, repr=False)
    prev: FibonacciNode[T] = field(init=False, repr=False)
    next: FibonacciNode[T] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.prev = self
        self.next = self

    def ring(self) -> Iterator[FibonacciNode[T]]:
        """Iterate once around the ring starting at this node."""
        node = self
        while True:
            yield node
            node = node.next
            if node is self:
                break

    def children(self) -> Iterator[FibonacciNode[T]]:
        if self.child is not None:
            yield from self.child.ring()


def _splice[T](
    priority: Priority[T],
    first: Optional[FibonacciNode[T]],
    second: Optional[FibonacciNode[T]],
) -> Optional[FibonacciNode[T]]:
    """Join two disjoint rings in O(1).

    Returns whichever of the two given nodes is more extreme (on ties,
    `second`), or the other one if either ring is absent.
    """
    if first is None:
        return second
    if second is None:
        return first
    first_next = first.next
    first.next = second.next
    first.next.prev = first
    second.next = first_next
    second.next.prev = second
    return first if priority.better(first.value, second.value) else second


def _unlink[T](node: FibonacciNode[T]) -> None:
    """Cut `node` out of its ring, leaving it a ring of one."""
    node.prev.next = node.next
    node.next.prev = node.prev
    node.prev = node
    node.next = node


class FibonacciHeap[T](Heap[T]):
    """A mergeable heap that defers tree consolidation to extraction.

    Time Complexity:
        add, merge, peek_extreme: O(1)
        pop_extreme, replace_extreme: O(log n) amortized
        heapify: O(n) (repeated insertion)
    """

    kind = HeapKind.Fibonacci

    def __init__(
        self,
        orientation: Orientation,
        comparator: Comparator[T] = compare,
        values: Optional[Iterable[T]] = None,
    ) -> None:
        super().__init__(orientation, comparator)
        self._top: Optional[FibonacciNode[T]] = None
        self._size = 0
        if values is not None:
            self.heapify(values)

    @override
    def size(self) -> int:
        return self._size

    def roots(self) -> Iterator[FibonacciNode[T]]:
        """Iterate around the root ring, starting at the extreme root."""
        if self._top is not None:
            yield from self._top.ring()

    def root_degrees(self) -> List[int]:
        """List the degree of every root, starting at the extreme root."""
        return [root.degree for root in self.roots()]

    def root_count(self) -> int:
        return sum(1 for _ in self.roots())

    @override
    def add(self, value: T) -> None:
        self._top = _splice(self._priority, self._top, FibonacciNode(value))
        self._size += 1

    @override
    def _peek(self) -> T:
        if self._top is None:
            raise Impossible
        return self._top.value

    @override
    def _pop(self) -> T:
        top = self._top
        if top is None:
            raise Impossible
        for child in top.children():
            child.parent = None
        survivor = None if top.next is top else top.next
        _unlink(top)
        self._size -= 1
        self._top = _splice(self._priority, survivor, top.child)
        top.child = None
        if survivor is not None:
            self._top = survivor
            self._consolidate()
        return top.value

    def _consolidate(self) -> None:
        """Link roots of equal degree until every degree is unique.

        Rebuilds the root ring from the degree buckets and recomputes the
        extreme root.
        """
        if self._top is None:
            return
        roots = list(self._top.ring())
        buckets: List[Optional[FibonacciNode[T]]] = []
        for root in roots:
            current = root
            while True:
                while len(buckets) <= current.degree:
                    buckets.append(None)
                other = buckets[current.degree]
                if other is None:
                    break
                buckets[current.degree] = None
                if self._priority.worse(current.value, other.value):
                    top, below = other, current
                else:
                    top, below = current, other
                _unlink(below)
                top.child = _splice(self._priority, below, top.child)
                below.parent = top
                top.degree += 1
                current = top
            buckets[current.degree] = current

        self._top = None
        survivors = 0
        for root in buckets:
            if root is not None:
                root.prev = root
                root.next = root
                self._top = _splice(self._priority, self._top, root)
                survivors += 1
        logging.debug("consolidated %d roots into %d", len(roots), survivors)

    @override
    def _absorb(self, other: Self) -> None:
        self._top = _splice(self._priority, self._top, other._top)
        self._size += other._size
        other.clear()

    @override
    def clear(self) -> None:
        self._top = None
        self._size = 0

    @override
    def to_list(self) -> List[T]:
        values: List[T] = []
        queue: Deque[FibonacciNode[T]] = deque(self.roots())
        while queue:
            node = queue.popleft()
            values.append(node.value)
            queue.extend(node.children())
        return values

    @override
    def _spawn(self, orientation: Orientation) -> FibonacciHeap[T]:
        match orientation:
            case Orientation.Max:
                return FibonacciMaxHeap(self.comparator)
            case Orientation.Min:
                return FibonacciMinHeap(self.comparator)
            case _:
                raise Impossible


class FibonacciMaxHeap[T](FibonacciHeap[T]):
    """A Fibonacci heap surfacing its greatest element."""

    def __init__(
        self,
        comparator: Comparator[T] = compare,
        values: Optional[Iterable[T]] = None,
    ) -> None:
        super().__init__(Orientation.Max, comparator, values)


class FibonacciMinHeap[T](FibonacciHeap[T]):
    """A Fibonacci heap surfacing its least element."""

    def __init__(
        self,
        comparator: Comparator[T] = compare,
        values: Optional[Iterable[T]] = None,
    ) -> None:
        super().__init__(Orientation.Min, comparator, values)
