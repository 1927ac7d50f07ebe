"""Binomial heaps: a forest of heap-ordered binomial trees.

The roots are chained through `sibling` in ascending order of degree and
the forest never holds two trees of the same degree. A degree-k tree has
exactly 2^k nodes and its children, reached through `child` and then
`sibling`, have degrees k-1, k-2, ..., 0 in that order.

Every structural change goes through one union step: merge two root lists
by degree, then walk the result linking equal-degree neighbours, the way a
binary adder propagates carries.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterable, Iterator, List, Optional, Self, override

from pileup.base import Heap
from pileup.common import Comparator, HeapKind, Impossible, Orientation, compare

__all__ = ["BinomialHeap", "BinomialMaxHeap", "BinomialMinHeap", "BinomialNode"]


@dataclass(eq=False)
class BinomialNode[T]:
    """A node of a binomial tree.

    Attributes:
        value: The stored element.
        degree: Number of children (the order of the tree rooted here).
        parent: Back-reference to the parent, None for roots.
        child: The first (highest degree) child.
        sibling: The next root in the root list, or the next child.
    """

    value: T
    degree: int = 0
    parent: Optional[BinomialNode[T]] = field(default=None, repr=False)
    child: Optional[BinomialNode[T]] = field(default=None, repr=False)
    sibling: Optional[BinomialNode[T]] = field(default=None, repr=False)

    def children(self) -> Iterator[BinomialNode[T]]:
        node = self.child
        while node is not None:
            yield node
            node = node.sibling


def _merge_root_lists[T](
    first: Optional[BinomialNode[T]], second: Optional[BinomialNode[T]]
) -> Optional[BinomialNode[T]]:
    """Interleave two degree-sorted root lists into one, like a list merge.

    On equal degrees the root from `first` goes first.
    """
    if first is None:
        return second
    if second is None:
        return first
    if first.degree <= second.degree:
        head = first
        first = first.sibling
    else:
        head = second
        second = second.sibling
    tail = head
    while first is not None and second is not None:
        if first.degree <= second.degree:
            tail.sibling = first
            first = first.sibling
        else:
            tail.sibling = second
            second = second.sibling
        tail = tail.sibling
    tail.sibling = first if first is not None else second
    return head


def _link[T](top: BinomialNode[T], below: BinomialNode[T]) -> None:
    """Make `below` the first child of `top`, growing `top` by one degree."""
    below.parent = top
    below.sibling = top.child
    top.child = below
    top.degree += 1


class BinomialHeap[T](Heap[T]):
    """A mergeable heap built from binomial trees.

    Time Complexity:
        add: O(log n) worst case, O(1) amortized
        peek_extreme, pop_extreme, replace_extreme, merge: O(log n)
        heapify: O(n log n) (repeated insertion)
    """

    kind = HeapKind.Binomial

    def __init__(
        self,
        orientation: Orientation,
        comparator: Comparator[T] = compare,
        values: Optional[Iterable[T]] = None,
    ) -> None:
        super().__init__(orientation, comparator)
        self._head: Optional[BinomialNode[T]] = None
        self._size = 0
        if values is not None:
            self.heapify(values)

    @override
    def size(self) -> int:
        return self._size

    def roots(self) -> Iterator[BinomialNode[T]]:
        """Iterate over the roots of the forest in ascending degree."""
        node = self._head
        while node is not None:
            yield node
            node = node.sibling

    def root_degrees(self) -> List[int]:
        """List the degree of every tree in the forest, in root-list order."""
        return [root.degree for root in self.roots()]

    def _propagate_carries(self, head: BinomialNode[T]) -> BinomialNode[T]:
        """Link equal-degree neighbours until each degree occurs at most once.

        Of three consecutive roots sharing a degree the first is kept and
        the other two are linked, so the list stays sorted by degree.
        """
        prev: Optional[BinomialNode[T]] = None
        current = head
        nxt = current.sibling
        while nxt is not None:
            after = nxt.sibling
            if current.degree != nxt.degree or (
                after is not None and after.degree == current.degree
            ):
                prev = current
                current = nxt
            elif not self._priority.worse(current.value, nxt.value):
                current.sibling = after
                _link(current, nxt)
            else:
                if prev is None:
                    head = nxt
                else:
                    prev.sibling = nxt
                _link(nxt, current)
                current = nxt
            nxt = current.sibling
        return head

    def _union(self, other_head: Optional[BinomialNode[T]]) -> None:
        merged = _merge_root_lists(self._head, other_head)
        self._head = None if merged is None else self._propagate_carries(merged)

    @override
    def add(self, value: T) -> None:
        self._union(BinomialNode(value))
        self._size += 1

    @override
    def _peek(self) -> T:
        best: Optional[BinomialNode[T]] = None
        for root in self.roots():
            if best is None or self._priority.better(root.value, best.value):
                best = root
        if best is None:
            raise Impossible
        return best.value

    @override
    def _pop(self) -> T:
        head = self._head
        if head is None:
            raise Impossible
        # On ties the later root wins.
        best = head
        best_prev: Optional[BinomialNode[T]] = None
        prev = head
        node = head.sibling
        while node is not None:
            if not self._priority.worse(node.value, best.value):
                best = node
                best_prev = prev
            prev = node
            node = node.sibling

        if best_prev is None:
            self._head = best.sibling
        else:
            best_prev.sibling = best.sibling

        # Children run k-1 .. 0; reversed they form an ascending forest.
        orphans: Optional[BinomialNode[T]] = None
        child = best.child
        while child is not None:
            following = child.sibling
            child.sibling = orphans
            child.parent = None
            orphans = child
            child = following
        best.child = None
        best.sibling = None

        self._union(orphans)
        self._size -= 1
        return best.value

    @override
    def _absorb(self, other: Self) -> None:
        logging.debug(
            "merging binomial forests with degrees %s and %s",
            self.root_degrees(),
            other.root_degrees(),
        )
        self._union(other._head)
        self._size += other._size
        other.clear()

    @override
    def clear(self) -> None:
        self._head = None
        self._size = 0

    @override
    def to_list(self) -> List[T]:
        values: List[T] = []
        queue: Deque[BinomialNode[T]] = deque(self.roots())
        while queue:
            node = queue.popleft()
            values.append(node.value)
            queue.extend(node.children())
        return values

    @override
    def _spawn(self, orientation: Orientation) -> BinomialHeap[T]:
        match orientation:
            case Orientation.Max:
                return BinomialMaxHeap(self.comparator)
            case Orientation.Min:
                return BinomialMinHeap(self.comparator)
            case _:
                raise Impossible


class BinomialMaxHeap[T](BinomialHeap[T]):
    """A binomial heap surfacing its greatest element."""

    def __init__(
        self,
        comparator: Comparator[T] = compare,
        values: Optional[Iterable[T]] = None,
    ) -> None:
        super().__init__(Orientation.Max, comparator, values)


class BinomialMinHeap[T](BinomialHeap[T]):
    """A binomial heap surfacing its least element."""

    def __init__(
        self,
        comparator: Comparator[T] = compare,
        values: Optional[Iterable[T]] = None,
    ) -> None:
        super().__init__(Orientation.Min, comparator, values)
