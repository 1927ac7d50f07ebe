"""The capability contract shared by every heap in the family.

Each concrete heap supplies a handful of structural primitives; this base
class owns the parts of the contract that do not depend on structure:
precondition checks (which always run before any mutation), bulk loading,
replacement, removal and conversion to the opposite orientation.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from typing import ClassVar, Iterable, Iterator, List, Optional, Self, override

from pileup.common import (
    Comparator,
    EmptyHeap,
    HeapKind,
    InvalidArgument,
    Iterating,
    Orientation,
    Priority,
    Sized,
)

__all__ = ["Heap"]


class Heap[T](Sized, Iterating[T]):
    """A mutable priority heap surfacing its most extreme element.

    Subclasses set `kind` and implement the primitives marked abstract.
    """

    kind: ClassVar[HeapKind]

    def __init__(self, orientation: Orientation, comparator: Comparator[T]) -> None:
        self._priority: Priority[T] = Priority(comparator, orientation)

    @property
    def orientation(self) -> Orientation:
        return self._priority.orientation

    @property
    def comparator(self) -> Comparator[T]:
        return self._priority.comparator

    @abstractmethod
    def add(self, value: T) -> None:
        """Insert a value into the heap."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Drop every element, leaving the heap empty."""
        ...

    @abstractmethod
    def to_list(self) -> List[T]:
        """Snapshot the elements in structural order (not sorted)."""
        ...

    @abstractmethod
    def _peek(self) -> T: ...

    @abstractmethod
    def _pop(self) -> T: ...

    @abstractmethod
    def _absorb(self, other: Self) -> None:
        """Take every element of a non-empty `other`, leaving it empty."""
        ...

    @abstractmethod
    def _spawn(self, orientation: Orientation) -> Heap[T]:
        """Create an empty heap of the same kind and comparator."""
        ...

    def _replace(self, value: T) -> None:
        self._pop()
        self.add(value)

    def _ensure_nonempty(self, op: str) -> None:
        if self.null():
            raise EmptyHeap(f"{op} on empty {type(self).__name__}")

    def peek_extreme(self) -> T:
        """Return the most extreme element without removing it.

        Raises:
            EmptyHeap: If the heap has no elements.
        """
        self._ensure_nonempty("peek")
        return self._peek()

    def pop_extreme(self) -> T:
        """Remove and return the most extreme element.

        Raises:
            EmptyHeap: If the heap has no elements.
        """
        self._ensure_nonempty("pop")
        return self._pop()

    def remove_extreme(self) -> None:
        """Remove the most extreme element, discarding it.

        Raises:
            EmptyHeap: If the heap has no elements.
        """
        self._ensure_nonempty("remove")
        self._pop()

    def replace_extreme(self, value: T) -> None:
        """Replace the most extreme element with `value` and restore order.

        Raises:
            EmptyHeap: If the heap has no elements.
        """
        self._ensure_nonempty("replace")
        self._replace(value)

    def heapify(self, values: Optional[Iterable[T]]) -> None:
        """Rebuild the heap from `values`.

        The input is read in full before anything changes. If it yields at
        least one element the previous contents are discarded; if it yields
        nothing the heap is left untouched.

        Raises:
            InvalidArgument: If `values` is None.
        """
        if values is None:
            raise InvalidArgument("cannot heapify None")
        data = list(values)
        if not data:
            return
        self.clear()
        for value in data:
            self.add(value)
        logging.debug("heapified %s with %d elements", type(self).__name__, self.size())

    def merge(self, other: Self) -> None:
        """Move every element of `other` into this heap.

        Afterwards `other` is empty and shares no structure with this heap.

        Raises:
            InvalidArgument: If `other` is this heap, or differs in kind or
                orientation.
        """
        if other is self:
            raise InvalidArgument("cannot merge a heap into itself")
        if not isinstance(other, Heap) or other.kind != self.kind:
            raise InvalidArgument(
                f"cannot merge {type(other).__name__} into {type(self).__name__}"
            )
        if other.orientation != self.orientation:
            raise InvalidArgument(
                f"cannot merge a {other.orientation.value}-heap into a "
                f"{self.orientation.value}-heap"
            )
        if other.null():
            return
        self._absorb(other)

    def to_opposite(self) -> Heap[T]:
        """Build a new heap of the same kind with the opposite orientation.

        The new heap holds the same multiset of elements; this heap is
        left unchanged.
        """
        opposite = self._spawn(self.orientation.flip())
        opposite.heapify(self.to_list())
        return opposite

    @override
    def iter(self) -> Iterator[T]:
        """Iterate over a snapshot of the elements in structural order."""
        return iter(self.to_list())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"
