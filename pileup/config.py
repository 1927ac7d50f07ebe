"""Selecting a heap by algorithm and orientation.

Callers that want to stay polymorphic over the heap family describe the
heap they need with a `HeapConfig` (or call `new_heap` directly) instead of
naming one of the six concrete classes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional

from pileup import constants
from pileup.base import Heap
from pileup.binary import BinaryHeap
from pileup.binomial import BinomialHeap
from pileup.common import (
    Comparator,
    HeapKind,
    Impossible,
    InvalidArgument,
    Orientation,
    compare,
)
from pileup.fibonacci import FibonacciHeap

__all__ = ["HeapConfig", "new_heap", "parse_kind", "parse_orientation"]


def new_heap[T](
    kind: HeapKind,
    orientation: Orientation,
    comparator: Comparator[T] = compare,
    values: Optional[Iterable[T]] = None,
) -> Heap[T]:
    """Create an empty (or pre-filled) heap of the given kind.

    Args:
        kind: The algorithm backing the heap.
        orientation: Which end of the order is extreme.
        comparator: Total order over the elements.
        values: Optional initial contents.

    Returns:
        The new heap.
    """
    match kind:
        case HeapKind.Binary:
            return BinaryHeap(orientation, comparator, values=values)
        case HeapKind.Binomial:
            return BinomialHeap(orientation, comparator, values=values)
        case HeapKind.Fibonacci:
            return FibonacciHeap(orientation, comparator, values=values)
        case _:
            raise Impossible


def parse_kind(name: str) -> HeapKind:
    """Look up a heap kind by its lowercase name.

    Raises:
        InvalidArgument: If no kind has that name.
    """
    try:
        return HeapKind(name.lower())
    except ValueError:
        choices = ", ".join(kind.value for kind in HeapKind)
        raise InvalidArgument(f"unknown heap kind {name!r} (choose from {choices})")


def parse_orientation(name: str) -> Orientation:
    """Look up an orientation by its lowercase name.

    Raises:
        InvalidArgument: If no orientation has that name.
    """
    try:
        return Orientation(name.lower())
    except ValueError:
        choices = ", ".join(o.value for o in Orientation)
        raise InvalidArgument(f"unknown orientation {name!r} (choose from {choices})")


@dataclass(frozen=True)
class HeapConfig:
    """Describes which heap to build.

    Attributes:
        kind: The algorithm backing the heap.
        orientation: Which end of the order is extreme.
    """

    kind: HeapKind = constants.DEFAULT_KIND
    orientation: Orientation = constants.DEFAULT_ORIENTATION

    def build(
        self,
        values: Optional[Iterable[Any]] = None,
        comparator: Comparator[Any] = compare,
    ) -> Heap[Any]:
        return new_heap(self.kind, self.orientation, comparator, values)
