"""Common types and comparison utilities for the pileup heap family.

This module provides the ordering primitives every heap is parameterized by,
the orientation policy that decides which direction "extreme" points, and
the exceptions raised across the package.
"""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from dataclasses import dataclass
from enum import Enum, unique
from typing import Callable, Iterator, List

__all__ = [
    "Comparator",
    "EmptyHeap",
    "HeapKind",
    "HeapError",
    "Impossible",
    "InvalidArgument",
    "Iterating",
    "Ordering",
    "Orientation",
    "Priority",
    "Sized",
    "compare",
]


class Impossible(Exception):
    """Exception raised when encountering theoretically impossible states.

    Used to indicate internal consistency violations in heap operations.
    """

    pass


class HeapError(Exception):
    """Base class for the errors a heap reports to its caller."""

    pass


class EmptyHeap(HeapError, IndexError):
    """Raised when peeking, popping or replacing on a heap with no elements."""

    pass


class InvalidArgument(HeapError, ValueError):
    """Raised when an operation is handed an argument it cannot accept.

    Nothing is mutated before this is raised.
    """

    pass


class Sized(metaclass=ABCMeta):
    @abstractmethod
    def size(self) -> int: ...

    def null(self) -> bool:
        return self.size() == 0

    def __bool__(self) -> bool:
        return not self.null()

    def __len__(self) -> int:
        return self.size()


class Iterating[U](metaclass=ABCMeta):
    @abstractmethod
    def iter(self) -> Iterator[U]: ...

    def list(self) -> List[U]:
        return list(self.iter())

    def __iter__(self) -> Iterator[U]:
        return self.iter()


class Ordering(Enum):
    """Enumeration representing the result of a comparison operation."""

    Lt = -1
    Eq = 0
    Gt = 1

    def flip(self) -> Ordering:
        """Return the ordering seen from the other side of the comparison."""
        match self:
            case Ordering.Lt:
                return Ordering.Gt
            case Ordering.Gt:
                return Ordering.Lt
            case _:
                return Ordering.Eq


type Comparator[T] = Callable[[T, T], Ordering]


def compare[T](a: T, b: T) -> Ordering:
    """Compare two values by their natural order.

    Uses the objects' __eq__ and __lt__ methods to determine the comparison result.

    Args:
        a: First value to compare.
        b: Second value to compare.

    Returns:
        Ordering indicating the relationship between a and b.
    """
    # Unsafe eq/lt because generic protocols are half-baked
    if getattr(a, "__eq__")(b):
        return Ordering.Eq
    elif getattr(a, "__lt__")(b):
        return Ordering.Lt
    else:
        return Ordering.Gt


@unique
class Orientation(Enum):
    """Which end of the order a heap surfaces as its extreme element."""

    Max = "max"
    Min = "min"

    def flip(self) -> Orientation:
        match self:
            case Orientation.Max:
                return Orientation.Min
            case Orientation.Min:
                return Orientation.Max
            case _:
                raise Impossible


@dataclass(frozen=True)
class Priority[T]:
    """A comparator bound to an orientation.

    Every heap algorithm is written once against `better` and `worse`;
    the min-seeking variant is the max-seeking one with the comparison
    flipped.

    Attributes:
        comparator: Total order over the element type.
        orientation: Whether greater or lesser elements are more extreme.
    """

    comparator: Comparator[T]
    orientation: Orientation

    def rank(self, a: T, b: T) -> Ordering:
        """Compare two values so that Gt means `a` is more extreme."""
        result = self.comparator(a, b)
        if self.orientation == Orientation.Min:
            result = result.flip()
        return result

    def better(self, a: T, b: T) -> bool:
        """Check whether `a` is strictly more extreme than `b`."""
        return self.rank(a, b) == Ordering.Gt

    def worse(self, a: T, b: T) -> bool:
        """Check whether `a` is strictly less extreme than `b`."""
        return self.rank(a, b) == Ordering.Lt


@unique
class HeapKind(Enum):
    """The structural algorithm backing a heap."""

    Binary = "binary"
    Binomial = "binomial"
    Fibonacci = "fibonacci"
