from pileup.base import Heap
from pileup.binary import BinaryHeap, BinaryMaxHeap, BinaryMinHeap
from pileup.binomial import BinomialHeap, BinomialMaxHeap, BinomialMinHeap
from pileup.common import (
    EmptyHeap,
    HeapError,
    HeapKind,
    InvalidArgument,
    Ordering,
    Orientation,
    compare,
)
from pileup.config import HeapConfig, new_heap
from pileup.fibonacci import FibonacciHeap, FibonacciMaxHeap, FibonacciMinHeap
from pileup.sorting import heap_sort, heap_sort_descending

__all__ = [
    "BinaryHeap",
    "BinaryMaxHeap",
    "BinaryMinHeap",
    "BinomialHeap",
    "BinomialMaxHeap",
    "BinomialMinHeap",
    "EmptyHeap",
    "FibonacciHeap",
    "FibonacciMaxHeap",
    "FibonacciMinHeap",
    "Heap",
    "HeapConfig",
    "HeapError",
    "HeapKind",
    "InvalidArgument",
    "Ordering",
    "Orientation",
    "compare",
    "heap_sort",
    "heap_sort_descending",
    "new_heap",
]
