"""In-place heap sort over a list or a range of it.

Sorting ascending arranges the range into a max-heap and repeatedly swaps
its root behind the shrinking heap; sorting descending does the same with
a min-heap.
"""

from __future__ import annotations

from typing import List, Optional

from pileup.binary import build_heap, sift_down
from pileup.common import Comparator, InvalidArgument, Orientation, Priority, compare

__all__ = ["heap_sort", "heap_sort_descending"]


def _check_range(values: List, index: int, count: Optional[int]) -> int:
    if not 0 <= index <= len(values):
        raise InvalidArgument(f"index {index} out of range for length {len(values)}")
    if count is None:
        count = len(values) - index
    if count < 0:
        raise InvalidArgument(f"count must be non-negative, got {count}")
    if index + count > len(values):
        raise InvalidArgument(
            f"range [{index}, {index + count}) exceeds length {len(values)}"
        )
    return count


def _sort_range[T](
    values: List[T], index: int, count: int, priority: Priority[T]
) -> List[T]:
    end = index + count
    build_heap(values, priority.better, index, end)
    while end - index > 1:
        end -= 1
        values[index], values[end] = values[end], values[index]
        sift_down(values, index, priority.better, index, end)
    return values


def heap_sort[T](
    values: List[T],
    index: int = 0,
    count: Optional[int] = None,
    comparator: Comparator[T] = compare,
) -> List[T]:
    """Sort `values[index:index + count]` ascending, in place.

    Args:
        values: The list to sort.
        index: Start of the range.
        count: Length of the range, defaulting to the rest of the list.
        comparator: Total order over the elements.

    Returns:
        The same list, sorted within the range.

    Raises:
        InvalidArgument: If the range does not fit inside the list.
    """
    count = _check_range(values, index, count)
    return _sort_range(values, index, count, Priority(comparator, Orientation.Max))


def heap_sort_descending[T](
    values: List[T],
    index: int = 0,
    count: Optional[int] = None,
    comparator: Comparator[T] = compare,
) -> List[T]:
    """Sort `values[index:index + count]` descending, in place.

    See `heap_sort` for the arguments and errors.
    """
    count = _check_range(values, index, count)
    return _sort_range(values, index, count, Priority(comparator, Orientation.Min))
