"""
Top-k extraction built on heapify + repeated pop.

Features:
- Works on an independent copy; the input collection is never mutated
- O(n + k log n) time, O(n) auxiliary space
- Result is ordered best-first under the comparator (pop order)

Elements that compare equal may come out in any relative order; the result
is not a stable sort.
"""

from typing import Iterable, List, TypeVar

from heap_utils.Heap_Ops.comparators import Comparator, less, greater
from heap_utils.Heap_Ops.heap_ops import heapify, pop

T = TypeVar("T")


def top_k(
    data: Iterable[T],
    k: int,
    comparator: Comparator = less,
) -> List[T]:
    """
    Extract the k "best" elements of `data` according to `comparator`.

    With the default comparator (`less`) these are the k largest elements,
    returned in descending order.

    Steps:
    1. Copy `data` into a fresh list.
    2. Heapify the copy once (linear time).
    3. Pop min(k, n) times, collecting elements in pop order.

    Parameters:
        - data (Iterable):
            Input collection (list, tuple, generator, 1-D numpy array, ...).
            Not modified.

        - k (int):
            Number of elements to extract. k <= 0 gives an empty list,
            k >= len(data) gives every element fully ordered.

        - comparator (Comparator):
            Heap comparator, same semantics as in `heapify`.

    Returns:
        - List of extracted elements, best first.
    """
    if k <= 0:
        return []

    heap = list(data)
    if not heap:
        return []

    heapify(heap, comparator)
    count = min(k, len(heap))
    return [pop(heap, comparator) for _ in range(count)]


def largest_k(data: Iterable[T], k: int) -> List[T]:
    """The k largest elements, descending. Same as top_k(data, k, less)."""
    return top_k(data, k, less)


def smallest_k(data: Iterable[T], k: int) -> List[T]:
    """The k smallest elements, ascending. Same as top_k(data, k, greater)."""
    # with greater, pop returns the smallest remaining element first
    return top_k(data, k, greater)
