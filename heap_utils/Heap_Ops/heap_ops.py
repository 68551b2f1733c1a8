"""
Binary heap primitives on caller-owned sequences.

Unlike Python's built-in heapq module, which natively provides a min-heap
over `<`, every operation here takes an "is-before" comparator. The default
is `less`, which yields a max-heap (largest element on top); pass `greater`
for a min-heap. The same comparator must be used for every call touching
the same sequence.

Usage:

heap = []                     # creates an empty heap
push(heap, item)              # pushes a new item on the heap
item = pop(heap)              # pops the largest item from the heap
item = top(heap)              # largest item on the heap without popping it
heapify(x)                    # transforms list into a max-heap, in-place, in linear time
heapify(x, greater)           # ... or into a min-heap
is_heap(x)                    # checks the heap invariant without modifying x

Children of position i live at 2*i + 1 and 2*i + 2.
"""

from typing import MutableSequence, Sequence, TypeVar

from heap_utils.Heap_Ops.comparators import Comparator, less
from heap_utils.Heap_Ops.errors import EmptyHeapError

T = TypeVar("T")


def _sift_up(
    heap: MutableSequence[T],
    pos: int,
    comparator: Comparator,
) -> None:
    # move heap[pos] towards the root while its parent is before it
    # ("before" in sorted order, so the parent must give way)
    item = heap[pos]
    while pos > 0:
        parent_pos = (pos - 1) >> 1
        parent = heap[parent_pos]
        if not comparator(parent, item):
            break
        heap[pos] = parent
        pos = parent_pos
    heap[pos] = item


def _sift_down(
    heap: MutableSequence[T],
    pos: int,
    end: int,
    comparator: Comparator,
) -> None:
    """
    Move heap[pos] down the tree within heap[:end] until it is no longer
    before either of its children, swapping with the higher-ranked child.
    """
    item = heap[pos]
    child_pos = 2 * pos + 1
    while child_pos < end:
        # right child wins only if the left one is before it
        right_pos = child_pos + 1
        if right_pos < end and comparator(heap[child_pos], heap[right_pos]):
            child_pos = right_pos
        if not comparator(item, heap[child_pos]):
            break
        heap[pos] = heap[child_pos]
        pos = child_pos
        child_pos = 2 * pos + 1
    heap[pos] = item


def heapify(
    heap: MutableSequence[T],
    comparator: Comparator = less,
) -> None:
    """
    Transform a sequence into a heap, in-place, in O(len(heap)) time.

    Sifts down every internal node, from the last one up to the root
    (Floyd's construction). Sequences of length 0 or 1 are left untouched.
    Calling it again on a valid heap moves nothing.

    Parameters:
        - heap (MutableSequence):
            Sequence to reorder; any indexable container supporting item
            assignment works (list, 1-D numpy array).

        - comparator (Comparator):
            "is-before" predicate. Defaults to `less` (max-heap).
    """
    n = len(heap)
    for pos in reversed(range(n // 2)):
        _sift_down(heap, pos, n, comparator)


def push(
    heap: MutableSequence[T],
    value: T,
    comparator: Comparator = less,
) -> None:
    """
    Append `value` to the heap and sift it up to restore the heap invariant.
    The heap grows by exactly one element. O(log n).
    """
    heap.append(value)
    _sift_up(heap, len(heap) - 1, comparator)


def top(heap: Sequence[T]) -> T:
    """
    Return the element on top of the heap without removing it.

    Raises:
        - EmptyHeapError: if the heap is empty.
    """
    if len(heap) == 0:
        raise EmptyHeapError("top")
    return heap[0]


def pop(
    heap: MutableSequence[T],
    comparator: Comparator = less,
) -> T:
    """
    Remove and return the element on top of the heap.

    The first and last positions are swapped, the new root is sifted down
    over the shortened extent, then the last slot is removed. O(log n).

    Parameters:
        - heap (MutableSequence):
            A list satisfying the heap invariant under `comparator`.

        - comparator (Comparator):
            The comparator the heap was built with.

    Returns:
        - The top element.

    Raises:
        - EmptyHeapError: if the heap is empty. The heap is not modified.
    """
    if len(heap) == 0:
        raise EmptyHeapError("pop")

    last = len(heap) - 1
    if last > 0:
        heap[0], heap[last] = heap[last], heap[0]
        _sift_down(heap, 0, last, comparator)
    return heap.pop()


def is_heap(
    heap: Sequence[T],
    comparator: Comparator = less,
) -> bool:
    """
    Check the heap invariant: `comparator(parent, child)` is False for every
    non-root position. Read-only; True for sequences of length 0 or 1.
    """
    for child_pos in range(1, len(heap)):
        if comparator(heap[(child_pos - 1) >> 1], heap[child_pos]):
            return False
    return True
