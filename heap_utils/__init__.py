from .Heap_Ops import (
    EmptyHeapError,
    Comparator,
    less,
    greater,
    invert,
    by_key,
    heapify,
    push,
    top,
    pop,
    is_heap,
    top_k,
    largest_k,
    smallest_k
)

__version__ = "0.1.0"

__all__ = [
    "EmptyHeapError",
    "Comparator",
    "less",
    "greater",
    "invert",
    "by_key",
    "heapify",
    "push",
    "top",
    "pop",
    "is_heap",
    "top_k",
    "largest_k",
    "smallest_k"
]
