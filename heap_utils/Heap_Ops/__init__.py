from .errors import EmptyHeapError
from .comparators import Comparator, less, greater, invert, by_key
from .heap_ops import heapify, push, top, pop, is_heap
from .top_k import top_k, largest_k, smallest_k

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
