"""
Ordering predicates for the heap operations.

A comparator answers "is `a` before `b`?" in the sense of std::less:
the heap keeps every parent not-before its children, so with `less`
the largest element ends up on top (max-heap) and with `greater`
the smallest one does (min-heap).
"""

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")
Comparator = Callable[[T, T], bool]


def less(a: T, b: T) -> bool:
    """Natural ascending order, a < b. Default comparator (max-heap)."""
    return a < b


def greater(a: T, b: T) -> bool:
    """Natural descending order, a > b (min-heap)."""
    return a > b


def invert(comparator: Comparator) -> Comparator:
    """
    Return the comparator with its arguments swapped.

    A heap built and drained with `invert(comparator)` emits elements in the
    reverse order of one built and drained with `comparator`.
    """
    def inverted(a, b):
        return comparator(b, a)

    return inverted


def by_key(
    key: Callable[[T], Any],
    comparator: Comparator = less,
) -> Comparator:
    """
    Build a comparator that orders elements by `key(element)`.

    Parameters:
        - key (Callable):
            Function extracting the value to compare, e.g. `lambda r: r.score`.

        - comparator (Comparator):
            Ordering applied to the extracted values. Defaults to `less`.

    Returns:
        - Comparator over the original elements.
    """
    def keyed(a, b):
        return comparator(key(a), key(b))

    return keyed
