"""
Command-line demonstrations of the heap operations.

Modes:
- max_heap: push values one at a time with the default comparator, then drain
- min_heap: heapify with `greater`, then drain
- top_k:    print the largest and smallest k elements of the data

Run with:

    python -m heap_utils.Heap_Demo.demo --mode top_k --data 4 8 1 9 3 --largest 2
"""

import argparse
from typing import List, Optional, Sequence, Tuple

from heap_utils.Heap_Ops import (
    greater,
    heapify,
    push,
    top,
    pop,
    largest_k,
    smallest_k
)
from heap_utils.utils import tee_stdout


MAX_HEAP_DATA = [3, 10, 5, 1]
MIN_HEAP_DATA = [7, 2, 9, 1, 5]
TOP_K_DATA = [4, 8, 1, 9, 3, 7, 2, 6, 5]
NUM_LARGEST = 3
NUM_SMALLEST = 4


def _format(values: Sequence[int]) -> str:
    return " ".join(str(v) for v in values)


def max_heap_demo(values: Sequence[int]) -> List[int]:
    """
    Build a max-heap by pushing `values` one by one into an empty list,
    print its top, then print and return the full pop order.
    """
    heap = []
    for value in values:
        push(heap, value)

    if heap:
        print(f"Max-heap top: {top(heap)}\n")

    order = []
    while heap:
        order.append(pop(heap))
    print(f"Pop order:\n{_format(order)}")
    return order


def min_heap_demo(values: Sequence[int]) -> List[int]:
    """
    Heapify a copy of `values` as a min-heap, print its top, then print and
    return the full pop order (ascending).
    """
    heap = list(values)
    heapify(heap, greater)

    if heap:
        print(f"Min-heap top: {top(heap)}\n")

    order = []
    while heap:
        order.append(pop(heap, greater))
    print(f"Pop order:\n{_format(order)}")
    return order


def top_k_demo(
    values: Sequence[int],
    largest: int,
    smallest: int,
) -> Tuple[List[int], List[int]]:
    """Print and return the `largest` biggest and `smallest` smallest values."""
    biggest = largest_k(values, largest)
    lowest = smallest_k(values, smallest)

    print(f"Largest {largest}: {_format(biggest)}")
    print(f"Smallest {smallest}: {_format(lowest)}")
    return biggest, lowest


def main(argv: Optional[Sequence[str]] = None):
    parser = argparse.ArgumentParser(description="heap_utils demonstrations")

    # -----------------------
    # Demo config
    # -----------------------
    parser.add_argument("--mode", type=str, default="top_k", choices=["max_heap", "min_heap", "top_k"], help="Which demonstration to run")
    parser.add_argument("--data", type=int, nargs="*", default=None, help="Input integers (defaults depend on mode)")
    parser.add_argument("--largest", type=int, default=NUM_LARGEST, help="Number of largest elements for top_k mode")
    parser.add_argument("--smallest", type=int, default=NUM_SMALLEST, help="Number of smallest elements for top_k mode")

    # -----------------------
    # Logging
    # -----------------------
    parser.add_argument("--log_path", type=str, default=None, help="Also write the output to this file")

    args = parser.parse_args(argv)

    with tee_stdout(args.log_path):
        if args.mode == "max_heap":
            data = MAX_HEAP_DATA if args.data is None else args.data
            return max_heap_demo(data)

        if args.mode == "min_heap":
            data = MIN_HEAP_DATA if args.data is None else args.data
            return min_heap_demo(data)

        data = TOP_K_DATA if args.data is None else args.data
        return top_k_demo(data, args.largest, args.smallest)


if __name__ == "__main__":
    main()
