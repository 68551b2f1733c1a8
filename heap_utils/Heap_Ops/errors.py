class EmptyHeapError(IndexError):
    """
    Raised by `top` and `pop` when the heap has no elements.

    Subclasses IndexError so that code written against the standard
    library's heapq (which raises IndexError on an empty heap) keeps working.
    """
    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"heap_utils: {operation}() on empty heap")
