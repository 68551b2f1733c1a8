from .demo import max_heap_demo, min_heap_demo, top_k_demo, main

__all__ = [
    "max_heap_demo",
    "min_heap_demo",
    "top_k_demo",
    "main"
]
