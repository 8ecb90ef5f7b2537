"""Classic algorithm and data-structure exercises."""

__version__ = "0.1.0"
__all__ = [
    "basics",
    "binary_search",
    "hashing",
    "linked_list",
    "lru",
    "sliding_window",
    "stack",
    "trees",
    "two_pointers",
]