"""Classic data-structure and algorithm routines.

Trees and binary search trees, arrays and subarrays, dynamic programming,
searching, graphs, linked lists, platform scheduling, stacks and strings.
"""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "bst",
    "dp",
    "graph",
    "linked_list",
    "platforms",
    "search",
    "stacks",
    "strings",
    "subarrays",
    "trees",
]