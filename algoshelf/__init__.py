"""Classic algorithms on arrays, integers, strings, matrices, linked lists and binary trees."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "bank",
    "integers",
    "linked_lists",
    "matrices",
    "nodes",
    "searching",
    "stacks",
    "text",
    "trees",
]