"""Classic algorithm exercises on arrays, strings, windows, linked lists, trees,
numbers, random sampling and streams."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "linked_lists",
    "numbers",
    "sampling",
    "streams",
    "strings",
    "trees",
    "windows",
]