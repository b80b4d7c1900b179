"""Classic data-structure and algorithm routines: lists, trees, hash tables, sorting and counting problems."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "brackets",
    "dp",
    "frequency",
    "hashing",
    "linked_lists",
    "matrix",
    "pairs",
    "positions",
    "ranking",
    "sorting",
    "trees",
    "words",
]