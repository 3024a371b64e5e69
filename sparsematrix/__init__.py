"""Sparse square matrices built on a cursor-based doubly linked list, with a report command."""

__version__ = "0.1.0"
__all__ = ["cursorlist", "matrix", "cli"]