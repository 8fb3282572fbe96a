"""Singly and doubly linked lists and a min-priority task queue."""

__version__ = "0.1.0"
__all__ = ["singly", "doubly", "taskqueue"]