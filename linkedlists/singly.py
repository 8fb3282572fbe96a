"""A singly linked list of values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator


@dataclass(slots=True)
class _Node:
    value: Any
    next: _Node | None = None


class SinglyLinkedList:
    """A singly linked list that only keeps a reference to its head."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for item in items:
            self.add_tail(item)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _find(self, target: Any) -> tuple[_Node | None, _Node | None]:
        """Return (previous, node) for the first node holding target."""
        prev = None
        for node in self._nodes():
            if node.value == target:
                return prev, node
            prev = node
        return None, None

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def add_head(self, value: Any) -> None:
        """Insert value at the front."""
        self._head = _Node(value, self._head)
        self._size += 1

    def add_tail(self, value: Any) -> None:
        """Append value at the end, walking the list to find the last node."""
        node = _Node(value)
        if self._head is None:
            self._head = node
        else:
            tail = self._head
            while tail.next is not None:
                tail = tail.next
            tail.next = node
        self._size += 1

    def add_after(self, value: Any, target: Any) -> None:
        """Insert value after the first node holding target; no-op if absent."""
        _, node = self._find(target)
        if node is not None:
            node.next = _Node(value, node.next)
            self._size += 1

    def add_before(self, value: Any, target: Any) -> None:
        """Insert value before the first node holding target; no-op if absent."""
        prev, node = self._find(target)
        if node is None:
            return
        new = _Node(value, node)
        if prev is None:
            self._head = new
        else:
            prev.next = new
        self._size += 1

    def delete_head(self) -> None:
        """Remove the first node; does nothing on an empty list."""
        if self._head is not None:
            self._head = self._head.next
            self._size -= 1

    def delete_tail(self) -> None:
        """Remove the last node; raises IndexError on an empty list."""
        if self._head is None:
            raise IndexError("delete_tail from empty list")
        prev = None
        tail = self._head
        while tail.next is not None:
            prev = tail
            tail = tail.next
        if prev is None:
            self._head = None
        else:
            prev.next = None
        self._size -= 1

    def delete(self, value: Any) -> None:
        """Remove the first node holding value; no-op if absent."""
        prev, node = self._find(value)
        if node is None:
            return
        if prev is None:
            self._head = node.next
        else:
            prev.next = node.next
        self._size -= 1