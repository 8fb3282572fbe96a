"""A doubly linked list with head and tail references."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Sequence

EMPTY_MESSAGE = "DS Rong"


@dataclass(slots=True, eq=False)
class _Node:
    value: Any
    next: _Node | None = None
    prev: _Node | None = None


class DoublyLinkedList:
    """A doubly linked list that can be walked from either end."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for item in items:
            self.add_last(item)

    def _find(self, target: Any) -> _Node | None:
        node = self._head
        while node is not None and node.value != target:
            node = node.next
        return node

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return self.format_forward()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def format_forward(self) -> str:
        """Values from head to tail, or the empty-list message."""
        if self._head is None:
            return EMPTY_MESSAGE
        return " ".join(str(value) for value in self)

    def format_backward(self) -> str:
        """Values from tail to head, or the empty-list message."""
        if self._tail is None:
            return EMPTY_MESSAGE
        return " ".join(str(value) for value in reversed(self))

    def add_first(self, value: Any) -> None:
        """Insert value at the front."""
        node = _Node(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def add_last(self, value: Any) -> None:
        """Append value at the end."""
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def add_after(self, target: Any, value: Any) -> None:
        """Insert value after the first node holding target; no-op if absent."""
        found = self._find(target)
        if found is None:
            return
        node = _Node(value, next=found.next, prev=found)
        if found.next is None:
            self._tail = node
        else:
            found.next.prev = node
        found.next = node
        self._size += 1

    def add_before(self, target: Any, value: Any) -> None:
        """Insert value before the first node holding target; no-op if absent."""
        found = self._find(target)
        if found is None:
            return
        node = _Node(value, next=found, prev=found.prev)
        if found.prev is None:
            self._head = node
        else:
            found.prev.next = node
        found.prev = node
        self._size += 1

    def delete_first(self) -> Any:
        """Remove and return the first value; IndexError if empty."""
        node = self._head
        if node is None:
            raise IndexError("delete_first from empty list")
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        node.next = None
        self._size -= 1
        return node.value

    def delete_last(self) -> Any:
        """Remove and return the last value; IndexError if empty."""
        node = self._tail
        if node is None:
            raise IndexError("delete_last from empty list")
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        node.prev = None
        self._size -= 1
        return node.value

    def delete(self, value: Any) -> None:
        """Remove the first node holding value; ValueError if absent."""
        node = self._find(value)
        if node is None:
            raise ValueError(f"{value!r} not in list")
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.next = node.prev = None
        self._size -= 1

    def clear(self) -> None:
        """Remove every node."""
        while self._head is not None:
            self.delete_first()


def main(argv: Sequence[str] | None = None) -> int:
    """Build a small list, print it, delete one value and print it again."""
    lst = DoublyLinkedList([3, 6, 2])
    print(lst.format_forward())
    print("=============KQ SAU KHI XOA=========")
    try:
        lst.delete(2)
    except ValueError:
        print("Xoa khong thanh cong ")
    else:
        print("Xoa thanh cong ")
        print(lst.format_forward())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())