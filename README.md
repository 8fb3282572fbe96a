# linkedlists

Small linked list containers for Python, with no dependencies:

- `SinglyLinkedList` (`linkedlists.singly`): insert at the head, at the tail, or after or before a given value. Delete at the head, at the tail, or by value.
- `DoublyLinkedList` (`linkedlists.doubly`): insert and delete at both ends and around a given value. Iterate forwards and backwards, and clear the list.
- `TaskQueue` (`linkedlists.taskqueue`): a priority queue of `(priority, id)` pairs. The smallest priority is served first, and ties go to the smaller id.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from linkedlists.singly import SinglyLinkedList
from linkedlists.doubly import DoublyLinkedList
from linkedlists.taskqueue import TaskQueue

s = SinglyLinkedList([1, 2, 3])
s.add_head(0)
s.add_after(9, 2)        # insert 9 after the first 2
s.delete(1)
print(list(s))           # [0, 2, 9, 3]

d = DoublyLinkedList([3, 6, 2])
d.add_before(6, 5)       # insert 5 before the first 6
print(list(reversed(d))) # [2, 6, 5, 3]
print(d.format_forward())  # "3 5 6 2"

q = TaskQueue([(3, 4), (1, 2), (6, 7), (2, 3), (2, 4)])
print(q.peek())          # (1, 2)
print(list(q.drain()))   # [(1, 2), (2, 3), (2, 4), (3, 4), (6, 7)]
```

Both lists support `len()`, iteration and `str()`. `str()` joins the values with spaces.

### Argument order

- `SinglyLinkedList.add_after(value, target)` and `add_before(value, target)` take the new value first.
- `DoublyLinkedList.add_after(target, value)` and `add_before(target, value)` take the existing value first.

In both classes these methods do nothing if `target` is not in the list.

### Empty lists and missing values

`SinglyLinkedList`:
- `delete_head()` does nothing on an empty list.
- `delete_tail()` raises `IndexError` on an empty list.
- `delete(value)` does nothing if the value is absent.

`DoublyLinkedList`:
- `delete_first()` and `delete_last()` return the removed value. They raise `IndexError` on an empty list.
- `delete(value)` raises `ValueError` if the value is absent.
- `format_forward()` and `format_backward()` return `"DS Rong"` for an empty list.

`TaskQueue`:
- `peek()` and `pop()` raise `IndexError` on an empty queue.
- `drain()` pops and yields tasks until the queue is empty.

## Demo commands

Two small demonstration programs are installed:

```
linkedlists-doubly-demo
linkedlists-taskqueue-demo
```

- `linkedlists-doubly-demo` builds the list `3 6 2`, prints it, deletes `2` and prints the result.
- `linkedlists-taskqueue-demo` pushes five tasks into a `TaskQueue` and prints them in the order they are served.

## Limitations

The demo commands take no options and read no input. The containers are held in memory only. They are not safe to share between threads without your own locking.