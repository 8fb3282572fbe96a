import pytest
from hypothesis import given, strategies as st

from linkedlists.doubly import DoublyLinkedList, EMPTY_MESSAGE, main


ITEMS = [3, 6, 2]


def test_forward_and_backward():
    lst = DoublyLinkedList(ITEMS)
    assert list(lst) == ITEMS
    assert list(reversed(lst)) == ITEMS[::-1]
    assert len(lst) == len(ITEMS)


def test_format_empty():
    lst = DoublyLinkedList()
    assert lst.format_forward() == "DS Rong"
    assert lst.format_backward() == EMPTY_MESSAGE
    assert str(lst) == EMPTY_MESSAGE


def test_format_directions():
    lst = DoublyLinkedList(ITEMS)
    assert lst.format_forward() == " ".join(map(str, ITEMS))
    assert lst.format_backward() == " ".join(map(str, ITEMS[::-1]))


def test_add_first_on_empty_sets_tail():
    lst = DoublyLinkedList()
    lst.add_first(4)
    assert list(reversed(lst)) == [4]


def test_add_first():
    lst = DoublyLinkedList(ITEMS)
    lst.add_first(9)
    assert list(lst) == [9, *ITEMS]
    assert list(reversed(lst)) == [*ITEMS[::-1], 9]


def test_add_after_tail_updates_tail():
    lst = DoublyLinkedList(ITEMS)
    lst.add_after(2, 8)
    assert list(lst) == [*ITEMS, 8]
    assert next(reversed(lst)) == 8


def test_add_after_middle():
    lst = DoublyLinkedList(ITEMS)
    lst.add_after(3, 5)
    assert list(lst) == [3, 5, 6, 2]
    assert list(reversed(lst)) == [2, 6, 5, 3]


def test_add_after_missing_is_noop():
    lst = DoublyLinkedList(ITEMS)
    lst.add_after(100, 5)
    assert list(lst) == ITEMS


def test_add_before_head_updates_head():
    lst = DoublyLinkedList(ITEMS)
    lst.add_before(3, 1)
    assert list(lst) == [1, *ITEMS]
    assert list(reversed(lst))[-1] == 1


def test_add_before_middle():
    lst = DoublyLinkedList(ITEMS)
    lst.add_before(2, 7)
    assert list(lst) == [3, 6, 7, 2]
    assert list(reversed(lst)) == [2, 7, 6, 3]


def test_delete_first_and_last():
    lst = DoublyLinkedList(ITEMS)
    assert lst.delete_first() == ITEMS[0]
    assert lst.delete_last() == ITEMS[-1]
    assert list(lst) == ITEMS[1:-1]
    assert list(reversed(lst)) == ITEMS[1:-1]


def test_delete_first_empty_raises():
    with pytest.raises(IndexError):
        DoublyLinkedList().delete_first()


def test_delete_last_empty_raises():
    with pytest.raises(IndexError):
        DoublyLinkedList().delete_last()


def test_delete_single_element_empties():
    lst = DoublyLinkedList([5])
    lst.delete_last()
    assert lst.format_forward() == EMPTY_MESSAGE
    assert lst.format_backward() == EMPTY_MESSAGE


def test_delete_value():
    lst = DoublyLinkedList(ITEMS)
    lst.delete(2)
    assert list(lst) == [3, 6]
    assert list(reversed(lst)) == [6, 3]


def test_delete_missing_raises():
    lst = DoublyLinkedList(ITEMS)
    with pytest.raises(ValueError):
        lst.delete(100)
    assert list(lst) == ITEMS


def test_clear():
    lst = DoublyLinkedList(ITEMS)
    lst.clear()
    assert len(lst) == 0
    assert str(lst) == EMPTY_MESSAGE


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "3 6 2",
        "=============KQ SAU KHI XOA=========",
        "Xoa thanh cong ",
        "3 6",
    ]


@given(st.lists(st.integers(min_value=-5, max_value=5)), st.integers(min_value=-5, max_value=5))
def test_delete_keeps_both_directions_consistent(items, value):
    lst = DoublyLinkedList(items)
    model = list(items)
    if value in model:
        lst.delete(value)
        model.remove(value)
    else:
        with pytest.raises(ValueError):
            lst.delete(value)
    assert list(lst) == model
    assert list(reversed(lst)) == model[::-1]
    assert len(lst) == len(model)