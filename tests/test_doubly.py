import pytest

from dsakit.doubly import DoublyLinkedList


def assert_consistent(lst):
    forward = list(lst)
    assert list(reversed(lst)) == forward[::-1]
    assert len(lst) == len(forward)


def test_construction_round_trip():
    values = [3, 8, 12, 5, 6]
    lst = DoublyLinkedList(values)
    assert list(lst) == values
    assert list(reversed(lst)) == values[::-1]
    assert len(lst) == len(values)


def test_empty_list():
    lst = DoublyLinkedList()
    assert list(lst) == []
    assert list(reversed(lst)) == []
    assert len(lst) == 0


def test_push_front_and_back():
    lst = DoublyLinkedList([1, 2])
    lst.push_front(0)
    lst.push_back(3)
    assert list(lst) == [0, 1, 2, 3]
    assert_consistent(lst)


@pytest.mark.parametrize("target", [10, 20, 30])
def test_insert_before_matches_list_insert(target):
    values = [10, 20, 30]
    lst = DoublyLinkedList(values)
    lst.insert_before(target, 99)
    expected = list(values)
    expected.insert(expected.index(target), 99)
    assert list(lst) == expected
    assert_consistent(lst)


@pytest.mark.parametrize("target", [10, 20, 30])
def test_insert_after_matches_list_insert(target):
    values = [10, 20, 30]
    lst = DoublyLinkedList(values)
    lst.insert_after(target, 99)
    expected = list(values)
    expected.insert(expected.index(target) + 1, 99)
    assert list(lst) == expected
    assert_consistent(lst)


def test_insert_missing_target_raises_and_leaves_list():
    values = [1, 2, 3]
    lst = DoublyLinkedList(values)
    with pytest.raises(ValueError):
        lst.insert_before(42, 0)
    with pytest.raises(ValueError):
        lst.insert_after(42, 0)
    assert list(lst) == values


def test_pop_front_and_back():
    values = [4, 5, 6]
    lst = DoublyLinkedList(values)
    assert lst.pop_front() == values[0]
    assert lst.pop_back() == values[-1]
    assert list(lst) == values[1:-1]
    assert_consistent(lst)


def test_pop_until_empty():
    values = [1, 2, 3]
    lst = DoublyLinkedList(values)
    popped = [lst.pop_back() for _ in values]
    assert popped == values[::-1]
    assert len(lst) == 0
    with pytest.raises(IndexError):
        lst.pop_back()
    with pytest.raises(IndexError):
        lst.pop_front()


@pytest.mark.parametrize("target", [2, 3, 4])
def test_remove_before(target):
    values = [1, 2, 3, 4]
    lst = DoublyLinkedList(values)
    index = values.index(target)
    assert lst.remove_before(target) == values[index - 1]
    assert list(lst) == values[: index - 1] + values[index:]
    assert_consistent(lst)


def test_remove_before_first_node_raises():
    lst = DoublyLinkedList([1, 2])
    with pytest.raises(IndexError):
        lst.remove_before(1)
    with pytest.raises(ValueError):
        lst.remove_before(9)
    assert list(lst) == [1, 2]


@pytest.mark.parametrize("target", [1, 2, 3])
def test_remove_after(target):
    values = [1, 2, 3, 4]
    lst = DoublyLinkedList(values)
    index = values.index(target)
    assert lst.remove_after(target) == values[index + 1]
    assert list(lst) == values[: index + 1] + values[index + 2 :]
    assert_consistent(lst)


def test_remove_after_last_node_raises():
    lst = DoublyLinkedList([1, 2])
    with pytest.raises(IndexError):
        lst.remove_after(2)
    with pytest.raises(ValueError):
        lst.remove_after(9)
    assert len(lst) == 2


def test_clear():
    lst = DoublyLinkedList([1, 2, 3])
    lst.clear()
    assert list(lst) == []
    assert list(reversed(lst)) == []
    lst.push_front(5)
    assert list(lst) == [5]
    assert_consistent(lst)


def test_mixed_operations_keep_links_consistent():
    lst = DoublyLinkedList()
    model = []
    for value in range(6):
        lst.push_back(value)
        model.append(value)
    lst.insert_before(0, -1)
    model.insert(0, -1)
    lst.insert_after(5, 6)
    model.append(6)
    lst.remove_after(2)
    del model[model.index(2) + 1]
    lst.remove_before(5)
    del model[model.index(5) - 1]
    assert list(lst) == model
    assert_consistent(lst)