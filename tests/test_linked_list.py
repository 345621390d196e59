import pytest

from ctcikit.linked_list import (
    EmptyListError,
    LinkedList,
    LinkedListError,
    Node,
    NotFoundError,
)


def test_insert():
    my_list = LinkedList()
    my_list.push_back(7)

    expected = LinkedList()
    expected.first = Node(7)
    expected.last = expected.first

    assert my_list == expected


def test_remove_dups():
    my_list = LinkedList()
    my_list.push_back(0)
    my_list.push_back(1)
    my_list.push_front(-1)
    my_list.push_back(2)
    my_list.push_front(0)
    my_list.push_back(2)

    assert my_list.remove_dups() is None

    expected = LinkedList()
    expected.push_front(2)
    expected.push_front(1)
    expected.push_front(-1)
    expected.push_front(0)

    assert my_list == expected
    assert list(reversed(my_list)) == [2, 1, -1, 0]


def test_remove_dups_at_end_updates_last():
    my_list = LinkedList([1, 2, 1])
    my_list.remove_dups()
    assert list(my_list) == [1, 2]
    assert my_list.last is not None and my_list.last.item == 2


def test_push_front_and_back_order():
    my_list = LinkedList([1, 2, 3])
    my_list.push_front(0)
    my_list.push_front(-1)
    my_list.push_front(-2)
    assert list(my_list) == [-2, -1, 0, 1, 2, 3]
    assert list(reversed(my_list)) == [3, 2, 1, 0, -1, -2]


def test_nodes_are_linked_both_ways():
    my_list = LinkedList("abc")
    nodes = list(my_list.nodes())
    assert [n.item for n in nodes] == ["a", "b", "c"]
    assert list(my_list.reversed_nodes()) == nodes[::-1]
    assert nodes[1].previous is nodes[0]
    assert nodes[1].next is nodes[2]


def test_pop_back():
    my_list = LinkedList([1, 2])
    assert my_list.pop_back() == 2
    assert list(my_list) == [1]
    assert my_list.pop_back() == 1
    assert my_list.first is None and my_list.last is None


def test_pop_back_empty_raises():
    with pytest.raises(EmptyListError, match="The linked list is empty"):
        LinkedList().pop_back()


def test_error_hierarchy():
    assert issubclass(EmptyListError, LinkedListError)
    assert issubclass(NotFoundError, LinkedListError)
    assert str(NotFoundError()) == "Item/Node not found"


def test_str_and_repr():
    assert str(LinkedList([1, 2, 3])) == "[1,2,3]"
    assert repr(LinkedList(["a", "b"])) == "[a,b]"
    assert str(LinkedList()) == "[]"


def test_equality_differs_on_length_and_values():
    assert LinkedList([1, 2]) != LinkedList([1, 2, 3])
    assert LinkedList([1, 2, 3]) != LinkedList([1, 2, 4])
    assert LinkedList() == LinkedList()