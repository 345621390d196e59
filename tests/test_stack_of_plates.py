import pytest

from ctcikit.stack_of_plates import SizedStack, StackOfPlates


def test_push_pop():
    plates = StackOfPlates(3)
    for value in range(9):
        plates.push(value)

    assert len(plates.stacks) == 3
    assert plates.pop() == 8
    assert plates.pop() == 7
    assert plates.pop() == 6
    assert len(plates.stacks) == 2

    for value in range(6, 15):
        plates.push(value)

    assert len(plates.stacks) == 5


def test_pop_pop_at():
    plates = StackOfPlates(3)
    for value in range(9):
        plates.push(value)

    assert plates.pop_at(0) == 2
    plates.push(15)
    assert len(plates.stacks) == 3
    assert plates.pop_at(0) == 15


def test_pop_at_past_end_returns_none():
    plates = StackOfPlates(2)
    plates.push(1)
    assert plates.pop_at(5) is None


def test_pop_at_end_index_raises():
    plates = StackOfPlates(2)
    plates.push(1)
    with pytest.raises(IndexError):
        plates.pop_at(1)


def test_pop_with_no_stacks_left_raises():
    plates = StackOfPlates(2)
    plates.push(1)
    assert plates.pop() == 1
    assert plates.stacks == []
    with pytest.raises(IndexError):
        plates.pop()


def test_sized_stack_ignores_push_when_full():
    stack = SizedStack(2)
    assert stack.is_full() is False
    for value in (1, 2, 3):
        stack.push(value)
    assert stack.is_full() is True
    assert list(stack) == [2, 1]
    assert stack.pop() == 2
    assert stack.is_full() is False
    assert stack.pop() == 1
    assert stack.pop() is None
    assert stack.size == 0


def test_zero_capacity_is_always_full():
    stack = SizedStack(0)
    stack.push(1)
    assert stack.is_full() is True
    assert stack.is_empty() is True