from ctcikit.stack_min import MinStack


def test_min():
    stack = MinStack()
    for value in [1, 5, -7, 3, 2, 0, -2, 1, 7, 10, -5]:
        stack.push(value)
    assert stack.min == -7


def test_initial_min_is_int32_max():
    assert MinStack().min == 2147483647


def test_behaves_as_stack():
    stack = MinStack()
    for value in (4, 2, 8):
        stack.push(value)
    assert stack.peek() == 8
    assert list(stack) == [8, 2, 4]
    assert stack.pop() == 8
    assert stack.min == 2