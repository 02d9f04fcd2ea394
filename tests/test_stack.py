import pytest

from dsakit.stack import BoundedStack, StackOverflow, StackUnderflow


def test_push_until_full_then_overflow():
    stack = BoundedStack()
    for i in range(1, 6):
        stack.push(i * 10)
    assert stack.is_full()
    assert len(stack) == 5
    with pytest.raises(StackOverflow):
        stack.push(60)
    assert len(stack) == 5


def test_pop_returns_last_in_first():
    stack = BoundedStack()
    pushed = [i * 10 for i in range(1, 6)]
    for item in pushed:
        stack.push(item)
    popped = [stack.pop() for _ in pushed]
    assert popped == pushed[::-1]
    assert len(stack) == 0


def test_pop_empty_raises_underflow():
    with pytest.raises(StackUnderflow):
        BoundedStack().pop()


def test_underflow_is_index_error():
    with pytest.raises(IndexError):
        BoundedStack().peek()


def test_peek_does_not_remove():
    stack = BoundedStack(3)
    stack.push("a")
    stack.push("b")
    assert stack.peek() == "b"
    assert len(stack) == 2
    assert stack.pop() == "b"
    assert stack.peek() == "a"


def test_custom_capacity():
    stack = BoundedStack(2)
    stack.push(1)
    assert not stack.is_full()
    stack.push(2)
    assert stack.is_full()
    with pytest.raises(StackOverflow):
        stack.push(3)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        BoundedStack(-1)