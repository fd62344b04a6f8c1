import pytest

from dsalab.bounded_stack import DEFAULT_CAPACITY, BoundedStack


def test_default_capacity_fills_after_five():
    stack = BoundedStack()
    for i in range(DEFAULT_CAPACITY):
        stack.push(i)
    assert stack.is_full()
    assert len(stack) == 5
    with pytest.raises(OverflowError):
        stack.push(99)


def test_lifo_order():
    stack = BoundedStack(4)
    for v in [1, 2, 3]:
        stack.push(v)
    assert stack.peek() == 3
    assert [stack.pop() for _ in range(3)] == [3, 2, 1]
    assert stack.is_empty()


def test_iter_top_to_bottom():
    stack = BoundedStack(3)
    for v in ["a", "b", "c"]:
        stack.push(v)
    assert list(stack) == ["c", "b", "a"]


def test_pop_and_peek_empty_raise():
    stack = BoundedStack(2)
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek()


def test_pop_frees_room():
    stack = BoundedStack(1)
    stack.push(1)
    assert stack.is_full()
    assert stack.pop() == 1
    stack.push(2)
    assert stack.peek() == 2
    assert len(stack) == 1


def test_invalid_capacity():
    with pytest.raises(ValueError):
        BoundedStack(0)