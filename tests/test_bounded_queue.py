import pytest

from dsalab.bounded_queue import DEFAULT_CAPACITY, BoundedQueue


def test_fifo_order():
    queue = BoundedQueue()
    for v in [1, 2, 3]:
        queue.enqueue(v)
    assert list(queue) == [1, 2, 3]
    assert queue.peek() == 1
    assert [queue.dequeue() for _ in range(3)] == [1, 2, 3]
    assert queue.is_empty()


def test_default_capacity_is_five():
    queue = BoundedQueue()
    for i in range(DEFAULT_CAPACITY):
        queue.enqueue(i)
    assert queue.is_full()
    assert len(queue) == 5
    with pytest.raises(OverflowError):
        queue.enqueue(99)


def test_slots_not_reused_after_dequeue():
    queue = BoundedQueue(2)
    queue.enqueue("a")
    queue.enqueue("b")
    assert queue.dequeue() == "a"
    assert queue.dequeue() == "b"
    assert queue.is_empty()
    assert queue.is_full()
    with pytest.raises(OverflowError):
        queue.enqueue("c")


def test_empty_operations_raise():
    queue = BoundedQueue(3)
    with pytest.raises(IndexError):
        queue.dequeue()
    with pytest.raises(IndexError):
        queue.peek()


def test_len_tracks_front_and_rear():
    queue = BoundedQueue(4)
    for v in [5, 6, 7]:
        queue.enqueue(v)
    queue.dequeue()
    assert len(queue) == 2
    assert list(queue) == [6, 7]
    assert queue.peek() == 6


def test_invalid_capacity():
    with pytest.raises(ValueError):
        BoundedQueue(0)