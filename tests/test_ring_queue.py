import math

import pytest

from dsalabs.ring_queue import BoundedQueue, LinkedQueue, QueueEmpty, QueueFull


@pytest.mark.parametrize("factory", [BoundedQueue, LinkedQueue])
def test_fifo_order(factory):
    queue = factory(5)
    for angle in range(5):
        queue.put(angle, angle / 10)
    assert [queue.get()[0] for _ in range(5)] == list(range(5))


@pytest.mark.parametrize("factory", [BoundedQueue, LinkedQueue])
def test_get_from_empty_raises(factory):
    queue = factory(2)
    with pytest.raises(QueueEmpty):
        queue.get()


@pytest.mark.parametrize("factory", [BoundedQueue, LinkedQueue])
def test_len_and_iter(factory):
    queue = factory(3)
    queue.put(1, 0.5)
    queue.put(2, 0.25)
    assert len(queue) == 2
    assert list(queue) == [(1, 0.5), (2, 0.25)]
    queue.get()
    assert list(queue) == [(2, 0.25)]


@pytest.mark.parametrize("factory", [BoundedQueue, LinkedQueue])
def test_nan_round_trip(factory):
    queue = factory(1)
    queue.put(7, math.nan)
    angle, sine = queue.get()
    assert angle == 7
    assert math.isnan(sine)


def test_bounded_full_raises():
    queue = BoundedQueue(2)
    queue.put(1, 0.0)
    queue.put(2, 0.0)
    with pytest.raises(QueueFull):
        queue.put(3, 0.0)
    assert len(queue) == 2


def test_bounded_reuses_space_after_get():
    queue = BoundedQueue(2)
    queue.put(1, 0.0)
    queue.put(2, 0.0)
    queue.get()
    queue.put(3, 0.0)
    assert [queue.get()[0], queue.get()[0]] == [2, 3]


def test_bounded_zero_capacity_is_always_full():
    with pytest.raises(QueueFull):
        BoundedQueue(0).put(1, 0.0)


def test_bounded_negative_capacity_rejected():
    with pytest.raises(ValueError):
        BoundedQueue(-1)


def test_linked_is_unbounded():
    queue = LinkedQueue(1)
    for angle in range(100):
        queue.put(angle, 0.0)
    assert len(queue) == 100