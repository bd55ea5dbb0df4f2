from concurrent.futures import ThreadPoolExecutor

import pytest

from gbfront.dropping_queue import DroppingQueue, QueueClosed


def test_fifo_order():
    queue = DroppingQueue(4)
    for item in ("a", "b", "c"):
        queue.push(item)
    assert [queue.wait_pop() for _ in range(3)] == ["a", "b", "c"]
    assert len(queue) == 0


def test_overflow_drops_oldest_and_counts():
    queue = DroppingQueue(2)
    for item in (1, 2, 3, 4):
        queue.push(item)
    assert queue.dropped_count() == 2
    assert len(queue) == 2
    assert queue.wait_pop() == 3
    assert queue.wait_pop() == 4


def test_try_pop_latest_returns_newest_and_clears():
    queue = DroppingQueue(5)
    for item in ("x", "y", "z"):
        queue.push(item)
    assert queue.try_pop_latest() == "z"
    assert len(queue) == 0
    assert queue.try_pop_latest() is None


def test_push_after_close_raises():
    queue = DroppingQueue(3)
    queue.close()
    with pytest.raises(QueueClosed):
        queue.push(1)
    assert len(queue) == 0


def test_closed_queue_drains_before_raising():
    queue = DroppingQueue(3)
    queue.push("left")
    queue.close()
    assert queue.wait_pop() == "left"
    with pytest.raises(QueueClosed):
        queue.wait_pop()


def test_wait_pop_receives_item_from_other_thread():
    queue = DroppingQueue(2)
    with ThreadPoolExecutor(max_workers=1) as executor:
        future = executor.submit(queue.wait_pop)
        queue.push("frame")
        assert future.result(timeout=5) == "frame"
    assert len(queue) == 0


def test_close_wakes_waiting_consumer():
    queue = DroppingQueue(2)
    with ThreadPoolExecutor(max_workers=1) as executor:
        future = executor.submit(queue.wait_pop)
        queue.close()
        with pytest.raises(QueueClosed):
            future.result(timeout=5)


def test_invalid_depth_rejected():
    with pytest.raises(ValueError):
        DroppingQueue(0)