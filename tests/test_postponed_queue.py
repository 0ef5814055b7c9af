import threading

import pytest

from labkit.postponed_queue import PostponedQueue


class FakeClock:
    def __init__(self, now):
        self.now = now
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


def test_items_processed_in_order():
    pq = PostponedQueue(delay=0)
    seen = []
    for value in (1, 2, 3):
        pq.enqueue(value)
    pq.stop(1)
    assert pq.work(seen.append) == 3
    assert seen == [1, 2, 3]


def test_worker_waits_until_due():
    clock = FakeClock(100.0)
    pq = PostponedQueue(delay=5.0, clock=clock, sleep=clock.sleep)
    pq.enqueue("a")
    pq.stop(1)
    seen = []
    pq.work(seen.append)
    assert clock.sleeps == [5.0]
    assert seen == ["a"]


def test_no_wait_when_already_due():
    clock = FakeClock(50.0)
    pq = PostponedQueue(delay=2.0, clock=clock, sleep=clock.sleep)
    pq.enqueue("x")
    clock.now = 60.0
    pq.stop(1)
    pq.work(lambda payload: None)
    assert clock.sleeps == []


def test_failing_callback_does_not_stop_worker():
    pq = PostponedQueue(delay=0)
    seen = []

    def handler(payload):
        if payload == 1:
            raise ValueError("boom")
        seen.append(payload)

    pq.enqueue(1)
    pq.enqueue(2)
    pq.stop(1)
    assert pq.work(handler) == 2
    assert seen == [2]


def test_multiple_workers_share_items():
    pq = PostponedQueue(delay=0)
    seen = []
    lock = threading.Lock()

    def handler(payload):
        with lock:
            seen.append(payload)

    counts = []

    def run():
        processed = pq.work(handler)
        with lock:
            counts.append(processed)

    workers = [threading.Thread(target=run) for _ in range(3)]
    for worker in workers:
        worker.start()
    for value in range(10):
        pq.enqueue(value)
    pq.stop(3)
    for worker in workers:
        worker.join()
    assert sorted(seen) == list(range(10))
    assert len(counts) == 3
    assert sum(counts) == 10

    pq.stop(1)
    assert pq.work(handler) == 0


def test_enqueue_after_close_raises():
    pq = PostponedQueue(delay=0)
    pq.close()
    with pytest.raises(RuntimeError):
        pq.enqueue(1)


def test_double_close_raises():
    pq = PostponedQueue(delay=0)
    pq.close()
    with pytest.raises(RuntimeError):
        pq.close()