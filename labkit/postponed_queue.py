"""A bounded work queue whose items become due a fixed delay after enqueueing."""

from __future__ import annotations

import argparse
import itertools
import logging
import queue
import threading
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable

log = logging.getLogger(__name__)

DEFAULT_DELAY = 10.0
DEFAULT_SIZE = 100
DEFAULT_WORKERS = 4

_STOP = object()


@dataclass(frozen=True)
class _Item:
    due: float
    payload: Any


def _stamp() -> str:
    return datetime.now().astimezone().isoformat()


class PostponedQueue:
    """Hold payloads until ``delay`` seconds after they were enqueued."""

    def __init__(
        self,
        delay: float = DEFAULT_DELAY,
        size: int = DEFAULT_SIZE,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.delay = delay
        self._queue: queue.Queue[Any] = queue.Queue(maxsize=size)
        self._clock = clock
        self._sleep = sleep
        self._closed = False

    def _put(self, obj: Any) -> None:
        if self._closed:
            raise RuntimeError("send on closed queue")
        self._queue.put(obj)

    def enqueue(self, payload: Any) -> None:
        """Add ``payload``, due ``delay`` seconds from now; blocks while the queue is full."""
        self._put(_Item(self._clock() + self.delay, payload))
        log.info("enqueue %s at %s", payload, _stamp())

    def work(self, fn: Callable[[Any], Any]) -> int:
        """Process items with ``fn`` until a stop signal arrives; return the count processed.

        Each item is held back until it is due. Errors raised by ``fn`` are
        logged and do not stop the worker.
        """
        processed = 0
        while True:
            item = self._queue.get()
            if item is _STOP:
                return processed
            wait = item.due - self._clock()
            if wait > 0:
                log.info("wait %.6fs", wait)
                self._sleep(wait)
            try:
                fn(item.payload)
            except Exception:  # noqa: BLE001 - a failed item must not kill the worker
                log.exception("processing %r failed", item.payload)
            processed += 1

    def stop(self, workers: int) -> None:
        """Send one stop signal to each of ``workers`` workers."""
        for _ in range(workers):
            self._put(_STOP)

    def close(self) -> None:
        """Refuse any further items or stop signals."""
        if self._closed:
            raise RuntimeError("close of closed queue")
        self._closed = True


def main(argv: list[str] | None = None) -> int:
    """Run four workers over two bursts of postponed items."""
    parser = argparse.ArgumentParser(description="Demonstrate a postponed queue.")
    parser.add_argument("--delay", type=float, default=DEFAULT_DELAY, help="seconds to postpone")
    parser.add_argument("--settle", type=float, default=20.0, help="seconds to wait before stopping")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    pq = PostponedQueue(delay=args.delay)
    counter = itertools.count(1)

    def process(payload: Any) -> None:
        print(f"process {payload} at {_stamp()}")
        time.sleep(0.067)

    workers = [threading.Thread(target=pq.work, args=(process,)) for _ in range(DEFAULT_WORKERS)]
    for worker in workers:
        worker.start()

    for _ in range(4):
        pq.enqueue(next(counter))
        time.sleep(0.01)
    time.sleep(2)
    for _ in range(10):
        pq.enqueue(next(counter))
        time.sleep(0.04)
    time.sleep(args.settle)

    pq.stop(DEFAULT_WORKERS)
    for worker in workers:
        worker.join()
    pq.close()
    return 0