"""A double-buffered string cache that swaps its active half on rotation."""

from __future__ import annotations

import argparse
import logging
import threading
import time

log = logging.getLogger(__name__)

SAMPLE: dict[int, str] = {0: "foo", 1: "bar", 2: "qwe", 3: "asd"}


class Cache:
    """A thread-safe mapping from integer ids to strings."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: dict[int, str] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def set(self, key: int, value: str) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        with self._lock:
            self._items[key] = value

    def get(self, key: int) -> str:
        """Return the value stored under ``key``, or an empty string."""
        with self._lock:
            return self._items.get(key, "")

    def reset(self) -> None:
        """Drop every stored value."""
        with self._lock:
            self._items.clear()


class RotateCache:
    """Two caches: readers see the active one while writers fill the other.

    :meth:`rotate` makes the filled cache active.
    """

    def __init__(self) -> None:
        self._buffers = (Cache(), Cache())
        self._active = 0
        self._lock = threading.Lock()

    def _index(self, active: bool) -> int:
        with self._lock:
            current = self._active
        return current if active else 1 - current

    def set(self, key: int, value: str) -> None:
        """Store ``value`` in the inactive cache."""
        self._buffers[self._index(active=False)].set(key, value)

    def get(self, key: int) -> str:
        """Read ``key`` from the active cache, or an empty string."""
        return self._buffers[self._index(active=True)].get(key)

    def rotate(self) -> None:
        """Swap the active and inactive caches."""
        with self._lock:
            self._active = 1 - self._active

    def reset_buffer(self) -> None:
        """Clear the inactive cache."""
        self._buffers[self._index(active=False)].reset()


def _fill(cache: RotateCache) -> None:
    for key, value in SAMPLE.items():
        cache.set(key, value)


def _read_loop(cache: RotateCache, done: threading.Event) -> None:
    while not done.is_set():
        for key, expected in SAMPLE.items():
            if cache.get(key) != expected:
                log.info("%s mismatch", expected)
    log.info("reader stop")


def main(argv: list[str] | None = None) -> int:
    """Rotate a cache under a concurrent reader, logging any mismatch seen."""
    parser = argparse.ArgumentParser(description="Rotate a cache under load.")
    parser.add_argument("--interval", type=float, default=1.0, help="seconds between rotations")
    parser.add_argument("--rounds", type=int, default=5, help="number of rotations")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    cache = RotateCache()
    for _ in range(2):
        _fill(cache)
        cache.rotate()

    done = threading.Event()
    reader = threading.Thread(target=_read_loop, args=(cache, done), daemon=True)
    reader.start()
    for _ in range(args.rounds):
        time.sleep(args.interval)
        cache.reset_buffer()
        _fill(cache)
        cache.rotate()
        log.info("rotate cache")
    done.set()
    reader.join()
    return 0