"""A thread-safe in-memory cache whose entries expire after a fixed interval."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass


@dataclass(frozen=True)
class _Entry:
    created_at: float
    val: bytes


class Cache:
    """Byte cache keyed by string; a background thread drops stale entries.

    Every ``interval`` seconds, entries older than ``interval`` are removed.
    """

    def __init__(self, interval: float) -> None:
        if interval <= 0:
            raise ValueError("cache interval must be positive")
        self._interval = interval
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._reaper = threading.Thread(
            target=self._reap_loop, name="cache-reaper", daemon=True
        )
        self._reaper.start()

    def add(self, key: str, val: bytes) -> None:
        """Store ``val`` under ``key``, replacing any previous entry."""
        with self._lock:
            self._entries[key] = _Entry(time.monotonic(), bytes(val))

    def get(self, key: str) -> bytes | None:
        """Return the value stored under ``key``, or None if there is none."""
        with self._lock:
            entry = self._entries.get(key)
        return None if entry is None else entry.val

    def reap(self, now: float | None = None) -> None:
        """Drop entries created more than one interval before ``now``.

        ``now`` is a ``time.monotonic()`` reading; it defaults to the current one.
        """
        if now is None:
            now = time.monotonic()
        cutoff = now - self._interval
        with self._lock:
            self._entries = {
                key: entry
                for key, entry in self._entries.items()
                if entry.created_at >= cutoff
            }

    def close(self) -> None:
        """Stop the background reaper."""
        self._stop.set()
        if self._reaper is not threading.current_thread():
            self._reaper.join()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _reap_loop(self) -> None:
        while not self._stop.wait(self._interval):
            self.reap()