"""Concurrency helpers: serialised callbacks, background calls and polling."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from contextlib import AbstractContextManager
from typing import Any, TypeVar

from .channel import Channel
from .errors import try_

T = TypeVar("T")

__all__ = [
    "Synchronized",
    "synchronize",
    "async_",
    "wait_for",
    "wait_for_with_context",
]


class Synchronized:
    """Runs callbacks one at a time under a lock."""

    def __init__(self, lock: AbstractContextManager[Any]) -> None:
        self.lock = lock

    def do(self, callback: Callable[[], Any]) -> None:
        """Run ``callback`` while holding the lock; exceptions it raises are swallowed."""
        with self.lock:
            try_(callback)


def synchronize(*args: Any) -> Synchronized:
    """Wrap callbacks in a lock; takes an optional lock, a new one by default."""
    if len(args) > 1:
        raise ValueError("unexpected arguments")
    lock = args[0] if args else threading.Lock()
    return Synchronized(lock)


def async_(f: Callable[[], T]) -> Channel[T]:
    """Call ``f`` in a thread; its result is delivered on the returned channel."""
    ch: Channel[T] = Channel(1)

    def run() -> None:
        try:
            ch.send(f())
        finally:
            ch.close()

    threading.Thread(target=run, daemon=True).start()
    return ch


def wait_for(
    condition: Callable[[int], bool], timeout: float, heartbeat_delay: float
) -> tuple[int, float, bool]:
    """Check ``condition(iteration)`` every ``heartbeat_delay`` seconds until it holds.

    Returns the number of checks, the seconds elapsed and whether the condition held
    before ``timeout`` seconds passed.
    """
    return wait_for_with_context(
        None, lambda _cancel, iteration: condition(iteration), timeout, heartbeat_delay
    )


def wait_for_with_context(
    cancel: threading.Event | None,
    condition: Callable[[threading.Event | None, int], bool],
    timeout: float,
    heartbeat_delay: float,
) -> tuple[int, float, bool]:
    """Like wait_for, also stopping once ``cancel`` is set.

    The condition receives ``cancel`` and the iteration number.
    """
    start = time.monotonic()
    if cancel is not None and cancel.is_set():
        return 0, time.monotonic() - start, False

    deadline = start + timeout
    next_tick = start + heartbeat_delay
    iterations = 0

    while True:
        now = time.monotonic()
        if (cancel is not None and cancel.is_set()) or now >= deadline:
            return iterations, now - start, False
        if now >= next_tick:
            iterations += 1
            if condition(cancel, iterations - 1):
                return iterations, time.monotonic() - start, True
            next_tick += heartbeat_delay
            after = time.monotonic()
            if next_tick < after:
                next_tick = after
            continue
        wake = min(next_tick, deadline) - now
        if cancel is not None:
            cancel.wait(wake)
        else:
            time.sleep(wake)