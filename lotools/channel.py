"""Thread-safe channels and helpers to dispatch, merge and batch their messages."""

from __future__ import annotations

import enum
import random
import threading
import time
from collections import deque
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar

from .find import max_by, min_by

T = TypeVar("T")

__all__ = [
    "ChannelClosed",
    "Channel",
    "channel_dispatcher",
    "dispatching_strategy_round_robin",
    "dispatching_strategy_random",
    "dispatching_strategy_weighted_random",
    "dispatching_strategy_first",
    "dispatching_strategy_least",
    "dispatching_strategy_most",
    "slice_to_channel",
    "channel_to_slice",
    "generator",
    "buffer",
    "buffer_with_context",
    "buffer_with_timeout",
    "fan_in",
    "fan_out",
]

_BACKOFF = 10e-6
_CANCEL_POLL = 0.001


class ChannelClosed(Exception):
    """Raised when sending on, closing, or receiving from a closed and drained channel."""


class _Outcome(enum.Enum):
    ITEM = enum.auto()
    CLOSED = enum.auto()
    STOPPED = enum.auto()


class Channel(Generic[T]):
    """A FIFO channel between threads.

    With a capacity of 0 the channel is unbuffered: a send returns only once a
    receiver has taken the item.
    """

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("channel capacity must not be negative")
        self.capacity = capacity
        self._items: deque[T] = deque()
        self._closed = False
        self._sent = 0
        self._taken = 0
        self._cond = threading.Condition()

    @property
    def closed(self) -> bool:
        """Whether the channel has been closed."""
        with self._cond:
            return self._closed

    def _has_room(self) -> bool:
        if self.capacity == 0:
            return not self._items
        return len(self._items) < self.capacity

    def send(self, item: T) -> None:
        """Put ``item`` on the channel, blocking while it is full."""
        with self._cond:
            while True:
                if self._closed:
                    raise ChannelClosed("send on closed channel")
                if self._has_room():
                    break
                self._cond.wait()
            self._items.append(item)
            self._sent += 1
            ticket = self._sent
            self._cond.notify_all()
            if self.capacity == 0:
                while self._taken < ticket and not self._closed:
                    self._cond.wait()

    def _receive_until(
        self, cancel: threading.Event | None, deadline: float | None
    ) -> tuple[T | None, _Outcome]:
        with self._cond:
            while True:
                if cancel is not None and cancel.is_set():
                    return None, _Outcome.STOPPED
                now = time.monotonic()
                if deadline is not None and now >= deadline:
                    return None, _Outcome.STOPPED
                if self._items:
                    item = self._items.popleft()
                    self._taken += 1
                    self._cond.notify_all()
                    return item, _Outcome.ITEM
                if self._closed:
                    return None, _Outcome.CLOSED
                wait: float | None = None
                if deadline is not None:
                    wait = deadline - now
                if cancel is not None:
                    wait = _CANCEL_POLL if wait is None else min(wait, _CANCEL_POLL)
                self._cond.wait(wait)

    def receive(self) -> T:
        """Take the next item, blocking until one arrives.

        Raises ChannelClosed once the channel is closed and drained.
        """
        item, outcome = self._receive_until(None, None)
        if outcome is _Outcome.CLOSED:
            raise ChannelClosed("receive from closed channel")
        return item  # type: ignore[return-value]

    def close(self) -> None:
        """Close the channel; buffered items can still be received."""
        with self._cond:
            if self._closed:
                raise ChannelClosed("close of closed channel")
            self._closed = True
            self._cond.notify_all()

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                yield self.receive()
            except ChannelClosed:
                return

    def __len__(self) -> int:
        if self.capacity == 0:
            return 0
        with self._cond:
            return len(self._items)


DispatchingStrategy = Callable[[Any, int, Sequence[Channel[Any]]], int]


def _spawn(target: Callable[..., Any], *args: Any) -> threading.Thread:
    thread = threading.Thread(target=target, args=args, daemon=True)
    thread.start()
    return thread


def _is_not_full(channel: Channel[Any]) -> bool:
    return channel.capacity == 0 or len(channel) < channel.capacity


def _close_all(channels: Iterable[Channel[Any]]) -> None:
    for channel in channels:
        channel.close()


def channel_dispatcher(
    stream: Channel[T],
    count: int,
    channel_buffer_cap: int,
    strategy: DispatchingStrategy,
) -> list[Channel[T]]:
    """Distribute messages of ``stream`` over ``count`` new child channels.

    Closing ``stream`` closes the children.
    """
    children: list[Channel[T]] = [Channel(channel_buffer_cap) for _ in range(count)]

    def pump() -> None:
        try:
            for index, msg in enumerate(stream):
                destination = strategy(msg, index, children) % count
                children[destination].send(msg)
        finally:
            _close_all(children)

    _spawn(pump)
    return children


def dispatching_strategy_round_robin(
    msg: Any, index: int, channels: Sequence[Channel[Any]]
) -> int:
    """Rotate over the channels, skipping full ones."""
    while True:
        i = index % len(channels)
        if _is_not_full(channels[i]):
            return i
        index += 1
        time.sleep(_BACKOFF)


def dispatching_strategy_random(
    msg: Any, index: int, channels: Sequence[Channel[Any]]
) -> int:
    """Pick a random channel that is not full."""
    while True:
        i = random.randrange(len(channels))
        if _is_not_full(channels[i]):
            return i
        time.sleep(_BACKOFF)


def dispatching_strategy_weighted_random(weights: Sequence[int]) -> DispatchingStrategy:
    """Build a strategy picking channel ``i`` with a probability proportional to ``weights[i]``."""
    seq = [i for i, weight in enumerate(weights) for _ in range(weight)]

    def strategy(msg: Any, index: int, channels: Sequence[Channel[Any]]) -> int:
        while True:
            i = random.choice(seq)
            if _is_not_full(channels[i]):
                return i
            time.sleep(_BACKOFF)

    return strategy


def dispatching_strategy_first(
    msg: Any, index: int, channels: Sequence[Channel[Any]]
) -> int:
    """Pick the first channel that is not full."""
    while True:
        for i, channel in enumerate(channels):
            if _is_not_full(channel):
                return i
        time.sleep(_BACKOFF)


def dispatching_strategy_least(
    msg: Any, index: int, channels: Sequence[Channel[Any]]
) -> int:
    """Pick the emptiest channel."""
    return min_by(
        list(range(len(channels))),
        lambda item, best: len(channels[item]) < len(channels[best]),
    )


def dispatching_strategy_most(
    msg: Any, index: int, channels: Sequence[Channel[Any]]
) -> int:
    """Pick the fullest channel that still has room."""
    return max_by(
        list(range(len(channels))),
        lambda item, best: len(channels[item]) > len(channels[best])
        and _is_not_full(channels[item]),
    )


def slice_to_channel(buffer_size: int, collection: Iterable[T]) -> Channel[T]:
    """Return a channel fed with the items of ``collection``, closed afterwards."""
    ch: Channel[T] = Channel(buffer_size)
    items = list(collection)

    def feed() -> None:
        try:
            for item in items:
                ch.send(item)
        finally:
            ch.close()

    _spawn(feed)
    return ch


def channel_to_slice(ch: Channel[T]) -> list[T]:
    """Collect every item of ``ch`` until it closes."""
    return list(ch)


def generator(
    buffer_size: int, producer: Callable[[Callable[[T], None]], Any]
) -> Channel[T]:
    """Run ``producer(emit)`` in a thread; emitted values go to the returned channel."""
    ch: Channel[T] = Channel(buffer_size)

    def run() -> None:
        try:
            producer(ch.send)
        finally:
            ch.close()

    _spawn(run)
    return ch


def _collect(
    ch: Channel[T],
    size: int,
    cancel: threading.Event | None,
    deadline: float | None,
) -> tuple[list[T], int, float, bool]:
    items: list[T] = []
    start = time.monotonic()
    for _ in range(size):
        item, outcome = ch._receive_until(cancel, deadline)
        if outcome is _Outcome.CLOSED:
            return items, len(items), time.monotonic() - start, False
        if outcome is _Outcome.STOPPED:
            return items, len(items), time.monotonic() - start, True
        items.append(item)  # type: ignore[arg-type]
    return items, len(items), time.monotonic() - start, True


def buffer(ch: Channel[T], size: int) -> tuple[list[T], int, float, bool]:
    """Read up to ``size`` items.

    Returns the items, their count, the seconds spent and False if the channel closed.
    """
    return _collect(ch, size, None, None)


def buffer_with_context(
    cancel: threading.Event, ch: Channel[T], size: int
) -> tuple[list[T], int, float, bool]:
    """Like buffer, but stops early (still reporting True) once ``cancel`` is set."""
    return _collect(ch, size, cancel, None)


def buffer_with_timeout(
    ch: Channel[T], size: int, timeout: float
) -> tuple[list[T], int, float, bool]:
    """Like buffer, but stops early (still reporting True) after ``timeout`` seconds."""
    return _collect(ch, size, None, time.monotonic() + timeout)


def fan_in(channel_buffer_cap: int, *args: Channel[T]) -> Channel[T]:
    """Merge the given channels into one, closed once all of them are closed."""
    out: Channel[T] = Channel(channel_buffer_cap)

    def pump(upstream: Channel[T]) -> None:
        for msg in upstream:
            out.send(msg)

    workers = [_spawn(pump, upstream) for upstream in args]

    def close_when_done() -> None:
        for worker in workers:
            worker.join()
        out.close()

    _spawn(close_when_done)
    return out


def fan_out(count: int, channels_buffer_cap: int, upstream: Channel[T]) -> list[Channel[T]]:
    """Broadcast every message of ``upstream`` to ``count`` new channels."""
    downstreams: list[Channel[T]] = [Channel(channels_buffer_cap) for _ in range(count)]

    def pump() -> None:
        try:
            for msg in upstream:
                for downstream in downstreams:
                    downstream.send(msg)
        finally:
            _close_all(downstreams)

    _spawn(pump)
    return downstreams