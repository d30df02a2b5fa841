"""Thread-safe channels with dispatching, buffering and fan-in/fan-out helpers."""

from __future__ import annotations

import random
import threading
import time
from collections import deque
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar

from xtlo.find import max_by, min_by

T = TypeVar("T")

DispatchingStrategy = Callable[[Any, int, Sequence["Channel[Any]"]], int]

_SPIN_DELAY = 10e-6
_POLL_INTERVAL = 1e-3


class _Stopped:
    """Marker returned when a receive gives up because of a deadline or cancellation."""


_STOPPED = _Stopped()


class ChannelClosed(Exception):
    """Raised when sending on, or closing, a channel that is already closed."""


class Channel(Generic[T]):
    """A FIFO channel shared between threads.

    With a positive ``capacity`` senders block while the buffer is full; with a
    capacity of 0 every send waits until a receiver has taken the item.
    """

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("channel capacity must not be negative")
        self.capacity = capacity
        self._items: deque = deque()
        self._closed = False
        self._sent = 0
        self._taken = 0
        self._cond = threading.Condition()

    @property
    def closed(self) -> bool:
        """Whether :meth:`close` has been called."""
        with self._cond:
            return self._closed

    def send(self, item: T) -> None:
        """Put ``item`` on the channel, blocking while it is full.

        Raises :class:`ChannelClosed` if the channel is or becomes closed.
        """
        with self._cond:
            limit = max(self.capacity, 1)
            while not self._closed and len(self._items) >= limit:
                self._cond.wait()
            if self._closed:
                raise ChannelClosed("send on closed channel")
            self._items.append(item)
            self._sent += 1
            ticket = self._sent
            self._cond.notify_all()
            if self.capacity == 0:
                while self._taken < ticket and not self._closed:
                    self._cond.wait()

    def receive(self, timeout: Optional[float] = None) -> Tuple[Optional[T], bool]:
        """Take the next item as ``(item, True)``; ``(None, False)`` once closed and drained.

        Raises ``TimeoutError`` if nothing arrives within ``timeout`` seconds.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        outcome = self._receive(deadline, None)
        if outcome is _STOPPED:
            raise TimeoutError("no item received before the timeout")
        return outcome  # type: ignore[return-value]

    def _receive(
        self, deadline: Optional[float], cancel: Optional[threading.Event]
    ) -> Any:
        with self._cond:
            while True:
                if cancel is not None and cancel.is_set():
                    return _STOPPED
                if self._items:
                    item = self._items.popleft()
                    self._taken += 1
                    self._cond.notify_all()
                    return item, True
                if self._closed:
                    return None, False
                remaining: Optional[float] = None
                if deadline is not None:
                    remaining = deadline - time.monotonic()
                    if remaining <= 0:
                        return _STOPPED
                if cancel is not None:
                    remaining = _POLL_INTERVAL if remaining is None else min(remaining, _POLL_INTERVAL)
                self._cond.wait(remaining)

    def close(self) -> None:
        """Close the channel; receivers drain what is left, senders fail.

        Raises :class:`ChannelClosed` if the channel is already closed.
        """
        with self._cond:
            if self._closed:
                raise ChannelClosed("close of closed channel")
            self._closed = True
            self._cond.notify_all()

    def is_full(self) -> bool:
        """Whether a buffered channel holds ``capacity`` items; never true when unbuffered."""
        with self._cond:
            return self.capacity > 0 and len(self._items) >= self.capacity

    def __len__(self) -> int:
        with self._cond:
            return len(self._items) if self.capacity else 0

    def __iter__(self) -> Iterator[T]:
        while True:
            item, ok = self.receive()
            if not ok:
                return
            yield item  # type: ignore[misc]


def _start(target: Callable[..., Any], *args: Any) -> threading.Thread:
    thread = threading.Thread(target=target, args=args, daemon=True)
    thread.start()
    return thread


def _create_channels(count: int, capacity: int) -> List[Channel[Any]]:
    return [Channel(capacity) for _ in range(count)]


def _close_all(channels: Iterable[Channel[Any]]) -> None:
    for channel in channels:
        channel.close()


def channel_dispatcher(
    stream: Channel[T], count: int, channel_buffer_cap: int, strategy: DispatchingStrategy
) -> List[Channel[T]]:
    """Distribute the items of ``stream`` over ``count`` new channels using ``strategy``.

    The children are closed once ``stream`` is closed and drained.
    """
    children = _create_channels(count, channel_buffer_cap)

    def run() -> None:
        try:
            for index, msg in enumerate(stream):
                destination = strategy(msg, index, children) % count
                children[destination].send(msg)
        finally:
            _close_all(children)

    _start(run)
    return children


def dispatching_strategy_round_robin(msg: Any, index: int, channels: Sequence[Channel[Any]]) -> int:
    """Pick channels in rotation, skipping full ones."""
    while True:
        i = index % len(channels)
        if not channels[i].is_full():
            return i
        index += 1
        time.sleep(_SPIN_DELAY)


def dispatching_strategy_random(msg: Any, index: int, channels: Sequence[Channel[Any]]) -> int:
    """Pick a random channel that is not full."""
    while True:
        i = random.randrange(len(channels))
        if not channels[i].is_full():
            return i
        time.sleep(_SPIN_DELAY)


def dispatching_strategy_weighted_random(weights: Sequence[int]) -> DispatchingStrategy:
    """Return a strategy picking non-full channels at random in proportion to ``weights``."""
    sequence = [i for i, weight in enumerate(weights) for _ in range(weight)]

    def strategy(msg: Any, index: int, channels: Sequence[Channel[Any]]) -> int:
        while True:
            i = random.choice(sequence) if sequence else random.randrange(0)
            if not channels[i].is_full():
                return i
            time.sleep(_SPIN_DELAY)

    return strategy


def dispatching_strategy_first(msg: Any, index: int, channels: Sequence[Channel[Any]]) -> int:
    """Pick the first channel that is not full."""
    while True:
        for i, channel in enumerate(channels):
            if not channel.is_full():
                return i
        time.sleep(_SPIN_DELAY)


def dispatching_strategy_least(msg: Any, index: int, channels: Sequence[Channel[Any]]) -> int:
    """Pick the emptiest channel."""
    return min_by(range(len(channels)), lambda item, best: len(channels[item]) < len(channels[best]))  # type: ignore[return-value]


def dispatching_strategy_most(msg: Any, index: int, channels: Sequence[Channel[Any]]) -> int:
    """Pick the fullest channel that still has room."""
    return max_by(  # type: ignore[return-value]
        range(len(channels)),
        lambda item, best: len(channels[item]) > len(channels[best]) and not channels[item].is_full(),
    )


def slice_to_channel(buffer_size: int, collection: Iterable[T]) -> Channel[T]:
    """Return a channel that yields the items of ``collection`` and then closes."""
    ch: Channel[T] = Channel(buffer_size)

    def run() -> None:
        try:
            for item in collection:
                ch.send(item)
        finally:
            ch.close()

    _start(run)
    return ch


def channel_to_slice(ch: Channel[T]) -> List[T]:
    """Collect every item of ``ch``; blocks until the channel is closed."""
    return list(ch)


def generator(buffer_size: int, generator_fn: Callable[[Callable[[T], None]], Any]) -> Channel[T]:
    """Run ``generator_fn(yield_)`` in a thread; each ``yield_(value)`` is sent on the returned channel."""
    ch: Channel[T] = Channel(buffer_size)

    def run() -> None:
        try:
            generator_fn(ch.send)
        finally:
            ch.close()

    _start(run)
    return ch


def _collect(
    ch: Channel[T],
    size: int,
    deadline: Optional[float] = None,
    cancel: Optional[threading.Event] = None,
) -> Tuple[List[T], int, float, bool]:
    start = time.monotonic()
    items: List[T] = []
    while len(items) < size:
        outcome = ch._receive(deadline, cancel)
        if outcome is _STOPPED:
            return items, len(items), time.monotonic() - start, True
        item, ok = outcome
        if not ok:
            return items, len(items), time.monotonic() - start, False
        items.append(item)
    return items, len(items), time.monotonic() - start, True


def buffer(ch: Channel[T], size: int) -> Tuple[List[T], int, float, bool]:
    """Read up to ``size`` items: ``(items, count, seconds, ok)``; ``ok`` is false once closed."""
    return _collect(ch, size)


def batch(ch: Channel[T], size: int) -> Tuple[List[T], int, float, bool]:
    """Same as :func:`buffer`."""
    return buffer(ch, size)


def buffer_with_context(
    ctx: Optional[threading.Event], ch: Channel[T], size: int
) -> Tuple[List[T], int, float, bool]:
    """Like :func:`buffer`, stopping early (with ``ok`` true) once the event ``ctx`` is set."""
    return _collect(ch, size, cancel=ctx)


def buffer_with_timeout(ch: Channel[T], size: int, timeout: float) -> Tuple[List[T], int, float, bool]:
    """Like :func:`buffer`, stopping early (with ``ok`` true) after ``timeout`` seconds."""
    return _collect(ch, size, deadline=time.monotonic() + timeout)


def batch_with_timeout(ch: Channel[T], size: int, timeout: float) -> Tuple[List[T], int, float, bool]:
    """Same as :func:`buffer_with_timeout`."""
    return buffer_with_timeout(ch, size, timeout)


def fan_in(channel_buffer_cap: int, *args: Channel[T]) -> Channel[T]:
    """Merge all upstream channels into one, closed once every upstream is closed."""
    out: Channel[T] = Channel(channel_buffer_cap)

    def forward(upstream: Channel[T]) -> None:
        for item in upstream:
            out.send(item)

    workers = [_start(forward, upstream) for upstream in args]

    def close_when_done() -> None:
        for worker in workers:
            worker.join()
        out.close()

    _start(close_when_done)
    return out


def channel_merge(channel_buffer_cap: int, *args: Channel[T]) -> Channel[T]:
    """Same as :func:`fan_in`."""
    return fan_in(channel_buffer_cap, *args)


def fan_out(count: int, channels_buffer_cap: int, upstream: Channel[T]) -> List[Channel[T]]:
    """Copy every upstream item to ``count`` new channels, closed when upstream closes."""
    downstreams = _create_channels(count, channels_buffer_cap)

    def run() -> None:
        try:
            for item in upstream:
                for downstream in downstreams:
                    downstream.send(item)
        finally:
            _close_all(downstreams)

    _start(run)
    return downstreams