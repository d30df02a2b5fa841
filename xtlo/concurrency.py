"""Mutual exclusion, background calls and polling helpers."""

from __future__ import annotations

import threading
import time
from typing import Any, Callable, Optional, Tuple, TypeVar

from xtlo.channel import Channel
from xtlo.errors import try0

T = TypeVar("T")


class Synchronizer:
    """Runs callbacks one at a time under a lock."""

    def __init__(self, locker: Any) -> None:
        self.locker = locker

    def do(self, callback: Callable[[], Any]) -> None:
        """Call ``callback`` while holding the lock; exceptions it raises are swallowed."""
        self.locker.acquire()
        try:
            try0(callback)
        finally:
            self.locker.release()


def synchronize(*args: Any) -> Synchronizer:
    """Return a :class:`Synchronizer` around the given lock, or a new one.

    Raises ``ValueError`` when more than one lock is given.
    """
    if len(args) > 1:
        raise ValueError("unexpected arguments")
    return Synchronizer(args[0] if args else threading.Lock())


def _run_async(produce: Callable[[], Any]) -> Channel[Any]:
    ch: Channel[Any] = Channel(1)
    threading.Thread(target=lambda: ch.send(produce()), daemon=True).start()
    return ch


def async_(f: Callable[[], T]) -> Channel[T]:
    """Call ``f`` in a thread; its result is sent on the returned channel."""
    return _run_async(f)


def async0(f: Callable[[], Any]) -> Channel[None]:
    """Call ``f`` in a thread; ``None`` is sent on the returned channel when it finishes."""

    def run() -> None:
        f()

    return _run_async(run)


def async1(f: Callable[[], T]) -> Channel[T]:
    """Same as :func:`async_`."""
    return async_(f)


def _async_tuple(f: Callable[[], Any]) -> Channel[Tuple[Any, ...]]:
    return _run_async(lambda: tuple(f()))


def async2(f: Callable[[], Tuple[Any, Any]]) -> Channel[Tuple[Any, ...]]:
    """Like :func:`async_` for a callable returning two values, sent as a tuple."""
    return _async_tuple(f)


def async3(f: Callable[[], Tuple[Any, Any, Any]]) -> Channel[Tuple[Any, ...]]:
    """Like :func:`async_` for a callable returning three values, sent as a tuple."""
    return _async_tuple(f)


def async4(f: Callable[[], Tuple[Any, ...]]) -> Channel[Tuple[Any, ...]]:
    """Like :func:`async_` for a callable returning four values, sent as a tuple."""
    return _async_tuple(f)


def async5(f: Callable[[], Tuple[Any, ...]]) -> Channel[Tuple[Any, ...]]:
    """Like :func:`async_` for a callable returning five values, sent as a tuple."""
    return _async_tuple(f)


def async6(f: Callable[[], Tuple[Any, ...]]) -> Channel[Tuple[Any, ...]]:
    """Like :func:`async_` for a callable returning six values, sent as a tuple."""
    return _async_tuple(f)


def wait_for(
    condition: Callable[[int], bool], timeout: float, heartbeat_delay: float
) -> Tuple[int, float, bool]:
    """Evaluate ``condition(i)`` every ``heartbeat_delay`` seconds until it holds or ``timeout`` passes.

    Returns ``(iterations, elapsed_seconds, found)``.
    """
    return wait_for_with_context(None, lambda _ctx, i: condition(i), timeout, heartbeat_delay)


def _sleep_until(ctx: Optional[threading.Event], when: float) -> bool:
    """Sleep until ``when``; return whether ``ctx`` was set in the meantime."""
    remaining = max(0.0, when - time.monotonic())
    if ctx is not None:
        return ctx.wait(remaining)
    time.sleep(remaining)
    return False


def wait_for_with_context(
    ctx: Optional[threading.Event],
    condition: Callable[[Optional[threading.Event], int], bool],
    timeout: float,
    heartbeat_delay: float,
) -> Tuple[int, float, bool]:
    """Like :func:`wait_for`, also stopping when the event ``ctx`` is set.

    ``condition`` receives ``ctx`` and the zero-based iteration number.
    """
    start = time.monotonic()
    iterations = 0
    if ctx is not None and ctx.is_set():
        return iterations, time.monotonic() - start, False

    deadline = start + timeout
    next_tick = start + heartbeat_delay
    while True:
        timed_out = deadline <= next_tick
        if _sleep_until(ctx, deadline if timed_out else next_tick) or timed_out:
            return iterations, time.monotonic() - start, False
        iterations += 1
        if condition(ctx, iterations - 1):
            return iterations, time.monotonic() - start, True
        next_tick = max(next_tick + heartbeat_delay, time.monotonic())