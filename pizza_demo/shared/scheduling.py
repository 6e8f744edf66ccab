"""
Scheduler abstraction for delayed callbacks.

The progression timer only needs ``call_later(delay, callback) -> handle``.
AsyncioScheduler hands this to the running event loop; ManualScheduler keeps
its own virtual clock so tests (and simulations) can move time forward
without sleeping.
"""

import asyncio
import heapq
import itertools
from typing import Callable, Protocol


class ScheduledHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(
        self, delay: float, callback: Callable[[], None]
    ) -> ScheduledHandle: ...


class AsyncioScheduler:
    """Schedules on the running event loop (must be called from a coroutine)."""

    def call_later(
        self, delay: float, callback: Callable[[], None]
    ) -> asyncio.TimerHandle:
        return asyncio.get_running_loop().call_later(delay, callback)


class ManualHandle:
    def __init__(self) -> None:
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Virtual-time scheduler. Callbacks run only inside ``advance``."""

    def __init__(self) -> None:
        self.now = 0.0
        self._queue: list[tuple[float, int, Callable[[], None], ManualHandle]] = []
        self._seq = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualHandle:
        handle = ManualHandle()
        heapq.heappush(
            self._queue, (self.now + delay, next(self._seq), callback, handle)
        )
        return handle

    def advance(self, seconds: float) -> int:
        """Move the clock forward, firing due callbacks in due-time order."""
        target = self.now + seconds
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, callback, handle = heapq.heappop(self._queue)
            self.now = due
            if handle.cancelled:
                continue
            callback()
            fired += 1
        self.now = target
        return fired

    @property
    def pending(self) -> int:
        return sum(1 for entry in self._queue if not entry[3].cancelled)
