"""Timer seam for the session.

The session only needs Tk's ``after``/``after_cancel`` pair, so a ``tk.Tk``
root serves directly as the scheduler in the GUI. ``ManualScheduler`` runs the
same callbacks against a virtual clock for headless play and tests.
"""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Any, Callable, Protocol


class Scheduler(Protocol):
    """Anything that can run a callback after a delay in milliseconds."""

    def after(self, ms: int, func: Callable[[], Any]) -> Any:
        ...

    def after_cancel(self, id: Any) -> None:
        ...


@dataclass(order=True)
class _Timer:
    due: int
    seq: int
    func: Callable[[], Any] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)


class ManualScheduler:
    """Single-threaded scheduler driven by explicit :meth:`advance` calls.

    Timers due at the same instant fire in the order they were scheduled.
    Callbacks may schedule or cancel further timers.
    """

    def __init__(self) -> None:
        self.now = 0
        self._queue: list[_Timer] = []
        self._seq = itertools.count()
        self._live: dict[int, _Timer] = {}

    def after(self, ms: int, func: Callable[[], Any]) -> int:
        if ms < 0:
            raise ValueError(f"delay must be non-negative, got {ms}")
        timer = _Timer(self.now + ms, next(self._seq), func)
        heapq.heappush(self._queue, timer)
        self._live[timer.seq] = timer
        return timer.seq

    def after_cancel(self, id: int) -> None:
        timer = self._live.pop(id, None)
        if timer is not None:
            timer.cancelled = True

    @property
    def pending(self) -> int:
        """Number of timers scheduled and not yet fired or cancelled."""
        return len(self._live)

    def advance(self, ms: int) -> None:
        """Move the clock forward by *ms*, firing every timer that comes due."""
        if ms < 0:
            raise ValueError(f"cannot move the clock backwards ({ms})")
        target = self.now + ms
        while self._queue and self._queue[0].due <= target:
            timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            del self._live[timer.seq]
            self.now = timer.due
            timer.func()
        self.now = target

    def run_until_idle(self, limit: int = 10_000) -> None:
        """Fire timers until none are left, at most *limit* of them."""
        for _ in range(limit):
            live = [t for t in self._queue if not t.cancelled]
            if not live:
                return
            self.advance(min(t.due for t in live) - self.now)
        raise RuntimeError(f"scheduler still busy after {limit} timers")
