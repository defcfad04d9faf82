"""
Cooperative single-threaded run loop.

Pointer events and timed callbacks are executed one after another on the
thread that calls ``run_pending``. Other threads never touch pad state;
they hand work over with ``post``.
"""

import heapq
import itertools
import queue
import time
from typing import Callable, Optional


def monotonic_ms() -> int:
    """Default clock: monotonic time in milliseconds."""
    return int(time.monotonic() * 1000)


class RunLoop:
    """Message queue plus delayed callbacks, drained by ``run_pending``."""
    
    def __init__(self, clock: Optional[Callable[[], int]] = None):
        self.clock = clock or monotonic_ms
        self._posted = queue.Queue()
        self._timers = []  # heap of (due_ms, seq, callback)
        self._seq = itertools.count()
    
    def post(self, callback: Callable, *args):
        """Queue ``callback(*args)`` to run on the next drain. Thread-safe."""
        self._posted.put((callback, args))
    
    def schedule(self, callback: Callable[[], None], delay_ms: int):
        """Run ``callback`` once, no earlier than ``delay_ms`` from now."""
        due = self.clock() + max(0, delay_ms)
        heapq.heappush(self._timers, (due, next(self._seq), callback))
    
    def cancel(self, callback: Callable[[], None]):
        """Remove every pending run of ``callback``. Cancelling nothing is a no-op."""
        remaining = [entry for entry in self._timers if entry[2] != callback]
        if len(remaining) != len(self._timers):
            heapq.heapify(remaining)
            self._timers = remaining
    
    def is_scheduled(self, callback: Callable[[], None]) -> bool:
        return any(entry[2] == callback for entry in self._timers)
    
    @property
    def pending_timers(self) -> int:
        return len(self._timers)
    
    def next_due(self) -> Optional[int]:
        """Due time of the earliest timer, or None."""
        return self._timers[0][0] if self._timers else None
    
    def run_pending(self) -> int:
        """
        Run posted work in arrival order, then every timer that is due.
        
        Returns:
            Number of callbacks executed.
        """
        executed = 0
        
        while True:
            try:
                callback, args = self._posted.get_nowait()
            except queue.Empty:
                break
            callback(*args)
            executed += 1
        
        # Timers scheduled by the callbacks below wait for the next drain
        now = self.clock()
        limit = next(self._seq)
        while self._timers and self._timers[0][0] <= now and self._timers[0][1] < limit:
            _, _, callback = heapq.heappop(self._timers)
            callback()
            executed += 1
        
        return executed
