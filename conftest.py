"""Shared fixtures: a controllable clock, a run loop and a sized gesture pad."""

import pytest

from gesture_overlay.core.gesture_pad import GesturePad
from gesture_overlay.core.scheduler import RunLoop


class FakeClock:
    """Millisecond clock that only moves when told to."""
    
    def __init__(self, now=0):
        self.now = now
    
    def __call__(self):
        return self.now
    
    def advance(self, ms):
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def run_loop(clock):
    return RunLoop(clock=clock)


@pytest.fixture
def pad(run_loop):
    pad = GesturePad(run_loop)
    pad.on_size_changed(200, 120)
    return pad


@pytest.fixture
def tick(clock, run_loop):
    """Advance the clock ``times`` times by ``ms`` and drain the loop after each."""
    def advance(ms=100, times=1):
        executed = 0
        for _ in range(times):
            clock.advance(ms)
            executed += run_loop.run_pending()
        return executed
    return advance
