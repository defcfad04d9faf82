"""Tests for translating evdev touchscreen batches into pointer events."""

import pytest

evdev = pytest.importorskip("evdev")
from evdev import ecodes

from gesture_overlay.core.events import PointerAction
from gesture_overlay.device.touch_source import TouchPointerSource


class FakeDeviceManager:
    def __init__(self, multitouch=True):
        self.device = None
        self.multitouch = multitouch
        self.x_range = (0, 1000)
        self.y_range = (0, 500)


class FakeEvent:
    def __init__(self, type, code, value, sec=1.0):
        self.type = type
        self.code = code
        self.value = value
        self.sec = sec
    
    def timestamp(self):
        return self.sec


def syn(sec=1.0):
    return FakeEvent(ecodes.EV_SYN, ecodes.SYN_REPORT, 0, sec)


def abs_event(code, value):
    return FakeEvent(ecodes.EV_ABS, code, value)


@pytest.fixture
def source(run_loop):
    return TouchPointerSource(FakeDeviceManager(), run_loop, lambda event: True, (200, 100))


def test_multitouch_primary_contact(source):
    down = source.process_event_batch([
        abs_event(ecodes.ABS_MT_SLOT, 0),
        abs_event(ecodes.ABS_MT_TRACKING_ID, 7),
        abs_event(ecodes.ABS_MT_POSITION_X, 500),
        abs_event(ecodes.ABS_MT_POSITION_Y, 250),
        syn(1.5)
    ])
    assert down.action is PointerAction.DOWN
    assert (down.x, down.y) == pytest.approx((100, 50))
    assert down.timestamp == 1500
    
    move = source.process_event_batch([abs_event(ecodes.ABS_MT_POSITION_X, 750), syn(1.6)])
    assert move.action is PointerAction.MOVE
    assert (move.x, move.y) == pytest.approx((150, 50))
    
    up = source.process_event_batch([abs_event(ecodes.ABS_MT_TRACKING_ID, -1), syn(1.7)])
    assert up.action is PointerAction.UP
    assert (up.x, up.y) == pytest.approx((150, 50))


def test_secondary_contacts_are_ignored(source):
    source.process_event_batch([
        abs_event(ecodes.ABS_MT_TRACKING_ID, 1),
        abs_event(ecodes.ABS_MT_POSITION_X, 100),
        abs_event(ecodes.ABS_MT_POSITION_Y, 100),
        syn()
    ])
    
    ignored = source.process_event_batch([
        abs_event(ecodes.ABS_MT_SLOT, 1),
        abs_event(ecodes.ABS_MT_TRACKING_ID, 2),
        abs_event(ecodes.ABS_MT_POSITION_X, 900),
        syn()
    ])
    assert ignored is None
    assert source.raw_x == 100


def test_single_touch_device(run_loop):
    source = TouchPointerSource(FakeDeviceManager(multitouch=False), run_loop, lambda e: True, (200, 100))
    
    down = source.process_event_batch([
        FakeEvent(ecodes.EV_KEY, ecodes.BTN_TOUCH, 1),
        abs_event(ecodes.ABS_X, 1000),
        abs_event(ecodes.ABS_Y, 0),
        syn()
    ])
    assert down.action is PointerAction.DOWN
    assert (down.x, down.y) == pytest.approx((200, 0))
    
    up = source.process_event_batch([FakeEvent(ecodes.EV_KEY, ecodes.BTN_TOUCH, 0), syn()])
    assert up.action is PointerAction.UP


def test_hover_motion_is_not_reported(source):
    assert source.process_event_batch([abs_event(ecodes.ABS_MT_POSITION_X, 10), syn()]) is None
