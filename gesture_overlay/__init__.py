"""
Gesture Overlay Package
A transparent gesture-capture pad with live ink and fade-out rendering.
"""

from .core.gesture_pad import GesturePad
from .core.events import PointerAction, PointerEvent
from .core.listeners import GestureListener
from .core.scheduler import RunLoop
from .gestures.gesture import Gesture, GesturePoint, GestureStroke

__version__ = "1.0.0"
__all__ = [
    "GesturePad",
    "PointerAction",
    "PointerEvent",
    "GestureListener",
    "RunLoop",
    "Gesture",
    "GesturePoint",
    "GestureStroke"
]
