"""
Gesture listener registry.

Listeners are called synchronously while the pad processes an event. An
exception raised by a listener is not caught: it propagates to whoever
delivered the pointer event and the rest of that event is not processed.
"""

from typing import List, Tuple


class GestureListener:
    """Base class for objects observing a gesture pad. All hooks are optional."""
    
    def on_start_gesture(self, pad, event):
        """Called on pointer down, before the new stroke is set up."""
    
    def on_gesture(self, pad, event):
        """Called for every pointer move of an open stroke."""
    
    def on_finish_gesture(self, pad, event):
        """Called on pointer up, after the stroke was committed."""


class ListenerRegistry:
    """Ordered listener list. Duplicates are kept and called once per registration."""
    
    def __init__(self):
        self._listeners: List[GestureListener] = []
    
    def add(self, listener: GestureListener):
        self._listeners.append(listener)
    
    def remove(self, listener: GestureListener):
        """Remove the first registration of ``listener``; unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)
    
    def snapshot(self) -> Tuple[GestureListener, ...]:
        return tuple(self._listeners)
    
    def notify_start(self, pad, event):
        for listener in self.snapshot():
            listener.on_start_gesture(pad, event)
    
    def notify_progress(self, pad, event):
        for listener in self.snapshot():
            listener.on_gesture(pad, event)
    
    def notify_finish(self, pad, event):
        for listener in self.snapshot():
            listener.on_finish_gesture(pad, event)
    
    def __len__(self):
        return len(self._listeners)
