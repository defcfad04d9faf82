"""
Touchscreen pointer source.

Reads raw evdev events on a background thread and turns the primary
contact into PointerEvents. Events are never delivered from the reader
thread itself: they are posted to the RunLoop so that the gesture pad
only ever runs on the loop's thread. Additional contacts are ignored.
"""

import logging
import threading
from typing import Callable, Optional, Tuple

from evdev import ecodes

from ..core.events import PointerAction, PointerEvent

logger = logging.getLogger(__name__)

PRIMARY_SLOT = 0


class TouchPointerSource:
    """Feeds single-pointer events from a touchscreen into a run loop."""
    
    def __init__(self, device_manager, run_loop, handler: Callable[[PointerEvent], bool],
                 surface_size: Tuple[int, int]):
        self.device_manager = device_manager
        self.run_loop = run_loop
        self.handler = handler
        self.surface_size = surface_size
        
        self.running = False
        self.thread = None
        
        # Primary contact state
        self.current_slot = 0
        self.touching = False
        self.raw_x = 0
        self.raw_y = 0
        self._pending_action: Optional[PointerAction] = None
        self._moved = False
    
    def start(self) -> bool:
        """Start reading the touchscreen."""
        device = self.device_manager.device or self.device_manager.find_device()
        if not device:
            return False
        
        self.running = True
        self.thread = threading.Thread(target=self._event_loop)
        self.thread.daemon = True
        self.thread.start()
        return True
    
    def stop(self):
        """Stop the reader thread."""
        self.running = False
        if self.thread:
            self.thread.join(timeout=1)
    
    def _event_loop(self):
        """Main event reading loop."""
        try:
            event_batch = []
            for event in self.device_manager.device.read_loop():
                if not self.running:
                    break
                
                event_batch.append(event)
                
                if event.type == ecodes.EV_SYN and event.code == ecodes.SYN_REPORT:
                    pointer_event = self.process_event_batch(event_batch)
                    if pointer_event is not None:
                        self.run_loop.post(self.handler, pointer_event)
                    event_batch = []
        
        except OSError as e:
            logger.error(f"Error in touchscreen event loop: {e}")
    
    def process_event_batch(self, event_batch) -> Optional[PointerEvent]:
        """Translate one SYN_REPORT batch into at most one pointer event."""
        self._pending_action = None
        self._moved = False
        
        for ev in event_batch:
            if ev.type == ecodes.EV_ABS:
                self._handle_abs_event(ev)
            elif ev.type == ecodes.EV_KEY and ev.code == ecodes.BTN_TOUCH \
                    and not self.device_manager.multitouch:
                self._set_touching(ev.value == 1)
        
        action = self._pending_action
        if action is None and self.touching and self._moved:
            action = PointerAction.MOVE
        if action is None:
            return None
        
        x, y = self._scale(self.raw_x, self.raw_y)
        timestamp = int(event_batch[-1].timestamp() * 1000)
        return PointerEvent(action, x, y, timestamp)
    
    def _handle_abs_event(self, ev):
        """Handle absolute coordinate events."""
        if ev.code == ecodes.ABS_MT_SLOT:
            self.current_slot = ev.value
            return
        
        if self.device_manager.multitouch:
            if self.current_slot != PRIMARY_SLOT:
                return
            if ev.code == ecodes.ABS_MT_TRACKING_ID:
                self._set_touching(ev.value != -1)
            elif ev.code == ecodes.ABS_MT_POSITION_X:
                self.raw_x = ev.value
                self._moved = True
            elif ev.code == ecodes.ABS_MT_POSITION_Y:
                self.raw_y = ev.value
                self._moved = True
        else:
            if ev.code == ecodes.ABS_X:
                self.raw_x = ev.value
                self._moved = True
            elif ev.code == ecodes.ABS_Y:
                self.raw_y = ev.value
                self._moved = True
    
    def _set_touching(self, touching: bool):
        if touching and not self.touching:
            self._pending_action = PointerAction.DOWN
        elif not touching and self.touching:
            self._pending_action = PointerAction.UP
        self.touching = touching
    
    def _scale(self, raw_x: int, raw_y: int) -> Tuple[float, float]:
        """Map device coordinates onto the pad surface."""
        width, height = self.surface_size
        x_min, x_max = self.device_manager.x_range
        y_min, y_max = self.device_manager.y_range
        x = (raw_x - x_min) / max(1, x_max - x_min) * width
        y = (raw_y - y_min) / max(1, y_max - y_min) * height
        return x, y
