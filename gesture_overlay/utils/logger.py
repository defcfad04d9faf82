"""
Logging utilities for gesture pad events.
"""

import datetime
from typing import Optional

from ..core.listeners import GestureListener


class GestureLogger(GestureListener):
    """Prints gesture pad activity and mirrors every event to a debug file."""
    
    def __init__(self, debug_file: Optional[str] = 'gesture_debug.log', verbose: bool = False):
        self.verbose = verbose
        self.debug_file = None
        if debug_file:
            try:
                self.debug_file = open(debug_file, 'w')
                self.debug_file.write(f"Debug logging started at {datetime.datetime.now()}\n")
                self.debug_file.flush()
            except OSError as e:
                print(f"Warning: Could not open debug file: {e}")
    
    @staticmethod
    def _timestamp() -> str:
        return datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]
    
    def _debug(self, message: str):
        if self.debug_file:
            self.debug_file.write(f"[{self._timestamp()}] {message}\n")
            self.debug_file.flush()
    
    def on_start_gesture(self, pad, event):
        gesture = pad.get_current_gesture()
        stroke_index = gesture.stroke_count + 1 if gesture is not None else 1
        print(f"[{self._timestamp()}] ✍️ STROKE {stroke_index} START at ({int(event.x)}, {int(event.y)})")
        self._debug(f"start {event}")
    
    def on_gesture(self, pad, event):
        if self.verbose:
            print(f"[{self._timestamp()}]    move ({int(event.x)}, {int(event.y)})")
        self._debug(f"move {event}")
    
    def on_finish_gesture(self, pad, event):
        gesture = pad.get_current_gesture()
        stroke = gesture.strokes[-1]
        print(f"[{self._timestamp()}] ✅ STROKE {gesture.stroke_count} END: "
              f"{len(stroke)} points, {int(stroke.length)}px, {stroke.duration}ms")
        
        box = gesture.bounding_box
        print(f"   Gesture: {gesture.stroke_count} stroke(s), "
              f"bounds ({int(box[0])}, {int(box[1])})→({int(box[2])}, {int(box[3])})")
        self._debug(f"finish {event} gesture={gesture}")
    
    def log_clear(self, fade_out: bool):
        """Log a pad clear request."""
        if fade_out:
            print(f"[{self._timestamp()}] 🌫️ FADE OUT")
        else:
            print(f"[{self._timestamp()}] 🧹 CLEAR")
        self._debug(f"clear fade_out={fade_out}")
    
    def log_color(self, color):
        """Log a gesture color change."""
        print(f"[{self._timestamp()}] 🎨 COLOR {tuple(color)}")
        self._debug(f"color {tuple(color)}")
    
    def close(self):
        """Close the debug file."""
        if self.debug_file:
            self.debug_file.close()
            self.debug_file = None
