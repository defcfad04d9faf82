#!/usr/bin/env python3
"""
Headless touchscreen stroke monitor.
Captures gestures from the touchscreen without opening a window and
prints every stroke as it is finished.
"""

import time

from gesture_overlay.core.events import PointerAction
from gesture_overlay.core.gesture_pad import GesturePad
from gesture_overlay.core.scheduler import RunLoop
from gesture_overlay.device.device_manager import DeviceManager
from gesture_overlay.device.touch_source import TouchPointerSource
from gesture_overlay.utils.logger import GestureLogger

# Strokes further apart than this start a new gesture
GESTURE_TIMEOUT_MS = 1500


class StrokeMonitor:
    def __init__(self):
        self.run_loop = RunLoop()
        self.pad = GesturePad(self.run_loop)
        self.logger = GestureLogger(debug_file=None)
        self.pad.add_listener(self.logger)
        self.device_manager = DeviceManager()
        self.source = None
        self.running = False
    
    def start(self):
        """Start monitoring touchscreen strokes."""
        if not self.device_manager.find_device():
            print("❌ No touchscreen found")
            return False
        
        info = self.device_manager.get_device_info()
        width = info['x_range'][1] - info['x_range'][0] + 1
        height = info['y_range'][1] - info['y_range'][0] + 1
        self.source = TouchPointerSource(
            self.device_manager, self.run_loop, self._on_pointer_event, (width, height)
        )
        self.source.start()
        
        self.running = True
        print("🎯 Touchscreen Stroke Monitor Started")
        print("=" * 50)
        print("📱 Draw on your screen; pause to start a new gesture")
        print("🖱️  Press Ctrl+C to stop")
        print()
        
        try:
            while self.running:
                self.run_loop.run_pending()
                time.sleep(0.01)
        except KeyboardInterrupt:
            self.stop()
        
        return True
    
    def stop(self):
        """Stop monitoring."""
        self.running = False
        if self.source:
            self.source.stop()
        print("\n✅ Monitoring stopped")
    
    def _on_pointer_event(self, event):
        # A stroke that starts long after the previous one opens a new gesture
        if event.action is PointerAction.DOWN:
            self.run_loop.cancel(self._end_gesture)
        self.pad.on_pointer_event(event)
        if event.action is PointerAction.UP:
            self.run_loop.schedule(self._end_gesture, GESTURE_TIMEOUT_MS)
    
    def _end_gesture(self):
        gesture = self.pad.get_current_gesture()
        if gesture is not None:
            print(f"🏁 Gesture done: {gesture.stroke_count} stroke(s), {int(gesture.length)}px of ink")
        self.pad.clear(False)


def main():
    """Main entry point."""
    monitor = StrokeMonitor()
    monitor.start()

if __name__ == "__main__":
    main()
