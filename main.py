#!/usr/bin/env python3
"""
Gesture Overlay - Main Entry Point
Draw gestures with the mouse (or a touchscreen when one is found).

Keys:
    c  fade the gesture out
    x  clear immediately
    k  cycle the gesture color
    r  show the last finished gesture again
"""

import logging

import pygame

from gesture_overlay.config.settings import GestureConfig
from gesture_overlay.core.canvas import Canvas
from gesture_overlay.core.events import PointerEvent
from gesture_overlay.core.gesture_pad import GesturePad
from gesture_overlay.core.listeners import GestureListener
from gesture_overlay.core.scheduler import RunLoop
from gesture_overlay.utils.logger import GestureLogger


class GestureOverlayApp(GestureListener):
    """pygame window hosting a gesture pad.
    
    Every input, keys included, goes through the run loop so that it is
    handled in arrival order relative to pointer events.
    """
    
    def __init__(self):
        pygame.init()
        self.screen = pygame.display.set_mode(GestureConfig.WINDOW_SIZE)
        pygame.display.set_caption("Gesture Overlay")
        
        self.run_loop = RunLoop(clock=pygame.time.get_ticks)
        self.pad = GesturePad(self.run_loop)
        self.logger = GestureLogger(GestureConfig.DEBUG_LOG_FILE)
        self.pad.add_listener(self.logger)
        self.pad.add_listener(self)
        
        width, height = self.screen.get_size()
        self.pad.on_size_changed(width, height)
        
        self.color_index = 0
        self.last_gesture = None
        self.mouse_down = False
        self.touch_source = None
    
    def start_touchscreen(self):
        """Attach a touchscreen if evdev can find one."""
        try:
            from gesture_overlay.device.device_manager import DeviceManager
            from gesture_overlay.device.touch_source import TouchPointerSource
        except ImportError as e:
            logging.info(f"Touchscreen input unavailable: {e}")
            return
        
        source = TouchPointerSource(
            DeviceManager(), self.run_loop, self.pad.on_pointer_event, self.screen.get_size()
        )
        if source.start():
            self.touch_source = source
    
    def run(self):
        """Run the event loop."""
        clock = pygame.time.Clock()
        target = Canvas(self.screen)
        
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                self.handle_event(event)
            
            self.run_loop.run_pending()
            
            self.screen.fill(GestureConfig.BACKGROUND_COLOR)
            self.pad.on_draw(target)
            pygame.display.flip()
            clock.tick(GestureConfig.FRAME_RATE)
    
    def handle_event(self, event):
        now = pygame.time.get_ticks()
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.mouse_down = True
            self.run_loop.post(self.pad.on_pointer_event, PointerEvent.down(*event.pos, now))
        elif event.type == pygame.MOUSEMOTION and self.mouse_down:
            self.run_loop.post(self.pad.on_pointer_event, PointerEvent.move(*event.pos, now))
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1 and self.mouse_down:
            self.mouse_down = False
            self.run_loop.post(self.pad.on_pointer_event, PointerEvent.up(*event.pos, now))
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_c:
                self.run_loop.post(self.clear, True)
            elif event.key == pygame.K_x:
                self.run_loop.post(self.clear, False)
            elif event.key == pygame.K_k:
                self.run_loop.post(self.cycle_color)
            elif event.key == pygame.K_r:
                self.run_loop.post(self.replay)
    
    def clear(self, fade_out):
        self.logger.log_clear(fade_out)
        self.pad.clear(fade_out)
    
    def cycle_color(self):
        self.color_index = (self.color_index + 1) % len(GestureConfig.GESTURE_COLORS)
        color = GestureConfig.GESTURE_COLORS[self.color_index]
        self.logger.log_color(color)
        self.pad.set_gesture_color(color)
    
    def replay(self):
        """Show the last finished gesture again."""
        if self.last_gesture is not None:
            self.pad.set_current_gesture(self.last_gesture)
    
    def on_finish_gesture(self, pad, event):
        # Mouse and touchscreen strokes both end up here
        self.last_gesture = pad.get_current_gesture()
    
    def stop(self):
        if self.touch_source:
            self.touch_source.stop()
        self.logger.close()
        pygame.quit()


def main():
    """Main entry point for the gesture overlay."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    app = GestureOverlayApp()
    app.start_touchscreen()
    
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n👋 Stopping...")
    finally:
        app.stop()

if __name__ == "__main__":
    main()
