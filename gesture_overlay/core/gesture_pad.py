"""
Gesture pad: a transparent surface that captures single-pointer gestures.

The pad turns pointer events into strokes, accumulates strokes into the
current gesture, renders live ink and can fade its content out. It is
meant to sit on top of other content and be driven by a RunLoop.
"""

import logging
from typing import Optional, Tuple

from ..gestures.gesture import Gesture, GesturePoint, GestureStroke
from ..utils.smooth_path import PathSmoother
from .canvas import Canvas, StrokeStyle
from .events import PointerAction, PointerEvent
from .fade_animator import FadeAnimator
from .listeners import GestureListener, ListenerRegistry
from .render_buffer import RenderBuffer

logger = logging.getLogger(__name__)


class GesturePad:
    """Captures pointer strokes into a Gesture and renders them."""
    
    def __init__(self, scheduler, style: Optional[StrokeStyle] = None, on_invalidate=None):
        """
        Args:
            scheduler: Run loop used for the fade animation.
            style: Initial ink style, defaults to the configured gesture style.
            on_invalidate: Optional callable invoked whenever a redraw is needed.
        """
        self.scheduler = scheduler
        self.style = style or StrokeStyle()
        self.on_invalidate = on_invalidate
        self.enabled = True
        self.needs_redraw = False
        
        self.buffer = RenderBuffer()
        self.listeners = ListenerRegistry()
        self.fader = FadeAnimator(
            scheduler,
            on_step=self.invalidate,
            on_complete=self._on_fade_complete
        )
        
        # Capture session
        self._smoother = PathSmoother(self.style.smoothing)
        self._path = None
        self._point_buffer = None
        self._fade_after_stroke = False
        
        self._current_gesture: Optional[Gesture] = None
    
    # Public contract
    
    def add_listener(self, listener: GestureListener):
        self.listeners.add(listener)
    
    def remove_listener(self, listener: GestureListener):
        self.listeners.remove(listener)
    
    def get_current_stroke(self) -> Optional[Tuple[GesturePoint, ...]]:
        """Points of the stroke being captured, or None when idle."""
        if self._point_buffer is None:
            return None
        return tuple(self._point_buffer)
    
    def get_current_gesture(self) -> Optional[Gesture]:
        return self._current_gesture
    
    @property
    def live_path(self):
        return self._path
    
    @property
    def is_capturing(self) -> bool:
        return self._point_buffer is not None
    
    @property
    def is_fading(self) -> bool:
        return self.fader.active
    
    @property
    def fade_alpha(self) -> float:
        return self.fader.alpha
    
    def set_gesture_color(self, color):
        """Change the ink color; the displayed gesture is repainted in it."""
        self.style = self.style.with_color(color)
        if self._current_gesture is not None and not self.is_capturing:
            self.buffer.redraw_gesture(self._current_gesture, self.style)
            self.invalidate()
    
    def set_current_gesture(self, gesture: Optional[Gesture]):
        """Display ``gesture`` instead of whatever is shown. None clears the pad."""
        if self._current_gesture is not None:
            self.clear(False)
        
        self._current_gesture = gesture
        
        if gesture is not None and self.buffer.allocated:
            self.buffer.draw_gesture(gesture, self.style)
            self.invalidate()
    
    def clear(self, fade_out: bool):
        """
        Clear the pad.
        
        Args:
            fade_out: Fade the ink out gradually instead of erasing it at once.
                A fade requested while a stroke is open starts once that
                stroke has been committed.
        """
        if fade_out:
            if self.is_capturing:
                self._fade_after_stroke = True
            else:
                self.fader.start()
            return
        
        self._fade_after_stroke = False
        self.fader.cancel()
        self._discard_live_path()
        self._current_gesture = None
        if self.buffer.allocated:
            self.buffer.clear()
            self.invalidate()
    
    def on_pointer_event(self, event: PointerEvent) -> bool:
        """Process one pointer event. Always reports the event as handled."""
        if not self.enabled:
            return True
        
        if event.action is PointerAction.DOWN:
            self.on_pointer_down(event)
        elif event.action is PointerAction.MOVE:
            self.on_pointer_move(event)
        elif event.action is PointerAction.UP:
            self.on_pointer_up(event)
        self.invalidate()
        return True
    
    # Surface lifecycle
    
    def on_size_changed(self, width: int, height: int, old_width: int = 0, old_height: int = 0) -> bool:
        """Reallocate the ink buffer and repaint the current gesture into it."""
        if not self.buffer.resize(width, height, old_width, old_height):
            return False
        if self._current_gesture is not None:
            self.buffer.draw_gesture(self._current_gesture, self.style)
        self.invalidate()
        return True
    
    def on_draw(self, target: Canvas):
        """Render the pad onto ``target``."""
        self.buffer.compose(target, self._path, self.style, self.fader.opacity)
        self.needs_redraw = False
    
    def invalidate(self):
        """Request a redraw."""
        self.needs_redraw = True
        if self.on_invalidate:
            self.on_invalidate()
    
    # Capture state machine
    
    def on_pointer_down(self, event: PointerEvent):
        if self.fader.active:
            self.fader.cancel()
            self.buffer.clear()
            self._current_gesture = None
        
        x, y = event.x, event.y
        self._smoother.tolerance = self.style.smoothing
        self._smoother.anchor_x = x
        self._smoother.anchor_y = y
        
        self.listeners.notify_start(self, event)
        
        if self._current_gesture is None:
            self._current_gesture = Gesture()
        
        self._point_buffer = [GesturePoint(x, y, event.timestamp)]
        self._path = self._smoother.start(x, y)
    
    def on_pointer_move(self, event: PointerEvent):
        if self._point_buffer is None:
            logger.debug("Pointer move without an open stroke ignored")
            return
        
        self._smoother.add(event.x, event.y)
        self._point_buffer.append(GesturePoint(event.x, event.y, event.timestamp))
        
        self.listeners.notify_progress(self, event)
    
    def on_pointer_up(self, event: PointerEvent):
        if self._point_buffer is None:
            logger.debug("Pointer up without an open stroke ignored")
            return
        
        stroke = GestureStroke(self._point_buffer)
        if self._current_gesture is None:
            # The pad was cleared while this stroke was open
            self._current_gesture = Gesture()
        self._current_gesture.add_stroke(stroke)
        self._point_buffer = None
        
        self.buffer.commit(self._smoother.finish(), self.style)
        self._path = None
        
        if self._fade_after_stroke:
            self._fade_after_stroke = False
            self.fader.start()
        
        logger.debug(f"Stroke committed: {len(stroke)} points, "
                     f"{self._current_gesture.stroke_count} strokes in gesture")
        
        self.listeners.notify_finish(self, event)
    
    def _discard_live_path(self):
        self._smoother.finish()
        self._path = None
    
    def _on_fade_complete(self):
        self._discard_live_path()
        self._current_gesture = None
        self.buffer.clear()
