"""
Double-buffered ink rendering.

Committed strokes are painted once into a persistent transparent raster
(the ink buffer). Each frame composites that buffer, optionally faded,
with the live path of the stroke still being drawn.
"""

import logging
from typing import Optional

from .canvas import Canvas, StrokeStyle

logger = logging.getLogger(__name__)


class RenderBuffer:
    """Owns the persistent ink buffer and composites frames."""
    
    def __init__(self):
        self.canvas: Optional[Canvas] = None
    
    @property
    def allocated(self) -> bool:
        return self.canvas is not None
    
    def resize(self, width: int, height: int, old_width: int = 0, old_height: int = 0) -> bool:
        """
        Reallocate the ink buffer for a new drawable area.
        
        The new buffer is transparent and never smaller than the old area on
        either axis. Previous content is not preserved.
        
        Returns:
            False if the size was rejected and the current buffer kept.
        """
        if width <= 0 or height <= 0:
            logger.debug(f"Ignoring resize to {width}x{height}")
            return False
        
        self.canvas = Canvas.allocate(max(width, old_width), max(height, old_height))
        logger.debug(f"Ink buffer allocated: {self.canvas.size[0]}x{self.canvas.size[1]}")
        return True
    
    def clear(self):
        """Erase the ink buffer to transparent."""
        if self.canvas is not None:
            self.canvas.clear()
    
    def commit(self, path, style: StrokeStyle):
        """Paint a finished live path permanently into the buffer."""
        if self.canvas is not None and path is not None:
            self.canvas.draw_path(path, style)
    
    def draw_gesture(self, gesture, style: StrokeStyle):
        """Paint every stroke of ``gesture`` into the buffer."""
        if self.canvas is not None and gesture is not None:
            gesture.draw(self.canvas, style)
    
    def redraw_gesture(self, gesture, style: StrokeStyle):
        """Clear the buffer and paint ``gesture`` from scratch."""
        self.clear()
        self.draw_gesture(gesture, style)
    
    def compose(self, target: Canvas, live_path, style: StrokeStyle, opacity: float = 1.0):
        """
        Render one frame onto ``target``.
        
        Args:
            target: Destination canvas.
            live_path: Path of the stroke in progress, or None.
            style: Style used for the live path.
            opacity: Multiplier applied to the ink buffer only.
        """
        if self.canvas is not None:
            target.draw_raster(self.canvas, opacity)
        if live_path is not None:
            target.draw_path(live_path, style)
