"""
Gesture data model: points, strokes and multi-stroke gestures.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from ..config.settings import GestureConfig
from ..utils.gesture_utils import GeometryUtils, PathUtils
from ..utils.smooth_path import SmoothPath, build_smoothed_path


@dataclass(frozen=True)
class GesturePoint:
    """A single pointer sample. Timestamp is monotonic event time in ms."""
    x: float
    y: float
    timestamp: int
    
    def __repr__(self):
        return f"GesturePoint({self.x:.1f}, {self.y:.1f}, t={self.timestamp})"


class GestureStroke:
    """One continuous pointer-down-to-up motion."""
    
    def __init__(self, points: Iterable[GesturePoint]):
        self._points = tuple(points)
        if not self._points:
            raise ValueError("A gesture stroke needs at least one point")
    
    @property
    def points(self) -> Tuple[GesturePoint, ...]:
        return self._points
    
    @property
    def bounding_box(self) -> Tuple[float, float, float, float]:
        return PathUtils.get_path_bounds(self._points)
    
    @property
    def length(self) -> float:
        return GeometryUtils.calculate_path_length(self._points)
    
    @property
    def duration(self) -> int:
        return PathUtils.calculate_path_duration(self._points)
    
    def to_path(self, tolerance: float = GestureConfig.TOUCH_TOLERANCE) -> SmoothPath:
        """Build the smoothed path used to render this stroke."""
        return build_smoothed_path(self._points, tolerance)
    
    def __len__(self):
        return len(self._points)
    
    def __iter__(self):
        return iter(self._points)
    
    def __repr__(self):
        return f"GestureStroke({len(self._points)} points)"


class Gesture:
    """
    An ordered collection of strokes treated as a single user input.
    
    Strokes can only be appended; readers may inspect the gesture at any
    time, including while a new stroke is being captured.
    """
    
    def __init__(self, strokes: Optional[Iterable[GestureStroke]] = None):
        self._strokes: List[GestureStroke] = list(strokes or [])
    
    def add_stroke(self, stroke: GestureStroke):
        """Append a finished stroke."""
        self._strokes.append(stroke)
    
    @property
    def strokes(self) -> Tuple[GestureStroke, ...]:
        return tuple(self._strokes)
    
    @property
    def stroke_count(self) -> int:
        return len(self._strokes)
    
    @property
    def bounding_box(self) -> Optional[Tuple[float, float, float, float]]:
        return PathUtils.union_bounds([s.bounding_box for s in self._strokes])
    
    @property
    def length(self) -> float:
        return sum(s.length for s in self._strokes)
    
    def draw(self, canvas, style):
        """Render every stroke onto ``canvas`` with ``style``."""
        for stroke in self._strokes:
            canvas.draw_path(stroke.to_path(style.smoothing), style)
    
    def __repr__(self):
        return f"Gesture({len(self._strokes)} strokes)"
