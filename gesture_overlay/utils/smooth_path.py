"""
Quadratic smoothing for live ink.

Raw pointer samples are turned into a chain of quadratic Bezier segments:
each accepted sample becomes the control point of the next segment, which
ends halfway between the previous anchor and the new sample. Samples that
move less than the tolerance on both axes are coalesced, which both keeps
the path small and rejects jitter.
"""

from typing import List, Tuple

import numpy as np

from ..config.settings import GestureConfig
from .gesture_utils import GeometryUtils

MOVE = 'move'
QUAD = 'quad'


class SmoothPath:
    """A renderable path made of move-to and quadratic segments."""
    
    def __init__(self):
        self._segments: List[Tuple[str, Tuple[float, ...]]] = []
    
    def move_to(self, x: float, y: float):
        """Start a new subpath at (x, y)."""
        self._segments.append((MOVE, (float(x), float(y))))
    
    def quad_to(self, cx: float, cy: float, x: float, y: float):
        """Add a quadratic segment with control (cx, cy) ending at (x, y)."""
        if not self._segments:
            # A path without a start point begins at the origin
            self.move_to(0.0, 0.0)
        self._segments.append((QUAD, (float(cx), float(cy), float(x), float(y))))
    
    @property
    def segments(self) -> Tuple[Tuple[str, Tuple[float, ...]], ...]:
        return tuple(self._segments)
    
    @property
    def quad_count(self) -> int:
        return sum(1 for kind, _ in self._segments if kind == QUAD)
    
    @property
    def is_empty(self) -> bool:
        return not self._segments
    
    def polylines(self, steps: int = GestureConfig.CURVE_STEPS) -> List[np.ndarray]:
        """
        Flatten the path into polylines.
        
        Args:
            steps: Number of samples taken along each quadratic segment.
            
        Returns:
            One ``(N, 2)`` float array per subpath.
        """
        steps = max(1, steps)
        t = np.linspace(0.0, 1.0, steps + 1)[1:, np.newaxis]
        
        result = []
        current = None
        for kind, values in self._segments:
            if kind == MOVE:
                if current is not None:
                    result.append(np.vstack(current))
                current = [np.array([values], dtype=float)]
            else:
                p0 = current[-1][-1]
                control = np.array(values[:2])
                end = np.array(values[2:])
                curve = (1 - t) ** 2 * p0 + 2 * (1 - t) * t * control + t ** 2 * end
                current.append(curve)
        
        if current is not None:
            result.append(np.vstack(current))
        return result
    
    def __len__(self):
        return len(self._segments)
    
    def __repr__(self):
        return f"SmoothPath({len(self._segments)} segments, {self.quad_count} quads)"


class PathSmoother:
    """Builds a SmoothPath incrementally from pointer samples."""
    
    def __init__(self, tolerance: float = GestureConfig.TOUCH_TOLERANCE):
        self.tolerance = tolerance
        self.path = None
        self.anchor_x = 0.0
        self.anchor_y = 0.0
    
    def start(self, x: float, y: float) -> SmoothPath:
        """Open a new path anchored at (x, y)."""
        self.anchor_x = x
        self.anchor_y = y
        self.path = SmoothPath()
        self.path.move_to(x, y)
        return self.path
    
    def add(self, x: float, y: float) -> bool:
        """
        Offer a new sample to the path.
        
        Returns:
            True if the path was extended, False if the sample was coalesced.
        """
        if self.path is None:
            return False
        
        dx = abs(x - self.anchor_x)
        dy = abs(y - self.anchor_y)
        if dx < self.tolerance and dy < self.tolerance:
            return False
        
        mid_x, mid_y = GeometryUtils.midpoint(self.anchor_x, self.anchor_y, x, y)
        self.path.quad_to(self.anchor_x, self.anchor_y, mid_x, mid_y)
        self.anchor_x = x
        self.anchor_y = y
        return True
    
    def finish(self) -> SmoothPath:
        """Detach and return the current path."""
        path = self.path
        self.path = None
        return path


def build_smoothed_path(points, tolerance: float = GestureConfig.TOUCH_TOLERANCE) -> SmoothPath:
    """Rebuild the smoothed path for a finished point sequence."""
    smoother = PathSmoother(tolerance)
    if not points:
        return SmoothPath()
    
    first = points[0]
    smoother.start(first.x, first.y)
    for point in points[1:]:
        smoother.add(point.x, point.y)
    return smoother.finish()
