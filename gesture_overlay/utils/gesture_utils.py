"""
Shared geometry utilities for gesture points and strokes.

Works on any sequence of objects exposing ``x``, ``y`` and ``timestamp``
attributes, which covers GesturePoint as well as raw pointer events.
"""

import math
from typing import Optional, Sequence, Tuple


class GeometryUtils:
    """Utility class for geometric calculations."""
    
    @staticmethod
    def calculate_distance(p1, p2) -> float:
        """Calculate Euclidean distance between two points."""
        return math.sqrt((p1.x - p2.x) ** 2 + (p1.y - p2.y) ** 2)
    
    @staticmethod
    def calculate_path_length(points: Sequence) -> float:
        """Calculate total polyline length."""
        if len(points) < 2:
            return 0.0
        
        length = 0.0
        for i in range(1, len(points)):
            length += GeometryUtils.calculate_distance(points[i-1], points[i])
        return length
    
    @staticmethod
    def midpoint(x1: float, y1: float, x2: float, y2: float) -> Tuple[float, float]:
        """Midpoint of the segment (x1, y1)-(x2, y2)."""
        return (x1 + x2) / 2, (y1 + y2) / 2


class PathUtils:
    """Utility class for point sequence processing."""
    
    @staticmethod
    def get_path_bounds(points: Sequence) -> Optional[Tuple[float, float, float, float]]:
        """Get bounding box of a path as (min_x, min_y, max_x, max_y)."""
        if not points:
            return None
        
        min_x = min(p.x for p in points)
        max_x = max(p.x for p in points)
        min_y = min(p.y for p in points)
        max_y = max(p.y for p in points)
        
        return min_x, min_y, max_x, max_y
    
    @staticmethod
    def union_bounds(boxes: Sequence[Tuple[float, float, float, float]]) -> Optional[Tuple[float, float, float, float]]:
        """Smallest box containing every box in ``boxes``."""
        if not boxes:
            return None
        return (
            min(b[0] for b in boxes),
            min(b[1] for b in boxes),
            max(b[2] for b in boxes),
            max(b[3] for b in boxes)
        )
    
    @staticmethod
    def calculate_path_duration(points: Sequence) -> int:
        """Calculate total duration of a path."""
        if len(points) < 2:
            return 0
        return points[-1].timestamp - points[0].timestamp
