"""
Drawing surface abstraction over pygame surfaces.
"""

from dataclasses import dataclass, replace
from typing import Tuple

import numpy as np
import pygame

from ..config.settings import GestureConfig

TRANSPARENT = (0, 0, 0, 0)


@dataclass(frozen=True)
class StrokeStyle:
    """Immutable description of how ink is painted."""
    color: Tuple[int, int, int, int] = GestureConfig.DEFAULT_GESTURE_COLOR
    width: int = GestureConfig.STROKE_WIDTH
    round_join: bool = True
    round_cap: bool = True
    antialias: bool = True
    smoothing: float = GestureConfig.TOUCH_TOLERANCE
    
    def __post_init__(self):
        # Accept RGB, RGBA or pygame.Color and always store RGBA
        object.__setattr__(self, 'color', tuple(pygame.Color(self.color)))
    
    def with_color(self, color) -> 'StrokeStyle':
        return replace(self, color=color)


class Canvas:
    """A drawable RGBA raster."""
    
    def __init__(self, surface: pygame.Surface):
        self.surface = surface
    
    @classmethod
    def allocate(cls, width: int, height: int) -> 'Canvas':
        """Create a fully transparent raster of the given size."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid raster size {width}x{height}")
        surface = pygame.Surface((width, height), pygame.SRCALPHA, 32)
        surface.fill(TRANSPARENT)
        return cls(surface)
    
    @property
    def size(self) -> Tuple[int, int]:
        return self.surface.get_size()
    
    def clear(self):
        """Erase the raster to fully transparent."""
        self.surface.fill(TRANSPARENT)
    
    def draw_raster(self, raster: 'Canvas', opacity: float = 1.0):
        """Composite another raster at the origin with a global opacity."""
        if opacity <= 0:
            return
        if opacity >= 1:
            self.surface.blit(raster.surface, (0, 0))
            return
        faded = raster.surface.copy()
        faded.set_alpha(int(255 * opacity))
        self.surface.blit(faded, (0, 0))
    
    def draw_path(self, path, style: StrokeStyle):
        """Stroke every subpath of ``path`` with ``style``."""
        for polyline in path.polylines():
            self._stroke_polyline(polyline, style)
    
    def alpha_at(self, x: int, y: int) -> int:
        """Alpha channel of the pixel at (x, y)."""
        return self.surface.get_at((int(x), int(y))).a
    
    def _stroke_polyline(self, polyline, style: StrokeStyle):
        if len(polyline) < 2:
            return
        
        coords = [(float(x), float(y)) for x, y in polyline]
        width = max(1, int(style.width))
        
        if width == 1:
            if style.antialias:
                pygame.draw.aalines(self.surface, style.color, False, coords)
            else:
                pygame.draw.lines(self.surface, style.color, False, coords, 1)
            return
        
        pygame.draw.lines(self.surface, style.color, False, coords, width)
        
        radius = width / 2
        if style.round_join:
            for point in coords[1:-1]:
                pygame.draw.circle(self.surface, style.color, point, radius)
        if style.round_cap:
            pygame.draw.circle(self.surface, style.color, coords[0], radius)
            pygame.draw.circle(self.surface, style.color, coords[-1], radius)
        if style.antialias:
            self._smooth_edges(polyline, radius, style.color)
    
    def _smooth_edges(self, polyline, half_width: float, color):
        """Antialias both outline edges of a wide polyline."""
        points = np.asarray(polyline, dtype=float)
        deltas = np.diff(points, axis=0)
        lengths = np.hypot(deltas[:, 0], deltas[:, 1])
        keep = lengths > 0
        if not keep.any():
            return
        
        normals = np.column_stack((-deltas[keep, 1], deltas[keep, 0])) / lengths[keep, np.newaxis]
        offsets = normals * half_width
        starts = points[:-1][keep]
        ends = points[1:][keep]
        
        for side in (1, -1):
            for start, end, offset in zip(starts, ends, offsets):
                pygame.draw.aaline(self.surface, color,
                                   tuple(start + side * offset), tuple(end + side * offset))
    
    def __repr__(self):
        width, height = self.size
        return f"Canvas({width}x{height})"
