"""
Utilities package for gesture geometry, smoothing and logging.
"""

from .gesture_utils import GeometryUtils, PathUtils
from .smooth_path import SmoothPath, PathSmoother, build_smoothed_path

__all__ = [
    'GeometryUtils',
    'PathUtils',
    'SmoothPath',
    'PathSmoother',
    'build_smoothed_path'
]
