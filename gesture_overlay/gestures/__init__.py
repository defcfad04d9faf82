"""
Gesture data model.

This module provides the point, stroke and gesture records produced by
the gesture pad and handed to downstream consumers.
"""

from .gesture import GesturePoint, GestureStroke, Gesture

__all__ = [
    'GesturePoint',
    'GestureStroke',
    'Gesture'
]
