"""
Pointer event model shared by every input source.
"""

from dataclasses import dataclass
from enum import Enum


class PointerAction(Enum):
    """Kind of pointer event."""
    DOWN = 'down'
    MOVE = 'move'
    UP = 'up'


@dataclass(frozen=True)
class PointerEvent:
    """A raw single-pointer event in surface coordinates."""
    action: PointerAction
    x: float
    y: float
    timestamp: int
    
    @classmethod
    def down(cls, x: float, y: float, timestamp: int) -> 'PointerEvent':
        return cls(PointerAction.DOWN, x, y, timestamp)
    
    @classmethod
    def move(cls, x: float, y: float, timestamp: int) -> 'PointerEvent':
        return cls(PointerAction.MOVE, x, y, timestamp)
    
    @classmethod
    def up(cls, x: float, y: float, timestamp: int) -> 'PointerEvent':
        return cls(PointerAction.UP, x, y, timestamp)
