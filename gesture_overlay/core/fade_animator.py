"""
Timed fade-out of the ink buffer.

The animation is a chain of scheduled steps on the run loop rather than a
thread: each step lowers the opacity and schedules the next one until the
opacity reaches zero.
"""

import logging
from typing import Callable, Optional

from ..config.settings import GestureConfig

logger = logging.getLogger(__name__)


class FadeAnimator:
    """Decays a visibility factor from 1 to 0 in fixed timed steps."""
    
    def __init__(self, scheduler, on_step: Optional[Callable[[], None]] = None,
                 on_complete: Optional[Callable[[], None]] = None,
                 delay_ms: int = GestureConfig.FADE_DELAY_MS,
                 decrement: float = GestureConfig.FADE_STEP):
        self.scheduler = scheduler
        self.on_step = on_step
        self.on_complete = on_complete
        self.delay_ms = delay_ms
        self.decrement = decrement
        
        self.active = False
        self.alpha = 1.0
        self.steps_taken = 0
    
    def start(self):
        """Begin (or restart) fading from full opacity."""
        self.scheduler.cancel(self.step)
        self.alpha = 1.0
        self.active = True
        self.steps_taken = 0
        self.scheduler.schedule(self.step, self.delay_ms)
        logger.debug(f"Fade started ({self.delay_ms}ms per step, -{self.decrement} alpha)")
    
    def cancel(self):
        """Stop fading now. Safe to call when no fade is running."""
        self.scheduler.cancel(self.step)
        if self.active:
            logger.debug(f"Fade cancelled after {self.steps_taken} steps")
        self.active = False
        self.alpha = 1.0
    
    def step(self):
        """Advance the fade by one step."""
        if not self.active:
            return
        
        self.alpha -= self.decrement
        self.steps_taken += 1
        
        if self.alpha <= 0:
            self.active = False
            self.alpha = 1.0
            logger.debug(f"Fade completed after {self.steps_taken} steps")
            if self.on_complete:
                self.on_complete()
        else:
            self.scheduler.schedule(self.step, self.delay_ms)
        
        if self.on_step:
            self.on_step()
    
    @property
    def opacity(self) -> float:
        """Opacity to apply to the ink buffer right now."""
        return self.alpha if self.active else 1.0
