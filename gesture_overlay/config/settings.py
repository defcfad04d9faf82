"""
Configuration settings for the gesture overlay.
"""

class GestureConfig:
    """Configuration constants for gesture capture and rendering."""
    
    # Live path smoothing (in surface units)
    TOUCH_TOLERANCE = 4
    
    # Samples per quadratic segment when flattening a path for drawing
    CURVE_STEPS = 8
    
    # Fade-out animation
    FADE_DELAY_MS = 100
    FADE_STEP = 0.03
    
    # Stroke style
    STROKE_WIDTH = 12
    DEFAULT_GESTURE_COLOR = (255, 255, 0, 255)
    
    # Colors cycled by the interactive app (RGBA)
    GESTURE_COLORS = [
        (255, 255, 0, 255),
        (0, 200, 255, 255),
        (255, 80, 80, 255),
        (120, 255, 120, 255)
    ]
    
    # Interactive app
    WINDOW_SIZE = (1280, 800)
    BACKGROUND_COLOR = (30, 30, 30)
    FRAME_RATE = 60
    DEBUG_LOG_FILE = 'gesture_debug.log'
