"""
Device management for touchscreen discovery and initialization.
"""

import evdev
from evdev import ecodes
import logging

logger = logging.getLogger(__name__)

class DeviceManager:
    """Manages touchscreen device discovery and coordinate ranges."""
    
    def __init__(self):
        self.device = None
        self.multitouch = False
        self.x_range = (0, 1919)  # Default
        self.y_range = (0, 1079)  # Default
        
    def find_device(self):
        """Find and configure the first touch-capable device."""
        devices = [evdev.InputDevice(path) for path in evdev.list_devices()]
        
        for device in devices:
            caps = device.capabilities()
            if ecodes.EV_ABS not in caps:
                continue
            
            abs_info = {code: info for code, info in caps.get(ecodes.EV_ABS, [])}
            
            if ecodes.ABS_MT_POSITION_X in abs_info and ecodes.ABS_MT_POSITION_Y in abs_info:
                x_info = abs_info[ecodes.ABS_MT_POSITION_X]
                y_info = abs_info[ecodes.ABS_MT_POSITION_Y]
                self.multitouch = True
            elif ecodes.ABS_X in abs_info and ecodes.ABS_Y in abs_info and \
                    ecodes.BTN_TOUCH in caps.get(ecodes.EV_KEY, []):
                x_info = abs_info[ecodes.ABS_X]
                y_info = abs_info[ecodes.ABS_Y]
                self.multitouch = False
            else:
                continue
            
            self.x_range = (x_info.min, x_info.max)
            self.y_range = (y_info.min, y_info.max)
            self.device = device
            logger.info(f"Found touchscreen: {device.name}")
            logger.info(f"Coordinate range: x={self.x_range} y={self.y_range} "
                        f"({'multitouch' if self.multitouch else 'single touch'})")
            return device
        
        logger.error("No touchscreen device found")
        return None
    
    def get_device_info(self):
        """Get device and coordinate range information."""
        return {
            'device': self.device,
            'multitouch': self.multitouch,
            'x_range': self.x_range,
            'y_range': self.y_range
        }
