"""
radarscope package
==================

Live polar display for a sweeping ultrasonic range sensor.
"""

__all__ = [
    "errors",
    "constants",
    "config",
    "framer",
    "geometry",
    "tracking",
    "compositor",
    "session",
    "serial_reader",
    "mqtt_client",
    "playback",
    "gui",
]

__version__ = "0.5.0"
