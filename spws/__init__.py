"""Simulated smart plant watering system and a leveled logger."""

__version__ = "0.1.0"
__all__ = [
    "actuators",
    "buttons",
    "config",
    "logdemo",
    "logger",
    "sensors",
    "simulator",
    "watering",
]