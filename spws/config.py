"""Constants, states and data records shared by the watering system."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable

SENSOR_READ_INTERVAL_MS = 30
MAX_WATERING_TIME_MS = 60000
MANUAL_WATERING_TIME_MS = 10000
REPORT_INTERVAL_MS = 20
SYSTEM_LOOP_DELAY_MS = 1000

MOISTURE_THRESHOLD_MIN = 30
MOISTURE_THRESHOLD_MAX = 70


class SystemMode(IntEnum):
    """Operating mode of the controller."""

    AUTO = 0
    MANUAL = 1

    @property
    def label(self) -> str:
        return self.name


class PumpState(IntEnum):
    """Whether the pump runs."""

    OFF = 0
    ON = 1

    @property
    def label(self) -> str:
        return self.name


class LedState(Enum):
    """Indicator LED states, each with the label shown in reports."""

    NORMAL = "NORMAL"
    WATERING = "WATERING"
    LOW_MOISTURE_ALERT = "LOW_MOISTURE"
    ERROR = "ERROR"

    @property
    def label(self) -> str:
        return self.value


@dataclass
class SensorData:
    """One reading of the soil and air sensors."""

    soil_moisture: int = 0
    temperature: float = 0.0
    is_valid: bool = False


@dataclass
class SystemConfig:
    """Thresholds, timings and mode of the controller."""

    moisture_min: int = MOISTURE_THRESHOLD_MIN
    moisture_max: int = MOISTURE_THRESHOLD_MAX
    max_watering_time: int = MAX_WATERING_TIME_MS
    sensor_interval: int = SENSOR_READ_INTERVAL_MS
    mode: SystemMode = SystemMode.AUTO


class SystemClock:
    """Simulated system time: every query advances the tick counter by one."""

    def __init__(
        self, start: int = 0, sleep: Callable[[float], object] = time.sleep
    ) -> None:
        self._ticks = start
        self._sleep = sleep

    def now(self) -> int:
        """Return the current tick and advance the counter."""
        ticks = self._ticks
        self._ticks += 1
        return ticks

    def delay(self, ms: int) -> None:
        """Block for the given number of milliseconds."""
        self._sleep(ms / 1000)