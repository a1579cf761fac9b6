"""Simulated soil-moisture and temperature sensors."""

from __future__ import annotations

import random
from dataclasses import replace
from typing import IO, Optional

from spws.config import SENSOR_READ_INTERVAL_MS, SensorData, SystemClock

_MOISTURE_STEP = 5
_MOISTURE_FLOOR = 10


class Sensors:
    """Produces a drying-soil reading once per sensor interval."""

    def __init__(
        self,
        clock: SystemClock,
        rng: Optional[random.Random] = None,
        out: Optional[IO[str]] = None,
    ) -> None:
        self._clock = clock
        self._rng = rng if rng is not None else random.Random()
        self._data = SensorData(soil_moisture=50, temperature=25.0, is_valid=True)
        self._last_read = 0
        print("Sensors initialized", file=out)

    @property
    def data(self) -> SensorData:
        """A copy of the latest reading."""
        return replace(self._data)

    def read(self) -> SensorData:
        """Take a new reading if the interval has passed; return the latest."""
        now = self._clock.now()
        if now - self._last_read >= SENSOR_READ_INTERVAL_MS:
            moisture = self._data.soil_moisture
            self._data.soil_moisture = (
                moisture - _MOISTURE_STEP if moisture > _MOISTURE_FLOOR else _MOISTURE_FLOOR
            )
            self._data.temperature = 25.0 + self._rng.randrange(50) / 10.0
            self._data.is_valid = True
            self._last_read = now
        return self.data