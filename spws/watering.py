"""Automatic watering decisions and status reporting."""

from __future__ import annotations

from typing import IO, Optional, Protocol

from spws.actuators import Actuators
from spws.config import LedState, PumpState, SensorData, SystemClock, SystemConfig, SystemMode


class _SensorSource(Protocol):
    @property
    def data(self) -> SensorData: ...


class WateringController:
    """Runs the pump from soil moisture readings while in automatic mode."""

    def __init__(
        self,
        clock: SystemClock,
        sensors: _SensorSource,
        actuators: Actuators,
        config: Optional[SystemConfig] = None,
        out: Optional[IO[str]] = None,
    ) -> None:
        self._clock = clock
        self._sensors = sensors
        self._actuators = actuators
        self._out = out
        self.config = config if config is not None else SystemConfig()
        self.is_watering = False
        self._last_watering_time = 0
        self._watering_start_time = 0
        print("Watering logic initialized", file=self._out)

    @property
    def mode(self) -> SystemMode:
        """The current operating mode."""
        return self.config.mode

    def process(self) -> None:
        """Start or stop automatic watering based on the latest reading."""
        sensor = self._sensors.data
        now = self._clock.now()

        if not sensor.is_valid:
            self._actuators.led_state = LedState.ERROR
            self._actuators.switch_pump(PumpState.OFF)
            return

        if self.config.mode is not SystemMode.AUTO:
            return

        if self.is_watering:
            if (
                sensor.soil_moisture >= self.config.moisture_max
                or now - self._watering_start_time >= self.config.max_watering_time
            ):
                self._actuators.switch_pump(PumpState.OFF)
                self.is_watering = False
                self._actuators.led_state = LedState.NORMAL
            else:
                self._actuators.led_state = LedState.WATERING
            return

        too_dry = sensor.soil_moisture < self.config.moisture_min
        if too_dry and now - self._last_watering_time >= self.config.sensor_interval:
            self._actuators.switch_pump(PumpState.ON)
            self.is_watering = True
            self._watering_start_time = now
            self._last_watering_time = now
            self._actuators.led_state = LedState.WATERING
            self.report_status()
        elif too_dry:
            self._actuators.led_state = LedState.LOW_MOISTURE_ALERT
        else:
            self._actuators.led_state = LedState.NORMAL

    def report_status(self) -> str:
        """Print a status summary and return it."""
        sensor = self._sensors.data
        text = "\n".join(
            [
                "System Status:",
                f"Mode: {self.config.mode.label}",
                f"Soil Moisture: {sensor.soil_moisture}%",
                f"Temperature: {sensor.temperature:.1f}°C",
                f"Pump: {self._actuators.pump_state.label}",
                f"LED: {self._actuators.led_label()}",
            ]
        )
        print(text, file=self._out)
        return text

    def switch_mode(self, mode: SystemMode) -> None:
        """Change mode; entering manual mode stops any automatic watering."""
        self.config.mode = mode
        if mode is SystemMode.MANUAL:
            self._actuators.switch_pump(PumpState.OFF)
            self.is_watering = False
            self._actuators.led_state = LedState.NORMAL