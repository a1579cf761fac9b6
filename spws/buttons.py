"""Simulated push buttons: mode toggle and manual watering."""

from __future__ import annotations

import random
from typing import IO, Optional

from spws.actuators import Actuators
from spws.config import MANUAL_WATERING_TIME_MS, LedState, PumpState, SystemClock, SystemMode
from spws.watering import WateringController

CHECK_INTERVAL_MS = 1000


class Buttons:
    """Presses buttons at random once per check interval and acts on them."""

    def __init__(
        self,
        clock: SystemClock,
        controller: WateringController,
        actuators: Actuators,
        rng: Optional[random.Random] = None,
        out: Optional[IO[str]] = None,
    ) -> None:
        self._clock = clock
        self._controller = controller
        self._actuators = actuators
        self._rng = rng if rng is not None else random.Random()
        self._out = out
        self.mode_button_pressed = False
        self.manual_button_pressed = False
        self.manual_watering_active = False
        self._manual_watering_start = 0
        self._last_check = 0
        print("Buttons initialized", file=out)
        print(
            "Simulating random button presses (1-100): 1-50 (toggle mode, 50%), "
            "51-75 (manual watering, 25%), 76-100 (no action, 25%)",
            file=out,
        )

    def _roll(self) -> None:
        value = self._rng.randint(1, 100)
        print(f"Debug: Random value = {value}", file=self._out)
        if value <= 50:
            self.mode_button_pressed = True
            print("Debug: Randomly pressed button 1 (toggle mode)", file=self._out)
        elif value <= 75:
            self.manual_button_pressed = True
            print("Debug: Randomly pressed button 2 (manual watering)", file=self._out)

    def process(self) -> None:
        """Simulate presses, then handle pending presses and manual timeouts."""
        now = self._clock.now()
        if now - self._last_check >= CHECK_INTERVAL_MS:
            self._roll()
            self._last_check = now

        if self.mode_button_pressed:
            new_mode = (
                SystemMode.MANUAL
                if self._controller.mode is SystemMode.AUTO
                else SystemMode.AUTO
            )
            self._controller.switch_mode(new_mode)
            print(f"Switched to {new_mode.label} mode", file=self._out)
            self.mode_button_pressed = False

        if (
            self.manual_button_pressed
            and self._controller.mode is SystemMode.MANUAL
            and not self.manual_watering_active
        ):
            self.trigger_manual_watering()
            self.manual_button_pressed = False

        if (
            self.manual_watering_active
            and now - self._manual_watering_start >= MANUAL_WATERING_TIME_MS
        ):
            self._actuators.switch_pump(PumpState.OFF)
            self.manual_watering_active = False
            self._actuators.led_state = LedState.NORMAL

    def trigger_manual_watering(self) -> bool:
        """Start manual watering if in manual mode; return whether it started."""
        if self._controller.mode is not SystemMode.MANUAL:
            return False
        self._actuators.switch_pump(PumpState.ON)
        self._manual_watering_start = self._clock.now()
        self.manual_watering_active = True
        self._actuators.led_state = LedState.WATERING
        print("Manual watering started", file=self._out)
        self._controller.report_status()
        return True