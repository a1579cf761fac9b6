"""Simulated pump and indicator LED."""

from __future__ import annotations

from typing import IO, Optional

from spws.config import LedState, PumpState


class Actuators:
    """Holds the pump and LED states and announces pump switches."""

    def __init__(self, out: Optional[IO[str]] = None) -> None:
        self._out = out
        self.pump_state = PumpState.OFF
        self.led_state = LedState.NORMAL
        print("Actuators initialized", file=self._out)

    def switch_pump(self, state: PumpState) -> None:
        """Set the pump state and print it."""
        self.pump_state = state
        print(f"Pump {state.label}", file=self._out)

    def led_label(self) -> str:
        """Label of the current LED state."""
        return self.led_state.label