"""Main loop of the smart plant watering system simulation."""

from __future__ import annotations

import argparse
import itertools
import random
import sys
from typing import IO, Callable, Optional, Sequence

from spws.actuators import Actuators
from spws.buttons import Buttons
from spws.config import REPORT_INTERVAL_MS, SYSTEM_LOOP_DELAY_MS, SystemClock
from spws.sensors import Sensors
from spws.watering import WateringController


class Simulator:
    """Wires sensors, actuators, buttons and the controller into one loop."""

    def __init__(
        self,
        out: Optional[IO[str]] = None,
        rng: Optional[random.Random] = None,
        sleep: Optional[Callable[[float], object]] = None,
    ) -> None:
        rng = rng if rng is not None else random.Random()
        self.clock = SystemClock() if sleep is None else SystemClock(sleep=sleep)
        self.sensors = Sensors(self.clock, rng=rng, out=out)
        self.actuators = Actuators(out=out)
        self.controller = WateringController(
            self.clock, self.sensors, self.actuators, out=out
        )
        self.buttons = Buttons(
            self.clock, self.controller, self.actuators, rng=rng, out=out
        )
        self._last_report = 0
        print("SPWS Initialized - Default MODE_AUTO", file=out)

    def step(self) -> None:
        """Run one loop iteration, including the loop delay."""
        self.buttons.process()
        self.controller.process()
        self.sensors.read()

        now = self.clock.now()
        if now - self._last_report >= REPORT_INTERVAL_MS:
            self.controller.report_status()
            self._last_report = now

        self.clock.delay(SYSTEM_LOOP_DELAY_MS)

    def run(self, iterations: Optional[int] = None) -> None:
        """Run the given number of iterations, or forever when None."""
        counter = itertools.count() if iterations is None else range(iterations)
        for _ in counter:
            self.step()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Smart plant watering simulation.")
    parser.add_argument("--iterations", type=int, default=None,
                        help="number of loop iterations (default: run forever)")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    simulator = Simulator(rng=random.Random(args.seed))
    try:
        simulator.run(args.iterations)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())