# spws

A simulated smart plant watering system (SPWS), together with a small
leveled logger.

The simulator models a soil moisture sensor, a pump, a status LED and two
buttons. In automatic mode the pump runs when moisture falls below the
minimum threshold. It stops when moisture reaches the maximum threshold or
when the watering time limit runs out. Random simulated button presses switch
between automatic and manual mode and start timed manual watering.

## Installation

```
pip install .
```

## Commands

Run the watering simulation. Each loop iteration waits one second. Without
`--iterations` it loops until you interrupt it with Ctrl-C:

```
spws
spws --iterations 50 --seed 1
```

`--iterations N` stops after N loop iterations. `--seed S` seeds the random
number generator so that sensor readings and button presses repeat.

Run the logger demonstration. It writes a few messages to the console and
appends them to `log.txt` in the current directory:

```
spws-logdemo
```

Empty `log.txt`:

```
spws-logdemo clean
```

## Using the logger

```python
from spws.logger import Logger, LogLevel

with Logger(LogLevel.INFO, "app.log") as log:
    log.log(LogLevel.INFO, "System initialized.")
    log.log(LogLevel.WARNING, "Low disk space: %d%% left", 5)
    log.set_level(LogLevel.DEBUG)
    log.log(LogLevel.DEBUG, "Debugging enabled.")
```

The level names follow syslog severity, from most to least severe:
`EMERGENCY`, `ALERT`, `CRITICAL`, `ERROR`, `WARNING`, `NOTICE`, `INFO`,
`DEBUG`. A message is written only when it is at least as severe as the
logger's current level. Messages at `ERROR` or above go to standard error.
All other messages go to standard output. When a log file is open, every
written message is also appended to that file.

Each line has the form
`[YYYY-MM-DD HH:MM:SS] [LEVEL] [file.py:line] - message`, naming the file and
line that called `Logger.log`. `Logger.log` returns the line it wrote, or
`None` when the message was filtered out. If the log file cannot be opened,
the logger reports this on standard error and logs to the console only.

## Driving the simulation from code

```python
import random
from spws.simulator import Simulator

sim = Simulator(rng=random.Random(1), sleep=lambda seconds: None)
sim.run(100)   # run 100 loop iterations without waiting
```

`Simulator.step()` runs one iteration of the control loop. It handles the
buttons, runs the watering logic, reads the sensors, prints a status report
at each reporting interval, and then waits for the loop delay through the
`sleep` callable (`time.sleep` by default). `Simulator.run()` with no count
runs forever.

The parts are also usable on their own: `spws.sensors.Sensors`,
`spws.actuators.Actuators`, `spws.watering.WateringController` and
`spws.buttons.Buttons`, all sharing a `spws.config.SystemClock`. The clock is
a tick counter that advances by one every time it is read, and the intervals
in `spws.config` are measured in those ticks.

## What it does not do

Everything is simulated. The package does not read real sensors or drive a
real pump, LED or buttons, and it does not store readings or history: the
state lives in memory and the status goes to standard output.

## Testing

```
pip install .[test]
pytest
```