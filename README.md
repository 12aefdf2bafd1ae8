# cubetimer

A speedcubing timer that runs in the terminal, using curses. It shows
a random scramble and times an inspection period and the solve itself.
It keeps a history of every solve with the scramble it was done on. It
shows running averages over the last 5, 12, 25 and 50 solves.

## Starting

Once the package is installed, start the timer with:

    cubetimer

The command takes no options besides `--help`.

The screen has four panels:

- **Scramble**: a 19-move scramble for the next solve, for example
  `R2U^F...`.
  - No two consecutive moves turn the same face.
  - The faces are `U D F B L R`.
  - `^` marks a counter-clockwise turn and `2` a half turn.
- **Timer**: the current time, drawn in large three-row digits.
  - While idle it shows `00:00`, or the last solve time.
  - During inspection it shows the seconds left, such as `-12.3`.
  - When ready to start it shows `***`.
  - While solving, and once solved, it shows the time in seconds with
    three decimals.
- **Promedios**: the averages `Ao5`, `Ao12`, `Ao25` and `Ao50`.
  - Each is the mean of the most recent 5, 12, 25 or 50 solves.
  - Each shows `--` until there are enough solves.
- **Historial de tiempos**: the solves, newest first.
  - Each line is numbered and followed by the scramble of that solve.
  - At most 19 lines are shown at once.
  - When there are more than 19 solves, a `#` on the right-hand border
    marks the scroll position.

## Controls

| Key           | Action                                                             |
|---------------|--------------------------------------------------------------------|
| `Space`       | Start inspection, get ready, start the solve (on release), stop it |
| `Up` / `Down` | Scroll the solve history towards older / newer solves              |
| `q`           | Quit                                                               |

Terminals do not report key releases. Space counts as released once
its auto-repeat has stopped for 0.6 seconds.

## How a solve goes

1. Press **Space** while idle. A 20-second inspection countdown begins.
2. Press **Space** during inspection. The timer shows `***` and is ready.
3. Release **Space** and the solve timer starts.
   - If inspection runs out while Space is not held, the solve starts
     on its own.
4. Press **Space** to stop. The time is recorded together with its
   scramble.
5. Release **Space**. A new scramble is drawn and the timer is idle
   again, showing the last time.

## Using it from Python

The timer logic does not depend on the terminal.

```python
from cubetimer.app import App, Key

app = App()                      # App(clock=..., rng=...) for a custom clock or random source
app.on_key_press(Key.SPACE)      # idle -> inspection
app.on_key_press(Key.SPACE)      # inspection -> ready
app.on_key_release(Key.SPACE)    # ready -> solving
app.on_key_press(Key.SPACE)      # solving -> solved, time recorded
print(app.times[-1].duration, app.times[-1].scramble)
print(app.average(5))            # None until there are 5 solves
```

### The `App` class

- `App` holds the timer state as one of the classes in
  `cubetimer.state`: `Idle`, `Inspection`, `ReadyToStart`, `Solving` or
  `Solved`.
- It records the solves in `times`, as a list of `Solve(duration, scramble)`.
- It keeps the current `scramble`.
- Call `tick()` to let an expired inspection start the solve.
- `average(n)` returns the mean of the last `n` solves, or `None` if
  there are fewer than `n`. It raises `ValueError` for `n < 1`.

### Other functions

- `cubetimer.scramble.generate_scramble(rng)` makes a scramble. It takes
  any object with a `choice` method, such as a `random.Random` instance,
  or falls back to the `random` module.
- `cubetimer.ui` holds the text the screen shows: `timer_text`,
  `averages_lines`, `history_lines`, `format_average` and `big_text`.
  It also has `render_ui`, which draws everything on a curses window.

## What it does not do

Solves are kept in memory only. Nothing is saved when the timer quits.
There is no import or export of times.

## Running the tests

The tests use pytest, which the `test` extra installs:

    pip install -e .[test]
    pytest