# rangepanel

The state and layout logic for a small handheld panel used on a
shooting range. Each part keeps its state in plain Python objects and
works out what the screen should show: label texts, colours as RGB
integers, and rectangles and polygons in pixel coordinates.

## What is in it

- `rangepanel.shot_counter.ShotCounter(default_count)` holds the shot
  allowance (`set_count`, 0 to 99) and the shots left (`remaining`).
  `increase()` and `decrease()` change the allowance and refill;
  `reset_to_set_count()`, `reset_all_to_default()`, `decrement_shot()`
  and `external_decrement(page_active)` cover the rest. `display_text`
  is the text the counter shows.
- `rangepanel.stage_timer.StageTimer(set_seconds=300)` is a stage
  countdown of up to 59:59. It has `start()`, `pause()`, `toggle()`,
  `reset()` and one-minute `increase()` / `decrease()` (ignored while
  running). Each `tick()` takes one second off a running timer; a tick
  with no time left stops it. `button_label` follows
  Start/Pause/Resume and `controls_enabled` is false while running.
  `format_mmss(seconds)` renders `MM:SS`.
- `rangepanel.competition.CompetitionPage(shots, timer)` joins a
  counter and a timer into one live page. `refresh()` sets
  `time_text`, `shots_text` and `button_label`, and turns `background`
  red (`0xFF0000`) in the last 30 seconds. `press_start()`,
  `press_reset()`, `handle_recoil()` (counts a shot only while the
  timer runs), `screen_loaded()`, `screen_unloaded()` and
  `update_level(roll_deg)` drive it.
- `rangepanel.bubble_level` gives the tube, centre mark and bubble
  rectangles for a roll angle (`bubble_layout`, returning a
  `BubbleLayout`), the bubble colour (`bubble_color`: green up to 3°,
  yellow up to 8°, red beyond) and the readout (`format_roll`). The
  bubble stops moving at ±30°.
- `rangepanel.horizon` gives the four corners of the filled horizon
  region for a pitch and roll (`horizon_polygon`), the width of the
  fixed reference bar (`reticle_bar_width`) and the `P: 12` style
  readouts (`format_attitude`). `ArtificialHorizon(width, height)`
  keeps the polygon and both readouts current through `update()`.
- `rangepanel.battery` maps a single-cell LiPo voltage to a charge
  percentage (`lipo_percentage`) and an icon glyph (`battery_symbol`).
  `BatteryIndicator.update(voltage)` refreshes its `text`, `symbol`
  and `percentage`.
- `rangepanel.navigation.Navigator` switches between the `Screen`s,
  building each one through an optional builder the first time it is
  shown. `press(button)` follows a route from `BUTTON_ROUTES`, such as
  `"options.competition"` or `"stage_timer.prev"`; `change()` goes to
  any screen and `destroy()` drops a built screen that is not on
  display. Each change is recorded as a `Transition` in `history`.
- `rangepanel.widgets` has a small widget tree (`Widget`) with flags
  and states changed through `ModifyMode`, the "Stage Timer" button
  component (`create_stage_timer_button`, a `Component` whose parts
  are looked up with `child(index)`), and the helpers `clamp_frame`,
  `format_value_text` and `checked_text`.

## Example

```python
from rangepanel.competition import CompetitionPage
from rangepanel.shot_counter import ShotCounter
from rangepanel.stage_timer import StageTimer

timer = StageTimer()                 # 05:00
shots = ShotCounter(default_count=10)
page = CompetitionPage(shots, timer)

page.press_start()                   # the timer starts running
timer.tick()                         # one second passes
page.handle_recoil()                 # a shot fired during the stage
print(page.time_text)                # 04:59
print(page.shots_text)               # 9
print(page.button_label)             # Pause
```

## What it does not do

The package draws nothing and reads no hardware. It has no display
toolkit, no command to run, and no clock of its own: the caller ticks
the stage timer once a second and calls the refresh methods. It does
not read the motion sensor or the battery voltage either; roll, pitch,
recoil events and voltages must be passed in by the caller.

## Running the tests

```
pip install -e .[test]
pytest
```